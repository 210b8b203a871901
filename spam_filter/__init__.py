"""
Spam filtering for labeled email files.

This package contains the quote-aware parser for the email CSV, the
scikit-learn backed classifier, metric helpers and the train/evaluate/predict
driver used by main.py.
"""

from .config import PipelineConfig
from .constants import EXAMPLE_TEXTS, LABEL_COLUMN, RANDOM_STATE, TEST_SIZE, TEXT_COLUMN
from .data_prep import (
    Record,
    load_records,
    parse_label,
    parse_line,
    parse_records,
    records_to_frame,
    split_fields,
)
from .errors import FormatError, ModelError, SpamFilterError
from .metrics import compute_classification_metrics, summarize_coefficients
from .model import ClassifierBackend, SklearnBackend
from .pipeline import PipelineResult, run_pipeline

__all__ = [
    "EXAMPLE_TEXTS",
    "LABEL_COLUMN",
    "RANDOM_STATE",
    "TEST_SIZE",
    "TEXT_COLUMN",
    "PipelineConfig",
    "Record",
    "load_records",
    "parse_label",
    "parse_line",
    "parse_records",
    "records_to_frame",
    "split_fields",
    "FormatError",
    "ModelError",
    "SpamFilterError",
    "compute_classification_metrics",
    "summarize_coefficients",
    "ClassifierBackend",
    "SklearnBackend",
    "PipelineResult",
    "run_pipeline",
]
