from __future__ import annotations

"""
Run configuration for the spam classifier. Every knob of a run lives here
with its default, so the driver can be run against any file, split or
example list.
"""

from dataclasses import dataclass
from pathlib import Path

from .constants import (
    DECISION_THRESHOLD,
    DEFAULT_CSV_PATH,
    EXAMPLE_TEXTS,
    LABEL_COLUMN,
    RANDOM_STATE,
    TEST_SIZE,
    TEXT_COLUMN,
)


@dataclass
class PipelineConfig:
    """Settings for one train / evaluate / predict run."""
    csv_path: Path = DEFAULT_CSV_PATH
    random_state: int = RANDOM_STATE
    test_size: float = TEST_SIZE
    text_column: str = TEXT_COLUMN
    label_column: str = LABEL_COLUMN
    examples: tuple[str, ...] = EXAMPLE_TEXTS
    threshold: float = DECISION_THRESHOLD
    C: float = 1.0
    max_iter: int = 1000
    stratify: bool = False
    top_terms: int = 0
    plots_dir: Path | None = None

    def __post_init__(self):
        self.csv_path = Path(self.csv_path)
        if self.plots_dir is not None:
            self.plots_dir = Path(self.plots_dir)
        self.examples = tuple(self.examples)
        if self.text_column == self.label_column:
            raise ValueError(
                f"text_column and label_column must differ, both are '{self.text_column}'"
            )
        if not 0.0 < self.test_size < 1.0:
            raise ValueError(f"test_size must be between 0 and 1, got {self.test_size}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {self.threshold}")
        if self.C <= 0:
            raise ValueError(f"C must be positive, got {self.C}")
        if self.max_iter <= 0:
            raise ValueError(f"max_iter must be positive, got {self.max_iter}")
        if self.top_terms < 0:
            raise ValueError(f"top_terms must not be negative, got {self.top_terms}")
