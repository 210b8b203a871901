from __future__ import annotations

"""
Train / evaluate / predict driver: split the parsed emails, fit the
classifier, report held-out metrics and score the example texts.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field

from .config import PipelineConfig
from .data_prep import load_records, records_to_frame
from .errors import ModelError
from .metrics import summarize_coefficients
from .model import PREDICTED_COLUMN, PROBABILITY_COLUMN, ClassifierBackend, SklearnBackend

logger = logging.getLogger(__name__)

METRIC_LABELS = (
    ("accuracy", "Accuracy"),
    ("f1", "F1 Score"),
    ("positive_precision", "Positive Precision"),
    ("negative_precision", "Negative Precision"),
    ("positive_recall", "Positive Recall"),
    ("negative_recall", "Negative Recall"),
)


@dataclass(frozen=True)
class ExamplePrediction:
    text: str
    is_spam: bool
    probability: float


@dataclass
class PipelineResult:
    train_count: int
    test_count: int
    metrics: dict
    predictions: list[ExamplePrediction] = field(default_factory=list)


@contextmanager
def model_step(step: str):
    """Re-raise anything the backend throws as a ModelError for `step`."""
    try:
        yield
    except ModelError:
        raise
    except Exception as exc:
        raise ModelError(step, str(exc)) from exc


def build_backend(config: PipelineConfig) -> ClassifierBackend:
    return SklearnBackend(
        text_column=config.text_column,
        label_column=config.label_column,
        C=config.C,
        max_iter=config.max_iter,
        threshold=config.threshold,
        random_state=config.random_state,
        stratify=config.stratify,
    )


def print_metrics(metrics: dict):
    """Print the six headline metrics as percentages."""
    for key, label in METRIC_LABELS:
        print(f"{label}: {metrics[key]:.2%}")


def print_prediction(prediction: ExamplePrediction):
    verdict = "spam" if prediction.is_spam else "not spam"
    print(f"Email: {prediction.text}")
    print(f"Predicted as {verdict} with probability {prediction.probability:.2%}")
    print()


def print_top_terms(weights, top_k: int):
    top = summarize_coefficients(weights.to_numpy(), list(weights.index), top_k=top_k)
    print("\nTop spam features:")
    print(top["positive"])
    print("\nTop not-spam features:")
    print(top["negative"])
    print()


def run_pipeline(
    config: PipelineConfig, backend: ClassifierBackend | None = None
) -> PipelineResult:
    """
    Run split -> train -> transform(test) -> evaluate -> predict examples,
    printing the report to stdout as it goes.
    """
    backend = backend or build_backend(config)

    records = load_records(config.csv_path)
    frame = records_to_frame(records, config.text_column, config.label_column)

    with model_step("split"):
        train, test = backend.split(frame, config.test_size, config.random_state)

    print(f"Number of training samples: {len(train)}")
    print(f"Number of testing samples: {len(test)}")

    print("Training the model...")
    with model_step("fit"):
        model = backend.fit(train)

    with model_step("transform"):
        predictions = backend.transform(model, test)

    with model_step("evaluate"):
        metrics = backend.evaluate(predictions)

    logger.debug("Confusion matrix [[TN, FP], [FN, TP]]: %s", metrics.get("confusion_matrix"))
    print_metrics(metrics)

    if config.top_terms:
        with model_step("feature_weights"):
            weights = backend.feature_weights(model)
        if weights is None:
            logger.warning("Backend %s does not expose feature weights", type(backend).__name__)
        else:
            print_top_terms(weights, config.top_terms)

    if config.plots_dir is not None:
        # matplotlib is only loaded when plots are requested.
        from . import plots

        try:
            written = plots.save_evaluation_plots(
                predictions[config.label_column],
                predictions[PROBABILITY_COLUMN],
                predictions[PREDICTED_COLUMN],
                config.plots_dir,
            )
        except Exception:
            logger.exception("Could not write evaluation plots to %s", config.plots_dir)
        else:
            logger.info("Plots written: %s", ", ".join(str(p) for p in written))

    result = PipelineResult(train_count=len(train), test_count=len(test), metrics=metrics)
    for text in config.examples:
        with model_step("predict"):
            is_spam, probability = backend.predict_one(model, text)
        prediction = ExamplePrediction(text=text, is_spam=bool(is_spam), probability=float(probability))
        print_prediction(prediction)
        result.predictions.append(prediction)

    return result
