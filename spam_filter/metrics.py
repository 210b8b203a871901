from __future__ import annotations

"""
Metric helpers for the spam classifier (binary summaries and coef dumps).
"""

import numpy as np
import pandas as pd
from sklearn import metrics


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series, probs: np.ndarray, threshold: float = 0.5
):
    """Compute binary metrics for both classes given probabilities and a threshold."""
    y_true = np.asarray(y_true, dtype=int)
    probs = np.asarray(probs, dtype=float)
    preds = (probs >= threshold).astype(int)

    # Index 0 is the "not spam" class, index 1 the "spam" class.
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, preds, labels=[0, 1], average=None, zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(y_true, probs)
    except ValueError:
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(y_true, preds),
        "f1": f1[1],
        "positive_precision": precision[1],
        "negative_precision": precision[0],
        "positive_recall": recall[1],
        "negative_recall": recall[0],
        "roc_auc": roc_auc,
        "log_loss": metrics.log_loss(y_true, probs, labels=[0, 1]),
        "confusion_matrix": metrics.confusion_matrix(y_true, preds, labels=[0, 1]),
    }


def summarize_coefficients(
    coef: np.ndarray, feature_names: list[str], top_k: int = 8
) -> dict[str, pd.Series]:
    """Strongest spam-leaning (positive) and not-spam-leaning (negative) features."""
    weights = pd.Series(coef, index=feature_names)
    return {"positive": weights.nlargest(top_k), "negative": weights.nsmallest(top_k)}
