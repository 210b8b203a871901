from __future__ import annotations

"""
Evaluation plots for the held-out partition: confusion matrix and ROC curve.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from sklearn.metrics import ConfusionMatrixDisplay, RocCurveDisplay, confusion_matrix

logger = logging.getLogger(__name__)


def plot_confusion_matrix(y_test, y_pred, filename_cm):
    cm = confusion_matrix(y_test, y_pred, labels=[0, 1])
    disp = ConfusionMatrixDisplay(confusion_matrix=cm, display_labels=["not spam", "spam"])
    fig, ax = plt.subplots(figsize=(6, 5))
    disp.plot(ax=ax, cmap="Blues", values_format="d")
    ax.set_title("Confusion Matrix: spam")
    fig.tight_layout()
    fig.savefig(filename_cm)
    plt.close(fig)


def plot_roc(y_test, y_probs, filename_roc):
    fig, ax = plt.subplots(figsize=(8, 6))
    RocCurveDisplay.from_predictions(y_test, y_probs, ax=ax, name="spam classifier")
    ax.plot([0, 1], [0, 1], color="grey", lw=1, linestyle="--", label="chance")
    ax.set(xlim=(0.0, 1.0), ylim=(0.0, 1.05), title="ROC Curve: spam")
    ax.legend(loc="lower right")
    ax.grid(True)
    fig.tight_layout()
    fig.savefig(filename_roc)
    plt.close(fig)


def save_evaluation_plots(y_test, y_probs, y_pred, out_dir: Path) -> list[Path]:
    """
    Write the confusion matrix and, when both classes are present in the test
    labels, the ROC curve into out_dir. Returns the written paths.
    """
    y_test = np.asarray(y_test, dtype=int)
    y_pred = np.asarray(y_pred, dtype=int)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    cm_path = out_dir / "confusion_matrix.png"
    plot_confusion_matrix(y_test, y_pred, cm_path)
    written = [cm_path]

    if len(np.unique(y_test)) < 2:
        logger.warning("Skipping ROC curve: test partition holds a single class")
        return written

    roc_path = out_dir / "roc_curve.png"
    plot_roc(y_test, y_probs, roc_path)
    written.append(roc_path)
    return written
