from __future__ import annotations

"""
Boundary to the machine-learning library. The driver only talks to a
ClassifierBackend, so the driver can be exercised with a stand-in backend;
SklearnBackend is the scikit-learn implementation.
"""

from abc import ABC, abstractmethod

import numpy as np
import pandas as pd
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline, make_pipeline, make_union

from .constants import DECISION_THRESHOLD, LABEL_COLUMN, RANDOM_STATE, TEXT_COLUMN
from .metrics import compute_classification_metrics

PREDICTED_COLUMN = "predicted_label"
PROBABILITY_COLUMN = "probability"
SCORE_COLUMN = "score"


class ClassifierBackend(ABC):
    """Capabilities the pipeline driver needs from an ML library."""

    @abstractmethod
    def split(
        self, frame: pd.DataFrame, test_size: float, random_state: int
    ) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Partition the dataset into (train, test)."""

    @abstractmethod
    def fit(self, train: pd.DataFrame):
        """Fit featurization and classifier on the training partition."""

    @abstractmethod
    def transform(self, model, data: pd.DataFrame) -> pd.DataFrame:
        """Score `data`; adds predicted label, probability and raw score columns."""

    @abstractmethod
    def evaluate(self, predictions: pd.DataFrame) -> dict:
        """Binary metrics for the output of transform()."""

    @abstractmethod
    def predict_one(self, model, text: str) -> tuple[bool, float]:
        """Predicted label and spam probability for a single text."""

    def feature_weights(self, model) -> pd.Series | None:
        """Per-feature weights of a fitted model, if the backend exposes them."""
        return None


class SklearnBackend(ClassifierBackend):
    """
    TF-IDF word and character n-grams followed by logistic regression.
    """

    def __init__(
        self,
        text_column: str = TEXT_COLUMN,
        label_column: str = LABEL_COLUMN,
        C: float = 1.0,
        max_iter: int = 1000,
        threshold: float = DECISION_THRESHOLD,
        random_state: int | None = RANDOM_STATE,
        stratify: bool = False,
    ):
        self.text_column = text_column
        self.label_column = label_column
        self.C = C
        self.max_iter = max_iter
        self.threshold = threshold
        self.random_state = random_state
        self.stratify = stratify

    def build_pipeline(self) -> Pipeline:
        features = make_union(
            TfidfVectorizer(lowercase=True, ngram_range=(1, 2)),
            TfidfVectorizer(lowercase=True, analyzer="char_wb", ngram_range=(3, 3)),
        )
        classifier = LogisticRegression(
            C=self.C, max_iter=self.max_iter, random_state=self.random_state
        )
        return make_pipeline(features, classifier)

    def split(self, frame, test_size, random_state):
        stratify_target = frame[self.label_column] if self.stratify else None
        train, test = train_test_split(
            frame, test_size=test_size, random_state=random_state, stratify=stratify_target
        )
        return train, test

    def fit(self, train):
        model = self.build_pipeline()
        model.fit(train[self.text_column], train[self.label_column].astype(int))
        return model

    def transform(self, model, data):
        texts = data[self.text_column]
        probs = model.predict_proba(texts)[:, 1]
        scored = data.copy()
        scored[SCORE_COLUMN] = model.decision_function(texts)
        scored[PROBABILITY_COLUMN] = probs
        scored[PREDICTED_COLUMN] = probs >= self.threshold
        return scored

    def evaluate(self, predictions):
        return compute_classification_metrics(
            predictions[self.label_column].astype(int),
            predictions[PROBABILITY_COLUMN].to_numpy(),
            threshold=self.threshold,
        )

    def predict_one(self, model, text):
        prob = float(model.predict_proba([text])[0, 1])
        return prob >= self.threshold, prob

    def feature_weights(self, model):
        logreg: LogisticRegression = model.named_steps["logisticregression"]
        names = model.named_steps["featureunion"].get_feature_names_out()
        return pd.Series(np.asarray(logreg.coef_[0]), index=names)
