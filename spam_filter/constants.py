from __future__ import annotations

"""
Default settings for the spam classification run.
"""

from pathlib import Path

DEFAULT_CSV_PATH = Path("emails.csv")

# Fixed seed and held-out fraction keep runs reproducible.
RANDOM_STATE = 0
TEST_SIZE = 0.2

TEXT_COLUMN = "text"
LABEL_COLUMN = "is_spam"

DECISION_THRESHOLD = 0.5

EXAMPLE_TEXTS = (
    "Buy one, get one free!",
    "Meeting scheduled for tomorrow at 2 PM",
)
