"""Shared fixtures: temporary email CSV files and logging isolation."""

import logging
import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

SPAM_TEXTS = [
    "Buy now and get a free gift card",
    '"Free offer, buy one get one free today"',
    '"Win a free cruise, click now"',
    "Cheap pills buy now limited offer",
    '"Congratulations, you won a free prize"',
    "Get rich quick with this free offer",
    "Limited time offer buy one get one",
    "Claim your free reward now",
    '"Exclusive deal: buy two, get one free"',
    "Free entry to win cash now",
    "Act now to get your free bonus",
    "Buy cheap watches free shipping",
    "You are selected for a free vacation offer",
    "Click here to claim free money",
    "Hot deal buy one get one free now",
]

HAM_TEXTS = [
    "Meeting scheduled for tomorrow at 10 AM",
    '"Hi team, the report is attached"',
    "Can we move the meeting to Friday",
    "Lunch tomorrow with the project team",
    '"Reminder: quarterly review, room 4B"',
    "Please review the attached agenda before the meeting",
    "Notes from yesterday's planning meeting",
    "The project schedule has been updated",
    "Are you available for a call tomorrow afternoon",
    '"Thanks, see you at the meeting"',
    "Minutes of the budget meeting are attached",
    "Let's sync on the design review tomorrow",
    "Team meeting moved to 3 PM",
    "Please confirm attendance for the workshop",
    "Schedule for next week's training session",
]


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_csv(tmp_path):
    """Return a helper that writes lines to a CSV file under tmp_path."""

    def _write(lines, name="emails.csv", newline="\n"):
        path = tmp_path / name
        path.write_bytes((newline.join(lines) + newline).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def email_lines():
    lines = ["Text,IsSpam"]
    for spam, ham in zip(SPAM_TEXTS, HAM_TEXTS):
        lines.append(f"{spam},1")
        lines.append(f"{ham},0")
    return lines


@pytest.fixture
def email_csv(write_csv, email_lines):
    return write_csv(email_lines)
