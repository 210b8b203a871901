from __future__ import annotations

"""
Loading and validation of the labeled email file.

Each data line holds exactly two comma-separated fields: the email text
(optionally wrapped in double quotes, in which case it may contain commas)
and the spam label (a boolean literal or an integer). The first line is a
header and is skipped without validation.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from .constants import LABEL_COLUMN, TEXT_COLUMN
from .errors import FormatError

logger = logging.getLogger(__name__)

# A comma splits fields only when an even number of quotes follows it.
_DELIMITER = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')

_WHITESPACE = " \t\n\v\f\r"
_INTEGER = re.compile(rf"^[{_WHITESPACE}]*([+-]?[0-9]+)[{_WHITESPACE}]*$")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Record:
    """One validated email line."""

    text: str
    is_spam: bool


def split_fields(line: str) -> list[str]:
    """Split a line on commas that are outside double-quoted spans."""
    return _DELIMITER.split(line)


def strip_quotes(field: str) -> str:
    """Drop one leading and one trailing double quote, nothing else."""
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field


def _parse_bool(value: str) -> bool | None:
    lowered = value.strip(_WHITESPACE + "\0").lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _parse_int(value: str) -> int | None:
    match = _INTEGER.match(value)
    if match is None:
        return None
    number = int(match.group(1))
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def parse_label(value: str, line_number: int) -> bool:
    """
    Interpret the label field. Boolean literals win over integers; any
    nonzero integer means spam.
    """
    flag = _parse_bool(value)
    if flag is not None:
        return flag

    number = _parse_int(value)
    if number is not None:
        return number != 0

    raise FormatError(
        f"Invalid boolean value in line {line_number}: {value}", line_number, value
    )


def parse_line(line: str, line_number: int) -> Record:
    """Validate a single data line and turn it into a Record."""
    if line.count('"') % 2:
        raise FormatError(f"Unmatched quote in line {line_number}: {line}", line_number, line)

    parts = split_fields(line)
    if len(parts) != 2:
        raise FormatError(f"Invalid format in line {line_number}: {line}", line_number, line)

    text, label = parts
    return Record(text=strip_quotes(text), is_spam=parse_label(label, line_number))


def parse_records(lines: Sequence[str]) -> list[Record]:
    """
    Parse every line after the header. The first malformed line aborts the
    whole parse with a FormatError; no partial dataset is returned.
    """
    records = []
    # Line 1 is the header, so data lines are numbered from 2.
    for line_number, line in enumerate(lines[1:], start=2):
        records.append(parse_line(line, line_number))
    return records


def read_lines(path: str | Path) -> list[str]:
    """Read the whole file at once and split it into lines."""
    # Undecodable bytes become U+FFFD instead of failing the read.
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        content = f.read()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def load_records(path: str | Path) -> list[Record]:
    """Read and validate the labeled email file."""
    logger.info("Loading %s", path)
    lines = read_lines(path)
    records = parse_records(lines)
    spam_count = sum(record.is_spam for record in records)
    logger.info("  %d records loaded (%d spam)", len(records), spam_count)
    return records


def records_to_frame(
    records: Iterable[Record],
    text_column: str = TEXT_COLUMN,
    label_column: str = LABEL_COLUMN,
) -> pd.DataFrame:
    """One row per record, in dataset order."""
    records = list(records)
    return pd.DataFrame(
        {
            text_column: pd.Series([r.text for r in records], dtype=object),
            label_column: pd.Series([r.is_spam for r in records], dtype=bool),
        }
    )
