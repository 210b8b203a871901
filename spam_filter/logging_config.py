from __future__ import annotations

"""
Logging setup for the spam_filter package. main() calls setup_logging() once
at startup; every module then logs through logging.getLogger(__name__).

The report (sample counts, metrics, example predictions) is printed to
stdout. Log records, including errors and their tracebacks, go to stderr in
the format

  2026-02-20 14:32:01 | INFO     | data_prep | Loading emails.csv

and, when a log file is given, also to that file at DEBUG level.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_path: str | Path | None = None, verbose: bool = False) -> None:
    """
    Configure the root logger to write to stderr and, optionally, *log_path*.

    Calling it again (e.g. in tests) replaces the existing handlers.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any handlers added by a previous call or by basicConfig
    root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
