from __future__ import annotations

"""
Error kinds raised by the parser and the classification driver, plus the
process exit code assigned to each of them.
"""

EXIT_OK = 0
EXIT_FORMAT_ERROR = 65  # sysexits EX_DATAERR
EXIT_MODEL_ERROR = 70  # sysexits EX_SOFTWARE
EXIT_IO_ERROR = 74  # sysexits EX_IOERR


class SpamFilterError(Exception):
    """Base class for errors raised by this package."""


class FormatError(SpamFilterError, ValueError):
    """A data line is malformed (wrong field count, bad quotes or bad label)."""

    def __init__(self, message: str, line_number: int, content: str):
        super().__init__(message)
        self.line_number = line_number
        self.content = content


class ModelError(SpamFilterError, RuntimeError):
    """The machine-learning backend failed during one of the pipeline steps."""

    def __init__(self, step: str, message: str):
        super().__init__(f"Model step '{step}' failed: {message}")
        self.step = step


def exit_code_for(exc: BaseException) -> int | None:
    """Exit code for a known error kind, None for anything else."""
    if isinstance(exc, FormatError):
        return EXIT_FORMAT_ERROR
    if isinstance(exc, ModelError):
        return EXIT_MODEL_ERROR
    if isinstance(exc, OSError):
        return EXIT_IO_ERROR
    return None
