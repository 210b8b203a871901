from __future__ import annotations

"""
CLI entrypoint for the spam classifier: parse the labeled email CSV, train on
80% of it, report held-out metrics and classify the example emails.
"""

import argparse
import logging
import sys
from pathlib import Path

from spam_filter import PipelineConfig, run_pipeline
from spam_filter.constants import (
    DECISION_THRESHOLD,
    DEFAULT_CSV_PATH,
    EXAMPLE_TEXTS,
    LABEL_COLUMN,
    RANDOM_STATE,
    TEST_SIZE,
    TEXT_COLUMN,
)
from spam_filter.errors import EXIT_OK, exit_code_for
from spam_filter.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_arg_parser():
    """CLI parser with knobs for the input file, split, model and reporting."""
    parser = argparse.ArgumentParser(
        description="Train a spam classifier on a labeled email CSV and classify example emails."
    )
    parser.add_argument("--csv-path", type=Path, default=DEFAULT_CSV_PATH)
    parser.add_argument("--test-size", type=float, default=TEST_SIZE)
    parser.add_argument(
        "--random-state",
        type=int,
        default=RANDOM_STATE,
        help="Random seed for the train/test split and the classifier.",
    )
    parser.add_argument("--text-column", default=TEXT_COLUMN)
    parser.add_argument("--label-column", default=LABEL_COLUMN)
    parser.add_argument(
        "--example",
        dest="examples",
        action="append",
        default=None,
        help="Email text to classify after training (repeatable; replaces the built-in examples).",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DECISION_THRESHOLD,
        help="Spam probability at or above which an email is predicted as spam.",
    )
    parser.add_argument("--C", type=float, default=1.0, help="Inverse regularization strength.")
    parser.add_argument("--max-iter", type=int, default=1000, help="Max solver iterations.")
    parser.add_argument(
        "--stratify", action="store_true", help="Keep the spam ratio equal across the split."
    )
    parser.add_argument(
        "--top-terms",
        type=int,
        default=0,
        help="Print the N features weighing most towards each class.",
    )
    parser.add_argument("--plots-dir", type=Path, default=None, help="Save evaluation plots here.")
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    return PipelineConfig(
        csv_path=args.csv_path,
        random_state=args.random_state,
        test_size=args.test_size,
        text_column=args.text_column,
        label_column=args.label_column,
        examples=tuple(args.examples) if args.examples else EXAMPLE_TEXTS,
        threshold=args.threshold,
        C=args.C,
        max_iter=args.max_iter,
        stratify=args.stratify,
        top_terms=args.top_terms,
        plots_dir=args.plots_dir,
    )


def main(args: argparse.Namespace | None = None) -> int:
    """Run the pipeline; return 0 or the exit code of the error kind that stopped it."""
    parser = build_arg_parser()
    args = args or parser.parse_args()
    setup_logging(args.log_file, verbose=args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        run_pipeline(config)
    except Exception as exc:
        code = exit_code_for(exc)
        if code is None:
            raise
        logger.exception("An error occurred: %s", exc)
        return code
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
