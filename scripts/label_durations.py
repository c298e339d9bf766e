"""
Add human-readable time unit labels to a durations file.

Reads a CSV / Parquet / JSONL file with a numeric value column and either a
unit column or a fixed --unit, and writes the same rows with a label column.

Usage:
    uv run python -m scripts.label_durations --input data/durations.csv --output data/labelled.csv
    uv run python -m scripts.label_durations --input data/durations.parquet --output data/labelled.jsonl --unit day --lang en
"""

import argparse
import logging
import sys
from pathlib import Path

from pipeline.labels import label_durations
from utils.constants import DUAL_ACCUSATIVE, DUAL_NOMINATIVE, UNIT_KINDS
from utils.settings import get_language

# -----------------------------------------------------------------------------
# Logging setup
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Main entry point for batch labelling."""
    parser = argparse.ArgumentParser(
        description="Add time unit labels to a durations file"
    )
    parser.add_argument("--input", type=Path, required=True, help="Input .csv/.parquet/.jsonl file")
    parser.add_argument("--output", type=Path, required=True, help="Output .csv/.parquet/.jsonl file")
    parser.add_argument("--value-col", default="value", help="Duration column (default: value)")
    parser.add_argument("--unit-col", default="unit", help="Unit column (default: unit)")
    parser.add_argument("--label-col", default="label", help="Label column to add (default: label)")
    parser.add_argument(
        "--unit",
        choices=UNIT_KINDS,
        default=None,
        help="Apply one unit to every row instead of reading --unit-col",
    )
    parser.add_argument(
        "--lang",
        default=None,
        help="Language code: 'en' or 'ar' (default: APP_LANG setting)",
    )
    parser.add_argument(
        "--nominative",
        action="store_true",
        help="Use the nominative Arabic dual form (default: accusative)",
    )
    args = parser.parse_args(argv)

    lang = args.lang if args.lang is not None else get_language()
    dual = DUAL_NOMINATIVE if args.nominative else DUAL_ACCUSATIVE

    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        sys.exit(1)

    # Log configuration
    logger.info("=" * 60)
    logger.info("Time Unit Labelling")
    logger.info("=" * 60)
    logger.info(f"Input:    {args.input}")
    logger.info(f"Output:   {args.output}")
    logger.info(f"Language: {lang}")
    logger.info(f"Unit:     {args.unit or f'column {args.unit_col!r}'}")
    logger.info("=" * 60)

    try:
        summary = label_durations(
            args.input,
            args.output,
            value_col=args.value_col,
            unit_col=args.unit_col,
            label_col=args.label_col,
            unit=args.unit,
            lang=lang,
            dual=dual,
        )
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info("=" * 60)
    logger.info("Summary")
    logger.info("=" * 60)
    logger.info(f"Rows labelled: {summary['rows']:,}")
    logger.info(f"Empty labels:  {summary['empty_labels']:,}")


if __name__ == "__main__":
    main()
