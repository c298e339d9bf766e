"""
Format a single duration as a human-readable label.

Usage:
    uv run python -m scripts.format_time_unit 5 hour --lang en
    uv run python -m scripts.format_time_unit 2 minute --nominative

Language defaults to the APP_LANG setting (".env" supported), then "ar".
"""

import argparse
import logging

from utils.constants import DUAL_ACCUSATIVE, DUAL_NOMINATIVE, UNIT_KINDS
from utils.formatting import format_time_unit

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


def parse_value(raw: str) -> int | float:
    """Parse the value argument, keeping integers as int."""
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format a duration as an English or Arabic label"
    )
    parser.add_argument("value", type=parse_value, help="Numeric duration")
    parser.add_argument("unit", choices=UNIT_KINDS, help="Unit kind")
    parser.add_argument(
        "--lang",
        default=None,
        help="Language code: 'en' for English, anything else for Arabic "
        "(default: APP_LANG setting)",
    )
    parser.add_argument(
        "--nominative",
        action="store_true",
        help="Use the nominative Arabic dual form (default: accusative)",
    )
    return parser


def main(argv: list[str] | None = None) -> str:
    """Main entry point; prints and returns the formatted label."""
    args = build_parser().parse_args(argv)
    dual = DUAL_NOMINATIVE if args.nominative else DUAL_ACCUSATIVE

    label = format_time_unit(args.value, args.unit, lang=args.lang, dual=dual)
    if not label:
        logger.warning(f"No label produced for value {args.value!r}")

    print(label)
    return label


if __name__ == "__main__":
    main()
