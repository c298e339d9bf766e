"""
Batch time unit labelling.

Adds human-readable duration labels to polars DataFrames and to
CSV / Parquet / JSONL files of durations.
"""

import logging
from pathlib import Path

import polars as pl

from utils.constants import DUAL_ACCUSATIVE, SUPPORTED_EXTENSIONS
from utils.formatting import format_time_unit
from utils.settings import get_language

logger = logging.getLogger(__name__)


def read_durations(input_path: Path) -> pl.DataFrame:
    """
    Read a durations file into a DataFrame.

    Args:
        input_path: Path to a .csv, .parquet, or .jsonl file.

    Returns:
        Loaded DataFrame.

    Raises:
        ValueError: If the file extension is not supported.
    """
    suffix = input_path.suffix.lower()
    if suffix == ".csv":
        return pl.read_csv(input_path)
    if suffix == ".parquet":
        return pl.read_parquet(input_path)
    if suffix == ".jsonl":
        return pl.read_ndjson(input_path)
    raise ValueError(
        f"Unsupported file type '{suffix}', expected one of {sorted(SUPPORTED_EXTENSIONS)}"
    )


def write_durations(df: pl.DataFrame, output_path: Path) -> None:
    """
    Write a labelled DataFrame, choosing the format from the extension.

    Raises:
        ValueError: If the file extension is not supported.
    """
    suffix = output_path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file type '{suffix}', expected one of {sorted(SUPPORTED_EXTENSIONS)}"
        )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.write_csv(output_path)
    elif suffix == ".parquet":
        df.write_parquet(output_path)
    else:
        df.write_ndjson(output_path)


def add_time_unit_labels(
    df: pl.DataFrame,
    value_col: str = "value",
    unit_col: str = "unit",
    label_col: str = "label",
    unit: str | None = None,
    lang: str | None = None,
    dual: str = DUAL_ACCUSATIVE,
) -> pl.DataFrame:
    """
    Add a formatted label column to a DataFrame of durations.

    Args:
        df: DataFrame with a numeric value column.
        value_col: Column holding the durations.
        unit_col: Column holding the unit kind per row. Ignored when unit is set.
        label_col: Name of the column to add.
        unit: Unit kind applied to every row instead of unit_col.
        lang: Language code. None falls back to the APP_LANG setting,
            resolved once for the whole frame.
        dual: Arabic dual case marker.

    Returns:
        DataFrame with label_col appended. Null values get an empty label.

    Raises:
        ValueError: If a required column is missing.
    """
    required = [value_col] if unit is not None else [value_col, unit_col]
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")

    if lang is None:
        lang = get_language()

    if unit is not None:
        label_expr = pl.col(value_col).map_elements(
            lambda value: format_time_unit(value, unit, lang, dual),
            return_dtype=pl.Utf8,
            skip_nulls=False,
        )
    else:
        label_expr = pl.struct([value_col, unit_col]).map_elements(
            lambda row: format_time_unit(row[value_col], row[unit_col], lang, dual),
            return_dtype=pl.Utf8,
        )

    return df.with_columns(label_expr.alias(label_col))


def label_durations(
    input_path: Path,
    output_path: Path,
    value_col: str = "value",
    unit_col: str = "unit",
    label_col: str = "label",
    unit: str | None = None,
    lang: str | None = None,
    dual: str = DUAL_ACCUSATIVE,
) -> dict:
    """
    Label every row of a durations file and write the result.

    Args:
        input_path: Source .csv, .parquet, or .jsonl file.
        output_path: Destination file; format follows its extension.
        value_col, unit_col, label_col, unit, lang, dual:
            Passed through to add_time_unit_labels.

    Returns:
        Summary dict with keys: rows, empty_labels, language.
    """
    if lang is None:
        lang = get_language()

    logger.info(f"Loading durations from {input_path}")
    df = read_durations(input_path)
    logger.info(f"Loaded {len(df):,} rows")

    df = add_time_unit_labels(
        df,
        value_col=value_col,
        unit_col=unit_col,
        label_col=label_col,
        unit=unit,
        lang=lang,
        dual=dual,
    )

    empty_labels = df.filter(pl.col(label_col) == "").height
    if empty_labels:
        logger.warning(
            f"{empty_labels:,} rows produced an empty label"
        )

    write_durations(df, output_path)
    logger.info(f"Wrote {len(df):,} labelled rows to {output_path}")

    return {
        "rows": len(df),
        "empty_labels": empty_labels,
        "language": lang,
    }
