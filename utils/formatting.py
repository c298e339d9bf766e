"""Human-readable labels for time unit durations in English and Arabic."""

import math
from numbers import Real

from utils.constants import (
    BUCKET_FEW,
    BUCKET_MANY,
    BUCKET_ONE,
    BUCKET_OTHER,
    BUCKET_TWO,
    DEFAULT_ENGLISH_UNIT,
    DUAL_ACCUSATIVE,
    DUAL_NOMINATIVE,
    EXPONENT_THRESHOLD,
    LANG_ENGLISH,
    NUMERAL_SUPPRESSED_VALUES,
)
from utils.settings import get_language
from utils.time_unit_config import get_arabic_forms, get_english_words


def is_formattable(value) -> bool:
    """Return True if value is a real, non-NaN number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def render_number(value: float) -> str:
    """
    Render a value the way it is interpolated into a label.

    Integral floats below 1e21 drop the trailing ".0" so 5.0 renders as "5";
    from 1e21 up they keep exponent notation ("1e+21"). Infinities render
    as "Infinity" and "-Infinity".
    """
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < EXPONENT_THRESHOLD:
            return str(int(value))
    return str(value)


def english_unit_label(value: float, unit: str) -> str:
    """
    Get the English unit word for a value.

    Args:
        value: Numeric duration.
        unit: Unit kind. Unknown units fall back to "hour".

    Returns:
        Singular word for exactly 1, otherwise the word with an "s" suffix.
    """
    base_unit = get_english_words().get(unit) or DEFAULT_ENGLISH_UNIT
    return base_unit if value == 1 else f"{base_unit}s"


def effective_arabic_value(value: float) -> float:
    """
    Compute the value used to pick an Arabic grammatical bucket.

    Values under 100 are used as-is. From 100 up, a ones digit of 1 or 2
    behaves like 100 (collective singular); otherwise the last two digits
    decide.

    Args:
        value: Numeric duration.

    Returns:
        Effective value for bucket selection.
    """
    if value < 100:
        return value

    ones_digit = value % 10
    if ones_digit in (1, 2):
        return 100
    return value % 100


def arabic_bucket(effective: float, has_many: bool) -> str:
    """
    Map an effective value to an Arabic grammatical bucket.

    Args:
        effective: Result of effective_arabic_value.
        has_many: Whether the unit has a distinct 11-99 accusative plural.
            Units without one use the collective singular for 11-99.

    Returns:
        One of "one", "two", "few", "many", "other".
    """
    if effective == 1:
        return BUCKET_ONE
    if effective == 2:
        return BUCKET_TWO
    if 3 <= effective <= 10:
        return BUCKET_FEW
    if has_many and 11 <= effective <= 99:
        return BUCKET_MANY
    return BUCKET_OTHER


def arabic_unit_label(value: float, unit: str, dual: str = DUAL_ACCUSATIVE) -> str:
    """
    Get the Arabic unit word for a value.

    Args:
        value: Numeric duration.
        unit: Unit kind. Unknown units produce an empty label.
        dual: Case marker for the dual form. Only "مرفوع" selects the
            nominative word; anything else selects the accusative one.

    Returns:
        Arabic word for the value's bucket, or "" for an unknown unit.
    """
    forms = get_arabic_forms(unit)
    if forms is None:
        return ""

    bucket = arabic_bucket(effective_arabic_value(value), BUCKET_MANY in forms)
    if bucket == BUCKET_TWO:
        if dual == DUAL_NOMINATIVE:
            return forms["two_nominative"]
        return forms["two_accusative"]
    return forms[bucket]


def format_time_unit(
    value: float,
    unit: str,
    lang: str | None = None,
    dual: str = DUAL_ACCUSATIVE,
) -> str:
    """
    Format a duration as a human-readable label.

    Args:
        value: Numeric duration. Non-numbers and NaN produce "".
        unit: One of "minute", "hour", "day", "month".
        lang: "en" for English; any other code formats in Arabic.
            None falls back to the APP_LANG setting.
        dual: Arabic dual case marker ("مرفوع" or "منصوب").

    Returns:
        Formatted string like "5 hours", "5 ساعات", or "يومين".
        Arabic omits the numeral for values 1 and 2.
    """
    if not is_formattable(value):
        return ""

    if lang is None:
        lang = get_language()

    if lang == LANG_ENGLISH:
        return f"{render_number(value)} {english_unit_label(value, unit)}"

    unit_label = arabic_unit_label(value, unit, dual)
    if value in NUMERAL_SUPPRESSED_VALUES:
        return unit_label
    return f"{render_number(value)} {unit_label}"
