"""
Project-wide constants for time unit formatting.

Centralized here so they can be imported by the formatter, the batch
pipeline, scripts, and tests.
"""

# Unit kinds the formatter recognizes.
UNIT_KINDS: tuple[str, ...] = ("minute", "hour", "day", "month")

# English unit used when the requested unit is unknown
DEFAULT_ENGLISH_UNIT: str = "hour"

# Language codes. Only "en" selects English; every other value formats in Arabic.
LANG_ENGLISH: str = "en"
LANG_ARABIC: str = "ar"
DEFAULT_LANG: str = LANG_ARABIC

# Environment variable holding the user's "lang" preference
LANG_ENV_VAR: str = "APP_LANG"

# Grammatical case markers for the Arabic dual form.
# Only the nominative marker changes the output; anything else is accusative.
DUAL_NOMINATIVE: str = "مرفوع"
DUAL_ACCUSATIVE: str = "منصوب"

# Arabic buckets, keyed into config/time_units.yaml
BUCKET_ONE: str = "one"
BUCKET_TWO: str = "two"
BUCKET_FEW: str = "few"
BUCKET_MANY: str = "many"
BUCKET_OTHER: str = "other"

# Arabic drops the numeral before singular and dual nouns
NUMERAL_SUPPRESSED_VALUES: frozenset[int] = frozenset({1, 2})

# Integral floats at or above this render in exponent notation, e.g. "1e+21"
EXPONENT_THRESHOLD: float = 1e21

# Forms every Arabic unit entry must define ("many" is optional)
REQUIRED_ARABIC_FORMS: frozenset[str] = frozenset({
    "one",
    "two_nominative",
    "two_accusative",
    "few",
    "other",
})

# File formats the batch labelling pipeline reads and writes
SUPPORTED_EXTENSIONS: set[str] = {
    ".csv",
    ".parquet",
    ".jsonl",
}
