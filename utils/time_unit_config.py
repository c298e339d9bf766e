"""
Time unit wording loaded from YAML.

This module provides cached access to the English base words and the Arabic
per-bucket words from config/time_units.yaml.
"""

from functools import lru_cache
from pathlib import Path

import yaml

from utils.constants import REQUIRED_ARABIC_FORMS


CONFIG_PATH = Path(__file__).parent.parent / "config" / "time_units.yaml"


@lru_cache(maxsize=1)
def load_time_unit_config() -> dict[str, dict]:
    """
    Load the unit word table from config/time_units.yaml.

    Returns:
        Dict with "english" (unit -> base word) and "arabic"
        (unit -> form name -> word) tables.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
        ValueError: If an Arabic unit entry is missing a required form.
    """
    with open(CONFIG_PATH, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    english = config.get("english", {})
    arabic = config.get("arabic", {})

    for unit, forms in arabic.items():
        missing = REQUIRED_ARABIC_FORMS - set(forms)
        if missing:
            raise ValueError(
                f"Arabic unit '{unit}' is missing forms: {sorted(missing)}"
            )

    return {"english": english, "arabic": arabic}


def get_english_words() -> dict[str, str]:
    """Map each unit kind to its English base word."""
    return load_time_unit_config()["english"]


def get_arabic_forms(unit: str) -> dict[str, str] | None:
    """
    Get the Arabic word forms for a unit.

    Args:
        unit: Unit kind, e.g. "day".

    Returns:
        Dict mapping form name to word, or None if the unit is unknown.
    """
    return load_time_unit_config()["arabic"].get(unit)
