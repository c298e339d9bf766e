"""
Runtime settings resolved from the environment.

Functions (not module-level constants) ensure environment is read at runtime,
not import time.
"""

import os

from dotenv import load_dotenv

from utils.constants import DEFAULT_LANG, LANG_ENV_VAR


def get_language() -> str:
    """
    Get the user's language preference from environment or use default.

    Reads APP_LANG from environment (with .env support).
    Default: "ar"

    Returns:
        Language code, e.g. "en" or "ar".
    """
    load_dotenv()
    return os.getenv(LANG_ENV_VAR, DEFAULT_LANG)
