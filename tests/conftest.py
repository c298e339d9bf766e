"""
Pytest fixtures for time unit formatting tests.

Fixtures provide reusable test data and utilities. They're injected
into test functions by name; pytest handles the wiring automatically.
"""

import json
from pathlib import Path

import polars as pl
import pytest

# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(monkeypatch):
    """
    Remove APP_LANG and stop .env files from leaking into a test.

    Returns the monkeypatch fixture so tests can set APP_LANG themselves.
    """
    monkeypatch.delenv("APP_LANG", raising=False)
    monkeypatch.setattr("utils.settings.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Duration data
# ---------------------------------------------------------------------------


@pytest.fixture
def mixed_durations() -> list[dict]:
    """
    Durations covering every Arabic bucket plus the degraded cases.

    Includes a null value and an unknown unit.
    """
    return [
        {"value": 1, "unit": "day"},
        {"value": 2, "unit": "minute"},
        {"value": 5, "unit": "hour"},
        {"value": 15, "unit": "month"},
        {"value": 121, "unit": "day"},
        {"value": None, "unit": "hour"},
        {"value": 1, "unit": "week"},
    ]


@pytest.fixture
def durations_frame(mixed_durations) -> pl.DataFrame:
    """The mixed durations as a polars DataFrame."""
    return pl.DataFrame(mixed_durations, schema={"value": pl.Int64, "unit": pl.Utf8})


@pytest.fixture
def durations_csv(tmp_path, durations_frame) -> Path:
    """
    Creates a temporary CSV of durations.

    tmp_path is a built-in pytest fixture that provides a unique
    temporary directory for each test. Automatically cleaned up.
    """
    filepath = tmp_path / "durations.csv"
    durations_frame.write_csv(filepath)
    return filepath


@pytest.fixture
def durations_jsonl(tmp_path, mixed_durations) -> Path:
    """Creates a temporary JSONL file of durations."""
    filepath = tmp_path / "durations.jsonl"
    with open(filepath, "w", encoding="utf-8") as f:
        for row in mixed_durations:
            f.write(json.dumps(row) + "\n")
    return filepath
