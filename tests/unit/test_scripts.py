"""Tests for the time unit command line scripts."""

import polars as pl
import pytest

from scripts.format_time_unit import main as format_main
from scripts.format_time_unit import parse_value
from scripts.label_durations import main as label_main


class TestParseValue:
    """Tests for parse_value function."""

    def test_integer_stays_int(self):
        """Whole numbers parse as int."""
        assert parse_value("5") == 5
        assert isinstance(parse_value("5"), int)

    def test_float_parsed(self):
        """Decimal input parses as float."""
        assert parse_value("2.5") == 2.5

    def test_nan_parsed(self):
        """'nan' parses as a float NaN, which formats as empty."""
        assert parse_value("nan") != parse_value("nan")


class TestFormatTimeUnitScript:
    """Tests for scripts.format_time_unit main."""

    def test_english(self, capsys):
        """English label is printed."""
        assert format_main(["5", "hour", "--lang", "en"]) == "5 hours"
        assert capsys.readouterr().out.strip() == "5 hours"

    def test_nominative_flag(self):
        """--nominative selects the nominative Arabic dual."""
        assert format_main(["2", "minute", "--lang", "ar", "--nominative"]) == "دقيقتان"

    def test_rejects_unknown_unit(self):
        """Units outside the closed set are rejected by argparse."""
        with pytest.raises(SystemExit):
            format_main(["5", "week"])


class TestLabelDurationsScript:
    """Tests for scripts.label_durations main."""

    def test_empty_lang_selects_arabic(self, durations_csv, tmp_path, isolated_env):
        """An explicit empty --lang is Arabic, not a fallback to APP_LANG."""
        isolated_env.setenv("APP_LANG", "en")
        output = tmp_path / "labelled.csv"
        label_main([
            "--input", str(durations_csv),
            "--output", str(output),
            "--lang", "",
        ])
        assert pl.read_csv(output)["label"][2] == "5 ساعات"

    def test_labels_file(self, durations_csv, tmp_path):
        """The script writes a labelled file."""
        output = tmp_path / "labelled.csv"
        label_main([
            "--input", str(durations_csv),
            "--output", str(output),
            "--lang", "en",
        ])
        assert pl.read_csv(output)["label"][1] == "2 minutes"

    def test_missing_input_exits(self, tmp_path):
        """A missing input file exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            label_main([
                "--input", str(tmp_path / "missing.csv"),
                "--output", str(tmp_path / "out.csv"),
                "--lang", "en",
            ])
        assert exc_info.value.code == 1

    def test_unsupported_output_exits(self, durations_csv, tmp_path):
        """An unsupported output extension exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            label_main([
                "--input", str(durations_csv),
                "--output", str(tmp_path / "out.txt"),
                "--lang", "en",
            ])
        assert exc_info.value.code == 1
