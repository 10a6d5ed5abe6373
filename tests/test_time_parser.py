"""Tests for wall-clock time parsing."""

import math

import pytest

from shift_pay.calculators.time_parser import parse_time, time_in_hours, to_number


class TestTimeInHours:
    """Test conversion of HH:MM to fractional hours."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("00:00", 0.0),
            ("08:00", 8.0),
            ("16:30", 16.5),
            ("21:15", 21.25),
            ("23:59", 23 + 59 / 60),
        ],
    )
    def test_valid_times(self, value, expected):
        assert time_in_hours(value) == pytest.approx(expected)

    def test_single_digit_hour(self):
        """Leading zero is optional."""
        assert time_in_hours("9:45") == pytest.approx(9.75)

    def test_non_numeric_part_gives_nan(self):
        """Malformed input is not rejected, it becomes NaN."""
        assert math.isnan(time_in_hours("ab:cd"))
        assert math.isnan(time_in_hours("12:xx"))

    def test_missing_minutes_gives_nan(self):
        assert math.isnan(time_in_hours("12"))

    def test_empty_string_gives_nan(self):
        assert math.isnan(time_in_hours(""))


class TestParseTime:
    """Test splitting of time strings."""

    def test_parse_time_parts(self):
        assert parse_time("07:05") == (7.0, 5.0)

    def test_blank_part_is_zero(self):
        hours, minutes = parse_time(":30")
        assert hours == 0.0
        assert minutes == 30.0

    def test_to_number_rejects_words(self):
        assert math.isnan(to_number("nan"))
        assert math.isnan(to_number("inf"))
        assert to_number(" 12 ") == 12.0
