"""Tests for Norwegian date formatting."""

from datetime import date

from shift_pay.calculators.formatting import format_long_date


def test_weekday_day_month_year():
    assert format_long_date(date(2025, 3, 3)) == "mandag 3. mars 2025"


def test_weekend_names():
    assert format_long_date(date(2025, 3, 1)) == "lørdag 1. mars 2025"
    assert format_long_date(date(2025, 3, 2)) == "søndag 2. mars 2025"


def test_december():
    assert format_long_date(date(2024, 12, 24)) == "tirsdag 24. desember 2024"
