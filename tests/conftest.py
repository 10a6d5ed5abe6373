"""Pytest fixtures for shift pay engine tests."""

from __future__ import annotations

from datetime import date

import pytest

from shift_pay.calculators.types import WorkShift

# Week of 2025-03-01 (Saturday) .. 2025-03-07 (Friday)
SATURDAY = date(2025, 3, 1)
SUNDAY = date(2025, 3, 2)
MONDAY = date(2025, 3, 3)
FRIDAY = date(2025, 3, 7)


def make_shift(
    shift_date: date, start_time: str, end_time: str, shift_id: str = "s1"
) -> WorkShift:
    """Build a shift for tests."""
    return WorkShift(
        id=shift_id, date=shift_date, start_time=start_time, end_time=end_time
    )


@pytest.fixture
def evening_weekday_shift() -> WorkShift:
    """Monday 17:00-22:00, crossing both weekday windows."""
    return make_shift(MONDAY, "17:00", "22:00", "mon-evening")


@pytest.fixture
def saturday_shift() -> WorkShift:
    """Saturday 12:00-19:00, crossing all Saturday windows."""
    return make_shift(SATURDAY, "12:00", "19:00", "sat-long")


@pytest.fixture
def sunday_shift() -> WorkShift:
    """Sunday 10:00-14:30."""
    return make_shift(SUNDAY, "10:00", "14:30", "sun")


@pytest.fixture
def week_of_shifts(
    evening_weekday_shift: WorkShift,
    saturday_shift: WorkShift,
    sunday_shift: WorkShift,
) -> list[WorkShift]:
    """A mixed list of shifts in non-chronological order."""
    return [
        sunday_shift,
        make_shift(FRIDAY, "08:00", "16:00", "fri-day"),
        evening_weekday_shift,
        saturday_shift,
    ]
