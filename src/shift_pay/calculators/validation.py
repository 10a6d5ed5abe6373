"""Boundary validation for shifts."""

from __future__ import annotations

import re

from shift_pay.calculators.time_parser import time_in_hours
from shift_pay.calculators.types import WorkShift

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class ShiftValidationError(ValueError):
    """Raised when a shift cannot be priced."""

    def __init__(self, message: str, shift_id: str | None = None):
        self.shift_id = shift_id
        if shift_id is not None:
            message = f"Shift {shift_id}: {message}"
        super().__init__(message)


class InvalidTimeError(ShiftValidationError):
    """Raised when a time string is not a valid HH:MM pair."""

    def __init__(self, value: str, shift_id: str | None = None):
        self.value = value
        super().__init__(f"'{value}' is not a valid HH:MM time", shift_id)


class ShiftOrderError(ShiftValidationError):
    """Raised when a shift ends before it starts."""

    def __init__(self, start_time: str, end_time: str, shift_id: str | None = None):
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(
            f"end time {end_time} is before start time {start_time}", shift_id
        )


def validate_time(value: str, shift_id: str | None = None) -> float:
    """Return fractional hours for a strict "HH:MM" value in [00:00, 24:00)."""
    if not isinstance(value, str) or not _TIME_RE.match(value):
        raise InvalidTimeError(str(value), shift_id)
    return time_in_hours(value)


def validate_shift(shift: WorkShift) -> None:
    """Check a shift's times.

    Overnight shifts are not supported, so the end must not precede the start.
    """
    start = validate_time(shift.start_time, shift.id)
    end = validate_time(shift.end_time, shift.id)
    if end < start:
        raise ShiftOrderError(shift.start_time, shift.end_time, shift.id)
