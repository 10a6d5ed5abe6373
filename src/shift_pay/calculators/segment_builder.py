"""Allowance segment generation.

A shift is split into segments, one per allowance window it touches. Each
day type has its own window table:

    SUNDAY    whole shift at the Sunday rate
    SATURDAY  [start,13) 0, [13,15), [15,18), [18,end)
    WEEKDAY   [start,18) 0, [18,21), [21,end)

Shifts crossing midnight are not supported; a shift whose end precedes its
start produces no segments on Saturdays and weekdays.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import date

from shift_pay.calculators.time_parser import time_in_hours
from shift_pay.calculators.types import (
    ALLOWANCES,
    AllowanceRates,
    DayType,
    Segment,
    ShiftAllowance,
)

SegmentHandler = Callable[[float, float, AllowanceRates], list[Segment]]


def js_weekday(d: date) -> int:
    """Day of week numbered 0=Sunday .. 6=Saturday."""
    return (d.weekday() + 1) % 7


def classify_day(d: date) -> DayType:
    """Map a calendar date to its allowance day type."""
    day = js_weekday(d)
    if day == 0:
        return DayType.SUNDAY
    if day == 6:
        return DayType.SATURDAY
    return DayType.WEEKDAY


def _clamp_and_emit(
    segments: list[Segment],
    start: float,
    end: float,
    window_start: float | None,
    window_end: float | None,
    rate: float,
    label: str,
) -> None:
    """Append the part of [start, end) inside the window, if any.

    A window bound of None means the window is open on that side.
    """
    if window_end is not None and not start < window_end:
        return
    if window_start is not None and not end > window_start:
        return

    # start/end go first so a NaN bound survives max()/min()
    seg_start = start if window_start is None else max(start, window_start)
    seg_end = end if window_end is None else min(end, window_end)
    segments.append(Segment(start=seg_start, end=seg_end, rate=rate, label=label))


def sunday_segments(start: float, end: float, rates: AllowanceRates) -> list[Segment]:
    return [Segment(start=start, end=end, rate=rates.sunday, label="Sunday allowance")]


def saturday_segments(
    start: float, end: float, rates: AllowanceRates
) -> list[Segment]:
    segments: list[Segment] = []
    _clamp_and_emit(segments, start, end, None, 13, 0, "Regular (before 13:00)")
    _clamp_and_emit(
        segments, start, end, 13, 15, rates.saturday_after_13, "Saturday (13:00-15:00)"
    )
    _clamp_and_emit(
        segments, start, end, 15, 18, rates.saturday_after_15, "Saturday (15:00-18:00)"
    )
    _clamp_and_emit(
        segments, start, end, 18, None, rates.saturday_after_18, "Saturday (after 18:00)"
    )
    return segments


def weekday_segments(start: float, end: float, rates: AllowanceRates) -> list[Segment]:
    segments: list[Segment] = []
    _clamp_and_emit(segments, start, end, None, 18, 0, "Regular (before 18:00)")
    _clamp_and_emit(
        segments, start, end, 18, 21, rates.weekday_after_18, "Weekday (18:00-21:00)"
    )
    _clamp_and_emit(
        segments, start, end, 21, None, rates.weekday_after_21, "Weekday (after 21:00)"
    )
    return segments


SEGMENT_HANDLERS: dict[DayType, SegmentHandler] = {
    DayType.SUNDAY: sunday_segments,
    DayType.SATURDAY: saturday_segments,
    DayType.WEEKDAY: weekday_segments,
}


def build_segments(
    day_type: DayType,
    start: float,
    end: float,
    rates: AllowanceRates = ALLOWANCES,
) -> list[Segment]:
    """Split [start, end) into ordered, gap-free allowance segments."""
    return SEGMENT_HANDLERS[day_type](start, end, rates)


def format_fixed(value: float, digits: int = 2) -> str:
    """Fixed-point text, with NaN spelled out as "NaN"."""
    if math.isnan(value):
        return "NaN"
    return f"{value:.{digits}f}"


def format_rate(rate: float) -> str:
    """Render a rate without a trailing ".0" for whole numbers."""
    if isinstance(rate, float) and rate.is_integer():
        return str(int(rate))
    return str(rate)


def describe_segment(segment: Segment) -> str:
    """Breakdown line, e.g. "Weekday (18:00-21:00): 3.00 hours × 22 NOK = 66.00 NOK"."""
    return (
        f"{segment.label}: {format_fixed(segment.hours)} hours × "
        f"{format_rate(segment.rate)} NOK = {format_fixed(segment.allowance)} NOK"
    )


def calculate_shift_allowance(
    shift_date: date,
    start_time: str,
    end_time: str,
    rates: AllowanceRates = ALLOWANCES,
) -> ShiftAllowance:
    """Total hours, allowance and breakdown lines for one shift.

    Regular (zero-rate) segments count towards hours but are left out of the
    breakdown. On Sundays the single segment is always listed.
    """
    day_type = classify_day(shift_date)
    segments = build_segments(
        day_type, time_in_hours(start_time), time_in_hours(end_time), rates
    )

    hours = 0.0
    allowance = 0.0
    breakdown: list[str] = []
    for segment in segments:
        hours += segment.hours
        allowance += segment.allowance
        if segment.rate > 0 or day_type is DayType.SUNDAY:
            breakdown.append(describe_segment(segment))

    return ShiftAllowance(hours=hours, allowance=allowance, breakdown=tuple(breakdown))
