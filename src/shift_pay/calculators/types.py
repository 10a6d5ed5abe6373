"""Type definitions for the pay calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

# NOK per hour, before allowances
BASE_HOURLY_WAGE = 177.53


class DayType(str, Enum):
    """Day categories with distinct allowance windows."""

    SUNDAY = "SUNDAY"
    SATURDAY = "SATURDAY"
    WEEKDAY = "WEEKDAY"


@dataclass(frozen=True)
class AllowanceRates:
    """Hourly surcharges (NOK) from the labor agreement."""

    weekday_after_18: float = 22
    weekday_after_21: float = 45
    saturday_after_13: float = 45
    saturday_after_15: float = 55
    saturday_after_18: float = 110
    sunday: float = 115

    def as_dict(self) -> dict[str, float]:
        return {
            "weekday_after_18": self.weekday_after_18,
            "weekday_after_21": self.weekday_after_21,
            "saturday_after_13": self.saturday_after_13,
            "saturday_after_15": self.saturday_after_15,
            "saturday_after_18": self.saturday_after_18,
            "sunday": self.sunday,
        }


ALLOWANCES = AllowanceRates()


@dataclass(frozen=True)
class WorkShift:
    """A single shift as entered by the worker.

    Times are "HH:MM" wall-clock strings on the same calendar day.
    """

    id: str
    date: date
    start_time: str
    end_time: str


@dataclass(frozen=True)
class Segment:
    """Part of a shift paid at a single allowance rate."""

    start: float  # Fractional hours since midnight
    end: float
    rate: float
    label: str

    @property
    def hours(self) -> float:
        return self.end - self.start

    @property
    def allowance(self) -> float:
        return self.hours * self.rate


@dataclass(frozen=True)
class ShiftAllowance:
    """Hours and allowance totals for one shift."""

    hours: float
    allowance: float
    breakdown: tuple[str, ...] = ()


@dataclass(frozen=True)
class ShiftDetail:
    """Per-shift line of a pay calculation."""

    date: str
    hours: float
    base_wage: float
    allowances: float
    total: float
    breakdown: tuple[str, ...] = ()


@dataclass(frozen=True)
class PayCalculation:
    """Aggregate pay for a list of shifts."""

    base_wage: float = 0.0
    allowances: float = 0.0
    total_before_tax: float = 0.0
    tax: float = 0.0
    net_pay: float = 0.0
    hours_worked: float = 0.0
    details: tuple[ShiftDetail, ...] = field(default_factory=tuple)
