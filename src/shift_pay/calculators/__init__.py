"""Shift pay calculation engine."""

from shift_pay.calculators.engine import PayEngine, calculate_total_pay
from shift_pay.calculators.segment_builder import (
    build_segments,
    calculate_shift_allowance,
    classify_day,
)
from shift_pay.calculators.tax_calculator import TaxCalculator
from shift_pay.calculators.time_parser import time_in_hours
from shift_pay.calculators.types import (
    ALLOWANCES,
    BASE_HOURLY_WAGE,
    AllowanceRates,
    DayType,
    PayCalculation,
    Segment,
    ShiftDetail,
    WorkShift,
)
from shift_pay.calculators.validation import (
    InvalidTimeError,
    ShiftOrderError,
    ShiftValidationError,
)

__all__ = [
    "ALLOWANCES",
    "BASE_HOURLY_WAGE",
    "AllowanceRates",
    "DayType",
    "InvalidTimeError",
    "PayCalculation",
    "PayEngine",
    "Segment",
    "ShiftDetail",
    "ShiftOrderError",
    "ShiftValidationError",
    "TaxCalculator",
    "WorkShift",
    "build_segments",
    "calculate_shift_allowance",
    "calculate_total_pay",
    "classify_day",
    "time_in_hours",
]
