"""Pay calculation engine - main orchestrator."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Sequence
from uuid import UUID

from shift_pay.calculators.formatting import format_long_date
from shift_pay.calculators.segment_builder import calculate_shift_allowance
from shift_pay.calculators.tax_calculator import TaxCalculator
from shift_pay.calculators.types import (
    ALLOWANCES,
    BASE_HOURLY_WAGE,
    AllowanceRates,
    PayCalculation,
    ShiftDetail,
    WorkShift,
)
from shift_pay.calculators.validation import validate_shift

logger = logging.getLogger(__name__)


class PayEngine:
    """Pay calculation engine.

    Calculation pipeline (per shift, in input order):
    1) Classify the day type of the shift date
    2) Split the shift into allowance segments and sum them
    3) Base wage = hours x base hourly wage
    4) Accumulate totals

    then apply the flat tax to the grand total.

    The engine holds no mutable state, so one instance can serve concurrent
    callers. With ``strict=False`` malformed times are not rejected and show
    up as NaN in the result.
    """

    def __init__(
        self,
        rates: AllowanceRates = ALLOWANCES,
        base_hourly_wage: float = BASE_HOURLY_WAGE,
        strict: bool = False,
        engine_version: str = "1.0.0",
    ):
        self.rates = rates
        self.base_hourly_wage = base_hourly_wage
        self.strict = strict
        self.engine_version = engine_version

    def calculate(
        self, shifts: Sequence[WorkShift], tax_percentage: float
    ) -> PayCalculation:
        """Calculate pay for all shifts.

        Raises:
            ShiftValidationError: In strict mode, for a malformed shift
        """
        if self.strict:
            for shift in shifts:
                validate_shift(shift)

        total_base_wage = 0.0
        total_allowances = 0.0
        total_hours = 0.0
        details: list[ShiftDetail] = []

        for shift in shifts:
            detail = self._calculate_shift(shift)
            total_hours += detail.hours
            total_base_wage += detail.base_wage
            total_allowances += detail.allowances
            details.append(detail)

        total_before_tax = total_base_wage + total_allowances
        taxed = TaxCalculator(tax_percentage).apply(total_before_tax)

        logger.debug(
            "Calculated pay for %d shifts: hours=%s gross=%s tax=%s",
            len(details),
            total_hours,
            total_before_tax,
            taxed.tax,
        )

        return PayCalculation(
            base_wage=total_base_wage,
            allowances=total_allowances,
            total_before_tax=total_before_tax,
            tax=taxed.tax,
            net_pay=taxed.net,
            hours_worked=total_hours,
            details=tuple(details),
        )

    def _calculate_shift(self, shift: WorkShift) -> ShiftDetail:
        """Price a single shift."""
        result = calculate_shift_allowance(
            shift.date, shift.start_time, shift.end_time, self.rates
        )
        base_wage = result.hours * self.base_hourly_wage

        return ShiftDetail(
            date=format_long_date(shift.date),
            hours=result.hours,
            base_wage=base_wage,
            allowances=result.allowance,
            total=base_wage + result.allowance,
            breakdown=result.breakdown,
        )

    def calculation_id(
        self, shifts: Sequence[WorkShift], tax_percentage: float
    ) -> UUID:
        """Generate a deterministic ID for a calculation request."""
        data = {
            "engine_version": self.engine_version,
            "base_hourly_wage": self.base_hourly_wage,
            "rates": self.rates.as_dict(),
            "tax_percentage": tax_percentage,
            "shifts": [
                {
                    "id": s.id,
                    "date": s.date.isoformat(),
                    "start_time": s.start_time,
                    "end_time": s.end_time,
                }
                for s in shifts
            ],
        }
        json_str = json.dumps(data, sort_keys=True)
        hash_bytes = hashlib.sha256(json_str.encode()).digest()
        return UUID(bytes=hash_bytes[:16])


def calculate_total_pay(
    shifts: Sequence[WorkShift],
    tax_percentage: float,
    *,
    rates: AllowanceRates = ALLOWANCES,
    base_hourly_wage: float = BASE_HOURLY_WAGE,
) -> PayCalculation:
    """Calculate gross and net pay for a list of shifts.

    Never raises; malformed times propagate as NaN.
    """
    engine = PayEngine(rates=rates, base_hourly_wage=base_hourly_wage)
    return engine.calculate(shifts, tax_percentage)
