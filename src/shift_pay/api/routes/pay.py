"""Pay calculation endpoints."""

from fastapi import APIRouter, status

from shift_pay.api.dependencies import AppSettings, Engine
from shift_pay.api.schemas import (
    PayCalculationRequest,
    PayCalculationResponse,
    RatesResponse,
    ShiftDetailResponse,
)
from shift_pay.calculators.types import WorkShift

router = APIRouter(prefix="/pay", tags=["pay"])


@router.post(
    "/calculate",
    response_model=PayCalculationResponse,
    status_code=status.HTTP_200_OK,
)
async def calculate_pay(
    request: PayCalculationRequest,
    engine: Engine,
    settings: AppSettings,
) -> PayCalculationResponse:
    """Calculate gross and net pay for a list of shifts."""
    tax_percentage = (
        request.tax_percentage
        if request.tax_percentage is not None
        else settings.default_tax_percentage
    )
    shifts = [
        WorkShift(
            id=s.id,
            date=s.date,
            start_time=s.start_time,
            end_time=s.end_time,
        )
        for s in request.shifts
    ]

    result = engine.calculate(shifts, tax_percentage)

    return PayCalculationResponse(
        calculation_id=engine.calculation_id(shifts, tax_percentage),
        tax_percentage=tax_percentage,
        base_wage=result.base_wage,
        allowances=result.allowances,
        total_before_tax=result.total_before_tax,
        tax=result.tax,
        net_pay=result.net_pay,
        hours_worked=result.hours_worked,
        details=[ShiftDetailResponse.model_validate(d) for d in result.details],
    )


@router.get("/rates", response_model=RatesResponse)
async def get_rates(engine: Engine) -> RatesResponse:
    """Return the base wage and allowance table."""
    return RatesResponse(
        base_hourly_wage=engine.base_hourly_wage,
        allowances=engine.rates.as_dict(),
    )
