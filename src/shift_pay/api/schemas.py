"""Pydantic schemas for API request/response models."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


# ============================================================================
# Request schemas
# ============================================================================


class ShiftInput(BaseModel):
    """A shift in a calculation request."""

    id: str = Field(min_length=1)
    date: date
    start_time: str = Field(pattern=TIME_PATTERN, examples=["16:00"])
    end_time: str = Field(pattern=TIME_PATTERN, examples=["21:30"])


class PayCalculationRequest(BaseModel):
    """Schema for calculating pay over a list of shifts."""

    shifts: list[ShiftInput]
    tax_percentage: float | None = Field(default=None, ge=0, le=100)


# ============================================================================
# Response schemas
# ============================================================================


class ShiftDetailResponse(BaseModel):
    """Per-shift part of a pay calculation."""

    model_config = ConfigDict(from_attributes=True)

    date: str
    hours: float
    base_wage: float
    allowances: float
    total: float
    breakdown: list[str]


class PayCalculationResponse(BaseModel):
    """Schema for a pay calculation result."""

    model_config = ConfigDict(from_attributes=True)

    calculation_id: UUID
    tax_percentage: float
    base_wage: float
    allowances: float
    total_before_tax: float
    tax: float
    net_pay: float
    hours_worked: float
    details: list[ShiftDetailResponse]


class RatesResponse(BaseModel):
    """Wage and allowance table in NOK per hour."""

    base_hourly_wage: float
    allowances: dict[str, float]
