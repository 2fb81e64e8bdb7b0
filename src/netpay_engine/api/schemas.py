"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from netpay_engine.calculators.types import LineType, MaritalStatus

# Decimal internally, plain JSON number on the wire
Number = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ============================================================================
# Estimate schemas
# ============================================================================


class EstimateRequest(BaseModel):
    """Inputs for a net pay estimate. Omitted fields take configured defaults."""

    gross_annual: Decimal | None = Field(default=None, ge=0)
    installments_per_year: Literal[12, 14] | None = None
    dependent_count: int | None = Field(default=None, ge=0)
    marital_status: MaritalStatus | None = None

    @field_validator("marital_status", mode="before")
    @classmethod
    def parse_marital_status(cls, value: Any) -> MaritalStatus | None:
        if value is None:
            return None
        return MaritalStatus.parse(value)


class EstimateInputs(BaseModel):
    """Resolved inputs the estimate was computed from."""

    gross_annual: Number
    installments_per_year: int
    dependent_count: int
    marital_status: MaritalStatus


class EstimateResult(BaseModel):
    """Raw, unformatted estimate figures."""

    model_config = ConfigDict(from_attributes=True)

    gross_annual: Number
    gross_monthly: Number
    withholding_rate: Number
    withholding_annual: Number
    withholding_monthly: Number
    contribution_annual: Number
    contribution_monthly: Number
    net_annual: Number
    net_monthly: Number
    installments_per_year: int


class BreakdownLineResponse(BaseModel):
    """One signed line of the per-installment breakdown."""

    model_config = ConfigDict(from_attributes=True)

    line_type: LineType
    label: str
    amount: Number
    rate: Number | None = None


class EstimateResponse(BaseModel):
    """Estimate with its inputs and breakdown."""

    inputs: EstimateInputs
    result: EstimateResult
    breakdown: list[BreakdownLineResponse]
    engine_version: str


class TaxBracketResponse(BaseModel):
    """A bracket; upper_limit is null for the open-ended top bracket."""

    upper_limit: Number | None
    rate: Number


class BracketTableResponse(BaseModel):
    """Constant table used by the estimator."""

    brackets: list[TaxBracketResponse]
    earned_income_reduction: Number
    personal_minimum_base: Number
    dependent_increments: list[Number]
    marital_increment: Number
    contribution_rate: Number
    min_rate: Number
    max_rate: Number


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
    code: str | None = None
