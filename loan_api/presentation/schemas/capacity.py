"""Borrowing capacity Pydantic schemas."""

from pydantic import Field

from .base import CamelModel


class BorrowingCapacityResponseSchema(CamelModel):
    """Schema for GET /v1/borrowingCapacity response."""

    estimated_borrowing_capacity: int = Field(
        ...,
        ge=0,
        description="Estimated borrowing capacity in whole currency units",
        examples=[500000],
    )


class CalculationSchema(CamelModel):
    """Schema for one recorded calculation."""

    calculation_id: str = Field(..., description="UUID of the calculation")
    estimated_borrowing_capacity: int = Field(..., ge=0)
    gross_annual_income: int = Field(..., ge=0)
    employment_status: str = Field(..., examples=["FULL_TIME"])
    timestamp: str = Field(
        ...,
        description="When the calculation was made, ISO 8601",
    )


class CalculationHistoryResponseSchema(CamelModel):
    """Schema for GET /v1/borrower/{email}/borrowingCapacity response."""

    borrower_email: str
    calculations: list[CalculationSchema] = Field(
        ...,
        description="Recorded calculations, oldest first",
    )
