"""Loan application Pydantic schemas."""

from pydantic import Field

from .base import CamelModel


class LoanApplicationSchema(CamelModel):
    """
    Schema for POST /v1/loan request body.

    Numeric fields are strict: JSON strings and booleans are rejected
    rather than coerced to integers.
    """

    age: int = Field(..., strict=True, description="Age of the applicant", examples=[35])
    gross_income: int = Field(
        ...,
        strict=True,
        description="Gross annual income",
        examples=[120000],
    )
    employment_status: str = Field(
        ...,
        description="One of CASUAL, FULL_TIME, PART_TIME, SELF_EMPLOYED",
        examples=["FULL_TIME"],
    )
    credit_score: int = Field(
        ...,
        strict=True,
        description="Credit score, 0-1000",
        examples=[950],
    )
    monthly_expenses: int = Field(
        ...,
        strict=True,
        description="Monthly expenses",
        examples=[1000],
    )


class LoanApplicationResponseSchema(CamelModel):
    """Schema for POST /v1/loan response."""

    loan_application_status: str = Field(
        ...,
        description="APPROVED, REJECTED or REVIEW",
        examples=["APPROVED"],
    )
