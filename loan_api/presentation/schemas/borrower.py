"""Borrower-related Pydantic schemas."""

from pydantic import Field

from .base import CamelModel


class BorrowerSchema(CamelModel):
    """Schema for POST /v1/borrower request body."""

    name: str = Field(
        ...,
        description="Full name of the borrower",
        examples=["Jane Citizen"],
    )
    dob: str = Field(
        ...,
        description="Borrowers date of birth in ISO8601 date string format",
        examples=["1990-01-01"],
    )
    email: str = Field(
        ...,
        description="Email address, the borrower's unique identity",
        examples=["jane@example.com"],
    )
    credit_score: int = Field(
        ...,
        strict=True,
        description="Credit score between 0 and 1000",
        examples=[720],
    )


class BorrowerResponseSchema(CamelModel):
    """Schema for POST /v1/borrower response (200 existing, 201 created)."""

    email: str = Field(
        ...,
        description="Email of the registered borrower",
    )
