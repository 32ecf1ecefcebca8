"""Pydantic schemas for API request/response validation."""

from .borrower import BorrowerSchema, BorrowerResponseSchema
from .capacity import (
    BorrowingCapacityResponseSchema,
    CalculationHistoryResponseSchema,
    CalculationSchema,
)
from .loan import LoanApplicationSchema, LoanApplicationResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "BorrowerSchema",
    "BorrowerResponseSchema",
    "BorrowingCapacityResponseSchema",
    "CalculationHistoryResponseSchema",
    "CalculationSchema",
    "LoanApplicationSchema",
    "LoanApplicationResponseSchema",
    "ErrorResponseSchema",
]
