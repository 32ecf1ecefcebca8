"""Data Transfer Objects for application layer."""

from .borrower import BorrowerRegistration
from .capacity import (
    BorrowingCapacityRequest,
    BorrowingCapacityResponse,
    CalculationHistoryResponse,
    CalculationSummary,
)
from .loan import LoanApplicationResponse

__all__ = [
    "BorrowerRegistration",
    "BorrowingCapacityRequest",
    "BorrowingCapacityResponse",
    "CalculationHistoryResponse",
    "CalculationSummary",
    "LoanApplicationResponse",
]
