"""Application services (use cases)."""

from .borrower_registry import BorrowerRegistry
from .borrowing_capacity_service import BorrowingCapacityService
from .calculation_recorder import CalculationRecorder
from .loan_application_service import LoanApplicationService

__all__ = [
    "BorrowerRegistry",
    "BorrowingCapacityService",
    "CalculationRecorder",
    "LoanApplicationService",
]
