"""Domain Entities - Core business objects."""

from .borrower import Borrower
from .calculation import BorrowingCapacityCalculation
from .enums import EmploymentStatus, LoanApplicationStatus
from .financial_data import FinancialDataItem
from .loan_application import LoanApplication

__all__ = [
    "Borrower",
    "BorrowingCapacityCalculation",
    "EmploymentStatus",
    "FinancialDataItem",
    "LoanApplication",
    "LoanApplicationStatus",
]
