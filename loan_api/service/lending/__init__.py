"""
Lending Policy Module: borrowing capacity and loan assessment engines.
"""

from .settings import LendingSettings, lending_settings
from .borrowing_capacity import age_factor, calculate_borrowing_capacity
from .assessment import (
    assess_loan_application,
    debt_to_income_ratio,
    validate_application,
)

__all__ = [
    # Settings
    "LendingSettings",
    "lending_settings",
    # Borrowing Capacity
    "age_factor",
    "calculate_borrowing_capacity",
    # Assessment
    "assess_loan_application",
    "debt_to_income_ratio",
    "validate_application",
]
