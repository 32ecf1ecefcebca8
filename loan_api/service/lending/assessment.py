"""
Loan Assessment Engine.

Classifies a loan application as APPROVED, REJECTED or REVIEW using the
applicant's credit score, debt-to-income ratio and age. Anything that is
neither clearly safe nor clearly unsafe goes to manual REVIEW.

Boundary values resolve on the favourable side: a credit score exactly at
the rejection floor is not rejected, a ratio exactly at the rejection
ceiling is not rejected, and the approval thresholds are inclusive.
"""

from fractions import Fraction
from typing import Optional

from loan_api.domain.entities import LoanApplication, LoanApplicationStatus

from .borrowing_capacity import exact
from .settings import LendingSettings, lending_settings
from .validation import (
    parse_employment_status,
    validate_age,
    validate_credit_score,
    validate_non_negative,
)

MONTHS_PER_YEAR = 12


def debt_to_income_ratio(monthly_expenses: int, gross_income: int) -> Optional[Fraction]:
    """
    Annualised expenses over gross annual income.

    Args:
        monthly_expenses: Monthly expenses (>= 0)
        gross_income: Gross annual income (>= 0)

    Returns:
        The exact ratio, or None when there is no income to divide by
    """
    if gross_income == 0:
        return None
    return Fraction(monthly_expenses * MONTHS_PER_YEAR, gross_income)


def validate_application(
    application: LoanApplication,
    settings: LendingSettings = lending_settings,
) -> None:
    """
    Raises:
        ValidationError: On the first field that violates its constraint
    """
    validate_age(application.age, settings)
    validate_non_negative(application.gross_income, "grossIncome")
    validate_non_negative(application.monthly_expenses, "monthlyExpenses")
    validate_credit_score(application.credit_score)
    parse_employment_status(application.employment_status)


def assess_loan_application(
    application: LoanApplication,
    settings: LendingSettings = lending_settings,
) -> LoanApplicationStatus:
    """
    Assess a loan application.

    Args:
        application: The application to assess
        settings: Lending settings (uses defaults if not provided)

    Returns:
        APPROVED, REJECTED or REVIEW

    Raises:
        ValidationError: If the application is malformed
    """
    validate_application(application, settings)

    dti = debt_to_income_ratio(application.monthly_expenses, application.gross_income)

    if application.credit_score < settings.reject_credit_score_floor:
        return LoanApplicationStatus.REJECTED
    if dti is None:
        # No income: any expenses are unaffordable, none at all is ambiguous
        if application.monthly_expenses > 0:
            return LoanApplicationStatus.REJECTED
        return LoanApplicationStatus.REVIEW
    if dti > exact(settings.reject_dti_ceiling):
        return LoanApplicationStatus.REJECTED

    if (
        application.credit_score >= settings.approve_credit_score
        and dti <= exact(settings.approve_dti_max)
        and settings.approve_min_age <= application.age <= settings.approve_max_age
    ):
        return LoanApplicationStatus.APPROVED

    return LoanApplicationStatus.REVIEW
