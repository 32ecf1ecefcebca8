"""Loan application submitted for assessment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanApplication:
    """
    A one-shot loan application. Never persisted.

    Attributes:
        age: Applicant age in whole years
        gross_income: Gross annual income in whole currency units
        employment_status: One of the EmploymentStatus values
        credit_score: Credit score, 0-1000
        monthly_expenses: Monthly expenses in whole currency units
    """

    age: int
    gross_income: int
    employment_status: str
    credit_score: int
    monthly_expenses: int
