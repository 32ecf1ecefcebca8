"""Data transfer objects for loan applications."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanApplicationResponse:
    loan_application_status: str
