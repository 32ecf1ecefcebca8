"""Data transfer objects for borrowing capacity operations."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class BorrowingCapacityRequest:
    """Input for a borrowing capacity estimate."""
    age: int
    gross_income: int
    employment_status: str
    borrower_email: Optional[str] = None  # record the estimate when set


@dataclass(frozen=True)
class BorrowingCapacityResponse:
    estimated_borrowing_capacity: int


@dataclass(frozen=True)
class CalculationSummary:
    """One recorded calculation in a history listing."""

    calculation_id: str
    estimated_borrowing_capacity: int
    gross_annual_income: int
    employment_status: str
    timestamp: str


@dataclass(frozen=True)
class CalculationHistoryResponse:
    """Response containing a borrower's calculation history."""

    borrower_email: str
    calculations: List[CalculationSummary]

    @classmethod
    def from_entities(
        cls,
        borrower_email: str,
        calculations: list,
    ) -> "CalculationHistoryResponse":
        summaries = [
            CalculationSummary(
                calculation_id=str(c.id),
                estimated_borrowing_capacity=c.estimated_borrowing_capacity,
                gross_annual_income=c.gross_annual_income,
                employment_status=c.employment_status.value,
                timestamp=c.timestamp.isoformat(),
            )
            for c in calculations
        ]
        return cls(borrower_email=borrower_email, calculations=summaries)
