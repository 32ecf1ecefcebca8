"""Borrowing capacity calculation history entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from .enums import EmploymentStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BorrowingCapacityCalculation:
    """
    One capacity estimate made for a borrower.

    Calculations form an append-only log per borrower; the pair
    (id, timestamp) makes every record's storage key unique.
    """

    borrower_email: str
    estimated_borrowing_capacity: int
    gross_annual_income: int
    employment_status: EmploymentStatus
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=_utcnow)

    def to_attributes(self) -> dict:
        """Convert to the attribute map stored alongside the item keys."""
        return {
            "borrowingCapacityCalculationId": str(self.id),
            "borrowerEmail": self.borrower_email,
            "estimatedBorrowingCapacity": self.estimated_borrowing_capacity,
            "grossAnnualIncome": self.gross_annual_income,
            "employmentStatus": self.employment_status.value,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_attributes(cls, attributes: dict) -> "BorrowingCapacityCalculation":
        return cls(
            id=UUID(attributes["borrowingCapacityCalculationId"]),
            borrower_email=attributes["borrowerEmail"],
            estimated_borrowing_capacity=attributes["estimatedBorrowingCapacity"],
            gross_annual_income=attributes["grossAnnualIncome"],
            employment_status=EmploymentStatus(attributes["employmentStatus"]),
            timestamp=datetime.fromisoformat(attributes["timestamp"]),
        )
