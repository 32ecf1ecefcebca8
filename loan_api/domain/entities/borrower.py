"""Borrower entity, identified by email."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Borrower:
    """
    A registered individual who may apply for credit.

    The email address is the natural key: once a borrower is stored under an
    email, that record is never replaced.

    Attributes:
        name: Full name of the borrower
        dob: Date of birth as an ISO-8601 date string (YYYY-MM-DD)
        email: Unique identity of the borrower
        credit_score: Bureau credit score, 0-1000
    """

    name: str
    dob: str
    email: str
    credit_score: int

    def to_attributes(self) -> dict:
        """Convert to the attribute map stored alongside the item keys."""
        return {
            "name": self.name,
            "dob": self.dob,
            "email": self.email,
            "creditScore": self.credit_score,
        }

    @classmethod
    def from_attributes(cls, attributes: dict) -> "Borrower":
        return cls(
            name=attributes["name"],
            dob=attributes["dob"],
            email=attributes["email"],
            credit_score=attributes["creditScore"],
        )
