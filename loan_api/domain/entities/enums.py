"""Enumerations shared across the lending domain."""

from enum import Enum


class EmploymentStatus(str, Enum):
    """Employment categories recognised by the lending policy."""
    CASUAL = "CASUAL"
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    SELF_EMPLOYED = "SELF_EMPLOYED"


class LoanApplicationStatus(str, Enum):
    """Outcome of a loan application assessment."""
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    REVIEW = "REVIEW"  # Borderline, routed to manual review
