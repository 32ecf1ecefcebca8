"""Data transfer objects for borrower registration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BorrowerRegistration:
    """Outcome of a create-or-get registration."""

    email: str
    created: bool
