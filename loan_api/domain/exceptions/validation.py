"""Input validation domain exceptions."""

from .base import DomainException


class ValidationError(DomainException):
    """
    Raised when caller input violates a documented constraint.

    The message is safe to return to the caller verbatim.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
