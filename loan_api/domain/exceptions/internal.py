"""Dependency failure domain exceptions."""

from .base import DomainException


class InternalError(DomainException):
    """
    Raised when a dependency (the financial data store) fails.

    The message is generic; the originating exception is only available
    through ``__cause__`` for logging.
    """

    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "An internal error occurred"):
        super().__init__(message)
