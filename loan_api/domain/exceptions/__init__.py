"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .validation import ValidationError
from .internal import InternalError

__all__ = [
    "DomainException",
    "ValidationError",
    "InternalError",
]
