"""
Input validation shared by the lending engines and the borrower registry.

Every check raises ValidationError with a message naming the offending
field using its API name.
"""

import re
from datetime import date
from typing import Any

from loan_api.domain.entities import EmploymentStatus
from loan_api.domain.exceptions import ValidationError

from .settings import LendingSettings

MIN_CREDIT_SCORE = 0
MAX_CREDIT_SCORE = 1000

# Amounts must fit a signed 64-bit column and a float metric sample
MAX_AMOUNT = 2**63 - 1

DOB_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_integer(value: Any, field: str) -> int:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer", field=field)
    return value


def validate_non_negative(value: Any, field: str) -> int:
    value = validate_integer(value, field)
    if value < 0:
        raise ValidationError(f"{field} must not be negative", field=field)
    if value > MAX_AMOUNT:
        raise ValidationError(f"{field} must not exceed {MAX_AMOUNT}", field=field)
    return value


def validate_age(value: Any, settings: LendingSettings) -> int:
    value = validate_integer(value, "age")
    if not settings.min_age <= value <= settings.max_age:
        raise ValidationError(
            f"age must be between {settings.min_age} and {settings.max_age}",
            field="age",
        )
    return value


def validate_credit_score(value: Any) -> int:
    value = validate_integer(value, "creditScore")
    if not MIN_CREDIT_SCORE <= value <= MAX_CREDIT_SCORE:
        raise ValidationError(
            f"creditScore must be between {MIN_CREDIT_SCORE} and {MAX_CREDIT_SCORE}",
            field="creditScore",
        )
    return value


def parse_employment_status(value: Any) -> EmploymentStatus:
    """
    Coerce a raw value to an EmploymentStatus.

    Raises:
        ValidationError: If the value is not one of the recognised statuses
    """
    if isinstance(value, EmploymentStatus):
        return value
    try:
        return EmploymentStatus(value)
    except ValueError:
        allowed = ", ".join(status.value for status in EmploymentStatus)
        raise ValidationError(
            f"employmentStatus must be one of: {allowed}",
            field="employmentStatus",
        ) from None


def validate_required_string(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required", field=field)
    return value


def validate_email(value: Any) -> str:
    value = validate_required_string(value, "email")
    if not EMAIL_PATTERN.match(value):
        raise ValidationError("email is not a valid email address", field="email")
    return value


def validate_dob(value: Any) -> str:
    """Require an ISO-8601 calendar date in YYYY-MM-DD form."""
    value = validate_required_string(value, "dob")
    if not DOB_PATTERN.match(value):
        raise ValidationError("dob must match the pattern YYYY-MM-DD", field="dob")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"dob is not a valid date: {value}", field="dob") from None
    return value
