"""
Borrowing Capacity Calculator.

Estimates how much a borrower could plausibly borrow from their age,
gross annual income and employment status. The coefficients are documented
in settings.py.

Arithmetic is done on exact fractions so that identical inputs always give
the identical, correctly floored result.
"""

import math
from fractions import Fraction
from typing import Any

from .settings import LendingSettings, lending_settings
from .validation import parse_employment_status, validate_age, validate_non_negative


def exact(value: float) -> Fraction:
    """Convert a configured decimal coefficient to an exact fraction (0.3 -> 3/10)."""
    return Fraction(str(value))


def age_factor(age: int, settings: LendingSettings = lending_settings) -> Fraction:
    """
    Share of full capacity available at a given age.

    1 up to taper_start_age, then falling linearly to 0 at max_age.

    Args:
        age: Borrower age, already validated
        settings: Lending settings (uses defaults if not provided)

    Returns:
        Factor between 0 and 1
    """
    if age <= settings.taper_start_age:
        return Fraction(1)
    remaining = max(0, settings.max_age - age)
    return Fraction(remaining, settings.max_age - settings.taper_start_age)


def calculate_borrowing_capacity(
    age: Any,
    gross_income: Any,
    employment_status: Any,
    settings: LendingSettings = lending_settings,
) -> int:
    """
    Estimate borrowing capacity.

    Args:
        age: Borrower age in whole years
        gross_income: Gross annual income in whole currency units
        employment_status: EmploymentStatus or its string value
        settings: Lending settings (uses defaults if not provided)

    Returns:
        Estimated capacity, rounded down to a whole currency unit (>= 0)

    Raises:
        ValidationError: If any input is out of range or unrecognised
    """
    age = validate_age(age, settings)
    gross_income = validate_non_negative(gross_income, "grossIncome")
    status = parse_employment_status(employment_status)

    multiplier = exact(settings.employment_multipliers[status])
    capacity = gross_income * multiplier * age_factor(age, settings)

    return math.floor(capacity)
