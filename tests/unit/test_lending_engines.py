"""
Unit Tests for the Lending Policy Module.

These tests verify:
1. Borrowing capacity multipliers, age taper and rounding
2. Input validation shared by both engines
3. Loan assessment tri-state classification and its boundaries
4. Policy settings validation

Test Categories:
- TestBorrowingCapacity*: capacity calculator tests
- TestLoanAssessment*: assessment engine tests
- TestLendingSettings: configuration tests
"""

import pytest
from fractions import Fraction
from pydantic import ValidationError as SettingsValidationError

from loan_api.domain.entities import (
    EmploymentStatus,
    LoanApplication,
    LoanApplicationStatus,
)
from loan_api.domain.exceptions import ValidationError
from loan_api.service.lending import (
    LendingSettings,
    age_factor,
    assess_loan_application,
    calculate_borrowing_capacity,
    debt_to_income_ratio,
)


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def settings() -> LendingSettings:
    """Default policy, independent of the process environment."""
    return LendingSettings(_env_file=None)


def make_application(
    age: int = 35,
    gross_income: int = 120000,
    employment_status: str = "FULL_TIME",
    credit_score: int = 800,
    monthly_expenses: int = 1000,
) -> LoanApplication:
    """Helper to create an application that is approved unless overridden."""
    return LoanApplication(
        age=age,
        gross_income=gross_income,
        employment_status=employment_status,
        credit_score=credit_score,
        monthly_expenses=monthly_expenses,
    )


# =============================================================================
# Borrowing Capacity Tests
# =============================================================================

class TestBorrowingCapacity:
    """Tests for calculate_borrowing_capacity()."""

    def test_full_time_example(self, settings):
        """age=30, grossIncome=100000, FULL_TIME gives a positive capacity."""
        capacity = calculate_borrowing_capacity(30, 100000, "FULL_TIME", settings)
        assert capacity == 500000

    def test_deterministic(self, settings):
        """Repeated calls with identical inputs return the identical value."""
        results = {
            calculate_borrowing_capacity(30, 100000, "FULL_TIME", settings)
            for _ in range(20)
        }
        assert len(results) == 1

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("FULL_TIME", 500000),
            ("PART_TIME", 350000),
            ("SELF_EMPLOYED", 300000),
            ("CASUAL", 250000),
        ],
    )
    def test_multiplier_by_employment_status(self, settings, status, expected):
        assert calculate_borrowing_capacity(30, 100000, status, settings) == expected

    def test_steadier_income_gets_more_capacity(self, settings):
        full_time = calculate_borrowing_capacity(30, 80000, "FULL_TIME", settings)
        casual = calculate_borrowing_capacity(30, 80000, "CASUAL", settings)
        self_employed = calculate_borrowing_capacity(30, 80000, "SELF_EMPLOYED", settings)
        assert full_time > self_employed > casual

    def test_accepts_enum_member(self, settings):
        capacity = calculate_borrowing_capacity(
            30, 100000, EmploymentStatus.PART_TIME, settings
        )
        assert capacity == 350000

    def test_rounds_down(self, settings):
        """33333 * 3.5 = 116665.5, floored to a whole currency unit."""
        assert calculate_borrowing_capacity(30, 33333, "PART_TIME", settings) == 116665

    def test_zero_income_gives_zero_capacity(self, settings):
        assert calculate_borrowing_capacity(30, 0, "FULL_TIME", settings) == 0


class TestBorrowingCapacityAgeTaper:
    """Tests for the age-based adjustment."""

    def test_no_taper_up_to_start_age(self, settings):
        assert calculate_borrowing_capacity(50, 100000, "FULL_TIME", settings) == 500000

    def test_taper_just_above_start_age(self, settings):
        """age 51: 24/25 of full capacity."""
        assert calculate_borrowing_capacity(51, 100000, "FULL_TIME", settings) == 480000

    def test_taper_midway(self, settings):
        """age 60: 15/25 of full capacity."""
        assert calculate_borrowing_capacity(60, 100000, "FULL_TIME", settings) == 300000

    def test_zero_at_max_age(self, settings):
        assert calculate_borrowing_capacity(75, 100000, "FULL_TIME", settings) == 0

    def test_capacity_never_increases_with_age(self, settings):
        capacities = [
            calculate_borrowing_capacity(age, 90000, "SELF_EMPLOYED", settings)
            for age in range(settings.min_age, settings.max_age + 1)
        ]
        assert all(c >= 0 for c in capacities)
        assert capacities == sorted(capacities, reverse=True)

    def test_age_factor_values(self, settings):
        assert age_factor(18, settings) == 1
        assert age_factor(70, settings) == Fraction(5, 25)


class TestBorrowingCapacityValidation:
    """Tests for calculator input validation."""

    def test_negative_income_rejected(self, settings):
        with pytest.raises(ValidationError) as exc_info:
            calculate_borrowing_capacity(30, -1, "FULL_TIME", settings)
        assert exc_info.value.field == "grossIncome"

    @pytest.mark.parametrize("age", [17, 76, -5])
    def test_age_outside_working_range_rejected(self, settings, age):
        with pytest.raises(ValidationError) as exc_info:
            calculate_borrowing_capacity(age, 100000, "FULL_TIME", settings)
        assert exc_info.value.field == "age"

    def test_working_age_bounds_accepted(self, settings):
        calculate_borrowing_capacity(18, 100000, "FULL_TIME", settings)
        calculate_borrowing_capacity(75, 100000, "FULL_TIME", settings)

    @pytest.mark.parametrize("status", ["UNEMPLOYED", "full_time", "", None])
    def test_unknown_employment_status_rejected(self, settings, status):
        with pytest.raises(ValidationError) as exc_info:
            calculate_borrowing_capacity(30, 100000, status, settings)
        assert exc_info.value.field == "employmentStatus"
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_non_integer_income_rejected(self, settings):
        with pytest.raises(ValidationError):
            calculate_borrowing_capacity(30, "100000", "FULL_TIME", settings)

    def test_boolean_age_rejected(self, settings):
        with pytest.raises(ValidationError):
            calculate_borrowing_capacity(True, 100000, "FULL_TIME", settings)

    def test_income_beyond_int64_rejected(self, settings):
        with pytest.raises(ValidationError) as exc_info:
            calculate_borrowing_capacity(30, 2**63, "FULL_TIME", settings)
        assert exc_info.value.field == "grossIncome"

    def test_largest_income_accepted(self, settings):
        capacity = calculate_borrowing_capacity(30, 2**63 - 1, "FULL_TIME", settings)
        assert capacity == (2**63 - 1) * 5


# =============================================================================
# Loan Assessment Tests
# =============================================================================

class TestLoanAssessmentScenarios:
    """Example applications and their expected decisions."""

    def test_low_score_high_dti_rejected(self, settings):
        application = make_application(
            credit_score=200, gross_income=50000, monthly_expenses=4000, age=30
        )
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REJECTED

    def test_strong_application_approved(self, settings):
        application = make_application(
            credit_score=950, gross_income=120000, monthly_expenses=1000, age=35
        )
        assert assess_loan_application(application, settings) == LoanApplicationStatus.APPROVED

    def test_borderline_application_reviewed(self, settings):
        application = make_application(
            credit_score=650, gross_income=60000, monthly_expenses=2500, age=40
        )
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REVIEW

    def test_deterministic(self, settings):
        application = make_application(credit_score=650)
        results = {assess_loan_application(application, settings) for _ in range(10)}
        assert len(results) == 1


class TestLoanAssessmentBoundaries:
    """Threshold-valued inputs resolve to a stable classification."""

    def test_score_at_floor_not_rejected(self, settings):
        application = make_application(credit_score=500)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REVIEW

    def test_score_below_floor_rejected(self, settings):
        application = make_application(credit_score=499)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REJECTED

    def test_dti_at_ceiling_not_rejected(self, settings):
        """2500 * 12 / 60000 = 0.5 exactly."""
        application = make_application(gross_income=60000, monthly_expenses=2500)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REVIEW

    def test_dti_above_ceiling_rejected(self, settings):
        application = make_application(gross_income=60000, monthly_expenses=2501)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REJECTED

    def test_score_and_dti_at_approval_thresholds_approved(self, settings):
        """score 750, 3000 * 12 / 120000 = 0.3 exactly."""
        application = make_application(
            credit_score=750, gross_income=120000, monthly_expenses=3000
        )
        assert assess_loan_application(application, settings) == LoanApplicationStatus.APPROVED

    def test_score_just_below_approval_reviewed(self, settings):
        application = make_application(credit_score=749)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REVIEW

    def test_dti_just_above_safe_threshold_reviewed(self, settings):
        application = make_application(gross_income=120000, monthly_expenses=3001)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REVIEW

    @pytest.mark.parametrize(
        "age,expected",
        [
            (20, LoanApplicationStatus.REVIEW),
            (21, LoanApplicationStatus.APPROVED),
            (60, LoanApplicationStatus.APPROVED),
            (61, LoanApplicationStatus.REVIEW),
        ],
    )
    def test_age_band_for_approval(self, settings, age, expected):
        application = make_application(age=age, credit_score=900)
        assert assess_loan_application(application, settings) == expected

    def test_zero_income_with_expenses_rejected(self, settings):
        application = make_application(gross_income=0, monthly_expenses=100)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REJECTED

    def test_zero_income_without_expenses_reviewed(self, settings):
        application = make_application(gross_income=0, monthly_expenses=0)
        assert assess_loan_application(application, settings) == LoanApplicationStatus.REVIEW

    def test_every_application_gets_exactly_one_status(self, settings):
        for credit_score in (0, 499, 500, 749, 750, 1000):
            for monthly_expenses in (0, 1500, 2500, 5000):
                for age in (18, 21, 60, 75):
                    status = assess_loan_application(
                        make_application(
                            age=age,
                            gross_income=60000,
                            credit_score=credit_score,
                            monthly_expenses=monthly_expenses,
                        ),
                        settings,
                    )
                    assert status in set(LoanApplicationStatus)


class TestLoanAssessmentValidation:
    """Tests for assessment input validation."""

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"gross_income": -1}, "grossIncome"),
            ({"monthly_expenses": -1}, "monthlyExpenses"),
            ({"gross_income": 10**400}, "grossIncome"),
            ({"monthly_expenses": 2**63}, "monthlyExpenses"),
            ({"credit_score": 1001}, "creditScore"),
            ({"credit_score": -1}, "creditScore"),
            ({"employment_status": "RETIRED"}, "employmentStatus"),
            ({"age": 10}, "age"),
        ],
    )
    def test_invalid_application_rejected(self, settings, overrides, field):
        with pytest.raises(ValidationError) as exc_info:
            assess_loan_application(make_application(**overrides), settings)
        assert exc_info.value.field == field


class TestDebtToIncomeRatio:
    """Tests for debt_to_income_ratio()."""

    def test_exact_ratio(self):
        assert debt_to_income_ratio(2500, 60000) == Fraction(1, 2)

    def test_undefined_without_income(self):
        assert debt_to_income_ratio(100, 0) is None
        assert debt_to_income_ratio(0, 0) is None


# =============================================================================
# Settings Tests
# =============================================================================

class TestLendingSettings:
    """Tests for LendingSettings."""

    def test_custom_multiplier(self):
        custom = LendingSettings(_env_file=None, multiplier_full_time=4.0)
        assert calculate_borrowing_capacity(30, 100000, "FULL_TIME", custom) == 400000

    def test_custom_approval_threshold(self):
        custom = LendingSettings(_env_file=None, approve_credit_score=900)
        application = make_application(credit_score=850)
        assert assess_loan_application(application, custom) == LoanApplicationStatus.REVIEW

    def test_every_status_has_a_multiplier(self, settings):
        assert set(settings.employment_multipliers) == set(EmploymentStatus)

    def test_taper_start_must_precede_max_age(self):
        with pytest.raises(SettingsValidationError):
            LendingSettings(_env_file=None, taper_start_age=80)

    def test_approval_threshold_below_floor_invalid(self):
        with pytest.raises(SettingsValidationError):
            LendingSettings(_env_file=None, approve_credit_score=400)

    def test_safe_dti_above_ceiling_invalid(self):
        with pytest.raises(SettingsValidationError):
            LendingSettings(_env_file=None, approve_dti_max=0.6)
