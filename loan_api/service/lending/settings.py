"""
Lending Policy Settings.

Every coefficient of the borrowing capacity formula and every threshold of
the loan assessment policy lives here, so the policy can be audited (and
tuned) without reading the calculation code.

Environment variables use the LENDING_ prefix:
    LENDING_MULTIPLIER_FULL_TIME=5.0
    LENDING_TAPER_START_AGE=50
    LENDING_APPROVE_CREDIT_SCORE=750

Borrowing capacity:
    capacity = floor(gross_income * multiplier[employment_status] * age_factor)

    age_factor = 1                                          age <= taper_start_age
               = (max_age - age) / (max_age - taper_start_age)   otherwise

Loan assessment (dti = monthly_expenses * 12 / gross_income, undefined at zero income):
    REJECTED  credit_score <  reject_credit_score_floor
              or dti       >  reject_dti_ceiling
    APPROVED  credit_score >= approve_credit_score
              and dti      <= approve_dti_max
              and approve_min_age <= age <= approve_max_age
    REVIEW    everything else

    With zero income, any expenses are REJECTED and no expenses go to REVIEW.

Usage:
    from loan_api.service.lending.settings import lending_settings

    # Or create custom settings for testing
    custom = LendingSettings(approve_credit_score=800)
"""

from functools import lru_cache
from typing import Dict

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_api.domain.entities import EmploymentStatus


class LendingSettings(BaseSettings):
    """
    Configurable parameters for capacity estimation and loan assessment.

    All monetary values are whole currency units.
    Credit scores are 0-1000.
    """

    model_config = SettingsConfigDict(
        env_prefix="LENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Working Age Range ===
    min_age: int = Field(
        default=18,
        ge=0,
        description="Youngest age accepted by the calculator and the assessment",
    )
    max_age: int = Field(
        default=75,
        gt=0,
        description="Oldest age accepted; borrowing capacity reaches zero here",
    )

    # === Capacity Multipliers (x gross annual income) ===
    multiplier_full_time: float = Field(
        default=5.0,
        ge=0.0,
        description="Income multiple for full-time employment (steadiest income)",
    )
    multiplier_part_time: float = Field(
        default=3.5,
        ge=0.0,
        description="Income multiple for part-time employment",
    )
    multiplier_self_employed: float = Field(
        default=3.0,
        ge=0.0,
        description="Income multiple for self-employment (variable income)",
    )
    multiplier_casual: float = Field(
        default=2.5,
        ge=0.0,
        description="Income multiple for casual employment (least reliable income)",
    )

    # === Age Taper ===
    taper_start_age: int = Field(
        default=50,
        ge=0,
        description="Capacity starts tapering linearly above this age",
    )

    # === Rejection Thresholds ===
    reject_credit_score_floor: int = Field(
        default=500,
        ge=0,
        le=1000,
        description="Credit scores below this are rejected",
    )
    reject_dti_ceiling: float = Field(
        default=0.5,
        gt=0.0,
        description="Debt-to-income ratios above this are rejected",
    )

    # === Approval Thresholds ===
    approve_credit_score: int = Field(
        default=750,
        ge=0,
        le=1000,
        description="Minimum credit score for automatic approval",
    )
    approve_dti_max: float = Field(
        default=0.3,
        gt=0.0,
        description="Maximum debt-to-income ratio for automatic approval",
    )
    approve_min_age: int = Field(
        default=21,
        ge=0,
        description="Youngest age eligible for automatic approval",
    )
    approve_max_age: int = Field(
        default=60,
        ge=0,
        description="Oldest age eligible for automatic approval",
    )

    @model_validator(mode="after")
    def validate_policy(self) -> "LendingSettings":
        """Reject threshold combinations that would make the policy incoherent."""
        if self.min_age >= self.max_age:
            raise ValueError(f"min_age ({self.min_age}) >= max_age ({self.max_age})")
        if not self.min_age <= self.taper_start_age < self.max_age:
            raise ValueError(
                f"taper_start_age ({self.taper_start_age}) must be in "
                f"[{self.min_age}, {self.max_age})"
            )
        if self.approve_credit_score < self.reject_credit_score_floor:
            raise ValueError("approve_credit_score is below reject_credit_score_floor")
        if self.approve_dti_max > self.reject_dti_ceiling:
            raise ValueError("approve_dti_max is above reject_dti_ceiling")
        if self.approve_min_age > self.approve_max_age:
            raise ValueError("approve_min_age is above approve_max_age")
        return self

    @property
    def employment_multipliers(self) -> Dict[EmploymentStatus, float]:
        """Capacity multiplier for each employment status."""
        return {
            EmploymentStatus.FULL_TIME: self.multiplier_full_time,
            EmploymentStatus.PART_TIME: self.multiplier_part_time,
            EmploymentStatus.SELF_EMPLOYED: self.multiplier_self_employed,
            EmploymentStatus.CASUAL: self.multiplier_casual,
        }


@lru_cache
def get_lending_settings() -> LendingSettings:
    """Get cached lending settings instance."""
    return LendingSettings()


lending_settings = get_lending_settings()
