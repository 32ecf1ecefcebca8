"""Loan application service - assesses loan applications."""

import structlog

from loan_api.application.dto import LoanApplicationResponse
from loan_api.domain.entities import LoanApplication
from loan_api.service.lending import LendingSettings, assess_loan_application, lending_settings

logger = structlog.get_logger(__name__)


class LoanApplicationService:
    """
    Application service for loan applications.

    Decisions are not persisted here.
    """

    def __init__(self, settings: LendingSettings = lending_settings):
        self._settings = settings

    def apply(self, application: LoanApplication) -> LoanApplicationResponse:
        """
        Assess a loan application.

        Raises:
            ValidationError: If the application is malformed
        """
        status = assess_loan_application(application, self._settings)

        logger.info(
            "loan_application_assessed",
            status=status.value,
            credit_score=application.credit_score,
            age=application.age,
        )

        return LoanApplicationResponse(loan_application_status=status.value)
