"""Borrowing capacity service - estimates capacity and keeps its history."""

import structlog

from loan_api.application.dto import (
    BorrowingCapacityRequest,
    BorrowingCapacityResponse,
    CalculationHistoryResponse,
)
from loan_api.domain.entities import BorrowingCapacityCalculation
from loan_api.domain.interfaces import FinancialDataReader
from loan_api.domain.keys import CalculationSortKey
from loan_api.service.lending import LendingSettings, calculate_borrowing_capacity, lending_settings
from loan_api.service.lending.validation import parse_employment_status, validate_email

from .calculation_recorder import CalculationRecorder

logger = structlog.get_logger(__name__)


class BorrowingCapacityService:
    """
    Application service for borrowing capacity use cases.
    """

    def __init__(
        self,
        recorder: CalculationRecorder,
        reader: FinancialDataReader,
        settings: LendingSettings = lending_settings,
    ):
        self._recorder = recorder
        self._reader = reader
        self._settings = settings

    async def estimate(self, request: BorrowingCapacityRequest) -> BorrowingCapacityResponse:
        """
        Estimate borrowing capacity, recording it when a borrower is named.

        Raises:
            ValidationError: If the request is invalid
            InternalError: If recording the calculation fails
        """
        if request.borrower_email is not None:
            validate_email(request.borrower_email)

        capacity = calculate_borrowing_capacity(
            age=request.age,
            gross_income=request.gross_income,
            employment_status=request.employment_status,
            settings=self._settings,
        )
        status = parse_employment_status(request.employment_status)

        log = logger.bind(
            employment_status=status.value,
            estimated_borrowing_capacity=capacity,
        )

        if request.borrower_email is not None:
            calculation = BorrowingCapacityCalculation(
                borrower_email=request.borrower_email,
                estimated_borrowing_capacity=capacity,
                gross_annual_income=request.gross_income,
                employment_status=status,
            )
            await self._recorder.record(calculation)
            log = log.bind(calculation_id=str(calculation.id))

        log.info("capacity_calculated")

        return BorrowingCapacityResponse(estimated_borrowing_capacity=capacity)

    async def get_history(self, borrower_email: str) -> CalculationHistoryResponse:
        """
        List a borrower's recorded calculations, oldest first.

        Raises:
            ValidationError: If the email is malformed
            InternalError: If the store fails
        """
        validate_email(borrower_email)

        items = await self._reader.query(borrower_email, CalculationSortKey.prefix())
        calculations = [
            BorrowingCapacityCalculation.from_attributes(item.attributes)
            for item in items
        ]

        logger.info(
            "calculation_history_retrieved",
            borrower_email=borrower_email,
            count=len(calculations),
        )

        return CalculationHistoryResponse.from_entities(borrower_email, calculations)
