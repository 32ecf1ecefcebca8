"""Calculation recorder - append-only borrowing capacity history."""

import structlog

from loan_api.domain.entities import BorrowingCapacityCalculation, FinancialDataItem
from loan_api.domain.exceptions import InternalError
from loan_api.domain.interfaces import FinancialDataWriter
from loan_api.domain.keys import CalculationSortKey

logger = structlog.get_logger(__name__)


class CalculationRecorder:
    """
    Appends borrowing capacity calculations to a borrower's history.

    Each calculation is stored under a sort key built from its id and
    timestamp, so records are never overwritten. The recorder never reads,
    never retries and keeps no state between calls.
    """

    def __init__(self, writer: FinancialDataWriter):
        self._writer = writer

    async def record(self, calculation: BorrowingCapacityCalculation) -> None:
        """
        Append a calculation.

        Raises:
            InternalError: If the store fails
        """
        sort_key = CalculationSortKey(
            calculation_id=calculation.id,
            timestamp=calculation.timestamp,
        )
        item = FinancialDataItem(
            pk=calculation.borrower_email,
            sk=sort_key.encode(),
            attributes=calculation.to_attributes(),
        )

        try:
            await self._writer.append(item)
        except InternalError:
            raise
        except Exception as e:
            logger.error(
                "calculation_write_failed",
                calculation_id=str(calculation.id),
                error_type=type(e).__name__,
            )
            raise InternalError(
                "Failed to put borrowing capacity calculation to financial data table"
            ) from e

        logger.info(
            "calculation_recorded",
            borrower_email=calculation.borrower_email,
            calculation_id=str(calculation.id),
        )
