"""Borrower registry - create-or-get borrower identities."""

from typing import Optional

import structlog

from loan_api.application.dto import BorrowerRegistration
from loan_api.domain.entities import Borrower, FinancialDataItem
from loan_api.domain.exceptions import InternalError
from loan_api.domain.interfaces import FinancialDataReader, FinancialDataWriter
from loan_api.domain.keys import BORROWER_PROFILE_SORT_KEY
from loan_api.service.lending.validation import (
    validate_credit_score,
    validate_dob,
    validate_email,
    validate_required_string,
)

logger = structlog.get_logger(__name__)


class BorrowerRegistry:
    """
    Registers borrowers keyed on their email address.

    Registration is idempotent: the first request for an email stores the
    profile, later requests for the same email return the existing identity
    and leave the stored profile unchanged, even if their details differ.
    """

    def __init__(self, writer: FinancialDataWriter, reader: FinancialDataReader):
        self._writer = writer
        self._reader = reader

    async def create_or_get(self, borrower: Borrower) -> BorrowerRegistration:
        """
        Register a borrower unless one already exists under the same email.

        Args:
            borrower: The borrower profile to register

        Returns:
            BorrowerRegistration with created=True for a new borrower and
            created=False when the email was already registered

        Raises:
            ValidationError: If a field is missing or malformed
            InternalError: If the store fails
        """
        self._validate(borrower)

        log = logger.bind(email=borrower.email)

        item = FinancialDataItem(
            pk=borrower.email,
            sk=BORROWER_PROFILE_SORT_KEY,
            attributes=borrower.to_attributes(),
        )

        try:
            created = await self._writer.put(item)
        except InternalError:
            raise
        except Exception as e:
            log.error("borrower_write_failed", error_type=type(e).__name__)
            raise InternalError("Failed to create borrower") from e

        if created:
            log.info("borrower_created")
        else:
            log.info("borrower_already_exists")

        return BorrowerRegistration(email=borrower.email, created=created)

    async def get(self, email: str) -> Optional[Borrower]:
        """
        Retrieve a registered borrower.

        Returns:
            The borrower if registered, None otherwise
        """
        item = await self._reader.get(email, BORROWER_PROFILE_SORT_KEY)
        if item is None:
            return None
        return Borrower.from_attributes(item.attributes)

    def _validate(self, borrower: Borrower) -> None:
        validate_required_string(borrower.name, "name")
        validate_email(borrower.email)
        validate_dob(borrower.dob)
        validate_credit_score(borrower.credit_score)
