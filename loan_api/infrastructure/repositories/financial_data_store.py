"""SQLAlchemy implementation of the financial data store ports."""

from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from loan_api.core.metrics import record_store_failure
from loan_api.domain.entities import FinancialDataItem
from loan_api.domain.exceptions import InternalError
from loan_api.domain.interfaces import FinancialDataReader, FinancialDataWriter
from loan_api.infrastructure.database.models import FinancialDataModel

logger = structlog.get_logger(__name__)


class SqlFinancialDataStore(FinancialDataWriter, FinancialDataReader):
    """
    Financial data store backed by a relational table.

    Every write runs in its own short transaction, so one call stores at
    most one item. Database errors are logged here and surface to callers
    only as InternalError.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def put(self, item: FinancialDataItem) -> bool:
        """Insert the item unless its key is already taken."""
        try:
            await self._insert(item)
        except IntegrityError:
            logger.info("financial_data_key_exists", pk=item.pk, sk=item.sk)
            return False
        except SQLAlchemyError as e:
            self._log_failure("put", item.sk, e)
            raise InternalError("Failed to put item to financial data table") from e
        return True

    async def append(self, item: FinancialDataItem) -> None:
        """Insert the item under a fresh key."""
        try:
            await self._insert(item)
        except SQLAlchemyError as e:
            self._log_failure("append", item.sk, e)
            raise InternalError("Failed to append item to financial data table") from e

    async def get(self, pk: str, sk: str) -> Optional[FinancialDataItem]:
        stmt = select(FinancialDataModel).where(
            FinancialDataModel.pk == pk,
            FinancialDataModel.sk == sk,
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._log_failure("get", sk, e)
            raise InternalError("Failed to read from financial data table") from e

        if model is None:
            return None

        return self._to_item(model)

    async def query(self, pk: str, sk_prefix: str = "") -> List[FinancialDataItem]:
        """Scan one partition in insertion order."""
        stmt = select(FinancialDataModel).where(FinancialDataModel.pk == pk)
        if sk_prefix:
            stmt = stmt.where(FinancialDataModel.sk.startswith(sk_prefix, autoescape=True))
        stmt = stmt.order_by(FinancialDataModel.id.asc())

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                models = result.scalars().all()
        except SQLAlchemyError as e:
            self._log_failure("query", sk_prefix, e)
            raise InternalError("Failed to query financial data table") from e

        return [self._to_item(model) for model in models]

    async def _insert(self, item: FinancialDataItem) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                session.add(
                    FinancialDataModel(
                        pk=item.pk,
                        sk=item.sk,
                        attributes=dict(item.attributes),
                    )
                )

    def _log_failure(self, operation: str, sk: str, error: Exception) -> None:
        record_store_failure(operation)
        logger.error(
            "store_operation_failed",
            operation=operation,
            sk=sk,
            error=str(error),
            error_type=type(error).__name__,
        )

    def _to_item(self, model: FinancialDataModel) -> FinancialDataItem:
        """Convert database model to store item."""
        return FinancialDataItem(
            pk=model.pk,
            sk=model.sk,
            attributes=dict(model.attributes),
            created_at=model.created_at,
        )
