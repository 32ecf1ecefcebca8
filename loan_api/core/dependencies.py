"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from loan_api.infrastructure.database import db_manager
from loan_api.infrastructure.repositories import SqlFinancialDataStore
from loan_api.application.services import (
    BorrowerRegistry,
    BorrowingCapacityService,
    CalculationRecorder,
    LoanApplicationService,
)


# Store dependencies
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory owned by the application lifespan."""
    return db_manager.sessionmaker


def get_financial_data_store(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> SqlFinancialDataStore:
    """Get the financial data store adaptor."""
    return SqlFinancialDataStore(session_factory)


# Service dependencies
def get_borrower_registry(
    store: Annotated[SqlFinancialDataStore, Depends(get_financial_data_store)],
) -> BorrowerRegistry:
    """Get a BorrowerRegistry instance."""
    return BorrowerRegistry(writer=store, reader=store)


def get_calculation_recorder(
    store: Annotated[SqlFinancialDataStore, Depends(get_financial_data_store)],
) -> CalculationRecorder:
    """Get a CalculationRecorder instance."""
    return CalculationRecorder(writer=store)


def get_borrowing_capacity_service(
    recorder: Annotated[CalculationRecorder, Depends(get_calculation_recorder)],
    store: Annotated[SqlFinancialDataStore, Depends(get_financial_data_store)],
) -> BorrowingCapacityService:
    """Get a BorrowingCapacityService instance with all dependencies."""
    return BorrowingCapacityService(recorder=recorder, reader=store)


def get_loan_application_service() -> LoanApplicationService:
    """Get a LoanApplicationService instance."""
    return LoanApplicationService()
