"""
Fixtures for integration tests.

Provides:
- In-memory SQLite financial data store
- A store whose table is missing, to exercise failure paths
- Port doubles that fail with arbitrary exceptions
- Test clients for the FastAPI app
"""

from typing import AsyncGenerator, List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from loan_api.main import app
from loan_api.core.dependencies import get_financial_data_store
from loan_api.domain.entities import Borrower, FinancialDataItem
from loan_api.domain.interfaces import FinancialDataReader, FinancialDataWriter
from loan_api.infrastructure.database import Base
from loan_api.infrastructure.repositories import SqlFinancialDataStore


# =============================================================================
# Database Fixtures
# =============================================================================

def _create_engine() -> AsyncEngine:
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def _session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite async engine with the financial data table."""
    engine = _create_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def store(test_engine) -> SqlFinancialDataStore:
    """Financial data store backed by the in-memory database."""
    return SqlFinancialDataStore(_session_factory(test_engine))


@pytest_asyncio.fixture
async def broken_store() -> AsyncGenerator[SqlFinancialDataStore, None]:
    """Financial data store whose table was never created."""
    engine = _create_engine()

    yield SqlFinancialDataStore(_session_factory(engine))

    await engine.dispose()


# =============================================================================
# Port Doubles
# =============================================================================

class UnreliableFinancialDataStore(FinancialDataWriter, FinancialDataReader):
    """Store double that fails every call with a non-domain exception."""

    def __init__(self):
        self.call_count = 0

    async def put(self, item: FinancialDataItem) -> bool:
        self.call_count += 1
        raise ConnectionResetError("socket closed by 10.0.0.12:5432")

    async def append(self, item: FinancialDataItem) -> None:
        self.call_count += 1
        raise ConnectionResetError("socket closed by 10.0.0.12:5432")

    async def get(self, pk: str, sk: str) -> Optional[FinancialDataItem]:
        return None

    async def query(self, pk: str, sk_prefix: str = "") -> List[FinancialDataItem]:
        return []


@pytest.fixture
def unreliable_store() -> UnreliableFinancialDataStore:
    return UnreliableFinancialDataStore()


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _client_for(data_store) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_financial_data_store] = lambda: data_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(store: SqlFinancialDataStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory financial data store.
    """
    async for ac in _client_for(store):
        yield ac


@pytest_asyncio.fixture
async def client_with_broken_store(
    broken_store: SqlFinancialDataStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose store fails every operation."""
    async for ac in _client_for(broken_store):
        yield ac


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def borrower() -> Borrower:
    return Borrower(
        name="Alex Citizen",
        dob="1990-01-01",
        email="a@x.com",
        credit_score=720,
    )


@pytest.fixture
def borrower_request() -> dict:
    """Request body for registering a@x.com."""
    return {
        "name": "Alex Citizen",
        "dob": "1990-01-01",
        "email": "a@x.com",
        "creditScore": 720,
    }
