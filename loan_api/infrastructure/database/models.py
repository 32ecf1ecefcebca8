"""SQLAlchemy ORM models for the financial data table."""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    DateTime,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from loan_api.core.config import settings


class Base(DeclarativeBase):
    pass


class FinancialDataModel(Base):
    """
    One item of the key/sort-keyed financial data table.

    (pk, sk) is unique; the surrogate ``id`` only records insertion order
    for partition scans.
    """

    __tablename__ = settings.financial_data_table_name
    __table_args__ = (
        UniqueConstraint("pk", "sk", name="uq_financial_data_pk_sk"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pk: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    sk: Mapped[str] = mapped_column(String(255), nullable=False)
    attributes: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
