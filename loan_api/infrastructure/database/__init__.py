"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager
from .models import Base, FinancialDataModel

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "FinancialDataModel",
]
