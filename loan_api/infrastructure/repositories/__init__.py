"""Repository implementations."""

from .financial_data_store import SqlFinancialDataStore

__all__ = [
    "SqlFinancialDataStore",
]
