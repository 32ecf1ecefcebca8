"""
Domain Interfaces (Ports)
"""

from .financial_data import FinancialDataReader, FinancialDataWriter

__all__ = [
    "FinancialDataReader",
    "FinancialDataWriter",
]
