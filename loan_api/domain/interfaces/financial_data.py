"""Persistence ports for the key/sort-keyed financial data store."""

from abc import ABC, abstractmethod
from typing import List, Optional

from loan_api.domain.entities import FinancialDataItem


class FinancialDataWriter(ABC):
    """
    Write capability over the financial data store.

    Every write stores exactly one item atomically. Implementations may use
    a relational database, a key-value service, etc.
    """

    @abstractmethod
    async def put(self, item: FinancialDataItem) -> bool:
        """
        Store an item only if no item exists under the same (pk, sk).

        Args:
            item: The item to store

        Returns:
            True if the item was written, False if the key was already taken
            (the existing item is left untouched)

        Raises:
            InternalError: If the store is unreachable or rejects the write
        """
        ...

    @abstractmethod
    async def append(self, item: FinancialDataItem) -> None:
        """
        Store an item under a key the caller guarantees to be fresh.

        No read-before-write and no conditional logic is involved.

        Args:
            item: The item to store

        Raises:
            InternalError: If the store fails, including a key collision
        """
        ...


class FinancialDataReader(ABC):
    """Read capability over the financial data store."""

    @abstractmethod
    async def get(self, pk: str, sk: str) -> Optional[FinancialDataItem]:
        """
        Retrieve a single item by its full key.

        Returns:
            The item if found, None otherwise

        Raises:
            InternalError: If the store fails
        """
        ...

    @abstractmethod
    async def query(self, pk: str, sk_prefix: str = "") -> List[FinancialDataItem]:
        """
        Range-scan one partition.

        Args:
            pk: Partition key
            sk_prefix: Only items whose sort key starts with this prefix

        Returns:
            Matching items in insertion order

        Raises:
            InternalError: If the store fails
        """
        ...
