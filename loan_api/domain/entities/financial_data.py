"""Store-level item of the key/sort-keyed financial data table."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FinancialDataItem:
    """
    A single record addressed by (partition key, sort key).

    Each item is written atomically; there are no multi-item writes.

    Attributes:
        pk: Partition key, the owning identity (borrower email)
        sk: Type-discriminated sort key
        attributes: Item payload
        created_at: Set by the store when the item is read back
    """

    pk: str
    sk: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
