"""
Sort-key encoding for the financial data table.

Items are addressed by (pk, sk). The partition key is the borrower email;
the sort key starts with a type tag so one partition can hold several kinds
of record:

    BORROWER_PROFILE
        The borrower's profile. Exactly one per partition.

    BORROWING_CAPACITY_CALCULATION#<uuid>#TIMESTAMP#<iso-8601 utc>
        One capacity calculation. The id and timestamp make every key
        unique, so calculations are only ever appended.

Timestamps are rendered as ``YYYY-MM-DDTHH:MM:SS.ffffffZ``.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

BORROWER_PROFILE_SORT_KEY = "BORROWER_PROFILE"
CALCULATION_TYPE_TAG = "BORROWING_CAPACITY_CALCULATION"
TIMESTAMP_TAG = "TIMESTAMP"
SEPARATOR = "#"

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def encode_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as fixed-width UTC ISO-8601."""
    if timestamp.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    return timestamp.astimezone(timezone.utc).strftime(_TIMESTAMP_FORMAT)


def decode_timestamp(value: str) -> datetime:
    return datetime.strptime(value, _TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class CalculationSortKey:
    """Structured sort key of a borrowing capacity calculation."""

    calculation_id: UUID
    timestamp: datetime

    def encode(self) -> str:
        return SEPARATOR.join([
            CALCULATION_TYPE_TAG,
            str(self.calculation_id),
            TIMESTAMP_TAG,
            encode_timestamp(self.timestamp),
        ])

    @classmethod
    def decode(cls, value: str) -> "CalculationSortKey":
        """
        Parse an encoded calculation sort key.

        Raises:
            ValueError: If the value is not a calculation sort key
        """
        parts = value.split(SEPARATOR)
        if (
            len(parts) != 4
            or parts[0] != CALCULATION_TYPE_TAG
            or parts[2] != TIMESTAMP_TAG
        ):
            raise ValueError(f"Not a calculation sort key: {value!r}")

        return cls(
            calculation_id=UUID(parts[1]),
            timestamp=decode_timestamp(parts[3]),
        )

    @staticmethod
    def prefix() -> str:
        """Prefix shared by every calculation sort key, for range scans."""
        return CALCULATION_TYPE_TAG + SEPARATOR
