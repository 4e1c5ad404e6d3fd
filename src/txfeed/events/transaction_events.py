"""
Transaction record models for topic publishing.
"""

import re
from dataclasses import asdict, dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from txfeed.exceptions import TransactionValidationError

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _require_ref_no(ref_no: Any) -> None:
    if not isinstance(ref_no, str) or not ref_no.strip():
        raise TransactionValidationError("ref_no", "must be a non-empty string")


@dataclass(frozen=True)
class Transaction:
    """A transaction record before it is stamped for publishing.

    Every field except ``ref_no`` is optional; ``None`` means the value is
    unknown or not applicable.
    """

    ref_no: str
    ap_no: Optional[str] = None
    cusip: Optional[str] = None
    quantity: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    settlement_date: Optional[date] = None
    trade_date: Optional[date] = None
    fmu: Optional[str] = None

    def __post_init__(self):
        _require_ref_no(self.ref_no)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PublishedTransaction:
    """A transaction stamped with the close of business date it was published for."""

    ref_no: str
    close_of_business_date: str
    ap_no: Optional[str] = None
    cusip: Optional[str] = None
    quantity: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    settlement_date: Optional[date] = None
    trade_date: Optional[date] = None
    fmu: Optional[str] = None

    def __post_init__(self):
        _require_ref_no(self.ref_no)
        stamped = self.close_of_business_date
        # fromisoformat alone also takes 20250422 and week dates
        if not isinstance(stamped, str) or not ISO_DATE.fullmatch(stamped):
            raise TransactionValidationError(
                "close_of_business_date", f"expected YYYY-MM-DD, got {stamped!r}"
            )
        try:
            date.fromisoformat(stamped)
        except ValueError as e:
            raise TransactionValidationError(
                "close_of_business_date", f"not a calendar date ({e})"
            )

    @classmethod
    def from_transaction(
        cls, transaction: Transaction, close_of_business_date: str
    ) -> "PublishedTransaction":
        """Copy every field of ``transaction`` and add the stamped date."""
        values = {f.name: getattr(transaction, f.name) for f in fields(transaction)}
        return cls(close_of_business_date=close_of_business_date, **values)

    def to_transaction(self) -> Transaction:
        """Drop the stamped date, returning the underlying raw record."""
        values = {f.name: getattr(self, f.name) for f in fields(Transaction)}
        return Transaction(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
