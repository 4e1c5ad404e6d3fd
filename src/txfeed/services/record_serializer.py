"""
JSON payload encoding for published transactions.

Payload contract with downstream consumers:

    {"refNo": "...", "apNo": "...", "cusip": "...", "quantity": "100",
     "amount": "1234.50", "settlementDate": "2025-04-24",
     "tradeDate": "2025-04-22", "fmu": "...", "closeOfBusinessDate": "2025-04-22"}

Keys appear in that order. Absent optional fields are omitted (never null),
decimals are strings so scale is preserved, and dates are ISO formatted.
"""

import json
from datetime import date
from decimal import Decimal
from typing import Any, Dict

from txfeed.events import PublishedTransaction

# Record attribute -> payload key, in payload order
PAYLOAD_FIELDS = (
    ("ref_no", "refNo"),
    ("ap_no", "apNo"),
    ("cusip", "cusip"),
    ("quantity", "quantity"),
    ("amount", "amount"),
    ("settlement_date", "settlementDate"),
    ("trade_date", "tradeDate"),
    ("fmu", "fmu"),
    ("close_of_business_date", "closeOfBusinessDate"),
)


def _encode_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


def to_payload(record: PublishedTransaction) -> Dict[str, Any]:
    """Build the payload dict, skipping fields that are ``None``."""
    payload = {}
    for attribute, key in PAYLOAD_FIELDS:
        value = getattr(record, attribute)
        if value is not None:
            payload[key] = _encode_value(value)
    return payload


def serialize(record: PublishedTransaction) -> str:
    """Encode a stamped transaction as a compact JSON string."""
    return json.dumps(to_payload(record), separators=(",", ":"), ensure_ascii=False)
