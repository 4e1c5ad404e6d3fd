"""
Publishing services for transaction records.
"""

from txfeed.services.record_serializer import serialize, to_payload
from txfeed.services.retry_policy import (
    DEFAULT_RETRY_STATE,
    RetryPhase,
    RetryState,
    default_retry_state,
)
from txfeed.services.transaction_publisher import (
    RecordOutcome,
    TransactionPublisher,
    get_transaction_publisher,
)

__all__ = [
    "DEFAULT_RETRY_STATE",
    "RecordOutcome",
    "RetryPhase",
    "RetryState",
    "TransactionPublisher",
    "default_retry_state",
    "get_transaction_publisher",
    "serialize",
    "to_payload",
]
