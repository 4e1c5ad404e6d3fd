"""
Request models module.
"""

from txfeed_api.models.requests.transaction_request import (
    PublishTransactionsRequest,
    TransactionPayload,
)

__all__ = [
    "PublishTransactionsRequest",
    "TransactionPayload",
]
