"""
API models module.
"""

from txfeed_api.models.requests import PublishTransactionsRequest, TransactionPayload
from txfeed_api.models.responses import (
    ErrorResponse,
    HealthCheckResponse,
    PublishResponse,
)

__all__ = [
    # Requests
    "PublishTransactionsRequest",
    "TransactionPayload",
    # Responses
    "ErrorResponse",
    "HealthCheckResponse",
    "PublishResponse",
]
