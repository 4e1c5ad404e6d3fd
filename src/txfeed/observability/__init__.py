"""
Observability module for the txfeed publisher.
Provides metrics capabilities.
"""

from txfeed.observability.metrics import (
    get_metrics_endpoint,
    metrics_registry,
    record_http_request,
    record_publish_attempt,
    record_retry_backoff,
    record_transaction_outcome,
)

__all__ = [
    "metrics_registry",
    "record_publish_attempt",
    "record_transaction_outcome",
    "record_retry_backoff",
    "record_http_request",
    "get_metrics_endpoint",
]
