"""
Prometheus metrics for the txfeed publisher.
Focus on publish outcomes and Golden Signals.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Create a custom registry for our metrics
metrics_registry = CollectorRegistry()

# ====== PUBLISHER METRICS ======

# Individual calls to the messaging client
publish_attempts_total = Counter(
    "publish_attempts_total",
    "Total publish attempts sent to the messaging client",
    ["topic", "status"],  # success, failed
    registry=metrics_registry,
)

# Final outcome per record
transaction_records_total = Counter(
    "transaction_records_total",
    "Transaction records by final outcome",
    ["topic", "outcome"],  # published, abandoned, exhausted
    registry=metrics_registry,
)

# Time slept between attempts
retry_backoff_seconds = Histogram(
    "retry_backoff_seconds",
    "Back-off delay before a publish retry",
    ["topic"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
    registry=metrics_registry,
)

# ====== GOLDEN SIGNALS ======

# 1. TRAFFIC - Request rate
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
    registry=metrics_registry,
)

# 2. LATENCY - Response time
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
    registry=metrics_registry,
)

# 3. ERRORS - Error rate
http_requests_5xx_total = Counter(
    "http_requests_5xx_total",
    "Total HTTP 5xx errors",
    ["method", "endpoint"],
    registry=metrics_registry,
)

http_requests_4xx_total = Counter(
    "http_requests_4xx_total",
    "Total HTTP 4xx errors",
    ["method", "endpoint"],
    registry=metrics_registry,
)

# ====== PUBLISHER METRIC FUNCTIONS ======


def record_publish_attempt(topic: str, status: str) -> None:
    """Record a single messaging client call (success/failed)."""
    publish_attempts_total.labels(topic=topic, status=status).inc()


def record_transaction_outcome(topic: str, outcome: str) -> None:
    """Record the settled outcome of one record (published/abandoned/exhausted)."""
    transaction_records_total.labels(topic=topic, outcome=outcome).inc()


def record_retry_backoff(topic: str, delay_seconds: float) -> None:
    retry_backoff_seconds.labels(topic=topic).observe(delay_seconds)


# ====== GOLDEN SIGNALS FUNCTIONS ======


def record_http_request(
    method: str, endpoint: str, status_code: int, duration: float
) -> None:
    """Record HTTP request metrics with golden signals."""
    # Traffic
    http_requests_total.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()

    # Latency
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )

    # Errors by status code class
    if 400 <= status_code < 500:
        http_requests_4xx_total.labels(method=method, endpoint=endpoint).inc()
    elif 500 <= status_code < 600:
        http_requests_5xx_total.labels(method=method, endpoint=endpoint).inc()


def get_metrics_endpoint() -> tuple[bytes, str]:
    """Get metrics for Prometheus scraping."""
    return generate_latest(metrics_registry), CONTENT_TYPE_LATEST
