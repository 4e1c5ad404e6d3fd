"""
FastAPI middleware for automatic observability.
Captures HTTP metrics and structured logging.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from txfeed.logging import clear_request_id, set_request_id
from txfeed.observability import get_metrics_endpoint, record_http_request


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware to automatically capture HTTP metrics and logs."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Generate or extract request_id for tracing
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        start_time = time.time()

        set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_request_id()

        record_http_request(
            method=request.method,
            endpoint=request.url.path,
            status_code=response.status_code,
            duration=time.time() - start_time,
        )

        response.headers["X-Request-ID"] = request_id
        return response


def add_observability_middleware(app: FastAPI) -> None:
    """Add observability middleware to FastAPI app."""
    app.add_middleware(ObservabilityMiddleware)


def add_metrics_endpoint(app: FastAPI) -> None:
    """Add metrics endpoint for Prometheus scraping."""

    @app.get("/metrics")
    async def metrics():
        """Prometheus metrics endpoint."""
        content, content_type = get_metrics_endpoint()
        return Response(content=content, media_type=content_type)
