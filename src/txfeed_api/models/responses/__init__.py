"""
Response models module.
"""

from txfeed_api.models.responses.error_responses import ErrorResponse
from txfeed_api.models.responses.system_responses import (
    HealthCheckResponse,
    PublishResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "PublishResponse",
]
