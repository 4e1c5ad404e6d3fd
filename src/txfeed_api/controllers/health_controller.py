"""
Readiness of the publisher and its message bus connection.
"""

from fastapi import APIRouter, Response, status
from loguru import logger

from txfeed.exceptions import SystemException
from txfeed.services import get_transaction_publisher
from txfeed_api.models.responses import HealthCheckResponse

router = APIRouter(prefix="/health", tags=["health"])


def _messaging_state(client) -> str:
    # The Kafka producer is created on first publish, so "idle" is not a failure
    is_connected = getattr(client, "is_connected", None)
    if is_connected is None:
        return "unknown"
    return "connected" if is_connected() else "idle"


@router.get(
    "",
    response_model=HealthCheckResponse,
    summary="Health check",
    description="Reports whether the publisher can be built and whether the bus is reachable",
    responses={503: {"model": HealthCheckResponse}},
)
def health_check(response: Response):
    services = {"api": "healthy"}

    try:
        publisher = get_transaction_publisher()
    except SystemException as exc:
        logger.error(f"Publisher is not ready: {exc}")
        services["publisher"] = "unavailable"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthCheckResponse(status="degraded", services=services)

    services["publisher"] = "ready"
    services["messaging"] = _messaging_state(publisher.client)
    return HealthCheckResponse(services=services, topic=publisher.topic)
