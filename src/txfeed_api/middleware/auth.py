"""
Shared-token authentication for the publishing endpoints.
"""

import hmac

from fastapi import Request, status
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from txfeed_api.config.settings import TOKEN_HEADER, settings
from txfeed_api.models.responses import ErrorResponse


def _reject(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details={"header": TOKEN_HEADER})
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


class APITokenMiddleware(BaseHTTPMiddleware):
    """Require the shared API token on every route that publishes to the bus.

    Health, metrics and the OpenAPI docs stay open so that probes and scrapers
    do not need the secret.
    """

    PROTECTED_PREFIXES = ("/transactions",)

    def _is_protected(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix + "/")
            for prefix in self.PROTECTED_PREFIXES
        )

    async def dispatch(self, request: Request, call_next):
        if not self._is_protected(request.url.path):
            return await call_next(request)

        if not settings.api_token:
            logger.error(f"Refusing {request.url.path}: API token is not configured")
            return _reject(
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "ServiceUnavailable",
                "API token is not configured",
            )

        token = request.headers.get(TOKEN_HEADER, "")
        if not hmac.compare_digest(token.encode(), settings.api_token.encode()):
            logger.warning(f"Rejected {request.url.path}: invalid or missing API token")
            return _reject(
                status.HTTP_401_UNAUTHORIZED,
                "Unauthorized",
                "Invalid or missing API token",
            )

        return await call_next(request)
