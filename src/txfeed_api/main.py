"""
FastAPI application main module.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import txfeed.logging  # noqa: F401  Ensure logging is configured
from txfeed.exceptions import BusinessException, SystemException
from txfeed.messaging import close_kafka_client
from txfeed.services import get_transaction_publisher
from txfeed_api.config.settings import settings
from txfeed_api.controllers.health_controller import router as health_router
from txfeed_api.controllers.transaction_controller import router as transaction_router
from txfeed_api.middleware import (
    APITokenMiddleware,
    add_metrics_endpoint,
    add_observability_middleware,
)
from txfeed_api.models.responses import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Starting txfeed API...")
    # Builds the calendar now so a bad TXFEED_TIMEZONE stops startup
    publisher = get_transaction_publisher()
    logger.info(f"Publisher ready for topic {publisher.topic}")

    yield

    logger.info("Shutting down txfeed API...")
    close_kafka_client()
    logger.info("txfeed API shutdown complete")


def create_app() -> FastAPI:
    """Create FastAPI application."""
    settings.validate()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Add API token middleware first (before observability)
    app.add_middleware(APITokenMiddleware)
    logger.info("API token authentication middleware enabled")

    add_observability_middleware(app)
    add_metrics_endpoint(app)
    logger.info("Observability middleware and metrics endpoint enabled")

    if settings.is_production():
        app.add_middleware(
            TrustedHostMiddleware, allowed_hosts=settings.get_allowed_hosts()
        )
        logger.info(
            f"Production security middleware enabled: trusted hosts {settings.get_allowed_hosts()}"
        )

    app.include_router(transaction_router)
    app.include_router(health_router)

    @app.exception_handler(BusinessException)
    async def business_exception_handler(request: Request, exc: BusinessException):
        logger.warning(f"Rejected request to {request.url.path}: {exc}")
        error_response = ErrorResponse(
            error=type(exc).__name__, message=exc.message, details=exc.details
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_response.model_dump(mode="json"),
        )

    @app.exception_handler(SystemException)
    async def system_exception_handler(request: Request, exc: SystemException):
        logger.error(f"System error in {request.url.path}: {exc}")
        error_response = ErrorResponse(
            error=type(exc).__name__, message=exc.message, details=exc.details
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception in {request.url.path}: {exc}")
        error_response = ErrorResponse(
            error="InternalServerError", message="An unexpected error occurred"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(mode="json"),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "txfeed_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
