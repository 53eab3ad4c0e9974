"""
FastAPI Application Setup

Main entry point for the job creator stub API.

Responsibility:
    - FastAPI app initialization
    - Pending job registry construction and injection (app.state)
    - Router registration
    - CORS, request id, timeout and request logging middleware
    - Global exception handlers
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Each create_app() call owns an independent PendingJobRegistry, so
      tests never share job state

Contains:
    - create_app() factory function
    - Global exception handlers
    - Health check endpoint: GET /health
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from job_creator_stub import __version__
from job_creator_stub.api.middleware import (
    internal_error_response,
    make_request_id_middleware,
    make_timeout_middleware,
    request_logging_middleware,
    unhandled_exception_middleware,
)
from job_creator_stub.api.routers import jobs
from job_creator_stub.api.schemas.common import ErrorResponse, UnsupportedMediaTypeResponse
from job_creator_stub.domain.shared.exceptions import (
    DomainException,
    InvalidJobRequestError,
    UnsupportedMediaTypeError,
)
from job_creator_stub.infrastructure.registry import PendingJobRegistry
from job_creator_stub.shared.config import Settings, get_settings

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: API version
        timestamp: Unix timestamp of health check
        pending_jobs: Number of jobs currently reported as Pending
    """

    status: str = "ok"
    version: str = __version__
    timestamp: float
    pending_jobs: int = 0


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def unsupported_media_type_handler(
    request: Request, exc: UnsupportedMediaTypeError
):
    """
    Convert UnsupportedMediaTypeError to 415 with the real API's body.

    Examples:
        >>> # POST /job with Content-Type: text/plain
        >>> # Returns: 415 {"timestamp": 1484652342702, "status": 415,
        >>> #   "error": "Unsupported Media Type",
        >>> #   "exception": "org.springframework.web.HttpMediaTypeNotSupportedException",
        >>> #   "message": "Content type 'text/plain' not supported", "path": "/job"}
    """
    body = UnsupportedMediaTypeResponse(
        timestamp=int(time.time() * 1000),
        message=exc.message,
        path=exc.path,
    )

    logger.warning(
        f"Unsupported media type {exc.content_type!r} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        content=body.model_dump(),
    )


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Mapping:
        - InvalidJobRequestError -> 400 Bad Request, code INVALID_JOB_REQUEST
        - Other DomainException -> 400 Bad Request

    Returns:
        JSONResponse with ErrorResponse format
    """
    if isinstance(exc, InvalidJobRequestError):
        error_code = "INVALID_JOB_REQUEST"
    else:
        error_code = exc.__class__.__name__.replace("Error", "").upper()

    error_response = ErrorResponse(
        code=error_code,
        message=exc.message,
        details={"exception_type": exc.__class__.__name__},
    )

    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response.model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Route errors are already converted by unhandled_exception_middleware;
    this catches whatever fails in the outer middleware itself.
    """
    return internal_error_response(request, exc)


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[PendingJobRegistry] = None,
) -> FastAPI:
    """
    FastAPI application factory.

    Args:
        settings: Configuration (default: get_settings(), read from environment)
        registry: Pending job registry to serve from (default: a new one using
            settings.job_completion_delay_seconds)

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # uvicorn job_creator_stub.api.main:app
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level)

    if registry is None:
        registry = PendingJobRegistry(delay_seconds=settings.job_completion_delay_seconds)

    app = FastAPI(
        title="Job Creator API Stub",
        version=__version__,
        description=(
            "Stand-in for the dataset job creator API. Jobs report Pending for "
            "a fixed delay after submission and Complete afterwards."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.settings = settings
    app.state.registry = registry

    # Middleware: the last one added runs first
    app.middleware("http")(unhandled_exception_middleware)
    app.middleware("http")(request_logging_middleware)
    app.middleware("http")(make_timeout_middleware(settings.request_timeout_seconds))
    app.middleware("http")(make_request_id_middleware(settings.request_id_length))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["Content-Type"],
    )

    # Register global exception handlers
    app.add_exception_handler(UnsupportedMediaTypeError, unsupported_media_type_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(jobs.router)

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        tags=["health"],
    )
    async def health_check(request: Request) -> HealthCheckResponse:
        """Simple status indicator for monitoring systems."""
        return HealthCheckResponse(
            status="ok",
            version=__version__,
            timestamp=time.time(),
            pending_jobs=request.app.state.registry.pending_count(),
        )

    logger.info(
        f"FastAPI application created: jobs complete after "
        f"{registry.delay_seconds}s, handler timeout {settings.request_timeout_seconds}s"
    )

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn job_creator_stub.api.main:app
app = create_app()
