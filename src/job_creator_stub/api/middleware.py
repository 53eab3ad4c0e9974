"""
HTTP Middleware

Cross-cutting request handling for the stub API.

Contains:
    - request_logging_middleware: log method, path, status, duration
    - make_request_id_middleware: assign/echo X-Request-Id
    - make_timeout_middleware: answer 503 when a handler runs too long
    - unhandled_exception_middleware: turn unexpected errors into a 500

Registration order (see create_app): CORS outermost, then request id, then
timeout, then logging, then unhandled errors innermost, so every log line
carries the request id and even 500 and timeout responses get CORS and
request id headers.
"""

import asyncio
import logging
import secrets
import string
import time

from fastapi import Request, status
from fastapi.responses import JSONResponse

from job_creator_stub.api.schemas.common import ErrorResponse

# Configure logger
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"
_REQUEST_ID_ALPHABET = string.ascii_letters + string.digits


def new_request_id(length: int) -> str:
    """
    Generate a random alphanumeric request ID.

    Examples:
        >>> len(new_request_id(16))
        16
    """
    return "".join(secrets.choice(_REQUEST_ID_ALPHABET) for _ in range(length))


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: POST /job [request_id=abc...]"
        INFO: "Request completed: POST /job - 201 - 0.003s [request_id=abc...]"

    Args:
        request: FastAPI Request object
        call_next: Next middleware/endpoint in chain

    Returns:
        Response from endpoint
    """
    request_id = getattr(request.state, "request_id", "-")

    # Log incoming request
    logger.info(f"Incoming request: {request.method} {request.url.path} [request_id={request_id}]")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s [request_id={request_id}]"
    )

    return response


def make_request_id_middleware(length: int = 16):
    """
    Build middleware that tags every request with an ID.

    An incoming X-Request-Id header is reused; otherwise a random
    alphanumeric ID of `length` characters is generated. The ID is stored on
    request.state.request_id and echoed in the response header.

    Args:
        length: Length of generated IDs

    Returns:
        Middleware coroutine for app.middleware("http")
    """

    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id(length)
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    return request_id_middleware


def make_timeout_middleware(timeout_seconds: float):
    """
    Build middleware that bounds handler execution time.

    Args:
        timeout_seconds: Maximum time per request

    Returns:
        Middleware coroutine for app.middleware("http")

    Response on timeout:
        503 {"code": "REQUEST_TIMEOUT", "message": "...", "details": {...}}
    """

    async def timeout_middleware(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                f"Request timed out after {timeout_seconds}s: "
                f"{request.method} {request.url.path}"
            )
            error_response = ErrorResponse(
                code="REQUEST_TIMEOUT",
                message="Request took too long to process",
                details={"timeout_seconds": timeout_seconds},
            )
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content=error_response.model_dump(),
            )

    return timeout_middleware


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unexpected exception with its traceback and build the 500 response.

    Returns:
        JSONResponse with ErrorResponse format and 500 status code
    """
    error_response = ErrorResponse(
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error": str(exc), "type": exc.__class__.__name__},
    )

    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(),
    )


async def unhandled_exception_middleware(request: Request, call_next):
    """
    Convert exceptions escaping the routes into a 500 ErrorResponse.

    Runs innermost, so the 500 still passes through the request id and CORS
    middleware on its way out. Starlette's own Exception handler sits outside
    all middleware and would send the response without those headers.

    Args:
        request: FastAPI Request object
        call_next: Next middleware/endpoint in chain

    Returns:
        Response from endpoint, or a 500 JSONResponse
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return internal_error_response(request, exc)
