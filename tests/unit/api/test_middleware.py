"""
Tests for HTTP middleware (job_creator_stub/api/middleware.py).

Covers:
- X-Request-Id generation and propagation
- Handler timeout -> 503
- Request logging
"""

import asyncio
import logging

from fastapi import FastAPI, Request, status
from fastapi.testclient import TestClient

from job_creator_stub.api.middleware import (
    REQUEST_ID_HEADER,
    make_request_id_middleware,
    make_timeout_middleware,
    new_request_id,
    request_logging_middleware,
)


# ============================================================================
# REQUEST ID
# ============================================================================


def test_new_request_id_length_and_alphabet():
    request_id = new_request_id(16)

    assert len(request_id) == 16
    assert request_id.isalnum()


def test_request_id_generated_when_missing(client):
    response = client.get("/health")

    request_id = response.headers[REQUEST_ID_HEADER]
    assert len(request_id) == 16
    assert request_id.isalnum()


def test_request_id_reused_when_sent(client):
    response = client.get("/health", headers={REQUEST_ID_HEADER: "abc123"})

    assert response.headers[REQUEST_ID_HEADER] == "abc123"


def test_request_id_available_to_handlers():
    app = FastAPI()
    app.middleware("http")(make_request_id_middleware(8))

    @app.get("/echo")
    async def echo(request: Request):
        return {"request_id": request.state.request_id}

    with TestClient(app) as client:
        response = client.get("/echo")

    assert response.json()["request_id"] == response.headers[REQUEST_ID_HEADER]
    assert len(response.json()["request_id"]) == 8


# ============================================================================
# TIMEOUT
# ============================================================================


def _slow_app(timeout_seconds: float) -> FastAPI:
    app = FastAPI()
    app.middleware("http")(make_timeout_middleware(timeout_seconds))

    @app.get("/slow")
    async def slow():
        await asyncio.sleep(1)
        return {"done": True}

    @app.get("/fast")
    async def fast():
        return {"done": True}

    return app


def test_timeout_returns_503():
    with TestClient(_slow_app(0.05)) as client:
        response = client.get("/slow")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    data = response.json()
    assert data["code"] == "REQUEST_TIMEOUT"
    assert data["details"] == {"timeout_seconds": 0.05}


def test_fast_request_passes_through_timeout():
    with TestClient(_slow_app(5)) as client:
        response = client.get("/fast")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"done": True}


# ============================================================================
# REQUEST LOGGING
# ============================================================================


def test_request_logging(caplog):
    app = FastAPI()
    app.middleware("http")(request_logging_middleware)

    @app.get("/ping")
    async def ping():
        return {}

    with caplog.at_level(logging.INFO, logger="job_creator_stub.api.middleware"):
        with TestClient(app) as client:
            client.get("/ping")

    messages = [record.getMessage() for record in caplog.records]
    assert any("Incoming request: GET /ping" in m for m in messages)
    assert any("Request completed: GET /ping - 200" in m for m in messages)


def test_request_logging_includes_request_id(client, caplog):
    with caplog.at_level(logging.INFO, logger="job_creator_stub.api.middleware"):
        client.get("/health", headers={REQUEST_ID_HEADER: "trace-me"})

    assert any("request_id=trace-me" in record.getMessage() for record in caplog.records)
