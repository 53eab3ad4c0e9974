"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites (unit, integration).

Fixtures:
    - fake_clock: Manually advanced monotonic clock
    - registry: PendingJobRegistry (4s delay) driven by fake_clock
    - settings: Settings with defaults (no environment lookup)
    - app: FastAPI app built around registry and settings
    - test_client: FastAPI TestClient for API testing

Architecture Notes:
    - Every test gets its own registry, so job state never leaks between tests
    - TestClient doesn't require running server
    - fake_clock makes expiry deterministic: no sleeping in unit tests

Usage:
    def test_something(test_client, fake_clock):
        job_id = test_client.post("/job", json={}).json()["id"]
        fake_clock.advance(5)
        assert test_client.get(f"/job/{job_id}").json()["status"] == "Complete"
"""

import logging
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from job_creator_stub.api.main import create_app
from job_creator_stub.infrastructure.registry import PendingJobRegistry
from job_creator_stub.shared.config import Settings

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class FakeClock:
    """Callable monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# REGISTRY FIXTURES
# ============================================================================


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def registry(fake_clock) -> PendingJobRegistry:
    """
    Provide an empty PendingJobRegistry with the default 4s delay.

    Time only passes via fake_clock.advance().
    """
    return PendingJobRegistry(delay_seconds=4, clock=fake_clock)


# ============================================================================
# FASTAPI FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Provide default Settings without reading the environment."""
    return Settings()


@pytest.fixture
def app(settings, registry):
    """Provide a FastAPI app serving from the test's registry."""
    return create_app(settings=settings, registry=registry)


@pytest.fixture
def test_client(app) -> Generator[TestClient, None, None]:
    """
    Provide FastAPI TestClient for API testing.

    Yields:
        TestClient: FastAPI test client
    """
    with TestClient(app) as client:
        logger.info("FastAPI TestClient created")
        yield client
    logger.info("FastAPI TestClient closed")
