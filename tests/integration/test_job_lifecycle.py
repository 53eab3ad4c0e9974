"""
Integration tests for the job lifecycle against the real clock.

Covers:
- Submit -> poll Pending -> wait -> poll Complete over HTTP
- Default 4s window (register, wait 5s, complete)
- Concurrent registrations with time passing
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from job_creator_stub.api.main import create_app
from job_creator_stub.infrastructure.registry import PendingJobRegistry
from job_creator_stub.shared.config import Settings


@pytest.fixture
def short_delay_client():
    """TestClient whose jobs complete after 0.3s of real time."""
    settings = Settings(job_completion_delay_seconds=0.3)
    app = create_app(settings=settings)
    with TestClient(app) as client:
        yield client


def poll_until_complete(client, job_id, timeout=5.0, interval=0.05):
    """Poll GET /job/{id} like a frontend would; return every status seen."""
    seen = []
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        data = client.get(f"/job/{job_id}").json()
        seen.append(data["status"])
        if data["status"] == "Complete":
            return seen, data
        time.sleep(interval)
    raise AssertionError(f"Job {job_id} still pending after {timeout}s")


def test_submit_and_poll_until_complete(short_delay_client):
    # Act
    response = short_delay_client.post(
        "/job", json={"id": "CPI", "fileFormats": ["CSV"]}
    )
    job_id = response.json()["id"]
    seen, final = poll_until_complete(short_delay_client, job_id)

    # Assert - Pending first, then a single switch to Complete
    assert response.status_code == 201
    assert seen[0] == "Pending"
    assert seen[-1] == "Complete"
    assert seen.index("Complete") == len(seen) - 1
    assert final["files"][0]["url"] == "https://www.ons.gov.uk"


def test_job_stays_complete(short_delay_client):
    job_id = short_delay_client.post("/job", json={}).json()["id"]
    poll_until_complete(short_delay_client, job_id)

    for _ in range(3):
        time.sleep(0.05)
        assert short_delay_client.get(f"/job/{job_id}").json()["status"] == "Complete"


@pytest.mark.slow
def test_default_window_scenario():
    """register("abc") with D=4s; pending now; after 5s, not pending."""
    registry = PendingJobRegistry(delay_seconds=4)

    registry.register("abc")
    assert registry.is_pending("abc") is True

    time.sleep(5)

    assert registry.is_pending("abc") is False


def test_concurrent_registrations_expire_together():
    registry = PendingJobRegistry(delay_seconds=1.0)
    job_ids = [str(uuid4()) for _ in range(100)]
    start = threading.Barrier(len(job_ids))

    def register(job_id):
        start.wait()
        registry.register(job_id)

    with ThreadPoolExecutor(max_workers=len(job_ids)) as pool:
        list(pool.map(register, job_ids))

    with ThreadPoolExecutor(max_workers=16) as pool:
        assert all(pool.map(registry.is_pending, job_ids))

    time.sleep(1.2)

    with ThreadPoolExecutor(max_workers=16) as pool:
        assert not any(pool.map(registry.is_pending, job_ids))
    assert registry.pending_count() == 0
