"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI TestClient bound to a per-test registry
- Sample data
"""

from uuid import uuid4

import pytest


@pytest.fixture
def client(test_client):
    """FastAPI TestClient for testing endpoints (per-test registry)."""
    return test_client


@pytest.fixture
def sample_job_id():
    """Generate a sample job ID (UUID)."""
    return str(uuid4())


@pytest.fixture
def job_payload():
    """A complete job creation body as the frontend sends it."""
    return {
        "id": "CPI15",
        "dimensions": [
            {"id": "time", "options": ["2016 Jan", "2016 Feb"]},
            {"id": "aggregate", "options": ["CPI (overall index)"]},
        ],
        "fileFormats": ["CSV"],
        "s3url": "s3://dp-frontend-florence-file-uploads/cpi.csv",
    }
