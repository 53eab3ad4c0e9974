"""
Shared Application Models

Responsibility:
    Contains shared models used across Application Layer.
    Prevents circular dependencies and code duplication.

Contains:
    - JobStatus: Enum for job lifecycle states
    - FileStatus: Per-file entry of a status report

Does NOT contain:
    - HTTP models (belongs to API Layer)
    - Infrastructure details (belongs to Infrastructure Layer)
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """
    Status of a stub job.

    Values are capitalised to match the contract of the real job creator API.

    Attributes:
        PENDING: Simulated processing window still open
        COMPLETE: Window elapsed (or job unknown); results "available"
    """

    PENDING = "Pending"
    COMPLETE = "Complete"


class FileStatus(BaseModel):
    """
    Status of one output file of a job.

    Attributes:
        name: Output file name (e.g. "example.csv")
        status: Same value as the job status
        url: Download location, only set once the job is complete
    """

    name: str
    status: JobStatus
    url: Optional[str] = Field(default=None)
