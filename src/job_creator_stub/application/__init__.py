"""
Application Layer Package

Responsibility:
    Coordinates the two use cases of the stub following the CQRS split.

Contains:
    - commands/: CreateJobCommand (write)
    - queries/: GetJobStatusQuery (read)
    - models: Shared enums and DTOs

Does NOT contain:
    - HTTP handling (in API Layer)
    - Registry internals (in Infrastructure Layer)
"""

# Re-export commonly used models for convenience
from job_creator_stub.application.models import FileStatus, JobStatus

__all__ = [
    "FileStatus",
    "JobStatus",
]
