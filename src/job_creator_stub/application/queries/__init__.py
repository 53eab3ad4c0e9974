"""
Application Queries (CQRS read side)

Exports:
    - GetJobStatusQuery, GetJobStatusQueryHandler, JobStatusResult
"""

from .get_job_status import GetJobStatusQuery, GetJobStatusQueryHandler, JobStatusResult

__all__ = ["GetJobStatusQuery", "GetJobStatusQueryHandler", "JobStatusResult"]
