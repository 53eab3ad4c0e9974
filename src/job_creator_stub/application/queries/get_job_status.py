"""
GetJobStatusQuery - CQRS Read Query

Query object and handler for reporting the status of a stub job.

Responsibility:
    - Query: Data holder with job_id to query
    - Handler: Consults PendingJobRegistry and synthesizes a status report

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Read-only: never mutates the registry from the caller's point of view
    - Unknown job IDs are reported as Complete, never as "not found"
"""

import logging
from typing import List, Sequence

from pydantic import BaseModel, Field

from job_creator_stub.application.models import FileStatus, JobStatus
from job_creator_stub.infrastructure.registry import PendingJobRegistry

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAMES = ("example.csv",)
DEFAULT_RESULT_URL = "https://www.ons.gov.uk"


class GetJobStatusQuery(BaseModel):
    """
    Query object containing job ID to retrieve status for.

    Attributes:
        job_id: Opaque job identifier (any string is accepted)
    """

    job_id: str = Field(description="Job ID returned from POST /job")


class JobStatusResult(BaseModel):
    """
    Result DTO returned by GetJobStatusQueryHandler.

    Attributes:
        id: Queried job ID
        status: Pending or Complete
        files: One entry per stub output file, all sharing the job status
    """

    id: str
    status: JobStatus
    files: List[FileStatus] = Field(default_factory=list)

    @property
    def result_ready(self) -> bool:
        return self.status == JobStatus.COMPLETE


class GetJobStatusQueryHandler:
    """
    Handler that reports Pending or Complete for a job.

    Architecture:
        API Layer -> QueryHandler -> PendingJobRegistry

    Usage:
        handler = GetJobStatusQueryHandler(registry)
        result = await handler.handle(GetJobStatusQuery(job_id="abc"))
    """

    def __init__(
        self,
        registry: PendingJobRegistry,
        file_names: Sequence[str] = DEFAULT_FILE_NAMES,
        result_url: str = DEFAULT_RESULT_URL,
    ) -> None:
        """
        Initialize with dependencies.

        Args:
            registry: PendingJobRegistry shared with the create command handler
            file_names: Output files listed in every report
            result_url: Download location reported once a job is complete
        """
        self.registry = registry
        self.file_names = tuple(file_names)
        self.result_url = result_url

    async def handle(self, query: GetJobStatusQuery) -> JobStatusResult:
        """
        Build the status report for a job.

        Process Flow:
            1. Ask the registry whether job_id is still pending
            2. Pending: every file is Pending, no URL
            3. Otherwise: every file is Complete with result_url

        Args:
            query: GetJobStatusQuery with job_id

        Returns:
            JobStatusResult

        Examples:
            >>> result = await handler.handle(GetJobStatusQuery(job_id="never-seen"))
            >>> result.status
            <JobStatus.COMPLETE: 'Complete'>
        """
        if self.registry.is_pending(query.job_id):
            status = JobStatus.PENDING
            files = [FileStatus(name=name, status=status) for name in self.file_names]
        else:
            status = JobStatus.COMPLETE
            files = [
                FileStatus(name=name, status=status, url=self.result_url)
                for name in self.file_names
            ]

        logger.debug(f"Job {query.job_id} status: {status.value}")
        return JobStatusResult(id=query.job_id, status=status, files=files)
