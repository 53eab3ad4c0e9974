"""
API Router for Job Creation and Status

Responsibility:
    HTTP interface for submitting jobs and polling their status.
    Thin layer that delegates to Application Layer handlers via dependency
    injection.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Handlers are built per request from the registry and settings stored on
      app.state by create_app()
    - No business logic - pure HTTP concerns

Contains:
    - POST /job - Submit a job (201 with its ID)
    - OPTIONS /job - Preflight helper (200, empty body)
    - GET /job/{job_id} - Job status (Pending / Complete)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field

from job_creator_stub.api.schemas.common import ErrorResponse, UnsupportedMediaTypeResponse
from job_creator_stub.application.commands.create_job import (
    CreateJobCommand,
    CreateJobCommandHandler,
)
from job_creator_stub.application.models import JobStatus
from job_creator_stub.application.queries.get_job_status import (
    GetJobStatusQuery,
    GetJobStatusQueryHandler,
)
from job_creator_stub.domain.shared.exceptions import UnsupportedMediaTypeError
from job_creator_stub.infrastructure.registry import PendingJobRegistry
from job_creator_stub.shared.config import Settings

# Configure logger
logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class CreateJobResponse(BaseModel):
    """
    Response model for job creation.

    Attributes:
        id: Job ID to poll with GET /job/{id}
    """

    id: str = Field(description="Identifier of the created job")

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": "3fa85f64-5717-4562-b3fc-2c963f66afa6"}}
    )


class FileStatusResponse(BaseModel):
    """Status of one output file. `url` is omitted until the job completes."""

    name: str
    status: JobStatus
    url: Optional[str] = None


class JobStatusResponse(BaseModel):
    """
    Response model for job status query.

    Attributes:
        id: Queried job ID
        status: "Pending" or "Complete"
        files: Per-file breakdown sharing the job status
    """

    id: str
    status: JobStatus
    files: List[FileStatusResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "status": "Complete",
                "files": [
                    {
                        "name": "example.csv",
                        "status": "Complete",
                        "url": "https://www.ons.gov.uk",
                    }
                ],
            }
        }
    )


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/job",
    tags=["jobs"],
    responses={500: {"model": ErrorResponse, "description": "Internal Server Error"}},
)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def get_registry(request: Request) -> PendingJobRegistry:
    """Return the PendingJobRegistry owned by the running application."""
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    """Return the Settings the running application was created with."""
    return request.app.state.settings


async def get_create_job_command_handler(
    registry: PendingJobRegistry = Depends(get_registry),
) -> CreateJobCommandHandler:
    """
    Dependency injection for CreateJobCommandHandler.

    Returns:
        CreateJobCommandHandler bound to the application's registry
    """
    return CreateJobCommandHandler(registry=registry)


async def get_job_status_query_handler(
    registry: PendingJobRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
) -> GetJobStatusQueryHandler:
    """
    Dependency injection for GetJobStatusQueryHandler.

    Returns:
        GetJobStatusQueryHandler bound to the application's registry and
        configured file names / result URL
    """
    return GetJobStatusQueryHandler(
        registry=registry,
        file_names=settings.file_names,
        result_url=settings.result_url,
    )


def parse_media_type(content_type: Optional[str]) -> str:
    """
    Extract the bare media type from a Content-Type header value.

    Examples:
        >>> parse_media_type("application/json; charset=utf-8")
        'application/json'
        >>> parse_media_type(None)
        ''
    """
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateJobResponse,
    summary="Submit a job",
    description=(
        "Accepts a job description (dataset ID, dimension filters, file formats) "
        "and returns the ID of the created job. The job reports Pending for a "
        "fixed delay and Complete afterwards."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Body is not valid JSON"},
        415: {
            "model": UnsupportedMediaTypeResponse,
            "description": "Content-Type is not application/json",
        },
    },
)
async def create_job(
    request: Request,
    handler: CreateJobCommandHandler = Depends(get_create_job_command_handler),
) -> CreateJobResponse:
    """
    Submit a job.

    Process Flow:
        1. Reject anything that is not application/json (415)
        2. Decode the body leniently (400 on invalid JSON)
        3. Delegate to CreateJobCommandHandler (mint ID, register as pending)
        4. Return 201 with the job ID

    Examples:
        >>> curl -X POST http://localhost:20100/job \\
        ...      -H "Content-Type: application/json" \\
        ...      -d '{"id": "CPI", "fileFormats": ["CSV"]}'
        {"id": "3fa85f64-5717-4562-b3fc-2c963f66afa6"}
    """
    content_type = parse_media_type(request.headers.get("content-type"))
    if content_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError(content_type, request.url.path)

    body = await request.body()
    command = CreateJobCommand.from_json(body)

    result = await handler.handle(command)
    return CreateJobResponse(id=result.id)


@router.options("", status_code=status.HTTP_200_OK, include_in_schema=False)
async def create_job_options() -> Response:
    """Answer bare OPTIONS requests; CORS preflights are handled by CORSMiddleware."""
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/{job_id}",
    status_code=status.HTTP_200_OK,
    response_model=JobStatusResponse,
    response_model_exclude_none=True,
    summary="Get status of a job",
    description=(
        "Reports Pending while the job's simulated processing window is open and "
        "Complete (with a result URL per file) afterwards. Unknown IDs report "
        "Complete."
    ),
)
async def get_job_status(
    job_id: str = Path(..., description="Job ID returned from POST /job"),
    handler: GetJobStatusQueryHandler = Depends(get_job_status_query_handler),
) -> JobStatusResponse:
    """
    Get current status of a job.

    Examples:
        >>> curl http://localhost:20100/job/3fa85f64-5717-4562-b3fc-2c963f66afa6
        {
          "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
          "status": "Pending",
          "files": [{"name": "example.csv", "status": "Pending"}]
        }
    """
    result = await handler.handle(GetJobStatusQuery(job_id=job_id))

    return JobStatusResponse(
        id=result.id,
        status=result.status,
        files=[
            FileStatusResponse(name=f.name, status=f.status, url=f.url)
            for f in result.files
        ],
    )
