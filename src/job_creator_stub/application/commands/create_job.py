"""
CreateJobCommand - CQRS Write Command

Encapsulates a job creation request and the handler that "submits" it.

Responsibility:
    - Data holder for the job description (dimensions, file formats)
    - Lenient decoding of the raw JSON body (unknown fields ignored)
    - Handler: mint a job ID and register it as pending

Architecture Notes:
    - Part of Application Layer (orchestration)
    - The job description is accepted but never acted upon
    - Handler depends on PendingJobRegistry (injected)
"""

import logging
from typing import Any, Callable, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from job_creator_stub.domain.shared.exceptions import InvalidJobRequestError
from job_creator_stub.infrastructure.registry import PendingJobRegistry

logger = logging.getLogger(__name__)


class Dimension(BaseModel):
    """
    A dataset dimension and the options selected for it.

    Examples:
        >>> Dimension(id="sex", options=["male", "female"])
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    options: List[str] = Field(default_factory=list)


class CreateJobCommand(BaseModel):
    """
    Job creation request.

    All fields are optional and unknown fields are ignored, mirroring how the
    real API decodes its body.

    Attributes:
        id: Dataset ID the job filters
        dimensions: Dimension filters to apply
        file_formats: Requested output formats (JSON key "fileFormats")
        s3_url: Source file location (JSON key "s3url")
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = ""
    dimensions: List[Dimension] = Field(default_factory=list)
    file_formats: List[str] = Field(default_factory=list, alias="fileFormats")
    s3_url: str = Field(default="", alias="s3url")

    @field_validator("dimensions", "file_formats", mode="before")
    @classmethod
    def null_list_as_empty(cls, value: Any) -> Any:
        # JSON null decodes to an empty list, like a missing field
        return [] if value is None else value

    @field_validator("id", "s3_url", mode="before")
    @classmethod
    def null_string_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_json(cls, body: bytes) -> "CreateJobCommand":
        """
        Decode a raw request body.

        Args:
            body: Raw bytes of the HTTP request body

        Returns:
            CreateJobCommand

        Raises:
            InvalidJobRequestError: If body is not JSON or has wrongly typed fields

        Examples:
            >>> CreateJobCommand.from_json(b'{"fileFormats": ["CSV"]}').file_formats
            ['CSV']
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise InvalidJobRequestError(str(e), errors=e.errors(include_url=False))


class CreateJobResult(BaseModel):
    """Result DTO returned by CreateJobCommandHandler."""

    id: str


class CreateJobCommandHandler:
    """
    Handler that accepts a job and starts its simulated processing.

    Usage:
        handler = CreateJobCommandHandler(registry)
        result = await handler.handle(command)
    """

    def __init__(
        self,
        registry: PendingJobRegistry,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Initialize with dependencies.

        Args:
            registry: PendingJobRegistry shared with the status query handler
            id_factory: Job ID generator (default: random UUID4 string)
        """
        self.registry = registry
        self.id_factory = id_factory or (lambda: str(uuid4()))

    async def handle(self, command: CreateJobCommand) -> CreateJobResult:
        """
        Create a job.

        Process Flow:
            1. Mint a fresh job ID
            2. Register it as pending (expiry is implicit)
            3. Return the ID

        Args:
            command: Decoded job description (not otherwise used)

        Returns:
            CreateJobResult with the new job ID
        """
        job_id = self.id_factory()
        self.registry.register(job_id)

        logger.info(
            f"Job {job_id} created: dataset={command.id!r} "
            f"dimensions={len(command.dimensions)} formats={command.file_formats}"
        )
        return CreateJobResult(id=job_id)
