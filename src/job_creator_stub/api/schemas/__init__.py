"""
API Schemas Package

Contains shared Pydantic models for API Layer.
"""

from job_creator_stub.api.schemas.common import ErrorResponse, UnsupportedMediaTypeResponse

__all__ = ["ErrorResponse", "UnsupportedMediaTypeResponse"]
