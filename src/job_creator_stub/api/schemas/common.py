"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for API errors.

    Provides consistent error structure across endpoints. The only exception
    is 415 Unsupported Media Type, which copies the real API's body
    (see UnsupportedMediaTypeResponse).

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_JOB_REQUEST")
        message: Human-readable error message
        details: Optional additional error details
    """

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "INVALID_JOB_REQUEST",
                "message": "Invalid JSON: expected value at line 1 column 1",
                "details": {"exception_type": "InvalidJobRequestError"},
            }
        }
    )


class UnsupportedMediaTypeResponse(BaseModel):
    """
    415 body, field for field what the real (Spring based) API returns.

    Attributes:
        timestamp: Epoch milliseconds
        status: Always 415
        error: Always "Unsupported Media Type"
        exception: Spring exception class name
        message: "Content type '<type>' not supported"
        path: Request path
    """

    timestamp: int
    status: int = 415
    error: str = "Unsupported Media Type"
    exception: str = "org.springframework.web.HttpMediaTypeNotSupportedException"
    message: str
    path: str
