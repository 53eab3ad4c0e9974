"""
Domain Layer Exceptions

This module defines the exception hierarchy raised while handling job
requests. All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain
    - The pending job registry never raises: unknown job IDs are simply
      "not pending". These exceptions cover malformed job requests only.
    - API Layer converts them to HTTP status codes (see api/main.py)
"""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Usage:
        - API Layer converts to appropriate HTTP status codes
        - Infrastructure Layer should not raise DomainException

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class InvalidJobRequestError(DomainException):
    """
    Raised when a job creation body cannot be decoded.

    This exception is raised when:
    - Body is not valid JSON
    - A known field has the wrong JSON type (e.g. "dimensions": "x")

    Unknown fields and missing fields are NOT errors.

    Examples:
        >>> raise InvalidJobRequestError("Expecting value: line 1 column 1 (char 0)")
    """

    def __init__(self, message: str, errors: Optional[list] = None) -> None:
        """
        Initialize job request error.

        Args:
            message: Error description
            errors: Structured validation errors (optional)
        """
        self.errors = errors or []
        super().__init__(message)


class UnsupportedMediaTypeError(DomainException):
    """
    Raised when a job creation request is not sent as application/json.

    Attributes:
        content_type: Media type the client sent ("" when missing or unparseable)
        path: Request path, echoed in the error body

    Examples:
        >>> raise UnsupportedMediaTypeError("text/plain", "/job")
    """

    def __init__(self, content_type: str, path: str) -> None:
        self.content_type = content_type
        self.path = path
        super().__init__(f"Content type '{content_type}' not supported")
