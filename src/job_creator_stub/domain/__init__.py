"""
Domain Layer

Framework-independent concepts of the job creator stub. The stub has no real
business rules (jobs are never executed), so the domain layer only holds the
exception hierarchy shared by the Application and API layers.

Usage:
    >>> from job_creator_stub.domain import DomainException
"""

from .shared import (
    DomainException,
    InvalidJobRequestError,
    UnsupportedMediaTypeError,
)

__all__ = [
    "DomainException",
    "InvalidJobRequestError",
    "UnsupportedMediaTypeError",
]
