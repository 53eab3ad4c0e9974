"""
Shared Domain Module

Cross-cutting domain concepts.

Exports:
    - DomainException: Base exception class
    - InvalidJobRequestError: Malformed job creation body
    - UnsupportedMediaTypeError: Job creation body not sent as JSON
"""

from .exceptions import (
    DomainException,
    InvalidJobRequestError,
    UnsupportedMediaTypeError,
)

__all__ = [
    "DomainException",
    "InvalidJobRequestError",
    "UnsupportedMediaTypeError",
]
