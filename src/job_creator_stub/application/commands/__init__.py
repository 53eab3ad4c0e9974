"""
Application Commands (CQRS write side)

Exports:
    - CreateJobCommand, CreateJobCommandHandler, CreateJobResult, Dimension
"""

from .create_job import (
    CreateJobCommand,
    CreateJobCommandHandler,
    CreateJobResult,
    Dimension,
)

__all__ = [
    "CreateJobCommand",
    "CreateJobCommandHandler",
    "CreateJobResult",
    "Dimension",
]
