"""
Infrastructure Layer

Technical capabilities supporting the Application Layer.

Modules:
    - registry: In-memory pending job registry

Usage:
    >>> from job_creator_stub.infrastructure import PendingJobRegistry
"""

from .registry import PendingJobRegistry

__all__ = ["PendingJobRegistry"]
