"""
Registry Infrastructure Module

In-memory tracking of jobs that are still pending.

Exports:
    - PendingJobRegistry: Thread-safe registry with lazy time-based expiry
"""

from .pending_job_registry import DEFAULT_DELAY_SECONDS, PendingJobRegistry

__all__ = ["PendingJobRegistry", "DEFAULT_DELAY_SECONDS"]
