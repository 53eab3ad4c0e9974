"""
In-Memory Pending Job Registry

Tracks which jobs are still "processing" so status queries can answer
Pending or Complete. Nothing is actually processed: a job is pending for a
fixed delay after registration and complete afterwards.

Responsibility:
    - Register freshly created job IDs
    - Answer whether a job ID is still pending
    - Remove job IDs whose window has elapsed (lazily, and on demand)

Architecture Notes:
    - Infrastructure Layer (process memory, no external service)
    - One instance per application, injected via app.state (no module globals)
    - Thread-safe: every read and write happens under a single threading.Lock
    - Expiry is lazy: each entry stores its registration instant and
      is_pending() compares it with the clock. No timer or thread per job.

Business Rules:
    - Pending window: fixed delay D measured with a monotonic clock from
      register(); not adjusted for load or job content
    - Unknown job IDs are "not pending" (never an error)
    - Callers register fresh IDs only (UUID4 minted per job); an ID that has
      already expired is not remembered, so registering it again starts a
      new window
    - A job's window is never extended: registering a present ID again
      keeps the original instant
    - Restart empties the registry, so every earlier job reports Complete

Storage:
    OrderedDict[job_id -> registered_at]. The delay is the same for every
    entry, so insertion order is also expiry order and purge_expired() only
    touches entries that actually expired.

Examples:
    >>> registry = PendingJobRegistry(delay_seconds=4)
    >>> registry.register("abc")
    >>> registry.is_pending("abc")
    True
    >>> registry.is_pending("never-seen")
    False
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

# Configure logger for this module
logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 4.0


class PendingJobRegistry:
    """
    Concurrency-safe set of jobs whose simulated processing has not finished.

    Attributes:
        delay_seconds: Length of the pending window (D)

    Thread Safety:
        register(), is_pending(), expire(), purge_expired() and
        pending_count() are mutually exclusive. A query racing the end of a
        job's window may observe either state; nothing orders it further.
    """

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """
        Initialize an empty registry.

        Args:
            delay_seconds: How long a registered job stays pending
            clock: Monotonic time source in seconds (default: time.monotonic).
                Tests inject a fake clock to advance time deterministically.

        Raises:
            ValueError: If delay_seconds is negative
        """
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must not be negative, got {delay_seconds}")

        self.delay_seconds = float(delay_seconds)
        self._clock = clock or time.monotonic
        self._pending: "OrderedDict[str, float]" = OrderedDict()
        self._lock = threading.Lock()

    def register(self, job_id: str) -> None:
        """
        Mark a freshly created job as pending.

        The caller guarantees job_id is fresh (UUID4). The job stops being
        pending delay_seconds after this call returns; no further action is
        needed to expire it.

        Args:
            job_id: Newly minted job identifier
        """
        with self._lock:
            now = self._clock()
            self._purge_expired_locked(now)

            if job_id in self._pending:
                logger.warning(f"Job {job_id} already pending, keeping original window")
                return

            self._pending[job_id] = now

        logger.debug(f"Registered job {job_id} (pending for {self.delay_seconds}s)")

    def is_pending(self, job_id: str) -> bool:
        """
        Check whether a job's simulated processing window is still open.

        Args:
            job_id: Any string; IDs never registered return False

        Returns:
            True if job_id was registered less than delay_seconds ago
        """
        with self._lock:
            registered_at = self._pending.get(job_id)
            if registered_at is None:
                return False

            if self._clock() - registered_at < self.delay_seconds:
                return True

            # Window elapsed: drop the entry so the answer stays False
            del self._pending[job_id]

        logger.debug(f"Job {job_id} expired")
        return False

    def expire(self, job_id: str) -> None:
        """
        Remove a job from the registry immediately.

        Idempotent: expiring an unknown or already expired job is a no-op.

        Args:
            job_id: Job identifier to remove
        """
        with self._lock:
            removed = self._pending.pop(job_id, None)

        if removed is not None:
            logger.debug(f"Job {job_id} expired explicitly")

    def purge_expired(self) -> int:
        """
        Drop every entry whose pending window has elapsed.

        Returns:
            Number of entries removed
        """
        with self._lock:
            return self._purge_expired_locked(self._clock())

    def pending_count(self) -> int:
        """Number of jobs currently pending."""
        with self._lock:
            self._purge_expired_locked(self._clock())
            return len(self._pending)

    def _purge_expired_locked(self, now: float) -> int:
        # Caller holds self._lock. Oldest entries sit at the front.
        removed = 0
        while self._pending:
            job_id, registered_at = next(iter(self._pending.items()))
            if now - registered_at < self.delay_seconds:
                break
            self._pending.popitem(last=False)
            removed += 1

        if removed:
            logger.debug(f"Purged {removed} expired job(s)")
        return removed

    def __len__(self) -> int:
        return self.pending_count()

    def __repr__(self) -> str:
        return f"PendingJobRegistry(delay_seconds={self.delay_seconds})"
