"""Cooperative cancellation for long-running searches."""

from __future__ import annotations

import threading
import time
from typing import Optional

from graphwalk.types.errors import Cancelled


class CancelToken:
    """Cancellation flag with an optional monotonic deadline.

    Searches call :meth:`check` once per frontier extraction. The token may
    be cancelled from another thread while a search runs.

    Args:
        deadline: Absolute ``time.monotonic()`` value after which
            :meth:`check` raises, or None for no deadline.
    """

    def __init__(self, deadline: Optional[float] = None) -> None:
        self.deadline = deadline
        self._event = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancelToken":
        """Return a token that expires ``seconds`` from now."""
        if seconds <= 0:
            raise ValueError(f"Timeout must be positive, got {seconds}")
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._event.set()

    def reason(self) -> Optional[str]:
        """Return why the token is no longer live, or None while it is."""
        if self._event.is_set():
            return "Computation cancelled by caller"
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return "Computation exceeded its deadline"
        return None

    @property
    def cancelled(self) -> bool:
        return self.reason() is not None

    def check(self) -> None:
        """Raise :class:`Cancelled` if the token was cancelled or expired."""
        reason = self.reason()
        if reason is not None:
            raise Cancelled(reason)
