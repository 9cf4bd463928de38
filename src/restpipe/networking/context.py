"""Per-call cancellation context.

A :class:`CallContext` governs the lifetime of exactly one pipeline call. It
is cooperative: the client checks it before dispatch and the default transport
clamps its timeout to the remaining time, so cancelling a context never
affects other calls sharing the same client.
"""

from __future__ import annotations

import threading
import time

from .errors import CallCancelledError, DeadlineExceededError


class CallContext:
    """Thread-safe cancellation token with an optional deadline.

    Examples:
        >>> ctx = CallContext.with_timeout(5.0)
        >>> ctx.cancelled()
        False
        >>> ctx.cancel()
        >>> ctx.cancelled()
        True
    """

    def __init__(self, deadline: float | None = None) -> None:
        """Create a context.

        Args:
            deadline: Absolute ``time.monotonic()`` value after which the
                context counts as expired, or None for no deadline.
        """
        self._deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float) -> CallContext:
        """Return a context that expires ``seconds`` from now."""
        if seconds <= 0:
            raise ValueError("timeout must be > 0")
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def cancel(self) -> None:
        """Signal that the call should be abandoned."""
        self._cancelled.set()

    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Return seconds left before the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """Raise if the context is cancelled or past its deadline."""
        if self._cancelled.is_set():
            raise CallCancelledError("call context cancelled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise DeadlineExceededError("call context deadline exceeded")


def background() -> CallContext:
    """Return a fresh context that has no deadline."""
    return CallContext()
