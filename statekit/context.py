"""Cancellation and deadline tracking passed through state machine updates."""

from __future__ import annotations

import threading
import time


class ContextError(Exception):
    """Raised when an operation is attempted on a finished context."""


class Cancelled(ContextError):
    """The context was cancelled explicitly."""

    def __init__(self, message: str = "context canceled") -> None:
        super().__init__(message)


class DeadlineExceeded(ContextError):
    """The context's deadline has passed."""

    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


class Context:
    """A cancellable context with an optional timeout in seconds.

    A finished context never becomes live again; whichever of cancellation
    or deadline came first stays its error.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._lock = threading.Lock()
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._reason: type[ContextError] | None = None

    def _settle(self) -> type[ContextError] | None:
        if (
            self._reason is None
            and self._deadline is not None
            and time.monotonic() >= self._deadline
        ):
            self._reason = DeadlineExceeded
        return self._reason

    def cancel(self) -> None:
        """Cancel the context unless it has already finished."""
        with self._lock:
            if self._settle() is None:
                self._reason = Cancelled

    def done(self) -> bool:
        """Return True once the context is cancelled or past its deadline."""
        with self._lock:
            return self._settle() is not None

    def error(self) -> ContextError | None:
        """Return the reason the context finished, or None while it is live."""
        with self._lock:
            reason = self._settle()
        return None if reason is None else reason()

    def check(self) -> None:
        """Raise the context's error if it has finished."""
        err = self.error()
        if err is not None:
            raise err