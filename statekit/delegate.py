"""Thread-safe owner of a register that queues every state change it makes."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass

from .context import Context
from .register import CAPACITY, Register


@dataclass(frozen=True)
class Change:
    """A single state change: ``closed`` is True when the index was closed."""

    ctx: Context | None
    index: int
    closed: bool


def _finished(ctx: Context | None) -> bool:
    return ctx is not None and ctx.done()


class Delegate:
    """Applies open/close/toggle operations and records the resulting changes.

    Operations made with a finished context are ignored.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._register = Register()
        self._changes: queue.Queue[Change] = queue.Queue()

    @property
    def register(self) -> Register:
        """A snapshot of the current register."""
        with self._lock:
            return self._register.copy()

    @register.setter
    def register(self, value: Register) -> None:
        with self._lock:
            self._register = value.copy()

    def _emit(self, ctx: Context | None, indices: list[int], closed: bool) -> None:
        for index in indices:
            self._changes.put(Change(ctx, index, closed))

    def close(self, ctx: Context | None, *indices: int) -> None:
        """Close the given indices and queue a change for each one that was open."""
        if _finished(ctx):
            return
        with self._lock:
            updated = self._register.copy()
            changed = updated.close(*indices)
            self._register = updated
        self._emit(ctx, changed, True)

    def open(self, ctx: Context | None, *indices: int) -> None:
        """Open the given indices and queue a change for each one that was closed."""
        if _finished(ctx):
            return
        with self._lock:
            updated = self._register.copy()
            changed = updated.open(*indices)
            self._register = updated
        self._emit(ctx, changed, False)

    def toggle(self, ctx: Context | None, *indices: int) -> None:
        """Flip the given indices and queue a change for each of them."""
        if _finished(ctx):
            return
        with self._lock:
            updated = self._register.copy()
            closed, opened = updated.toggle(*indices)
            self._register = updated
        self._emit(ctx, closed, True)
        self._emit(ctx, opened, False)

    def next_change(self, timeout: float | None = None) -> Change | None:
        """Return the next queued change, or None if none arrives within ``timeout``."""
        try:
            return self._changes.get(timeout=timeout)
        except queue.Empty:
            return None

    def reset(self) -> None:
        """Open every state."""
        with self._lock:
            self._register = Register()

    def render(self) -> str:
        """Render the register as one labelled binary line per word, highest first."""
        with self._lock:
            words = self._register.words
        return "".join(
            f"{i:<5d}{words[i]:064b}\n" for i in reversed(range(CAPACITY))
        )