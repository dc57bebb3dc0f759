"""States and transitions for finite state machines."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .context import Context

Trigger = Callable[[Context | None, Any], bool]

_id_lock = threading.Lock()
_id_counter = itertools.count(1)


def make_id() -> int:
    """Return the next process-wide unique identifier."""
    with _id_lock:
        return next(_id_counter)


def reset_ids() -> None:
    """Restart identifier generation so the next id is 1."""
    global _id_counter
    with _id_lock:
        _id_counter = itertools.count(1)


@dataclass(frozen=True)
class State:
    """A named state with an automatically assigned unique id."""

    name: str
    id: int = field(init=False, default_factory=make_id)

    def when(self, description: str, trigger: Trigger) -> Transition:
        """Start a transition out of this state guarded by ``trigger``."""
        return Transition(description, self, trigger)


class Transition:
    """A guarded edge from a source state to a target state."""

    __slots__ = ("id", "description", "source", "target", "trigger")

    def __init__(self, description: str, source: State | None, trigger: Trigger) -> None:
        self.id = make_id()
        self.description = description
        self.source = source
        self.target: State | None = None
        self.trigger = trigger

    def then(self, target: State) -> Transition:
        """Set the target state and return this transition."""
        self.target = target
        return self

    def go(self, ctx: Context | None, value: Any) -> bool:
        """Evaluate the trigger for ``value``; True means the transition fires."""
        return bool(self.trigger(ctx, value))

    def __repr__(self) -> str:
        source = self.source.name if self.source is not None else None
        target = self.target.name if self.target is not None else None
        return f"Transition({self.description!r}, {source!r} -> {target!r})"