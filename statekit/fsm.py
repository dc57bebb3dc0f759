"""A thread-safe finite state machine driven by guarded transitions."""

from __future__ import annotations

import threading
from typing import Any

from .context import Context
from .state import State, Transition


class MachineError(Exception):
    """Raised when a machine is misconfigured or cannot act."""


class Machine:
    """A finite state machine over states joined by transitions.

    Transitions passed to the constructor are registered in order, and the
    source of the first one becomes the start state.
    """

    def __init__(self, *transitions: Transition) -> None:
        self._lock = threading.RLock()
        self._current: State | None = None
        self._start: State | None = None
        self._end_states: dict[int, State] | None = None
        self._transitions: dict[int, list[Transition]] | None = None
        if transitions:
            self._transitions = {}
            self._start = transitions[0].source
            for t in transitions:
                self._transitions.setdefault(t.source.id, []).append(t)

    def _all_transitions(self):
        for group in (self._transitions or {}).values():
            yield from group

    def set_start(self, name: str) -> None:
        """Make the state called ``name`` both the start and current state."""
        with self._lock:
            start = next(
                (t.source for t in self._all_transitions() if t.source.name == name),
                None,
            )
            if start is None:
                raise MachineError(f"no state found with name: {name}")
            self._start = start
            self._current = start

    def reset(self) -> None:
        """Return the machine to its start state."""
        with self._lock:
            if self._start is None:
                raise MachineError("this machine has no start state")
            self._current = self._start

    def set_end_states(self, *names: str) -> None:
        """Mark the target states with the given names as end states."""
        with self._lock:
            if self._end_states is None:
                self._end_states = {}
            valid = set()
            for t in self._all_transitions():
                if t.target is not None and t.target.name in names:
                    self._end_states[t.target.id] = t.target
                    valid.add(t.target.name)
            for name in names:
                if name not in valid:
                    raise MachineError(f"invalid state: '{name}'")

    def is_end_state(self) -> bool:
        """Return True if the current state is one of the end states."""
        with self._lock:
            if self._end_states is None:
                self._end_states = {}
                return False
            current = self._current if self._current is not None else self._start
            return current is not None and current.id in self._end_states

    def add_transition(self, transition: Transition) -> None:
        """Register a transition; the first one ever added sets the start state."""
        with self._lock:
            source = transition.source
            if source is None or transition.target is None:
                raise ValueError("transition must have a FROM and TO state")
            if self._transitions is None:
                self._transitions = {}
                self._start = source
            self._transitions.setdefault(source.id, []).append(transition)

    def validate(self) -> None:
        """Check for a start state, complete transitions and unique state names."""
        with self._lock:
            if self._start is None:
                raise MachineError("no start state set")
            states: dict[int, State] = {}
            names: set[str] = set()
            for t in self._all_transitions():
                if t.source is None:
                    raise MachineError(f"transition '{t.description}' has no from state")
                if t.target is None:
                    raise MachineError(f"transition '{t.description}' has no to state")
                states[t.source.id] = t.source
                states[t.target.id] = t.target
                names.update((t.source.name, t.target.name))
            if len(names) != len(states):
                raise MachineError("invalid: all state names must be unique")

    def current(self) -> State | None:
        """Return the current state, or the start state if none is set yet."""
        with self._lock:
            return self._current if self._current is not None else self._start

    def update(self, ctx: Context | None, value: Any) -> bool:
        """Feed ``value`` to the machine; return True if the state changed.

        Transitions out of the current state are tried in the order they were
        added and the first whose trigger fires is taken.
        """
        with self._lock:
            if ctx is not None:
                ctx.check()
            current = self._current if self._current is not None else self._start
            if current is None:
                raise MachineError("machine has no start state")
            for t in (self._transitions or {}).get(current.id, []):
                if t.go(ctx, value):
                    if t.target is not None:
                        self._current = t.target
                    return True
            return False