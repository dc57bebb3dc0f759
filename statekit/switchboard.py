"""A switchboard of up to 4096 open/closed states that notifies handlers on change."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping

from .context import Context
from .delegate import Delegate
from .register import register_with_all_closed

ChangeHandler = Callable[[Context | None, int, bool], None]
SingleStateChangeHandler = Callable[[Context | None, bool], None]

_POLL_INTERVAL = 0.02


def _ignore(ctx: Context | None, index: int, closed: bool) -> None:
    pass


class Switchboard:
    """Binary states that call handlers when they change.

    ``handlers`` maps a state index to a handler taking ``(ctx, closed)``;
    every other change goes to ``default_handler`` as ``(ctx, index, closed)``.
    States start open unless ``all_closed`` is set.
    """

    def __init__(
        self,
        default_handler: ChangeHandler | None = None,
        handlers: Mapping[int, SingleStateChangeHandler] | None = None,
        all_closed: bool = False,
    ) -> None:
        self._delegate = Delegate()
        self._default = default_handler if default_handler is not None else _ignore
        self._handlers = dict(handlers or {})
        if all_closed:
            self._delegate.register = register_with_all_closed()

    def run(self, ctx: Context) -> threading.Thread:
        """Start dispatching changes to handlers until ``ctx`` is done."""
        thread = threading.Thread(target=self._dispatch, args=(ctx,), daemon=True)
        thread.start()
        return thread

    def _dispatch(self, ctx: Context) -> None:
        while not ctx.done():
            change = self._delegate.next_change(timeout=_POLL_INTERVAL)
            if change is None:
                continue
            handler = self._handlers.get(change.index)
            if handler is not None:
                handler(change.ctx, change.closed)
            else:
                self._default(change.ctx, change.index, change.closed)

    def open(self, ctx: Context | None, *conditions: int) -> None:
        """Open the given states."""
        self._delegate.open(ctx, *conditions)

    def close(self, ctx: Context | None, *conditions: int) -> None:
        """Close the given states."""
        self._delegate.close(ctx, *conditions)

    def toggle(self, ctx: Context | None, *conditions: int) -> None:
        """Flip the given states."""
        self._delegate.toggle(ctx, *conditions)

    def __repr__(self) -> str:
        return self._delegate.render()