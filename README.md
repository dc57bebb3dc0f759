# statekit

Two small, thread-safe building blocks for stateful programs:

- **Finite state machines** (`statekit.fsm`, `statekit.state`): named states,
  transitions guarded by trigger functions, start and end states, validation.
- **A switchboard** (`statekit.switchboard`): up to 4096 binary conditions,
  each open or closed, held in a compact bit register
  (`statekit.register`), with handlers called whenever a condition changes.

Both take a lightweight, cancellable `statekit.context.Context`.

statekit is a library only: it has no command-line tool.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite with pytest.

## Finite state machines

```python
from statekit.context import Context
from statekit.fsm import Machine
from statekit.state import State

idle = State("IDLE")
running = State("RUNNING")
done = State("DONE")

start = idle.when("go", lambda ctx, v: v == "go").then(running)
finish = running.when("stop", lambda ctx, v: v == "stop").then(done)

machine = Machine(start, finish)      # the first transition's source is the start state
machine.validate()                    # raises MachineError on a bad configuration
machine.set_end_states("DONE")

ctx = Context()
machine.update(ctx, "go")      # True: moved to RUNNING
machine.update(ctx, "nothing") # False: no trigger matched
machine.update(ctx, "stop")    # True: moved to DONE
assert machine.current().name == "DONE"
assert machine.is_end_state()

machine.reset()                # back to IDLE
```

Every `State` and `Transition` gets a process-wide unique `id` from
`statekit.state.make_id()`.

A trigger receives the context and the value passed to `update`, and returns
whether the transition should fire. Transitions from the current state are
tried in the order they were added; the first that fires wins. An exception
raised by a trigger propagates out of `update`.

- `set_start(name)` picks another start state by name and makes it current;
  it raises `MachineError` if no transition starts from a state of that name.
- `set_end_states(*names)` raises `MachineError` for a name that is not the
  target of any transition.
- `add_transition(t)` raises `ValueError` if the transition has no target
  state; the first transition added to an empty machine sets the start state.
- `validate()` raises `MachineError` if there is no start state, a transition
  lacks a source or target, or two distinct states share a name.
- `update(ctx, value)` raises `MachineError` when there is no start state, and
  the context's error (`Cancelled` or `DeadlineExceeded`) when the context has
  finished. `ctx` may be `None`.

## Switchboard

```python
from statekit.context import Context
from statekit.switchboard import Switchboard

events = []

board = Switchboard(
    default_handler=lambda ctx, index, closed: events.append((index, closed)),
    handlers={7: lambda ctx, closed: print("condition 7 closed:", closed)},
)

ctx = Context()
board.run(ctx)          # starts a daemon thread delivering changes to handlers

board.close(ctx, 1, 2, 7)
board.open(ctx, 2)
board.toggle(ctx, 1, 3)

ctx.cancel()            # stop the handler loop
```

Every condition starts open, unless `all_closed=True` is given. Only real
changes reach the handlers: closing an already closed condition does nothing.
Handlers run on the background thread started by `run`, one change at a time
in the order the changes were queued; within a `toggle`, the newly closed
conditions come before the newly opened ones. Calls made with a finished
context are ignored.

Indices run from 0 to 4095; a larger or negative index raises an error.
`repr(board)` shows the register as 64 rows of 64 bits, highest word first.

The bit register itself is available as `statekit.register.Register`, with
`close`, `open` and `toggle` (which return the indices that changed) and the
queries `is_closed`, `is_opened`, `all_closed`, `any_closed`, `all_opened`
and `any_opened`. `statekit.delegate.Delegate` wraps a register behind a lock
and queues a `Change` for every change, read with `next_change(timeout)`.

## Contexts

```python
from statekit.context import Context, Cancelled, DeadlineExceeded

ctx = Context(timeout=0.5)   # optional deadline in seconds
ctx.cancel()
ctx.done()                   # True
ctx.error()                  # a Cancelled instance
ctx.check()                  # raises Cancelled
```

Once finished, a context stays finished with whichever error came first.