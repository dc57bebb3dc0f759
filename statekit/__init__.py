"""Thread-safe finite state machines and a bit-register switchboard."""

__version__ = "0.1.0"
__all__ = ["context", "state", "fsm", "register", "delegate", "switchboard"]