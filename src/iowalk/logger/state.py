"""Logger state shared by the iowalk logging package.

A single module-level instance records whether the ``iowalk`` root logger
has been wired to its queue listener.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state.

    Attributes:
        lock: Guards root logger initialization
        root_initialized: Whether the root logger has been set up
        config_applied: Whether settings file levels have been applied
        queue_listener: Background thread draining the log queue
        log_queue: Queue shared by every iowalk logger

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the logger state singleton."""
    return _state
