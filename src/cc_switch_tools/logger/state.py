"""Logger state management module.

Holds the process-wide logger state singleton. Only one root logger
("cc_switch_tools") is ever configured; every module logger propagates to it.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        queue_listener: Background thread processing log records
        log_queue: Queue feeding the listener
        console_handler: Console handler, kept for --verbose switching

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None
        self.console_handler: logging.Handler | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state
