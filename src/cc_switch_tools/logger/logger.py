"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create a module logger
- set_console_level(): Change console verbosity (used by --verbose)
- flush_all_handlers(): Ensure pending log records are written
- clear_logger_state(): Reset global logger state for tests
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from cc_switch_tools.logger.config import load_log_settings
from cc_switch_tools.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from cc_switch_tools.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits (up to five seconds) for the queue to drain, then flushes every
    handler. Safe to call from any thread.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    timeout = 5.0
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > timeout:
            break
        time.sleep(0.01)

    # Records may be dequeued but not yet handled
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the logger for ``name``.

    The root ``cc_switch_tools`` logger is initialized exactly once; child
    loggers such as ``cc_switch_tools.installer.service`` propagate to it.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
            (default: ~/.config/cc-switch-tools/logs/cc-switch-tools.log)
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create a logger.

    Use ``__name__`` as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)
        >>> logger.info("Installing %s", binary_name)
    """
    return setup_logging(name=name)


def set_console_level(level: str) -> None:
    """Set the console handler level (e.g. "DEBUG" for --verbose)."""
    state = get_state()
    if state.console_handler is not None:
        state.console_handler.setLevel(getattr(logging, level, logging.INFO))


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers and resets state flags so the
    next get_logger() call starts from scratch. Do not call in production.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.console_handler = None
        state.root_initialized = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
