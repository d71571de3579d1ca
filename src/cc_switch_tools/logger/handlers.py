"""Handler creation and management for logging system.

This module provides functions for creating and configuring logging handlers:
- Console handler writing severity-marked messages to stderr
- Rotating file handler for the persistent debug log
- Root logger setup with QueueListener so handler I/O never blocks the
  event loop that drives downloads
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from cc_switch_tools.constants import (
    LOG_BACKUP_COUNT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from cc_switch_tools.logger.formatters import (
    MarkerConsoleFormatter,
    supports_color,
)

ROOT_LOGGER_NAME = "cc_switch_tools"


class ConfigurationError(Exception):
    """Error in logging configuration."""


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create console handler with severity markers.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "INFO")

    Returns:
        Configured StreamHandler for console output

    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        MarkerConsoleFormatter(use_color=supports_color(sys.stderr))
    )
    console_handler.setLevel(getattr(logging, console_level, logging.INFO))
    return console_handler


def _create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create and configure rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If file handler creation fails

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.DEBUG))
    return file_handler


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Initialize root logger with handlers via QueueListener.

    Called exactly once per process (or after clear_logger_state in tests).
    A file handler that cannot be created is skipped with a console warning
    so that a read-only home directory never prevents installation.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level (e.g., "INFO", "WARNING")
        file_level: File log level (e.g., "DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    console_handler = _create_console_handler(console_level)
    handlers: list[logging.Handler] = [console_handler]

    file_error: ConfigurationError | None = None
    if enable_file_logging:
        try:
            handlers.append(_create_file_handler(log_file, file_level))
        except ConfigurationError as e:
            file_error = e

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()
    state.console_handler = console_handler

    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True

    if file_error is not None:
        root_logger.warning("%s", file_error)
