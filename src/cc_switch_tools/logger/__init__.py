"""Logging utilities for cc-switch-tools.

This package provides structured logging with:
- Severity-marked console output ("  info: ...", "  warn: ...")
- File rotation using the standard RotatingFileHandler
- QueueHandler/QueueListener so logging never blocks the download loop
- Hierarchical logger naming (e.g., cc_switch_tools.installer.service)

Usage:
    >>> from cc_switch_tools.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Downloading %s", asset_name)  # Use %-style formatting

Environment Variables:
    CC_SWITCH_TOOLS_LOG_DIR: Directory for the log file (tests use a tmp dir)
    CC_SWITCH_TOOLS_LOG_LEVEL: Console log level override

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from cc_switch_tools.config.settings import Settings
from cc_switch_tools.logger.config import (
    update_logger_from_config as _update_config,
)
from cc_switch_tools.logger.formatters import (
    MarkerConsoleFormatter,
    supports_color,
)
from cc_switch_tools.logger.handlers import ConfigurationError
from cc_switch_tools.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from cc_switch_tools.logger.state import get_state

__all__ = [
    "ConfigurationError",
    "MarkerConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "supports_color",
    "update_logger_from_config",
]


def update_logger_from_config(settings: Settings | None = None) -> None:
    """Apply settings log levels to the running handlers."""
    _update_config(get_state(), settings)
