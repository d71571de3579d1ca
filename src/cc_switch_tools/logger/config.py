"""Configuration loading and updating for logging system.

Bootstrap levels come from constants and environment variables because the
logger is created at import time, before the settings file has been read.
``update_logger_from_config`` applies the settings file afterwards.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from cc_switch_tools.config.paths import Paths
from cc_switch_tools.config.settings import Settings, SettingsManager
from cc_switch_tools.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from cc_switch_tools.logger.state import _LoggerState


def _env_level(default: str) -> str:
    """Return the console level from CC_SWITCH_TOOLS_LOG_LEVEL if valid."""
    level = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    if level and isinstance(getattr(logging, level, None), int):
        return level
    return default


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Environment Variable Override:
        CC_SWITCH_TOOLS_LOG_DIR: Overrides the log directory. The test suite
        points it at a temporary directory so test runs never write to
        ~/.config/cc-switch-tools/logs.

        CC_SWITCH_TOOLS_LOG_LEVEL: Overrides the console level.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = Paths.LOGS_DIR / LOG_FILE_NAME

    return _env_level(DEFAULT_CONSOLE_LOG_LEVEL), DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: "_LoggerState", settings: Settings | None = None
) -> None:
    """Update handler levels from user settings.

    Only handler levels change; handlers are never added or removed. The
    CC_SWITCH_TOOLS_LOG_LEVEL environment variable still wins over the
    settings for the console.

    Args:
        state: Logger state object (from logger.state module)
        settings: Already loaded settings (read from the settings file
            if None)

    """
    if settings is None:
        settings = SettingsManager().load()

    console_level = getattr(
        logging, _env_level(settings.console_log_level), logging.INFO
    )
    file_level = getattr(logging, settings.log_level, logging.DEBUG)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)
