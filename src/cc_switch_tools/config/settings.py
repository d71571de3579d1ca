"""Settings manager for the optional INI settings file.

The file is never created by cc-switch-tools; when it is missing every value
falls back to its default. Example ``~/.config/cc-switch-tools/settings.conf``:

    [logging]
    console_log_level = INFO
    log_level = DEBUG

    [network]
    timeout_seconds = 30
    fetchers = aiohttp, curl, wget
"""

import configparser
import logging
from dataclasses import dataclass, field
from pathlib import Path

from cc_switch_tools.config.paths import Paths
from cc_switch_tools.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FETCHERS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FETCHERS,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_LOGGING,
    SECTION_NETWORK,
)

# Plain stdlib logger: the logger package reads settings while configuring
# itself, so this module must not trigger logger setup.
logger = logging.getLogger(__name__)

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Values read from the settings file."""

    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    log_level: str = DEFAULT_LOG_LEVEL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    fetchers: tuple[str, ...] = field(default=DEFAULT_FETCHERS)


def _strip_inline_comment(value: str) -> str:
    """Remove trailing ``# comment`` from an INI value."""
    return value.split("#", 1)[0].strip()


class SettingsManager:
    """Loads the INI settings file into a Settings object."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_file: Settings file path
                (defaults to Paths.SETTINGS_FILE)

        """
        self.settings_file = settings_file or Paths.SETTINGS_FILE

    def load(self) -> Settings:
        """Load settings, falling back to defaults for missing values.

        Invalid values are logged and replaced by their defaults rather than
        aborting, since the settings file only tunes ambient behavior.

        Returns:
            Settings instance

        """
        if not self.settings_file.is_file():
            return Settings()

        parser = configparser.ConfigParser()
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except configparser.Error as e:
            logger.warning(
                "Ignoring unreadable settings file %s: %s",
                self.settings_file,
                e,
            )
            return Settings()

        return Settings(
            console_log_level=self._read_level(
                parser, KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
            log_level=self._read_level(
                parser, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL
            ),
            timeout_seconds=self._read_timeout(parser),
            fetchers=self._read_fetchers(parser),
        )

    def _read_level(
        self, parser: configparser.ConfigParser, key: str, default: str
    ) -> str:
        raw = parser.get(SECTION_LOGGING, key, fallback=default)
        level = _strip_inline_comment(raw).upper()
        if level not in _VALID_LEVELS:
            logger.warning("Invalid %s '%s', using %s", key, raw, default)
            return default
        return level

    def _read_timeout(self, parser: configparser.ConfigParser) -> int:
        raw = parser.get(
            SECTION_NETWORK,
            KEY_TIMEOUT_SECONDS,
            fallback=str(DEFAULT_TIMEOUT_SECONDS),
        )
        try:
            timeout = int(_strip_inline_comment(raw))
        except ValueError:
            timeout = 0
        if timeout <= 0:
            logger.warning(
                "Invalid %s '%s', using %s",
                KEY_TIMEOUT_SECONDS,
                raw,
                DEFAULT_TIMEOUT_SECONDS,
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout

    def _read_fetchers(
        self, parser: configparser.ConfigParser
    ) -> tuple[str, ...]:
        raw = parser.get(SECTION_NETWORK, KEY_FETCHERS, fallback="")
        names = tuple(
            name.strip().lower()
            for name in _strip_inline_comment(raw).split(",")
            if name.strip()
        )
        return names or DEFAULT_FETCHERS
