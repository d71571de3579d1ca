"""Logging formatters for console output.

The console shows every record as an indented severity marker followed by
the message, the same layout the shell installer used:

    info: Downloading cc-switch-cli-linux-x64-musl.tar.gz
    warn: /home/user/.local/bin is not in your PATH
   error: Binary 'cc-switch' not found in archive.

File output uses a plain structured ``logging.Formatter`` instead.
"""

import logging
import os

from cc_switch_tools.constants import LOG_COLORS, LOG_MARKERS


def supports_color(stream: object) -> bool:
    """Return True when ANSI colors should be written to ``stream``.

    Colors are disabled when ``NO_COLOR`` is set or the stream is not a TTY.
    """
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class MarkerConsoleFormatter(logging.Formatter):
    """Console formatter that prefixes messages with a severity marker.

    Markers:
        DEBUG: debug (cyan)
        INFO: info (green)
        WARNING: warn (yellow)
        ERROR/CRITICAL: error (red/magenta)

    Tracebacks attached with ``logger.exception`` are appended below the
    message, as ``logging.Formatter`` does.
    """

    def __init__(
        self, use_color: bool = False  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize formatter.

        Args:
            use_color: Whether to wrap markers in ANSI color codes

        """
        super().__init__()
        self.use_color = use_color

    def format_marker(self, levelname: str) -> str:
        """Return the (optionally colored) marker for a level name."""
        marker = LOG_MARKERS.get(levelname, levelname.lower())
        if self.use_color and levelname in LOG_COLORS:
            return f"{LOG_COLORS[levelname]}{marker}{LOG_COLORS['RESET']}"
        return marker

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as ``  <marker>: <message>``."""
        marker = self.format_marker(record.levelname)
        text = f"  {marker}: {record.getMessage()}"
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        return text
