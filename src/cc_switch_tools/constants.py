"""Centralized constants module for cc-switch-tools.

This module serves as the single source of truth for all shared constants
across the cc-switch-tools codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from cc_switch_tools.constants import BINARY_NAME
"""

from typing import Final

# =============================================================================
# Project Constants
# =============================================================================

GITHUB_OWNER: Final[str] = "SaladDay"
GITHUB_REPO: Final[str] = "cc-switch-cli"
RELEASES_URL: Final[str] = (
    f"https://github.com/{GITHUB_OWNER}/{GITHUB_REPO}/releases"
)

# Name of the executable shipped inside every release archive
BINARY_NAME: Final[str] = "cc-switch"

# =============================================================================
# Installer Constants
# =============================================================================

ENV_INSTALL_DIR: Final[str] = "CC_SWITCH_INSTALL_DIR"

# Default install directory, relative to the user's home directory
DEFAULT_INSTALL_SUBPATH: Final[tuple[str, ...]] = (".local", "bin")

# Prefix for the temporary download workspace (mktemp-style suffix appended)
TEMP_DIR_PREFIX: Final[str] = "cc-switch-install."

# Permission bits applied to the installed binary
BINARY_PERMISSIONS: Final[int] = 0o755

# Release asset names keyed by platform
ASSET_DARWIN_UNIVERSAL: Final[str] = "cc-switch-cli-darwin-universal.tar.gz"
ASSET_LINUX_X64: Final[str] = "cc-switch-cli-linux-x64-musl.tar.gz"
ASSET_LINUX_ARM64: Final[str] = "cc-switch-cli-linux-arm64-musl.tar.gz"
ASSET_WINDOWS_X64: Final[str] = "cc-switch-cli-windows-x64.zip"

LINUX_X64_MACHINES: Final[frozenset[str]] = frozenset({"x86_64", "amd64"})
LINUX_ARM64_MACHINES: Final[frozenset[str]] = frozenset({"aarch64", "arm64"})

# uname -s prefixes reported by Windows shells
WINDOWS_SYSTEM_PREFIXES: Final[tuple[str, ...]] = (
    "windows",
    "mingw",
    "msys",
    "cygwin",
)

# Download backends in order of preference
DEFAULT_FETCHERS: Final[tuple[str, ...]] = ("aiohttp", "curl", "wget")

# Network defaults
DEFAULT_TIMEOUT_SECONDS: Final[int] = 30
CHUNK_SIZE: Final[int] = 8192

# =============================================================================
# README Updater Constants
# =============================================================================

DEFAULT_MANIFEST_PATH: Final[str] = "src-tauri/Cargo.toml"
DEFAULT_README_FILES: Final[tuple[str, ...]] = ("README.md", "README_ZH.md")
BACKUP_SUFFIX: Final[str] = ".bak"
UNKNOWN_VERSION: Final[str] = "unknown"

# Marker identifying the version badge line in a README
BADGE_MARKER: Final[str] = "img.shields.io/badge/version-"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
DEFAULT_CONFIG_SUBDIR: Final[str] = ".config"
CONFIG_DIR_NAME: Final[str] = "cc-switch-tools"

SECTION_LOGGING: Final[str] = "logging"
SECTION_NETWORK: Final[str] = "network"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_FETCHERS: Final[str] = "fetchers"

DEFAULT_LOG_LEVEL: Final[str] = "DEBUG"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"

# =============================================================================
# Logging Constants
# =============================================================================

ENV_LOG_DIR: Final[str] = "CC_SWITCH_TOOLS_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "CC_SWITCH_TOOLS_LOG_LEVEL"
LOG_FILE_NAME: Final[str] = "cc-switch-tools.log"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Severity markers shown on the console in place of level names
LOG_MARKERS: Final[dict[str, str]] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "error",
}

# Bold ANSI colors for console severity markers
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[1;36m",  # Cyan
    "INFO": "\033[1;32m",  # Green
    "WARNING": "\033[1;33m",  # Yellow
    "ERROR": "\033[1;31m",  # Red
    "CRITICAL": "\033[1;35m",  # Magenta
    "RESET": "\033[0m",
}
