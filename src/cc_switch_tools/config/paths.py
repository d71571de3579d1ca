"""Path constants and utilities for cc-switch-tools configuration."""

from pathlib import Path

from cc_switch_tools.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_INSTALL_SUBPATH,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME
    LOGS_DIR = CONFIG_DIR / "logs"
    SETTINGS_FILE = CONFIG_DIR / CONFIG_FILE_NAME

    @classmethod
    def default_install_dir(cls) -> Path:
        """Return the per-user binary directory (~/.local/bin)."""
        return Path.home().joinpath(*DEFAULT_INSTALL_SUBPATH)

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` and make the path absolute without resolving links.

        Args:
            path_str: Path string to expand (e.g., "~/bin" or "./bin")

        Returns:
            Absolute Path object

        Example:
            >>> Paths.expand_path("~/bin")
            PosixPath('/home/user/bin')
        """
        return Path(path_str).expanduser().absolute()
