"""Per-run configuration objects.

Each command builds one immutable config from the environment and the
settings file, then passes it explicitly to the service that does the work.
"""

import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from cc_switch_tools.config.paths import Paths
from cc_switch_tools.config.settings import Settings
from cc_switch_tools.constants import (
    BINARY_NAME,
    DEFAULT_FETCHERS,
    DEFAULT_MANIFEST_PATH,
    DEFAULT_README_FILES,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_INSTALL_DIR,
    RELEASES_URL,
)


@dataclass(frozen=True)
class InstallerConfig:
    """Inputs of one installer run."""

    install_dir: Path
    binary_name: str = BINARY_NAME
    releases_url: str = RELEASES_URL
    temp_root: Path | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    fetchers: tuple[str, ...] = DEFAULT_FETCHERS
    path_env: str = ""
    shell: str = ""

    def download_url(self, asset_name: str) -> str:
        """Return the latest-release download URL for an asset."""
        return f"{self.releases_url}/latest/download/{asset_name}"

    @classmethod
    def from_environment(
        cls,
        settings: Settings,
        environ: Mapping[str, str] | None = None,
    ) -> "InstallerConfig":
        """Build config from environment variables and settings.

        Args:
            settings: Loaded settings file values
            environ: Environment mapping (defaults to os.environ)

        Returns:
            InstallerConfig instance

        """
        env = os.environ if environ is None else environ
        install_dir_str = env.get(ENV_INSTALL_DIR, "")
        install_dir = (
            Paths.expand_path(install_dir_str)
            if install_dir_str
            else Paths.default_install_dir()
        )
        tmp = env.get("TMPDIR", "")
        return cls(
            install_dir=install_dir,
            temp_root=Path(tmp) if tmp else Path(tempfile.gettempdir()),
            timeout_seconds=settings.timeout_seconds,
            fetchers=settings.fetchers,
            path_env=env.get("PATH", ""),
            shell=env.get("SHELL", ""),
        )


@dataclass(frozen=True)
class UpdaterConfig:
    """Inputs of one README version update run."""

    root: Path
    manifest_path: Path
    readme_files: tuple[Path, ...]

    @classmethod
    def for_root(cls, root: Path | None = None) -> "UpdaterConfig":
        """Build config with the default file layout under ``root``.

        Args:
            root: Project root (defaults to the current directory)

        Returns:
            UpdaterConfig instance

        """
        base = root if root is not None else Path.cwd()
        return cls(
            root=base,
            manifest_path=base / DEFAULT_MANIFEST_PATH,
            readme_files=tuple(base / name for name in DEFAULT_README_FILES),
        )
