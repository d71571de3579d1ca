"""Fixtures for installer tests."""

import shutil
from pathlib import Path

import pytest

from cc_switch_tools.config import InstallerConfig
from cc_switch_tools.exceptions import NetworkError


class FakeFetcher:
    """Fetcher that copies a local archive instead of downloading.

    Records requested URLs; raises NetworkError when ``archive`` is None.
    """

    name = "fake"

    def __init__(self, archive: Path | None) -> None:
        self.archive = archive
        self.urls: list[str] = []

    def is_available(self) -> bool:
        return True

    async def fetch(self, url: str, dest: Path) -> None:
        self.urls.append(url)
        if self.archive is None:
            msg = f"{url}: 404 Not Found"
            raise NetworkError(msg)
        shutil.copyfile(self.archive, dest)


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    """Parent directory for installer workspaces."""
    root = tmp_path / "tmp"
    root.mkdir()
    return root


@pytest.fixture
def installer_config(tmp_path: Path, temp_root: Path) -> InstallerConfig:
    """Installer config targeting a throwaway install directory."""
    return InstallerConfig(
        install_dir=tmp_path / "bin",
        temp_root=temp_root,
        path_env="/usr/bin:/bin",
        shell="/bin/zsh",
    )
