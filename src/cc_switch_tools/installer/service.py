"""Installer workflow for the cc-switch binary.

Steps, in order:
    detect    choose the release asset for the host OS/architecture
    download  fetch the asset from the latest GitHub release
    extract   unpack the archive and locate the binary
    install   move the binary into place, chmod, clear macOS quarantine
    path      check PATH and print shell guidance if needed

The download workspace is removed whatever happens. Errors are re-raised as
InstallationError subclasses tagged with the stage that failed.
"""

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from dataclasses import dataclass
from pathlib import Path

from cc_switch_tools.config import InstallerConfig
from cc_switch_tools.exceptions import InstallationError
from cc_switch_tools.installer.archive import extract_archive
from cc_switch_tools.installer.binary import clear_quarantine, install_binary
from cc_switch_tools.installer.detection import ReleaseAsset, detect_asset
from cc_switch_tools.installer.fetch import Fetcher, resolve_fetcher
from cc_switch_tools.installer.path_check import (
    PathGuidance,
    is_on_path,
    shell_guidance,
)
from cc_switch_tools.installer.workspace import TemporaryWorkspace
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)


async def _drain(future: "asyncio.Future[Path]") -> None:
    """Wait for a shielded future, ignoring further cancellation."""
    while not future.done():
        with suppress(asyncio.CancelledError):
            await asyncio.wait({future})
    if not future.cancelled() and future.exception() is not None:
        logger.debug("Extraction aborted: %s", future.exception())


@dataclass(frozen=True)
class InstallTarget:
    """Where the binary is installed."""

    install_dir: Path
    binary_name: str

    @property
    def path(self) -> Path:
        return self.install_dir / self.binary_name


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install."""

    asset: ReleaseAsset
    target: Path
    on_path: bool
    guidance: PathGuidance | None = None


class InstallService:
    """Runs the installer steps for one invocation."""

    def __init__(
        self,
        config: InstallerConfig,
        fetcher: Fetcher | None = None,
        system: str | None = None,
        machine: str | None = None,
    ) -> None:
        """Initialize installer.

        Args:
            config: Installer configuration
            fetcher: Download backend (resolved from config.fetchers if None)
            system: OS name override (defaults to the host)
            machine: Architecture override (defaults to the host)

        """
        self.config = config
        self.fetcher = fetcher
        self.system = system
        self.machine = machine
        self.target = InstallTarget(config.install_dir, config.binary_name)
        self.stage = "init"

    @contextmanager
    def _stage(self, name: str) -> Iterator[None]:
        """Record the running stage and tag errors raised inside it."""
        self.stage = name
        logger.debug("Stage: %s", name)
        try:
            yield
        except InstallationError as e:
            e.stage = e.stage or name
            raise
        except OSError as e:
            error = InstallationError(str(e))
            error.stage = name
            raise error from e

    def _resolve_fetcher(self) -> Fetcher:
        if self.fetcher is None:
            self.fetcher = resolve_fetcher(
                self.config.fetchers, self.config.timeout_seconds
            )
        return self.fetcher

    def detect(self) -> ReleaseAsset:
        with self._stage("detect"):
            asset = detect_asset(self.system, self.machine)
            self.fetcher = self._resolve_fetcher()
        logger.debug(
            "Platform %s/%s -> %s", asset.system, asset.machine, asset.name
        )
        return asset

    async def download(self, asset: ReleaseAsset, workspace: Path) -> Path:
        with self._stage("download"):
            fetcher = self._resolve_fetcher()
            url = self.config.download_url(asset.name)
            dest = workspace / asset.name
            logger.info("Downloading %s", asset.name)
            logger.debug("URL: %s (via %s)", url, fetcher.name)
            await fetcher.fetch(url, dest)
        return dest

    async def extract(self, archive: Path, workspace: Path) -> Path:
        with self._stage("extract"):
            future = asyncio.ensure_future(
                asyncio.to_thread(
                    extract_archive,
                    archive,
                    workspace,
                    self.config.binary_name,
                )
            )
            try:
                return await asyncio.shield(future)
            except asyncio.CancelledError:
                # The worker thread cannot be stopped and keeps writing into
                # the workspace, so it must finish before cleanup runs.
                await _drain(future)
                raise

    async def install(self, binary: Path, asset: ReleaseAsset) -> Path:
        with self._stage("install"):
            target = install_binary(binary, self.target.path)
            if asset.is_macos:
                await clear_quarantine(target)
        return target

    def check_path(self) -> tuple[bool, PathGuidance | None]:
        with self._stage("path"):
            install_dir = self.config.install_dir
            if is_on_path(install_dir, self.config.path_env):
                return True, None
            logger.warning("%s is not in your PATH", install_dir)
            return False, shell_guidance(install_dir, self.config.shell)

    async def run(self) -> InstallResult:
        """Run every installer step.

        Returns:
            InstallResult describing the installed binary

        Raises:
            InstallationError: If any step fails (``stage`` is set)

        """
        asset = self.detect()

        with TemporaryWorkspace(self.config.temp_root) as workspace:
            archive = await self.download(asset, workspace)
            binary = await self.extract(archive, workspace)
            target = await self.install(binary, asset)

        logger.info("Installed %s to %s", self.config.binary_name, target)
        on_path, guidance = self.check_path()
        return InstallResult(asset, target, on_path, guidance)
