"""Download backends for fetching release assets.

Every backend implements the ``Fetcher`` protocol. ``resolve_fetcher`` picks
the first available backend from a priority-ordered list of names once at
startup; the installer then uses that backend for its single download.

Backends:
    aiohttp: native HTTP client (always available)
    curl:    external ``curl`` found on PATH
    wget:    external ``wget`` found on PATH
"""

import asyncio
import contextlib
import shutil
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar, Protocol

import aiofiles
import aiohttp

from cc_switch_tools.constants import CHUNK_SIZE, DEFAULT_TIMEOUT_SECONDS
from cc_switch_tools.exceptions import MissingDependencyError, NetworkError
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)


class Fetcher(Protocol):
    """Capability for downloading a URL to a local file."""

    name: str

    def is_available(self) -> bool:
        """Return True when the backend can be used on this host."""
        ...

    async def fetch(self, url: str, dest: Path) -> None:
        """Download ``url`` to ``dest``.

        Raises:
            NetworkError: On HTTP errors (non-2xx) or network failures

        """
        ...


def _remove_partial(dest: Path) -> None:
    if dest.exists():
        logger.debug("Removing partial download: %s", dest)
        with contextlib.suppress(OSError):
            dest.unlink()


class AiohttpFetcher:
    """Native backend built on aiohttp."""

    name = "aiohttp"

    def __init__(
        self,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize backend.

        Args:
            timeout_seconds: Connect timeout; reads may take three times
                longer and the whole transfer sixty times longer
            session: Optional existing session (one is created per fetch
                otherwise)

        """
        self.timeout = aiohttp.ClientTimeout(
            total=timeout_seconds * 60,
            sock_read=timeout_seconds * 3,
            sock_connect=timeout_seconds,
        )
        self.session = session

    def is_available(self) -> bool:
        return True

    async def fetch(self, url: str, dest: Path) -> None:
        try:
            if self.session is not None:
                await self._fetch_with(self.session, url, dest)
            else:
                async with aiohttp.ClientSession(
                    timeout=self.timeout
                ) as session:
                    await self._fetch_with(session, url, dest)
        except (aiohttp.ClientError, TimeoutError) as e:
            _remove_partial(dest)
            msg = f"{url}: {e}"
            raise NetworkError(msg) from e

    async def _fetch_with(
        self, session: aiohttp.ClientSession, url: str, dest: Path
    ) -> None:
        async with session.get(url, timeout=self.timeout) as response:
            response.raise_for_status()
            total = int(response.headers.get("Content-Length", 0))
            logger.debug("Content-Length: %s", total or "unknown")
            async with aiofiles.open(dest, mode="wb") as f:
                async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                    if chunk:
                        await f.write(chunk)


class _CommandFetcher(ABC):
    """Backend delegating to an external download tool."""

    name: ClassVar[str] = ""

    def __init__(self, timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout_seconds = timeout_seconds

    def executable(self) -> str | None:
        return shutil.which(self.name)

    def is_available(self) -> bool:
        return self.executable() is not None

    @abstractmethod
    def build_command(
        self, executable: str, url: str, dest: Path
    ) -> list[str]:
        """Return the argv that downloads ``url`` to ``dest``."""

    async def fetch(self, url: str, dest: Path) -> None:
        executable = self.executable()
        if executable is None:
            msg = f"Required command not found: {self.name}"
            raise MissingDependencyError(msg)

        command = self.build_command(executable, url, dest)
        logger.debug("Running: %s", " ".join(command))
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            _, stderr = await process.communicate()
        except OSError as e:
            _remove_partial(dest)
            msg = f"{url}: {e}"
            raise NetworkError(msg) from e

        if process.returncode != 0:
            _remove_partial(dest)
            detail = stderr.decode("utf-8", errors="ignore").strip()
            msg = f"{url} ({self.name} exited with {process.returncode})"
            if detail:
                msg += f": {detail}"
            raise NetworkError(msg)


class CurlFetcher(_CommandFetcher):
    """Backend using curl."""

    name = "curl"

    def build_command(
        self, executable: str, url: str, dest: Path
    ) -> list[str]:
        return [
            executable,
            "--fail",
            "--location",
            "--silent",
            "--show-error",
            "--connect-timeout",
            str(self.timeout_seconds),
            "--output",
            str(dest),
            url,
        ]


class WgetFetcher(_CommandFetcher):
    """Backend using wget."""

    name = "wget"

    def build_command(
        self, executable: str, url: str, dest: Path
    ) -> list[str]:
        return [
            executable,
            "--quiet",
            f"--timeout={self.timeout_seconds}",
            f"--output-document={dest}",
            url,
        ]


FETCHERS: dict[str, type[AiohttpFetcher] | type[_CommandFetcher]] = {
    AiohttpFetcher.name: AiohttpFetcher,
    CurlFetcher.name: CurlFetcher,
    WgetFetcher.name: WgetFetcher,
}


def resolve_fetcher(
    names: Sequence[str],
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
) -> Fetcher:
    """Return the first available backend from ``names``.

    Args:
        names: Backend names in order of preference
        timeout_seconds: Network timeout passed to the backend

    Returns:
        Fetcher instance

    Raises:
        MissingDependencyError: If none of the named backends is available

    """
    for name in names:
        fetcher_cls = FETCHERS.get(name)
        if fetcher_cls is None:
            logger.warning("Ignoring unknown download backend: %s", name)
            continue
        fetcher = fetcher_cls(timeout_seconds)
        if fetcher.is_available():
            logger.debug("Using download backend: %s", name)
            return fetcher
        logger.debug("Download backend not available: %s", name)

    msg = (
        f"None of the download backends ({', '.join(names)}) is available. "
        "Please install one and retry."
    )
    raise MissingDependencyError(msg)
