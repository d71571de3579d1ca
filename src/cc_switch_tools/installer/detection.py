"""Host platform detection and release asset selection."""

import platform
from dataclasses import dataclass

from cc_switch_tools.constants import (
    ASSET_DARWIN_UNIVERSAL,
    ASSET_LINUX_ARM64,
    ASSET_LINUX_X64,
    ASSET_WINDOWS_X64,
    LINUX_ARM64_MACHINES,
    LINUX_X64_MACHINES,
    RELEASES_URL,
    WINDOWS_SYSTEM_PREFIXES,
)
from cc_switch_tools.exceptions import UnsupportedPlatformError


@dataclass(frozen=True)
class ReleaseAsset:
    """Release archive selected for the host platform."""

    name: str
    system: str
    machine: str

    @property
    def is_macos(self) -> bool:
        """Whether the asset targets macOS."""
        return self.system == "Darwin"


def detect_asset(
    system: str | None = None, machine: str | None = None
) -> ReleaseAsset:
    """Map an OS/architecture pair to its release asset.

    The universal macOS build covers both Apple Silicon and Intel, so the
    architecture is only inspected on Linux.

    Args:
        system: OS name as reported by uname -s (defaults to platform.system())
        machine: Machine name as reported by uname -m
            (defaults to platform.machine())

    Returns:
        ReleaseAsset for the platform

    Raises:
        UnsupportedPlatformError: If no asset exists for the platform

    """
    system = platform.system() if system is None else system
    machine = platform.machine() if machine is None else machine

    if system == "Darwin":
        return ReleaseAsset(ASSET_DARWIN_UNIVERSAL, system, machine)

    if system == "Linux":
        arch = machine.lower()
        if arch in LINUX_X64_MACHINES:
            return ReleaseAsset(ASSET_LINUX_X64, system, machine)
        if arch in LINUX_ARM64_MACHINES:
            return ReleaseAsset(ASSET_LINUX_ARM64, system, machine)
        msg = f"Unsupported Linux architecture: {machine or 'unknown'}"
        raise UnsupportedPlatformError(
            msg, hint=f"See available assets: {RELEASES_URL}"
        )

    if system.lower().startswith(WINDOWS_SYSTEM_PREFIXES):
        msg = "This installer does not support Windows."
        raise UnsupportedPlatformError(
            msg,
            hint=f"Download {ASSET_WINDOWS_X64} from: {RELEASES_URL}",
        )

    msg = f"Unsupported OS: {system or 'unknown'}"
    raise UnsupportedPlatformError(
        msg, hint=f"See available assets: {RELEASES_URL}"
    )
