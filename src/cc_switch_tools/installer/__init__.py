"""Installer for the prebuilt cc-switch binary."""

from cc_switch_tools.installer.detection import ReleaseAsset, detect_asset
from cc_switch_tools.installer.fetch import (
    AiohttpFetcher,
    CurlFetcher,
    Fetcher,
    WgetFetcher,
    resolve_fetcher,
)
from cc_switch_tools.installer.path_check import (
    PathGuidance,
    is_on_path,
    shell_guidance,
)
from cc_switch_tools.installer.service import (
    InstallResult,
    InstallService,
    InstallTarget,
)
from cc_switch_tools.installer.workspace import TemporaryWorkspace

__all__ = [
    "AiohttpFetcher",
    "CurlFetcher",
    "Fetcher",
    "InstallResult",
    "InstallService",
    "InstallTarget",
    "PathGuidance",
    "ReleaseAsset",
    "TemporaryWorkspace",
    "WgetFetcher",
    "detect_asset",
    "is_on_path",
    "resolve_fetcher",
    "shell_guidance",
]
