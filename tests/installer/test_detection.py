"""Tests for platform detection and asset selection."""

import pytest

from cc_switch_tools.exceptions import UnsupportedPlatformError
from cc_switch_tools.installer import ReleaseAsset, detect_asset


@pytest.mark.parametrize(
    ("system", "machine", "expected"),
    [
        ("Darwin", "arm64", "cc-switch-cli-darwin-universal.tar.gz"),
        ("Darwin", "x86_64", "cc-switch-cli-darwin-universal.tar.gz"),
        ("Linux", "x86_64", "cc-switch-cli-linux-x64-musl.tar.gz"),
        ("Linux", "amd64", "cc-switch-cli-linux-x64-musl.tar.gz"),
        ("Linux", "aarch64", "cc-switch-cli-linux-arm64-musl.tar.gz"),
        ("Linux", "arm64", "cc-switch-cli-linux-arm64-musl.tar.gz"),
    ],
)
def test_supported_platforms(system: str, machine: str, expected: str) -> None:
    """Test every supported pair maps to its documented asset."""
    asset = detect_asset(system, machine)

    assert asset == ReleaseAsset(expected, system, machine)
    assert detect_asset(system, machine) == asset  # deterministic


def test_macos_flag() -> None:
    """Test is_macos is only set for Darwin assets."""
    assert detect_asset("Darwin", "arm64").is_macos
    assert not detect_asset("Linux", "x86_64").is_macos


@pytest.mark.parametrize(
    "system", ["Windows", "Windows_NT", "MINGW64_NT-10.0", "MSYS_NT-10.0",
               "CYGWIN_NT-10.0"]
)
def test_windows_is_unsupported(system: str) -> None:
    """Test Windows variants fail with a pointer to the zip asset."""
    with pytest.raises(UnsupportedPlatformError) as exc_info:
        detect_asset(system, "x86_64")

    assert "does not support Windows" in str(exc_info.value)
    assert "cc-switch-cli-windows-x64.zip" in exc_info.value.hint
    assert "github.com/SaladDay/cc-switch-cli/releases" in exc_info.value.hint


@pytest.mark.parametrize(
    ("system", "machine", "message"),
    [
        ("FreeBSD", "amd64", "Unsupported OS: FreeBSD"),
        ("", "x86_64", "Unsupported OS: unknown"),
        ("Linux", "riscv64", "Unsupported Linux architecture: riscv64"),
        ("Linux", "armv7l", "Unsupported Linux architecture: armv7l"),
    ],
)
def test_unsupported_platforms(
    system: str, machine: str, message: str
) -> None:
    """Test unsupported pairs raise with the releases page as hint."""
    with pytest.raises(UnsupportedPlatformError, match=message) as exc_info:
        detect_asset(system, machine)

    assert exc_info.value.hint.startswith("See available assets:")


def test_defaults_to_host(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test host identifiers are read from the platform module."""
    monkeypatch.setattr(
        "cc_switch_tools.installer.detection.platform.system",
        lambda: "Linux",
    )
    monkeypatch.setattr(
        "cc_switch_tools.installer.detection.platform.machine",
        lambda: "aarch64",
    )

    assert detect_asset().name == "cc-switch-cli-linux-arm64-musl.tar.gz"
