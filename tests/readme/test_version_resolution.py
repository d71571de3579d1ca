"""Tests for target version validation and resolution."""

from pathlib import Path

import pytest

from cc_switch_tools.exceptions import MissingInputFileError, ValidationError
from cc_switch_tools.readme import (
    is_downgrade,
    read_manifest_version,
    resolve_version,
    validate_version,
)

CARGO_TOML = """\
[package]
name = "cc-switch"
version = "5.0.1"
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }

[dev-dependencies]
version = "9.9.9"
"""


@pytest.mark.parametrize("version", ["4.2.0", "0.0.1", "10.20.300"])
def test_valid_versions(version: str) -> None:
    assert validate_version(version) == version


@pytest.mark.parametrize(
    "version",
    ["4.2", "v4.2.0", "4.2.0-beta", "4.2.0.1", "", "a.b.c", "4.2.0\n"],
)
def test_invalid_versions(version: str) -> None:
    """Test anything but three dot-separated integers is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        validate_version(version)

    assert "Invalid version format" in str(exc_info.value)
    assert "X.X.X" in str(exc_info.value)


class TestManifest:
    """Test reading the package version from Cargo.toml."""

    def test_reads_first_version_line(self, tmp_path: Path) -> None:
        manifest = tmp_path / "Cargo.toml"
        manifest.write_text(CARGO_TOML, encoding="utf-8")

        assert read_manifest_version(manifest) == "5.0.1"

    def test_inline_table_versions_are_ignored(self, tmp_path: Path) -> None:
        manifest = tmp_path / "Cargo.toml"
        manifest.write_text(
            '[dependencies]\nserde = { version = "1.0" }\n'
            '[package]\nversion = "2.3.4"\n',
            encoding="utf-8",
        )

        assert read_manifest_version(manifest) == "2.3.4"

    def test_missing_manifest(self, tmp_path: Path) -> None:
        with pytest.raises(
            MissingInputFileError, match="Cargo.toml not found"
        ):
            read_manifest_version(tmp_path / "Cargo.toml")

    def test_manifest_without_version(self, tmp_path: Path) -> None:
        manifest = tmp_path / "Cargo.toml"
        manifest.write_text('[package]\nname = "x"\n', encoding="utf-8")

        with pytest.raises(ValidationError, match="Failed to extract"):
            read_manifest_version(manifest)


class TestResolveVersion:
    """Test argument-over-manifest precedence."""

    def test_argument_wins(self, tmp_path: Path) -> None:
        assert resolve_version("4.2.0", tmp_path / "missing.toml") == "4.2.0"

    def test_invalid_argument(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            resolve_version("4.2", tmp_path / "missing.toml")

    def test_falls_back_to_manifest(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        manifest = tmp_path / "Cargo.toml"
        manifest.write_text(CARGO_TOML, encoding="utf-8")

        assert resolve_version(None, manifest) == "5.0.1"
        assert "Detected version: 5.0.1" in caplog.text

    def test_invalid_manifest_version(self, tmp_path: Path) -> None:
        manifest = tmp_path / "Cargo.toml"
        manifest.write_text('version = "5.0.1-rc.1"\n', encoding="utf-8")

        with pytest.raises(ValidationError, match="5.0.1-rc.1"):
            resolve_version(None, manifest)


@pytest.mark.parametrize(
    ("current", "target", "expected"),
    [
        ("5.0.1", "5.0.0", True),
        ("5.0.0", "5.0.1", False),
        ("5.0.1", "5.0.1", False),
        ("10.0.0", "9.9.9", True),
        ("unknown", "1.0.0", False),
    ],
)
def test_is_downgrade(current: str, target: str, expected: bool) -> None:
    assert is_downgrade(current, target) is expected
