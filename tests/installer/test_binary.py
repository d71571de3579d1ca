"""Tests for binary placement and macOS quarantine removal."""

import errno
import os
import stat
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cc_switch_tools.installer.binary import clear_quarantine, install_binary


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "workspace" / "cc-switch"
    path.parent.mkdir()
    path.write_bytes(b"new binary")
    path.chmod(0o600)
    return path


def test_install_creates_directory(source: Path, tmp_path: Path) -> None:
    target = tmp_path / "home" / ".local" / "bin" / "cc-switch"

    result = install_binary(source, target)

    assert result == target
    assert target.read_bytes() == b"new binary"
    assert stat.S_IMODE(target.stat().st_mode) == 0o755
    assert not source.exists()


def test_install_replaces_existing(source: Path, tmp_path: Path) -> None:
    """Test an existing binary is overwritten in place."""
    target = tmp_path / "bin" / "cc-switch"
    target.parent.mkdir()
    target.write_bytes(b"old binary")

    install_binary(source, target)

    assert target.read_bytes() == b"new binary"
    assert [p.name for p in target.parent.iterdir()] == ["cc-switch"]


def test_cross_device_falls_back_to_staged_copy(
    source: Path, tmp_path: Path
) -> None:
    """Test EXDEV from the first rename triggers copy-then-rename."""
    target = tmp_path / "bin" / "cc-switch"
    real_replace = os.replace
    calls: list[tuple[str, str]] = []

    def fake_replace(src: str | Path, dst: str | Path) -> None:
        calls.append((str(src), str(dst)))
        if len(calls) == 1:
            raise OSError(errno.EXDEV, "Invalid cross-device link")
        real_replace(src, dst)

    with patch(
        "cc_switch_tools.installer.binary.os.replace", side_effect=fake_replace
    ):
        install_binary(source, target)

    assert len(calls) == 2
    assert Path(calls[1][0]).parent == target.parent
    assert target.read_bytes() == b"new binary"
    assert [p.name for p in target.parent.iterdir()] == ["cc-switch"]


def test_other_os_errors_propagate(source: Path, tmp_path: Path) -> None:
    target = tmp_path / "bin" / "cc-switch"

    with (
        patch(
            "cc_switch_tools.installer.binary.os.replace",
            side_effect=PermissionError(errno.EACCES, "Permission denied"),
        ),
        pytest.raises(PermissionError),
    ):
        install_binary(source, target)


class TestClearQuarantine:
    """Test best-effort xattr invocation."""

    @pytest.mark.asyncio
    async def test_runs_xattr(self, tmp_path: Path) -> None:
        process = MagicMock(returncode=0)
        process.wait = AsyncMock(return_value=0)
        with (
            patch(
                "cc_switch_tools.installer.binary.shutil.which",
                return_value="/usr/bin/xattr",
            ),
            patch(
                "cc_switch_tools.installer.binary.asyncio."
                "create_subprocess_exec",
                new=AsyncMock(return_value=process),
            ) as mock_exec,
        ):
            assert await clear_quarantine(tmp_path / "cc-switch")

        args = mock_exec.call_args.args
        assert args[:2] == ("/usr/bin/xattr", "-cr")
        assert args[2] == str(tmp_path / "cc-switch")

    @pytest.mark.asyncio
    async def test_missing_xattr(self, tmp_path: Path) -> None:
        with patch(
            "cc_switch_tools.installer.binary.shutil.which", return_value=None
        ):
            assert not await clear_quarantine(tmp_path / "cc-switch")

    @pytest.mark.asyncio
    async def test_failure_is_not_fatal(self, tmp_path: Path) -> None:
        process = MagicMock(returncode=1)
        process.wait = AsyncMock(return_value=1)
        with (
            patch(
                "cc_switch_tools.installer.binary.shutil.which",
                return_value="/usr/bin/xattr",
            ),
            patch(
                "cc_switch_tools.installer.binary.asyncio."
                "create_subprocess_exec",
                new=AsyncMock(return_value=process),
            ),
        ):
            assert not await clear_quarantine(tmp_path / "cc-switch")
