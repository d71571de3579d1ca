"""Placing the extracted binary into the install directory."""

import asyncio
import errno
import os
import shutil
import tempfile
from pathlib import Path

from cc_switch_tools.constants import BINARY_PERMISSIONS
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)


def _stage_copy(source: Path, target: Path) -> Path:
    """Copy ``source`` next to ``target`` so it can be renamed into place."""
    fd, staged = tempfile.mkstemp(
        prefix=f".{target.name}.", dir=target.parent
    )
    os.close(fd)
    staged_path = Path(staged)
    try:
        shutil.copyfile(source, staged_path)
    except OSError:
        staged_path.unlink(missing_ok=True)
        raise
    return staged_path


def install_binary(source: Path, target: Path) -> Path:
    """Atomically replace ``target`` with ``source`` and make it executable.

    The install directory is created if missing. A rename is used so that a
    running copy of the old binary is never left half-written; when source
    and target live on different filesystems the file is first copied into
    the target directory and renamed from there.

    Args:
        source: Extracted binary inside the workspace
        target: Final install path

    Returns:
        The target path

    """
    target.parent.mkdir(parents=True, exist_ok=True)

    try:
        os.replace(source, target)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        logger.debug("Cross-device move, staging copy in %s", target.parent)
        staged = _stage_copy(source, target)
        try:
            os.replace(staged, target)
        except OSError:
            staged.unlink(missing_ok=True)
            raise

    target.chmod(BINARY_PERMISSIONS)
    logger.debug("Installed %s with mode %o", target, BINARY_PERMISSIONS)
    return target


async def clear_quarantine(path: Path) -> bool:
    """Clear macOS extended attributes (Gatekeeper quarantine) from ``path``.

    Best-effort: a missing ``xattr`` tool or a failing command is logged at
    debug level and otherwise ignored.

    Returns:
        True if the attributes were cleared

    """
    xattr = shutil.which("xattr")
    if xattr is None:
        logger.debug("xattr not available, skipping quarantine removal")
        return False

    try:
        process = await asyncio.create_subprocess_exec(
            xattr,
            "-cr",
            str(path),
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        await process.wait()
    except OSError as e:
        logger.debug("Could not run xattr on %s: %s", path, e)
        return False

    if process.returncode != 0:
        logger.debug("xattr exited with %s for %s", process.returncode, path)
        return False
    return True
