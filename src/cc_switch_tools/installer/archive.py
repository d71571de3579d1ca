"""Release archive extraction."""

import tarfile
from pathlib import Path

from cc_switch_tools.exceptions import ArchiveIntegrityError
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)


def extract_archive(archive: Path, dest_dir: Path, binary_name: str) -> Path:
    """Extract a gzip tarball and return the path of the contained binary.

    Members are extracted with the ``data`` filter, which rejects absolute
    paths, parent-directory traversal and device files.

    Args:
        archive: Path to the downloaded ``.tar.gz`` file
        dest_dir: Directory to extract into
        binary_name: Executable expected at the archive root

    Returns:
        Path to the extracted binary

    Raises:
        ArchiveIntegrityError: If the archive is corrupt or lacks the binary

    """
    logger.info("Extracting archive")
    try:
        with tarfile.open(archive, mode="r:gz") as tar:
            tar.extractall(dest_dir, filter="data")
    except (tarfile.TarError, EOFError, OSError) as e:
        msg = f"Could not extract {archive.name}: {e}"
        raise ArchiveIntegrityError(msg) from e

    binary = dest_dir / binary_name
    if not binary.is_file():
        msg = f"Binary '{binary_name}' not found in archive."
        raise ArchiveIntegrityError(msg, hint="The archive may be corrupt.")

    logger.debug("Extracted binary: %s", binary)
    return binary
