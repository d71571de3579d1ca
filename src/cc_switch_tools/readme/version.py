"""Target version resolution and validation."""

import re
from pathlib import Path

from packaging.version import InvalidVersion, Version

from cc_switch_tools.exceptions import MissingInputFileError, ValidationError
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)

VERSION_RE = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+$")

# First `version = "..."` line of the manifest (the [package] version)
MANIFEST_VERSION_RE = re.compile(r'^version = "(?P<version>[^"]*)"', re.M)

VERSION_HINT = "Expected format: X.X.X (e.g., 4.1.0)"


def validate_version(version: str) -> str:
    """Check that ``version`` is exactly MAJOR.MINOR.PATCH.

    Args:
        version: Candidate version string

    Returns:
        The version unchanged

    Raises:
        ValidationError: If the version is not three dot-separated integers

    """
    if not VERSION_RE.fullmatch(version):
        msg = f"Invalid version format: {version}. {VERSION_HINT}"
        raise ValidationError(msg)
    return version


def read_manifest_version(manifest: Path) -> str:
    """Read the first ``version = "X.Y.Z"`` line of a Cargo manifest.

    Raises:
        MissingInputFileError: If the manifest does not exist
        ValidationError: If no version line is found

    """
    if not manifest.is_file():
        msg = f"Cargo.toml not found at: {manifest}"
        raise MissingInputFileError(msg)

    match = MANIFEST_VERSION_RE.search(manifest.read_text(encoding="utf-8"))
    if match is None or not match.group("version"):
        msg = f"Failed to extract version from {manifest}"
        raise ValidationError(msg)
    return match.group("version")


def resolve_version(argument: str | None, manifest: Path) -> str:
    """Return the validated target version.

    An explicit argument is used verbatim; otherwise the manifest is read.
    """
    if argument is not None:
        logger.info("Using provided version: %s", argument)
        return validate_version(argument)

    logger.info("Reading version from %s...", manifest)
    version = read_manifest_version(manifest)
    validate_version(version)
    logger.info("Detected version: %s", version)
    return version


def is_downgrade(current: str, target: str) -> bool:
    """Return True when ``current`` is a newer version than ``target``.

    Unparseable versions (e.g. "unknown") never count as a downgrade.
    """
    try:
        return Version(current) > Version(target)
    except InvalidVersion:
        return False
