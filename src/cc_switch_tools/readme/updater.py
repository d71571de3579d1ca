"""README version synchronisation.

For each documentation file the updater:
    1. detects the current version from the badge line
    2. copies the file to ``<name>.bak`` (a backup left by a previous run
       is overwritten)
    3. applies the rewrite rules in order
    4. drops the backup again if nothing changed, otherwise writes the file
       and reports the number of changed lines
"""

import difflib
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cc_switch_tools.config import UpdaterConfig
from cc_switch_tools.constants import (
    BACKUP_SUFFIX,
    BADGE_MARKER,
    UNKNOWN_VERSION,
)
from cc_switch_tools.exceptions import MissingInputFileError
from cc_switch_tools.logger import get_logger
from cc_switch_tools.readme.rules import (
    DEFAULT_RULES,
    RewriteRule,
    apply_rules,
)
from cc_switch_tools.readme.version import is_downgrade

logger = get_logger(__name__)

_BADGE_VERSION_RE = re.compile(re.escape(BADGE_MARKER) + r"([0-9.]*)-")


@dataclass(frozen=True)
class FileUpdateResult:
    """Outcome of rewriting one documentation file."""

    path: Path
    old_version: str
    changed: bool
    changed_lines: int = 0
    backup_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": str(self.path),
            "old_version": self.old_version,
            "changed": self.changed,
            "changed_lines": self.changed_lines,
            "backup": str(self.backup_path) if self.backup_path else None,
        }


@dataclass(frozen=True)
class UpdateSummary:
    """Outcome of one updater run."""

    new_version: str
    current_versions: dict[str, str]
    up_to_date: bool
    results: list[FileUpdateResult] = field(default_factory=list)

    @property
    def updated_files(self) -> list[Path]:
        return [result.path for result in self.results if result.changed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "new_version": self.new_version,
            "current_versions": self.current_versions,
            "up_to_date": self.up_to_date,
            "results": [result.to_dict() for result in self.results],
        }


def backup_path_for(path: Path) -> Path:
    """Return ``<path>.bak``."""
    return path.with_name(path.name + BACKUP_SUFFIX)


def count_changed_lines(old: str, new: str) -> int:
    """Count changed lines between two texts using a unified diff.

    A line rewritten in place shows up once as removed and once as added,
    so the larger of the two counts is reported.
    """
    added = removed = 0
    for line in difflib.unified_diff(
        old.splitlines(), new.splitlines(), lineterm="", n=0
    ):
        if line.startswith(("+++", "---")):
            continue
        if line.startswith("+"):
            added += 1
        elif line.startswith("-"):
            removed += 1
    return max(added, removed)


class ReadmeVersionUpdater:
    """Rewrites version strings across the project's README files."""

    def __init__(
        self,
        config: UpdaterConfig,
        rules: tuple[RewriteRule, ...] = DEFAULT_RULES,
    ) -> None:
        """Initialize updater.

        Args:
            config: Updater configuration (file locations)
            rules: Ordered rewrite rules

        """
        self.config = config
        self.rules = rules

    def display_name(self, path: Path) -> str:
        """Return ``path`` relative to the project root when possible."""
        try:
            return str(path.relative_to(self.config.root))
        except ValueError:
            return str(path)

    def detect_current_version(self, path: Path) -> str:
        """Return the version shown in the file's badge, or "unknown".

        Raises:
            MissingInputFileError: If the file does not exist

        """
        if not path.is_file():
            msg = f"README not found: {path}"
            raise MissingInputFileError(msg)

        with path.open(encoding="utf-8") as f:
            for line in f:
                if BADGE_MARKER not in line:
                    continue
                match = _BADGE_VERSION_RE.search(line)
                if match and match.group(1):
                    return match.group(1)
                break

        logger.warning(
            "Could not detect current version in %s", self.display_name(path)
        )
        return UNKNOWN_VERSION

    def update_file(
        self, path: Path, new_version: str, old_version: str = UNKNOWN_VERSION
    ) -> FileUpdateResult:
        """Rewrite one file, keeping a backup when it changes.

        Raises:
            MissingInputFileError: If the file does not exist

        """
        name = self.display_name(path)
        if not path.is_file():
            msg = f"File not found: {path}"
            raise MissingInputFileError(msg)

        backup = backup_path_for(path)
        shutil.copy2(path, backup)
        logger.info("Created backup: %s", self.display_name(backup))

        # Bytes round-trip keeps the file's newline style untouched
        original = path.read_bytes().decode("utf-8")
        updated = apply_rules(original, new_version, self.rules)

        if updated == original:
            logger.warning(
                "No changes made to %s (version might already be up-to-date)",
                name,
            )
            backup.unlink()
            return FileUpdateResult(path, old_version, changed=False)

        path.write_bytes(updated.encode("utf-8"))
        changed_lines = count_changed_lines(original, updated)
        logger.info("Updated: %s", name)
        logger.info("  Changed lines: %d", changed_lines)
        return FileUpdateResult(
            path,
            old_version,
            changed=True,
            changed_lines=changed_lines,
            backup_path=backup,
        )

    def current_versions(self) -> dict[str, str]:
        """Detect the current version of every configured file."""
        return {
            self.display_name(path): self.detect_current_version(path)
            for path in self.config.readme_files
        }

    def run(
        self, new_version: str, current: dict[str, str] | None = None
    ) -> UpdateSummary:
        """Bring every README to ``new_version``.

        Args:
            new_version: Validated target version
            current: Previously detected versions (detected if None)

        Returns:
            UpdateSummary; ``up_to_date`` is True when nothing was written

        """
        if current is None:
            current = self.current_versions()

        if all(version == new_version for version in current.values()):
            logger.info(
                "All README files are already up-to-date with version %s",
                new_version,
            )
            return UpdateSummary(new_version, current, up_to_date=True)

        for name, version in current.items():
            if is_downgrade(version, new_version):
                logger.warning(
                    "%s shows %s, which is newer than %s",
                    name,
                    version,
                    new_version,
                )

        logger.info("Starting update process...")
        results = [
            self.update_file(
                path, new_version, current[self.display_name(path)]
            )
            for path in self.config.readme_files
        ]
        return UpdateSummary(
            new_version, current, up_to_date=False, results=results
        )
