"""README version maintenance."""

from cc_switch_tools.readme.rules import (
    DEFAULT_RULES,
    RewriteRule,
    apply_rules,
)
from cc_switch_tools.readme.updater import (
    FileUpdateResult,
    ReadmeVersionUpdater,
    UpdateSummary,
    count_changed_lines,
)
from cc_switch_tools.readme.version import (
    is_downgrade,
    read_manifest_version,
    resolve_version,
    validate_version,
)

__all__ = [
    "DEFAULT_RULES",
    "FileUpdateResult",
    "ReadmeVersionUpdater",
    "RewriteRule",
    "UpdateSummary",
    "apply_rules",
    "count_changed_lines",
    "is_downgrade",
    "read_manifest_version",
    "resolve_version",
    "validate_version",
]
