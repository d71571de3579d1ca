"""Advisory console output shared by the CLI commands.

Status lines go through the logger; the multi-line blocks here (PATH
guidance, version tables, next steps) are printed to stdout as-is.
"""

import sys
from collections.abc import Sequence

from cc_switch_tools.installer.path_check import PathGuidance
from cc_switch_tools.logger import supports_color

BOLD = "\033[1m"
RESET = "\033[0m"


def bold(text: str) -> str:
    """Return ``text`` in bold when stdout is a color-capable terminal."""
    if supports_color(sys.stdout):
        return f"{BOLD}{text}{RESET}"
    return text


def print_header(title: str) -> None:
    """Print a title underlined with '='."""
    print()
    print(f"  {title}")
    print("=" * 40)
    print()


def print_path_guidance(guidance: PathGuidance) -> None:
    """Print how to add the install directory to PATH."""
    print(f"\n  Add this to {guidance.profile}:\n\n    {guidance.command}\n")
    print(
        "  Then restart your shell or run:\n\n"
        f"    {guidance.command}\n"
    )


def print_verify_hint(binary_name: str) -> None:
    """Print the post-install verification hint."""
    print(f"  Run {bold(f'{binary_name} --version')} to verify.\n")


def print_version_summary(
    current: Sequence[tuple[str, str]], new_version: str
) -> None:
    """Print ``<file>: <old> → <new>`` for each documentation file."""
    width = max((len(name) for name, _ in current), default=0) + 1
    print()
    for name, old_version in current:
        label = f"{name}:"
        print(f"  {label:<{width}} {old_version} → {new_version}")
    print()


def print_next_steps(updated: Sequence[str], new_version: str) -> None:
    """Print updated files and suggested follow-up commands."""
    files = " ".join(updated)
    restore = " && ".join(f"mv {name}.bak {name}" for name in updated)
    print()
    print("  Updated files:")
    for name in updated:
        print(f"    - {name}")
    print()
    print("  Next steps:")
    print(f"    1. Review changes: git diff {files}")
    print(
        f"    2. Commit changes: git add {files} && "
        f"git commit -m 'chore: bump version to {new_version}'"
    )
    print(f"    3. If needed, restore backups: {restore}")
    print()
