"""CLI argument parser for cc-switch-tools.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from cc_switch_tools.constants import ENV_INSTALL_DIR


class CLIParser:
    """Command-line argument parser for cc-switch-tools."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        return self.build().parse_args(argv)

    def build(self) -> argparse.ArgumentParser:
        """Create the full parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="cc-switch-tools",
            description="Install cc-switch and maintain its README versions",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=f"""
Examples:
  # Install the latest cc-switch release into ~/.local/bin
  %(prog)s install

  # Install somewhere else
  {ENV_INSTALL_DIR}=/opt/bin %(prog)s install

  # Sync README versions with src-tauri/Cargo.toml
  %(prog)s update-readme

  # Set README versions explicitly
  %(prog)s update-readme 4.2.0
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version to the main parser."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show cc-switch-tools version and exit",
        )

    def _verbose_parent(self) -> argparse.ArgumentParser:
        """Return a parent parser providing -v/--verbose to subcommands."""
        parent = argparse.ArgumentParser(add_help=False)
        parent.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        return parent

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        parent = self._verbose_parent()
        self._add_install_command(subparsers, parent)
        self._add_update_readme_command(subparsers, parent)

    def _add_install_command(self, subparsers, parent) -> None:
        subparsers.add_parser(
            "install",
            parents=[parent],
            help="Download and install the latest cc-switch binary",
            description=(
                "Download the latest cc-switch release for this platform "
                f"and install it into ${ENV_INSTALL_DIR} "
                "(default: ~/.local/bin)."
            ),
        )

    def _add_update_readme_command(self, subparsers, parent) -> None:
        update_parser = subparsers.add_parser(
            "update-readme",
            parents=[parent],
            help="Rewrite version strings in README.md and README_ZH.md",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s          # Auto-detect from src-tauri/Cargo.toml
  %(prog)s 4.2.0    # Specify version manually
            """,
        )
        update_parser.add_argument(
            "target_version",
            nargs="?",
            metavar="VERSION",
            help="Target version X.Y.Z (default: read from Cargo.toml)",
        )
        update_parser.add_argument(
            "--root",
            type=Path,
            default=None,
            help="Project root containing the READMEs (default: cwd)",
        )
        update_parser.add_argument(
            "--json",
            action="store_true",
            help="Print a JSON summary instead of the text report",
        )
