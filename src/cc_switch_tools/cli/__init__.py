"""Command-line interface for cc-switch-tools."""

from cc_switch_tools.cli.parser import CLIParser
from cc_switch_tools.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
