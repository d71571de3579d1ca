"""Command handlers for the cc-switch-tools CLI."""

from cc_switch_tools.cli.commands.base import BaseCommandHandler
from cc_switch_tools.cli.commands.install import InstallCommandHandler
from cc_switch_tools.cli.commands.update_readme import UpdateReadmeHandler

__all__ = [
    "BaseCommandHandler",
    "InstallCommandHandler",
    "UpdateReadmeHandler",
]
