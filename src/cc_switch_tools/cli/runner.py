"""CLI runner for cc-switch-tools.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from collections.abc import Sequence

from cc_switch_tools import __version__
from cc_switch_tools.cli.commands import (
    BaseCommandHandler,
    InstallCommandHandler,
    UpdateReadmeHandler,
)
from cc_switch_tools.cli.parser import CLIParser
from cc_switch_tools.config import Settings, SettingsManager
from cc_switch_tools.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            settings: Settings to use (loaded from the settings file if None)

        """
        self.settings = settings or SettingsManager().load()
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "install": InstallCommandHandler(self.settings),
            "update-readme": UpdateReadmeHandler(self.settings),
        }

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the selected command.

        Returns:
            Process exit code

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if not args.command:
            logger.error("No command specified. Use --help.")
            return 1

        update_logger_from_config(self.settings)
        if args.verbose:
            set_console_level("DEBUG")

        return await self._execute_command(args)

    async def _execute_command(self, args: Namespace) -> int:
        handler = self.command_handlers.get(args.command)
        if handler is None:
            logger.error("Unknown command: %s", args.command)
            return 1

        logger.debug("Running command: %s", args.command)
        try:
            return await handler.execute(args)
        except Exception as e:
            logger.exception("Unexpected error: %s", e)
            return 1

