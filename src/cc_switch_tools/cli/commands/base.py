"""Base command handler for cc-switch-tools CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from cc_switch_tools.config import Settings


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root: it loads the settings once and
    injects them into every handler.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings: Loaded settings file values

        """
        self.settings = settings

    @abstractmethod
    async def execute(self, args: Namespace) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """
