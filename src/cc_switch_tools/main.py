"""Main CLI entry point for cc-switch-tools.

Provides the ``cc-switch-tools`` console script plus the single-purpose
``cc-switch-install`` and ``cc-switch-update-readme`` aliases.
"""

import asyncio
import contextlib
import signal
import sys
from collections.abc import Sequence

import uvloop

from cc_switch_tools.cli import CLIRunner
from cc_switch_tools.logger import get_logger

logger = get_logger(__name__)


async def async_main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI asynchronously.

    SIGTERM cancels the running command so that context managers (the
    installer's temporary workspace in particular) unwind as they would on
    Ctrl+C.
    """
    task = asyncio.current_task()
    if task is not None:
        with contextlib.suppress(NotImplementedError):
            asyncio.get_running_loop().add_signal_handler(
                signal.SIGTERM, task.cancel
            )

    runner = CLIRunner()
    return await runner.run(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI application and exit with its status."""
    try:
        code = uvloop.run(async_main(argv))
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        sys.exit(1)
    except asyncio.CancelledError:
        logger.warning("Operation cancelled")
        sys.exit(1)
    sys.exit(code)


def install_main() -> None:
    """Entry point for ``cc-switch-install``."""
    main(["install", *sys.argv[1:]])


def update_readme_main() -> None:
    """Entry point for ``cc-switch-update-readme``."""
    main(["update-readme", *sys.argv[1:]])


if __name__ == "__main__":
    main()
