"""Install command handler."""

from argparse import Namespace

from cc_switch_tools.cli.commands.base import BaseCommandHandler
from cc_switch_tools.config import InstallerConfig
from cc_switch_tools.exceptions import InstallationError
from cc_switch_tools.installer import InstallService
from cc_switch_tools.logger import get_logger
from cc_switch_tools.ui import print_path_guidance, print_verify_hint

logger = get_logger(__name__)


class InstallCommandHandler(BaseCommandHandler):
    """Handler for ``cc-switch-tools install``."""

    async def execute(self, args: Namespace) -> int:
        config = InstallerConfig.from_environment(self.settings)
        service = InstallService(config)
        try:
            result = await service.run()
        except InstallationError as e:
            self._report_failure(config, e.stage or service.stage, e)
            return 1
        except Exception as e:
            logger.debug("Unexpected installer error", exc_info=True)
            self._report_failure(config, service.stage, e)
            return 1

        if result.guidance is not None:
            print_path_guidance(result.guidance)
        print_verify_hint(config.binary_name)
        return 0

    def _report_failure(
        self, config: InstallerConfig, stage: str, error: Exception
    ) -> None:
        """Report a failed install; the manual download URL is always shown."""
        logger.error("%s", error)
        hint = getattr(error, "hint", None)
        if hint:
            logger.error("%s", hint)
        logger.error("Installation failed (stage: %s)", stage)
        logger.error(
            "If the problem persists, download manually: %s",
            config.releases_url,
        )
