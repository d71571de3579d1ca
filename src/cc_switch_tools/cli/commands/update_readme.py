"""update-readme command handler."""

from argparse import Namespace

import orjson

from cc_switch_tools.cli.commands.base import BaseCommandHandler
from cc_switch_tools.config import UpdaterConfig
from cc_switch_tools.exceptions import CCSwitchToolsError
from cc_switch_tools.logger import get_logger
from cc_switch_tools.readme import ReadmeVersionUpdater, resolve_version
from cc_switch_tools.ui import (
    print_header,
    print_next_steps,
    print_version_summary,
)

logger = get_logger(__name__)


class UpdateReadmeHandler(BaseCommandHandler):
    """Handler for ``cc-switch-tools update-readme``."""

    async def execute(self, args: Namespace) -> int:
        config = UpdaterConfig.for_root(args.root)
        updater = ReadmeVersionUpdater(config)
        as_json = getattr(args, "json", False)

        if not as_json:
            print_header("CC-Switch README Version Updater")

        try:
            new_version = resolve_version(
                args.target_version, config.manifest_path
            )
            logger.info("Checking current README versions...")
            current = updater.current_versions()
            if not as_json:
                print_version_summary(list(current.items()), new_version)
            summary = updater.run(new_version, current)
        except CCSwitchToolsError as e:
            logger.error("%s", e)
            return 1

        if as_json:
            print(
                orjson.dumps(
                    summary.to_dict(), option=orjson.OPT_INDENT_2
                ).decode()
            )
            return 0

        if not summary.up_to_date:
            updated = [updater.display_name(p) for p in summary.updated_files]
            if updated:
                logger.info("All README files updated successfully!")
                print_next_steps(updated, new_version)
            else:
                logger.warning("No README file needed changes")
        return 0
