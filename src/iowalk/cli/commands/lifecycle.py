"""Lifecycle command: stage, inspect and tear down a staging directory."""

import asyncio
from argparse import Namespace

from iowalk.config import Paths
from iowalk.core.lifecycle import StagingLifecycle
from iowalk.logger import get_logger
from iowalk.ui.display import display_lifecycle, print_json

from .base import BaseCommandHandler

logger = get_logger(__name__)


class LifecycleHandler(BaseCommandHandler):
    """Runs the staging lifecycle against one target."""

    async def execute(self, args: Namespace) -> None:
        """Execute the lifecycle command."""
        staging = self.settings["staging"]
        target = staging["target"]
        if args.target:
            target = Paths.expand_path(args.target)
        count = (
            args.count
            if args.count is not None
            else staging["placeholder_count"]
        )
        template = args.name_template or staging["name_template"]

        logger.debug(
            "Lifecycle run: target=%s count=%d template=%s",
            target,
            count,
            template,
        )
        lifecycle = StagingLifecycle(count=count, name_template=template)
        # Staging creates many files; keep the event loop free meanwhile
        report = await asyncio.to_thread(lifecycle.run, target)

        if args.json:
            print_json(report)
        else:
            display_lifecycle(report)
