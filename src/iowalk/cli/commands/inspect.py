"""Inspect command: print metadata of one path."""

from argparse import Namespace

from iowalk.config import Paths
from iowalk.core.lifecycle import StagingLifecycle
from iowalk.domain.types import Failure
from iowalk.ui.display import display_inspection, print_json

from .base import BaseCommandHandler


class InspectHandler(BaseCommandHandler):
    """Thin coordinator for the inspect command."""

    async def execute(self, args: Namespace) -> None:
        """Execute the inspect command."""
        target = Paths.expand_path(args.target)
        try:
            metadata = StagingLifecycle().inspect(target)
        except OSError as e:
            display_inspection(None, Failure.from_os_error(target, e))
            return

        if args.json:
            print_json(metadata)
        else:
            display_inspection(metadata)
