"""Paths command: equivalent constructions of one path."""

from argparse import Namespace

from iowalk.config import Paths
from iowalk.core.path_forms import all_equivalent, build_path_forms
from iowalk.ui.display import display_path_forms

from .base import BaseCommandHandler


class PathsHandler(BaseCommandHandler):
    """Thin coordinator for the paths command."""

    async def execute(self, args: Namespace) -> None:
        """Execute the paths command."""
        target = (
            Paths.expand_path(args.target)
            if args.target
            else self.settings["staging"]["target"]
        )
        base = Paths.expand_path(args.base) if args.base else None

        forms = build_path_forms(target, base)
        display_path_forms(forms, all_equivalent(forms))
