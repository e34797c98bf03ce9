"""CLI runner for iowalk.

Parses arguments, loads settings and routes the command to its handler.
"""

import sys
from argparse import Namespace

from .. import __version__
from ..config import Paths, SettingsManager
from ..domain.types import Settings
from ..exceptions import IowalkError
from ..logger import console_level, get_logger, update_logger_from_config
from .commands import (
    BaseCommandHandler,
    ConfigHandler,
    CopyHandler,
    InspectHandler,
    LifecycleHandler,
    PathsHandler,
)
from .parser import CLIParser

logger = get_logger(__name__)

HANDLERS: dict[str, type[BaseCommandHandler]] = {
    "lifecycle": LifecycleHandler,
    "inspect": InspectHandler,
    "copy": CopyHandler,
    "paths": PathsHandler,
    "config": ConfigHandler,
}


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, argv: list[str] | None = None) -> None:
        """Initialize the runner.

        Args:
            argv: Arguments to parse (defaults to ``sys.argv[1:]``)

        """
        self.argv = argv

    def _load_settings(
        self, args: Namespace
    ) -> tuple[SettingsManager, Settings]:
        settings_file = Paths.expand_path(args.config) if args.config else None
        manager = SettingsManager(settings_file)
        settings = manager.load_settings()
        update_logger_from_config(settings)
        return manager, settings

    async def run(self) -> None:
        """Run the CLI application.

        Raises:
            SystemExit: With status 1 when no command is given, the command
                fails with an iowalk error, or the user cancels

        """
        try:
            args = CLIParser().parse_args(self.argv)

            if args.version:
                print(__version__)
                return

            if not args.command:
                print("❌ No command specified. Use --help.")
                sys.exit(1)

            manager, settings = self._load_settings(args)
            await self._execute_command(args, manager, settings)

        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            sys.exit(1)
        except IowalkError as e:
            logger.error("%s", e)  # noqa: TRY400
            print(f"❌ {e}")
            sys.exit(1)

    async def _execute_command(
        self, args: Namespace, manager: SettingsManager, settings: Settings
    ) -> None:
        """Execute the command with its handler.

        Args:
            args: Parsed command-line arguments
            manager: Settings manager used to load ``settings``
            settings: Effective settings

        """
        handler = HANDLERS[args.command](manager, settings)
        logger.debug("Executing command: %s", args.command)

        if getattr(args, "verbose", False):
            with console_level("DEBUG"):
                await handler.execute(args)
        else:
            await handler.execute(args)
