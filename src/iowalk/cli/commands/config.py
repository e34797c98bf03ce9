"""Config command: show or initialize ``settings.conf``."""

from argparse import Namespace

from iowalk.ui.display import display_settings

from .base import BaseCommandHandler


class ConfigHandler(BaseCommandHandler):
    """Shows the effective settings or writes them to disk."""

    async def execute(self, args: Namespace) -> None:
        """Execute the config command."""
        settings_file = self.settings_manager.settings_file

        if args.show:
            display_settings(self.settings, settings_file)
            return

        if settings_file.exists() and not args.force:
            print(
                f"⚠️  Settings file already exists: {settings_file} "
                "(use --force to overwrite)"
            )
            return

        written = self.settings_manager.save_settings(self.settings)
        print(f"✅ Settings written to {written}")
