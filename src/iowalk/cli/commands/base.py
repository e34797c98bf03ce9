"""Base command handler for iowalk CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from iowalk.config import SettingsManager
from iowalk.domain.types import Settings


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    The runner is the composition root: it loads settings once and hands
    the manager and the loaded values to every handler.
    """

    def __init__(
        self, settings_manager: SettingsManager, settings: Settings
    ) -> None:
        """Initialize the handler with shared dependencies.

        Args:
            settings_manager: Manager the settings were loaded with
            settings: Effective settings

        """
        self.settings_manager = settings_manager
        self.settings = settings

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments."""
