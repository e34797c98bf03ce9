"""Command handlers for the iowalk CLI."""

from .base import BaseCommandHandler
from .config import ConfigHandler
from .copy import CopyHandler
from .inspect import InspectHandler
from .lifecycle import LifecycleHandler
from .paths import PathsHandler

__all__ = [
    "BaseCommandHandler",
    "ConfigHandler",
    "CopyHandler",
    "InspectHandler",
    "LifecycleHandler",
    "PathsHandler",
]
