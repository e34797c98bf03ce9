"""Configuration package for iowalk.

Exposes the settings manager and path helpers::

    from iowalk.config import SettingsManager

    settings = SettingsManager().load_settings()
    target = settings["staging"]["target"]
"""

from iowalk.config.paths import Paths
from iowalk.config.settings import SettingsManager

__all__ = ["Paths", "SettingsManager"]
