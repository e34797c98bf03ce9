"""Path helpers for iowalk configuration."""

import os
from pathlib import Path

from iowalk.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    DEFAULT_CONFIG_DIR = HOME_DIR / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME

    @classmethod
    def config_dir(cls) -> Path:
        """Return the configuration directory.

        ``IOWALK_CONFIG_DIR`` takes precedence over ``~/.config/iowalk``.
        """
        override = os.getenv(ENV_CONFIG_DIR)
        if override:
            return Path(override).expanduser()
        return cls.DEFAULT_CONFIG_DIR

    @classmethod
    def settings_file(cls) -> Path:
        """Return the path of ``settings.conf``."""
        return cls.config_dir() / CONFIG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str | Path) -> Path:
        """Expand ``~`` in a configured path.

        Relative paths stay relative so they resolve against the working
        directory of the run, which is what the copy demonstrations expect.

        Args:
            path_str: Path string from settings or the command line

        Returns:
            Expanded path

        """
        return Path(path_str).expanduser()
