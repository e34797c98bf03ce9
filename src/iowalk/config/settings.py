"""Settings manager for ``settings.conf``.

Values are layered: built-in defaults first, then whatever the user file
sets. The file is optional; ``save_settings`` writes a commented copy of
the effective settings.
"""

import configparser
from pathlib import Path

from iowalk.config.parser import (
    ConfigCommentManager,
    create_parser,
    strip_inline_comment,
)
from iowalk.config.paths import Paths
from iowalk.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_COPY_DESTINATION,
    DEFAULT_COPY_SOURCE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NAME_TEMPLATE,
    DEFAULT_PLACEHOLDER_COUNT,
    DEFAULT_STAGING_TARGET,
    KEY_BATCH_SIZE,
    KEY_BUFFER_SIZE,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DESTINATION,
    KEY_LOG_LEVEL,
    KEY_NAME_TEMPLATE,
    KEY_PLACEHOLDER_COUNT,
    KEY_SOURCE,
    KEY_TARGET,
    SECTION_DEFAULT,
    SECTION_STAGING,
    SECTION_STREAMS,
    SETTINGS_VERSION,
    VALID_LOG_LEVELS,
)
from iowalk.core.lifecycle import check_name_template
from iowalk.domain.types import Settings, StagingSettings, StreamSettings
from iowalk.exceptions import ConfigurationError, ValidationError
from iowalk.logger import get_logger

logger = get_logger(__name__)

RawSettings = dict[str, str | dict[str, str]]


class SettingsManager:
    """Loads and saves the INI settings file."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize the manager.

        Args:
            settings_file: Explicit settings path
                (defaults to Paths.settings_file())

        """
        self.settings_file = settings_file or Paths.settings_file()

    @staticmethod
    def get_default_settings() -> RawSettings:
        """Return default values in their INI string form."""
        return {
            KEY_CONFIG_VERSION: SETTINGS_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_STAGING: {
                KEY_TARGET: DEFAULT_STAGING_TARGET,
                KEY_PLACEHOLDER_COUNT: str(DEFAULT_PLACEHOLDER_COUNT),
                KEY_NAME_TEMPLATE: DEFAULT_NAME_TEMPLATE,
            },
            SECTION_STREAMS: {
                KEY_SOURCE: DEFAULT_COPY_SOURCE,
                KEY_DESTINATION: DEFAULT_COPY_DESTINATION,
                KEY_BATCH_SIZE: str(DEFAULT_BATCH_SIZE),
                KEY_BUFFER_SIZE: str(DEFAULT_BUFFER_SIZE),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawSettings
    ) -> configparser.ConfigParser:
        """Build a parser pre-filled with ``defaults``."""
        config = create_parser()

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_settings(self) -> Settings:
        """Load settings, layering the user file over defaults.

        Returns:
            Effective settings

        Raises:
            ConfigurationError: If the file is unreadable or a value is invalid

        """
        config = self._create_config_from_defaults(
            self.get_default_settings()
        )

        if self.settings_file.exists():
            logger.debug("Reading settings from %s", self.settings_file)
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    str(e), target=str(self.settings_file)
                ) from e
        else:
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )

        return self._convert_to_settings(config)

    def _get(
        self, config: configparser.ConfigParser, section: str, key: str
    ) -> str:
        return strip_inline_comment(config.get(section, key))

    def _get_int(
        self, config: configparser.ConfigParser, section: str, key: str
    ) -> int:
        raw = self._get(config, section, key)
        try:
            value = int(raw)
        except ValueError as e:
            msg = f"expected an integer, got {raw!r}"
            raise ConfigurationError(msg, target=f"{section}.{key}") from e
        if value < 0:
            msg = f"must not be negative, got {value}"
            raise ConfigurationError(msg, target=f"{section}.{key}")
        return value

    def _get_level(self, config: configparser.ConfigParser, key: str) -> str:
        level = self._get(config, SECTION_DEFAULT, key).upper()
        if level not in VALID_LOG_LEVELS:
            msg = f"unknown log level {level!r}"
            raise ConfigurationError(msg, target=key)
        return level

    def _convert_to_settings(
        self, config: configparser.ConfigParser
    ) -> Settings:
        """Convert a filled parser into typed settings."""
        name_template = self._get(config, SECTION_STAGING, KEY_NAME_TEMPLATE)
        try:
            check_name_template(name_template)
        except ValidationError as e:
            raise ConfigurationError(
                e.message, target=f"{SECTION_STAGING}.{KEY_NAME_TEMPLATE}"
            ) from e

        staging = StagingSettings(
            target=Paths.expand_path(
                self._get(config, SECTION_STAGING, KEY_TARGET)
            ),
            placeholder_count=self._get_int(
                config, SECTION_STAGING, KEY_PLACEHOLDER_COUNT
            ),
            name_template=name_template,
        )
        streams = StreamSettings(
            source=Paths.expand_path(
                self._get(config, SECTION_STREAMS, KEY_SOURCE)
            ),
            destination=Paths.expand_path(
                self._get(config, SECTION_STREAMS, KEY_DESTINATION)
            ),
            batch_size=self._get_int(config, SECTION_STREAMS, KEY_BATCH_SIZE),
            buffer_size=self._get_int(
                config, SECTION_STREAMS, KEY_BUFFER_SIZE
            ),
        )

        return Settings(
            config_version=self._get(
                config, SECTION_DEFAULT, KEY_CONFIG_VERSION
            ),
            log_level=self._get_level(config, KEY_LOG_LEVEL),
            console_log_level=self._get_level(config, KEY_CONSOLE_LOG_LEVEL),
            staging=staging,
            streams=streams,
        )

    def save_settings(self, settings: Settings) -> Path:
        """Write ``settings`` to the settings file with comments.

        Args:
            settings: Settings to save

        Returns:
            Path of the written file

        Raises:
            ConfigurationError: If the file cannot be written

        """
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: settings["config_version"],
                KEY_LOG_LEVEL: settings["log_level"],
                KEY_CONSOLE_LOG_LEVEL: settings["console_log_level"],
            },
            SECTION_STAGING: {
                key: str(value) for key, value in settings["staging"].items()
            },
            SECTION_STREAMS: {
                key: str(value) for key, value in settings["streams"].items()
            },
        }

        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with self.settings_file.open("w", encoding="utf-8") as f:
                f.write(comment_manager.get_file_header())
                for section, values in sections.items():
                    f.write(section_comments[section])
                    f.write(f"[{section}]\n")
                    for key, value in values.items():
                        inline_comment = key_comments[section].get(key, "")
                        if inline_comment:
                            f.write(f"{key} = {value}  {inline_comment}\n")
                        else:
                            f.write(f"{key} = {value}\n")
        except OSError as e:
            raise ConfigurationError(
                str(e), target=str(self.settings_file)
            ) from e

        logger.info("Settings written to %s", self.settings_file)
        return self.settings_file
