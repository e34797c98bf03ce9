"""Application-wide constants for iowalk.

Grouped by concern so modules import only what they need. Values here are
defaults; user overrides come from ``settings.conf``.
"""

from typing import Final

# =============================================================================
# Application identity
# =============================================================================

APP_NAME: Final[str] = "iowalk"
CONFIG_DIR_NAME: Final[str] = "iowalk"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
DEFAULT_CONFIG_SUBDIR: Final[str] = ".config"
LOG_FILE_NAME: Final[str] = "iowalk.log"

# Environment overrides (used for test isolation)
ENV_LOG_DIR: Final[str] = "IOWALK_LOG_DIR"
ENV_CONFIG_DIR: Final[str] = "IOWALK_CONFIG_DIR"

# =============================================================================
# Settings keys and sections
# =============================================================================

SETTINGS_VERSION: Final[str] = "1.0.0"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_STAGING: Final[str] = "staging"
SECTION_STREAMS: Final[str] = "streams"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"

KEY_TARGET: Final[str] = "target"
KEY_PLACEHOLDER_COUNT: Final[str] = "placeholder_count"
KEY_NAME_TEMPLATE: Final[str] = "name_template"

KEY_SOURCE: Final[str] = "source"
KEY_DESTINATION: Final[str] = "destination"
KEY_BATCH_SIZE: Final[str] = "batch_size"
KEY_BUFFER_SIZE: Final[str] = "buffer_size"

# =============================================================================
# Staging lifecycle defaults
# =============================================================================

DEFAULT_STAGING_TARGET: Final[str] = "~/iowalk/staging/hi1.txt"
DEFAULT_PLACEHOLDER_COUNT: Final[int] = 100_000
DEFAULT_NAME_TEMPLATE: Final[str] = "hi{index}.txt"

# =============================================================================
# Stream copy defaults
# =============================================================================

DEFAULT_COPY_SOURCE: Final[str] = "video.mov"
DEFAULT_COPY_DESTINATION: Final[str] = "video_cloned.mov"
DEFAULT_BATCH_SIZE: Final[int] = 1024
DEFAULT_BUFFER_SIZE: Final[int] = 8192  # io.DEFAULT_BUFFER_SIZE

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

LOG_MAX_FILE_SIZE_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"
