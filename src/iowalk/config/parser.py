"""INI helpers for ``settings.conf``: inline comments and file comments."""

import configparser
from datetime import UTC, datetime

from iowalk.constants import (
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    SECTION_DEFAULT,
    SECTION_STAGING,
    SECTION_STREAMS,
    SETTINGS_VERSION,
)


def strip_inline_comment(value: str) -> str:
    """Remove a trailing ``  # comment`` from a value."""
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


def create_parser() -> configparser.ConfigParser:
    """Create the parser used for every settings read.

    Interpolation is disabled so ``{index}`` templates and ``%`` survive.
    """
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


class ConfigCommentManager:
    """Comments written into a freshly saved ``settings.conf``."""

    @staticmethod
    def get_file_header() -> str:
        """Return the header block with a generation timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# iowalk configuration
# Defaults used by the iowalk demonstrations when a command line
# argument is not given.
#
# Last updated: {timestamp}
# Configuration version: {SETTINGS_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Return the comment block written above each section."""
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# log_level: Detail level for log files (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, etc.)

""",
            SECTION_STAGING: """
# ========================================
# STAGING LIFECYCLE
# ========================================
# target: File whose parent directory is staged, inspected and removed
# placeholder_count: Number of placeholder files created when staging
# name_template: Placeholder file name, must contain {index}

""",
            SECTION_STREAMS: """
# ========================================
# BYTE-STREAM COPY
# ========================================
# source: File copied by the copy command
# destination: File the copy is written to
# batch_size: Bytes read per call in the batched modes
# buffer_size: Buffer size for the buffered modes

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Return inline comments keyed by section and option."""
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
            SECTION_STAGING: {},
            SECTION_STREAMS: {},
        }
