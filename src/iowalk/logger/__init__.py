"""Logging utilities for iowalk.

One ``iowalk`` root logger owns a ``QueueHandler``; a ``QueueListener``
thread feeds a console handler (plain INFO lines, coloured structured
warnings and errors) and a rotating file handler.

Usage:
    >>> from iowalk.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Deleting %s", path)  # %-style, never f-strings

Rules:
    1. Always use ``logger = get_logger(__name__)``
    2. Never call ``logging.basicConfig()``
    3. Never attach handlers to child loggers

Environment Variables:
    IOWALK_LOG_DIR: Override the log directory (used by the test suite)
"""

from iowalk.logger.config import (
    update_logger_from_config as _update_config,
)
from iowalk.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from iowalk.logger.logger import (
    clear_logger_state,
    console_level,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from iowalk.logger.state import _state, get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "console_level",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(settings: dict | None = None) -> None:
    """Apply levels from settings to the running handlers.

    Args:
        settings: Loaded settings; read from ``settings.conf`` when omitted

    """
    _update_config(get_state(), settings)
