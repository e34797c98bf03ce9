"""Bootstrap and settings-driven levels for the logging system."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from iowalk.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from iowalk.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Return bootstrap console level, file level and log file path.

    ``IOWALK_LOG_DIR`` replaces the log directory when set, which keeps
    test runs away from ``~/.config/iowalk/logs``.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = (
            Path.home() / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME / "logs"
        )

    log_path = log_dir / LOG_FILE_NAME
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(
        handler, RotatingFileHandler
    )


def apply_levels(
    state: "_LoggerState", console_level: str, file_level: str
) -> None:
    """Set console and file handler levels on the running listener.

    Args:
        state: Logger state object
        console_level: Level name for the console handler
        file_level: Level name for the file handler

    """
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(getattr(logging, file_level, logging.INFO))
        elif _is_console_handler(handler):
            handler.setLevel(getattr(logging, console_level, logging.WARNING))


def set_console_level(state: "_LoggerState", level: str) -> None:
    """Set only the console handler level."""
    if state.queue_listener is None:
        return
    for handler in state.queue_listener.handlers:
        if _is_console_handler(handler):
            handler.setLevel(getattr(logging, level, logging.WARNING))


def get_console_level(state: "_LoggerState") -> int | None:
    """Return the console handler level, or None before setup."""
    if state.queue_listener is None:
        return None
    for handler in state.queue_listener.handlers:
        if _is_console_handler(handler):
            return handler.level
    return None


def update_logger_from_config(
    state: "_LoggerState", settings: dict | None = None
) -> None:
    """Apply ``log_level`` and ``console_log_level`` from settings.

    Args:
        state: Logger state object
        settings: Already loaded settings; loaded from disk when omitted

    """
    if settings is None:
        # Late import: the config package logs through this package
        from iowalk.config import SettingsManager  # noqa: PLC0415

        settings = SettingsManager().load_settings()

    apply_levels(
        state,
        settings.get("console_log_level", DEFAULT_CONSOLE_LOG_LEVEL),
        settings.get("log_level", DEFAULT_LOG_LEVEL),
    )
    state.config_applied = True
