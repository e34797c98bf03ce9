"""Handler construction for the iowalk root logger.

Records from every ``iowalk.*`` logger go through one ``QueueHandler``;
a ``QueueListener`` thread hands them to the console and file handlers.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from iowalk.constants import (
    APP_NAME,
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_MAX_FILE_SIZE_BYTES,
)
from iowalk.exceptions import ConfigurationError
from iowalk.logger.formatters import HybridConsoleFormatter


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create the stdout handler with hybrid formatting.

    Args:
        console_level: Level name for console output

    Returns:
        Configured StreamHandler

    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def _create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create the rotating file handler.

    Args:
        log_file: Path to the log file
        file_level: Level name for file output

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_MAX_FILE_SIZE_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg, target=str(log_file)) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    return file_handler


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Attach the queue handler to the ``iowalk`` logger and start listening.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console level name
        file_level: File level name
        log_file: Path to the log file
        enable_file_logging: Whether to add the file handler

    Raises:
        ConfigurationError: If the file handler cannot be created

    """
    root_logger = logging.getLogger(APP_NAME)
    root_logger.setLevel(logging.DEBUG)  # filtering happens per handler
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [_create_console_handler(console_level)]
    if enable_file_logging:
        handlers.append(_create_file_handler(log_file, file_level))

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()

    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True
