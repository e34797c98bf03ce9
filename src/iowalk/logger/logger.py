"""Public logging API: setup, lookup, flushing and test reset."""

import atexit
import contextlib
import logging
import time
from collections.abc import Iterator
from pathlib import Path

from iowalk.constants import APP_NAME
from iowalk.logger.config import (
    get_console_level,
    load_log_settings,
    set_console_level,
)
from iowalk.logger.handlers import setup_root_logger
from iowalk.logger.state import get_state


def flush_all_handlers() -> None:
    """Wait for the log queue to drain, then flush every handler.

    Used before reading the log file in tests and at interpreter exit.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener does not call task_done(), so poll instead of join()
    deadline = time.time() + 5.0
    while not state.log_queue.empty() and time.time() < deadline:
        time.sleep(0.01)
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the queue listener at interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = APP_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Initialize the ``iowalk`` root logger once and return ``name``.

    Child loggers (``iowalk.core.lifecycle`` and so on) have no handlers of
    their own; they propagate to the root, which owns the queue handler.

    Args:
        name: Logger name, normally ``__name__``
        console_level: Console level name (bootstrap default: WARNING)
        file_level: File level name (bootstrap default: INFO)
        log_file: Log file path (default: ~/.config/iowalk/logs/iowalk.log)
        enable_file_logging: Whether to attach the rotating file handler

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = APP_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get a logger, initializing the root on first use.

    Example:
        >>> from iowalk.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Created %d placeholders in %s", count, directory)

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


@contextlib.contextmanager
def console_level(level: str) -> Iterator[None]:
    """Temporarily change the console handler level.

    Used by the CLI runner for ``--verbose``; the previous level is restored
    on every exit path.

    Args:
        level: Level name to use inside the block

    """
    state = get_state()
    previous = get_console_level(state)
    if previous is None:
        yield
        return

    set_console_level(state, level)
    try:
        yield
    finally:
        set_console_level(state, logging.getLevelName(previous))


def clear_logger_state() -> None:
    """Stop the listener and detach handlers from the root (tests only)."""
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        root_logger = logging.getLogger(APP_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
