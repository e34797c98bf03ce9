"""Console formatters for iowalk logging.

INFO records are shown as bare messages so they read like status lines;
everything else carries time, logger name and a coloured level.
"""

import logging

from iowalk.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that colours the level name with ANSI codes."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a coloured level name.

        The record's ``levelname`` is swapped only for the duration of the
        call so other handlers see the original value.

        Args:
            record: The log record to format

        Returns:
            Formatted message

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class SimpleConsoleFormatter(logging.Formatter):
    """Formatter that shows only the message content."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the rendered message without metadata."""
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Plain messages for INFO, coloured structured lines otherwise.

    Example Output:
        INFO:     "Staging folder is created successfully!"
        WARNING:  "12:30:45 - iowalk.core.lifecycle - WARNING - ..."

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for non-INFO records
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Pick the simple or structured format by record level."""
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
