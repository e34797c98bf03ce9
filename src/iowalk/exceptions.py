"""Exception classes for iowalk operations.

Filesystem failures met while walking a path are not raised; they are
recorded as ``Failure`` values (see ``iowalk.domain.types``). The classes
below cover problems with the run itself: bad arguments and settings.
"""


class IowalkError(Exception):
    """Base exception for iowalk operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the value or path that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ValidationError(IowalkError):
    """Raised when an argument or setting has an unusable value."""

    error_prefix = "Validation failed"


class ConfigurationError(IowalkError):
    """Raised when settings or logging cannot be set up."""

    error_prefix = "Configuration error"
