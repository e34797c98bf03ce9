"""Domain types for iowalk.

Pure value types shared by the core services, the display layer and the
settings loader. Nothing here touches the filesystem except
``Failure.from_os_error``, which only inspects an exception.
"""

import errno
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TypedDict

# =============================================================================
# Settings Types
# =============================================================================


class StagingSettings(TypedDict):
    """Defaults for the staging lifecycle."""

    target: Path
    placeholder_count: int
    name_template: str


class StreamSettings(TypedDict):
    """Defaults for the byte-stream copy demonstrations."""

    source: Path
    destination: Path
    batch_size: int
    buffer_size: int


class Settings(TypedDict):
    """Effective application settings."""

    config_version: str
    log_level: str
    console_log_level: str
    staging: StagingSettings
    streams: StreamSettings


# =============================================================================
# Failure Types
# =============================================================================

# rmdir() on a populated directory reports ENOTEMPTY on Linux and macOS;
# some platforms report EEXIST instead.
_NOT_EMPTY_ERRNOS = frozenset({errno.ENOTEMPTY, errno.EEXIST})
_WINDOWS_DIR_NOT_EMPTY = 145


class FailureKind(Enum):
    """Distinct outcomes a filesystem operation can fail with."""

    IO_FAILURE = "io_failure"
    NOT_EMPTY = "not_empty"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Failure:
    """A filesystem failure recorded instead of raised."""

    kind: FailureKind
    path: Path
    message: str
    index: int | None = None

    @classmethod
    def from_os_error(
        cls,
        path: Path,
        exc: OSError,
        *,
        index: int | None = None,
        removing_directory: bool = False,
    ) -> "Failure":
        """Classify an ``OSError`` raised while operating on ``path``.

        Args:
            path: Path the failed operation targeted
            exc: The raised error
            index: Placeholder index, when the failure happened while staging
            removing_directory: Whether the operation was a directory removal;
                only then is ``EEXIST`` read as "directory not empty"

        Returns:
            Classified failure

        """
        message = exc.strerror or str(exc)
        if isinstance(exc, FileNotFoundError):
            kind = FailureKind.NOT_FOUND
        elif removing_directory and (
            exc.errno in _NOT_EMPTY_ERRNOS
            or getattr(exc, "winerror", None) == _WINDOWS_DIR_NOT_EMPTY
        ):
            kind = FailureKind.NOT_EMPTY
        else:
            kind = FailureKind.IO_FAILURE
        return cls(kind=kind, path=path, message=message, index=index)


# =============================================================================
# Metadata
# =============================================================================


@dataclass(frozen=True)
class EntryMetadata:
    """Observed attributes of one directory entry.

    ``last_modified``, ``size`` and ``hidden`` are only filled in for
    regular files.
    """

    name: str
    absolute_path: Path
    is_file: bool
    is_dir: bool
    last_modified: datetime | None = None
    size: int | None = None
    hidden: bool | None = None


# =============================================================================
# Lifecycle Reports
# =============================================================================


class LifecycleState(Enum):
    """States visited by one staging lifecycle run."""

    ABSENT = "absent"
    CREATING = "creating"
    POPULATED = "populated"
    INSPECTED = "inspected"
    DELETING = "deleting"
    CLEARING = "clearing"
    DELETED = "deleted"


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of one delete attempt."""

    path: Path
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        """Whether the path was deleted."""
        return self.failure is None

    @property
    def kind(self) -> FailureKind | None:
        """Failure kind, or None on success."""
        return self.failure.kind if self.failure else None


@dataclass
class StagingReport:
    """Outcome of ensuring the staging directory exists."""

    directory: Path
    requested: int
    performed: bool = False
    directory_created: bool = False
    created: int = 0
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        """Whether staging finished without a failure."""
        return self.failure is None


@dataclass
class TeardownReport:
    """Outcome of deleting the staging directory and its entries."""

    directory: Path
    first_attempt: DeleteOutcome
    cleared: int = 0
    clear_failures: list[Failure] = field(default_factory=list)
    final_attempt: DeleteOutcome | None = None
    repeat_attempt: DeleteOutcome | None = None


@dataclass
class LifecycleReport:
    """Everything one lifecycle run observed."""

    target: Path
    states: list[LifecycleState] = field(default_factory=list)
    staging: StagingReport | None = None
    metadata: EntryMetadata | None = None
    inspect_failure: Failure | None = None
    teardown: TeardownReport | None = None

    @property
    def final_state(self) -> LifecycleState | None:
        """Last state reached, or None when nothing ran."""
        return self.states[-1] if self.states else None


# =============================================================================
# Stream Copy Types
# =============================================================================


class CopyMode(Enum):
    """Byte-stream copy strategies."""

    SIMPLE = "simple"
    BATCH = "batch"
    BUFFER = "buffer"
    BATCH_BUFFER = "batch-buffer"
    TRANSFER = "transfer"
    READ_ALL = "read-all"
    READ_ALL_MODERN = "read-all-modern"
    BATCH_BUFFER_MODERN = "batch-buffer-modern"
    ASYNC = "async"


@dataclass(frozen=True)
class CopyResult:
    """Outcome of one byte-stream copy."""

    mode: CopyMode
    source: Path
    destination: Path
    bytes_copied: int = 0
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        """Whether the copy completed."""
        return self.failure is None


@dataclass(frozen=True)
class PathForm:
    """One way of constructing a path, with its absolute rendering."""

    label: str
    path: Path

    @property
    def absolute(self) -> Path:
        """Absolute form of the constructed path."""
        return self.path.absolute()
