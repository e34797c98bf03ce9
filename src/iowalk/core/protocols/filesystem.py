"""Filesystem capability protocol for the staging lifecycle.

The lifecycle consumes exactly these operations, which lets tests swap in
a filesystem that fails on demand without touching real permissions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager
    from pathlib import Path

    from iowalk.domain.types import EntryMetadata


@runtime_checkable
class FilesystemPort(Protocol):
    """Operations the lifecycle needs from a filesystem.

    Every method except ``exists`` raises ``OSError`` on failure; callers
    classify the error with ``Failure.from_os_error``.
    """

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` currently exists."""
        ...

    def create_dirs(self, path: Path) -> bool:
        """Create ``path`` and missing parents; True if it was absent."""
        ...

    def create_file(self, path: Path) -> None:
        """Create an empty file, failing if ``path`` already exists."""
        ...

    def list_entries(
        self, path: Path
    ) -> AbstractContextManager[Iterator[Path]]:
        """Open a scoped listing of the entries directly inside ``path``."""
        ...

    def delete(self, path: Path) -> None:
        """Delete a file or an empty directory."""
        ...

    def stat_metadata(self, path: Path) -> EntryMetadata:
        """Read the metadata of an existing entry."""
        ...
