"""Local filesystem adapter.

Thin wrappers over ``pathlib`` and ``os.scandir`` that satisfy
``FilesystemPort``. Errors are raised unchanged for the caller to classify.
"""

import os
import stat
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from iowalk.domain.types import EntryMetadata
from iowalk.logger import get_logger

logger = get_logger(__name__)

# stat.FILE_ATTRIBUTE_HIDDEN only exists on Windows builds
_FILE_ATTRIBUTE_HIDDEN = 0x2


def is_hidden(path: Path, st: os.stat_result | None = None) -> bool:
    """Return whether ``path`` is hidden on this platform.

    Dot-prefixed names are hidden on POSIX; on Windows the hidden file
    attribute decides.

    Args:
        path: Path to check
        st: Stat result for ``path`` if already available

    Returns:
        True when the entry is hidden

    """
    attributes = getattr(st, "st_file_attributes", None)
    if attributes is not None:
        return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)
    return path.name.startswith(".")


class LocalFilesystem:
    """Filesystem operations on the local disk."""

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists."""
        return path.exists()

    def create_dirs(self, path: Path) -> bool:
        """Create ``path`` with all missing parents.

        Args:
            path: Directory to create

        Returns:
            True if the directory did not exist before

        """
        existed = path.is_dir()
        path.mkdir(parents=True, exist_ok=True)
        if not existed:
            logger.debug("Created directory: %s", path)
        return not existed

    def create_file(self, path: Path) -> None:
        """Create an empty file; ``FileExistsError`` if already present."""
        path.touch(exist_ok=False)

    @contextmanager
    def list_entries(self, path: Path) -> Iterator[Iterator[Path]]:
        """Yield the entries directly inside ``path``.

        The directory handle is closed when the block exits, including when
        the caller raises mid-iteration.

        Args:
            path: Directory to list

        Yields:
            Iterator over the entry paths

        """
        with os.scandir(path) as scanner:
            yield (Path(entry.path) for entry in scanner)

    def delete(self, path: Path) -> None:
        """Delete a file or an empty directory.

        Args:
            path: Entry to delete

        Raises:
            FileNotFoundError: If ``path`` does not exist
            OSError: If a directory is not empty or deletion is refused

        """
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
        logger.debug("Deleted: %s", path)

    def stat_metadata(self, path: Path) -> EntryMetadata:
        """Read metadata of an existing entry.

        Modification time, size and hidden flag are only read for regular
        files.

        Args:
            path: Entry to inspect

        Returns:
            Observed metadata

        """
        st = path.stat()
        is_file = stat.S_ISREG(st.st_mode)
        metadata = EntryMetadata(
            name=path.name,
            absolute_path=path.absolute(),
            is_file=is_file,
            is_dir=stat.S_ISDIR(st.st_mode),
        )
        if not is_file:
            return metadata

        return EntryMetadata(
            name=metadata.name,
            absolute_path=metadata.absolute_path,
            is_file=True,
            is_dir=False,
            last_modified=datetime.fromtimestamp(st.st_mtime, tz=UTC),
            size=st.st_size,
            hidden=is_hidden(path, st),
        )
