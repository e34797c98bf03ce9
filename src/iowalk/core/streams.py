"""Byte-stream copy strategies.

Each mode copies ``source`` to ``destination`` a different way, from one
byte per unbuffered system call up to whole-file reads. Every handle is
opened in a ``with`` block so it is closed on every exit path.

Failures are returned, not raised: a missing source is ``NOT_FOUND`` and
any other ``OSError`` is ``IO_FAILURE``.
"""

import shutil
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

import aiofiles

from iowalk.constants import DEFAULT_BATCH_SIZE, DEFAULT_BUFFER_SIZE
from iowalk.domain.types import CopyMode, CopyResult, Failure, FailureKind
from iowalk.exceptions import ValidationError
from iowalk.logger import get_logger

logger = get_logger(__name__)


def _write_all(writer: BinaryIO, data: bytes | memoryview) -> int:
    # Raw handles may accept only part of a chunk per call
    view = memoryview(data)
    while view:
        view = view[writer.write(view) :]
    return len(data)


def _copy_bytewise(reader: BinaryIO, writer: BinaryIO) -> int:
    copied = 0
    while byte := reader.read(1):
        copied += _write_all(writer, byte)
    return copied


def _copy_batches(
    reader: BinaryIO, writer: BinaryIO, batch_size: int
) -> int:
    copied = 0
    batch = bytearray(batch_size)
    view = memoryview(batch)
    while length := reader.readinto(batch):
        copied += _write_all(writer, view[:length])
    return copied


def _failure(source: Path, exc: OSError) -> Failure:
    # The error may name the destination rather than the source
    path = Path(exc.filename) if exc.filename else source
    return Failure.from_os_error(path, exc)


def _same_file_failure(source: Path, destination: Path) -> Failure | None:
    # Opening the destination for writing would truncate the source
    try:
        if not source.samefile(destination):
            return None
    except OSError:
        # One side is missing; the copy reports that itself
        return None
    return Failure(
        kind=FailureKind.IO_FAILURE,
        path=destination,
        message="source and destination are the same file",
    )


@contextmanager
def _open_pair(
    source: Path, destination: Path, buffering: int
) -> Iterator[tuple[BinaryIO, BinaryIO]]:
    """Open ``source`` for reading and ``destination`` for writing.

    ``buffering=0`` gives raw unbuffered handles, one system call per
    read or write.
    """
    with (
        open(source, "rb", buffering=buffering) as reader,  # noqa: PTH123
        open(destination, "wb", buffering=buffering) as writer,  # noqa: PTH123
    ):
        yield reader, writer


class StreamCopier:
    """Copies one file to another with a selectable strategy."""

    def __init__(
        self,
        batch_size: int = DEFAULT_BATCH_SIZE,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        """Initialize the copier.

        Args:
            batch_size: Bytes requested per read in the batched modes
            buffer_size: Buffer size of the buffered handles

        Raises:
            ValidationError: If either size is not positive

        """
        if batch_size <= 0:
            msg = f"batch size must be positive, got {batch_size}"
            raise ValidationError(msg, target="batch_size")
        if buffer_size <= 0:
            msg = f"buffer size must be positive, got {buffer_size}"
            raise ValidationError(msg, target="buffer_size")
        self.batch_size = batch_size
        self.buffer_size = buffer_size

    def _simple(self, source: Path, destination: Path) -> int:
        with _open_pair(source, destination, 0) as (reader, writer):
            return _copy_bytewise(reader, writer)

    def _batch(self, source: Path, destination: Path) -> int:
        with _open_pair(source, destination, 0) as (reader, writer):
            return _copy_batches(reader, writer, self.batch_size)

    def _buffer(self, source: Path, destination: Path) -> int:
        with _open_pair(source, destination, self.buffer_size) as (
            reader,
            writer,
        ):
            return _copy_bytewise(reader, writer)

    def _batch_buffer(self, source: Path, destination: Path) -> int:
        with _open_pair(source, destination, self.buffer_size) as (
            reader,
            writer,
        ):
            return _copy_batches(reader, writer, self.batch_size)

    def _transfer(self, source: Path, destination: Path) -> int:
        with _open_pair(source, destination, self.buffer_size) as (
            reader,
            writer,
        ):
            shutil.copyfileobj(reader, writer, self.buffer_size)
            return writer.tell()

    def _read_all(self, source: Path, destination: Path) -> int:
        with _open_pair(source, destination, self.buffer_size) as (
            reader,
            writer,
        ):
            return writer.write(reader.read())

    def _read_all_modern(self, source: Path, destination: Path) -> int:
        return destination.write_bytes(source.read_bytes())

    def _batch_buffer_modern(self, source: Path, destination: Path) -> int:
        with (
            source.open("rb", buffering=self.buffer_size) as reader,
            destination.open("wb", buffering=self.buffer_size) as writer,
        ):
            return _copy_batches(reader, writer, self.batch_size)

    def _strategy(self, mode: CopyMode) -> Callable[[Path, Path], int]:
        strategies: dict[CopyMode, Callable[[Path, Path], int]] = {
            CopyMode.SIMPLE: self._simple,
            CopyMode.BATCH: self._batch,
            CopyMode.BUFFER: self._buffer,
            CopyMode.BATCH_BUFFER: self._batch_buffer,
            CopyMode.TRANSFER: self._transfer,
            CopyMode.READ_ALL: self._read_all,
            CopyMode.READ_ALL_MODERN: self._read_all_modern,
            CopyMode.BATCH_BUFFER_MODERN: self._batch_buffer_modern,
        }
        if mode not in strategies:
            msg = f"{mode.value} copies must be awaited with copy_async()"
            raise ValidationError(msg, target=mode.value)
        return strategies[mode]

    def copy(
        self, source: Path, destination: Path, mode: CopyMode
    ) -> CopyResult:
        """Copy ``source`` to ``destination`` synchronously.

        Args:
            source: File to read
            destination: File to create or truncate
            mode: Copy strategy (any mode except ``CopyMode.ASYNC``)

        Returns:
            Copy result with the byte count or the failure

        Raises:
            ValidationError: If ``mode`` is ``CopyMode.ASYNC``

        """
        strategy = self._strategy(mode)
        if failure := _same_file_failure(source, destination):
            return CopyResult(
                mode=mode,
                source=source,
                destination=destination,
                failure=failure,
            )
        logger.debug(
            "Copying %s -> %s (mode=%s)", source, destination, mode.value
        )
        try:
            copied = strategy(source, destination)
        except OSError as e:
            logger.debug("Copy failed: %s", e)
            return CopyResult(
                mode=mode,
                source=source,
                destination=destination,
                failure=_failure(source, e),
            )
        return CopyResult(
            mode=mode,
            source=source,
            destination=destination,
            bytes_copied=copied,
        )

    async def copy_async(self, source: Path, destination: Path) -> CopyResult:
        """Copy ``source`` to ``destination`` in batches with aiofiles.

        Args:
            source: File to read
            destination: File to create or truncate

        Returns:
            Copy result with the byte count or the failure

        """
        if failure := _same_file_failure(source, destination):
            return CopyResult(
                mode=CopyMode.ASYNC,
                source=source,
                destination=destination,
                failure=failure,
            )

        copied = 0
        try:
            async with (
                aiofiles.open(source, mode="rb") as reader,
                aiofiles.open(destination, mode="wb") as writer,
            ):
                while chunk := await reader.read(self.batch_size):
                    await writer.write(chunk)
                    copied += len(chunk)
        except OSError as e:
            logger.debug("Async copy failed: %s", e)
            return CopyResult(
                mode=CopyMode.ASYNC,
                source=source,
                destination=destination,
                bytes_copied=copied,
                failure=_failure(source, e),
            )
        return CopyResult(
            mode=CopyMode.ASYNC,
            source=source,
            destination=destination,
            bytes_copied=copied,
        )
