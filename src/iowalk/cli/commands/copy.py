"""Copy command: byte-stream copy with a selectable strategy."""

import asyncio
from argparse import Namespace

from iowalk.config import Paths
from iowalk.core.streams import StreamCopier
from iowalk.domain.types import CopyMode
from iowalk.logger import get_logger
from iowalk.ui.display import display_copy_result

from .base import BaseCommandHandler

logger = get_logger(__name__)


class CopyHandler(BaseCommandHandler):
    """Copies a file and reports the outcome."""

    async def execute(self, args: Namespace) -> None:
        """Execute the copy command."""
        streams = self.settings["streams"]
        source = streams["source"]
        if args.source:
            source = Paths.expand_path(args.source)
        destination = (
            Paths.expand_path(args.destination)
            if args.destination
            else streams["destination"]
        )
        mode = CopyMode(args.mode)

        copier = StreamCopier(
            batch_size=(
                args.batch_size
                if args.batch_size is not None
                else streams["batch_size"]
            ),
            buffer_size=(
                args.buffer_size
                if args.buffer_size is not None
                else streams["buffer_size"]
            ),
        )

        if mode is CopyMode.ASYNC:
            result = await copier.copy_async(source, destination)
        else:
            # Blocking copies run in a worker thread to keep the loop free
            result = await asyncio.to_thread(
                copier.copy, source, destination, mode
            )

        logger.debug(
            "Copy finished: mode=%s bytes=%d ok=%s",
            mode.value,
            result.bytes_copied,
            result.ok,
        )
        display_copy_result(result)
