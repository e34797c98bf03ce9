"""Main CLI entry point for iowalk."""

import sys

import uvloop

from iowalk.cli import CLIRunner
from iowalk.logger import get_logger

logger = get_logger(__name__)


async def async_main(argv: list[str] | None = None) -> None:
    """Run the CLI runner on the event loop."""
    logger.debug("CLI started")
    runner = CLIRunner(argv)
    await runner.run()
    logger.debug("CLI completed")


def main() -> None:
    """Run the CLI application on a uvloop event loop."""
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
