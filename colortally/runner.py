"""Entry point for a colour analysis run."""

from __future__ import annotations

import asyncio
import logging
import sys

from colortally.config.settings import Settings, get_settings
from colortally.imgproc.fetcher import ImageFetcher
from colortally.monitoring.logging import configure_logging
from colortally.services.batch import BatchReport, OutputExistsError, OutputWriteError, run_batch

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_OUTPUT_EXISTS = 2


async def run(settings: Settings) -> BatchReport:
    """Build the fetcher and process the configured URL list."""

    async with ImageFetcher(settings) as fetcher:
        return await run_batch(
            settings.input_path,
            settings.output_path,
            fetcher,
            concurrency=settings.concurrency,
        )


def main() -> int:
    """Run the batch and return the process exit status."""

    try:
        settings = get_settings()
    except ValueError as exc:
        configure_logging("INFO")
        logger.error("Invalid configuration: %s", exc)
        return EXIT_FAILURE

    configure_logging(settings.log_level)
    try:
        asyncio.run(run(settings))
    except OutputExistsError as exc:
        logger.error("%s", exc)
        return EXIT_OUTPUT_EXISTS
    except OutputWriteError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
