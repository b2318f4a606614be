"""Batch driver: URL list in, one CSV record per analysed image out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, Protocol, TextIO

from colortally.imgproc.color_extract import ColorExtractor, PixelGrid
from colortally.imgproc.fetcher import ImageFetchError
from colortally.services.records import format_record

logger = logging.getLogger(__name__)


class OutputExistsError(RuntimeError):
    """Raised when the output file is already present at start-up."""


class OutputWriteError(RuntimeError):
    """Raised when a record cannot be appended to the output file."""


class PixelSource(Protocol):
    """Anything able to turn a URL into a decoded pixel grid."""

    async def fetch_pixels(self, url: str) -> PixelGrid: ...


@dataclass(slots=True)
class BatchReport:
    """Outcome counters for one run."""

    processed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.failed


def analyze_grid(grid: PixelGrid, extractor: ColorExtractor | None = None) -> list[int]:
    """Run the histogram and top-k selection for one image."""

    return (extractor or ColorExtractor()).extract_keys(grid)


def read_urls(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line without its terminator; content is left untouched."""

    for line in lines:
        yield line[:-1] if line.endswith("\n") else line


def create_output(path: Path) -> TextIO:
    """Create ``path`` exclusively for writing records."""

    try:
        return path.open("x", encoding="utf-8", newline="")
    except FileExistsError as exc:
        raise OutputExistsError("File already exists!") from exc


def _windows(urls: Iterator[str], size: int) -> Iterator[list[str]]:
    while window := list(islice(urls, size)):
        yield window


async def _process(url: str, source: PixelSource, extractor: ColorExtractor) -> str | None:
    try:
        grid = await source.fetch_pixels(url)
        colors = await asyncio.to_thread(analyze_grid, grid, extractor)
    except ImageFetchError as exc:
        logger.error("%s for image %s", exc, url)
        return None
    except Exception as exc:
        logger.error("%s: %s for image %s", type(exc).__name__, exc, url)
        return None
    return format_record(url, colors)


def _append(output: TextIO, url: str, record: str) -> None:
    try:
        output.write(record)
        output.flush()
    except OSError as exc:
        raise OutputWriteError(f"Failed to append record for image {url}: {exc}") from exc


async def run_batch(
    input_path: Path | str,
    output_path: Path | str,
    source: PixelSource,
    concurrency: int = 1,
) -> BatchReport:
    """Analyse every URL in ``input_path`` and append records to ``output_path``.

    Up to ``concurrency`` URLs are fetched at once; records are always
    written in input order. Per-URL failures are logged and skipped.
    """

    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}.")

    report = BatchReport()
    extractor = ColorExtractor()
    with Path(input_path).open(encoding="utf-8") as urls_file:
        with create_output(Path(output_path)) as output:
            logger.info("Writing colour records from %s to %s", input_path, output_path)
            for window in _windows(read_urls(urls_file), concurrency):
                records = await asyncio.gather(*(_process(url, source, extractor) for url in window))
                for url, record in zip(window, records):
                    if record is None:
                        report.failed += 1
                        continue
                    _append(output, url, record)
                    report.processed += 1

    logger.info("Finished: %d images analysed, %d failed.", report.processed, report.failed)
    return report
