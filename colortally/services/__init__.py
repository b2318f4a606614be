"""Record formatting and the batch analysis driver."""

from .batch import (
    BatchReport,
    OutputExistsError,
    OutputWriteError,
    PixelSource,
    analyze_grid,
    run_batch,
)
from .records import format_record

__all__ = [
    "BatchReport",
    "OutputExistsError",
    "OutputWriteError",
    "PixelSource",
    "analyze_grid",
    "format_record",
    "run_batch",
]
