"""Pixel grids, colour histograms and image retrieval."""

from .color_extract import (
    NULL_COLOR,
    TOP_N,
    ColorExtractor,
    PackedPixels,
    PixelGrid,
    build_histogram,
    format_hex,
    pad_hex,
    top_colors,
)
from .fetcher import ImageFetchError, ImageFetcher

__all__ = [
    "NULL_COLOR",
    "TOP_N",
    "ColorExtractor",
    "PackedPixels",
    "ImageFetchError",
    "ImageFetcher",
    "PixelGrid",
    "build_histogram",
    "format_hex",
    "pad_hex",
    "top_colors",
]
