"""Dominant colour extraction utilities."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator

from PIL import Image

RGB_MASK = 0xFFFFFF
TOP_N = 3
NULL_COLOR = "NULL"


class PackedPixels(Sequence):
    """Read-only view of raw ``RGB`` bytes as packed ``0xRRGGBB`` integers.

    Keeps three bytes per pixel instead of one Python int each.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        if len(raw) % 3:
            raise ValueError(f"RGB data length must be a multiple of 3, got {len(raw)}.")
        self._raw = raw

    def __len__(self) -> int:
        return len(self._raw) // 3

    def __getitem__(self, index: int) -> int:
        if isinstance(index, slice):
            raise TypeError("PackedPixels does not support slicing.")
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"Pixel index {index} out of range for {size} pixels.")
        offset = index * 3
        raw = self._raw
        return (raw[offset] << 16) | (raw[offset + 1] << 8) | raw[offset + 2]

    def __iter__(self) -> Iterator[int]:
        view = memoryview(self._raw)
        for red, green, blue in zip(view[0::3], view[1::3], view[2::3]):
            yield (red << 16) | (green << 8) | blue


@dataclass(frozen=True, slots=True)
class PixelGrid:
    """Decoded image as row-major packed ``0xRRGGBB`` values."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {self.width}x{self.height}.")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} pixels for a {self.width}x{self.height} grid, "
                f"got {len(self.pixels)}.",
            )

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} grid.")
        return self.pixels[y * self.width + x]

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelGrid:
        """Flatten a Pillow image into packed RGB keys, discarding alpha."""

        rgb = image if image.mode == "RGB" else image.convert("RGB")
        pixels = PackedPixels(rgb.tobytes())
        return cls(width=rgb.width, height=rgb.height, pixels=pixels)


def format_hex(color: int | None) -> str:
    """Render a colour key as ``#RRGGBB``, or ``NULL`` when absent."""

    if color is None:
        return NULL_COLOR
    if not 0 <= color <= RGB_MASK:
        raise ValueError(f"Colour key {color!r} is outside the 24-bit range.")
    return f"#{color:06X}"


def build_histogram(grid: PixelGrid) -> Counter[int]:
    """Count every pixel of the grid by its 24-bit colour key."""

    return Counter(value & RGB_MASK for value in grid.pixels)


def top_colors(histogram: Counter[int], top_n: int = TOP_N) -> list[int]:
    """Return up to ``top_n`` keys by descending count.

    Equal counts are ordered by ascending colour key so the result does not
    depend on insertion order.
    """

    ranked = heapq.nsmallest(top_n, histogram.items(), key=lambda item: (-item[1], item[0]))
    return [color for color, _ in ranked]


def pad_hex(colors: Iterable[int], top_n: int = TOP_N) -> list[str]:
    """Hex tokens for ``colors`` padded with ``NULL`` to ``top_n`` slots."""

    tokens = [format_hex(color) for color in colors]
    if len(tokens) > top_n:
        raise ValueError(f"Expected at most {top_n} colours, got {len(tokens)}.")
    return tokens + [format_hex(None)] * (top_n - len(tokens))


class ColorExtractor:
    """Exact RGB histogram-based colour detector."""

    def __init__(self, top_n: int = TOP_N) -> None:
        self._top_n = top_n

    def extract_keys(self, grid: PixelGrid) -> list[int]:
        """Return the most common colour keys of the grid."""

        return top_colors(build_histogram(grid), self._top_n)
