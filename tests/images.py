"""In-memory image builders for tests."""

from __future__ import annotations

from io import BytesIO

from PIL import Image


def png_bytes(size: tuple[int, int], color: tuple[int, ...], mode: str = "RGB") -> bytes:
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format="PNG")
    return buffer.getvalue()
