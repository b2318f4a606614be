"""CSV record composition."""

from __future__ import annotations

from typing import Sequence

from colortally.imgproc.color_extract import pad_hex


def format_record(url: str, colors: Sequence[int]) -> str:
    """Return ``url,c1,c2,c3`` terminated by a newline.

    The URL is written verbatim. A URL containing a comma therefore produces
    an extra column; downstream readers rely on the unquoted layout.
    """

    return ",".join([url, *pad_hex(colors)]) + "\n"
