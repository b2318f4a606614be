"""Logging configuration module."""

from __future__ import annotations

import logging
import sys

from colortally.config.settings import get_settings


def configure_logging(level: str | None = None) -> None:
    """Send diagnostics to stderr using the project log format."""

    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
