"""Shared fixtures for colortally tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from colortally.config.settings import get_settings

ENV_VARS = (
    "COLORTALLY_INPUT_PATH",
    "COLORTALLY_OUTPUT_PATH",
    "COLORTALLY_CONCURRENCY",
    "COLORTALLY_REQUEST_TIMEOUT",
    "COLORTALLY_USER_AGENT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
