"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from colortally.config.settings import Settings, get_settings


def test_defaults_match_fixed_paths() -> None:
    settings = get_settings()

    assert settings == Settings()
    assert settings.input_path == "data/input.txt"
    assert settings.output_path == "output.csv"
    assert settings.concurrency == 1


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORTALLY_INPUT_PATH", "urls.txt")
    monkeypatch.setenv("COLORTALLY_CONCURRENCY", "8")
    monkeypatch.setenv("COLORTALLY_REQUEST_TIMEOUT", "2.5")

    settings = get_settings()

    assert settings.input_path == "urls.txt"
    assert settings.concurrency == 8
    assert settings.request_timeout == 2.5


def test_env_file_does_not_override_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\nCOLORTALLY_OUTPUT_PATH=from-file.csv\nLOG_LEVEL=DEBUG\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = get_settings()

    assert settings.output_path == "from-file.csv"
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("COLORTALLY_CONCURRENCY", "0"),
        ("COLORTALLY_CONCURRENCY", "many"),
        ("COLORTALLY_REQUEST_TIMEOUT", "-1"),
    ],
)
def test_invalid_numbers_are_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        get_settings()
