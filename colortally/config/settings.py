"""Batch configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Paths and tuning knobs for a colour analysis run."""

    input_path: str = "data/input.txt"
    output_path: str = "output.csv"
    concurrency: int = 1
    request_timeout: float = 30.0
    user_agent: str = "colortally/0.1"
    log_level: str = "INFO"


def _positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}.")
    return value


def _positive_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        input_path=os.getenv("COLORTALLY_INPUT_PATH", "data/input.txt"),
        output_path=os.getenv("COLORTALLY_OUTPUT_PATH", "output.csv"),
        concurrency=_positive_int("COLORTALLY_CONCURRENCY", "1"),
        request_timeout=_positive_float("COLORTALLY_REQUEST_TIMEOUT", "30"),
        user_agent=os.getenv("COLORTALLY_USER_AGENT", "colortally/0.1"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
