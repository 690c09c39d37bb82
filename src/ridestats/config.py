from __future__ import annotations

import os
from pathlib import Path


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def data_dir() -> Path:
    return Path(_get_env("RIDESTATS_DATA_DIR", "data"))


def csv_pattern() -> str:
    return _get_env("RIDESTATS_CSV_PATTERN", "*.csv")


def log_level() -> str:
    return _get_env("RIDESTATS_LOG_LEVEL", "INFO").upper()
