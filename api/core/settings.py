"""
Environment-driven settings.

Values are read on each call so tests can swap them with `monkeypatch.setenv`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

API_DIR = Path(__file__).resolve().parent.parent

DEFAULT_DB_PATH = API_DIR / "db" / "stpaul_crime.sqlite3"
DEFAULT_FEED_URL = "https://example.com/api/crimes"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"
DEFAULT_PORT = 8000


def database_path() -> str:
    return os.environ.get("CRIME_DB_PATH", "").strip() or str(DEFAULT_DB_PATH)


def feed_url() -> str:
    return os.environ.get("CRIME_FEED_URL", "").strip() or DEFAULT_FEED_URL


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip() or DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    level = os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"
    # Unknown names would make logging.basicConfig raise at import.
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def port() -> int:
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT
