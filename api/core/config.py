"""
Configuration helpers for the Notes backend.

Settings are read from environment variables once and cached, so that
routers/services/repositories never touch os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    data_file: str
    log_level: str
    cors_origins: tuple[str, ...]
    host: str
    port: int

    @property
    def notes_path(self) -> Path:
        return self.data_dir / self.data_file


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None) -> tuple[str, ...]:
        items = [item.strip() for item in (value or "").split(",")]
        return tuple(item for item in items if item)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=Path(os.getenv("NOTES_DATA_DIR") or "data"),
        data_file=os.getenv("NOTES_DATA_FILE") or "notes.json",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS", "*")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
    )
