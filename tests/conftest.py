from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make the api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402
from api.repositories.json_storage import NoteRepository  # noqa: E402


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture()
def notes_file(tmp_path) -> Path:
    return tmp_path / "data" / "notes.json"


@pytest.fixture()
def repo(notes_file) -> NoteRepository:
    repository = NoteRepository(notes_file)
    repository.initialize()
    return repository


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def clocked_repo(notes_file, clock) -> NoteRepository:
    repository = NoteRepository(notes_file, clock=clock)
    repository.initialize()
    return repository


@pytest.fixture()
def settings_env(tmp_path, monkeypatch):
    """Point settings at a temporary data dir and reset the settings cache."""
    monkeypatch.setenv("NOTES_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("NOTES_DATA_FILE", "notes.json")
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()
