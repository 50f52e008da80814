"""
JSON-file persistence for notes.

The whole collection lives in a single JSON array. Every operation loads the
file, transforms the list in memory and, when something changed, rewrites the
file atomically (temp file + os.replace). A per-instance lock serializes the
load/mutate/persist sequence between threads of the same process.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, Optional

from api.core.utils import utc_now
from api.domain.notes import Note, NoteSortOptions, sort_notes

logger = logging.getLogger(__name__)

UNSET = object()


class StorageError(Exception):
    """Raised when the backing file cannot be created or written."""


class NoteRepository:
    """CRUD helpers over a JSON array of notes stored in `path`."""

    def __init__(self, path: Path | str, clock: Callable[[], datetime] = utc_now) -> None:
        self.path = Path(path)
        self._clock = clock
        self._lock = threading.RLock()

    # -------------------------- file access --------------------------
    def initialize(self) -> None:
        """Create the data directory and an empty collection if missing. Safe to call repeatedly."""
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(f"Cannot create data directory {self.path.parent}: {exc}") from exc
            if self.path.exists():
                logger.info("Using notes file %s", self.path)
                return
            logger.info("Creating empty notes file %s", self.path)
            self.replace_all([])

    def load_all(self) -> list[Note]:
        """
        Read every note from disk. Any read/parse failure is logged and yields
        an empty list instead of raising.
        """
        with self._lock:
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    raw = json.load(f)
                if not isinstance(raw, list):
                    raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
                return [Note.from_record(item) for item in raw]
            except (OSError, ValueError, KeyError, TypeError, RecursionError):
                logger.exception("Error reading notes from %s", self.path)
                return []

    def replace_all(self, notes: Iterable[Note]) -> None:
        """Overwrite the backing file with `notes`. Leaves the old file intact on failure."""
        payload = json.dumps([note.to_record() for note in notes], ensure_ascii=False, indent=2)
        with self._lock:
            tmp_name = None
            try:
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
                tmp_name = None
                logger.debug("Wrote %d bytes to %s", len(payload), self.path)
            except OSError as exc:
                logger.error("Error writing notes to %s: %s", self.path, exc)
                raise StorageError(f"Cannot write {self.path}: {exc}") from exc
            finally:
                if tmp_name is not None:
                    try:
                        os.unlink(tmp_name)
                    except OSError:
                        logger.warning("Could not remove temporary file %s", tmp_name)

    # -------------------------- queries --------------------------
    def find_all(self, sort: Optional[NoteSortOptions] = None) -> list[Note]:
        notes = self.load_all()
        if sort and sort.order_by:
            return sort_notes(notes, sort.order_by, sort.order or "asc")
        return notes

    def find_one(self, note_id: str) -> Optional[Note]:
        for note in self.load_all():
            if note.id == note_id:
                return note
        return None

    # -------------------------- mutations --------------------------
    def create(self, title: str, content: str) -> Note:
        with self._lock:
            notes = self.load_all()
            now = self._clock()
            note = Note(
                id=self._new_id({n.id for n in notes}),
                title=title,
                content=content,
                created_at=now,
                modified_at=now,
            )
            notes.append(note)
            self.replace_all(notes)
            return note

    def update(self, note_id: str, title=UNSET, content=UNSET) -> Optional[Note]:
        """
        Apply only the given fields. modified_at moves forward on every match,
        even when the values did not change.
        """
        with self._lock:
            notes = self.load_all()
            note = next((n for n in notes if n.id == note_id), None)
            if note is None:
                return None
            if title is not UNSET:
                note.title = title
            if content is not UNSET:
                note.content = content
            note.modified_at = self._next_modified(note)
            self.replace_all(notes)
            return note

    def delete(self, ids: Iterable[str]) -> int:
        targets = set(ids or ())
        if not targets:
            return 0
        with self._lock:
            notes = self.load_all()
            kept = [n for n in notes if n.id not in targets]
            deleted = len(notes) - len(kept)
            if deleted:
                self.replace_all(kept)
            return deleted

    # -------------------------- helpers --------------------------
    @staticmethod
    def _new_id(existing: set[str]) -> str:
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in existing:
                return candidate

    def _next_modified(self, note: Note) -> datetime:
        now = self._clock()
        if now <= note.modified_at:
            now = note.modified_at + timedelta(milliseconds=1)
        return now
