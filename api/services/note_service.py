"""Note use cases (list/get/create/update/delete) and response shaping."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from api.domain.notes import Note, NoteSortOptions
from api.repositories.json_storage import NoteRepository, UNSET

logger = logging.getLogger(__name__)


class NoteError(Exception):
    """Base exception for note workflow."""


class NoteNotFoundError(NoteError):
    """Raised when a note id does not exist."""

    def __init__(self, note_id: str) -> None:
        super().__init__(f"Note with ID {note_id} not found")
        self.note_id = note_id


class InvalidNoteError(NoteError):
    """Raised when required note fields are missing or empty."""


def summary_view(note: Note) -> dict:
    record = note.to_record()
    record.pop("content")
    return record


def detail_view(note: Note) -> dict:
    return note.to_record()


class NoteService:
    """Maps request-level operations onto a NoteRepository."""

    def __init__(self, repository: NoteRepository) -> None:
        self.repository = repository

    def list_notes(self, order_by: Optional[str] = None, order: str = "asc") -> list[dict]:
        sort = NoteSortOptions(order_by=order_by, order=order or "asc") if order_by else None
        return [summary_view(note) for note in self.repository.find_all(sort)]

    def get_note(self, note_id: str) -> dict:
        note = self.repository.find_one(note_id)
        if note is None:
            raise NoteNotFoundError(note_id)
        return detail_view(note)

    def create_note(self, title: Optional[str], content: Optional[str]) -> dict:
        for field, value in (("title", title), ("content", content)):
            if not isinstance(value, str) or not value:
                raise InvalidNoteError(f"{field} must be a non-empty string")
        note = self.repository.create(title, content)
        logger.info("Created note %s", note.id)
        return detail_view(note)

    def update_note(self, note_id: str, title=UNSET, content=UNSET) -> dict:
        note = self.repository.update(note_id, title=title, content=content)
        if note is None:
            raise NoteNotFoundError(note_id)
        logger.info("Updated note %s", note_id)
        return detail_view(note)

    def delete_note(self, note_id: str) -> dict:
        return self.delete_notes([note_id])

    def delete_notes(self, ids: Optional[Iterable[str]]) -> dict:
        ids = list(ids or [])
        if not ids:
            return {"deletedCount": 0}
        deleted = self.repository.delete(ids)
        logger.info("Deleted %d of %d requested notes", deleted, len(ids))
        return {"deletedCount": deleted}
