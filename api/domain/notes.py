"""Domain model for notes: the record itself, sort options and (de)serialization."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Literal, Mapping

from api.core.utils import format_timestamp, parse_timestamp

SortField = Literal["title", "createdAt", "modifiedAt"]
SortOrder = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = ("title", "createdAt", "modifiedAt")
SORT_ORDERS: tuple[str, ...] = ("asc", "desc")


@dataclass
class Note:
    id: str
    title: str
    content: str
    created_at: datetime
    modified_at: datetime

    def to_record(self) -> dict:
        """Persisted/wire shape (camelCase keys, ISO-8601 timestamps)."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": format_timestamp(self.created_at),
            "modifiedAt": format_timestamp(self.modified_at),
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Note":
        """Build a Note from a persisted dict. Raises ValueError/KeyError/TypeError on bad input."""
        if not isinstance(record, Mapping):
            raise TypeError(f"note record must be an object, got {type(record).__name__}")
        for key in ("id", "title", "content"):
            if not isinstance(record[key], str):
                raise TypeError(f"note {key} must be a string, got {type(record[key]).__name__}")
        return cls(
            id=record["id"],
            title=record["title"],
            content=record["content"],
            created_at=parse_timestamp(record["createdAt"]),
            modified_at=parse_timestamp(record["modifiedAt"]),
        )


@dataclass(frozen=True)
class NoteSortOptions:
    order_by: SortField | None = None
    order: SortOrder = "asc"


def _sort_key(field: str):
    if field == "title":
        return lambda note: note.title.casefold()
    if field == "createdAt":
        return lambda note: note.created_at
    if field == "modifiedAt":
        return lambda note: note.modified_at
    raise ValueError(f"Unsupported sort field: {field!r}")


def sort_notes(notes: Iterable[Note], order_by: str, order: str = "asc") -> list[Note]:
    """
    Return a new list ordered by `order_by`. Equal keys keep their stored order
    in both directions.
    """
    if order not in SORT_ORDERS:
        raise ValueError(f"Unsupported sort order: {order!r}")
    key = _sort_key(order_by)
    # sorted(reverse=True) also keeps equal elements in their original order
    return sorted(notes, key=key, reverse=(order == "desc"))
