"""
Request and response bodies for /notes.

Field names follow the wire format (camelCase). Unknown fields in request
bodies are rejected.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteCreate(BaseModel):
    """Body of POST /notes. Both fields are required and non-empty."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, examples=["My First Note"])
    content: str = Field(..., min_length=1, examples=["This is the content of my first note"])


class NoteUpdate(BaseModel):
    """
    Body of PATCH /notes/{id}.

    Only the fields present in the request are applied; omitted fields keep
    their stored value. An explicit null is rejected.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, examples=["Updated Title"])
    content: Optional[str] = Field(None, examples=["Updated content"])

    @field_validator("title", "content")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("must be a string when provided")
        return value


class NotesDelete(BaseModel):
    """Body of DELETE /notes."""
    model_config = ConfigDict(extra="forbid")

    ids: Optional[List[str]] = None


class NoteSummary(BaseModel):
    """List view: everything except content."""
    id: str
    title: str
    createdAt: str
    modifiedAt: str


class NoteDetail(NoteSummary):
    content: str


class DeleteResult(BaseModel):
    deletedCount: int
