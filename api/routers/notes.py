from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Body, HTTPException, Query, Request

from api.schemas.notes import (
    DeleteResult,
    NoteCreate,
    NoteDetail,
    NotesDelete,
    NoteSummary,
    NoteUpdate,
)
from api.services.note_service import InvalidNoteError, NoteNotFoundError, NoteService

router = APIRouter(prefix="/notes", tags=["notes"])


def _get_note_service(request: Request) -> NoteService:
    svc = getattr(getattr(request.app, "state", None), "note_service", None)
    if not svc:
        raise RuntimeError("NoteService not configured")
    return svc


@router.get("", response_model=List[NoteSummary], summary="List notes (without content)")
def list_notes(
    request: Request,
    order_by: Optional[Literal["title", "createdAt", "modifiedAt"]] = Query(None, alias="orderBy"),
    order: Literal["asc", "desc"] = Query("asc"),
):
    return _get_note_service(request).list_notes(order_by, order)


@router.get("/{note_id}", response_model=NoteDetail, summary="Get one note with content")
def get_note(note_id: str, request: Request):
    try:
        return _get_note_service(request).get_note(note_id)
    except NoteNotFoundError as exc:
        raise HTTPException(404, str(exc))


@router.post("", response_model=NoteDetail, status_code=201, summary="Create a note")
def create_note(payload: NoteCreate, request: Request):
    try:
        return _get_note_service(request).create_note(payload.title, payload.content)
    except InvalidNoteError as exc:
        raise HTTPException(400, str(exc))


@router.patch("/{note_id}", response_model=NoteDetail, summary="Update title and/or content")
def update_note(note_id: str, payload: NoteUpdate, request: Request):
    fields = payload.model_dump(exclude_unset=True)
    try:
        return _get_note_service(request).update_note(note_id, **fields)
    except NoteNotFoundError as exc:
        raise HTTPException(404, str(exc))


@router.delete("/{note_id}", response_model=DeleteResult, summary="Delete one note")
def delete_note(note_id: str, request: Request):
    return _get_note_service(request).delete_note(note_id)


@router.delete("", response_model=DeleteResult, summary="Delete several notes")
def delete_notes(request: Request, payload: Optional[NotesDelete] = Body(None)):
    ids = payload.ids if payload else None
    return _get_note_service(request).delete_notes(ids)
