#!/usr/bin/env python3
"""
Print the note listing (id, title, timestamps) from the JSON data file.

Usage:
  python scripts/list_notes.py [--order-by title|createdAt|modifiedAt] [--desc] [--file data/notes.json]
"""
from __future__ import annotations

import argparse
import sys

from api.core.config import get_settings
from api.domain.notes import SORT_FIELDS
from api.repositories.json_storage import NoteRepository
from api.services.note_service import NoteService


def main() -> None:
    ap = argparse.ArgumentParser(description="List notes in the JSON store")
    ap.add_argument("--order-by", choices=SORT_FIELDS, help="Sort key")
    ap.add_argument("--desc", action="store_true", help="Sort descending")
    ap.add_argument("--file", help="Data file (default: NOTES_DATA_DIR/NOTES_DATA_FILE)")
    args = ap.parse_args()

    repo = NoteRepository(args.file or get_settings().notes_path)
    notes = NoteService(repo).list_notes(args.order_by, "desc" if args.desc else "asc")
    if not notes:
        print("(no notes)")
        return
    for note in notes:
        print(f"{note['id']}  {note['modifiedAt']}  {note['title']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
