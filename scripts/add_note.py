#!/usr/bin/env python3
"""
Add a note directly to the JSON data file (the API does not need to be running).

Usage:
  python scripts/add_note.py --title "Groceries" --content "milk, eggs" [--file data/notes.json]
"""
from __future__ import annotations

import argparse
import sys

from api.core.config import get_settings
from api.core.logging import configure_logging
from api.repositories.json_storage import NoteRepository
from api.services.note_service import InvalidNoteError, NoteService


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a note to the JSON store")
    ap.add_argument("--title", required=True, help="Note title")
    ap.add_argument("--content", required=True, help="Note content")
    ap.add_argument("--file", help="Data file (default: NOTES_DATA_DIR/NOTES_DATA_FILE)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    repo = NoteRepository(args.file or settings.notes_path)
    repo.initialize()
    try:
        note = NoteService(repo).create_note(args.title.strip(), args.content)
    except InvalidNoteError as exc:
        raise SystemExit(str(exc))

    print("OK: note created")
    print(f"  ID: {note['id']}")
    print(f"  Title: {note['title']}")
    print(f"  Created: {note['createdAt']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
