#!/usr/bin/env python3
"""
Delete one or more notes by id from the JSON data file.

Usage:
  python scripts/delete_notes.py ID [ID ...] [--file data/notes.json]
"""
from __future__ import annotations

import argparse
import sys

from api.core.config import get_settings
from api.core.logging import configure_logging
from api.repositories.json_storage import NoteRepository
from api.services.note_service import NoteService


def main() -> None:
    ap = argparse.ArgumentParser(description="Delete notes from the JSON store")
    ap.add_argument("ids", nargs="+", help="Note ids to delete")
    ap.add_argument("--file", help="Data file (default: NOTES_DATA_DIR/NOTES_DATA_FILE)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    repo = NoteRepository(args.file or settings.notes_path)
    if not repo.path.exists():
        raise SystemExit(f"Data file '{repo.path}' not found")

    ids = [value.strip() for value in args.ids if value.strip()]
    result = NoteService(repo).delete_notes(ids)
    print(f"OK: {result['deletedCount']} of {len(ids)} notes deleted")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
