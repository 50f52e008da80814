"""
Persistence adapters.

These modules encapsulate how notes are stored/retrieved (today a JSON file).
Services depend on the repository API rather than touching the file.
"""

from .json_storage import NoteRepository, StorageError, UNSET

__all__ = ["NoteRepository", "StorageError", "UNSET"]
