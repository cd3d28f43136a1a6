"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore
from .editor import EditorService, EditorError

__all__ = [
    "FileJournalStore",
    "EditorService",
    "EditorError",
]
