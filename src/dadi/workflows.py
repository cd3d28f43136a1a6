"""Shared workflow layer between the CLI and the journal.

Each function takes a loaded Config; the journal root is always derived
from it, never held globally.
"""

import logging
from datetime import date, datetime, timedelta
from pathlib import Path

from .adapters.editor import EditorService
from .adapters.file_journal import FileJournalStore
from .config import Config
from .core.collate import assemble_collation
from .ports import JournalStore

logger = logging.getLogger(__name__)


def get_journal(config: Config) -> JournalStore:
    """Journal store rooted at the configured directory."""
    return FileJournalStore(config.root_path)


def get_today(config: Config, now: datetime | None = None) -> date:
    """Journal date for now, with the day rolling over reset hours after midnight."""
    now = now or datetime.now()
    return (now - timedelta(hours=config.reset_hours_after_midnight)).date()


def open_today(config: Config, editor: EditorService | None = None) -> Path:
    """Create today's entry if needed and open it in the editor."""
    editor = editor or EditorService()
    today = get_today(config)
    path = get_journal(config).ensure_entry(today, config.sections)
    editor.open(path)
    return path


def compile_collation(
    config: Config,
    days: int,
    today: date | None = None,
    journal: JournalStore | None = None,
) -> str:
    """Collate the last `days` days before today, skipping days with no entry."""
    today = today or get_today(config)
    journal = journal or get_journal(config)

    found = []
    for offset in range(1, days + 1):
        day = today - timedelta(days=offset)
        sections = journal.sections_for(day)
        if sections is not None:
            found.append((day, sections))

    logger.debug(f"Collating {len(found)} of {days} days before {today}")
    return assemble_collation(found, config.sections)


def collate(config: Config, days: int, editor: EditorService | None = None) -> str:
    """Compile the collation and show it read-only in the editor."""
    editor = editor or EditorService()
    text = compile_collation(config, days)
    editor.view(text)
    return text
