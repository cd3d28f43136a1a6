"""File-based journal storage adapter."""

import logging
import os
from datetime import date
from pathlib import Path

from ..config import SectionConfig
from ..core.dates import decode_filename, encode_filename
from ..core.sections import SectionMap, entry_chunks, parse_sections
from ..errors import BaseMissing, InvalidFile, JournalOSError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a markdown file named
    YYYY-MM-DD.md directly inside journal_dir. Every name in journal_dir
    must follow that scheme; anything else is treated as corruption.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir)

    def path_for_date(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return self.journal_dir / encode_filename(target_date)

    def exists(self, target_date: date) -> bool:
        """Check if an entry exists for a date."""
        return self.path_for_date(target_date).exists()

    def list_dates(self) -> list[date]:
        """All entry dates, sorted. Raises on any misnamed file."""
        try:
            it = os.scandir(self.journal_dir)
        except OSError:
            raise BaseMissing(self.journal_dir)

        dates = []
        with it:
            try:
                for entry in it:
                    dates.append(decode_filename(entry.name))
            except OSError as e:
                raise JournalOSError(f"Failed listing {self.journal_dir}: {e}") from e
        return sorted(dates)

    def previous_before(self, bound: date) -> date | None:
        """Latest entry date strictly before bound, or None if there is none."""
        earlier = [d for d in self.list_dates() if d < bound]
        previous = max(earlier, default=None)
        logger.debug(f"Previous entry before {bound}: {previous}")
        return previous

    def read_sections(self, path: Path) -> SectionMap:
        """Parse an entry file into its sections."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidFile(path, "cannot read entry") from e
        return parse_sections(text)

    def sections_for(self, target_date: date) -> SectionMap | None:
        """Sections of the entry for a date. Returns None if not found."""
        path = self.path_for_date(target_date)
        if not path.exists():
            return None
        return self.read_sections(path)

    def write_entry(self, target_date: date, sections: list[SectionConfig]) -> Path:
        """
        Create the entry for target_date.

        Persistent sections are seeded from the latest earlier entry. Never
        overwrites: an existing entry raises InvalidFile and is left as is.
        """
        previous_date = self.previous_before(target_date)
        previous = None
        if previous_date is not None:
            previous = self.read_sections(self.path_for_date(previous_date))

        path = self.path_for_date(target_date)
        try:
            f = path.open("x", encoding="utf-8")
        except FileExistsError:
            raise InvalidFile(path, "entry already exists")
        except OSError as e:
            raise InvalidFile(path, "cannot create entry") from e

        try:
            with f:
                for chunk in entry_chunks(target_date, sections, previous):
                    f.write(chunk)
        except OSError as e:
            raise JournalOSError(f"Failed writing {path}: {e}") from e

        logger.info(f"Created entry {path} (previous: {previous_date})")
        return path

    def ensure_entry(self, target_date: date, sections: list[SectionConfig]) -> Path:
        """Create the entry for target_date unless it already exists."""
        if self.exists(target_date):
            return self.path_for_date(target_date)
        return self.write_entry(target_date, sections)
