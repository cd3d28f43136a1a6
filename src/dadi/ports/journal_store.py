"""Journal storage interface."""

from datetime import date
from pathlib import Path
from typing import Protocol

from ..config import SectionConfig
from ..core.sections import SectionMap


class JournalStore(Protocol):
    """Interface for locating, reading and creating daily entries."""

    def path_for_date(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        ...

    def exists(self, target_date: date) -> bool:
        """Check if an entry exists for a date."""
        ...

    def previous_before(self, bound: date) -> date | None:
        """Latest entry date strictly before bound, or None."""
        ...

    def sections_for(self, target_date: date) -> SectionMap | None:
        """Sections of the entry for a date. Returns None if not found."""
        ...

    def write_entry(self, target_date: date, sections: list[SectionConfig]) -> Path:
        """Create a new entry seeded from the previous one."""
        ...

    def ensure_entry(self, target_date: date, sections: list[SectionConfig]) -> Path:
        """Create the entry for a date unless it already exists."""
        ...
