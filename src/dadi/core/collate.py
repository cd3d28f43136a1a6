"""Multi-day collation of journal sections."""

from datetime import date

from ..config import SectionConfig
from .dates import format_date
from .sections import HEADING_MARKER, SectionMap


def assemble_collation(
    days: list[tuple[date, SectionMap]],
    sections: list[SectionConfig],
) -> str:
    """
    Build one markdown document from several entries.

    Entries appear oldest first. Only sections flagged for collation are
    included, in configuration order; a section missing from an entry gets
    an empty body.
    """
    collated = [s for s in sections if s.collate]
    parts = []
    for entry_date, entry_sections in sorted(days, key=lambda d: d[0]):
        parts.append(f"# {format_date(entry_date)}\n\n")
        for section in collated:
            parts.append(f"{HEADING_MARKER}{section.title}\n")
            parts.append(f"{entry_sections.get(section.title, '')}\n")
    return "".join(parts)
