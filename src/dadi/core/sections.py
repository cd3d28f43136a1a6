"""Section parsing and entry layout - pure functions, no I/O."""

import logging
from datetime import date
from typing import Iterator

from ..config import SectionConfig
from .dates import format_date

logger = logging.getLogger(__name__)

HEADING_MARKER = "## "

# Heading title -> body text, in file order.
SectionMap = dict[str, str]


def parse_sections(text: str) -> SectionMap:
    """
    Split an entry into its level-2 sections.

    A line starting with '## ' opens a section keyed by the rest of the
    line. Lines up to the next heading form the body, joined with newlines
    and kept verbatim. Anything before the first heading is ignored. A
    repeated heading replaces the earlier body.
    """
    if text.endswith("\n"):
        text = text[:-1]

    sections: SectionMap = {}
    title: str | None = None
    body: list[str] = []

    for line in text.split("\n"):
        if line.startswith(HEADING_MARKER):
            if title is not None:
                _store(sections, title, body)
            title = line[len(HEADING_MARKER):]
            body = []
        elif title is not None:
            body.append(line)

    if title is not None:
        _store(sections, title, body)

    return sections


def _store(sections: SectionMap, title: str, body: list[str]) -> None:
    if title in sections:
        logger.debug(f"Duplicate section '{title}', keeping the later one")
    sections[title] = "\n".join(body)


def section_body(section: SectionConfig, previous: SectionMap | None) -> str:
    """Body for a new entry's section: carried over if persistent, else blank."""
    if section.persist and previous is not None:
        return previous.get(section.title, "")
    return ""


def entry_chunks(
    entry_date: date,
    sections: list[SectionConfig],
    previous: SectionMap | None = None,
) -> Iterator[str]:
    """Yield the text of a new entry piece by piece, in file order."""
    yield f"# {format_date(entry_date)}\n\n"
    for section in sections:
        yield f"{HEADING_MARKER}{section.title}\n"
        yield f"{section_body(section, previous)}\n"


def render_entry(
    entry_date: date,
    sections: list[SectionConfig],
    previous: SectionMap | None = None,
) -> str:
    """Full text of a new entry."""
    return "".join(entry_chunks(entry_date, sections, previous))
