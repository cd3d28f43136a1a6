"""Functional core - pure journal logic with no I/O."""

from .dates import decode_filename, encode_filename, format_date
from .sections import SectionMap, entry_chunks, parse_sections, render_entry, section_body
from .collate import assemble_collation

__all__ = [
    # Dates
    "decode_filename",
    "encode_filename",
    "format_date",
    # Sections
    "SectionMap",
    "entry_chunks",
    "parse_sections",
    "render_entry",
    "section_body",
    # Collation
    "assemble_collation",
]
