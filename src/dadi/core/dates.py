"""Canonical file naming for journal entries."""

import re
from datetime import date

from ..errors import InvalidDate, InvalidFile

ENTRY_SUFFIX = ".md"

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def encode_filename(entry_date: date) -> str:
    """File name for the entry of a date, e.g. '2019-01-01.md'."""
    return f"{entry_date.isoformat()}{ENTRY_SUFFIX}"


def decode_filename(name: str) -> date:
    """
    Parse an entry file name back into its date.

    Only 'YYYY-MM-DD.md' is accepted. Raises InvalidFile for any other
    shape and InvalidDate when the numbers do not form a real date.
    """
    stem, dot, suffix = name.rpartition(".")
    if not dot or f".{suffix}" != ENTRY_SUFFIX:
        raise InvalidFile(name, "not a markdown entry")

    match = _ISO_DATE.fullmatch(stem)
    if not match:
        raise InvalidFile(name, "not an ISO-8601 date name")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDate(name)


def format_date(entry_date: date) -> str:
    """Human-readable date for entry titles, e.g. 'Tuesday, January 1, 2019'."""
    return f"{entry_date.strftime('%A, %B')} {entry_date.day}, {entry_date.year}"
