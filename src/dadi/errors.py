"""Journal error types."""

from os import PathLike


class JournalError(Exception):
    """Base class for failures while reading or writing the journal."""


class BaseMissing(JournalError):
    """The journal root directory is absent or cannot be listed."""

    def __init__(self, path: PathLike | str):
        self.path = path
        super().__init__(f"Journal directory missing or unreadable: {path}")


class InvalidFile(JournalError):
    """A journal file is misnamed, unreadable, or cannot be created."""

    def __init__(self, path: PathLike | str, reason: str = "invalid journal file"):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class InvalidDate(InvalidFile):
    """A canonical-looking file name that is not a real calendar date."""

    def __init__(self, path: PathLike | str):
        super().__init__(path, "not a calendar date")


class JournalOSError(JournalError):
    """Wraps a lower-level I/O failure. The original error is the __cause__."""
