from __future__ import annotations


class RecError(Exception):
    """Base class for every failure raised by omfrec."""


class InvalidInput(RecError, ValueError):
    """Out-of-range or missing argument passed to an API call."""


class OpenError(RecError, OSError):
    """Source or destination could not be opened."""


class FileParseError(RecError, ValueError):
    """Input is structurally not a REC file (e.g. too short)."""


class ReadError(RecError, ValueError):
    """A read asked for more bytes than remain in the source."""


class OutOfMemory(RecError, MemoryError):
    """The move list could not grow."""


class IoError(RecError, OSError):
    """A write to the destination failed."""
