"""
memories exception hierarchy.

All memories exceptions inherit from MemoriesError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes.
"""


class MemoriesError(Exception):
    """Base exception class for all memories errors."""


class ConfigurationError(MemoriesError):
    """Raised for configuration errors (missing keys, invalid values)."""


class InvalidEntryError(MemoriesError, ValueError):
    """Raised when a journal entry is malformed (bad rating, empty summary, duplicate id)."""


class EntryDecodeError(MemoriesError):
    """Raised when a persisted entry collection cannot be decoded."""


class FileIOError(MemoriesError):
    """Raised for file I/O errors."""
