"""Core data model for the journal.

A ``MemoryEntry`` is one day's record: when it was written, how the day
rated (1-5), a short nutshell summary, and optional longer details.
Entries are immutable once created.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

import regex

from memories.core.exceptions import InvalidEntryError

MIN_RATING = 1
MAX_RATING = 5
SUMMARY_MAX_LENGTH = 50

_GRAPHEME_RE = regex.compile(r"\X")


def summary_length(summary: str) -> int:
    """Number of user-visible characters (extended grapheme clusters) in *summary*."""
    return len(_GRAPHEME_RE.findall(summary))


def truncate_summary(summary: str, limit: int = SUMMARY_MAX_LENGTH) -> str:
    """Cut *summary* down to *limit* user-visible characters.

    Counts extended grapheme clusters, so an emoji with a skin-tone modifier
    or a ZWJ sequence is kept whole or dropped whole.
    """
    return "".join(_GRAPHEME_RE.findall(summary)[:limit])


@dataclass(frozen=True)
class MemoryEntry:
    """A single journal entry.

    Attributes:
        rating: Mood/day quality from 1 (rough) to 5 (wonderful).
        summary: The day in a nutshell. Never empty.
        details: Optional longer reflection. ``None`` when absent.
        date: When the entry was created.
        id: Unique identifier, used to correlate an entry across views.
    """

    rating: int
    summary: str
    details: str | None = None
    date: datetime = field(default_factory=datetime.now)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise InvalidEntryError(f"Rating must be an integer, got {self.rating!r}")
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise InvalidEntryError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {self.rating}")
        if not isinstance(self.summary, str) or not self.summary:
            raise InvalidEntryError("Summary must be a non-empty string")
        if self.details is not None and not isinstance(self.details, str):
            raise InvalidEntryError("Details must be a string or None")
        if not isinstance(self.date, datetime):
            raise InvalidEntryError("Date must be a datetime")
        if not isinstance(self.id, uuid.UUID):
            raise InvalidEntryError("Id must be a UUID")

    @classmethod
    def create(
        cls,
        rating: int,
        summary: str,
        details: str | None = None,
        *,
        now: datetime | None = None,
    ) -> MemoryEntry:
        """Build a new entry from user input.

        The summary is truncated to ``SUMMARY_MAX_LENGTH`` characters and
        empty details are stored as absent.

        Raises:
            InvalidEntryError: If the rating is out of range or the summary is empty.
        """
        if details == "":
            details = None
        return cls(
            rating=rating,
            summary=truncate_summary(summary) if isinstance(summary, str) else summary,
            details=details,
            date=now or datetime.now(),
        )

    @property
    def has_details(self) -> bool:
        return self.details is not None

    def __repr__(self) -> str:
        preview = self.summary[:30] + "..." if len(self.summary) > 30 else self.summary
        return f"MemoryEntry(date='{self.date:%Y-%m-%d}', rating={self.rating}, summary='{preview}')"
