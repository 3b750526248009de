"""Substring search over journal entries.

An entry matches when the search term appears, ignoring case, in its
summary or in its formatted date (the same text the export shows, so
"oct" finds every October entry). Filtering never reorders.
"""

from __future__ import annotations

from collections.abc import Iterable

from .export import format_date
from .models import MemoryEntry


def matches(entry: MemoryEntry, term: str) -> bool:
    """Return True if *term* occurs in the entry's summary or date text."""
    needle = term.casefold()
    return needle in entry.summary.casefold() or needle in format_date(entry.date).casefold()


def filter_entries(entries: Iterable[MemoryEntry], term: str) -> list[MemoryEntry]:
    """Return the entries matching *term*, in their original order.

    An empty term matches everything.
    """
    if not term:
        return list(entries)
    return [entry for entry in entries if matches(entry, term)]
