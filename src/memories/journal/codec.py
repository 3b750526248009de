"""JSON encoding of the entry collection.

The whole collection is stored as one UTF-8 JSON array, in insertion order.
Each entry becomes an object with ``id``, ``date`` (ISO-8601), ``rating``
and ``summary``; ``details`` is only written when the entry has them.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from memories.core.exceptions import EntryDecodeError

from .models import MemoryEntry

_REQUIRED_FIELDS = ("id", "date", "rating", "summary")


def entry_to_dict(entry: MemoryEntry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": str(entry.id),
        "date": entry.date.isoformat(),
        "rating": entry.rating,
        "summary": entry.summary,
    }
    if entry.details is not None:
        data["details"] = entry.details
    return data


def entry_from_dict(data: dict[str, Any]) -> MemoryEntry:
    """Rebuild an entry from its stored form.

    Raises:
        EntryDecodeError: If a field is missing or has the wrong shape.
    """
    if not isinstance(data, dict):
        raise EntryDecodeError(f"Expected an object, got {type(data).__name__}")
    missing = [name for name in _REQUIRED_FIELDS if name not in data]
    if missing:
        raise EntryDecodeError(f"Entry is missing fields: {', '.join(missing)}")

    try:
        return MemoryEntry(
            id=uuid.UUID(data["id"]),
            date=datetime.fromisoformat(data["date"]),
            rating=data["rating"],
            summary=data["summary"],
            details=data.get("details"),
        )
    except (TypeError, ValueError, AttributeError) as e:
        # InvalidEntryError is a ValueError, so shape problems land here too
        raise EntryDecodeError(f"Malformed entry: {e}") from e


def encode_entries(entries: Iterable[MemoryEntry]) -> bytes:
    """Serialize *entries* to UTF-8 JSON bytes."""
    payload = [entry_to_dict(entry) for entry in entries]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def decode_entries(data: bytes) -> list[MemoryEntry]:
    """Parse bytes produced by ``encode_entries``.

    Decoding is all-or-nothing: one bad entry fails the whole collection.

    Raises:
        EntryDecodeError: If the bytes are not a valid encoded collection.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise EntryDecodeError(f"Stored memories are not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise EntryDecodeError(f"Expected a list of entries, got {type(payload).__name__}")

    entries = [entry_from_dict(item) for item in payload]

    seen: set[uuid.UUID] = set()
    for entry in entries:
        if entry.id in seen:
            raise EntryDecodeError(f"Duplicate entry id: {entry.id}")
        seen.add(entry.id)
    return entries
