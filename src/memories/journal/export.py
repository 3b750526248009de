"""Plain-text export of journal entries.

Each entry renders as a fixed five-line block::

    Date: Oct 17, 2026
    Rating: ⭐️⭐️⭐️⭐️⭐️
    Nutshell: Great day
    Details: No additional details.
    --------------------------

Blocks are concatenated in collection order with nothing in between.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .config import ExportConfig
from .models import MemoryEntry


def format_date(value: datetime) -> str:
    """Abbreviated, time-less date such as ``Oct 7, 2026``."""
    return f"{value:%b} {value.day}, {value.year}"


def render_rating(rating: int, glyph: str) -> str:
    return glyph * rating


def render_entry(entry: MemoryEntry, config: ExportConfig | None = None) -> str:
    """Render one entry as its export block, newline-terminated."""
    config = config or ExportConfig()
    details = entry.details if entry.details is not None else config.missing_details
    lines = [
        f"Date: {format_date(entry.date)}",
        f"Rating: {render_rating(entry.rating, config.rating_glyph)}",
        f"Nutshell: {entry.summary}",
        f"Details: {details}",
        config.separator,
    ]
    return "\n".join(lines) + "\n"


def export_entries(entries: Iterable[MemoryEntry], config: ExportConfig | None = None) -> str:
    """Render every entry, in order, into one text document."""
    config = config or ExportConfig()
    return "".join(render_entry(entry, config) for entry in entries)
