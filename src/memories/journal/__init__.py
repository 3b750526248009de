"""Journal model, persistence and derived views.

Provides the MemoryEntry record, the MemoryStore that owns and persists
the entry collection, plain-text export, and substring search.
"""

from .codec import decode_entries, encode_entries
from .config import ExportConfig, StoreConfig
from .export import export_entries, format_date
from .models import MAX_RATING, MIN_RATING, SUMMARY_MAX_LENGTH, MemoryEntry
from .search import filter_entries
from .store import MemoryStore

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "SUMMARY_MAX_LENGTH",
    "ExportConfig",
    "MemoryEntry",
    "MemoryStore",
    "StoreConfig",
    "decode_entries",
    "encode_entries",
    "export_entries",
    "filter_entries",
    "format_date",
]
