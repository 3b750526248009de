"""MemoryStore — the owner of the journal's entry collection.

The store loads every entry once, when it is constructed, and keeps them
in memory in insertion order. Each mutation (``add``, ``delete``) rewrites
the whole collection to storage under a single key and then notifies
subscribers before returning, so a caller never sees the old collection
after a mutating call.

Persistence failures are logged and absorbed: the in-memory collection
stays authoritative and the next mutation writes everything again.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator

from loguru import logger

from memories.core.events import MEMORIES_CHANGED, MEMORIES_LOADED, Event, EventBus, Hook
from memories.core.exceptions import EntryDecodeError, InvalidEntryError
from memories.core.storage import StorageBackend, StorageError

from .codec import decode_entries, encode_entries
from .config import ExportConfig, StoreConfig
from .export import export_entries
from .models import MemoryEntry
from .search import filter_entries


class MemoryStore:
    """In-memory journal backed by a key-value storage backend.

    Example::

        store = MemoryStore(LocalStorage("~/.memories-data"))
        store.subscribe(lambda event: print(event.payload["count"]))
        store.add(MemoryEntry.create(5, "Great day"))
        print(store.export())
    """

    def __init__(
        self,
        storage: StorageBackend,
        config: StoreConfig | None = None,
        export_config: ExportConfig | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.storage = storage
        self.config = config or StoreConfig()
        self.export_config = export_config or ExportConfig()
        self.bus = bus or EventBus()
        self._entries: list[MemoryEntry] = []
        self._load()

    # -- Loading / persistence ---------------------------------------------

    def _load(self) -> None:
        """Read the stored collection. Missing or corrupt data means an empty journal."""
        key = self.config.key
        try:
            data = self.storage.get(key)
        except StorageError as e:
            logger.warning(f"Cannot read memories from '{key}': {e}. Starting empty.")
            data = None

        if data is None:
            logger.debug(f"No stored memories under '{key}'")
            self._entries = []
        else:
            try:
                self._entries = decode_entries(data)
            except EntryDecodeError as e:
                logger.warning(f"Ignoring unreadable memories under '{key}': {e}")
                self._entries = []
            else:
                logger.debug(f"Loaded {len(self._entries)} memories from '{key}'")

        self._notify(MEMORIES_LOADED, "load", [])

    def persist(self) -> bool:
        """Write the whole collection to storage.

        Returns:
            True if the write succeeded, False if it was dropped.
        """
        key = self.config.key
        try:
            data = encode_entries(self._entries)
            ok = self.storage.set(key, data)
        except (StorageError, TypeError, ValueError) as e:
            logger.warning(f"Failed to persist {len(self._entries)} memories to '{key}': {e}")
            return False

        if not ok:
            logger.warning(f"Storage rejected write of {len(self._entries)} memories to '{key}'")
            return False
        logger.debug(f"Persisted {len(self._entries)} memories to '{key}'")
        return True

    # -- Mutations ------------------------------------------------------------

    def add(self, entry: MemoryEntry) -> MemoryEntry:
        """Append *entry* to the journal, persist, and notify subscribers.

        Raises:
            InvalidEntryError: If *entry* is not a MemoryEntry or its id is already present.
        """
        if not isinstance(entry, MemoryEntry):
            raise InvalidEntryError(f"Expected a MemoryEntry, got {type(entry).__name__}")
        if any(existing.id == entry.id for existing in self._entries):
            raise InvalidEntryError(f"Duplicate memory id: {entry.id}")

        self._entries = [*self._entries, entry]
        self.persist()
        self._notify(MEMORIES_CHANGED, "add", [entry])
        return entry

    def delete(self, indices: Iterable[int]) -> list[MemoryEntry]:
        """Remove the entries at *indices* in a single update.

        Positions refer to the collection as it is when the call is made;
        repeated positions count once.

        Returns:
            The removed entries, in their original order.

        Raises:
            IndexError: If any position is out of range. Nothing is removed.
        """
        positions = set(indices)
        size = len(self._entries)
        bad = sorted(i for i in positions if not 0 <= i < size)
        if bad:
            raise IndexError(f"Memory positions out of range (have {size}): {bad}")
        if not positions:
            return []

        removed = [entry for i, entry in enumerate(self._entries) if i in positions]
        self._entries = [entry for i, entry in enumerate(self._entries) if i not in positions]
        self.persist()
        self._notify(MEMORIES_CHANGED, "delete", removed)
        return removed

    def delete_by_id(self, entry_ids: Iterable[uuid.UUID]) -> list[MemoryEntry]:
        """Remove entries by id. Unknown ids are ignored."""
        wanted = set(entry_ids)
        return self.delete(i for i, entry in enumerate(self._entries) if entry.id in wanted)

    # -- Queries --------------------------------------------------------------

    @property
    def entries(self) -> tuple[MemoryEntry, ...]:
        """Snapshot of the collection in insertion order."""
        return tuple(self._entries)

    def get(self, entry_id: uuid.UUID) -> MemoryEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def query(self, term: str) -> list[MemoryEntry]:
        """Entries whose summary or date text contains *term*, ignoring case."""
        return filter_entries(self._entries, term)

    def export(self) -> str:
        """Render every entry as plain text. Has no side effects."""
        return export_entries(self._entries, self.export_config)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MemoryEntry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> MemoryEntry:
        return self._entries[index]

    # -- Change notification ------------------------------------------------

    def subscribe(self, hook: Hook) -> None:
        """Call *hook* with an Event after every add or delete."""
        self.bus.on(MEMORIES_CHANGED, hook)

    def unsubscribe(self, hook: Hook) -> None:
        self.bus.off(MEMORIES_CHANGED, hook)

    def _notify(self, name: str, action: str, affected: list[MemoryEntry]) -> None:
        self.bus.emit(
            Event(
                name=name,
                payload={
                    "action": action,
                    "count": len(self._entries),
                    "ids": [entry.id for entry in affected],
                },
                source="memory_store",
            )
        )
