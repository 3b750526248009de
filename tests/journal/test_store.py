"""Tests for memories.journal.store.MemoryStore."""

from datetime import datetime

import pytest

from memories.core.events import MEMORIES_CHANGED, MEMORIES_LOADED, Event, EventBus
from memories.core.exceptions import InvalidEntryError
from memories.core.storage import InMemoryStorage, LocalStorage, StorageBackend, StorageError
from memories.journal.codec import decode_entries, encode_entries
from memories.journal.config import ExportConfig, StoreConfig
from memories.journal.models import MemoryEntry
from memories.journal.store import MemoryStore

KEY = "SavedMemories"


class FlakyStorage(InMemoryStorage):
    """Storage whose writes can be switched off."""

    def __init__(self, **config):
        super().__init__(**config)
        self.fail_writes = False
        self.raise_on_write = False
        self.writes = 0

    def set(self, key: str, data: bytes) -> bool:
        if self.raise_on_write:
            raise StorageError("disk on fire")
        if self.fail_writes:
            return False
        self.writes += 1
        return super().set(key, data)


class UnreadableStorage(InMemoryStorage):
    def get(self, key: str) -> bytes | None:
        raise StorageError("permission denied")


@pytest.fixture
def storage():
    return FlakyStorage()


@pytest.fixture
def store(storage):
    return MemoryStore(storage)


def _entry(rating, summary, details=None, day=1):
    return MemoryEntry.create(rating, summary, details, now=datetime(2026, 5, day, 20, 0))


class TestLoad:
    @pytest.mark.smoke
    def test_absent_data_gives_empty_store(self, store):
        assert len(store) == 0
        assert store.entries == ()

    def test_loads_existing_collection(self):
        entries = [_entry(5, "Beach trip"), _entry(3, "Quiet evening", day=2)]
        store = MemoryStore(InMemoryStorage({KEY: encode_entries(entries)}))
        assert list(store.entries) == entries

    def test_undecodable_data_gives_empty_store(self, log_messages):
        store = MemoryStore(InMemoryStorage({KEY: b"{broken"}))
        assert len(store) == 0
        assert any(m.startswith("WARNING") and "unreadable" in m for m in log_messages)

    def test_empty_bytes_gives_empty_store(self):
        assert len(MemoryStore(InMemoryStorage({KEY: b""}))) == 0

    def test_read_error_gives_empty_store(self, log_messages):
        store = MemoryStore(UnreadableStorage())
        assert len(store) == 0
        assert any("permission denied" in m for m in log_messages)

    def test_custom_key(self):
        entries = [_entry(4, "Elsewhere")]
        storage = InMemoryStorage({"Diary": encode_entries(entries)})
        assert len(MemoryStore(storage, config=StoreConfig(key="Diary"))) == 1
        assert len(MemoryStore(storage)) == 0

    def test_loaded_event_on_shared_bus(self):
        bus = EventBus()
        seen: list[Event] = []
        bus.on(MEMORIES_LOADED, seen.append)
        MemoryStore(InMemoryStorage({KEY: encode_entries([_entry(2, "x")])}), bus=bus)
        assert len(seen) == 1
        assert seen[0].payload["count"] == 1

    def test_local_storage_survives_restart(self, tmp_path):
        first = MemoryStore(LocalStorage(base_path=str(tmp_path)))
        entry = first.add(_entry(5, "Persisted"))
        second = MemoryStore(LocalStorage(base_path=str(tmp_path)))
        assert second.entries == (entry,)

    def test_compressed_local_storage(self, tmp_path):
        config = StoreConfig(compress=True)
        first = MemoryStore(LocalStorage(base_path=str(tmp_path), compress=True), config=config)
        first.add(_entry(4, "Squeezed"))
        assert (tmp_path / f"{KEY}.gz").exists()
        second = MemoryStore(LocalStorage(base_path=str(tmp_path), compress=True), config=config)
        assert second[0].summary == "Squeezed"


class TestAdd:
    @pytest.mark.smoke
    def test_add_appends_and_persists(self, store, storage):
        first = store.add(_entry(4, "First"))
        second = store.add(_entry(2, "Second", day=2))

        assert len(store) == 2
        assert store[-1] == second
        assert decode_entries(storage.get(KEY)) == [first, second]

    def test_add_increases_count_by_one(self, store):
        for i in range(3):
            before = len(store)
            store.add(_entry(3, f"Day {i}"))
            assert len(store) == before + 1

    def test_new_entry_appears_last_in_export(self, store):
        store.add(_entry(4, "Older"))
        store.add(_entry(5, "Newer"))
        export = store.export()
        assert export.index("Nutshell: Older") < export.index("Nutshell: Newer")
        assert export.rstrip("\n").endswith("--------------------------")

    def test_duplicate_id_rejected(self, store, storage):
        entry = store.add(_entry(3, "Once"))
        writes = storage.writes
        with pytest.raises(InvalidEntryError, match="Duplicate"):
            store.add(entry)
        assert len(store) == 1
        assert storage.writes == writes

    def test_non_entry_rejected(self, store):
        with pytest.raises(InvalidEntryError):
            store.add({"rating": 5, "summary": "dict"})  # type: ignore[arg-type]
        assert len(store) == 0

    def test_entries_snapshot_is_immutable(self, store):
        store.add(_entry(3, "x"))
        snapshot = store.entries
        store.add(_entry(3, "y"))
        assert len(snapshot) == 1


class TestDelete:
    @pytest.fixture
    def three(self, store):
        return [store.add(_entry(r, s, day=d)) for r, s, d in [(1, "zero", 1), (2, "one", 2), (3, "two", 3)]]

    @pytest.mark.smoke
    def test_delete_positions_together(self, store, storage, three):
        removed = store.delete({0, 2})
        assert removed == [three[0], three[2]]
        assert store.entries == (three[1],)
        assert decode_entries(storage.get(KEY)) == [three[1]]

    def test_delete_single(self, store, three):
        store.delete([1])
        assert [e.summary for e in store] == ["zero", "two"]

    def test_repeated_positions_count_once(self, store, three):
        removed = store.delete([1, 1, 1])
        assert removed == [three[1]]
        assert len(store) == 2

    def test_unordered_positions(self, store, three):
        store.delete([2, 0])
        assert store.entries == (three[1],)

    def test_out_of_range_leaves_store_untouched(self, store, storage, three):
        writes = storage.writes
        with pytest.raises(IndexError):
            store.delete([0, 3])
        with pytest.raises(IndexError):
            store.delete([-1])
        assert list(store.entries) == three
        assert storage.writes == writes

    def test_empty_positions_is_noop(self, store, storage, three):
        writes = storage.writes
        assert store.delete([]) == []
        assert len(store) == 3
        assert storage.writes == writes

    def test_delete_by_id(self, store, three):
        removed = store.delete_by_id([three[2].id, three[0].id])
        assert removed == [three[0], three[2]]
        assert store.entries == (three[1],)

    def test_delete_by_unknown_id_ignored(self, store, three):
        assert store.delete_by_id([_entry(3, "stranger").id]) == []
        assert len(store) == 3

    def test_get_by_id(self, store, three):
        assert store.get(three[1].id) == three[1]
        assert store.get(_entry(3, "stranger").id) is None


class TestPersistFailures:
    def test_failed_write_keeps_memory_state(self, store, storage, log_messages):
        storage.fail_writes = True
        entry = store.add(_entry(5, "Not saved yet"))
        assert store.entries == (entry,)
        assert storage.get(KEY) is None
        assert any(m.startswith("WARNING") for m in log_messages)

    def test_next_mutation_rewrites_everything(self, store, storage):
        storage.fail_writes = True
        lost = store.add(_entry(5, "Lost write"))
        storage.fail_writes = False
        kept = store.add(_entry(4, "Retry", day=2))
        assert decode_entries(storage.get(KEY)) == [lost, kept]

    def test_storage_exception_absorbed(self, store, storage):
        storage.raise_on_write = True
        store.add(_entry(3, "Still here"))
        assert len(store) == 1
        assert store.persist() is False

    def test_persist_reports_success(self, store):
        assert store.persist() is True


class TestQuery:
    @pytest.fixture
    def filled(self, store):
        store.add(_entry(5, "Beach trip", day=3))
        store.add(_entry(3, "Quiet evening", day=4))
        return store

    def test_beach_scenario(self, filled):
        result = filled.query("beach")
        assert [e.summary for e in result] == ["Beach trip"]

    def test_empty_term_returns_everything(self, filled):
        assert filled.query("") == list(filled.entries)

    def test_matches_date_text(self, filled):
        assert len(filled.query("may")) == 2
        assert [e.summary for e in filled.query("May 4")] == ["Quiet evening"]

    def test_query_has_no_side_effects(self, filled):
        filled.query("beach")
        assert len(filled) == 2


class TestExport:
    @pytest.mark.smoke
    def test_great_day_scenario(self, store):
        store.add(MemoryEntry.create(5, "Great day", None))
        text = store.export()
        assert "Rating: " + "⭐️" * 5 + "\n" in text
        assert "Nutshell: Great day\n" in text
        assert "Details: No additional details.\n" in text

    def test_idempotent(self, store):
        store.add(_entry(4, "Same", "twice"))
        assert store.export() == store.export()

    def test_export_does_not_write(self, store, storage):
        store.add(_entry(4, "x"))
        writes = storage.writes
        store.export()
        assert storage.writes == writes

    def test_empty_store_exports_nothing(self, store):
        assert store.export() == ""

    def test_uses_export_config(self, storage):
        store = MemoryStore(storage, export_config=ExportConfig(rating_glyph="#"))
        store.add(_entry(3, "hash"))
        assert "Rating: ###\n" in store.export()


class TestNotifications:
    def test_subscribers_see_new_state(self, store):
        seen: list[tuple[str, int, int]] = []

        def hook(event: Event) -> None:
            # Store state must already reflect the mutation
            seen.append((event.payload["action"], event.payload["count"], len(store)))

        store.subscribe(hook)
        entry = store.add(_entry(4, "Notify"))
        store.delete([0])

        assert seen == [("add", 1, 1), ("delete", 0, 0)]
        assert entry.id not in [e.id for e in store]

    def test_event_payload(self, store):
        events: list[Event] = []
        store.subscribe(events.append)
        entry = store.add(_entry(2, "Payload"))
        assert events[0].name == MEMORIES_CHANGED
        assert events[0].source == "memory_store"
        assert events[0].payload["ids"] == [entry.id]

    def test_unsubscribe(self, store):
        events: list[Event] = []
        store.subscribe(events.append)
        store.unsubscribe(events.append)
        store.add(_entry(2, "Quiet"))
        assert events == []

    def test_failed_validation_does_not_notify(self, store):
        events: list[Event] = []
        store.subscribe(events.append)
        with pytest.raises(IndexError):
            store.delete([5])
        assert events == []

    def test_failing_subscriber_does_not_break_store(self, store):
        def broken(event: Event) -> None:
            raise RuntimeError("render failed")

        store.subscribe(broken)
        store.add(_entry(3, "Robust"))
        assert len(store) == 1


def test_storage_backend_is_abstract():
    with pytest.raises(TypeError):
        StorageBackend()  # type: ignore[abstract]
