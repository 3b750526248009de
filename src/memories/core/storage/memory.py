"""In-process storage backend, for tests and throwaway sessions."""

from .base import StorageBackend


class InMemoryStorage(StorageBackend):
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, bytes] | None = None, **config):
        super().__init__(**config)
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, data: bytes) -> bool:
        self._data[key] = bytes(data)
        return True

    def exists(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
