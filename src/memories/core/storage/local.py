"""
Local filesystem storage backend.

Each key maps to one file under ``base_path``, optionally gzip-compressed
(stored with a ``.gz`` suffix).
"""

import gzip
from pathlib import Path

from loguru import logger

from .base import StorageBackend, StoragePermissionError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: str = "~/.memories-data", compress: bool = False, **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.compress = compress

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Storage key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Storage key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / key_path).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        if full_path == self.base_path:
            raise StoragePermissionError(f"Unsafe storage key '{key}': resolves to the storage root.")
        return full_path

    @staticmethod
    def _gz_path(path: Path) -> Path:
        return path.with_name(path.name + ".gz")

    def get(self, key: str) -> bytes | None:
        path = self._get_full_path(key)
        compressed_path = self._gz_path(path)

        if path.exists():
            compressed = False
        elif compressed_path.exists():
            path = compressed_path
            compressed = True
        else:
            return None

        try:
            data = path.read_bytes()
            if compressed:
                data = gzip.decompress(data)
        except (OSError, EOFError) as e:
            logger.warning(f"Cannot read storage key '{key}' from {path}: {e}")
            return None
        return data

    def set(self, key: str, data: bytes) -> bool:
        path = self._get_full_path(key)
        stale_path = self._gz_path(path)
        original_size = len(data)

        if self.compress:
            data = gzip.compress(data, compresslevel=6)
            path, stale_path = stale_path, path

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            # Drop the other variant so get() never reads an outdated copy
            if stale_path.exists():
                stale_path.unlink()
        except OSError as e:
            logger.warning(f"Cannot write storage key '{key}' to {path}: {e}")
            return False

        logger.debug(f"Wrote '{key}': {original_size} bytes ({len(data)} on disk)")
        return True

    def exists(self, key: str) -> bool:
        path = self._get_full_path(key)
        return path.exists() or self._gz_path(path).exists()

    def delete(self, key: str) -> bool:
        path = self._get_full_path(key)
        deleted = False
        for p in (path, self._gz_path(path)):
            if p.exists():
                p.unlink()
                deleted = True
        return deleted
