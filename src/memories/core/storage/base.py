"""
Abstract base class for storage backends.

A backend is a flat key-value store of byte blobs. The journal keeps its
whole entry collection under a single key, so the contract is deliberately
small: ``get`` returns ``None`` for a missing key and ``set`` reports
success as a boolean instead of raising on I/O trouble.
"""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under *key*, or None if absent or unreadable."""

    @abstractmethod
    def set(self, key: str, data: bytes) -> bool:
        """Overwrite *key* with *data*. Returns True on success, False on failure."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a key exists in storage."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a key. Returns True if deleted, False if it didn't exist."""


class StorageError(Exception):
    """Base exception for storage errors."""


class StoragePermissionError(StorageError):
    """Raised when a storage operation is not permitted (e.g. an unsafe key)."""
