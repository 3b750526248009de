"""
Storage backends for memories.

Provides a small synchronous key-value interface with a local filesystem
backend (optionally gzip-compressed) and an in-process backend.
"""

from .base import StorageBackend, StorageError, StoragePermissionError
from .local import LocalStorage
from .memory import InMemoryStorage

__all__ = [
    "InMemoryStorage",
    "LocalStorage",
    "StorageBackend",
    "StorageError",
    "StoragePermissionError",
]
