"""
File I/O utilities: safe write with optional backup of the previous file.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os
import shutil
from datetime import datetime
from pathlib import Path

from loguru import logger

from ..exceptions import FileIOError


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    try:
        os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
        with open(filepath, mode, encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileIOError(f"Cannot write {filepath}: {e}") from e


def backup_file(file_path: str) -> str | None:
    """Create a timestamped backup of a file. Returns backup path or None."""
    src = Path(file_path)
    if not src.exists():
        return None

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_name = f"{src.name}.backup.{timestamp}"
    backup_path = src.parent / backup_name

    try:
        shutil.copy2(str(src), str(backup_path))
    except OSError as e:
        logger.warning(f"Could not back up {src}: {e}")
        return None
    return str(backup_path)


def safe_write_with_backup(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> str | None:
    """Write to file with automatic backup of existing content."""
    backup_path = backup_file(filepath)
    safe_write(filepath, content, mode, encoding)
    return backup_path
