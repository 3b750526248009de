"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

MEMORIES_DIR = Path.home() / ".memories"
CONFIG_PATH = MEMORIES_DIR / "config.yaml"


def load_config(config_file: str | None = None, data_dir: str | None = None):
    """Load config from *config_file*, falling back to ~/.memories/config.yaml."""
    from memories.core.config import Config

    return Config(config_file=config_file or str(CONFIG_PATH), data_dir=data_dir)


def open_store(config):
    """Build a MemoryStore on local storage under the configured data dir."""
    from memories.core.storage import LocalStorage
    from memories.journal import ExportConfig, MemoryStore, StoreConfig

    store_config = StoreConfig.from_config(config)
    storage = LocalStorage(base_path=config.get_data_dir(), compress=store_config.compress)
    return MemoryStore(storage, config=store_config, export_config=ExportConfig.from_config(config))


def store_from_context(ctx: click.Context):
    """Open the store for the config attached to the CLI context."""
    from memories.core.exceptions import ConfigurationError
    from memories.core.storage import StorageError

    try:
        return open_store(ctx.obj["config"])
    except (ConfigurationError, StorageError, OSError) as e:
        raise click.ClickException(f"Cannot open memories: {e}") from e
