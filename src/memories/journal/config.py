"""Configuration dataclasses for the journal store and its export.

These are pure data containers with sensible defaults.
Override them from YAML config, env vars, or constructor args.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from memories.core.config import DEFAULT_MISSING_DETAILS, DEFAULT_RATING_GLYPH, DEFAULT_STORE_KEY

if TYPE_CHECKING:
    from memories.core.config import Config


@dataclass
class StoreConfig:
    """Settings for entry persistence.

    Attributes:
        key: Storage key the whole collection is written under.
        compress: Gzip the stored blob (local storage only).
    """

    key: str = DEFAULT_STORE_KEY
    compress: bool = False

    @classmethod
    def from_config(cls, config: Config) -> StoreConfig:
        return cls(
            key=str(config.get("store.key", DEFAULT_STORE_KEY)),
            compress=config.get_bool("store.compress", False),
        )


@dataclass
class ExportConfig:
    """Settings for the plain-text export.

    Attributes:
        rating_glyph: Symbol repeated once per rating point.
        missing_details: Text shown when an entry has no details.
        separator: Line closing each entry block.
    """

    rating_glyph: str = DEFAULT_RATING_GLYPH
    missing_details: str = DEFAULT_MISSING_DETAILS
    separator: str = "-" * 26

    @classmethod
    def from_config(cls, config: Config) -> ExportConfig:
        return cls(
            rating_glyph=str(config.get("export.rating_glyph", DEFAULT_RATING_GLYPH)),
            missing_details=str(config.get("export.missing_details", DEFAULT_MISSING_DETAILS)),
        )
