"""Legacy-era lookup tables.

Seven read-only mappings from composite identifier ('NAME' or 'NAME.SUBKEY')
to the pre-flattening client key. The data ships as generated JSON under
``localekeys/data/legacy/`` so that new legacy entries never touch code.

Thread Safety:
    LegacyKeyTables wraps every mapping in MappingProxyType. Load once via
    load_legacy_tables() (cached process-wide) and share freely.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import TypeAlias
from importlib import resources
from types import MappingProxyType

from localekeys.core.types import CanonicalKey, CompositeId, composite_id

__all__ = [
    "LegacyKeyTables",
    "clear_table_cache",
    "load_legacy_tables",
    "lookup_composite",
]

logger = logging.getLogger(__name__)

_DATA_PACKAGE = "localekeys"
_DATA_DIR = ("data", "legacy")

KeyTable: TypeAlias = Mapping[CompositeId, CanonicalKey]


def _frozen(mapping: Mapping[str, str] | None = None) -> KeyTable:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True, slots=True)
class LegacyKeyTables:
    """Immutable bundle of legacy lookup tables.

    Attributes:
        blocks: Block materials ('STONE.1' -> 'tile.stone.granite.name').
        items: Item materials ('COAL.1' -> 'item.charcoal.name').
        potions: Drinkable potions by potion type ('REGEN' -> ...).
        lingering_potions: Lingering potions by potion type.
        splash_potions: Splash potions by potion type.
        legacy_potions: Potions before first-class potion data, by
            durability ('POTION.8193' -> ...).
        entities: Entity types, with variant subkeys ('VILLAGER.FARMER').
    """

    blocks: KeyTable = field(default_factory=_frozen)
    items: KeyTable = field(default_factory=_frozen)
    potions: KeyTable = field(default_factory=_frozen)
    lingering_potions: KeyTable = field(default_factory=_frozen)
    splash_potions: KeyTable = field(default_factory=_frozen)
    legacy_potions: KeyTable = field(default_factory=_frozen)
    entities: KeyTable = field(default_factory=_frozen)

    def __post_init__(self) -> None:
        # Tables are read-only snapshots of the input mappings.
        for table in fields(self):
            object.__setattr__(self, table.name, _frozen(getattr(self, table.name)))

    @classmethod
    def from_mappings(cls, **tables: Mapping[str, str]) -> LegacyKeyTables:
        """Build tables from in-memory mappings (missing tables are empty)."""
        return cls(**tables)

    @classmethod
    def from_package_data(cls) -> LegacyKeyTables:
        """Read the bundled JSON tables.

        Raises:
            FileNotFoundError: If a bundled data file is missing.
            ValueError: If a data file is not a flat string -> string object.
        """
        root = resources.files(_DATA_PACKAGE).joinpath(*_DATA_DIR)
        loaded: dict[str, KeyTable] = {}
        for table in fields(cls):
            resource = root.joinpath(f"{table.name}.json")
            data = json.loads(resource.read_text(encoding="utf-8"))
            if not isinstance(data, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in data.items()
            ):
                msg = f"Legacy table '{table.name}' must map strings to strings"
                raise ValueError(msg)
            loaded[table.name] = data
            logger.debug("Loaded legacy table %s: %d entries", table.name, len(data))
        return cls(**loaded)

    def sizes(self) -> dict[str, int]:
        """Entry count per table, for diagnostics."""
        return {table.name: len(getattr(self, table.name)) for table in fields(self)}


def lookup_composite(
    table: KeyTable, name: str, subkey: object | None = None
) -> CanonicalKey | None:
    """Look up 'NAME.SUBKEY', falling back to bare 'NAME'.

    Exact match takes precedence over the bare-name fallback.

    Args:
        table: Legacy table to consult
        name: Upper-case constant name
        subkey: Durability, variant name, or None to skip the exact lookup

    Returns:
        Canonical key, or None if neither form is present.

    Example:
        >>> lookup_composite({"STONE": "a", "STONE.1": "b"}, "STONE", 1)
        'b'
        >>> lookup_composite({"STONE": "a"}, "STONE", 7)
        'a'
    """
    if subkey is not None:
        exact = table.get(composite_id(name, subkey))
        if exact is not None:
            return exact
    return table.get(name)


@lru_cache(maxsize=1)
def load_legacy_tables() -> LegacyKeyTables:
    """Load the bundled legacy tables once per process.

    Thread-safe via lru_cache internal locking.
    """
    tables = LegacyKeyTables.from_package_data()
    logger.info("Legacy key tables loaded: %s", tables.sizes())
    return tables


def clear_table_cache() -> None:
    """Drop the cached tables (for tests that patch package data)."""
    load_legacy_tables.cache_clear()
