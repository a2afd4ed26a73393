"""Tests for the legacy lookup tables.

Tests:
- Bundled JSON data loads into seven read-only tables
- load_legacy_tables() caching and clear_table_cache()
- lookup_composite exact-then-bare precedence
- from_mappings() snapshots its inputs
"""

from __future__ import annotations

from dataclasses import fields

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localekeys.tables import (
    LegacyKeyTables,
    clear_table_cache,
    load_legacy_tables,
    lookup_composite,
)

TABLE_NAMES = [
    "blocks",
    "items",
    "potions",
    "lingering_potions",
    "splash_potions",
    "legacy_potions",
    "entities",
]


class TestBundledTables:
    """LegacyKeyTables.from_package_data() over the shipped JSON."""

    def test_all_tables_present(self) -> None:
        assert [f.name for f in fields(LegacyKeyTables)] == TABLE_NAMES

    @pytest.mark.parametrize("table", TABLE_NAMES)
    def test_table_is_populated(self, tables: LegacyKeyTables, table: str) -> None:
        assert len(getattr(tables, table)) > 0

    @pytest.mark.parametrize("table", TABLE_NAMES)
    def test_table_is_read_only(self, tables: LegacyKeyTables, table: str) -> None:
        with pytest.raises(TypeError):
            getattr(tables, table)["NEW"] = "value"  # type: ignore[index]

    def test_sizes_reports_every_table(self, tables: LegacyKeyTables) -> None:
        sizes = tables.sizes()
        assert set(sizes) == set(TABLE_NAMES)
        assert all(count > 0 for count in sizes.values())

    def test_known_block_entries(self, tables: LegacyKeyTables) -> None:
        assert tables.blocks["STONE.0"] == "tile.stone.stone.name"
        assert tables.blocks["STONE.1"] == "tile.stone.granite.name"
        assert tables.blocks["WOOL.14"] == "tile.cloth.red.name"

    def test_known_entity_entries(self, tables: LegacyKeyTables) -> None:
        assert tables.entities["VILLAGER.PRIEST"] == "entity.Villager.cleric"
        assert tables.entities["RABBIT.THE_KILLER_BUNNY"] == "entity.KillerBunny.name"

    def test_potion_tables_share_keys(self, tables: LegacyKeyTables) -> None:
        """Each potion form covers the same potion types."""
        assert set(tables.potions) == set(tables.splash_potions)
        assert set(tables.potions) == set(tables.lingering_potions)

    def test_potion_form_prefixes(self, tables: LegacyKeyTables) -> None:
        assert all(v.startswith("potion.") for v in tables.potions.values())
        assert all(v.startswith("splash_potion.") for v in tables.splash_potions.values())
        assert all(v.startswith("lingering_potion.") for v in tables.lingering_potions.values())


class TestTableCache:
    """Process-wide caching of the bundled tables."""

    def test_cached_instance_is_shared(self) -> None:
        assert load_legacy_tables() is load_legacy_tables()

    def test_clear_cache_reloads(self) -> None:
        first = load_legacy_tables()
        clear_table_cache()
        second = load_legacy_tables()
        assert first is not second
        assert first == second


class TestLookupComposite:
    """lookup_composite() precedence rules."""

    def test_exact_match_wins(self) -> None:
        table = {"STONE": "bare", "STONE.1": "exact"}
        assert lookup_composite(table, "STONE", 1) == "exact"

    def test_falls_back_to_bare_name(self) -> None:
        assert lookup_composite({"STONE": "bare"}, "STONE", 9) == "bare"

    def test_no_subkey_uses_bare_name(self) -> None:
        table = {"STONE": "bare", "STONE.0": "exact"}
        assert lookup_composite(table, "STONE") == "bare"

    def test_missing_returns_none(self) -> None:
        assert lookup_composite({}, "STONE", 0) is None

    def test_string_subkey(self) -> None:
        table = {"VILLAGER.FARMER": "farmer", "VILLAGER": "villager"}
        assert lookup_composite(table, "VILLAGER", "FARMER") == "farmer"

    def test_every_bundled_composite_entry_round_trips(self, tables: LegacyKeyTables) -> None:
        """Every 'NAME.SUB' entry is reachable through lookup_composite."""
        for table_name in TABLE_NAMES:
            table = getattr(tables, table_name)
            for identifier, key in table.items():
                name, _, subkey = identifier.partition(".")
                assert lookup_composite(table, name, subkey or None) == key

    @given(st.integers(min_value=0, max_value=10_000))
    def test_unknown_durability_never_beats_bare(self, durability: int) -> None:
        table = {"WOOL": "tile.cloth.white.name", "WOOL.14": "tile.cloth.red.name"}
        expected = "tile.cloth.red.name" if durability == 14 else "tile.cloth.white.name"
        assert lookup_composite(table, "WOOL", durability) == expected


class TestFromMappings:
    """In-memory table construction."""

    def test_missing_tables_are_empty(self) -> None:
        tables = LegacyKeyTables.from_mappings(items={"STICK": "item.stick.name"})
        assert tables.items == {"STICK": "item.stick.name"}
        assert len(tables.blocks) == 0

    def test_input_is_snapshotted(self) -> None:
        source = {"STICK": "item.stick.name"}
        tables = LegacyKeyTables.from_mappings(items=source)
        source["BONE"] = "item.bone.name"
        assert "BONE" not in tables.items
