"""Tests for EntityKeyResolver.

Tests:
- Entity type required in both eras
- Legacy composite lookups for villager, ocelot, and rabbit variants
- Legacy fallback to the bare type for unrecognized extras
- Modern renames, villager professions, killer bunny, tropical fish
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localekeys.constants import KILLER_BUNNY_KEY, TROPICAL_FISH_PREDEFINED_COUNT
from localekeys.core.version import VersionProfile
from localekeys.diagnostics import (
    DiagnosticCode,
    InvalidArgumentError,
    KeyNotFoundError,
)
from localekeys.resolvers import EntityKeyResolver
from localekeys.resolvers.entity import MODERN_PROFESSIONS, TROPICAL_FISH_PATTERNS
from localekeys.tables import LegacyKeyTables


@pytest.fixture
def legacy(legacy_profile: VersionProfile, tables: LegacyKeyTables) -> EntityKeyResolver:
    return EntityKeyResolver(legacy_profile, tables)


@pytest.fixture
def modern(modern_profile: VersionProfile, tables: LegacyKeyTables) -> EntityKeyResolver:
    return EntityKeyResolver(modern_profile, tables)


class TestEntityTypeRequired:
    """Missing entity types are rejected."""

    @pytest.mark.parametrize("entity_type", [None, ""])
    def test_legacy(self, legacy: EntityKeyResolver, entity_type: str | None) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            legacy.resolve(entity_type)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ENTITY_TYPE_REQUIRED

    @pytest.mark.parametrize("entity_type", [None, ""])
    def test_modern(self, modern: EntityKeyResolver, entity_type: str | None) -> None:
        with pytest.raises(InvalidArgumentError):
            modern.resolve(entity_type, "FARMER")


class TestLegacyEntities:
    """Legacy entity table lookups."""

    def test_plain_entity(self, legacy: EntityKeyResolver) -> None:
        assert legacy.resolve("ZOMBIE") == "entity.Zombie.name"

    def test_pig_zombie_keeps_legacy_key(self, legacy: EntityKeyResolver) -> None:
        assert legacy.resolve("PIG_ZOMBIE") == "entity.PigZombie.name"

    @pytest.mark.parametrize(
        ("profession", "expected"),
        [
            ("FARMER", "entity.Villager.farmer"),
            ("PRIEST", "entity.Villager.cleric"),
            ("BLACKSMITH", "entity.Villager.armor"),
        ],
    )
    def test_villager_profession(
        self, legacy: EntityKeyResolver, profession: str, expected: str
    ) -> None:
        assert legacy.resolve("VILLAGER", profession) == expected

    def test_modern_only_profession_falls_back(self, legacy: EntityKeyResolver) -> None:
        """A profession that did not exist yet resolves to the bare villager."""
        assert legacy.resolve("VILLAGER", "CARTOGRAPHER") == "entity.Villager.name"

    def test_ocelot_cat_type(self, legacy: EntityKeyResolver) -> None:
        assert legacy.resolve("OCELOT", "BLACK_CAT") == "entity.Cat.name"
        assert legacy.resolve("OCELOT", "WILD_OCELOT") == "entity.Ozelot.name"

    def test_killer_bunny(self, legacy: EntityKeyResolver) -> None:
        assert legacy.resolve("RABBIT", "THE_KILLER_BUNNY") == "entity.KillerBunny.name"

    def test_ordinary_rabbit_type_falls_back(self, legacy: EntityKeyResolver) -> None:
        assert legacy.resolve("RABBIT", "BROWN") == "entity.Rabbit.name"

    def test_extra_ignored_for_other_types(self, legacy: EntityKeyResolver) -> None:
        assert legacy.resolve("ZOMBIE", "FARMER") == "entity.Zombie.name"

    def test_missing_entity(self, legacy: EntityKeyResolver) -> None:
        with pytest.raises(KeyNotFoundError) as exc_info:
            legacy.resolve("ARROW")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ENTITY_NOT_FOUND
        assert exc_info.value.diagnostic.identifier == "ARROW"

    def test_missing_variant_entry_reports_composite(
        self, legacy_profile: VersionProfile
    ) -> None:
        tables = LegacyKeyTables.from_mappings(entities={"VILLAGER": "entity.Villager.name"})
        resolver = EntityKeyResolver(legacy_profile, tables)
        with pytest.raises(KeyNotFoundError, match=r"VILLAGER\.FARMER"):
            resolver.resolve("VILLAGER", "FARMER")

    def test_every_bundled_entry_resolves_to_its_value(
        self, legacy: EntityKeyResolver, tables: LegacyKeyTables
    ) -> None:
        for identifier, key in tables.entities.items():
            name, _, variant = identifier.partition(".")
            assert legacy.resolve(name, variant or None) == key, identifier


class TestModernEntities:
    """Modern namespaced keys."""

    def test_pig_zombie_rename(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("PIG_ZOMBIE") == "entity.minecraft.zombie_pigman"

    @pytest.mark.parametrize(
        ("entity_type", "expected"),
        [
            ("MUSHROOM_COW", "entity.minecraft.mooshroom"),
            ("SNOWMAN", "entity.minecraft.snow_golem"),
        ],
    )
    def test_other_renames(
        self, modern: EntityKeyResolver, entity_type: str, expected: str
    ) -> None:
        assert modern.resolve(entity_type) == expected

    def test_rename_ignores_extra(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("MUSHROOM_COW", "BROWN") == "entity.minecraft.mooshroom"

    def test_default_key(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("ENDER_DRAGON") == "entity.minecraft.ender_dragon"

    @pytest.mark.parametrize("profession", sorted(MODERN_PROFESSIONS))
    def test_villager_profession(self, modern: EntityKeyResolver, profession: str) -> None:
        key = modern.resolve("VILLAGER", profession)
        assert key == f"entity.minecraft.villager.{profession.lower()}"

    def test_unknown_profession_falls_back(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("VILLAGER", "PRIEST") == "entity.minecraft.villager"

    def test_killer_bunny(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("RABBIT", "THE_KILLER_BUNNY") == KILLER_BUNNY_KEY

    def test_ordinary_rabbit(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("RABBIT", "GOLD") == "entity.minecraft.rabbit"

    def test_ocelot_variant_ignored(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("OCELOT", "BLACK_CAT") == "entity.minecraft.ocelot"

    def test_tropical_fish_without_extra(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("TROPICAL_FISH") == "entity.minecraft.tropical_fish"


class TestTropicalFish:
    """Modern tropical fish variant keys."""

    def test_predefined_index(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("TROPICAL_FISH", "5") == "entity.minecraft.tropical_fish.predefined.5"

    def test_out_of_range_index_is_empty(self, modern: EntityKeyResolver) -> None:
        assert modern.resolve("TROPICAL_FISH", "99") == ""

    @pytest.mark.parametrize("pattern", sorted(TROPICAL_FISH_PATTERNS))
    def test_pattern(self, modern: EntityKeyResolver, pattern: str) -> None:
        key = modern.resolve("TROPICAL_FISH", pattern)
        assert key == f"entity.minecraft.tropical_fish.type.{pattern.lower()}"

    @pytest.mark.parametrize(
        "extra", ["", "-1", "22", "NEMO", "2.5", "1_0", " 7 ", "+3", "\u0665", "\uff15"]
    )
    def test_unrecognized_is_empty(self, modern: EntityKeyResolver, extra: str) -> None:
        assert modern.resolve("TROPICAL_FISH", extra) == ""

    @given(st.integers(min_value=-1000, max_value=1000))
    def test_index_range(self, index: int) -> None:
        """Only indices in [0, 22) have a predefined key."""
        resolver = EntityKeyResolver(
            VersionProfile(raw_version="1.20.4"), LegacyKeyTables()
        )
        key = resolver.resolve("TROPICAL_FISH", str(index))
        if 0 <= index < TROPICAL_FISH_PREDEFINED_COUNT:
            assert key == f"entity.minecraft.tropical_fish.predefined.{index}"
        else:
            assert key == ""
