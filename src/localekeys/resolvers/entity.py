"""Entity key resolution.

Resolves an entity type constant plus an optional variant discriminator
('extra') to the client locale key.

Variant-bearing types:
    VILLAGER      - profession name
    OCELOT        - cat type (legacy era only)
    RABBIT        - only THE_KILLER_BUNNY has its own key
    TROPICAL_FISH - pattern name or predefined index in [0, 22) (modern era)

An unrecognized extra falls back to the bare type, except for tropical fish
in the modern era, where it yields an empty key.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localekeys.constants import (
    KILLER_BUNNY_KEY,
    MODERN_ENTITY_RENAMES,
    TROPICAL_FISH_PREDEFINED_COUNT,
)
from localekeys.core.types import CanonicalKey, composite_id
from localekeys.diagnostics import ErrorTemplate, InvalidArgumentError, KeyNotFoundError

if TYPE_CHECKING:
    from localekeys.core.version import VersionProfile
    from localekeys.tables import LegacyKeyTables

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "EntityKeyResolver",
    # Variant vocabularies
    "LEGACY_PROFESSIONS",
    "MODERN_PROFESSIONS",
    "OCELOT_TYPES",
    "RABBIT_TYPES",
    "TROPICAL_FISH_PATTERNS",
]

logger = logging.getLogger(__name__)

LEGACY_PROFESSIONS: frozenset[str] = frozenset({
    "FARMER", "LIBRARIAN", "PRIEST", "BLACKSMITH", "BUTCHER", "NITWIT",
})

MODERN_PROFESSIONS: frozenset[str] = frozenset({
    "NONE", "ARMORER", "BUTCHER", "CARTOGRAPHER", "CLERIC", "FARMER", "FISHERMAN",
    "FLETCHER", "LEATHERWORKER", "LIBRARIAN", "MASON", "NITWIT", "SHEPHERD",
    "TOOLSMITH", "WEAPONSMITH",
})

OCELOT_TYPES: frozenset[str] = frozenset({
    "WILD_OCELOT", "BLACK_CAT", "RED_CAT", "SIAMESE_CAT",
})

RABBIT_TYPES: frozenset[str] = frozenset({
    "BROWN", "WHITE", "BLACK", "BLACK_AND_WHITE", "GOLD", "SALT_AND_PEPPER",
    "THE_KILLER_BUNNY",
})

TROPICAL_FISH_PATTERNS: frozenset[str] = frozenset({
    "KOB", "SUNSTREAK", "SNOOPER", "DASHER", "BRINELY", "SPOTTY",
    "FLOPPER", "STRIPEY", "GLITTER", "BLOCKFISH", "BETTY", "CLAYFISH",
})

_KILLER_BUNNY = "THE_KILLER_BUNNY"


class EntityKeyResolver:
    """Resolve entity types to canonical keys for one VersionProfile.

    Example:
        >>> resolver = EntityKeyResolver(modern_profile, tables)
        >>> resolver.resolve("PIG_ZOMBIE")
        'entity.minecraft.zombie_pigman'
        >>> resolver.resolve("TROPICAL_FISH", "5")
        'entity.minecraft.tropical_fish.predefined.5'
    """

    __slots__ = ("_profile", "_tables")

    def __init__(self, profile: VersionProfile, tables: LegacyKeyTables) -> None:
        self._profile = profile
        self._tables = tables

    def resolve(self, entity_type: str | None, extra: str | None = None) -> CanonicalKey:
        """Resolve an entity type to its client locale key.

        Args:
            entity_type: Upper-case entity type constant (e.g. 'VILLAGER')
            extra: Optional variant discriminator

        Returns:
            Canonical key. Empty string for a modern tropical fish whose extra
            is neither a pattern nor a predefined index.

        Raises:
            InvalidArgumentError: If entity_type is None or empty
            KeyNotFoundError: If the legacy entity table has no entry
        """
        if not entity_type:
            raise InvalidArgumentError(ErrorTemplate.entity_type_required())
        if self._profile.is_legacy:
            key = self._resolve_legacy(entity_type, extra)
        else:
            key = self._resolve_modern(entity_type, extra)
        logger.debug("Resolved entity %s (%s) -> %r", entity_type, extra, key)
        return key

    def _resolve_legacy(self, entity_type: str, extra: str | None) -> CanonicalKey:
        identifier = entity_type
        if extra is not None and _is_legacy_variant(entity_type, extra):
            identifier = composite_id(entity_type, extra)

        key = self._tables.entities.get(identifier)
        if key is None:
            raise KeyNotFoundError(ErrorTemplate.entity_not_found(identifier))
        return key

    def _resolve_modern(self, entity_type: str, extra: str | None) -> CanonicalKey:
        if entity_type in MODERN_ENTITY_RENAMES:
            return f"entity.minecraft.{MODERN_ENTITY_RENAMES[entity_type]}"

        if extra is not None:
            match entity_type:
                case "VILLAGER" if extra in MODERN_PROFESSIONS:
                    return f"entity.minecraft.villager.{extra.lower()}"
                case "RABBIT" if extra == _KILLER_BUNNY:
                    return KILLER_BUNNY_KEY
                case "TROPICAL_FISH":
                    return _tropical_fish_key(extra)

        return f"entity.minecraft.{entity_type.lower()}"


def _is_legacy_variant(entity_type: str, extra: str) -> bool:
    match entity_type:
        case "VILLAGER":
            return extra in LEGACY_PROFESSIONS
        case "OCELOT":
            return extra in OCELOT_TYPES
        case "RABBIT":
            return extra == _KILLER_BUNNY
        case _:
            return False


def _tropical_fish_key(extra: str) -> CanonicalKey:
    if extra in TROPICAL_FISH_PATTERNS:
        return f"entity.minecraft.tropical_fish.type.{extra.lower()}"
    if not (extra.isascii() and extra.isdigit()):
        return ""
    index = int(extra)
    if index < TROPICAL_FISH_PREDEFINED_COUNT:
        return f"entity.minecraft.tropical_fish.predefined.{index}"
    return ""
