"""Material key resolution.

Resolves a material, durability, and optional item metadata to the client
locale key, branching on the host era:

    LEGACY - composite lookups in the block/item/potion tables
    MODERN - ageable blocks derive 'block.minecraft.<name>' directly;
             everything else is asked of the host registry, with a
             '.effect.<potion>' suffix for potion metadata

Durability below zero means "ignore durability"; it never selects a
durability-specific branch.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localekeys.constants import POTION_EFFECT_RENAMES, POTION_TYPE_PREFIXES
from localekeys.core.types import CanonicalKey, MaterialRef, PotionMeta, composite_id
from localekeys.diagnostics import (
    ErrorTemplate,
    InvalidArgumentError,
    KeyNotFoundError,
    QueryFailedError,
)
from localekeys.enums import PotionForm
from localekeys.tables import lookup_composite

if TYPE_CHECKING:
    from localekeys.core.host import HostRegistry
    from localekeys.core.types import ItemMeta
    from localekeys.core.version import VersionProfile
    from localekeys.tables import KeyTable, LegacyKeyTables

__all__ = ["MaterialKeyResolver", "potion_effect_name"]

logger = logging.getLogger(__name__)


def potion_effect_name(potion_type: str) -> str:
    """Map a host potion type constant to the client's effect key segment.

    Lowercases the name, drops the 'long_'/'strong_' variant prefix, and
    applies the legacy-name rewrite table.

    Example:
        >>> potion_effect_name("REGEN")
        'regeneration'
        >>> potion_effect_name("LONG_SWIFTNESS")
        'swiftness'
        >>> potion_effect_name("NIGHT_VISION")
        'night_vision'
    """
    name = potion_type.lower()
    for prefix in POTION_TYPE_PREFIXES:
        if name.startswith(prefix):
            name = name.removeprefix(prefix)
            break
    return POTION_EFFECT_RENAMES.get(name, name)


class MaterialKeyResolver:
    """Resolve materials to canonical keys for one VersionProfile.

    Stateless apart from the shared, immutable profile and tables; safe for
    concurrent use.

    Example:
        >>> resolver = MaterialKeyResolver(profile, tables, host)
        >>> resolver.resolve(MaterialRef("DIAMOND_SWORD"))
        'item.minecraft.diamond_sword'
    """

    __slots__ = ("_host", "_profile", "_tables")

    def __init__(
        self,
        profile: VersionProfile,
        tables: LegacyKeyTables,
        host: HostRegistry | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            profile: Detected host version profile
            tables: Legacy lookup tables (consulted in the legacy era)
            host: Host registry (required for non-ageable materials in the
                modern era)
        """
        self._profile = profile
        self._tables = tables
        self._host = host

    def resolve(
        self,
        material: MaterialRef | None,
        durability: int = 0,
        meta: ItemMeta | None = None,
    ) -> CanonicalKey:
        """Resolve a material to its client locale key.

        Args:
            material: Material to resolve
            durability: Legacy data value; negative to ignore
            meta: Optional item metadata (potion type for potions)

        Returns:
            Canonical key

        Raises:
            InvalidArgumentError: If material is None
            KeyNotFoundError: If the legacy tables have no entry
            QueryFailedError: If the modern host lookup fails
        """
        if material is None:
            raise InvalidArgumentError(ErrorTemplate.material_required())
        if self._profile.is_legacy:
            key = self._resolve_legacy(material, durability, meta)
        else:
            key = self._resolve_modern(material, meta)
        logger.debug("Resolved material %s:%d -> %s", material.name, durability, key)
        return key

    # ------------------------------------------------------------------
    # Legacy era
    # ------------------------------------------------------------------

    def _resolve_legacy(
        self, material: MaterialRef, durability: int, meta: ItemMeta | None
    ) -> CanonicalKey:
        subkey = durability if durability >= 0 else None
        identifier = composite_id(material.name, durability)

        if material.is_block:
            key = lookup_composite(self._tables.blocks, material.name, subkey)
            if key is None:
                raise KeyNotFoundError(ErrorTemplate.block_not_found(identifier))
            return key

        is_potion = isinstance(meta, PotionMeta) or material.potion_form is not None
        if subkey is not None and is_potion:
            if not self._profile.has_base_potion_data:
                return self._resolve_pre_data_potion(material, durability)
            if isinstance(meta, PotionMeta):
                return self._resolve_potion_type(material, meta)

        key = lookup_composite(self._tables.items, material.name, subkey)
        if key is None:
            raise KeyNotFoundError(ErrorTemplate.item_not_found(identifier))
        return key

    def _resolve_pre_data_potion(self, material: MaterialRef, durability: int) -> CanonicalKey:
        # Before potion data the effect is encoded in the durability alone
        key = lookup_composite(self._tables.legacy_potions, material.name, durability)
        if key is None:
            raise KeyNotFoundError(
                ErrorTemplate.potion_not_found(
                    composite_id(material.name, durability), "legacy_potions"
                )
            )
        return key

    def _resolve_potion_type(self, material: MaterialRef, meta: PotionMeta) -> CanonicalKey:
        table_name, table = self._potion_table(material)
        key = table.get(meta.potion_type)
        if key is None:
            raise KeyNotFoundError(ErrorTemplate.potion_not_found(meta.potion_type, table_name))
        return key

    def _potion_table(self, material: MaterialRef) -> tuple[str, KeyTable]:
        match material.potion_form:
            case PotionForm.LINGERING_POTION:
                return "lingering_potions", self._tables.lingering_potions
            case PotionForm.SPLASH_POTION:
                return "splash_potions", self._tables.splash_potions
            case _:
                return "potions", self._tables.potions

    # ------------------------------------------------------------------
    # Modern era
    # ------------------------------------------------------------------

    def _resolve_modern(self, material: MaterialRef, meta: ItemMeta | None) -> CanonicalKey:
        if material.is_block and material.is_ageable:
            return f"block.minecraft.{material.name.lower()}"

        key = self._query_host(material)
        if isinstance(meta, PotionMeta):
            key = f"{key}.effect.{potion_effect_name(meta.potion_type)}"
        return key

    def _query_host(self, material: MaterialRef) -> CanonicalKey:
        if self._host is None:
            raise QueryFailedError(
                ErrorTemplate.material_query_failed(material.name, "no host registry")
            )
        try:
            key = self._host.item_translation_key(material)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.debug("Host lookup for %s raised %s", material.name, exc)
            raise QueryFailedError(
                ErrorTemplate.material_query_failed(material.name, type(exc).__name__)
            ) from exc
        if not key:
            raise QueryFailedError(ErrorTemplate.material_query_failed(material.name))
        return key
