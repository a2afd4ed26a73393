"""Value objects describing host game objects.

The host runtime owns the real material, entity, and enchantment registries.
These frozen dataclasses carry just the facts the resolvers need, so callers
translate from their host API once at the boundary.

All types are immutable, hashable, and thread-safe.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from localekeys.enums import PotionForm

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CanonicalKey",
    "CompositeId",
    # Materials and metadata
    "MaterialRef",
    "PotionMeta",
    "EnchantmentStorageMeta",
    "ItemMeta",
    # Enchantments
    "Enchantment",
    # Helpers
    "composite_id",
]

CanonicalKey: TypeAlias = str
"""Client locale-file key, e.g. 'item.minecraft.diamond_sword'."""

CompositeId: TypeAlias = str
"""Legacy table lookup key: 'NAME' or 'NAME.SUBKEY'."""


def composite_id(name: str, subkey: object | None = None) -> CompositeId:
    """Build a composite identifier.

    Example:
        >>> composite_id("STONE", 1)
        'STONE.1'
        >>> composite_id("ZOMBIE")
        'ZOMBIE'
    """
    if subkey is None:
        return name
    return f"{name}.{subkey}"


@dataclass(frozen=True, slots=True)
class MaterialRef:
    """Host material constant.

    Attributes:
        name: Upper-case material constant (e.g. 'DIAMOND_SWORD', 'WHEAT').
        is_block: True if the material is placeable as a block.
        is_ageable: True if the block state has a growth-stage property.
    """

    name: str
    is_block: bool = False
    is_ageable: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            msg = "MaterialRef.name must be non-empty"
            raise ValueError(msg)

    @property
    def potion_form(self) -> PotionForm | None:
        """Potion container shape, or None for non-potion materials."""
        try:
            return PotionForm(self.name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class PotionMeta:
    """Potion-shaped item metadata.

    Attributes:
        potion_type: Host potion type constant (e.g. 'REGEN', 'LONG_SWIFTNESS').
        extended: Duration-extended variant flag.
        upgraded: Amplified variant flag.
    """

    potion_type: str
    extended: bool = False
    upgraded: bool = False


@dataclass(frozen=True, slots=True)
class Enchantment:
    """Host enchantment constant.

    Attributes:
        key: Namespaced identifier (e.g. 'minecraft:sharpness').
        name: Legacy constant name (e.g. 'DAMAGE_ALL').
    """

    key: str
    name: str

    @property
    def key_suffix(self) -> str:
        """Identifier without its namespace ('sharpness')."""
        return self.key.partition(":")[2] or self.key


@dataclass(frozen=True, slots=True)
class EnchantmentStorageMeta:
    """Enchanted-book metadata holding stored enchantments.

    Attributes:
        stored_enchants: Read-only enchantment -> level mapping.
    """

    stored_enchants: Mapping[Enchantment, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "stored_enchants", MappingProxyType(dict(self.stored_enchants))
        )

    def __hash__(self) -> int:
        return hash(tuple(self.stored_enchants.items()))


ItemMeta: TypeAlias = PotionMeta | EnchantmentStorageMeta
"""Item metadata variants the resolvers understand."""
