"""Enchantment and level key resolution.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from localekeys.constants import LEGACY_ENCHANTMENT_RENAMES
from localekeys.core.types import CanonicalKey, Enchantment

if TYPE_CHECKING:
    from localekeys.core.version import VersionProfile

__all__ = ["EnchantmentKeyResolver", "level_key"]

logger = logging.getLogger(__name__)


def level_key(level: int) -> CanonicalKey:
    """Key for an enchantment level numeral, e.g. 'enchantment.level.3'."""
    return f"enchantment.level.{level}"


class EnchantmentKeyResolver:
    """Resolve enchantments and their levels to canonical keys.

    Empty or None input is not an error; it yields empty mappings.
    Returned mappings preserve the iteration order of the input.
    """

    __slots__ = ("_profile",)

    def __init__(self, profile: VersionProfile) -> None:
        self._profile = profile

    def resolve(self, enchantment: Enchantment) -> CanonicalKey:
        """Resolve a single enchantment.

        Legacy: 'enchantment.' + dotted lowercase legacy name with the
        environmental->all and protection->protect rewrites
        (PROTECTION_ENVIRONMENTAL -> 'enchantment.protect.all').
        Modern: 'enchantment.minecraft.' + namespaced key suffix.
        """
        if self._profile.is_legacy:
            name = enchantment.name.lower().replace("_", ".")
            for old, new in LEGACY_ENCHANTMENT_RENAMES:
                name = name.replace(old, new)
            return f"enchantment.{name}"
        return f"enchantment.minecraft.{enchantment.key_suffix}"

    def resolve_all(
        self, enchantments: Mapping[Enchantment, int] | None
    ) -> tuple[dict[Enchantment, CanonicalKey], dict[int, CanonicalKey]]:
        """Resolve every enchantment and every distinct level.

        Args:
            enchantments: Ordered enchantment -> level mapping

        Returns:
            Tuple of (enchantment -> key, level -> key)
        """
        return self.resolve_enchantments(enchantments), self.resolve_levels(enchantments)

    def resolve_enchantments(
        self, enchantments: Mapping[Enchantment, int] | None
    ) -> dict[Enchantment, CanonicalKey]:
        """Resolve each enchantment to its key."""
        if not enchantments:
            return {}
        keys = {enchantment: self.resolve(enchantment) for enchantment in enchantments}
        logger.debug("Resolved %d enchantment key(s)", len(keys))
        return keys

    def resolve_levels(
        self, enchantments: Mapping[Enchantment, int] | None
    ) -> dict[int, CanonicalKey]:
        """Resolve each distinct level value to its key (era independent)."""
        if not enchantments:
            return {}
        return {level: level_key(level) for level in enchantments.values()}
