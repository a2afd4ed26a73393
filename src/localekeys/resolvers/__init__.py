"""Version-aware key resolvers.

Submodules:
    material    - MaterialKeyResolver (blocks, items, potions)
    entity      - EntityKeyResolver (entity types and variants)
    enchantment - EnchantmentKeyResolver (enchantments and levels)

Python 3.13+.
"""

from .enchantment import EnchantmentKeyResolver, level_key
from .entity import EntityKeyResolver
from .material import MaterialKeyResolver, potion_effect_name

__all__ = [
    "EnchantmentKeyResolver",
    "EntityKeyResolver",
    "MaterialKeyResolver",
    "level_key",
    "potion_effect_name",
]
