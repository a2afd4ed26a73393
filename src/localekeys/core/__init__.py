"""Core value types, host boundary protocols, and version detection.

Submodules:
    types   - MaterialRef, PotionMeta, Enchantment, EnchantmentStorageMeta
    host    - HostRegistry and MessageDispatcher protocols, CommandDispatcher
    version - VersionProfile and detect()

Python 3.13+.
"""

from .host import CommandDispatcher, HostRegistry, MessageDispatcher
from .types import (
    CanonicalKey,
    CompositeId,
    Enchantment,
    EnchantmentStorageMeta,
    ItemMeta,
    MaterialRef,
    PotionMeta,
    composite_id,
)
from .version import VersionProfile, detect

__all__ = [
    "CanonicalKey",
    "CommandDispatcher",
    "CompositeId",
    "Enchantment",
    "EnchantmentStorageMeta",
    "HostRegistry",
    "ItemMeta",
    "MaterialRef",
    "MessageDispatcher",
    "PotionMeta",
    "VersionProfile",
    "composite_id",
    "detect",
]
