"""Shared constants for localekeys.

Centralized configuration constants used across the version, resolver, and
text packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Version detection: Legacy whitelist and capability probe materials
- Resolution: Rename tables and variant bounds
- Text: Placeholder tokens and chat color directives
- Fallback strings: Sentinels returned when a lookup misses

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Version detection
    "LEGACY_VERSIONS",
    "PROBE_BASE_POTION_DATA",
    "PROBE_REPACKAGED_NAMESPACE",
    "PROBE_SHORT_ACCESSOR",
    # Resolution
    "MODERN_ENTITY_RENAMES",
    "POTION_EFFECT_RENAMES",
    "POTION_TYPE_PREFIXES",
    "LEGACY_ENCHANTMENT_RENAMES",
    "TROPICAL_FISH_PREDEFINED_COUNT",
    "KILLER_BUNNY_KEY",
    # Text
    "SECTION_SIGN",
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    # Fallback strings
    "FALLBACK_MISSING_TRANSLATION",
    "DEFAULT_DISPATCH_COMMAND",
    "DEFAULT_REFERENCE_LOCALE",
    "DEFAULT_LOG_TRUNCATE",
]

# ============================================================================
# VERSION DETECTION
# ============================================================================

# Every release that predates the 1.13 "flattening" of numeric IDs.
# Version strings are compared lexically against this set after cutting the
# host's "-R0.1-SNAPSHOT" style suffix.
LEGACY_VERSIONS: frozenset[str] = frozenset({
    "1.12.2", "1.12.1", "1.12",
    "1.11.2", "1.11.1", "1.11",
    "1.10.2", "1.10.1", "1.10",
    "1.9.4", "1.9.3", "1.9.2", "1.9.1", "1.9",
    "1.8.9", "1.8.8", "1.8.7", "1.8.6", "1.8.5", "1.8.4", "1.8.3", "1.8.2", "1.8.1", "1.8",
    "1.7.10", "1.7.9", "1.7.2",
})

# Capability probes: each material first appears in the release that
# introduced the matching capability.
PROBE_BASE_POTION_DATA: str = "LINGERING_POTION"  # 1.9
PROBE_REPACKAGED_NAMESPACE: str = "AMETHYST_CLUSTER"  # 1.17
PROBE_SHORT_ACCESSOR: str = "MUSIC_DISC_OTHERSIDE"  # 1.18

# ============================================================================
# RESOLUTION
# ============================================================================

# Modern-era entity type constants whose client key differs from the lowercased name.
MODERN_ENTITY_RENAMES: MappingProxyType[str, str] = MappingProxyType({
    "MUSHROOM_COW": "mooshroom",
    "SNOWMAN": "snow_golem",
    "PIG_ZOMBIE": "zombie_pigman",
})

# Host potion type names that predate the client's effect key names.
POTION_EFFECT_RENAMES: MappingProxyType[str, str] = MappingProxyType({
    "regen": "regeneration",
    "speed": "swiftness",
    "jump": "leaping",
    "instant_heal": "healing",
    "instant_damage": "harming",
})

# Extended/amplified potion types share the base effect key.
POTION_TYPE_PREFIXES: tuple[str, ...] = ("long_", "strong_")

# Applied in order to the dotted legacy enchantment name.
LEGACY_ENCHANTMENT_RENAMES: tuple[tuple[str, str], ...] = (
    ("environmental", "all"),
    ("protection", "protect"),
)

# Predefined tropical fish variants are indexed [0, 22).
TROPICAL_FISH_PREDEFINED_COUNT: int = 22

KILLER_BUNNY_KEY: str = "entity.minecraft.killer_bunny"

# ============================================================================
# TEXT
# ============================================================================

SECTION_SIGN: str = "§"
PLACEHOLDER_OPEN: str = "<"
PLACEHOLDER_CLOSE: str = ">"

# ============================================================================
# FALLBACK STRINGS AND DEFAULTS
# ============================================================================

FALLBACK_MISSING_TRANSLATION: str = "[missing]"
DEFAULT_DISPATCH_COMMAND: str = "tellraw"
DEFAULT_REFERENCE_LOCALE: str = "en_us"

# Debug logs truncate payloads to keep log lines manageable.
DEFAULT_LOG_TRUNCATE: int = 50
