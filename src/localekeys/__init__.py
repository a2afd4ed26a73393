"""localekeys - version-aware Minecraft client locale keys and chat payloads.

Resolves materials, entities, and enchantments to the localization keys the
game client translates, and assembles structured chat payloads so that each
player reads object names in their own language. Handles both the legacy
(pre-1.13, numeric data value) and the modern (namespaced) key schemes.

Public API:
    LocaleEngine - Version detection, resolution, composition, delivery
    EngineConfig - Immutable engine configuration
    MaterialRef, PotionMeta, Enchantment, EnchantmentStorageMeta - Inputs
    HostRegistry, MessageDispatcher - Host boundary protocols
    CommandDispatcher - Console-command MessageDispatcher
    build_payload - Template + keys to JSON payload

Exceptions:
    LocaleKeyError - Base exception class
    InvalidArgumentError - Required argument missing
    KeyNotFoundError - No legacy table entry
    QueryFailedError - Host registry lookup failed
    DispatchError - Payload delivery failed
    TranslationLoadError - Reference language file unreadable

Submodules:
    localekeys.core - Value types, host protocols, version detection
    localekeys.resolvers - Material, entity, and enchantment resolvers
    localekeys.text - Color detection and payload assembly
    localekeys.diagnostics - Diagnostic codes, templates, and formatting
    localekeys.localization - Reference translations and locale utilities
"""

# Essential Public API - Minimal exports for clean namespace
from .config import EngineConfig
from .core import (
    CommandDispatcher,
    Enchantment,
    EnchantmentStorageMeta,
    HostRegistry,
    MaterialRef,
    MessageDispatcher,
    PotionMeta,
    VersionProfile,
)
from .diagnostics import (
    DispatchError,
    InvalidArgumentError,
    KeyNotFoundError,
    LocaleKeyError,
    QueryFailedError,
    TranslationLoadError,
)
from .engine import LocaleEngine
from .enums import Era, Placeholder
from .text import build_payload

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("localekeys")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CommandDispatcher",
    "DispatchError",
    "Enchantment",
    "EnchantmentStorageMeta",
    "EngineConfig",
    "Era",
    "HostRegistry",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "LocaleEngine",
    "LocaleKeyError",
    "MaterialRef",
    "MessageDispatcher",
    "Placeholder",
    "PotionMeta",
    "QueryFailedError",
    "TranslationLoadError",
    "VersionProfile",
    "__version__",
    "build_payload",
]
