"""Enumerations for localekeys type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

from .constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN


class Era(StrEnum):
    """Identifier scheme generation of the host runtime.

    StrEnum provides automatic string conversion: str(Era.LEGACY) == "legacy"
    """

    LEGACY = "legacy"
    """Numeric ID + metadata items (1.12.2 and older)."""

    MODERN = "modern"
    """Flat namespaced identifiers (1.13 and newer)."""


class Placeholder(StrEnum):
    """Placeholder names recognized inside message templates.

    The token form wraps the value in angle brackets: ``<item>``.
    """

    ITEM = "item"
    ENCHANTMENT = "enchantment"
    LEVEL = "level"
    MOB = "mob"

    @property
    def token(self) -> str:
        """Template token for this placeholder, e.g. ``<item>``."""
        return f"{PLACEHOLDER_OPEN}{self.value}{PLACEHOLDER_CLOSE}"


class PotionForm(StrEnum):
    """Potion container shapes; values are the host material names."""

    POTION = "POTION"
    SPLASH_POTION = "SPLASH_POTION"
    LINGERING_POTION = "LINGERING_POTION"


__all__ = [
    "Era",
    "Placeholder",
    "PotionForm",
]
