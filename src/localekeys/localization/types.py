"""Type aliases for the localization domain.

Python 3.13+.
"""

from typing import TypeAlias

__all__ = [
    "LangSource",
    "LocaleCode",
    "TranslationKey",
]

LocaleCode: TypeAlias = str
"""Game-style locale code (e.g., 'en_us', 'pt_br', 'zh_cn')."""

TranslationKey: TypeAlias = str
"""Locale-file key (e.g., 'item.minecraft.diamond_sword')."""

LangSource: TypeAlias = str
"""Raw language file text (JSON object or legacy key=value lines)."""
