"""Game locale code handling via Babel CLDR data.

Game clients report locales in lower-case underscore form ('en_us',
'pt_br'). Babel expects POSIX form ('en_US'). This module converts between
the two and provides human-readable locale names for listings.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from localekeys.localization.types import LocaleCode

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "describe_locale",
    "to_babel_locale",
    "to_game_locale",
    "to_posix_locale",
]

logger = logging.getLogger(__name__)

_MAX_LOCALE_CACHE_SIZE = 256


def to_posix_locale(locale_code: LocaleCode) -> str:
    """Convert a game locale code to POSIX form for Babel.

    Example:
        >>> to_posix_locale("en_us")
        'en_US'
        >>> to_posix_locale("pt-BR")
        'pt_BR'
        >>> to_posix_locale("lol_us")
        'lol_US'
    """
    language, _, territory = locale_code.replace("-", "_").partition("_")
    if not territory:
        return language.lower()
    return f"{language.lower()}_{territory.upper()}"


def to_game_locale(locale_code: str) -> LocaleCode:
    """Convert a BCP-47 or POSIX locale code to the game's form.

    Example:
        >>> to_game_locale("en-US")
        'en_us'
    """
    return locale_code.replace("-", "_").lower()


@functools.lru_cache(maxsize=_MAX_LOCALE_CACHE_SIZE)
def to_babel_locale(locale_code: LocaleCode) -> Locale:
    """Parse a game locale code into a Babel Locale, with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If the locale has no CLDR data
        ValueError: If the locale code is malformed

    Example:
        >>> locale = to_babel_locale("de_de")
        >>> locale.language, locale.territory
        ('de', 'DE')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix_locale(locale_code))


def describe_locale(
    locale_code: LocaleCode, display_locale: LocaleCode | None = None
) -> str:
    """Human-readable name of a game locale.

    Args:
        locale_code: Locale to describe (e.g. 'fr_ca')
        display_locale: Locale to write the name in; defaults to the locale
            itself (autonym)

    Returns:
        Display name such as 'français (Canada)'. Game-only locales without
        CLDR data (e.g. 'lol_us') are returned unchanged.
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = to_babel_locale(locale_code)
        display = to_babel_locale(display_locale) if display_locale else locale
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No CLDR data for locale '%s': %s", locale_code, e)
        return locale_code
    name = locale.get_display_name(display)
    return name if name else locale_code
