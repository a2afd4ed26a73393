"""Reference translations and locale utilities.

Submodules:
    types     - PEP 695 type aliases (LocaleCode, TranslationKey, LangSource)
    loading   - LangResourceLoader protocol, PathLangLoader, ReferenceTranslations
    locales   - Game <-> Babel locale conversion and display names
    discovery - Language file enumeration in directories and archives

Python 3.13+. External dependency: Babel (locales submodule only).
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localekeys.localization.discovery import (
    DEFAULT_LANG_FOLDER,
    available_locales,
    find_lang_resources,
)
from localekeys.localization.loading import (
    LangResourceLoader,
    PathLangLoader,
    ReferenceTranslations,
    parse_lang_source,
)
from localekeys.localization.locales import (
    describe_locale,
    to_babel_locale,
    to_game_locale,
    to_posix_locale,
)
from localekeys.localization.types import LangSource, LocaleCode, TranslationKey

__all__ = [
    # Translation table
    "ReferenceTranslations",
    # Loader protocol and implementation
    "LangResourceLoader",
    "PathLangLoader",
    "parse_lang_source",
    # Locale codes
    "describe_locale",
    "to_babel_locale",
    "to_game_locale",
    "to_posix_locale",
    # Discovery
    "DEFAULT_LANG_FOLDER",
    "available_locales",
    "find_lang_resources",
    # Type aliases
    "LangSource",
    "LocaleCode",
    "TranslationKey",
]
