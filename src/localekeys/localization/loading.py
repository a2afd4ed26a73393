"""Reference translation loading.

Provides the protocol for language file loaders, a filesystem implementation
with path-traversal checks, parsers for both language file shapes, and the
immutable ReferenceTranslations table used for server-side display names.

Components:
    LangResourceLoader - Protocol for loading a language file by locale
    PathLangLoader - Disk-based loader using a '{locale}' path template
    parse_lang_source - Parse modern JSON or legacy key=value text
    ReferenceTranslations - Immutable key -> display string table

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from localekeys.constants import DEFAULT_REFERENCE_LOCALE, FALLBACK_MISSING_TRANSLATION
from localekeys.diagnostics import ErrorTemplate, TranslationLoadError
from localekeys.localization.types import LangSource, LocaleCode, TranslationKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LangResourceLoader",
    # Concrete loader
    "PathLangLoader",
    # Parsing
    "parse_lang_source",
    # Translation table
    "ReferenceTranslations",
]

logger = logging.getLogger(__name__)


class LangResourceLoader(Protocol):
    """Protocol for loading language files for specific locales.

    Example:
        >>> class JarLoader:
        ...     def __init__(self, archive):
        ...         self._archive = archive
        ...     def load(self, locale: str) -> str:
        ...         name = f"assets/minecraft/lang/{locale}.json"
        ...         return self._archive.read(name).decode("utf-8")
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"assets/minecraft/lang/{locale}.json"
    """

    def load(self, locale: LocaleCode) -> LangSource:
        """Load language file text for a locale.

        Raises:
            FileNotFoundError: If the file doesn't exist for this locale
            OSError: If the file cannot be read
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return human-readable path for diagnostics."""
        return f"{locale}"


@dataclass(frozen=True, slots=True)
class PathLangLoader:
    """File system language loader using a path template.

    Security:
        Locale codes containing path separators or ".." are rejected, and
        resolved paths must stay under root_dir.

    Example:
        >>> loader = PathLangLoader("assets/minecraft/lang/{locale}.json")
        >>> source = loader.load("en_us")
        # Loads from: assets/minecraft/lang/en_us.json

    Attributes:
        path_template: File path with a {locale} placeholder
        root_dir: Directory every resolved path must stay under. Defaults to
            the static prefix of path_template.
    """

    path_template: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate the template.

        Raises:
            ValueError: If path_template does not contain {locale}
        """
        if "{locale}" not in self.path_template:
            msg = (
                f"path_template must contain '{{locale}}' placeholder, "
                f"got: '{self.path_template}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.path_template.split("{locale}")[0]
            static_dir = static_prefix.rsplit("/", 1)[0] if "/" in static_prefix else ""
            resolved = Path(static_dir).resolve() if static_dir else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Reject locale codes that could escape the template directory.

        Raises:
            ValueError: If locale is empty or contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def _resolve(self, locale: LocaleCode) -> Path:
        self._validate_locale(locale)
        path = Path(self.path_template.replace("{locale}", locale)).resolve()
        if not path.is_relative_to(self._resolved_root):
            msg = f"Resolved path escapes root directory: '{path}'"
            raise ValueError(msg)
        return path

    def load(self, locale: LocaleCode) -> LangSource:
        """Read the language file for a locale.

        Raises:
            ValueError: If locale is unsafe
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        return self._resolve(locale).read_text(encoding="utf-8")

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the templated path for diagnostics."""
        return self.path_template.replace("{locale}", locale)


def _parse_legacy_lines(source: LangSource) -> dict[str, str]:
    entries: dict[str, str] = {}
    for raw_line in source.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, separator, value = line.partition("=")
        if separator:
            entries[key.strip()] = value
    return entries


def parse_lang_source(source: LangSource, path: str = "<memory>") -> dict[str, str]:
    """Parse language file text into a key -> display string mapping.

    Text starting with '{' is parsed as a modern JSON object; anything else
    as legacy 'key=value' lines with '#' comments.

    Args:
        source: Language file text
        path: Name used in error diagnostics

    Returns:
        Mapping of translation keys to display strings

    Raises:
        TranslationLoadError: If JSON is invalid or is not a flat object of
            string values

    Example:
        >>> parse_lang_source('{"item.minecraft.stick": "Stick"}')
        {'item.minecraft.stick': 'Stick'}
        >>> parse_lang_source("item.stick.name=Stick")
        {'item.stick.name': 'Stick'}
    """
    stripped = source.lstrip("\ufeff").lstrip()
    if not stripped.startswith("{"):
        return _parse_legacy_lines(stripped)

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError as exc:
        raise TranslationLoadError(ErrorTemplate.translation_malformed(path, str(exc))) from exc
    if not isinstance(data, dict):
        raise TranslationLoadError(
            ErrorTemplate.translation_malformed(path, "top level is not an object")
        )
    bad_keys = [key for key, value in data.items() if not isinstance(value, str)]
    if bad_keys:
        raise TranslationLoadError(
            ErrorTemplate.translation_malformed(path, f"non-string value for '{bad_keys[0]}'")
        )
    return data


@dataclass(frozen=True, slots=True)
class ReferenceTranslations:
    """Immutable reference-language table for server-side display names.

    Attributes:
        locale: Locale code the table was loaded for
        entries: Read-only key -> display string mapping
        missing: Sentinel returned for absent keys

    Example:
        >>> table = ReferenceTranslations.from_mapping({"entity.minecraft.pig": "Pig"})
        >>> table.to_server_locale("entity.minecraft.pig")
        'Pig'
        >>> table.to_server_locale("entity.minecraft.cow")
        '[missing]'
    """

    locale: LocaleCode = DEFAULT_REFERENCE_LOCALE
    entries: Mapping[TranslationKey, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    missing: str = FALLBACK_MISSING_TRANSLATION

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_mapping(
        cls,
        entries: Mapping[TranslationKey, str],
        *,
        locale: LocaleCode = DEFAULT_REFERENCE_LOCALE,
        missing: str = FALLBACK_MISSING_TRANSLATION,
    ) -> ReferenceTranslations:
        """Build a table from an in-memory mapping."""
        return cls(locale=locale, entries=entries, missing=missing)

    @classmethod
    def load(
        cls,
        loader: LangResourceLoader,
        locale: LocaleCode = DEFAULT_REFERENCE_LOCALE,
        *,
        missing: str = FALLBACK_MISSING_TRANSLATION,
    ) -> ReferenceTranslations:
        """Load and parse a language file through a loader.

        Raises:
            TranslationLoadError: If the file cannot be read or parsed
        """
        path = loader.describe_path(locale)
        try:
            source = loader.load(locale)
        except (OSError, ValueError) as exc:
            logger.error("Failed to load reference translations %s: %s", path, exc)
            raise TranslationLoadError(
                ErrorTemplate.translation_load_failed(path, str(exc))
            ) from exc
        entries = parse_lang_source(source, path)
        logger.info("Loaded %d reference translation(s) from %s", len(entries), path)
        return cls(locale=locale, entries=entries, missing=missing)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def to_server_locale(self, key: TranslationKey) -> str:
        """Display string for key, or the missing sentinel."""
        return self.entries.get(key, self.missing)
