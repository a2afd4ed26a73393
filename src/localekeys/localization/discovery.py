"""Language resource discovery.

Enumerates language files shipped inside a resource directory tree or a
zip/jar archive, for example the client assets bundled with a server jar.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path, PurePosixPath

from localekeys.localization.types import LocaleCode

__all__ = [
    "DEFAULT_LANG_FOLDER",
    "available_locales",
    "find_lang_resources",
]

logger = logging.getLogger(__name__)

DEFAULT_LANG_FOLDER = "assets/minecraft/lang"


def _within_depth(relative: PurePosixPath, max_depth: int) -> bool:
    # Depth counts directories below the folder; files directly in it are depth 0.
    return len(relative.parts) - 1 <= max_depth


def _archive_entries(archive: Path, folder: str, suffix: str, max_depth: int) -> list[str]:
    prefix = folder.strip("/") + "/"
    found: list[str] = []
    with zipfile.ZipFile(archive) as jar:
        for name in jar.namelist():
            if not name.startswith(prefix) or name.endswith("/"):
                continue
            relative = PurePosixPath(name[len(prefix) :])
            if name.endswith(suffix) and _within_depth(relative, max_depth):
                found.append(str(relative))
    return found


def _directory_entries(root: Path, folder: str, suffix: str, max_depth: int) -> list[str]:
    base = root / folder
    if not base.is_dir():
        return []
    found: list[str] = []
    for path in base.rglob(f"*{suffix}"):
        if not path.is_file():
            continue
        relative = PurePosixPath(path.relative_to(base).as_posix())
        if _within_depth(relative, max_depth):
            found.append(str(relative))
    return found


def find_lang_resources(
    source: str | Path,
    folder: str = DEFAULT_LANG_FOLDER,
    suffix: str = ".json",
    max_depth: int = 3,
) -> list[str]:
    """List language files beneath folder in a directory or archive.

    Args:
        source: Resource directory, or a .zip/.jar archive
        folder: Folder inside source to search
        suffix: File name suffix to match ('.json' or '.lang')
        max_depth: Maximum number of nested directories below folder

    Returns:
        Sorted paths relative to folder, using '/' separators

    Raises:
        FileNotFoundError: If source does not exist
        zipfile.BadZipFile: If source is a file but not a valid archive

    Example:
        >>> find_lang_resources("server.jar")
        ['de_de.json', 'en_us.json', 'fr_fr.json']
    """
    path = Path(source)
    if not path.exists():
        msg = f"Resource source not found: '{path}'"
        raise FileNotFoundError(msg)

    if path.is_dir():
        found = _directory_entries(path, folder, suffix, max_depth)
    else:
        found = _archive_entries(path, folder, suffix, max_depth)
    logger.debug("Found %d %s file(s) under %s in %s", len(found), suffix, folder, path)
    return sorted(found)


def available_locales(
    source: str | Path,
    folder: str = DEFAULT_LANG_FOLDER,
    suffix: str = ".json",
) -> list[LocaleCode]:
    """Locale codes of the language files directly inside folder.

    Example:
        >>> available_locales("server.jar")
        ['de_de', 'en_us', 'fr_fr']
    """
    resources = find_lang_resources(source, folder, suffix, max_depth=0)
    return [resource.removesuffix(suffix).lower() for resource in resources]
