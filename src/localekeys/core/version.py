"""Host version detection.

Parses the host runtime's version string once into an immutable
VersionProfile: an era classification plus capability flags. Era comes from
the version string; capability flags come from probing the host registry for
materials introduced alongside each capability, so they stay correct for
version strings this module has never seen.

Thread Safety:
    VersionProfile is frozen. Build it once at startup and share it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localekeys.constants import (
    LEGACY_VERSIONS,
    PROBE_BASE_POTION_DATA,
    PROBE_REPACKAGED_NAMESPACE,
    PROBE_SHORT_ACCESSOR,
)
from localekeys.diagnostics import Diagnostic, ErrorTemplate
from localekeys.enums import Era

if TYPE_CHECKING:
    from localekeys.core.host import HostRegistry

__all__ = [
    "VersionProfile",
    "detect",
    "is_legacy_version",
    "parse_version_prefix",
]

logger = logging.getLogger(__name__)

_NUMERIC_VERSION = re.compile(r"[0-9]+(?:\.[0-9]+)*")


def parse_version_prefix(raw_version: str) -> str | None:
    """Extract the dotted numeric release from a host version string.

    Args:
        raw_version: Host version such as '1.12.2-R0.1-SNAPSHOT'

    Returns:
        '1.12.2', or None if the part before the first hyphen is not a
        dotted numeric release.

    Example:
        >>> parse_version_prefix("1.20.4-R0.1-SNAPSHOT")
        '1.20.4'
        >>> parse_version_prefix("git-Paper-1")
    """
    prefix = raw_version.split("-", 1)[0].strip()
    if _NUMERIC_VERSION.fullmatch(prefix):
        return prefix
    return None


def is_legacy_version(release: str) -> bool:
    """Check whether a dotted release predates the 1.13 flattening."""
    return release in LEGACY_VERSIONS


@dataclass(frozen=True, slots=True)
class VersionProfile:
    """Immutable era and capability snapshot of the host runtime.

    Attributes:
        raw_version: Version string as reported by the host.
        era: LEGACY for whitelisted pre-1.13 releases, otherwise MODERN.
        has_base_potion_data: Potion type is a first-class item property (1.9+).
        has_repackaged_namespace: Internal item/locale classes moved (1.17+).
        is_post_short_accessor: Localized-name accessor was minified (1.18+).
        warnings: Diagnostics recorded during detection (at most one
            UNSUPPORTED_VERSION entry).

    Example:
        >>> profile = VersionProfile(raw_version="1.20.4", era=Era.MODERN)
        >>> profile.is_legacy
        False
    """

    raw_version: str
    era: Era = Era.MODERN
    has_base_potion_data: bool = False
    has_repackaged_namespace: bool = False
    is_post_short_accessor: bool = False
    warnings: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        """Validate that post-flattening flags are absent in the legacy era.

        Raises:
            ValueError: If a post-flattening capability is set with era LEGACY.
        """
        if self.era is Era.LEGACY and (
            self.has_repackaged_namespace or self.is_post_short_accessor
        ):
            msg = "Post-flattening capabilities cannot be set for a legacy profile"
            raise ValueError(msg)

    @property
    def is_legacy(self) -> bool:
        """True for the numeric ID + metadata era (1.12.2 and older)."""
        return self.era is Era.LEGACY

    @property
    def is_supported(self) -> bool:
        """False if the version string could not be classified."""
        return not self.warnings


def detect(raw_version: str, host: HostRegistry | None = None) -> VersionProfile:
    """Build a VersionProfile from the host version string.

    Args:
        raw_version: Host version such as '1.12.2-R0.1-SNAPSHOT'
        host: Registry used for capability probes. Without one, every
            capability flag is False.

    Returns:
        VersionProfile. Never raises for malformed input: an unparseable
        version yields a MODERN profile with no capabilities and a single
        UNSUPPORTED_VERSION warning.

    Example:
        >>> detect("1.8.8-R0.1-SNAPSHOT").era
        <Era.LEGACY: 'legacy'>
    """
    release = parse_version_prefix(raw_version)
    if release is None:
        diagnostic = ErrorTemplate.unsupported_version(raw_version)
        logger.warning("%s", diagnostic.message)
        return VersionProfile(raw_version=raw_version, warnings=(diagnostic,))

    era = Era.LEGACY if is_legacy_version(release) else Era.MODERN

    has_base_potion_data = False
    has_repackaged_namespace = False
    is_post_short_accessor = False
    if host is not None:
        has_base_potion_data = host.has_material(PROBE_BASE_POTION_DATA)
        if era is Era.MODERN:
            has_repackaged_namespace = host.has_material(PROBE_REPACKAGED_NAMESPACE)
            is_post_short_accessor = host.has_material(PROBE_SHORT_ACCESSOR)

    profile = VersionProfile(
        raw_version=raw_version,
        era=era,
        has_base_potion_data=has_base_potion_data,
        has_repackaged_namespace=has_repackaged_namespace,
        is_post_short_accessor=is_post_short_accessor,
    )
    logger.info(
        "Detected host version %s: era=%s base_potion_data=%s repackaged=%s short_accessor=%s",
        release,
        era,
        has_base_potion_data,
        has_repackaged_namespace,
        is_post_short_accessor,
    )
    return profile
