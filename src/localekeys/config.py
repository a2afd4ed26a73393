"""Engine configuration.

Provides a single frozen dataclass holding the tunable engine parameters.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from localekeys.constants import (
    DEFAULT_DISPATCH_COMMAND,
    DEFAULT_LOG_TRUNCATE,
    DEFAULT_REFERENCE_LOCALE,
    FALLBACK_MISSING_TRANSLATION,
)

__all__ = ["EngineConfig"]


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable configuration for LocaleEngine.

    All fields have sensible defaults; ``EngineConfig()`` is a usable
    configuration.

    Attributes:
        dispatch_command: Console command used by CommandDispatcher
            (default: 'tellraw').
        missing_translation: Sentinel returned by to_server_locale for keys
            absent from the reference table (default: '[missing]').
        reference_locale: Locale of the reference translation file
            (default: 'en_us').
        log_truncate: Maximum payload characters written to debug logs
            (default: 50).

    Example:
        >>> config = EngineConfig(dispatch_command="minecraft:tellraw")
        >>> config.reference_locale
        'en_us'
    """

    dispatch_command: str = DEFAULT_DISPATCH_COMMAND
    missing_translation: str = FALLBACK_MISSING_TRANSLATION
    reference_locale: str = DEFAULT_REFERENCE_LOCALE
    log_truncate: int = DEFAULT_LOG_TRUNCATE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If dispatch_command or reference_locale is blank,
                dispatch_command contains whitespace, or log_truncate is not
                positive.
        """
        if not self.dispatch_command.strip():
            msg = "dispatch_command must be non-empty"
            raise ValueError(msg)
        if any(ch.isspace() for ch in self.dispatch_command):
            msg = f"dispatch_command must be a single word, got {self.dispatch_command!r}"
            raise ValueError(msg)
        if not self.reference_locale.strip():
            msg = "reference_locale must be non-empty"
            raise ValueError(msg)
        if self.log_truncate <= 0:
            msg = "log_truncate must be positive"
            raise ValueError(msg)
