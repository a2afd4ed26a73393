"""localekeys exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Resolvers raise these; the composer collects them into (result, errors)
tuples so they never cross the dispatch boundary.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class LocaleKeyError(Exception):
    """Base exception for all localekeys errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleKeyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Classified error kind, if a diagnostic is attached."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.category


class InvalidArgumentError(LocaleKeyError, ValueError):
    """A required identifier (material, entity type, message) was None."""


class KeyNotFoundError(LocaleKeyError, LookupError):
    """No canonical key exists for the identifier in the active era's tables."""


class QueryFailedError(LocaleKeyError):
    """The host introspection call failed or had no representation.

    Only raised in the modern era, where material keys are asked of the host.
    """


class DispatchError(LocaleKeyError):
    """The host refused or failed to deliver a composed payload."""


class TranslationLoadError(LocaleKeyError):
    """A reference translation file could not be read or parsed."""
