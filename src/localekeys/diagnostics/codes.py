"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Classified error kinds surfaced to callers.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        INVALID_ARGUMENT: A required identifier was absent
        NOT_FOUND: No mapping exists in the active era's tables
        QUERY_FAILED: The host introspection call failed or returned nothing
        UNSUPPORTED_VERSION: Version string could not be classified
        DISPATCH: Delivering a composed payload failed
        TRANSLATION: Reference translation file could not be loaded
    """

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    QUERY_FAILED = "query_failed"
    UNSUPPORTED_VERSION = "unsupported_version"
    DISPATCH = "dispatch"
    TRANSLATION = "translation"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (missing identifiers)
        2000-2999: Lookup errors (no mapping for identifier)
        3000-3999: Host errors (introspection failures)
        4000-4999: Version warnings
        5000-5999: Dispatch errors
        6000-6999: Reference translation errors
    """

    # Argument errors (1000-1999)
    MATERIAL_REQUIRED = 1001
    ENTITY_TYPE_REQUIRED = 1002
    ENCHANTMENTS_REQUIRED = 1003
    MESSAGE_REQUIRED = 1004
    PLAYER_REQUIRED = 1005

    # Lookup errors (2000-2999)
    BLOCK_NOT_FOUND = 2001
    ITEM_NOT_FOUND = 2002
    POTION_NOT_FOUND = 2003
    ENTITY_NOT_FOUND = 2004

    # Host errors (3000-3999)
    MATERIAL_QUERY_FAILED = 3001

    # Version warnings (4000-4999)
    UNSUPPORTED_VERSION = 4001

    # Dispatch errors (5000-5999)
    DISPATCH_FAILED = 5001

    # Reference translation errors (6000-6999)
    TRANSLATION_LOAD_FAILED = 6001
    TRANSLATION_MALFORMED = 6002

    @property
    def category(self) -> ErrorCategory:
        """Error category derived from the code's numeric range."""
        return _CATEGORY_BY_RANGE[self.value // 1000]


_CATEGORY_BY_RANGE: dict[int, ErrorCategory] = {
    1: ErrorCategory.INVALID_ARGUMENT,
    2: ErrorCategory.NOT_FOUND,
    3: ErrorCategory.QUERY_FAILED,
    4: ErrorCategory.UNSUPPORTED_VERSION,
    5: ErrorCategory.DISPATCH,
    6: ErrorCategory.TRANSLATION,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        identifier: Composite identifier or raw input that triggered the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    identifier: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Classified error kind of this diagnostic."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[ITEM_NOT_FOUND]: Item not found: STONE_SWORD.3
              --> STONE_SWORD.3
              = help: Check that the material exists in this server version

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
