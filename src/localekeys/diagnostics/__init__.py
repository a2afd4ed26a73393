"""Diagnostic system for localekeys errors.

Provides structured error diagnostics with codes, categories, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DispatchError,
    InvalidArgumentError,
    KeyNotFoundError,
    LocaleKeyError,
    QueryFailedError,
    TranslationLoadError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DispatchError",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "LocaleKeyError",
    "OutputFormat",
    "QueryFailedError",
    "TranslationLoadError",
]
