"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent log flooding
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.item_not_found("STONE_SWORD.3")
        >>> print(formatter.format(diagnostic))
        error[ITEM_NOT_FOUND]: Item not found: STONE_SWORD.3
          --> STONE_SWORD.3
          = help: Check that the material exists in this server version

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        ITEM_NOT_FOUND: Item not found: STONE_SWORD.3
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.identifier:
            parts.append(f"  --> {self._maybe_sanitize(diagnostic.identifier)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.identifier:
            data["identifier"] = diagnostic.identifier

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
