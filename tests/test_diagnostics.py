"""Tests for diagnostic codes, templates, formatting, and exceptions.

Tests:
- DiagnosticCode numeric ranges map to ErrorCategory
- ErrorTemplate messages, identifiers, and severities
- DiagnosticFormatter rust/simple/json output and sanitization
- LocaleKeyError carries its Diagnostic and category
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localekeys.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DispatchError,
    ErrorCategory,
    ErrorTemplate,
    InvalidArgumentError,
    KeyNotFoundError,
    LocaleKeyError,
    OutputFormat,
    QueryFailedError,
    TranslationLoadError,
)


class TestDiagnosticCodes:
    """Code to category mapping."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.MATERIAL_REQUIRED, ErrorCategory.INVALID_ARGUMENT),
            (DiagnosticCode.PLAYER_REQUIRED, ErrorCategory.INVALID_ARGUMENT),
            (DiagnosticCode.ITEM_NOT_FOUND, ErrorCategory.NOT_FOUND),
            (DiagnosticCode.MATERIAL_QUERY_FAILED, ErrorCategory.QUERY_FAILED),
            (DiagnosticCode.UNSUPPORTED_VERSION, ErrorCategory.UNSUPPORTED_VERSION),
            (DiagnosticCode.DISPATCH_FAILED, ErrorCategory.DISPATCH),
            (DiagnosticCode.TRANSLATION_MALFORMED, ErrorCategory.TRANSLATION),
        ],
    )
    def test_category(self, code: DiagnosticCode, category: ErrorCategory) -> None:
        assert code.category is category

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize("code", list(DiagnosticCode))
    def test_every_code_has_category(self, code: DiagnosticCode) -> None:
        assert isinstance(code.category, ErrorCategory)

    def test_category_is_str(self) -> None:
        assert ErrorCategory.NOT_FOUND == "not_found"


class TestErrorTemplate:
    """Template messages."""

    def test_argument_required(self) -> None:
        diagnostic = ErrorTemplate.entity_type_required()
        assert diagnostic.message == "Entity type cannot be None"
        assert diagnostic.code is DiagnosticCode.ENTITY_TYPE_REQUIRED
        assert diagnostic.severity == "error"

    def test_block_not_found(self) -> None:
        diagnostic = ErrorTemplate.block_not_found("STONE.7")
        assert diagnostic.message == "Block not found: STONE.7"
        assert diagnostic.identifier == "STONE.7"

    def test_potion_not_found_names_table(self) -> None:
        diagnostic = ErrorTemplate.potion_not_found("LUCK", "lingering_potions")
        assert diagnostic.message == "Potion not found in lingering_potions table: LUCK"

    def test_query_failed_with_reason(self) -> None:
        diagnostic = ErrorTemplate.material_query_failed("AIR", "no item form")
        assert diagnostic.message == "Unable to query material: AIR (no item form)"

    def test_query_failed_without_reason(self) -> None:
        assert ErrorTemplate.material_query_failed("AIR").message == (
            "Unable to query material: AIR"
        )

    def test_unsupported_version_is_warning(self) -> None:
        diagnostic = ErrorTemplate.unsupported_version("abc")
        assert diagnostic.severity == "warning"
        assert diagnostic.message == "Received invalid server version 'abc'"

    def test_dispatch_failed(self) -> None:
        diagnostic = ErrorTemplate.dispatch_failed("Steve", "offline")
        assert diagnostic.message == "Failed to deliver message to Steve: offline"
        assert diagnostic.category is ErrorCategory.DISPATCH


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        diagnostic = ErrorTemplate.item_not_found("STONE_SWORD.3")
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[ITEM_NOT_FOUND]: Item not found: STONE_SWORD.3\n"
            "  --> STONE_SWORD.3\n"
            "  = help: Check that the material exists in this server version"
        )

    def test_rust_without_identifier_or_hint(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.DISPATCH_FAILED, message="boom")
        assert DiagnosticFormatter().format(diagnostic) == "error[DISPATCH_FAILED]: boom"

    def test_rust_color(self) -> None:
        diagnostic = ErrorTemplate.unsupported_version("x")
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;33mwarning\033[0m[UNSUPPORTED_VERSION]")

    def test_simple_format(self) -> None:
        diagnostic = ErrorTemplate.entity_not_found("ARROW")
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert output == "ENTITY_NOT_FOUND: Entity not found: ARROW"

    def test_json_format(self) -> None:
        diagnostic = ErrorTemplate.block_not_found("WOOL.99")
        output = DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic)
        data = json.loads(output)
        assert data["code"] == "BLOCK_NOT_FOUND"
        assert data["code_value"] == 2001
        assert data["category"] == "not_found"
        assert data["identifier"] == "WOOL.99"
        assert data["severity"] == "error"
        assert "hint" in data

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.material_required(), ErrorTemplate.message_required()]
        )
        assert output.split("\n\n") == [
            "MATERIAL_REQUIRED: Material cannot be None",
            "MESSAGE_REQUIRED: Message cannot be None",
        ]

    @given(st.text(min_size=101, max_size=300))
    def test_sanitize_truncates(self, message: str) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.DISPATCH_FAILED, message=message)
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)
        assert formatter.format(diagnostic) == f"DISPATCH_FAILED: {message[:100]}..."


class TestExceptions:
    """Exception hierarchy."""

    def test_diagnostic_attached(self) -> None:
        error = KeyNotFoundError(ErrorTemplate.item_not_found("X"))
        assert error.diagnostic is not None
        assert error.category is ErrorCategory.NOT_FOUND
        assert str(error).startswith("error[ITEM_NOT_FOUND]")

    def test_plain_message(self) -> None:
        error = DispatchError("boom")
        assert error.diagnostic is None
        assert error.category is None
        assert str(error) == "boom"

    @pytest.mark.parametrize(
        ("error_type", "builtin"),
        [(InvalidArgumentError, ValueError), (KeyNotFoundError, LookupError)],
    )
    def test_builtin_bases(self, error_type: type[LocaleKeyError], builtin: type) -> None:
        assert issubclass(error_type, builtin)

    @pytest.mark.parametrize(
        "error_type",
        [InvalidArgumentError, KeyNotFoundError, QueryFailedError, DispatchError,
         TranslationLoadError],
    )
    def test_common_base(self, error_type: type[LocaleKeyError]) -> None:
        assert issubclass(error_type, LocaleKeyError)

    def test_diagnostic_str_is_message(self) -> None:
        assert str(ErrorTemplate.player_required()) == "Player cannot be None"
