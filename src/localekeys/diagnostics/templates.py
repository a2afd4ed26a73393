"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def argument_required(code: DiagnosticCode, argument: str) -> Diagnostic:
        """A required argument was None.

        Args:
            code: One of the 1xxx argument codes
            argument: Parameter name that was missing

        Returns:
            Diagnostic for the given argument code
        """
        msg = f"{argument.capitalize()} cannot be None"
        return Diagnostic(
            code=code,
            message=msg,
            hint=f"Pass a non-None '{argument}' argument",
        )

    @staticmethod
    def material_required() -> Diagnostic:
        """Material argument was None."""
        return ErrorTemplate.argument_required(DiagnosticCode.MATERIAL_REQUIRED, "material")

    @staticmethod
    def entity_type_required() -> Diagnostic:
        """Entity type argument was None."""
        return ErrorTemplate.argument_required(
            DiagnosticCode.ENTITY_TYPE_REQUIRED, "entity type"
        )

    @staticmethod
    def enchantments_required() -> Diagnostic:
        """Enchantment mapping was None."""
        return ErrorTemplate.argument_required(
            DiagnosticCode.ENCHANTMENTS_REQUIRED, "enchantments"
        )

    @staticmethod
    def message_required() -> Diagnostic:
        """Message template was None."""
        return ErrorTemplate.argument_required(DiagnosticCode.MESSAGE_REQUIRED, "message")

    @staticmethod
    def player_required() -> Diagnostic:
        """Player argument was None or empty."""
        return ErrorTemplate.argument_required(DiagnosticCode.PLAYER_REQUIRED, "player")

    # ------------------------------------------------------------------
    # Lookup errors
    # ------------------------------------------------------------------

    @staticmethod
    def block_not_found(identifier: str) -> Diagnostic:
        """Legacy block table has neither NAME.durability nor NAME.

        Args:
            identifier: Composite identifier that was looked up

        Returns:
            Diagnostic for BLOCK_NOT_FOUND
        """
        msg = f"Block not found: {identifier}"
        return Diagnostic(
            code=DiagnosticCode.BLOCK_NOT_FOUND,
            message=msg,
            hint="Check that the block exists in this server version",
            identifier=identifier,
        )

    @staticmethod
    def item_not_found(identifier: str) -> Diagnostic:
        """Legacy item table has neither NAME.durability nor NAME.

        Args:
            identifier: Composite identifier that was looked up

        Returns:
            Diagnostic for ITEM_NOT_FOUND
        """
        msg = f"Item not found: {identifier}"
        return Diagnostic(
            code=DiagnosticCode.ITEM_NOT_FOUND,
            message=msg,
            hint="Check that the material exists in this server version",
            identifier=identifier,
        )

    @staticmethod
    def potion_not_found(identifier: str, table: str) -> Diagnostic:
        """Legacy potion table has no entry for the potion identifier.

        Args:
            identifier: Potion type name or composite identifier
            table: Name of the potion table consulted

        Returns:
            Diagnostic for POTION_NOT_FOUND
        """
        msg = f"Potion not found in {table} table: {identifier}"
        return Diagnostic(
            code=DiagnosticCode.POTION_NOT_FOUND,
            message=msg,
            hint="Legacy potion keys exist only for vanilla potion types",
            identifier=identifier,
        )

    @staticmethod
    def entity_not_found(identifier: str) -> Diagnostic:
        """Legacy entity table has no entry for the identifier.

        Args:
            identifier: Composite identifier that was looked up

        Returns:
            Diagnostic for ENTITY_NOT_FOUND
        """
        msg = f"Entity not found: {identifier}"
        return Diagnostic(
            code=DiagnosticCode.ENTITY_NOT_FOUND,
            message=msg,
            hint="Entities without a name key (e.g. projectiles) cannot be translated",
            identifier=identifier,
        )

    # ------------------------------------------------------------------
    # Host errors
    # ------------------------------------------------------------------

    @staticmethod
    def material_query_failed(material: str, reason: str | None = None) -> Diagnostic:
        """Host had no internal item representation for the material.

        Args:
            material: Material name that was queried
            reason: Optional underlying failure description

        Returns:
            Diagnostic for MATERIAL_QUERY_FAILED
        """
        msg = f"Unable to query material: {material}"
        if reason:
            msg = f"{msg} ({reason})"
        return Diagnostic(
            code=DiagnosticCode.MATERIAL_QUERY_FAILED,
            message=msg,
            hint="Materials such as AIR or legacy-only entries have no item form",
            identifier=material,
        )

    # ------------------------------------------------------------------
    # Version warnings
    # ------------------------------------------------------------------

    @staticmethod
    def unsupported_version(raw_version: str) -> Diagnostic:
        """Version string could not be classified.

        Args:
            raw_version: Version string as reported by the host

        Returns:
            Warning diagnostic for UNSUPPORTED_VERSION
        """
        msg = f"Received invalid server version {raw_version!r}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_VERSION,
            message=msg,
            hint="Treating as a modern release without optional capabilities",
            identifier=raw_version,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Dispatch errors
    # ------------------------------------------------------------------

    @staticmethod
    def dispatch_failed(player: str, reason: str) -> Diagnostic:
        """Host failed to deliver a payload.

        Args:
            player: Target player name
            reason: Underlying failure description

        Returns:
            Diagnostic for DISPATCH_FAILED
        """
        msg = f"Failed to deliver message to {player}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DISPATCH_FAILED,
            message=msg,
            identifier=player,
        )

    # ------------------------------------------------------------------
    # Reference translation errors
    # ------------------------------------------------------------------

    @staticmethod
    def translation_load_failed(path: str, reason: str) -> Diagnostic:
        """Reference translation file could not be read.

        Args:
            path: Human-readable path of the file
            reason: Underlying failure description

        Returns:
            Diagnostic for TRANSLATION_LOAD_FAILED
        """
        msg = f"Failed to load translations from {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_LOAD_FAILED,
            message=msg,
            identifier=path,
        )

    @staticmethod
    def translation_malformed(path: str, reason: str) -> Diagnostic:
        """Reference translation file had an unexpected shape.

        Args:
            path: Human-readable path of the file
            reason: What was wrong with the content

        Returns:
            Diagnostic for TRANSLATION_MALFORMED
        """
        msg = f"Malformed translation file {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_MALFORMED,
            message=msg,
            hint="Expected a flat JSON object of string values or key=value lines",
            identifier=path,
        )
