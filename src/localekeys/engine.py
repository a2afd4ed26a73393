"""LocaleEngine - single entry point for key resolution and messaging.

Detects the host version once, loads the shared legacy tables once, and
wires the resolvers and the composer around that snapshot. All state is
immutable after create(), so one engine serves every caller.

Python 3.13+. External dependency: Babel (via localization.locales only).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from localekeys.composer import ComposeResult, MessageComposer
from localekeys.config import EngineConfig
from localekeys.core.host import CommandDispatcher
from localekeys.core.version import VersionProfile, detect
from localekeys.localization.loading import ReferenceTranslations
from localekeys.resolvers import EnchantmentKeyResolver, EntityKeyResolver, MaterialKeyResolver
from localekeys.tables import load_legacy_tables

if TYPE_CHECKING:
    from localekeys.core.host import HostRegistry, MessageDispatcher
    from localekeys.core.types import CanonicalKey, Enchantment, ItemMeta, MaterialRef
    from localekeys.localization.loading import LangResourceLoader
    from localekeys.tables import LegacyKeyTables

__all__ = ["LocaleEngine"]

logger = logging.getLogger(__name__)


class LocaleEngine:
    """Version-aware locale key engine.

    Resolves game objects to the keys the client translates, and composes
    chat payloads that let each player see names in their own language.

    Thread Safety:
        Immutable after construction. Share one instance.

    Examples:
        >>> engine = LocaleEngine.create("1.20.4-R0.1-SNAPSHOT", host)
        >>> engine.resolve_entity_key("MUSHROOM_COW")
        'entity.minecraft.mooshroom'
        >>> engine.compose_entity_message("You killed a <mob>", "ZOMBIE")[0]
        '["You killed a ",{"translate":"entity.minecraft.zombie"},""]'
    """

    __slots__ = (
        "_composer",
        "_config",
        "_dispatcher",
        "_enchantments",
        "_entities",
        "_host",
        "_materials",
        "_profile",
        "_tables",
        "_translations",
    )

    def __init__(
        self,
        profile: VersionProfile,
        tables: LegacyKeyTables,
        host: HostRegistry | None = None,
        dispatcher: MessageDispatcher | None = None,
        translations: ReferenceTranslations | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        """Initialize engine from an already detected profile.

        Most callers want create(), which runs detection and loads the
        packaged tables.

        Args:
            profile: Host version profile
            tables: Legacy lookup tables
            host: Host registry for modern item lookups
            dispatcher: Delivery channel for send_* methods
            translations: Reference translations for to_server_locale
            config: Engine configuration (defaults to EngineConfig())
        """
        self._config = config if config is not None else EngineConfig()
        self._profile = profile
        self._tables = tables
        self._host = host
        self._dispatcher = dispatcher
        self._translations = (
            translations
            if translations is not None
            else ReferenceTranslations(
                locale=self._config.reference_locale,
                missing=self._config.missing_translation,
            )
        )
        self._materials = MaterialKeyResolver(profile, tables, host)
        self._entities = EntityKeyResolver(profile, tables)
        self._enchantments = EnchantmentKeyResolver(profile)
        self._composer = MessageComposer(
            self._materials,
            self._entities,
            self._enchantments,
            dispatcher=dispatcher,
            config=self._config,
        )

    @classmethod
    def create(
        cls,
        raw_version: str,
        host: HostRegistry | None = None,
        dispatcher: MessageDispatcher | None = None,
        tables: LegacyKeyTables | None = None,
        translations: ReferenceTranslations | None = None,
        config: EngineConfig | None = None,
    ) -> LocaleEngine:
        """Detect the host version and build a ready engine.

        Args:
            raw_version: Host version string, e.g. '1.12.2-R0.1-SNAPSHOT'
            host: Host registry (capability probes and modern item lookups)
            dispatcher: Delivery channel for send_* methods
            tables: Legacy tables (default: packaged tables, loaded once per
                process)
            translations: Reference translations for to_server_locale
            config: Engine configuration

        Returns:
            LocaleEngine. Never raises for an unparseable version; check
            ``engine.profile.warnings``.
        """
        profile = detect(raw_version, host)
        if tables is None:
            tables = load_legacy_tables()
        engine = cls(profile, tables, host, dispatcher, translations, config)
        logger.info("LocaleEngine ready for %s (%s era)", raw_version, profile.era)
        return engine

    @staticmethod
    def command_dispatcher(
        run_command: Callable[[str], bool], config: EngineConfig | None = None
    ) -> CommandDispatcher:
        """Build a CommandDispatcher using the configured dispatch command.

        Example:
            >>> dispatcher = LocaleEngine.command_dispatcher(server.dispatch_console_command)
            >>> engine = LocaleEngine.create(version, host, dispatcher)
        """
        command = (config if config is not None else EngineConfig()).dispatch_command
        return CommandDispatcher(run_command, command)

    def with_translations(
        self, loader: LangResourceLoader, locale: str | None = None
    ) -> LocaleEngine:
        """Return a copy of this engine with reference translations loaded.

        Args:
            loader: Language resource loader
            locale: Locale to load (default: config.reference_locale)

        Raises:
            TranslationLoadError: If the language file cannot be read or parsed
        """
        translations = ReferenceTranslations.load(
            loader,
            locale if locale is not None else self._config.reference_locale,
            missing=self._config.missing_translation,
        )
        return LocaleEngine(
            self._profile,
            self._tables,
            self._host,
            self._dispatcher,
            translations,
            self._config,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def profile(self) -> VersionProfile:
        """Detected host version profile."""
        return self._profile

    @property
    def config(self) -> EngineConfig:
        """Engine configuration."""
        return self._config

    @property
    def tables(self) -> LegacyKeyTables:
        """Legacy lookup tables in use."""
        return self._tables

    @property
    def translations(self) -> ReferenceTranslations:
        """Reference translations used by to_server_locale."""
        return self._translations

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_material_key(
        self,
        material: MaterialRef | None,
        durability: int = 0,
        meta: ItemMeta | None = None,
    ) -> CanonicalKey:
        """Resolve a material to its client locale key.

        Raises:
            InvalidArgumentError: If material is None
            KeyNotFoundError: If the legacy tables have no entry
            QueryFailedError: If the modern host lookup fails
        """
        return self._materials.resolve(material, durability, meta)

    def resolve_entity_key(self, entity_type: str | None, extra: str | None = None) -> CanonicalKey:
        """Resolve an entity type and optional variant to its client locale key.

        Raises:
            InvalidArgumentError: If entity_type is empty
            KeyNotFoundError: If the legacy table has no entry
        """
        return self._entities.resolve(entity_type, extra)

    def resolve_enchantment_keys(
        self, enchantments: Mapping[Enchantment, int] | None
    ) -> dict[Enchantment, CanonicalKey]:
        """Resolve each enchantment to its key; empty input gives {}."""
        return self._enchantments.resolve_enchantments(enchantments)

    def resolve_level_keys(
        self, enchantments: Mapping[Enchantment, int] | None
    ) -> dict[int, CanonicalKey]:
        """Resolve each distinct level to its key; empty input gives {}."""
        return self._enchantments.resolve_levels(enchantments)

    # ------------------------------------------------------------------
    # Composition and delivery
    # ------------------------------------------------------------------

    def compose_item_message(
        self,
        message: str | None,
        material: MaterialRef | None,
        durability: int = 0,
        enchantments: Mapping[Enchantment, int] | None = None,
        meta: ItemMeta | None = None,
    ) -> ComposeResult:
        """See MessageComposer.compose_item_message."""
        return self._composer.compose_item_message(
            message, material, durability, enchantments, meta
        )

    def compose_enchantment_message(
        self, message: str | None, enchantments: Mapping[Enchantment, int] | None
    ) -> ComposeResult:
        """See MessageComposer.compose_enchantment_message."""
        return self._composer.compose_enchantment_message(message, enchantments)

    def compose_entity_message(
        self, message: str | None, entity_type: str | None, extra: str | None = None
    ) -> ComposeResult:
        """See MessageComposer.compose_entity_message."""
        return self._composer.compose_entity_message(message, entity_type, extra)

    def send_item_message(
        self,
        player: str | None,
        message: str | None,
        material: MaterialRef | None,
        durability: int = 0,
        enchantments: Mapping[Enchantment, int] | None = None,
        meta: ItemMeta | None = None,
    ) -> bool:
        """Compose and deliver an item message. Returns False on any failure."""
        return self._composer.send_item_message(
            player, message, material, durability, enchantments, meta
        )

    def send_enchantment_message(
        self,
        player: str | None,
        message: str | None,
        enchantments: Mapping[Enchantment, int] | None,
    ) -> bool:
        """Compose and deliver an enchantment message. Returns False on any failure."""
        return self._composer.send_enchantment_message(player, message, enchantments)

    def send_entity_message(
        self,
        player: str | None,
        message: str | None,
        entity_type: str | None,
        extra: str | None = None,
    ) -> bool:
        """Compose and deliver an entity message. Returns False on any failure."""
        return self._composer.send_entity_message(player, message, entity_type, extra)

    # ------------------------------------------------------------------
    # Server-side display
    # ------------------------------------------------------------------

    def to_server_locale(self, key: CanonicalKey) -> str:
        """Reference-language display string for key, or the missing sentinel.

        Example:
            >>> engine.to_server_locale("entity.minecraft.pig")
            'Pig'
        """
        return self._translations.to_server_locale(key)
