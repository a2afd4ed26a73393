"""MessageComposer - compose and send localized chat messages.

Orchestrates the three resolvers and the payload assembler:

    compose_item_message        - <item>, then <enchantment>/<level> pairs
    compose_enchantment_message - <enchantment>/<level> pairs only
    compose_entity_message      - <mob>

Compose methods never raise for resolution problems. Like a formatter
returning (result, errors), they return ``(payload, errors)``; a failed
resolution aborts the whole call with ``(None, (error,))`` so that no
partial message is ever produced. The send_* methods dispatch a composed
payload and reduce the outcome to a bool.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, TypeAlias

from localekeys.config import EngineConfig
from localekeys.core.types import EnchantmentStorageMeta
from localekeys.diagnostics import (
    DispatchError,
    ErrorTemplate,
    InvalidArgumentError,
    LocaleKeyError,
)
from localekeys.enums import Placeholder
from localekeys.resolvers.enchantment import level_key
from localekeys.text.assembler import build_payload

if TYPE_CHECKING:
    from localekeys.core.host import MessageDispatcher
    from localekeys.core.types import Enchantment, ItemMeta, MaterialRef
    from localekeys.resolvers import (
        EnchantmentKeyResolver,
        EntityKeyResolver,
        MaterialKeyResolver,
    )

__all__ = ["ComposeResult", "MessageComposer"]

logger = logging.getLogger(__name__)

ComposeResult: TypeAlias = tuple[str | None, tuple[LocaleKeyError, ...]]
"""(payload, errors): payload is None whenever errors is non-empty."""


class MessageComposer:
    """Compose structured chat payloads with client-translated names.

    Thread Safety:
        Holds only immutable collaborators. Safe for concurrent use provided
        the dispatcher is.

    Examples:
        >>> payload, errors = composer.compose_entity_message("§cBeware the <mob>!", "ZOMBIE")
        >>> payload
        '["§cBeware the ",{"translate":"entity.minecraft.zombie","color":"red"},"!"]'
        >>> errors
        ()
    """

    __slots__ = ("_config", "_dispatcher", "_enchantments", "_entities", "_materials")

    def __init__(
        self,
        materials: MaterialKeyResolver,
        entities: EntityKeyResolver,
        enchantments: EnchantmentKeyResolver,
        dispatcher: MessageDispatcher | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._materials = materials
        self._entities = entities
        self._enchantments = enchantments
        self._dispatcher = dispatcher
        self._config = config if config is not None else EngineConfig()

    @property
    def dispatcher(self) -> MessageDispatcher | None:
        """Configured dispatcher, if any."""
        return self._dispatcher

    # ------------------------------------------------------------------
    # Compose
    # ------------------------------------------------------------------

    def compose_item_message(
        self,
        message: str | None,
        material: MaterialRef | None,
        durability: int = 0,
        enchantments: Mapping[Enchantment, int] | None = None,
        meta: ItemMeta | None = None,
    ) -> ComposeResult:
        """Compose a message naming an item and, optionally, its enchantments.

        Args:
            message: Template with <item> and optional <enchantment>/<level>
            material: Item material (required)
            durability: Legacy data value; negative to ignore
            enchantments: Optional enchantment -> level mapping
            meta: Optional item metadata. Stored enchantments of an
                EnchantmentStorageMeta replace the enchantments argument.

        Returns:
            (payload, errors) tuple
        """
        try:
            self._require_message(message)
            item_key = self._materials.resolve(material, durability, meta)
        except LocaleKeyError as error:
            return self._failed("item", error)

        if isinstance(meta, EnchantmentStorageMeta):
            enchantments = meta.stored_enchants

        keys: dict[Placeholder, Sequence[str]] = {Placeholder.ITEM: [item_key]}
        keys.update(self._enchantment_placeholders(enchantments))
        return self._succeeded(message, keys)

    def compose_enchantment_message(
        self,
        message: str | None,
        enchantments: Mapping[Enchantment, int] | None,
    ) -> ComposeResult:
        """Compose a message naming enchantments and their levels.

        Args:
            message: Template with <enchantment> and <level> placeholders
            enchantments: Enchantment -> level mapping (required, may be empty)

        Returns:
            (payload, errors) tuple
        """
        try:
            self._require_message(message)
            if enchantments is None:
                raise InvalidArgumentError(ErrorTemplate.enchantments_required())
        except LocaleKeyError as error:
            return self._failed("enchantment", error)

        return self._succeeded(message, self._enchantment_placeholders(enchantments))

    def compose_entity_message(
        self,
        message: str | None,
        entity_type: str | None,
        extra: str | None = None,
    ) -> ComposeResult:
        """Compose a message naming an entity.

        Args:
            message: Template with a <mob> placeholder
            entity_type: Entity type constant (required)
            extra: Optional variant discriminator (profession, cat type, ...)

        Returns:
            (payload, errors) tuple
        """
        try:
            self._require_message(message)
            mob_key = self._entities.resolve(entity_type, extra)
        except LocaleKeyError as error:
            return self._failed("entity", error)

        return self._succeeded(message, {Placeholder.MOB: [mob_key]})

    # ------------------------------------------------------------------
    # Send
    # ------------------------------------------------------------------

    def send_item_message(
        self,
        player: str | None,
        message: str | None,
        material: MaterialRef | None,
        durability: int = 0,
        enchantments: Mapping[Enchantment, int] | None = None,
        meta: ItemMeta | None = None,
    ) -> bool:
        """Compose an item message and deliver it to player."""
        if not self._require_player(player):
            return False
        payload, _ = self.compose_item_message(message, material, durability, enchantments, meta)
        return self._send(player, payload)

    def send_enchantment_message(
        self,
        player: str | None,
        message: str | None,
        enchantments: Mapping[Enchantment, int] | None,
    ) -> bool:
        """Compose an enchantment message and deliver it to player."""
        if not self._require_player(player):
            return False
        payload, _ = self.compose_enchantment_message(message, enchantments)
        return self._send(player, payload)

    def send_entity_message(
        self,
        player: str | None,
        message: str | None,
        entity_type: str | None,
        extra: str | None = None,
    ) -> bool:
        """Compose an entity message and deliver it to player."""
        if not self._require_player(player):
            return False
        payload, _ = self.compose_entity_message(message, entity_type, extra)
        return self._send(player, payload)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _enchantment_placeholders(
        self, enchantments: Mapping[Enchantment, int] | None
    ) -> dict[Placeholder, Sequence[str]]:
        if not enchantments:
            return {}
        enchantment_keys = self._enchantments.resolve_enchantments(enchantments)
        return {
            Placeholder.ENCHANTMENT: [enchantment_keys[e] for e in enchantments],
            Placeholder.LEVEL: [level_key(level) for level in enchantments.values()],
        }

    @staticmethod
    def _require_message(message: str | None) -> None:
        if message is None:
            raise InvalidArgumentError(ErrorTemplate.message_required())

    @staticmethod
    def _require_player(player: str | None) -> bool:
        if not player:
            logger.warning("%s", ErrorTemplate.player_required().message)
            return False
        return True

    def _succeeded(
        self, message: str | None, keys: Mapping[Placeholder, Sequence[str]]
    ) -> ComposeResult:
        payload = build_payload(message or "", keys)
        logger.debug("Composed payload: %s", payload[: self._config.log_truncate])
        return payload, ()

    @staticmethod
    def _failed(kind: str, error: LocaleKeyError) -> ComposeResult:
        logger.warning("Unable to compose %s message: %s", kind, error)
        return None, (error,)

    def _send(self, player: str, payload: str | None) -> bool:
        if payload is None:
            return False
        if self._dispatcher is None:
            logger.error(
                "%s", ErrorTemplate.dispatch_failed(player, "no dispatcher configured").message
            )
            return False
        try:
            self._dispatcher.dispatch(player, payload)
        except DispatchError as error:
            logger.error("%s", error)
            return False
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.error("%s", ErrorTemplate.dispatch_failed(player, repr(exc)).message)
            return False
        return True
