"""Host runtime boundary protocols.

The engine never touches host internals directly. Two narrow protocols
isolate the environment-coupled parts:

    HostRegistry - capability probe and item localization lookup
    MessageDispatcher - delivery of a finished payload to a player

CommandDispatcher adapts any "run this console command" callable into a
MessageDispatcher by issuing ``tellraw <player> <payload>``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from localekeys.constants import DEFAULT_DISPATCH_COMMAND
from localekeys.diagnostics import DispatchError, ErrorTemplate

if TYPE_CHECKING:
    from localekeys.core.types import MaterialRef

__all__ = [
    "CommandDispatcher",
    "HostRegistry",
    "MessageDispatcher",
]

logger = logging.getLogger(__name__)


class HostRegistry(Protocol):
    """Protocol for the host's internal item registry.

    This is a Protocol (structural typing) rather than ABC so that host
    adapters and test fakes need no common base class.

    Example:
        >>> class DictRegistry:
        ...     def __init__(self, keys):
        ...         self._keys = keys
        ...     def has_material(self, name):
        ...         return name in self._keys
        ...     def item_translation_key(self, material):
        ...         return self._keys.get(material.name)
    """

    def has_material(self, name: str) -> bool:
        """Return True if the host knows a material constant with this name.

        Used as a capability probe: a material introduced in a given release
        proves that release's features are present.
        """

    def item_translation_key(self, material: MaterialRef) -> str | None:
        """Return the localization key of the material's internal item form.

        Returns:
            Key such as 'item.minecraft.diamond_sword', or None if the host has
            no internal item representation for the material.

        Raises:
            Exception: Any host-side failure; the resolver reports it as
                QueryFailedError.
        """


class MessageDispatcher(Protocol):
    """Protocol for delivering a structured-text payload to a player."""

    def dispatch(self, player: str, payload: str) -> None:
        """Deliver payload to player.

        Raises:
            DispatchError: If the host could not deliver the payload.
        """


@dataclass(frozen=True, slots=True)
class CommandDispatcher:
    """Dispatch payloads through a host console command.

    Attributes:
        run_command: Host callable executing a console command line; returns
            False if the host rejected the command.
        command: Command name (default 'tellraw').

    Example:
        >>> sent = []
        >>> dispatcher = CommandDispatcher(lambda line: sent.append(line) is None)
        >>> dispatcher.dispatch("Steve", '["hi"]')
        >>> sent
        ['tellraw Steve ["hi"]']
    """

    run_command: Callable[[str], bool]
    command: str = DEFAULT_DISPATCH_COMMAND

    def dispatch(self, player: str, payload: str) -> None:
        """Run ``<command> <player> <payload>`` on the host console.

        Raises:
            DispatchError: If the host returned False for the command.
        """
        line = f"{self.command} {player} {payload}"
        logger.debug("Dispatching: %s", line)
        if not self.run_command(line):
            raise DispatchError(
                ErrorTemplate.dispatch_failed(player, f"'{self.command}' command rejected")
            )
