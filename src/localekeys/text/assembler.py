"""Structured chat payload assembly.

Turns a message template with ``<item>``, ``<enchantment>``, ``<level>``,
and ``<mob>`` placeholders into a JSON text-component array in which each
placeholder becomes a ``{"translate": key}`` object, so that the client
renders the name in its own language.

Assembly is a single left-to-right scan of the template:

    "§cYou found <item>!"
        -> ["§cYou found ", {"translate": "item.minecraft.diamond", "color": "red"}, "!"]

Each placeholder occurrence consumes the next key of its category. Once a
category runs out of keys, further occurrences stay in the text verbatim.
A component's color comes from the last color directive in the template
text before that occurrence, because legacy codes inside a text span do not
carry over to sibling components.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from localekeys.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from localekeys.enums import Placeholder
from localekeys.text.colors import detect_color

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fragment model
    "StyledFragment",
    "TemplateToken",
    # Operations
    "assemble",
    "build_components",
    "build_payload",
    "tokenize",
]

_PLACEHOLDER_TOKEN = re.compile(
    re.escape(PLACEHOLDER_OPEN)
    + "(" + "|".join(re.escape(p.value) for p in Placeholder) + ")"
    + re.escape(PLACEHOLDER_CLOSE)
)


@dataclass(frozen=True, slots=True)
class StyledFragment:
    """A translate component with optional color.

    Attributes:
        key: Canonical locale key
        color: Named color ('red') or '#RRGGBB', or None
    """

    key: str
    color: str | None = None

    def to_component(self) -> dict[str, str]:
        """Return the JSON text component as a dict."""
        component = {"translate": self.key}
        if self.color is not None:
            component["color"] = self.color
        return component

    def to_json(self) -> str:
        """Return the component serialized as compact JSON."""
        return json.dumps(self.to_component(), ensure_ascii=False, separators=(",", ":"))

    def as_splice(self) -> str:
        """Return text that splices this component into a quoted text span.

        Closes the current string, emits the component, and reopens a string:
        ``",{"translate":"k"},"``.
        """
        return f'",{self.to_json()},"'


@dataclass(frozen=True, slots=True)
class TemplateToken:
    """One scanned piece of a template.

    Attributes:
        text: Literal text, or the raw token ('<item>') for placeholders
        offset: Start index of this piece in the template
        placeholder: Placeholder kind, or None for literal text
    """

    text: str
    offset: int
    placeholder: Placeholder | None = None


def tokenize(template: str) -> list[TemplateToken]:
    """Split a template into literal text and placeholder tokens.

    Angle-bracketed words outside the placeholder set stay literal.

    Example:
        >>> [t.text for t in tokenize("Got <item> x<n>")]
        ['Got ', '<item>', ' x<n>']
    """
    tokens: list[TemplateToken] = []
    position = 0
    for match in _PLACEHOLDER_TOKEN.finditer(template):
        if match.start() > position:
            tokens.append(TemplateToken(template[position : match.start()], position))
        tokens.append(TemplateToken(match.group(0), match.start(), Placeholder(match.group(1))))
        position = match.end()
    if position < len(template):
        tokens.append(TemplateToken(template[position:], position))
    return tokens


def assemble(template: str, key: str, placeholder: Placeholder | str) -> StyledFragment:
    """Build the fragment for the first occurrence of placeholder.

    Args:
        template: Message template
        key: Canonical key the placeholder stands for
        placeholder: Placeholder kind or its literal token ('<item>')

    Returns:
        StyledFragment colored by the template text before the placeholder
        (the whole template if the placeholder does not occur)
    """
    token = placeholder.token if isinstance(placeholder, Placeholder) else placeholder
    preceding = template.split(token, 1)[0]
    return StyledFragment(key=key, color=detect_color(preceding))


def build_components(
    template: str, keys: Mapping[Placeholder, Sequence[str]]
) -> list[Any]:
    """Scan template and build the text-component list.

    Args:
        template: Message template
        keys: Keys to substitute per placeholder kind, in occurrence order.
            An empty key removes its placeholder without emitting a component.

    Returns:
        List alternating literal strings and translate dicts. It always
        starts and ends with a string, so the first element carries no style
        that siblings would inherit.
    """
    remaining: dict[Placeholder, Iterator[str]] = {
        placeholder: iter(values) for placeholder, values in keys.items()
    }
    components: list[Any] = [""]

    for token in tokenize(template):
        if token.placeholder is None:
            components[-1] += token.text
            continue
        source = remaining.get(token.placeholder)
        key = next(source, None) if source is not None else None
        if key is None:
            components[-1] += token.text
        elif key:
            fragment = StyledFragment(key=key, color=detect_color(template[: token.offset]))
            components.append(fragment.to_component())
            components.append("")

    return components


def build_payload(template: str, keys: Mapping[Placeholder, Sequence[str]]) -> str:
    """Build the JSON payload for a template (see build_components).

    Example:
        >>> build_payload("<item>", {Placeholder.ITEM: ["item.minecraft.diamond_sword"]})
        '["",{"translate":"item.minecraft.diamond_sword"},""]'
    """
    components = build_components(template, keys)
    return json.dumps(components, ensure_ascii=False, separators=(",", ":"))
