"""Chat color directive detection.

Legacy chat text embeds formatting as a section sign followed by one code
character ('§c' is red). Newer hosts add an extended RGB form,
'§x§R§R§G§G§B§B', spelling six hex digits one code at a time.

Python 3.13+. Zero external dependencies.
"""

import re
from types import MappingProxyType

from localekeys.constants import SECTION_SIGN

__all__ = [
    "LEGACY_COLORS",
    "detect_color",
    "last_legacy_color",
    "last_rgb_color",
]

# Code character -> client color name.
LEGACY_COLORS: MappingProxyType[str, str] = MappingProxyType({
    "0": "black",
    "1": "dark_blue",
    "2": "dark_green",
    "3": "dark_aqua",
    "4": "dark_red",
    "5": "dark_purple",
    "6": "gold",
    "7": "gray",
    "8": "dark_gray",
    "9": "blue",
    "a": "green",
    "b": "aqua",
    "c": "red",
    "d": "light_purple",
    "e": "yellow",
    "f": "white",
})

_RESET = "r"

_S = re.escape(SECTION_SIGN)
_RGB_DIRECTIVE = re.compile(rf"{_S}[xX]((?:{_S}[0-9a-fA-F]){{6}})")
_LEGACY_DIRECTIVE = re.compile(rf"{_S}([0-9a-fA-FrR])")


def last_rgb_color(text: str) -> str | None:
    """Return the last extended RGB directive as '#RRGGBB', or None.

    Example:
        >>> last_rgb_color("§x§f§f§0§0§a§aHi")
        '#ff00aa'
    """
    matches = _RGB_DIRECTIVE.findall(text)
    if not matches:
        return None
    return "#" + matches[-1].replace(SECTION_SIGN, "")


def last_legacy_color(text: str) -> str | None:
    """Return the name of the last legacy color code still in effect.

    A reset code ('§r') after the last color clears it. Format codes
    (bold, italic, ...) do not affect the result.

    Example:
        >>> last_legacy_color("§aGreen §cRed ")
        'red'
        >>> last_legacy_color("§cRed §rplain ")
    """
    color: str | None = None
    for raw_code in _LEGACY_DIRECTIVE.findall(text):
        code = raw_code.lower()
        color = None if code == _RESET else LEGACY_COLORS[code]
    return color


def detect_color(text: str) -> str | None:
    """Color attribute for a component following text.

    An extended RGB directive always wins over a legacy color code. A
    ``§r`` reset clears only legacy colors, so an earlier RGB directive still
    applies after it:

        >>> detect_color("§x§f§f§0§0§0§0Red §rplain ")
        '#ff0000'
        >>> detect_color("§cRed §rplain ")
    """
    if SECTION_SIGN not in text:
        return None
    return last_rgb_color(text) or last_legacy_color(text)
