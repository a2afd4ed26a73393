"""Chat text handling: color directives and payload assembly.

Python 3.13+.
"""

from .assembler import (
    StyledFragment,
    TemplateToken,
    assemble,
    build_components,
    build_payload,
    tokenize,
)
from .colors import LEGACY_COLORS, detect_color

__all__ = [
    "LEGACY_COLORS",
    "StyledFragment",
    "TemplateToken",
    "assemble",
    "build_components",
    "build_payload",
    "detect_color",
    "tokenize",
]
