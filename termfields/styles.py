"""
Box border styles.

Maps each border style to the six glyphs used to draw it. The table is
built once at import and never changes.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Union

from .errors import UnknownStyleError


class BoxStyle(str, Enum):
    NONE = "none"        # Transparent, nothing is written
    CLEAR = "clear"      # Blanks over a previously drawn border
    ASCII = "ascii"
    UNICODE = "unicode"


class BoxGlyphs(NamedTuple):
    top_left: Optional[str]
    top_right: Optional[str]
    bottom_left: Optional[str]
    bottom_right: Optional[str]
    horizontal: Optional[str]
    vertical: Optional[str]


BOX_STYLES: Mapping[BoxStyle, BoxGlyphs] = MappingProxyType({
    BoxStyle.NONE: BoxGlyphs(None, None, None, None, None, None),
    BoxStyle.CLEAR: BoxGlyphs(" ", " ", " ", " ", " ", " "),
    BoxStyle.ASCII: BoxGlyphs("+", "+", "+", "+", "-", "|"),
    BoxStyle.UNICODE: BoxGlyphs("┌", "┐", "└", "┘", "─", "│"),
})

StyleLike = Union[BoxStyle, str]


def coerce_style(style: StyleLike) -> BoxStyle:
    """
    Normalize a style identifier to a BoxStyle.

    Accepts a BoxStyle member or its string value ("ascii", "unicode", ...).

    Raises:
        UnknownStyleError: If the identifier names no registered style
    """
    if isinstance(style, BoxStyle):
        return style
    try:
        return BoxStyle(style)
    except ValueError:
        raise UnknownStyleError(style) from None


def lookup(style: StyleLike) -> tuple[Optional[BoxGlyphs], bool]:
    """
    Look up the glyphs for a style without raising.

    Returns:
        (glyphs, True) for a known style, (None, False) otherwise
    """
    try:
        return BOX_STYLES[coerce_style(style)], True
    except (UnknownStyleError, KeyError):
        return None, False


def glyphs(style: StyleLike) -> BoxGlyphs:
    """Return the glyphs for a style, raising UnknownStyleError if unknown."""
    found, ok = lookup(style)
    if not ok:
        raise UnknownStyleError(style)
    return found
