"""Separator styles and compound key encoding."""

from __future__ import annotations

from enum import Enum, auto

from .errors import UnknownStyleError


class Style(Enum):
    """Presentation style of nested key components."""

    DOT = auto()    # a.b.1.c
    SLASH = auto()  # a/b/1/c
    RAILS = auto()  # a[b][1][c]

    @classmethod
    def parse(cls, style: "Style | str") -> Style:
        """Resolve *style* from a member or its case-insensitive name."""
        if isinstance(style, cls):
            return style
        if isinstance(style, str):
            try:
                return cls[style.strip().upper()]
            except KeyError:
                pass
        raise UnknownStyleError(style)


def check_style(style: object) -> Style:
    """Return *style* if it is a Style member, else raise UnknownStyleError."""
    if not isinstance(style, Style):
        raise UnknownStyleError(style)
    return style


def encode_key(top: bool, prefix: str, subkey: str, style: Style) -> str:
    """Join *subkey* onto *prefix*.

    The outermost level concatenates without a separator so that a caller
    supplied prefix such as ``"p:"`` sticks directly to the first segment.
    """
    if top:
        return prefix + subkey
    if style is Style.DOT:
        return prefix + "." + subkey
    if style is Style.SLASH:
        return prefix + "/" + subkey
    if style is Style.RAILS:
        return prefix + "[" + subkey + "]"
    raise UnknownStyleError(style)
