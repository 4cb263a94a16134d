"""Flatten nested maps and arrays into single-level structures.

Map keys turn into compound names such as ``a.b.1.c`` (dot style),
``a/b/1/c`` (slash style) or ``a[b][1][c]`` (Rails style)::

    >>> flatten({"one": {"two": ["2a", {"x": "2b"}]}, "side": "value"})
    {'one.two.0': '2a', 'one.two.1.x': '2b', 'side': 'value'}

    >>> flatten({"one": {"two": ["2a", "2b"]}, "side": "value"})
    {'one.two': ['2a', '2b'], 'side': 'value'}

    >>> flatten({"foo": {"jim": "bean"}}, style=Style.RAILS)
    {'foo[jim]': 'bean'}

    >>> flatten_all({"meh": [1.01, 2]}, sorted=True)
    ['meh.0.1.01', 'meh.1.2']
"""

from __future__ import annotations

from typing import Any

from .errors import InvalidInputKind
from .keys import Style, check_style, encode_key
from .values import (
    FlatMap,
    TreeValue,
    all_scalars,
    is_mapping,
    is_scalar,
    is_sequence,
    render_scalar,
)


def flatten(nested: TreeValue, prefix: str = "", style: Style = Style.DOT) -> FlatMap:
    """Build a flat map from a nested map (or array).

    Arrays made only of text and numbers are kept whole under their key;
    any other array is expanded one key per element.  Distinct paths that
    encode to the same key overwrite each other, last one wins.
    """
    check_style(style)
    flat: FlatMap = {}
    _flatten_into(flat, nested, prefix, style, top=True)
    return flat


def flatten_all(
    nested: TreeValue,
    prefix: str = "",
    style: Style = Style.DOT,
    sorted: bool = False,
) -> list[str]:
    """Build a flat list of ``<key>.<value>`` entries from a nested value.

    Every array is expanded, including arrays of plain scalars.  Without
    *sorted* the entries follow traversal order.
    """
    check_style(style)
    result: list[str] = []
    _flatten_all_into(result, nested, prefix, style, top=True)
    if sorted:
        result.sort()
    return result


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def _children(nested: Any, prefix: str, style: Style, top: bool):
    """Yield ``(encoded_key, child)`` for a map or array, else raise."""
    if is_mapping(nested):
        for key, value in nested.items():
            if not isinstance(key, str):
                raise InvalidInputKind(key, prefix or None)
            yield encode_key(top, prefix, key, style), value
    elif is_sequence(nested):
        for i, value in enumerate(nested):
            yield encode_key(top, prefix, str(i), style), value
    else:
        raise InvalidInputKind(nested, None if top else prefix)


def _flatten_into(flat: FlatMap, nested: Any, prefix: str, style: Style, top: bool) -> None:
    for key, value in _children(nested, prefix, style, top):
        if is_mapping(value):
            _flatten_into(flat, value, key, style, top=False)
        elif is_sequence(value):
            if all_scalars(value):
                flat[key] = list(value)
            else:
                _flatten_into(flat, value, key, style, top=False)
        elif is_scalar(value):
            flat[key] = value
        else:
            raise InvalidInputKind(value, key)


def _flatten_all_into(result: list[str], nested: Any, prefix: str, style: Style, top: bool) -> None:
    for key, value in _children(nested, prefix, style, top):
        if is_mapping(value) or is_sequence(value):
            _flatten_all_into(result, value, key, style, top=False)
        elif is_scalar(value):
            result.append(f"{key}.{render_scalar(value)}")
        else:
            raise InvalidInputKind(value, key)
