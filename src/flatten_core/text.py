"""JSON text front-end for the flattener."""

from __future__ import annotations

import json
import logging

from .errors import InvalidInputKind
from .flattener import flatten, flatten_all
from .keys import Style, check_style
from .values import is_mapping, is_sequence

logger = logging.getLogger(__name__)


def flatten_text(nested_text: str, prefix: str = "", style: Style = Style.DOT) -> str:
    """Flatten a JSON object given as text and return the flat object as JSON.

    Output is compact with keys sorted, e.g.::

        >>> flatten_text('{"a": {"b": {"c": {"d": "e"}}}, "number": 1.4567, "bool": true}')
        '{"a.b.c.d":"e","bool":true,"number":1.4567}'

    ``json.JSONDecodeError`` propagates unchanged; a top level that is not
    an object raises ``InvalidInputKind``.
    """
    check_style(style)
    nested = json.loads(nested_text)
    if not is_mapping(nested):
        raise InvalidInputKind(nested, expected="a JSON object")
    flat = flatten(nested, prefix, style)
    logger.debug("flattened %d leaves with %s style", len(flat), style.name.lower())
    return json.dumps(flat, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def flatten_all_text(
    nested_text: str,
    prefix: str = "",
    style: Style = Style.DOT,
    sorted: bool = False,
) -> list[str]:
    """Flatten a JSON object or array given as text into ``<key>.<value>`` entries."""
    check_style(style)
    nested = json.loads(nested_text)
    if not (is_mapping(nested) or is_sequence(nested)):
        raise InvalidInputKind(nested)
    entries = flatten_all(nested, prefix, style, sorted=sorted)
    logger.debug("flattened %d entries with %s style", len(entries), style.name.lower())
    return entries
