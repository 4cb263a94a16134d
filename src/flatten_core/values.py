"""Tree value kinds accepted by the flattener."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Union

from .errors import InvalidInputKind

# JSON-shaped values: objects, arrays and scalars. ``Decimal`` plays the
# role of an untyped number token (``json.loads(..., parse_float=Decimal)``).
Scalar = Union[str, bool, int, float, Decimal, None]
Sequence = Union[list, tuple]
TreeValue = Union[Mapping[str, Any], Sequence, Scalar]

FlatMap = dict[str, Union[Scalar, list]]


def is_mapping(value: object) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def is_scalar(value: object) -> bool:
    return value is None or isinstance(value, (str, bool, int, float, Decimal))


def all_scalars(items: Sequence) -> bool:
    """Return True if every item is text or a number.

    Booleans and nulls do not count, so an array holding them is expanded
    element by element rather than kept whole.
    """
    for item in items:
        if isinstance(item, bool) or not isinstance(item, (str, int, float, Decimal)):
            return False
    return True


def render_scalar(value: Scalar) -> str:
    """Render a scalar the way it appears in flattened list entries."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if value is None:
        return "null"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        return str(value)
    raise InvalidInputKind(value)
