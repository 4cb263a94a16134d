"""flatten_core — flatten nested maps and arrays into single-level keys."""

from .config import FlattenConfig
from .errors import ConfigError, FlattenError, InvalidInputKind, UnknownStyleError
from .flattener import flatten, flatten_all
from .keys import Style, encode_key
from .text import flatten_all_text, flatten_text
from .values import Scalar, TreeValue, all_scalars, render_scalar

__all__ = [
    "flatten",
    "flatten_all",
    "flatten_text",
    "flatten_all_text",
    "Style",
    "encode_key",
    "all_scalars",
    "render_scalar",
    "Scalar",
    "TreeValue",
    "FlattenConfig",
    "FlattenError",
    "InvalidInputKind",
    "UnknownStyleError",
    "ConfigError",
]
