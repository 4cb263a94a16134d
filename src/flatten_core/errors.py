"""Exception types for flatten_core."""

from __future__ import annotations


class FlattenError(Exception):
    """Base class for every error raised by flatten_core."""


class InvalidInputKind(FlattenError, TypeError):
    """A value is not a mapping, a sequence or a supported scalar.

    ``path`` is the encoded key at which the value was found, or ``None``
    when the offending value was handed to the flattener directly.
    """

    def __init__(self, value: object, path: str | None = None,
                 expected: str = "a map or an array") -> None:
        self.value = value
        self.path = path
        kind = type(value).__name__
        if path is None:
            msg = f"Not a valid input: expected {expected}, got {kind}"
        else:
            msg = f"Not a valid input at {path!r}: unsupported type {kind}"
        super().__init__(msg)


class UnknownStyleError(FlattenError, ValueError):
    """A separator style that is not one of DOT, SLASH or RAILS."""

    def __init__(self, style: object) -> None:
        self.style = style
        super().__init__(f"Unknown separator style: {style!r}")


class ConfigError(FlattenError):
    """Invalid flatten configuration."""
