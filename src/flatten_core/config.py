"""Configuration for flatten runs, loadable from YAML."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, UnknownStyleError
from .keys import Style

logger = logging.getLogger(__name__)

MODES = ("map", "list")


@dataclass(frozen=True)
class FlattenConfig:
    """Options shared by the library front-ends and the CLI.

    Example file::

        prefix: "p:"
        style: rails
        mode: list
        sorted: true
    """

    prefix: str = ""
    style: Style = Style.DOT
    sorted: bool = False
    mode: str = "map"

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str):
            raise ConfigError(f"prefix must be a string, got {type(self.prefix).__name__}")
        if not isinstance(self.style, Style):
            try:
                object.__setattr__(self, "style", Style.parse(self.style))
            except UnknownStyleError as exc:
                raise ConfigError(str(exc)) from exc
        if not isinstance(self.sorted, bool):
            raise ConfigError(f"sorted must be a boolean, got {type(self.sorted).__name__}")
        if self.mode not in MODES:
            raise ConfigError(f"mode must be one of {', '.join(MODES)}, got {self.mode!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FlattenConfig":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(map(str, unknown))}")
        return cls(**data)

    @classmethod
    def load(cls, path: Path) -> "FlattenConfig":
        """Read a YAML mapping from *path*; an empty file gives the defaults."""
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config {path} must contain a mapping")
        logger.debug("loaded config from %s", path)
        return cls.from_mapping(data)

    def replace(self, **overrides: Any) -> "FlattenConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)
