"""Game configuration loaded from a TOML file."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fishcore.errors import ErrorKind, GameError
from fishcore.input_mapping import InputMapping

_U32_MAX = 2**32 - 1


def _u32(data: dict, key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"invalid value for `{key}`: expected an unsigned 32-bit integer")
    return value


def _flag(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"invalid type for `{key}`: expected a boolean")
    return value


@dataclass
class WindowConfig:
    """Size and mode of the game window."""

    width: int = 955
    height: int = 600
    is_fullscreen: bool = False
    is_high_dpi: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form."""
        return {
            "width": self.width,
            "height": self.height,
            "fullscreen": self.is_fullscreen,
            "high-dpi": self.is_high_dpi,
        }

    @staticmethod
    def from_dict(data: Any) -> "WindowConfig":
        """Read a window section; width and height are required."""
        if not isinstance(data, dict):
            raise ValueError("invalid type: expected struct WindowConfig")
        return WindowConfig(
            width=_u32(data, "width"),
            height=_u32(data, "height"),
            is_fullscreen=_flag(data, "fullscreen"),
            is_high_dpi=_flag(data, "high-dpi"),
        )


@dataclass
class Config:
    """The whole game configuration."""

    window: WindowConfig = field(default_factory=WindowConfig)
    input: InputMapping = field(default_factory=InputMapping)

    @staticmethod
    def load(path: str | os.PathLike) -> "Config":
        """Load the configuration at ``path``, or the defaults if it does not exist.

        The input bindings are verified before the configuration is returned.
        """
        path = Path(path)
        if path.exists():
            try:
                raw = path.read_bytes()
            except OSError as err:
                raise GameError.wrap(ErrorKind.FILE, err) from err
            try:
                config = Config.from_dict(tomllib.loads(raw.decode("utf-8")))
            except ValueError as err:
                raise GameError.wrap(ErrorKind.PARSING, err) from err
        else:
            config = Config()
        config.input.verify()
        return config

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form."""
        return {"window": self.window.to_dict(), "input": self.input.to_dict()}

    @staticmethod
    def from_dict(data: Any) -> "Config":
        """Read a configuration; absent sections take their defaults."""
        if not isinstance(data, dict):
            raise ValueError("invalid type: expected struct Config")
        window = data.get("window")
        input_mapping = data.get("input")
        return Config(
            window=WindowConfig() if window is None else WindowConfig.from_dict(window),
            input=InputMapping() if input_mapping is None else InputMapping.from_dict(input_mapping),
        )