"""The per-frame state of a player's controls and the schemes that produce it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

_FIELDS = ("left", "right", "fire", "jump", "pickup", "float", "crouch", "slide")


@dataclass
class PlayerInput:
    """Which player actions are active this frame."""

    left: bool = False
    right: bool = False
    fire: bool = False
    jump: bool = False
    pickup: bool = False
    float: bool = False
    crouch: bool = False
    slide: bool = False

    def to_dict(self) -> dict[str, bool]:
        """Return the serialized form."""
        return {name: getattr(self, name) for name in _FIELDS}

    @staticmethod
    def from_dict(data: Any) -> "PlayerInput":
        """Read player input; every action must be present as a boolean."""
        if not isinstance(data, dict):
            raise ValueError("invalid type: expected struct PlayerInput")
        values: dict[str, bool] = {}
        for name in _FIELDS:
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, bool):
                raise ValueError(f"invalid type for `{name}`: expected a boolean")
            values[name] = value
        return PlayerInput(**values)


class InputSchemeKind(Enum):
    """The device a local player is controlled with."""

    KEYBOARD_RIGHT = "keyboard_right"
    KEYBOARD_LEFT = "keyboard_left"
    GAMEPAD = "gamepad"


@dataclass(frozen=True)
class GameInputScheme:
    """A local control scheme: one half of the keyboard, or a gamepad by id."""

    kind: InputSchemeKind
    gamepad_id: int | None = None

    def __post_init__(self) -> None:
        if self.kind is InputSchemeKind.GAMEPAD:
            if self.gamepad_id is None:
                raise ValueError("a gamepad input scheme needs a gamepad id")
        elif self.gamepad_id is not None:
            raise ValueError("a keyboard input scheme takes no gamepad id")