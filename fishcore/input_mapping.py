"""Keyboard and gamepad bindings for the player actions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from fishcore.errors import ErrorKind, format_error

_E = TypeVar("_E", bound=Enum)


class KeyCode(Enum):
    """A keyboard key, valued by its serialized name."""

    SPACE = "Space"
    APOSTROPHE = "Apostrophe"
    COMMA = "Comma"
    MINUS = "Minus"
    PERIOD = "Period"
    SLASH = "Slash"
    KEY_0 = "Key0"
    KEY_1 = "Key1"
    KEY_2 = "Key2"
    KEY_3 = "Key3"
    KEY_4 = "Key4"
    KEY_5 = "Key5"
    KEY_6 = "Key6"
    KEY_7 = "Key7"
    KEY_8 = "Key8"
    KEY_9 = "Key9"
    SEMICOLON = "Semicolon"
    EQUAL = "Equal"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    LEFT_BRACKET = "LeftBracket"
    BACKSLASH = "Backslash"
    RIGHT_BRACKET = "RightBracket"
    GRAVE_ACCENT = "GraveAccent"
    WORLD_1 = "World1"
    WORLD_2 = "World2"
    ESCAPE = "Escape"
    ENTER = "Enter"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    INSERT = "Insert"
    DELETE = "Delete"
    RIGHT = "Right"
    LEFT = "Left"
    DOWN = "Down"
    UP = "Up"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    HOME = "Home"
    END = "End"
    CAPS_LOCK = "CapsLock"
    SCROLL_LOCK = "ScrollLock"
    NUM_LOCK = "NumLock"
    PRINT_SCREEN = "PrintScreen"
    PAUSE = "Pause"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    F25 = "F25"
    KP_0 = "Kp0"
    KP_1 = "Kp1"
    KP_2 = "Kp2"
    KP_3 = "Kp3"
    KP_4 = "Kp4"
    KP_5 = "Kp5"
    KP_6 = "Kp6"
    KP_7 = "Kp7"
    KP_8 = "Kp8"
    KP_9 = "Kp9"
    KP_DECIMAL = "KpDecimal"
    KP_DIVIDE = "KpDivide"
    KP_MULTIPLY = "KpMultiply"
    KP_SUBTRACT = "KpSubtract"
    KP_ADD = "KpAdd"
    KP_ENTER = "KpEnter"
    KP_EQUAL = "KpEqual"
    LEFT_SHIFT = "LeftShift"
    LEFT_CONTROL = "LeftControl"
    LEFT_ALT = "LeftAlt"
    LEFT_SUPER = "LeftSuper"
    RIGHT_SHIFT = "RightShift"
    RIGHT_CONTROL = "RightControl"
    RIGHT_ALT = "RightAlt"
    RIGHT_SUPER = "RightSuper"
    MENU = "Menu"
    UNKNOWN = "Unknown"


class Button(Enum):
    """A gamepad button, valued by its serialized name.

    ``UNKNOWN`` stands for buttons with no binding and cannot be serialized.
    """

    A = "A"
    B = "B"
    X = "X"
    Y = "Y"
    BACK = "Back"
    GUIDE = "Guide"
    START = "Start"
    LEFT_STICK = "LeftStick"
    RIGHT_STICK = "RightStick"
    LEFT_SHOULDER = "LeftShoulder"
    RIGHT_SHOULDER = "RightShoulder"
    LEFT_TRIGGER = "LeftTrigger"
    RIGHT_TRIGGER = "RightTrigger"
    D_PAD_UP = "DPadUp"
    D_PAD_DOWN = "DPadDown"
    D_PAD_LEFT = "DPadLeft"
    D_PAD_RIGHT = "DPadRight"
    UNKNOWN = "Unknown"


def _require_mapping(data: Any, type_name: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"invalid type: expected struct {type_name}")
    return data


def _required(data: dict, key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _read_enum(enum_cls: type[_E], value: Any, key: str) -> _E:
    skipped = enum_cls is Button and value == Button.UNKNOWN.value
    if not skipped:
        for member in enum_cls:
            if member.value == value:
                return member
    raise ValueError(f"unknown variant {value!r} for `{key}` of {enum_cls.__name__}")


def _write_button(button: Button) -> str:
    if button is Button.UNKNOWN:
        raise ValueError("the variant `Unknown` of Button cannot be serialized")
    return button.value


def _read_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError("invalid value for `id`: expected a non-negative integer")
    return value


@dataclass
class KeyMapping:
    """A primary key with an optional alternative."""

    primary: KeyCode
    secondary: KeyCode | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the serialized form, leaving out an absent secondary key."""
        result = {"primary": self.primary.value}
        if self.secondary is not None:
            result["secondary"] = self.secondary.value
        return result

    @staticmethod
    def from_dict(data: Any) -> "KeyMapping":
        """Read a key mapping from its serialized form."""
        data = _require_mapping(data, "KeyMapping")
        primary = _read_enum(KeyCode, _required(data, "primary"), "primary")
        raw_secondary = data.get("secondary")
        secondary = None if raw_secondary is None else _read_enum(KeyCode, raw_secondary, "secondary")
        return KeyMapping(primary, secondary)


_KEYBOARD_ACTIONS = ("left", "right", "fire", "jump", "pickup", "crouch", "slide")
_GAMEPAD_ACTIONS = ("fire", "jump", "pickup", "slide")


@dataclass
class KeyboardMapping:
    """The key bound to each player action."""

    left: KeyCode
    right: KeyCode
    fire: KeyCode
    jump: KeyCode
    pickup: KeyCode
    crouch: KeyCode
    slide: KeyCode

    @staticmethod
    def default_primary() -> "KeyboardMapping":
        """Return the default bindings around the arrow keys."""
        return KeyboardMapping(
            left=KeyCode.LEFT,
            right=KeyCode.RIGHT,
            fire=KeyCode.L,
            jump=KeyCode.UP,
            pickup=KeyCode.K,
            crouch=KeyCode.DOWN,
            slide=KeyCode.RIGHT_CONTROL,
        )

    @staticmethod
    def default_secondary() -> "KeyboardMapping":
        """Return the default bindings around WASD."""
        return KeyboardMapping(
            left=KeyCode.A,
            right=KeyCode.D,
            fire=KeyCode.V,
            jump=KeyCode.W,
            pickup=KeyCode.C,
            crouch=KeyCode.S,
            slide=KeyCode.F,
        )

    def actions(self) -> list[KeyCode]:
        """Return the bound keys in action order."""
        return [getattr(self, name) for name in _KEYBOARD_ACTIONS]

    def to_dict(self) -> dict[str, str]:
        """Return the serialized form."""
        return {name: getattr(self, name).value for name in _KEYBOARD_ACTIONS}

    @staticmethod
    def from_dict(data: Any) -> "KeyboardMapping":
        """Read a keyboard mapping; every action must be bound."""
        data = _require_mapping(data, "KeyboardMapping")
        return KeyboardMapping(
            **{name: _read_enum(KeyCode, _required(data, name), name) for name in _KEYBOARD_ACTIONS}
        )


@dataclass
class GamepadMapping:
    """The button bound to each player action on one gamepad."""

    id: int
    fire: Button
    jump: Button
    pickup: Button
    slide: Button

    @staticmethod
    def from_id(gamepad_id: int) -> "GamepadMapping":
        """Return the default bindings for the gamepad ``gamepad_id``."""
        return GamepadMapping(
            id=gamepad_id,
            fire=Button.B,
            jump=Button.A,
            pickup=Button.X,
            slide=Button.Y,
        )

    def actions(self) -> list[Button]:
        """Return the bound buttons in action order."""
        return [getattr(self, name) for name in _GAMEPAD_ACTIONS]

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form."""
        result: dict[str, Any] = {"id": self.id}
        result.update({name: _write_button(getattr(self, name)) for name in _GAMEPAD_ACTIONS})
        return result

    @staticmethod
    def from_dict(data: Any) -> "GamepadMapping":
        """Read a gamepad mapping; the id and every action are required."""
        data = _require_mapping(data, "GamepadMapping")
        return GamepadMapping(
            id=_read_id(_required(data, "id")),
            **{name: _read_enum(Button, _required(data, name), name) for name in _GAMEPAD_ACTIONS},
        )


@dataclass
class InputMapping:
    """All keyboard and gamepad bindings."""

    keyboard_primary: KeyboardMapping = field(default_factory=KeyboardMapping.default_primary)
    keyboard_secondary: KeyboardMapping = field(default_factory=KeyboardMapping.default_secondary)
    gamepads: list[GamepadMapping] = field(default_factory=list)

    def get_gamepad_mapping(self, gamepad_id: int) -> GamepadMapping | None:
        """Return a copy of the mapping for ``gamepad_id``, or ``None``."""
        for gamepad in self.gamepads:
            if gamepad.id == gamepad_id:
                return dataclasses.replace(gamepad)
        return None

    def verify(self) -> None:
        """Raise a config error if any key or gamepad button is bound twice.

        Keys are checked across both keyboards together, and buttons across
        all gamepads together.
        """
        used_keys: set[KeyCode] = set()
        for keyboard in (self.keyboard_primary, self.keyboard_secondary):
            for keycode in keyboard.actions():
                if keycode in used_keys:
                    raise format_error(f"Key '{keycode.value}' is mapped twice!", ErrorKind.CONFIG)
                used_keys.add(keycode)

        used_buttons: set[Button] = set()
        for gamepad in self.gamepads:
            for button in gamepad.actions():
                if button in used_buttons:
                    raise format_error(
                        f"Button '{button.value}' on gamepad '{gamepad.id}' is mapped twice!",
                        ErrorKind.CONFIG,
                    )
                used_buttons.add(button)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form, leaving out an empty gamepad list."""
        result: dict[str, Any] = {
            "keyboard-primary": self.keyboard_primary.to_dict(),
            "keyboard-secondary": self.keyboard_secondary.to_dict(),
        }
        if self.gamepads:
            result["gamepads"] = [gamepad.to_dict() for gamepad in self.gamepads]
        return result

    @staticmethod
    def from_dict(data: Any) -> "InputMapping":
        """Read an input mapping; absent sections take their defaults."""
        data = _require_mapping(data, "InputMapping")
        primary = data.get("keyboard-primary")
        secondary = data.get("keyboard-secondary")
        gamepads = data.get("gamepads", [])
        if not isinstance(gamepads, list):
            raise ValueError("invalid type for `gamepads`: expected a sequence")
        return InputMapping(
            keyboard_primary=(
                KeyboardMapping.default_primary() if primary is None else KeyboardMapping.from_dict(primary)
            ),
            keyboard_secondary=(
                KeyboardMapping.default_secondary()
                if secondary is None
                else KeyboardMapping.from_dict(secondary)
            ),
            gamepads=[GamepadMapping.from_dict(item) for item in gamepads],
        )