"""Process-wide switch for debug drawing."""

from dataclasses import dataclass


@dataclass
class _DebugDrawState:
    enabled: bool = True


_state = _DebugDrawState()


def is_debug_draw_enabled() -> bool:
    """Return whether debug drawing is on."""
    return _state.enabled


def enable_debug_draw() -> None:
    """Turn debug drawing on."""
    _state.enabled = True


def disable_debug_draw() -> None:
    """Turn debug drawing off."""
    _state.enabled = False


def toggle_debug_draw() -> None:
    """Flip debug drawing on or off."""
    _state.enabled = not _state.enabled