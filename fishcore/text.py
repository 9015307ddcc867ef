"""Text alignment and string conversion helpers."""

from __future__ import annotations

import os
from enum import Enum

from fishcore.geometry import Vec2


class HorizontalAlignment(Enum):
    """Horizontal anchoring of a piece of text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VerticalAlignment(Enum):
    """Vertical anchoring of a piece of text."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


def aligned_text_position(
    position: Vec2,
    ha: HorizontalAlignment,
    va: VerticalAlignment,
    width: float,
    height: float,
) -> Vec2:
    """Return where text measuring ``width`` by ``height`` is drawn to align at ``position``."""
    if ha is HorizontalAlignment.LEFT:
        x = position.x
    elif ha is HorizontalAlignment.CENTER:
        x = position.x - width / 2.0
    else:
        x = position.x - width

    if va is VerticalAlignment.TOP:
        y = position.y + height
    elif va is VerticalAlignment.CENTER:
        y = position.y + height / 2.0
    else:
        y = position.y

    return Vec2(x, y)


def to_string_helper(value: "str | bytes | os.PathLike") -> str:
    """Convert a path or OS string to ``str``, replacing undecodable bytes."""
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)