"""Vectors, rectangles, colours and transforms used throughout the engine."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Vec2:
    """A two dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "float | Vec2") -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: "float | Vec2") -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class IVec2:
    """A two dimensional vector of signed integers."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "IVec2") -> "IVec2":
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "IVec2") -> "IVec2":
        return IVec2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class UVec2:
    """A two dimensional vector of unsigned integers."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "UVec2") -> "UVec2":
        return UVec2(self.x + other.x, self.y + other.y)


@dataclass
class Rect:
    """A rectangle with float coordinates."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the range 0.0 to 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


def _to_u32(value: float) -> int:
    """Truncate a float to an unsigned 32-bit integer, saturating at the bounds."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


@dataclass
class URect:
    """A rectangle with unsigned integer coordinates."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def point(self) -> UVec2:
        """Return the origin of the rectangle."""
        return UVec2(self.x, self.y)

    def size(self) -> UVec2:
        """Return the width and height of the rectangle."""
        return UVec2(self.w, self.h)

    def left(self) -> int:
        """Return the left edge."""
        return self.x

    def right(self) -> int:
        """Return the right edge."""
        return self.x + self.w

    def top(self) -> int:
        """Return the top edge."""
        return self.y

    def bottom(self) -> int:
        """Return the bottom edge."""
        return self.y + self.h

    def move_to(self, destination: UVec2) -> None:
        """Move the origin to ``destination``."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sx: int, sy: int) -> None:
        """Multiply the width by ``sx`` and the height by ``sy``."""
        self.w *= sx
        self.h *= sy

    def contains(self, point: UVec2) -> bool:
        """Return whether ``point`` lies inside the rectangle (right and bottom edges excluded)."""
        return (
            self.left() <= point.x < self.right()
            and self.top() <= point.y < self.bottom()
        )

    def overlaps(self, other: "URect") -> bool:
        """Return whether this rectangle overlaps or touches ``other``."""
        return (
            self.left() <= other.right()
            and self.right() >= other.left()
            and self.top() <= other.bottom()
            and self.bottom() >= other.top()
        )

    def combine_with(self, other: "URect") -> "URect":
        """Return the smallest rectangle holding both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        w = max(self.right(), other.right()) - x
        h = max(self.bottom(), other.bottom()) - y
        return URect(x, y, w, h)

    def intersect(self, other: "URect") -> "URect | None":
        """Return the intersection of the two rectangles, or ``None`` if they do not meet."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return URect(left, top, right - left, bottom - top)

    def offset(self, offset: UVec2) -> "URect":
        """Return a copy moved by ``offset``."""
        return URect(self.x + offset.x, self.y + offset.y, self.w, self.h)

    @staticmethod
    def from_rect(rect: Rect) -> "URect":
        """Convert a float rectangle, truncating every coordinate."""
        return URect(_to_u32(rect.x), _to_u32(rect.y), _to_u32(rect.w), _to_u32(rect.h))

    @staticmethod
    def from_position_size(position: UVec2, size: UVec2) -> "URect":
        """Build a rectangle from its origin and its size."""
        return URect(position.x, position.y, size.x, size.y)

    def to_rect(self) -> Rect:
        """Convert to a float rectangle."""
        return Rect(float(self.x), float(self.y), float(self.w), float(self.h))


@dataclass
class Transform:
    """Position and rotation of an entity."""

    position: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0

    @staticmethod
    def from_position(position: Vec2) -> "Transform":
        """Create a transform at ``position`` with no rotation."""
        return Transform(position, 0.0)


def _hex_byte(text: str) -> int:
    if len(text) != 2 or any(c not in string.hexdigits for c in text):
        raise ValueError(f"invalid hex byte {text!r}")
    return int(text, 16)


def color_from_hex_string(value: str) -> Color:
    """Parse a colour from ``RRGGBB`` or ``RRGGBBAA``, with an optional leading ``#``."""
    text = value[1:] if value.startswith("#") else value
    if len(text) < 6:
        raise ValueError(f"hex colour {value!r} is too short")
    r = _hex_byte(text[0:2])
    g = _hex_byte(text[2:4])
    b = _hex_byte(text[4:6])
    a = _hex_byte(text[6:8]) if len(text) > 6 else 255
    return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def rotate_vector(vec: Vec2, rad: float) -> Vec2:
    """Rotate ``vec`` by ``rad`` radians."""
    sa = math.sin(rad)
    ca = math.cos(rad)
    return Vec2(ca * vec.x - sa * vec.y, sa * vec.x + ca * vec.y)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return (rad * 180.0) / math.pi


def is_zero(value: "float | int | Vec2 | IVec2 | UVec2") -> bool:
    """Return whether a number or vector is zero."""
    if isinstance(value, (Vec2, IVec2, UVec2)):
        return value.x == 0 and value.y == 0
    return value == 0