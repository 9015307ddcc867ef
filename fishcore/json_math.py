"""JSON representations of vectors, rectangles, colours and filter modes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from fishcore.geometry import Color, IVec2, Rect, UVec2, Vec2

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1

_XY_FIELDS = {"x": ("x",), "y": ("y",)}
_RECT_FIELDS = {"x": ("x",), "y": ("y",), "width": ("width", "w"), "height": ("height", "h")}
_COLOR_FIELDS = {
    "red": ("red", "r"),
    "green": ("green", "g"),
    "blue": ("blue", "b"),
    "alpha": ("alpha", "a"),
}


class FilterMode(Enum):
    """Texture sampling mode."""

    LINEAR = "linear"
    NEAREST = "nearest_neighbor"


def default_scale() -> float:
    """Return the default draw scale."""
    return 1.0


def default_filter_mode() -> FilterMode:
    """Return the default texture filter mode."""
    return FilterMode.NEAREST


def _read_struct(
    data: Any,
    fields: Mapping[str, tuple[str, ...]],
    type_name: str,
    *,
    allow_unknown: bool,
) -> dict[str, Any]:
    """Collect the named fields of a JSON object, honouring aliases."""
    if not isinstance(data, dict):
        raise ValueError(f"invalid type: expected struct {type_name}")
    lookup = {key: name for name, keys in fields.items() for key in keys}
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = lookup.get(key)
        if name is None:
            if allow_unknown:
                continue
            expected = ", ".join(f"`{n}`" for n in fields)
            raise ValueError(f"unknown field `{key}`, expected one of {expected}")
        if name in values:
            raise ValueError(f"duplicate field `{name}`")
        values[name] = value
    missing = [name for name in fields if name not in values]
    if missing:
        raise ValueError(f"missing field `{missing[0]}`")
    return values


def _float(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"invalid type for `{field}`: expected a number")
    return float(value)


def _int(value: Any, field: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type for `{field}`: expected an integer")
    if not low <= value <= high:
        raise ValueError(f"invalid value for `{field}`: {value} is out of range")
    return value


def vec2_to_json(value: Vec2) -> dict[str, float]:
    """Return ``{"x": ..., "y": ...}`` for a float vector."""
    return {"x": value.x, "y": value.y}


def vec2_from_json(data: Any) -> Vec2:
    """Read a float vector from an object holding exactly ``x`` and ``y``."""
    fields = _read_struct(data, _XY_FIELDS, "Vec2", allow_unknown=False)
    return Vec2(_float(fields["x"], "x"), _float(fields["y"], "y"))


def uvec2_to_json(value: UVec2) -> dict[str, int]:
    """Return ``{"x": ..., "y": ...}`` for an unsigned vector."""
    return {"x": value.x, "y": value.y}


def uvec2_from_json(data: Any) -> UVec2:
    """Read an unsigned 32-bit vector from an object holding exactly ``x`` and ``y``."""
    fields = _read_struct(data, _XY_FIELDS, "UVec2", allow_unknown=False)
    return UVec2(_int(fields["x"], "x", 0, _U32_MAX), _int(fields["y"], "y", 0, _U32_MAX))


def ivec2_to_json(value: IVec2) -> dict[str, int]:
    """Return ``{"x": ..., "y": ...}`` for a signed vector."""
    return {"x": value.x, "y": value.y}


def ivec2_from_json(data: Any) -> IVec2:
    """Read a signed 32-bit vector from an object holding exactly ``x`` and ``y``."""
    fields = _read_struct(data, _XY_FIELDS, "IVec2", allow_unknown=False)
    return IVec2(
        _int(fields["x"], "x", _I32_MIN, _I32_MAX),
        _int(fields["y"], "y", _I32_MIN, _I32_MAX),
    )


def vec2_opt_to_json(value: Vec2 | None) -> dict[str, float] | None:
    """Like :func:`vec2_to_json`, mapping ``None`` to null."""
    return None if value is None else vec2_to_json(value)


def vec2_opt_from_json(data: Any) -> Vec2 | None:
    """Like :func:`vec2_from_json`, mapping null to ``None``."""
    return None if data is None else vec2_from_json(data)


def uvec2_opt_to_json(value: UVec2 | None) -> dict[str, int] | None:
    """Like :func:`uvec2_to_json`, mapping ``None`` to null."""
    return None if value is None else uvec2_to_json(value)


def uvec2_opt_from_json(data: Any) -> UVec2 | None:
    """Like :func:`uvec2_from_json`, mapping null to ``None``."""
    return None if data is None else uvec2_from_json(data)


def ivec2_opt_to_json(value: IVec2 | None) -> dict[str, int] | None:
    """Like :func:`ivec2_to_json`, mapping ``None`` to null."""
    return None if value is None else ivec2_to_json(value)


def ivec2_opt_from_json(data: Any) -> IVec2 | None:
    """Like :func:`ivec2_from_json`, mapping null to ``None``."""
    return None if data is None else ivec2_from_json(data)


def vec2_list_to_json(values: list[Vec2]) -> list[dict[str, float]]:
    """Serialize a list of float vectors."""
    return [vec2_to_json(value) for value in values]


def vec2_list_from_json(data: Any) -> list[Vec2]:
    """Read a list of float vectors."""
    if not isinstance(data, list):
        raise ValueError("invalid type: expected a sequence")
    return [vec2_from_json(item) for item in data]


def rect_to_json(value: Rect) -> dict[str, float]:
    """Return a rectangle as ``x``, ``y``, ``width`` and ``height``."""
    return {"x": value.x, "y": value.y, "width": value.w, "height": value.h}


def rect_from_json(data: Any) -> Rect:
    """Read a rectangle; ``w`` and ``h`` are accepted for ``width`` and ``height``."""
    fields = _read_struct(data, _RECT_FIELDS, "Rect", allow_unknown=True)
    return Rect(
        _float(fields["x"], "x"),
        _float(fields["y"], "y"),
        _float(fields["width"], "width"),
        _float(fields["height"], "height"),
    )


def rect_opt_to_json(value: Rect | None) -> dict[str, float] | None:
    """Like :func:`rect_to_json`, mapping ``None`` to null."""
    return None if value is None else rect_to_json(value)


def rect_opt_from_json(data: Any) -> Rect | None:
    """Like :func:`rect_from_json`, mapping null to ``None``."""
    return None if data is None else rect_from_json(data)


def color_to_json(value: Color) -> dict[str, float]:
    """Return a colour as ``red``, ``green``, ``blue`` and ``alpha``."""
    return {"red": value.r, "green": value.g, "blue": value.b, "alpha": value.a}


def color_from_json(data: Any) -> Color:
    """Read a colour; ``r``, ``g``, ``b`` and ``a`` are accepted as short names."""
    fields = _read_struct(data, _COLOR_FIELDS, "Color", allow_unknown=True)
    return Color(
        _float(fields["red"], "red"),
        _float(fields["green"], "green"),
        _float(fields["blue"], "blue"),
        _float(fields["alpha"], "alpha"),
    )


def color_opt_to_json(value: Color | None) -> dict[str, float] | None:
    """Like :func:`color_to_json`, mapping ``None`` to null."""
    return None if value is None else color_to_json(value)


def color_opt_from_json(data: Any) -> Color | None:
    """Like :func:`color_from_json`, mapping null to ``None``."""
    return None if data is None else color_from_json(data)


def filter_mode_to_json(value: FilterMode) -> str:
    """Return the JSON name of a filter mode."""
    return value.value


def filter_mode_from_json(data: Any) -> FilterMode:
    """Read a filter mode from its JSON name."""
    for mode in FilterMode:
        if mode.value == data:
            return mode
    raise ValueError(f"unknown filter mode {data!r}, expected `linear` or `nearest_neighbor`")