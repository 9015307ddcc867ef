"""Small helpers for reading loosely typed JSON data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fishcore.geometry import Vec2
from fishcore.json_math import (
    color_from_json,
    color_to_json,
    ivec2_from_json,
    ivec2_to_json,
    uvec2_from_json,
    uvec2_to_json,
    vec2_from_json,
    vec2_to_json,
)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1


def default_true() -> bool:
    """Return ``True``; used as a field default."""
    return True


def is_true(val: bool) -> bool:
    """Return whether ``val`` is true."""
    return bool(val)


def is_false(val: bool) -> bool:
    """Return whether ``val`` is false."""
    return not val


def one_or_many(value: Any) -> list:
    """Accept either one value or a list of values and always return a list.

    ``None`` (an absent field) gives an empty list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


class ParamKind(Enum):
    """The type held by a :class:`GenericParam`."""

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    STRING = "string"
    COLOR = "color"
    VEC2 = "vec2"
    IVEC2 = "ivec2"
    UVEC2 = "uvec2"
    VEC = "vec"
    HASH_MAP = "hash_map"


_OBJECT_KINDS = (
    (ParamKind.COLOR, color_from_json),
    (ParamKind.VEC2, vec2_from_json),
    (ParamKind.IVEC2, ivec2_from_json),
    (ParamKind.UVEC2, uvec2_from_json),
)


@dataclass
class GenericParam:
    """A JSON value whose type is decided by its shape."""

    kind: ParamKind
    value: Any

    @staticmethod
    def from_json(data: Any) -> "GenericParam":
        """Classify a decoded JSON value, trying each kind in declaration order."""
        if isinstance(data, bool):
            return GenericParam(ParamKind.BOOL, data)
        if isinstance(data, int):
            if _I32_MIN <= data <= _I32_MAX:
                return GenericParam(ParamKind.INT, data)
            if 0 <= data <= _U32_MAX:
                return GenericParam(ParamKind.UINT, data)
            return GenericParam(ParamKind.FLOAT, float(data))
        if isinstance(data, float):
            return GenericParam(ParamKind.FLOAT, data)
        if isinstance(data, str):
            return GenericParam(ParamKind.STRING, data)
        if isinstance(data, list):
            return GenericParam(ParamKind.VEC, [GenericParam.from_json(item) for item in data])
        if isinstance(data, dict):
            for kind, reader in _OBJECT_KINDS:
                try:
                    return GenericParam(kind, reader(data))
                except ValueError:
                    continue
            return GenericParam(
                ParamKind.HASH_MAP,
                {str(key): GenericParam.from_json(item) for key, item in data.items()},
            )
        raise ValueError("data did not match any variant of untagged enum GenericParam")

    def to_json(self) -> Any:
        """Return the decoded JSON value for this parameter."""
        match self.kind:
            case ParamKind.COLOR:
                return color_to_json(self.value)
            case ParamKind.VEC2:
                return vec2_to_json(self.value)
            case ParamKind.IVEC2:
                return ivec2_to_json(self.value)
            case ParamKind.UVEC2:
                return uvec2_to_json(self.value)
            case ParamKind.VEC:
                return [item.to_json() for item in self.value]
            case ParamKind.HASH_MAP:
                return {key: item.to_json() for key, item in self.value.items()}
            case _:
                return self.value

    def get_value(self, kind: ParamKind) -> Any:
        """Return the held value if it is of ``kind``, else ``None``."""
        return self.value if self.kind is kind else None


__all__ = [
    "GenericParam",
    "ParamKind",
    "Vec2",
    "default_true",
    "is_false",
    "is_true",
    "one_or_many",
]