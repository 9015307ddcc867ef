import json

import pytest

from fishcore.geometry import Color, Vec2
from fishcore.json_helpers import (
    GenericParam,
    ParamKind,
    default_true,
    is_false,
    is_true,
    one_or_many,
)


def test_bool_helpers():
    assert default_true() is True
    assert is_true(True) is True
    assert is_true(False) is False
    assert is_false(False) is True
    assert is_false(True) is False


def test_one_or_many():
    assert one_or_many(5) == [5]
    assert one_or_many("a") == ["a"]
    assert one_or_many([1, 2]) == [1, 2]
    assert one_or_many(None) == []


def test_scalar_kinds():
    assert GenericParam.from_json(True) == GenericParam(ParamKind.BOOL, True)
    assert GenericParam.from_json(-7) == GenericParam(ParamKind.INT, -7)
    assert GenericParam.from_json(2.5) == GenericParam(ParamKind.FLOAT, 2.5)
    assert GenericParam.from_json("hello") == GenericParam(ParamKind.STRING, "hello")


def test_integer_ranges():
    assert GenericParam.from_json(2**31 - 1).kind is ParamKind.INT
    assert GenericParam.from_json(2**31).kind is ParamKind.UINT
    assert GenericParam.from_json(2**32).kind is ParamKind.FLOAT
    assert GenericParam.from_json(-(2**31) - 1).kind is ParamKind.FLOAT


def test_object_as_vec2():
    param = GenericParam.from_json({"x": 1, "y": 2})
    assert param.kind is ParamKind.VEC2
    assert param.value == Vec2(1.0, 2.0)


def test_object_as_color():
    param = GenericParam.from_json({"r": 0.5, "g": 0.25, "b": 1.0, "a": 1.0})
    assert param.kind is ParamKind.COLOR
    assert param.value == Color(0.5, 0.25, 1.0, 1.0)


def test_other_object_is_hash_map():
    param = GenericParam.from_json({"x": 1, "name": "fish"})
    assert param.kind is ParamKind.HASH_MAP
    assert param.value["x"] == GenericParam(ParamKind.INT, 1)
    assert param.value["name"] == GenericParam(ParamKind.STRING, "fish")


def test_list_is_vec_of_mixed_members():
    param = GenericParam.from_json([1, "two", False])
    assert param.kind is ParamKind.VEC
    assert [p.kind for p in param.value] == [ParamKind.INT, ParamKind.STRING, ParamKind.BOOL]


def test_null_is_rejected():
    with pytest.raises(ValueError):
        GenericParam.from_json(None)
    with pytest.raises(ValueError):
        GenericParam.from_json([1, None])


def test_get_value():
    param = GenericParam.from_json(3)
    assert param.get_value(ParamKind.INT) == 3
    assert param.get_value(ParamKind.FLOAT) is None
    assert param.get_value(ParamKind.STRING) is None


def test_round_trip_through_json_text():
    data = {
        "speed": 1.5,
        "count": 3,
        "flag": True,
        "label": "fish",
        "origin": {"x": 1.0, "y": 2.0},
        "tint": {"red": 0.5, "green": 0.5, "blue": 0.5, "alpha": 1.0},
        "items": [1, 2, {"nested": "value"}],
    }
    param = GenericParam.from_json(json.loads(json.dumps(data)))
    assert param.to_json() == data
    assert GenericParam.from_json(param.to_json()) == param