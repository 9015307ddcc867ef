import pytest

from fishcore.geometry import Color, IVec2, Rect, UVec2, Vec2
from fishcore.json_math import (
    FilterMode,
    color_from_json,
    color_opt_from_json,
    color_opt_to_json,
    color_to_json,
    default_filter_mode,
    default_scale,
    filter_mode_from_json,
    filter_mode_to_json,
    ivec2_from_json,
    ivec2_opt_from_json,
    ivec2_opt_to_json,
    ivec2_to_json,
    rect_from_json,
    rect_opt_from_json,
    rect_opt_to_json,
    rect_to_json,
    uvec2_from_json,
    uvec2_opt_from_json,
    uvec2_opt_to_json,
    uvec2_to_json,
    vec2_from_json,
    vec2_list_from_json,
    vec2_list_to_json,
    vec2_opt_from_json,
    vec2_opt_to_json,
    vec2_to_json,
)


def test_vec2_to_json_uses_x_and_y():
    assert vec2_to_json(Vec2(1.5, -2.0)) == {"x": 1.5, "y": -2.0}


def test_vec2_round_trip():
    value = Vec2(3.25, 7.5)
    assert vec2_from_json(vec2_to_json(value)) == value


def test_vec2_accepts_integers():
    assert vec2_from_json({"x": 4, "y": 5}) == Vec2(4.0, 5.0)


def test_vec2_missing_field():
    with pytest.raises(ValueError, match="missing field `y`"):
        vec2_from_json({"x": 1.0})


def test_vec2_unknown_field():
    with pytest.raises(ValueError, match="unknown field `z`"):
        vec2_from_json({"x": 1.0, "y": 2.0, "z": 3.0})


def test_vec2_rejects_bool_and_non_object():
    with pytest.raises(ValueError):
        vec2_from_json({"x": True, "y": 2.0})
    with pytest.raises(ValueError):
        vec2_from_json([1.0, 2.0])


def test_uvec2_round_trip_and_range():
    value = UVec2(8, 9)
    assert uvec2_from_json(uvec2_to_json(value)) == value
    with pytest.raises(ValueError):
        uvec2_from_json({"x": -1, "y": 0})
    with pytest.raises(ValueError):
        uvec2_from_json({"x": 1.5, "y": 0})


def test_ivec2_round_trip_allows_negative():
    value = IVec2(-4, 6)
    assert ivec2_from_json(ivec2_to_json(value)) == value
    with pytest.raises(ValueError):
        ivec2_from_json({"x": 2**31, "y": 0})


def test_optional_vectors():
    assert vec2_opt_to_json(None) is None
    assert vec2_opt_from_json(None) is None
    assert uvec2_opt_from_json(None) is None
    assert ivec2_opt_to_json(None) is None
    assert vec2_opt_from_json(vec2_opt_to_json(Vec2(1.0, 2.0))) == Vec2(1.0, 2.0)
    assert uvec2_opt_from_json(uvec2_opt_to_json(UVec2(1, 2))) == UVec2(1, 2)
    assert ivec2_opt_from_json(ivec2_opt_to_json(IVec2(-1, 2))) == IVec2(-1, 2)


def test_vec2_list_round_trip():
    values = [Vec2(1.0, 2.0), Vec2(-3.0, 4.5)]
    assert vec2_list_from_json(vec2_list_to_json(values)) == values
    with pytest.raises(ValueError):
        vec2_list_from_json({"x": 1.0, "y": 2.0})


def test_rect_uses_width_and_height():
    assert rect_to_json(Rect(1.0, 2.0, 3.0, 4.0)) == {
        "x": 1.0,
        "y": 2.0,
        "width": 3.0,
        "height": 4.0,
    }


def test_rect_accepts_aliases_and_round_trips():
    assert rect_from_json({"x": 1, "y": 2, "w": 3, "h": 4}) == Rect(1.0, 2.0, 3.0, 4.0)
    value = Rect(0.5, 1.5, 2.5, 3.5)
    assert rect_from_json(rect_to_json(value)) == value


def test_rect_duplicate_alias_is_error():
    with pytest.raises(ValueError, match="duplicate field `width`"):
        rect_from_json({"x": 0, "y": 0, "w": 1, "width": 1, "height": 1})


def test_rect_optional():
    assert rect_opt_to_json(None) is None
    assert rect_opt_from_json(None) is None
    value = Rect(1.0, 1.0, 2.0, 2.0)
    assert rect_opt_from_json(rect_opt_to_json(value)) == value


def test_color_uses_long_names():
    assert color_to_json(Color(0.25, 0.5, 0.75, 1.0)) == {
        "red": 0.25,
        "green": 0.5,
        "blue": 0.75,
        "alpha": 1.0,
    }


def test_color_accepts_short_names_and_round_trips():
    assert color_from_json({"r": 0.25, "g": 0.5, "b": 0.75, "a": 1}) == Color(0.25, 0.5, 0.75, 1.0)
    value = Color(0.1, 0.2, 0.3, 0.4)
    assert color_from_json(color_to_json(value)) == value
    with pytest.raises(ValueError, match="missing field `alpha`"):
        color_from_json({"r": 0.1, "g": 0.2, "b": 0.3})


def test_color_optional():
    assert color_opt_to_json(None) is None
    assert color_opt_from_json(None) is None
    value = Color(1.0, 0.0, 0.0, 1.0)
    assert color_opt_from_json(color_opt_to_json(value)) == value


def test_filter_mode_names_and_defaults():
    assert filter_mode_to_json(FilterMode.NEAREST) == "nearest_neighbor"
    assert filter_mode_to_json(FilterMode.LINEAR) == "linear"
    assert filter_mode_from_json("linear") is FilterMode.LINEAR
    assert default_filter_mode() is FilterMode.NEAREST
    assert default_scale() == 1.0
    with pytest.raises(ValueError):
        filter_mode_from_json("nearest")