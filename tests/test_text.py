from pathlib import Path, PurePosixPath

import pytest

from fishcore.geometry import Vec2
from fishcore.text import (
    HorizontalAlignment,
    VerticalAlignment,
    aligned_text_position,
    to_string_helper,
)

POSITION = Vec2(10.0, 20.0)
WIDTH = 4.0
HEIGHT = 6.0


def test_left_top():
    pos = aligned_text_position(
        POSITION, HorizontalAlignment.LEFT, VerticalAlignment.TOP, WIDTH, HEIGHT
    )
    assert pos.x == POSITION.x
    assert pos.y - HEIGHT == POSITION.y


def test_center_center():
    pos = aligned_text_position(
        POSITION, HorizontalAlignment.CENTER, VerticalAlignment.CENTER, WIDTH, HEIGHT
    )
    assert pos.x + WIDTH / 2 == POSITION.x
    assert pos.y - HEIGHT / 2 == POSITION.y


def test_right_bottom():
    pos = aligned_text_position(
        POSITION, HorizontalAlignment.RIGHT, VerticalAlignment.BOTTOM, WIDTH, HEIGHT
    )
    assert pos.x + WIDTH == POSITION.x
    assert pos.y == POSITION.y


@pytest.mark.parametrize("va", list(VerticalAlignment))
def test_horizontal_order(va):
    xs = [
        aligned_text_position(POSITION, ha, va, WIDTH, HEIGHT).x
        for ha in (HorizontalAlignment.LEFT, HorizontalAlignment.CENTER, HorizontalAlignment.RIGHT)
    ]
    assert xs[0] > xs[1] > xs[2]


def test_alignment_values_are_snake_case():
    assert HorizontalAlignment("center") is HorizontalAlignment.CENTER
    assert VerticalAlignment("bottom") is VerticalAlignment.BOTTOM
    with pytest.raises(ValueError):
        HorizontalAlignment("middle")


def test_to_string_helper_path():
    assert to_string_helper(PurePosixPath("assets/maps/level.json")) == "assets/maps/level.json"
    assert to_string_helper(Path("file.toml")) == "file.toml"


def test_to_string_helper_bytes_lossy():
    assert to_string_helper(b"abc") == "abc"
    assert to_string_helper(b"a\xffb") == "a\ufffdb"


def test_to_string_helper_str():
    assert to_string_helper("already text") == "already text"