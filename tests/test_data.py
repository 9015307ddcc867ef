import json
import tomllib

import pytest

from fishcore.config import WindowConfig
from fishcore.data import (
    DataError,
    deserialize_json_bytes,
    deserialize_json_file,
    deserialize_json_string,
    deserialize_toml_bytes,
    deserialize_toml_file,
    deserialize_toml_string,
    serialize_json_bytes,
    serialize_json_string,
    serialize_toml_bytes,
    serialize_toml_string,
)
from fishcore.errors import ErrorKind, GameError

SAMPLE = {"name": "level", "size": [3, 4], "nested": {"flag": True}}


def test_json_string_is_pretty_printed():
    assert serialize_json_string({"a": 1}) == '{\n  "a": 1\n}'


def test_json_string_round_trip():
    assert deserialize_json_string(serialize_json_string(SAMPLE)) == SAMPLE


def test_json_bytes_round_trip():
    raw = serialize_json_bytes(SAMPLE)
    assert isinstance(raw, bytes)
    assert deserialize_json_bytes(raw) == SAMPLE


def test_json_uses_to_dict():
    window = WindowConfig(10, 20)
    assert deserialize_json_string(serialize_json_string(window)) == window.to_dict()


def test_json_bad_input_raises():
    with pytest.raises(json.JSONDecodeError):
        deserialize_json_string("{not json")


def test_toml_string_round_trip():
    data = {"window": {"width": 10, "height": 20}, "title": "fish"}
    assert deserialize_toml_string(serialize_toml_string(data)) == data


def test_toml_bytes_round_trip():
    data = {"a": 1, "b": [1, 2]}
    assert deserialize_toml_bytes(serialize_toml_bytes(data)) == data


def test_toml_requires_table():
    with pytest.raises(TypeError):
        serialize_toml_string([1, 2])


def test_toml_bad_input_raises():
    with pytest.raises(tomllib.TOMLDecodeError):
        deserialize_toml_string("a = ")


def test_data_error_message():
    assert str(DataError("x.json", "bad")) == "File error: x.json: bad"


@pytest.mark.asyncio
async def test_json_file_round_trip(tmp_path):
    path = tmp_path / "data.json"
    path.write_bytes(serialize_json_bytes(SAMPLE))
    assert await deserialize_json_file(path) == SAMPLE


@pytest.mark.asyncio
async def test_json_file_missing_is_file_error(tmp_path):
    with pytest.raises(GameError) as info:
        await deserialize_json_file(tmp_path / "missing.json")
    assert info.value.kind is ErrorKind.FILE


@pytest.mark.asyncio
async def test_json_file_bad_content_is_parsing_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2")
    with pytest.raises(GameError) as info:
        await deserialize_json_file(path)
    assert info.value.kind is ErrorKind.PARSING
    assert str(info.value).startswith(f"File error: {path}: ")


@pytest.mark.asyncio
async def test_toml_file_round_trip(tmp_path):
    path = tmp_path / "data.toml"
    data = {"a": {"b": 2}}
    path.write_bytes(serialize_toml_bytes(data))
    assert await deserialize_toml_file(str(path)) == data


@pytest.mark.asyncio
async def test_toml_file_bad_content_is_parsing_error(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[table")
    with pytest.raises(GameError) as info:
        await deserialize_toml_file(path)
    assert info.value.kind is ErrorKind.PARSING