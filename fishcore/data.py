"""Reading and writing JSON and TOML data."""

from __future__ import annotations

import asyncio
import json
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from fishcore.errors import ErrorKind, GameError
from fishcore.text import to_string_helper


class DataError(Exception):
    """A data file that could not be parsed."""

    def __init__(self, path: str, err: BaseException | str):
        self.path = path
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"File error: {self.path}: {self.err}"

    def __repr__(self) -> str:
        return str(self)


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def serialize_json_string(value: Any) -> str:
    """Serialize ``value`` (or its ``to_dict()``) into pretty printed JSON."""
    return json.dumps(_plain(value), indent=2, ensure_ascii=False)


def serialize_json_bytes(value: Any) -> bytes:
    """Serialize ``value`` into pretty printed JSON encoded as UTF-8."""
    return serialize_json_string(value).encode("utf-8")


def deserialize_json_bytes(value: bytes) -> Any:
    """Parse JSON bytes; raises :class:`json.JSONDecodeError` on bad input."""
    return json.loads(value)


def deserialize_json_string(value: str) -> Any:
    """Parse a JSON string; raises :class:`json.JSONDecodeError` on bad input."""
    return json.loads(value)


async def _load_file(path: str) -> bytes:
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as err:
        raise GameError.wrap(ErrorKind.FILE, err) from err


async def deserialize_json_file(path: str | os.PathLike) -> Any:
    """Read and parse a JSON file.

    A missing or unreadable file raises a file error; bad content raises a
    parsing error naming the path.
    """
    path_str = to_string_helper(path)
    raw = await _load_file(path_str)
    try:
        return json.loads(raw)
    except ValueError as err:
        raise GameError.wrap(ErrorKind.PARSING, DataError(path_str, err)) from err


def serialize_toml_string(value: Any) -> str:
    """Serialize a table (or an object's ``to_dict()``) into TOML."""
    data = _plain(value)
    if not isinstance(data, dict):
        raise TypeError("only tables can be serialized as TOML documents")
    return tomli_w.dumps(data)


def serialize_toml_bytes(value: Any) -> bytes:
    """Serialize a table into TOML encoded as UTF-8."""
    return serialize_toml_string(value).encode("utf-8")


def deserialize_toml_bytes(value: bytes) -> dict[str, Any]:
    """Parse TOML bytes; raises :class:`ValueError` on bad input."""
    return tomllib.loads(value.decode("utf-8"))


def deserialize_toml_string(value: str) -> dict[str, Any]:
    """Parse a TOML string; raises :class:`tomllib.TOMLDecodeError` on bad input."""
    return tomllib.loads(value)


async def deserialize_toml_file(path: str | os.PathLike) -> dict[str, Any]:
    """Read and parse a TOML file.

    A missing or unreadable file raises a file error; bad content raises a
    parsing error naming the path.
    """
    path_str = to_string_helper(path)
    raw = await _load_file(path_str)
    try:
        return deserialize_toml_bytes(raw)
    except ValueError as err:
        raise GameError.wrap(ErrorKind.PARSING, DataError(path_str, err)) from err