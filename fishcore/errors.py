"""The error type shared by the engine and the kinds it is sorted into."""

from __future__ import annotations

from enum import Enum

from fishcore.status import RequestStatus


class ErrorKind(Enum):
    """Broad category of a :class:`GameError`."""

    GENERAL = "general"
    CONFIG = "config"
    ECS = "ecs"
    FILE = "file"
    PARSING = "parsing"
    INPUT = "input"
    API = "api"
    NETWORK = "network"
    EDITOR_ACTION = "editor_action"

    def as_str(self) -> str:
        """Return the human readable name of this kind."""
        return _KIND_NAMES[self]


_KIND_NAMES = {
    ErrorKind.GENERAL: "General error",
    ErrorKind.CONFIG: "Config error",
    ErrorKind.ECS: "ECS error",
    ErrorKind.FILE: "File error",
    ErrorKind.PARSING: "Parsing error",
    ErrorKind.INPUT: "Input error",
    ErrorKind.API: "Api error",
    ErrorKind.NETWORK: "Network error",
    ErrorKind.EDITOR_ACTION: "Editor action error",
}


class GameError(Exception):
    """An error carrying an :class:`ErrorKind` and a message.

    When no message is given, the kind's name is used.
    """

    def __init__(self, kind: ErrorKind = ErrorKind.GENERAL, message: str | None = None):
        self.kind = kind
        self.message = kind.as_str() if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"GameError(kind={self.kind.name}, message={self.message!r})"

    @classmethod
    def from_kind(cls, kind: ErrorKind) -> "GameError":
        """Create an error whose message is the name of its kind."""
        return cls(kind)

    @classmethod
    def from_status(cls, status: RequestStatus) -> "GameError":
        """Create an API error describing a failed request status."""
        return cls(ErrorKind.API, f"[{status.as_code()}]: {status.as_str()}")

    @classmethod
    def wrap(cls, kind: ErrorKind, error: BaseException) -> "GameError":
        """Wrap another exception, keeping its message and chaining it as the cause."""
        wrapped = cls(kind, str(error))
        wrapped.__cause__ = error
        return wrapped


def format_error(message: str, kind: ErrorKind = ErrorKind.GENERAL) -> GameError:
    """Create an error of ``kind`` (general by default) with a formatted message."""
    return GameError(kind, message)