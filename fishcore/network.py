"""Lobbies, players and the messages exchanged with the online service."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from fishcore.player_input import PlayerInput

LobbyId = str
PlayerId = str

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_E = TypeVar("_E", bound=Enum)


def _require_mapping(data: Any, type_name: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"invalid type: expected struct {type_name}")
    return data


def _required(data: dict, key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _string(data: dict, key: str) -> str:
    value = _required(data, key)
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{key}`: expected a string")
    return value


def _i32(data: dict, key: str) -> int:
    value = _required(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"invalid value for `{key}`: expected a 32-bit integer")
    return value


def _enum(enum_cls: type[_E], data: dict, key: str) -> _E:
    value = _required(data, key)
    for member in enum_cls:
        if member.value == value:
            return member
    raise ValueError(f"unknown variant {value!r} for `{key}` of {enum_cls.__name__}")


def _socket_addr(value: Any) -> str:
    """Validate ``ip:port`` or ``[ipv6]:port`` and return it normalized."""
    if not isinstance(value, str):
        raise ValueError("invalid socket address: expected a string")
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit() or int(port) > 65535:
        raise ValueError(f"invalid socket address {value!r}")
    if host.startswith("[") and host.endswith("]"):
        return f"[{ipaddress.IPv6Address(host[1:-1])}]:{int(port)}"
    return f"{ipaddress.IPv4Address(host)}:{int(port)}"


@dataclass(frozen=True)
class Server:
    """Addresses of a game server, each as ``ip:port``."""

    http: str
    udp: str
    tcp: str

    def __post_init__(self) -> None:
        for name in ("http", "udp", "tcp"):
            object.__setattr__(self, name, _socket_addr(getattr(self, name)))

    def to_dict(self) -> dict[str, str]:
        """Return the serialized form."""
        return {"http": self.http, "udp": self.udp, "tcp": self.tcp}

    @staticmethod
    def from_dict(data: Any) -> "Server":
        """Read a server; all three addresses are required."""
        data = _require_mapping(data, "Server")
        return Server(*(_required(data, key) for key in ("http", "udp", "tcp")))


class LobbyPrivacy(Enum):
    """Who may see and join a lobby."""

    PUBLIC = "public"
    PRIVATE = "private"


class LobbyState(Enum):
    """Progress of the game hosted by a lobby."""

    NOT_STARTED = "NotStarted"
    READY = "Ready"
    STARTING = "Starting"
    RUNNING = "Running"
    ENDING = "Ending"
    ENDED = "Ended"


class ClientState(Enum):
    """Connection state of a player."""

    UNKNOWN = "Unknown"
    JOINED = "Joined"
    READY = "Ready"
    PLAYING = "Playing"
    LEFT = "Left"
    DONE = "Done"


@dataclass
class Player:
    """A player in a lobby; new players start in the unknown state."""

    id: PlayerId
    username: str
    state: ClientState = ClientState.UNKNOWN

    def to_dict(self) -> dict[str, str]:
        """Return the serialized form."""
        return {"id": self.id, "username": self.username, "state": self.state.value}

    @staticmethod
    def from_dict(data: Any) -> "Player":
        """Read a player; every field is required."""
        data = _require_mapping(data, "Player")
        return Player(
            id=_string(data, "id"),
            username=_string(data, "username"),
            state=_enum(ClientState, data, "state"),
        )


@dataclass
class Lobby:
    """A group of players waiting for, or playing, a game."""

    id: LobbyId
    name: str
    creator_player_id: PlayerId
    admin_player_id: PlayerId
    player_count: int
    capacity: int
    server: Server | None
    privacy: LobbyPrivacy
    state: LobbyState
    players: list[Player] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form; an absent server is written as null."""
        return {
            "id": self.id,
            "name": self.name,
            "creator_player_id": self.creator_player_id,
            "admin_player_id": self.admin_player_id,
            "player_count": self.player_count,
            "capacity": self.capacity,
            "server": None if self.server is None else self.server.to_dict(),
            "privacy": self.privacy.value,
            "state": self.state.value,
            "players": [player.to_dict() for player in self.players],
        }

    @staticmethod
    def from_dict(data: Any) -> "Lobby":
        """Read a lobby; the server may be null or absent."""
        data = _require_mapping(data, "Lobby")
        server = data.get("server")
        players = _required(data, "players")
        if not isinstance(players, list):
            raise ValueError("invalid type for `players`: expected a sequence")
        return Lobby(
            id=_string(data, "id"),
            name=_string(data, "name"),
            creator_player_id=_string(data, "creator_player_id"),
            admin_player_id=_string(data, "admin_player_id"),
            player_count=_i32(data, "player_count"),
            capacity=_i32(data, "capacity"),
            server=None if server is None else Server.from_dict(server),
            privacy=_enum(LobbyPrivacy, data, "privacy"),
            state=_enum(LobbyState, data, "state"),
            players=[Player.from_dict(item) for item in players],
        )


class NetworkEventKind(Enum):
    """The kinds of event received from the online service."""

    LOBBY_CREATED = "lobby_created"
    LOBBY_CHANGED = "lobby_changed"
    PLAYER_MARKED_READY = "player_marked_ready"
    PLAYER_MARKED_NOT_READY = "player_marked_not_ready"
    PLAYER_JOINED = "player_joined"
    PLAYER_LEFT = "player_left"
    PLAYER_RECONNECTING = "player_reconnecting"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"


_EVENT_FIELDS: dict[NetworkEventKind, tuple[str, ...]] = {
    NetworkEventKind.LOBBY_CREATED: ("lobby_id",),
    NetworkEventKind.LOBBY_CHANGED: ("lobby",),
    NetworkEventKind.PLAYER_MARKED_READY: ("player_id",),
    NetworkEventKind.PLAYER_MARKED_NOT_READY: ("player_id",),
    NetworkEventKind.PLAYER_JOINED: ("player_id", "username"),
    NetworkEventKind.PLAYER_LEFT: ("player_id",),
    NetworkEventKind.PLAYER_RECONNECTING: ("player_id",),
    NetworkEventKind.GAME_STARTED: ("lobby_id",),
    NetworkEventKind.GAME_ENDED: ("lobby_id",),
}

_EVENT_ATTRS = ("lobby_id", "lobby", "player_id", "username")


@dataclass
class NetworkEvent:
    """An event from the online service; only the fields of its kind are set."""

    kind: NetworkEventKind
    lobby_id: str | None = None
    lobby: Lobby | None = None
    player_id: PlayerId | None = None
    username: str | None = None

    def __post_init__(self) -> None:
        needed = _EVENT_FIELDS[self.kind]
        for name in _EVENT_ATTRS:
            present = getattr(self, name) is not None
            if name in needed and not present:
                raise ValueError(f"{self.kind.value} event needs `{name}`")
            if name not in needed and present:
                raise ValueError(f"{self.kind.value} event takes no `{name}`")

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return the serialized form, tagged by the kind's name."""
        body: dict[str, Any] = {}
        for name in _EVENT_FIELDS[self.kind]:
            value = getattr(self, name)
            body[name] = value.to_dict() if isinstance(value, Lobby) else value
        return {self.kind.value: body}

    @staticmethod
    def from_dict(data: Any) -> "NetworkEvent":
        """Read an event from its tagged form."""
        data = _require_mapping(data, "NetworkEvent")
        if len(data) != 1:
            raise ValueError("invalid type: expected a map with a single key")
        (tag, body), = data.items()
        kind = next((k for k in NetworkEventKind if k.value == tag), None)
        if kind is None:
            raise ValueError(f"unknown variant {tag!r} of NetworkEvent")
        body = _require_mapping(body, f"NetworkEvent::{tag}")
        values: dict[str, Any] = {}
        for name in _EVENT_FIELDS[kind]:
            values[name] = Lobby.from_dict(_required(body, name)) if name == "lobby" else _string(body, name)
        return NetworkEvent(kind, **values)


_UPDATE_PLAYER_INPUT = "update_player_input"


@dataclass
class NetworkMessage:
    """A player's input update sent to the online service."""

    player_id: PlayerId
    input: PlayerInput = field(default_factory=PlayerInput)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return the serialized form, tagged ``update_player_input``."""
        return {_UPDATE_PLAYER_INPUT: {"player_id": self.player_id, "input": self.input.to_dict()}}

    @staticmethod
    def from_dict(data: Any) -> "NetworkMessage":
        """Read a message from its tagged form."""
        data = _require_mapping(data, "NetworkMessage")
        if len(data) != 1:
            raise ValueError("invalid type: expected a map with a single key")
        (tag, body), = data.items()
        if tag != _UPDATE_PLAYER_INPUT:
            raise ValueError(f"unknown variant {tag!r} of NetworkMessage")
        body = _require_mapping(body, "NetworkMessage::update_player_input")
        return NetworkMessage(
            player_id=_string(body, "player_id"),
            input=PlayerInput.from_dict(_required(body, "input")),
        )