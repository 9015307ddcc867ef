import pytest

from fishcore.network import (
    ClientState,
    Lobby,
    LobbyPrivacy,
    LobbyState,
    NetworkEvent,
    NetworkEventKind,
    NetworkMessage,
    Player,
    Server,
)
from fishcore.player_input import PlayerInput


def make_lobby(server=None):
    return Lobby(
        id="lobby-1",
        name="Pond",
        creator_player_id="p1",
        admin_player_id="p1",
        player_count=2,
        capacity=4,
        server=server,
        privacy=LobbyPrivacy.PUBLIC,
        state=LobbyState.NOT_STARTED,
        players=[Player("p1", "alice"), Player("p2", "bob", ClientState.READY)],
    )


def test_new_player_state_is_unknown():
    assert Player("p1", "alice").state is ClientState.UNKNOWN


def test_player_round_trip():
    player = Player("p2", "bob", ClientState.PLAYING)
    assert Player.from_dict(player.to_dict()) == player


def test_server_round_trip_and_validation():
    server = Server("127.0.0.1:8080", "127.0.0.1:9000", "[::1]:9001")
    assert Server.from_dict(server.to_dict()) == server
    with pytest.raises(ValueError):
        Server("localhost", "127.0.0.1:1", "127.0.0.1:2")


def test_lobby_round_trip():
    lobby = make_lobby(Server("10.0.0.1:80", "10.0.0.1:81", "10.0.0.1:82"))
    assert Lobby.from_dict(lobby.to_dict()) == lobby


def test_lobby_without_server_writes_null_and_reads_absent():
    data = make_lobby().to_dict()
    assert data["server"] is None
    del data["server"]
    assert Lobby.from_dict(data).server is None


def test_lobby_enum_names():
    data = make_lobby().to_dict()
    assert data["privacy"] == "public"
    assert data["state"] == "NotStarted"


def test_lobby_rejects_out_of_range_count():
    data = make_lobby().to_dict()
    data["capacity"] = 2**31
    with pytest.raises(ValueError, match="capacity"):
        Lobby.from_dict(data)


def test_event_serialized_form():
    event = NetworkEvent(NetworkEventKind.PLAYER_LEFT, player_id="p1")
    assert event.to_dict() == {"player_left": {"player_id": "p1"}}


@pytest.mark.parametrize(
    "event",
    [
        NetworkEvent(NetworkEventKind.LOBBY_CREATED, lobby_id="lobby-1"),
        NetworkEvent(NetworkEventKind.LOBBY_CHANGED, lobby=make_lobby()),
        NetworkEvent(NetworkEventKind.PLAYER_JOINED, player_id="p3", username="carol"),
        NetworkEvent(NetworkEventKind.GAME_ENDED, lobby_id="lobby-1"),
    ],
)
def test_event_round_trip(event):
    assert NetworkEvent.from_dict(event.to_dict()) == event


def test_event_requires_its_fields():
    with pytest.raises(ValueError):
        NetworkEvent(NetworkEventKind.PLAYER_JOINED, player_id="p3")
    with pytest.raises(ValueError):
        NetworkEvent(NetworkEventKind.GAME_STARTED, lobby_id="x", player_id="p1")


def test_event_unknown_variant():
    with pytest.raises(ValueError, match="unknown variant"):
        NetworkEvent.from_dict({"lobby_exploded": {}})


def test_event_missing_field():
    with pytest.raises(ValueError, match="username"):
        NetworkEvent.from_dict({"player_joined": {"player_id": "p1"}})


def test_message_round_trip():
    message = NetworkMessage("p1", PlayerInput(left=True, fire=True))
    data = message.to_dict()
    assert list(data) == ["update_player_input"]
    assert NetworkMessage.from_dict(data) == message


def test_message_unknown_variant():
    with pytest.raises(ValueError):
        NetworkMessage.from_dict({"chat": {"player_id": "p1"}})