"""
HTTP tests for the game routes.

Tests the request layer end to end against a per-test SQLite database:
- input validation (422 before the rules are reached)
- translation of each failure kind to a status code and detail payload
- null result for unknown games on read-only lookups
"""

import pytest
from fastapi.testclient import TestClient
from uuid6 import uuid7

from tictactoe_server.main import app


@pytest.fixture
def client(test_store):
    with TestClient(app) as client:
        yield client


def _create(client) -> dict:
    response = client.post("/create_game", json={})
    assert response.status_code == 200
    return response.json()


def _move(client, game_id, position, player):
    return client.post(
        "/make_move",
        json={"game_id": game_id, "position": position, "player": player},
    )


def test_healthcheck(client):
    response = client.get("/healthcheck")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["timestamp"]


def test_create_game(client):
    game = _create(client)

    assert game["board"] == [None] * 9
    assert game["current_player"] == "X"
    assert game["status"] == "in_progress"
    assert game["result"] == "ongoing"
    assert game["winner"] is None
    assert game["created_at"] == game["updated_at"]


def test_create_game_without_body(client):
    response = client.post("/create_game")

    assert response.status_code == 200
    assert response.json()["current_player"] == "X"


def test_move_and_get(client):
    game = _create(client)

    response = _move(client, game["game_id"], 4, "X")

    assert response.status_code == 200
    moved = response.json()
    assert moved["board"] == [None, None, None, None, "X", None, None, None, None]
    assert moved["current_player"] == "O"
    assert moved["status"] == "in_progress"

    fetched = client.get(f"/get_game/{game['game_id']}")
    assert fetched.status_code == 200
    assert fetched.json() == moved


def test_get_unknown_game_returns_null(client):
    response = client.get(f"/get_game/{uuid7()}")

    assert response.status_code == 200
    assert response.json() is None


def test_get_games(client):
    first = _create(client)
    second = _create(client)

    response = client.get("/get_games")

    assert response.status_code == 200
    assert [game["game_id"] for game in response.json()] == [
        second["game_id"],
        first["game_id"],
    ]


def test_full_game_to_win(client):
    game = _create(client)
    for position, player in [(0, "X"), (3, "O"), (1, "X"), (4, "O")]:
        assert _move(client, game["game_id"], position, player).status_code == 200

    response = _move(client, game["game_id"], 2, "X")

    won = response.json()
    assert won["result"] == "X_wins"
    assert won["winner"] == "X"
    assert won["status"] == "completed"
    assert won["current_player"] == "X"

    rejected = _move(client, game["game_id"], 8, "O")
    assert rejected.status_code == 409
    assert rejected.json()["detail"]["kind"] == "game_already_completed"


def test_wrong_turn(client):
    game = _create(client)

    response = _move(client, game["game_id"], 0, "O")

    assert response.status_code == 409
    assert response.json()["detail"] == {
        "kind": "wrong_turn",
        "message": "It's not O's turn. Current player is X",
    }


def test_position_occupied(client):
    game = _create(client)
    _move(client, game["game_id"], 0, "X")

    response = _move(client, game["game_id"], 0, "O")

    assert response.status_code == 409
    assert response.json()["detail"]["kind"] == "position_occupied"


def test_move_on_unknown_game(client):
    response = _move(client, str(uuid7()), 0, "X")

    assert response.status_code == 404
    assert response.json()["detail"]["kind"] == "not_found"


@pytest.mark.parametrize(
    "payload",
    [
        {"position": 0, "player": "X"},
        {"game_id": "not-a-uuid", "position": 0, "player": "X"},
        {"game_id": "PLACEHOLDER", "position": 9, "player": "X"},
        {"game_id": "PLACEHOLDER", "position": -1, "player": "X"},
        {"game_id": "PLACEHOLDER", "position": True, "player": "X"},
        {"game_id": "PLACEHOLDER", "position": "4", "player": "X"},
        {"game_id": "PLACEHOLDER", "position": 4.5, "player": "X"},
        {"game_id": "PLACEHOLDER", "position": 0, "player": "Z"},
        {"game_id": "PLACEHOLDER", "position": 0},
    ],
)
def test_move_input_validation(client, payload):
    game = _create(client)
    if payload.get("game_id") == "PLACEHOLDER":
        payload = {**payload, "game_id": game["game_id"]}

    response = client.post("/make_move", json=payload)

    assert response.status_code == 422
    fetched = client.get(f"/get_game/{game['game_id']}").json()
    assert fetched == game


def test_reset_game(client):
    game = _create(client)
    _move(client, game["game_id"], 0, "X")

    response = client.post("/reset_game", json={"game_id": game["game_id"]})

    assert response.status_code == 200
    reset = response.json()
    assert reset["game_id"] == game["game_id"]
    assert reset["created_at"] == game["created_at"]
    assert reset["updated_at"] != game["updated_at"]
    assert reset["board"] == [None] * 9
    assert reset["current_player"] == "X"
    assert reset["status"] == "in_progress"
    assert reset["result"] == "ongoing"
    assert reset["winner"] is None


def test_reset_unknown_game(client):
    response = client.post("/reset_game", json={"game_id": str(uuid7())})

    assert response.status_code == 404
    assert response.json()["detail"]["kind"] == "not_found"
