"""Tests for the FastAPI tic-tac-toe interface."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tictactoe.ui import app


client = TestClient(app)


def _new_game() -> str:
    response = client.post("/api/game")
    assert response.status_code == 200
    return response.json()["id"]


def _move(game_id: str, cell_index: int):
    return client.post(f"/api/game/{game_id}/move", json={"cellIndex": cell_index})


def test_create_game_and_first_move():
    response = client.post("/api/game")
    assert response.status_code == 200
    payload = response.json()
    assert payload["currentPlayer"] == "X"
    assert payload["statusText"] == "Turn: X"
    assert payload["board"] == [""] * 9
    assert payload["scores"] == {"X": 0, "O": 0}

    game_id = payload["id"]
    move_response = _move(game_id, 4)
    assert move_response.status_code == 200
    state = move_response.json()
    assert state["board"][4] == "X"
    assert state["currentPlayer"] == "O"
    assert state["status"] == "in_progress"

    follow_up = client.get(f"/api/game/{game_id}")
    assert follow_up.status_code == 200
    assert follow_up.json() == state


def test_occupied_cell_leaves_state_unchanged():
    game_id = _new_game()
    first = _move(game_id, 0).json()

    duplicate = _move(game_id, 0)
    assert duplicate.status_code == 200
    assert duplicate.json() == first


def test_win_updates_scores_and_highlight():
    game_id = _new_game()
    for index in (0, 3, 1, 4):
        _move(game_id, index)
    state = _move(game_id, 2).json()
    assert state["status"] == "won"
    assert state["winner"] == "X"
    assert state["winningLine"] == [0, 1, 2]
    assert state["statusText"] == "Winner: X"
    assert state["scores"] == {"X": 1, "O": 0}

    again = client.get(f"/api/game/{game_id}").json()
    assert again["scores"] == {"X": 1, "O": 0}


def test_reset_keeps_scores_and_reset_all_clears_them():
    game_id = _new_game()
    for index in (0, 3, 1, 4, 2):
        _move(game_id, index)

    reset = client.post(f"/api/game/{game_id}/reset")
    assert reset.status_code == 200
    state = reset.json()
    assert state["board"] == [""] * 9
    assert state["currentPlayer"] == "X"
    assert state["scores"] == {"X": 1, "O": 0}

    reset_all = client.post(f"/api/game/{game_id}/reset-all")
    assert reset_all.status_code == 200
    assert reset_all.json()["scores"] == {"X": 0, "O": 0}


def test_out_of_range_cell_rejected():
    game_id = _new_game()
    response = _move(game_id, 9)
    assert response.status_code == 422


def test_missing_game_returns_404():
    assert client.get("/api/game/missing").status_code == 404
    assert _move("missing", 0).status_code == 404
    assert client.post("/api/game/missing/reset").status_code == 404


def test_index_serves_page():
    response = client.get("/")
    assert response.status_code == 200
    assert "Reset Game" in response.text
    assert "Reset All" in response.text
    assert "Turn: X" in response.text
