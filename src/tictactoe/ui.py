"""FastAPI-powered web UI for playing tic-tac-toe in the browser."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, Tuple

import threading

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from .game import InvalidIndexError, TicTacToeGame

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for one local two-player game and its running scores."""

    game: TicTacToeGame = field(default_factory=TicTacToeGame)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(
    title="Tic Tac Toe", description="Two-player tic-tac-toe on a single device"
)


class MoveRequest(BaseModel):
    """Request payload for marking a cell on an existing game."""

    model_config = ConfigDict(populate_by_name=True)

    cell_index: int = Field(alias="cellIndex", ge=0, le=8)


def _create_session() -> Tuple[str, GameSession]:
    """Create a new game session and register it for later access."""

    session = GameSession()
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("Created game %s", session_id)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        game = session.game
        outcome = game.compute_outcome()
        return {
            "id": game_id,
            "board": [c or "" for c in game.board],
            "currentPlayer": game.turn,
            "status": outcome.status.value,
            "winner": outcome.winner,
            "winningLine": list(outcome.line),
            "statusText": game.status_text(),
            "scores": game.scores,
        }


def _apply_player_move(session: GameSession, cell_index: int) -> None:
    with session.lock:
        try:
            session.game.apply_move(cell_index)
        except InvalidIndexError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/api/game")
def create_game() -> Dict[str, object]:
    game_id, session = _create_session()
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_player_move(session, request.cell_index)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset")
def reset_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.reset_round()
    logger.info("Reset board of game %s", game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset-all")
def reset_all(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.reset_all()
    logger.info("Reset board and scores of game %s", game_id)
    return _serialize_session(game_id, session)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\" data-theme=\"light\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>Tic Tac Toe</title>
    <style>
      :root {
        --primary: #1976d2;
        --secondary: #ffffff;
        --accent: #f50057;
        --bg: #f5f7fb;
        --panel: #ffffff;
        --text: #13203a;
        --muted: rgba(19, 32, 58, 0.65);
        --cell: #eef2fa;
        --cell-hover: #e1e8f7;
        --win: rgba(25, 118, 210, 0.18);
        color-scheme: light;
        font-family: system-ui, -apple-system, BlinkMacSystemFont, \"Segoe UI\", sans-serif;
      }
      [data-theme=\"dark\"] {
        --bg: #10141f;
        --panel: #1a2030;
        --text: #e8ecf6;
        --muted: rgba(232, 236, 246, 0.65);
        --cell: #242b3d;
        --cell-hover: #2d3550;
        --win: rgba(25, 118, 210, 0.35);
        color-scheme: dark;
      }
      * {
        box-sizing: border-box;
      }
      body {
        margin: 0;
        min-height: 100vh;
        display: flex;
        flex-direction: column;
        background: var(--bg);
        color: var(--text);
        transition: background 0.3s ease, color 0.3s ease;
      }
      .t3-navbar {
        display: flex;
        align-items: center;
        justify-content: space-between;
        padding: 1rem 1.5rem;
      }
      .brand {
        display: flex;
        align-items: center;
        gap: 0.6rem;
        font-weight: 600;
        letter-spacing: 0.04em;
      }
      .brand-dot {
        width: 0.75rem;
        height: 0.75rem;
        border-radius: 50%;
        background: var(--accent);
      }
      .t3-container {
        flex: 1;
        display: flex;
        justify-content: center;
        align-items: center;
        padding: 1rem;
      }
      .panel {
        background: var(--panel);
        border-radius: 18px;
        box-shadow: 0 20px 40px rgba(34, 47, 79, 0.16);
        padding: clamp(1.25rem, 4vw, 2rem);
        width: min(460px, 100%);
      }
      .panel-row {
        display: flex;
        align-items: center;
        justify-content: space-between;
        gap: 0.75rem;
      }
      .score-card {
        text-align: center;
        min-width: 5rem;
      }
      .score-title {
        font-size: 0.85rem;
        color: var(--muted);
      }
      .score-value {
        font-size: 1.8rem;
        font-weight: 700;
      }
      #score-x {
        color: var(--primary);
      }
      #score-o {
        color: var(--accent);
      }
      .status-pill {
        padding: 0.45rem 0.9rem;
        border-radius: 999px;
        font-weight: 600;
        background: var(--cell);
      }
      .status-pill.won {
        background: var(--primary);
        color: var(--secondary);
      }
      .status-pill.draw {
        background: var(--muted);
        color: var(--panel);
      }
      .board {
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 0.6rem;
        margin: 1.5rem 0;
      }
      .square {
        aspect-ratio: 1;
        border: none;
        border-radius: 12px;
        background: var(--cell);
        color: var(--text);
        font-size: clamp(2rem, 10vw, 3rem);
        font-weight: 700;
        cursor: pointer;
        transition: background 0.2s ease;
      }
      .square:hover {
        background: var(--cell-hover);
      }
      .square.x {
        color: var(--primary);
      }
      .square.o {
        color: var(--accent);
      }
      .square-winning {
        background: var(--win);
      }
      .controls {
        justify-content: center;
      }
      .btn {
        border: none;
        border-radius: 10px;
        padding: 0.6rem 1.1rem;
        font-weight: 600;
        cursor: pointer;
        background: var(--primary);
        color: var(--secondary);
      }
      .btn.danger {
        background: var(--accent);
      }
      .btn.ghost {
        background: transparent;
        color: var(--text);
        font-size: 1.2rem;
      }
      .t3-footer {
        text-align: center;
        padding: 1rem;
        color: var(--muted);
        font-size: 0.85rem;
      }
    </style>
  </head>
  <body>
    <header class=\"t3-navbar\">
      <div class=\"brand\">
        <span class=\"brand-dot\"></span>
        <span class=\"brand-text\">Tic Tac Toe</span>
      </div>
      <div class=\"actions\">
        <button id=\"theme-toggle\" class=\"btn ghost\" aria-label=\"Toggle color mode\">&#127769;</button>
      </div>
    </header>

    <main class=\"t3-container\">
      <section class=\"panel\">
        <div class=\"panel-row\">
          <div class=\"score-card\">
            <div class=\"score-title\">Player X</div>
            <div id=\"score-x\" class=\"score-value\">0</div>
          </div>
          <div class=\"status\">
            <div id=\"status\" class=\"status-pill turn\">Turn: X</div>
          </div>
          <div class=\"score-card\">
            <div class=\"score-title\">Player O</div>
            <div id=\"score-o\" class=\"score-value\">0</div>
          </div>
        </div>

        <div id=\"board\" class=\"board\" role=\"grid\" aria-label=\"Tic Tac Toe Board\"></div>

        <div class=\"panel-row controls\">
          <button id=\"reset-game\" class=\"btn\" aria-label=\"Reset current game\">Reset Game</button>
          <button id=\"reset-all\" class=\"btn danger\" aria-label=\"Reset game and scores\">Reset All</button>
        </div>
      </section>
    </main>

    <footer class=\"t3-footer\">
      <span>2-Player Local &bull; Modern Minimal UI</span>
    </footer>

    <script>
      (() => {
        const boardEl = document.getElementById('board');
        const statusEl = document.getElementById('status');
        const scoreXEl = document.getElementById('score-x');
        const scoreOEl = document.getElementById('score-o');
        const themeButton = document.getElementById('theme-toggle');
        let gameId = null;
        let theme = 'light';

        const squares = Array.from({ length: 9 }, (_, index) => {
          const square = document.createElement('button');
          square.className = 'square';
          square.addEventListener('click', () => play(index));
          boardEl.appendChild(square);
          return square;
        });

        function applyTheme() {
          document.documentElement.setAttribute('data-theme', theme);
          themeButton.innerHTML = theme === 'light' ? '&#127769;' : '&#9728;&#65039;';
        }

        themeButton.addEventListener('click', () => {
          theme = theme === 'light' ? 'dark' : 'light';
          applyTheme();
        });

        function render(state) {
          gameId = state.id;
          state.board.forEach((value, index) => {
            const square = squares[index];
            square.textContent = value;
            square.classList.toggle('x', value === 'X');
            square.classList.toggle('o', value === 'O');
            square.classList.toggle('square-winning', state.winningLine.includes(index));
            square.setAttribute(
              'aria-label',
              `Square ${index + 1} ${value ? `with ${value}` : 'empty'}`
            );
          });
          statusEl.textContent = state.statusText;
          statusEl.className = 'status-pill ' + (
            state.status === 'won' ? 'won' : state.status === 'draw' ? 'draw' : 'turn'
          );
          scoreXEl.textContent = state.scores.X;
          scoreOEl.textContent = state.scores.O;
        }

        async function request(path, options) {
          const response = await fetch(path, options);
          if (!response.ok) {
            const payload = await response.json().catch(() => ({}));
            throw new Error(payload.detail || `Request failed (${response.status})`);
          }
          return response.json();
        }

        async function post(path, body) {
          return request(path, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: body === undefined ? undefined : JSON.stringify(body),
          });
        }

        async function play(index) {
          if (!gameId) {
            return;
          }
          try {
            render(await post(`/api/game/${gameId}/move`, { cellIndex: index }));
          } catch (error) {
            console.error(error);
          }
        }

        document.getElementById('reset-game').addEventListener('click', async () => {
          render(await post(`/api/game/${gameId}/reset`));
        });
        document.getElementById('reset-all').addEventListener('click', async () => {
          render(await post(`/api/game/${gameId}/reset-all`));
        });

        applyTheme();
        post('/api/game').then(render).catch((error) => console.error(error));
      })();
    </script>
  </body>
</html>
"""
