"""Tic-tac-toe package exposing the game engine and the web application."""

from .game import InvalidIndexError, Outcome, Status, TicTacToeGame
from .ui import app

__all__ = ["InvalidIndexError", "Outcome", "Status", "TicTacToeGame", "app"]
