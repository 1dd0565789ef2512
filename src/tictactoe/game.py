"""Core rules and session scoring for two-player tic-tac-toe."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Player = str  # "X" or "O"
Cell = Optional[Player]
Line = Tuple[int, int, int]

PLAYERS: Tuple[Player, Player] = ("X", "O")
BOARD_SIZE = 9

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class InvalidIndexError(ValueError):
    """Raised when a move targets a cell outside the 3x3 board."""


class Status(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of a round, derived from the board on every query."""

    status: Status
    winner: Optional[Player] = None
    line: Line | Tuple[()] = ()

    @property
    def decided(self) -> bool:
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


def _empty_board() -> List[Cell]:
    return [None] * BOARD_SIZE


def _zero_scores() -> Dict[Player, int]:
    return {p: 0 for p in PLAYERS}


def compute_outcome(cells: List[Cell]) -> Outcome:
    """
    Scan the winning lines in order (rows, columns, diagonals) and report
    the first complete one. A full board without a line is a draw.
    """
    for line in WINNING_LINES:
        a, b, c = line
        v = cells[a]
        if v is not None and v == cells[b] == cells[c]:
            return Outcome(Status.WON, winner=v, line=line)
    if all(v is not None for v in cells):
        return DRAW
    return IN_PROGRESS


@dataclass
class TicTacToeGame:
    cells: List[Cell] = field(default_factory=_empty_board)
    current_player: Player = "X"
    score: Dict[Player, int] = field(default_factory=_zero_scores)

    # ---- API used by UI ----

    @property
    def board(self) -> List[Cell]:
        return list(self.cells)

    @property
    def turn(self) -> Player:
        return self.current_player

    @property
    def scores(self) -> Dict[Player, int]:
        return dict(self.score)

    def compute_outcome(self) -> Outcome:
        return compute_outcome(self.cells)

    def winning_line(self) -> Line | Tuple[()]:
        return self.compute_outcome().line

    def status_text(self) -> str:
        outcome = self.compute_outcome()
        if outcome.status is Status.WON:
            return f"Winner: {outcome.winner}"
        if outcome.status is Status.DRAW:
            return "It's a draw"
        return f"Turn: {self.current_player}"

    def apply_move(self, index: int) -> bool:
        """
        Place the current player's mark on ``index`` and pass the turn.

        Moves on an occupied cell or after the round is decided are ignored
        and return ``False``. An index off the board raises
        ``InvalidIndexError``.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndexError(f"Cell index must be an integer, got {index!r}")
        if not 0 <= index < BOARD_SIZE:
            raise InvalidIndexError(f"Cell index {index} is outside 0..8")

        if self.compute_outcome().decided:
            logger.debug("Ignoring move on %d: round already decided", index)
            return False
        if self.cells[index] is not None:
            logger.debug("Ignoring move on %d: cell already occupied", index)
            return False

        player = self.current_player
        self.cells[index] = player
        self.current_player = other(player)

        # Only this move can turn an in-progress round into a win.
        outcome = self.compute_outcome()
        if outcome.status is Status.WON:
            self.score[outcome.winner] += 1
            logger.info("%s wins on line %s", outcome.winner, outcome.line)
        elif outcome.status is Status.DRAW:
            logger.info("Round ended in a draw")
        return True

    def reset_round(self) -> None:
        self.cells = _empty_board()
        self.current_player = "X"

    def reset_all(self) -> None:
        self.reset_round()
        self.score = _zero_scores()
