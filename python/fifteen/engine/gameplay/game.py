"""Core gameplay logic: applies tile moves and logs them."""

from __future__ import annotations

from fifteen.engine.gamestate import GameState
from fifteen.models.board import Board
from fifteen.models.movelog import MoveLog


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, log: MoveLog | None = None) -> None:
        self.size = size
        self.log = log
        self.state = GameState(Board.initialize(size))

    @classmethod
    def from_board(cls, board: Board, log: MoveLog | None = None) -> "GamePlay":
        """Create a game session from an existing board (e.g. in tests)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.log = log
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    # -- logging --------------------------------------------------------------

    def snapshot(self) -> None:
        """Write the current board to the move log, if there is one."""
        if self.log is not None:
            self.log.record_board(self.board)

    # -- movement -------------------------------------------------------------

    def move(self, tile: int) -> bool:
        """Slide *tile* into the empty cell.

        The chosen tile is logged whether or not the move is legal.
        Returns True if the move was applied.
        """
        if self.log is not None:
            self.log.record_move(tile)

        moved = self.board.apply_move(tile)
        self.state.record_attempt(moved)
        return moved

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_won

    def finish(self) -> None:
        """Stop the clock once the session is over."""
        self.state.pause()
