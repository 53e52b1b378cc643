"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from fifteen.models.board import Board


class GameState:
    """Holds the current board, move tallies, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.illegal_moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    @property
    def running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def record_attempt(self, legal: bool) -> None:
        if legal:
            self.moves += 1
        else:
            self.illegal_moves += 1

    @property
    def is_won(self) -> bool:
        return self.board.is_won()
