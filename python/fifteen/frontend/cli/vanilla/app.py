"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print, ANSI codes, input) for rendering and input.
Draws the board, asks for a tile number, and repeats until the puzzle
is solved or the player quits.
"""

from __future__ import annotations

import sys
import time

from fifteen.engine.gameplay import GamePlay
from fifteen.frontend.cli.input_handler import QUIT, read_tile
from fifteen.models.board import BLANK, Board
from fifteen.models.movelog import MoveLog


# -- ANSI helpers -------------------------------------------------------------


def _clear() -> None:
    sys.stdout.write("\033[2J")
    sys.stdout.write("\033[0;0H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the board as text: `` _`` for the blank, ``%2i`` for tiles."""
    lines: list[str] = []
    for row in board.tiles:
        cells = [" _" if val == BLANK else f"{val:2d}" for val in row]
        lines.append("".join(cells))
        lines.append("")
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _greet(delay: float) -> None:
    _clear()
    print("WELCOME TO GAME OF FIFTEEN")
    time.sleep(delay * 4)


def _show_win(game: GamePlay) -> None:
    print("ftw!")
    print(
        f"Solved in {game.state.moves} moves "
        f"({_format_time(game.state.elapsed_time)})."
    )


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay, delay: float) -> None:
    while True:
        _clear()
        print(render_board(game.board))
        game.snapshot()

        if game.is_won:
            game.finish()
            _show_win(game)
            return

        try:
            tile = read_tile()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if tile == QUIT:
            return

        if not game.move(tile):
            print("\nIllegal move.")
            time.sleep(delay)

        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(size: int, log: MoveLog, delay: float = 0.5) -> GamePlay:
    """Play one game on a *size*×*size* board, recording it in *log*."""
    _greet(delay)
    game = GamePlay(size, log=log)
    _play(game, delay)
    game.finish()
    return game
