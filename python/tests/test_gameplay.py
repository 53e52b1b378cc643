"""Session tests: move tallies and the clock."""

from __future__ import annotations

from pathlib import Path

from fifteen.engine.gameplay import GamePlay
from fifteen.engine.gamestate import GameState
from fifteen.models.board import Board
from fifteen.models.movelog import MoveLog, read_frames


def _near_solved() -> Board:
    return Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])


def test_new_game_uses_starting_layout() -> None:
    game = GamePlay(4)
    assert game.size == 4
    assert game.board == Board.initialize(4)
    assert not game.is_won
    assert game.state.moves == 0


def test_move_tallies() -> None:
    game = GamePlay(3)
    assert game.move(1)
    assert not game.move(8)
    assert not game.move(0)
    assert game.state.moves == 1
    assert game.state.illegal_moves == 2


def test_winning_move() -> None:
    game = GamePlay.from_board(_near_solved())
    assert not game.is_won
    assert game.move(8)
    assert game.is_won
    assert game.state.is_won


def test_finish_freezes_clock() -> None:
    game = GamePlay(3)
    assert game.state.running
    game.finish()
    assert not game.state.running
    frozen = game.state.elapsed_time
    assert frozen >= 0.0
    assert game.state.elapsed_time == frozen
    game.finish()
    assert game.state.elapsed_time == frozen


def test_state_wraps_board() -> None:
    board = _near_solved()
    state = GameState(board)
    state.record_attempt(False)
    assert state.board is board
    assert state.moves == 0
    assert state.illegal_moves == 1


def test_session_writes_log(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    with MoveLog(path) as log:
        game = GamePlay.from_board(_near_solved(), log=log)
        game.snapshot()
        game.move(1)
        game.snapshot()
        game.move(8)
        game.snapshot()

    frames = read_frames(path)
    assert [f.move for f in frames] == [1, 8, None]
    assert frames[0].rows == frames[1].rows
    assert frames[2].rows == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


def test_session_without_log() -> None:
    game = GamePlay(3)
    game.snapshot()
    assert game.move(3)
    assert game.log is None
