"""Move log tests: file layout and parsing it back into frames."""

from __future__ import annotations

from pathlib import Path

import pytest

from fifteen.models.board import Board
from fifteen.models.movelog import LogFrame, MoveLog, read_frames


def test_log_layout(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    board = Board.initialize(3)

    with MoveLog(path) as log:
        log.record_board(board)
        log.record_move(1)
        board.apply_move(1)
        log.record_board(board)

    assert path.read_text() == "8|7|6\n5|4|3\n2|1|0\n1\n8|7|6\n5|4|3\n2|0|1\n"


def test_log_is_flushed_before_close(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    log = MoveLog(path)
    log.record_board(Board.initialize(3))
    log.record_move(7)
    assert path.read_text().splitlines()[-1] == "7"
    log.close()
    log.close()


def test_log_truncates_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    path.write_text("stale\n")
    with MoveLog(path):
        pass
    assert path.read_text() == ""


def test_unwritable_log_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        MoveLog(tmp_path / "missing" / "log.txt")


# -- reading ------------------------------------------------------------------


def test_read_frames_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    board = Board.initialize(4)
    with MoveLog(path) as log:
        log.record_board(board)
        log.record_move(4)
        board.apply_move(4)
        log.record_board(board)
        log.record_move(99)
        log.record_board(board)

    frames = read_frames(path)
    assert len(frames) == 3
    assert frames[0].rows[3] == [3, 1, 2, 0]
    assert frames[0].move == 4
    assert frames[1].rows[2] == [7, 6, 5, 0]
    assert frames[1].move == 99
    assert frames[2] == LogFrame(rows=board.tiles, move=None)


@pytest.mark.parametrize(
    "text, message",
    [
        ("5\n8|7|6\n", "move without a board"),
        ("8|7|6\n5|4|3\n2|1|0\n1\n2\n", "move without a board"),
        ("8|7|6\n5|4\n", "expected 3 values"),
        ("8|7|6\n5|x|3\n", "not a log entry"),
        ("8|7|6\n5|4|3\n", "partial board"),
    ],
    ids=["leading-move", "two-moves", "short-row", "garbage", "truncated"],
)
def test_read_frames_rejects_malformed(
    tmp_path: Path, text: str, message: str
) -> None:
    path = tmp_path / "log.txt"
    path.write_text(text)
    with pytest.raises(ValueError, match=message):
        read_frames(path)
