"""Text log of every board state and move, for offline verification.

Each frame is one line per board row (values joined by ``|``) followed by
a line holding the tile the player chose next::

    8|7|6
    5|4|3
    2|1|0
    1
    8|7|6
    ...
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import TextIO

from fifteen.models.board import Board

SEPARATOR = "|"


@dataclass
class LogFrame:
    rows: list[list[int]]
    move: int | None = None


class MoveLog:
    """Writes board snapshots and chosen tiles to a text file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = Path(filepath)
        self._file: TextIO = self.filepath.open("w")

    # -- writing --------------------------------------------------------------

    def record_board(self, board: Board) -> None:
        for line in board.rows_text(SEPARATOR):
            self._file.write(line + "\n")
        self._file.flush()

    def record_move(self, tile: int) -> None:
        self._file.write(f"{tile}\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> MoveLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


# -- reading ------------------------------------------------------------------


def read_frames(filepath: Path) -> list[LogFrame]:
    """Parse a move log back into frames.

    The board width is taken from the first line; a frame is complete
    once that many row lines have been read.
    """
    frames: list[LogFrame] = []
    size = 0
    rows: list[list[int]] = []

    for lineno, raw in enumerate(Path(filepath).read_text().splitlines(), 1):
        line = raw.strip()
        if not line:
            continue
        try:
            values = [int(v) for v in line.split(SEPARATOR)]
        except ValueError:
            raise ValueError(f"Line {lineno}: not a log entry: {raw!r}") from None

        if len(values) == 1 and not rows:
            if not frames or frames[-1].move is not None:
                raise ValueError(f"Line {lineno}: move without a board.")
            frames[-1].move = values[0]
            continue

        if size == 0:
            size = len(values)
        if len(values) != size:
            raise ValueError(
                f"Line {lineno}: expected {size} values, got {len(values)}."
            )
        rows.append(values)
        if len(rows) == size:
            frames.append(LogFrame(rows=rows))
            rows = []

    if rows:
        raise ValueError(
            f"Log ends with a partial board ({len(rows)} of {size} rows)."
        )
    return frames
