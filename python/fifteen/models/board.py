"""Board model for the Game of Fifteen."""

from __future__ import annotations

from dataclasses import dataclass

DIM_MIN = 3
DIM_MAX = 9
BLANK = 0

# Neighbour offsets, checked in this order when moving a tile.
_NEIGHBOURS: tuple[tuple[int, int], ...] = (
    (-1, 0),  # above
    (1, 0),  # below
    (0, -1),  # left
    (0, 1),  # right
)


def _check_size(size: int) -> None:
    if not DIM_MIN <= size <= DIM_MAX:
        raise ValueError(
            f"Board must be between {DIM_MIN} x {DIM_MIN} and "
            f"{DIM_MAX} x {DIM_MAX}, inclusive (got {size})."
        )


@dataclass
class Board:
    """Represents a d×d Game of Fifteen board.

    Tiles are stored as a 2D list of ints. 0 represents the empty cell.
    """

    size: int
    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def initialize(cls, size: int) -> Board:
        """Return the starting board for a *size*×*size* game.

        Tiles are laid out in descending order with the blank last.  When
        the number of cells is even, tiles 1 and 2 trade places so the
        puzzle stays solvable::

            15 14 13 12
            11 10  9  8
             7  6  5  4
             3  1  2  _
        """
        _check_size(size)
        value = size * size - 1
        tiles: list[list[int]] = []
        for _ in range(size):
            row: list[int] = []
            for _ in range(size):
                row.append(value)
                value -= 1
            tiles.append(row)

        if (size * size) % 2 == 0:
            tiles[size - 1][size - 3] = 1
            tiles[size - 1][size - 2] = 2

        return cls(size=size, tiles=tiles)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        size = len(rows)
        _check_size(size)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {r} has {len(row)} tiles; a {size}×{size} board "
                    f"needs {size} per row."
                )
        tiles = [list(row) for row in rows]
        values = sorted(v for row in tiles for v in row)
        if values != list(range(size * size)):
            raise ValueError(
                f"A {size}×{size} board must hold each of 0..{size * size - 1} "
                f"exactly once."
            )
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        )

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def find(self, tile: int) -> tuple[int, int] | None:
        """Return the (row, col) holding *tile*, or ``None``."""
        for r in range(self.size):
            for c in range(self.size):
                if self.tiles[r][c] == tile:
                    return (r, c)
        return None

    @property
    def blank_pos(self) -> tuple[int, int]:
        pos = self.find(BLANK)
        if pos is None:
            raise ValueError("Board has no empty cell.")
        return pos

    def is_won(self) -> bool:
        """Check if tiles read 1..d²-1 in row-major order.

        The final cell is not compared; it can only hold the blank once
        every other cell matches.
        """
        last = self.size * self.size
        check = 0
        for r in range(self.size):
            for c in range(self.size):
                check += 1
                if check != last and self.tiles[r][c] != check:
                    return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def rows_text(self, sep: str = "|") -> list[str]:
        """Return one line per row with the values joined by *sep*."""
        return [sep.join(str(v) for v in row) for row in self.tiles]

    # -- mutation -------------------------------------------------------------

    def apply_move(self, tile: int) -> bool:
        """Slide *tile* into the empty cell if the two are adjacent.

        Returns False, leaving the board untouched, when *tile* is out of
        range or does not border the empty cell.
        """
        if tile < 1 or tile > self.size * self.size - 1:
            return False

        pos = self.find(tile)
        if pos is None:
            return False
        row, col = pos

        for dr, dc in _NEIGHBOURS:
            nr, nc = row + dr, col + dc
            if not (0 <= nr < self.size and 0 <= nc < self.size):
                continue
            if self.tiles[nr][nc] == BLANK:
                self.tiles[nr][nc] = tile
                self.tiles[row][col] = BLANK
                return True
        return False

    def copy(self) -> Board:
        return Board(size=self.size, tiles=[row[:] for row in self.tiles])


# -- functional interface -----------------------------------------------------


def initialize(size: int) -> Board:
    return Board.initialize(size)


def apply_move(board: Board, tile: int) -> bool:
    return board.apply_move(tile)


def is_won(board: Board) -> bool:
    return board.is_won()
