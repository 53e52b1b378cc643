"""Line-based tile input for CLI frontends.

Players type the number of the tile they want to slide.  ``0`` (or one of
the quit words) ends the game.
"""

from __future__ import annotations

QUIT = 0

_QUIT_WORDS: frozenset[str] = frozenset({"q", "quit", "exit"})


def parse_tile(text: str) -> int | None:
    """Return the tile number in *text*, or ``None`` if it is not one.

    Quit words map to ``QUIT``.  Negative and out-of-range numbers are
    returned as-is; the board decides whether they are legal.
    """
    text = text.strip()
    if text.lower() in _QUIT_WORDS:
        return QUIT
    try:
        return int(text)
    except ValueError:
        return None


def read_tile(prompt: str = "Tile to move: ", retry: str = "Retry: ") -> int:
    """Prompt until the player enters a whole number.

    Raises ``EOFError`` when input runs out; callers treat it as a quit.
    """
    tile = parse_tile(input(prompt))
    while tile is None:
        tile = parse_tile(input(retry))
    return tile
