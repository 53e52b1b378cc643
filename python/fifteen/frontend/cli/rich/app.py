"""Rich terminal frontend: styled tables and panels.

Uses the ``rich`` library for styled output while sharing the same
input parsing and backend as the vanilla CLI.  Also replays move logs
written by either frontend.
"""

from __future__ import annotations

import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.engine.gameplay import GamePlay
from fifteen.frontend.cli.input_handler import QUIT, parse_tile
from fifteen.models.board import BLANK, Board
from fifteen.models.movelog import MoveLog, read_frames

console = Console()

_PROMPT = "[bold cyan]Tile to move:[/bold cyan] "


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=2, justify="right")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]_[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>2}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>2}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_greeting(delay: float) -> None:
    console.clear()
    console.print()
    console.print(
        Align.center(
            Panel(
                Text("WELCOME TO GAME OF FIFTEEN", style="bold"),
                border_style="bright_blue",
                padding=(1, 4),
            )
        )
    )
    time.sleep(delay * 4)


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    size = game.size
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold cyan]Game of Fifteen  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(status)))
    console.print(Align.center(Text("0 or Q to quit", style="dim")))


def _draw_win(game: GamePlay) -> None:
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("ftw!", style="bold green")
    congrats.append(f"  Solved in {game.state.moves} moves  ", style="green")
    congrats.append("★\n", style="bold yellow")
    console.print(Align.center(congrats))


def _ask_tile() -> int:
    tile = parse_tile(console.input(_PROMPT))
    while tile is None:
        console.print("[red]Please enter a tile number.[/red]")
        tile = parse_tile(console.input(_PROMPT))
    return tile


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay, delay: float) -> None:
    status = ""
    while True:
        _draw_game(game, status)
        status = ""
        game.snapshot()

        if game.is_won:
            game.finish()
            _draw_win(game)
            return

        try:
            tile = _ask_tile()
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        if tile == QUIT:
            return

        if not game.move(tile):
            status = "[bold red]Illegal move.[/bold red]"
            console.print(Align.center(Text.from_markup(status)))
            time.sleep(delay)

        time.sleep(delay)


def replay(log_path: Path, delay: float = 0.5) -> int:
    """Render every frame of a move log.  Returns the number of frames."""
    frames = read_frames(log_path)
    for i, frame in enumerate(frames, 1):
        try:
            board = Board.from_rows(frame.rows)
        except ValueError as exc:
            raise ValueError(f"Frame {i}: {exc}") from None
        caption = Text()
        caption.append(f"Frame {i}/{len(frames)}", style="bold cyan")
        if frame.move is not None:
            caption.append(f"   next tile: {frame.move}", style="dim")
        elif board.is_won():
            caption.append("   solved", style="bold green")

        console.print(
            Panel(
                Group(Align.center(render_board(board)), Align.center(caption)),
                border_style="bright_blue",
                padding=(0, 2),
            )
        )
        time.sleep(delay)
    return len(frames)


# -- public entry point -------------------------------------------------------


def run(size: int, log: MoveLog, delay: float = 0.5) -> GamePlay:
    """Play one game on a *size*×*size* board, recording it in *log*."""
    _draw_greeting(delay)
    game = GamePlay(size, log=log)
    _play(game, delay)
    game.finish()
    return game
