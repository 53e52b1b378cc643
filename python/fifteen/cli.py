"""Command-line entry point.

Usage::

    fifteen 4                  # 4×4 game in the plain terminal
    fifteen 3 -f rich          # Rich terminal, 3×3
    fifteen 4 --log moves.txt  # write the move log elsewhere
    fifteen 4 --replay log.txt # replay a recorded game
"""

import importlib
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from fifteen.models.board import DIM_MAX, DIM_MIN
from fifteen.models.movelog import MoveLog

DEFAULT_LOG = Path("log.txt")
DEFAULT_DELAY = 0.5

EXIT_REPLAY = 1
EXIT_RANGE = 2
EXIT_LOG = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "fifteen.frontend.cli.vanilla.app",
    Frontend.rich: "fifteen.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    dimension: int = typer.Argument(
        ..., metavar="D",
        help=f"Board dimension ({DIM_MIN}-{DIM_MAX}).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="FIFTEEN_FRONTEND",
        help="Frontend to play with.",
    ),
    log: Path = typer.Option(
        DEFAULT_LOG, "-l", "--log",
        envvar="FIFTEEN_LOG",
        help="File that records every board and move.",
    ),
    delay: float = typer.Option(
        DEFAULT_DELAY, "--delay",
        min=0.0,
        envvar="FIFTEEN_DELAY",
        help="Seconds to pause between frames.",
    ),
    replay: Optional[Path] = typer.Option(
        None, "--replay",
        exists=True, dir_okay=False,
        help="Replay a move log instead of playing.",
    ),
) -> None:
    """Game of Fifteen, generalized to a D×D board."""
    if not DIM_MIN <= dimension <= DIM_MAX:
        typer.echo(
            f"Board must be between {DIM_MIN} x {DIM_MIN} and "
            f"{DIM_MAX} x {DIM_MAX}, inclusive."
        )
        raise typer.Exit(code=EXIT_RANGE)

    if replay is not None:
        from fifteen.frontend.cli.rich.app import replay as replay_log

        try:
            replay_log(replay, delay=delay)
        except ValueError as exc:
            typer.echo(f"Cannot replay {replay}: {exc}", err=True)
            raise typer.Exit(code=EXIT_REPLAY)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        move_log = MoveLog(log)
    except OSError as exc:
        typer.echo(f"Cannot open log {log}: {exc}", err=True)
        raise typer.Exit(code=EXIT_LOG)

    with move_log:
        mod.run(size=dimension, log=move_log, delay=delay)
