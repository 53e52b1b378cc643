from fifteen.models.board import Board, apply_move, initialize, is_won
from fifteen.models.movelog import LogFrame, MoveLog, read_frames

__all__ = [
    "Board",
    "LogFrame",
    "MoveLog",
    "apply_move",
    "initialize",
    "is_won",
    "read_frames",
]
