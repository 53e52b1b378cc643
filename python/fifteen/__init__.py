"""Game of Fifteen: a d×d sliding-tile puzzle."""

__version__ = "1.0.0"
