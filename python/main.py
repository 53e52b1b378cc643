#!/usr/bin/env python3
"""Game of Fifteen.

Usage::

    python main.py 4                  # 4×4 game in the plain terminal
    python main.py 3 -f rich          # Rich terminal, 3×3
    python main.py 4 --replay log.txt # replay a recorded game
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fifteen.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
