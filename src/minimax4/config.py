# src/minimax4/config.py

from __future__ import annotations
import os

ROWS = 6
COLS = 7
CONNECT_N = 4

# Search
MAX_DEPTH = 5
WIN_SCORE = 100_000
# Initial "best value"; must stay outside ±(WIN_SCORE + MAX_DEPTH)
SCORE_SENTINEL = 1_000_000

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

LOG_LEVEL = os.environ.get("MINIMAX4_LOG_LEVEL", "WARNING").upper()
