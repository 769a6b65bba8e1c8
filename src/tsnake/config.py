from __future__ import annotations

# Board, including the one-cell border ring.
GRID_WIDTH = 30
GRID_HEIGHT = 20
INITIAL_SIZE = 3

TICK_MS = 100

# pygame window
BLOCK = 20
WINDOW_WIDTH = GRID_WIDTH * BLOCK
# Two extra rows for the status line.
WINDOW_HEIGHT = (GRID_HEIGHT + 2) * BLOCK

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
CYAN = (0, 255, 255)
RED = (255, 0, 0)
