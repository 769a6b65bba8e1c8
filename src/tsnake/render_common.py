from __future__ import annotations

from .state import Command, Snapshot

BORDER = "#"
EMPTY = " "
SNAKE_HEAD = "@"
SNAKE_BODY = "o"
FOOD = "*"

PAUSE_TITLE = "GAME PAUSED"
PAUSE_HINT = "Press P to continue"


class DisplayError(RuntimeError):
    """The display could not be set up (no terminal, too small, no video)."""


class Display:
    """Screen and keyboard behind the game loop.

    Use as a context manager so ``release`` runs on every exit path.
    """

    def acquire(self) -> None:
        pass

    def release(self) -> None:
        pass

    def poll_command(self, timeout_ms: int) -> Command:
        raise NotImplementedError

    def render(self, snap: Snapshot) -> None:
        raise NotImplementedError

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


def build_board(snap: Snapshot) -> list[list[str]]:
    """Rows of cell characters; food is drawn last, over anything else."""
    board = [
        [
            BORDER if y in (0, snap.height - 1) or x in (0, snap.width - 1) else EMPTY
            for x in range(snap.width)
        ]
        for y in range(snap.height)
    ]

    for i, (x, y) in enumerate(snap.snake):
        if 0 <= x < snap.width and 0 <= y < snap.height:
            board[y][x] = SNAKE_HEAD if i == 0 else SNAKE_BODY

    if snap.food is not None:
        fx, fy = snap.food
        board[fy][fx] = FOOD
    return board


def status_line(score: int) -> str:
    return f"Score: {score}   |   P: Pause   |   Q: Quit"


def pause_banner(width: int, height: int) -> list[tuple[int, int, str]]:
    """(row, col, text) for the pause message, centered on the board."""
    return [
        (height // 2, width // 2 - len(PAUSE_TITLE) // 2, PAUSE_TITLE),
        (height // 2 + 1, width // 2 - len(PAUSE_HINT) // 2, PAUSE_HINT),
    ]
