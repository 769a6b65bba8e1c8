from __future__ import annotations

import curses
import logging

from .render_common import (
    BORDER,
    FOOD,
    SNAKE_BODY,
    SNAKE_HEAD,
    Display,
    DisplayError,
    build_board,
    pause_banner,
    status_line,
)
from .state import Command, Snapshot

logger = logging.getLogger(__name__)

PAIR_BORDER = 1
PAIR_SNAKE = 2
PAIR_HEAD = 3
PAIR_FOOD = 4
PAIR_TEXT = 5

_CELL_PAIRS = {
    BORDER: PAIR_BORDER,
    SNAKE_BODY: PAIR_SNAKE,
    SNAKE_HEAD: PAIR_HEAD,
    FOOD: PAIR_FOOD,
}

KEY_MAP = {
    ord("w"): Command.UP,
    ord("W"): Command.UP,
    curses.KEY_UP: Command.UP,
    ord("s"): Command.DOWN,
    ord("S"): Command.DOWN,
    curses.KEY_DOWN: Command.DOWN,
    ord("a"): Command.LEFT,
    ord("A"): Command.LEFT,
    curses.KEY_LEFT: Command.LEFT,
    ord("d"): Command.RIGHT,
    ord("D"): Command.RIGHT,
    curses.KEY_RIGHT: Command.RIGHT,
    ord("p"): Command.TOGGLE_PAUSE,
    ord("P"): Command.TOGGLE_PAUSE,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
}


class CursesDisplay(Display):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.screen = None
        self.colors = False

    def acquire(self) -> None:
        try:
            self.screen = curses.initscr()
        except curses.error as e:
            raise DisplayError(f"cannot open terminal: {e}") from e

        curses.cbreak()
        curses.noecho()
        self.screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("terminal cannot hide the cursor")

        rows, cols = self.screen.getmaxyx()
        # Board plus the status line below it.
        need_rows, need_cols = self.height + 2, self.width
        if rows < need_rows or cols < need_cols:
            self.release()
            raise DisplayError(
                f"terminal too small: need {need_cols}x{need_rows}, have {cols}x{rows}"
            )

        if curses.has_colors():
            curses.start_color()
            curses.init_pair(PAIR_BORDER, curses.COLOR_BLUE, curses.COLOR_BLACK)
            curses.init_pair(PAIR_SNAKE, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(PAIR_HEAD, curses.COLOR_CYAN, curses.COLOR_BLACK)
            curses.init_pair(PAIR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(PAIR_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)
            self.colors = True
        logger.debug("curses display acquired (%dx%d, colors=%s)", cols, rows, self.colors)

    def release(self) -> None:
        if self.screen is None:
            return
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        try:
            curses.curs_set(1)
        except curses.error:
            logger.debug("terminal cannot restore the cursor")
        curses.endwin()
        self.screen = None
        logger.debug("curses display released")

    def poll_command(self, timeout_ms: int) -> Command:
        self.screen.timeout(timeout_ms)
        key = self.screen.getch()
        if key == -1:
            return Command.NONE
        return KEY_MAP.get(key, Command.NONE)

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self.colors else curses.A_NORMAL

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self.screen.addstr(y, x, text, attr)
        except curses.error:
            # A write that reaches the bottom-right cell draws, then fails to
            # move the cursor past it. Any other failure is real.
            rows, cols = self.screen.getmaxyx()
            if y != rows - 1 or x + len(text) < cols:
                raise

    def render(self, snap: Snapshot) -> None:
        self.screen.erase()
        for y, row in enumerate(build_board(snap)):
            for x, ch in enumerate(row):
                self._put(y, x, ch, self._attr(_CELL_PAIRS.get(ch, PAIR_TEXT)))

        text = self._attr(PAIR_TEXT)
        self._put(snap.height + 1, 0, status_line(snap.score), text)
        if snap.paused:
            for y, x, line in pause_banner(snap.width, snap.height):
                self._put(y, x, line, text)
        self.screen.refresh()
