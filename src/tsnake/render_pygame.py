from __future__ import annotations

import logging

import pygame

from . import config
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

KEY_MAP = {
    pygame.K_UP: Command.UP,
    pygame.K_w: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_s: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_d: Command.RIGHT,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
}

CELL_COLORS = {
    BORDER: config.BLUE,
    SNAKE_BODY: config.GREEN,
    SNAKE_HEAD: config.CYAN,
    FOOD: config.RED,
}


def event_to_command(event) -> Command:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_MAP.get(event.key, Command.NONE)
    return Command.NONE


class PygameDisplay(Display):
    def __init__(self):
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None

    def acquire(self) -> None:
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        except pygame.error as e:
            pygame.quit()
            raise DisplayError(f"cannot open window: {e}") from e
        pygame.display.set_caption("tsnake")
        # Only these can become commands; anything else would cost a tick.
        pygame.event.set_blocked(None)
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
        self.font = pygame.font.Font(None, config.BLOCK)
        logger.debug("pygame display acquired")

    def release(self) -> None:
        if self.screen is None:
            return
        self.screen = None
        self.font = None
        pygame.quit()
        logger.debug("pygame display released")

    def poll_command(self, timeout_ms: int) -> Command:
        # Returns on the first event that maps to a command; later events stay
        # queued for the next ticks.
        deadline = pygame.time.get_ticks() + timeout_ms
        while True:
            remaining = deadline - pygame.time.get_ticks()
            # wait(0) would block forever
            if remaining <= 0:
                return Command.NONE
            event = pygame.event.wait(remaining)
            if event.type == pygame.NOEVENT:
                return Command.NONE
            command = event_to_command(event)
            if command is not Command.NONE:
                return command

    def _text(self, row: int, col: int, text: str) -> None:
        surf = self.font.render(text, True, config.WHITE)
        self.screen.blit(surf, (col * config.BLOCK, row * config.BLOCK))

    def render(self, snap: Snapshot) -> None:
        self.screen.fill(config.BLACK)

        for y, row in enumerate(build_board(snap)):
            for x, ch in enumerate(row):
                color = CELL_COLORS.get(ch)
                if color is None:
                    continue
                rect = pygame.Rect(x * config.BLOCK, y * config.BLOCK, config.BLOCK, config.BLOCK)
                pygame.draw.rect(self.screen, color, rect)

        self._text(snap.height + 1, 0, status_line(snap.score))
        if snap.paused:
            for row, col, line in pause_banner(snap.width, snap.height):
                self._text(row, col, line)

        pygame.display.flip()
