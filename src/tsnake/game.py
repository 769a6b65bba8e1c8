from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum

from . import config
from .game_state import GameState
from .render_common import Display
from .state import Command

logger = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class GameLoop:
    """Fixed-tick driver: render, poll one command, step.

    Each tick lasts ``tick_ms`` no matter how early the poll returns; the
    remainder is slept off.
    """

    def __init__(
        self,
        state: GameState,
        display: Display,
        tick_ms: int = config.TICK_MS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.state = state
        self.display = display
        self.tick_ms = tick_ms
        self.clock = clock
        self.sleep = sleep
        self.phase = Phase.PAUSED if state.paused else Phase.RUNNING
        self.ticks = 0

    def _enter(self, phase: Phase) -> None:
        if phase is not self.phase:
            logger.debug("loop %s -> %s at tick %d", self.phase.value, phase.value, self.ticks)
        self.phase = phase

    def apply(self, command: Command) -> None:
        if self.phase is Phase.OVER or command is Command.NONE:
            return
        if command is Command.QUIT:
            self._enter(Phase.OVER)
        elif command is Command.TOGGLE_PAUSE:
            paused = self.state.toggle_pause()
            self._enter(Phase.PAUSED if paused else Phase.RUNNING)
        elif command.direction is not None:
            self.state.set_direction(command.direction)

    def tick(self) -> None:
        if self.phase is Phase.OVER:
            return
        started = self.clock()

        self.display.render(self.state.snapshot())
        self.apply(self.display.poll_command(self.tick_ms))

        if self.phase is Phase.RUNNING:
            self.state.step()
            if self.state.is_game_over():
                self._enter(Phase.OVER)
        self.ticks += 1

        remaining = self.tick_ms / 1000.0 - (self.clock() - started)
        if remaining > 0 and self.phase is not Phase.OVER:
            self.sleep(remaining)

    def run(self) -> int:
        """Play until quit or game over; returns the final score."""
        logger.info("game started on %dx%d board", self.state.width, self.state.height)
        with self.display:
            while self.phase is not Phase.OVER:
                self.tick()
        logger.info("game over after %d ticks, score %d", self.ticks, self.state.score)
        return self.state.score
