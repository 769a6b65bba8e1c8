from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config
from .game import GameLoop
from .game_state import GameState
from .render_common import Display, DisplayError


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return n


def make_display(renderer: str) -> Display:
    # Import lazily so the terminal game never needs a video driver.
    if renderer == "pygame":
        from .render_pygame import PygameDisplay

        return PygameDisplay()
    from .render_curses import CursesDisplay

    return CursesDisplay(config.GRID_WIDTH, config.GRID_HEIGHT)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tsnake",
        description="Snake that tunnels through the walls. Arrows/WASD steer, P pauses, Q quits.",
    )
    parser.add_argument(
        "--renderer",
        choices=("curses", "pygame"),
        default="curses",
        help="Display backend (curses=terminal, pygame=window).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--tick-ms",
        type=_positive_int,
        default=config.TICK_MS,
        help=f"Milliseconds per move (default {config.TICK_MS}).",
    )
    parser.add_argument("--log-file", default=None, help="Write logs here instead of stderr.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug records.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        filename=args.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    state = GameState(rng=random.Random(args.seed))
    loop = GameLoop(state, make_display(args.renderer), tick_ms=args.tick_ms)
    try:
        score = loop.run()
    except DisplayError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("\nGame Over!")
    print(f"Your final score: {score}")
    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
