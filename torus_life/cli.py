"""
Conway's Game of Life in the terminal, on a board that wraps around at the edges.

Examples:
  # 50x50 board, 20 random cells, stop after 100 generations:
  torus-life

  # Bigger board, denser start, reproducible:
  torus-life -s 70 -n 200 -m 500 --seed 7

  # Gosper glider gun, no screen clearing (handy for piping):
  torus-life --glider-gun --no-clear -m 30
"""

import argparse
import logging
import sys
import time

from .board import (InvalidArgument, create, gosper_glider_gun, is_all_dead,
                    live_cells, place_pattern, seed_random)
from .engine import next_generation
from .render import clear_screen, render_frame

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 50
DEFAULT_CELLS = 20
DEFAULT_MAX_GENERATIONS = 100
DEFAULT_INTERVAL_MS = 100

GAME_OVER_MESSAGE = "GAME OVER - No Cells Alive"


# ------------------------------ Driver loop -----------------------------

def show(board, clear, out):
    if clear:
        clear_screen(out)
    print(render_frame(board), file=out)


def run(board, max_generations, interval=DEFAULT_INTERVAL_MS / 1000, clear=True,
        out=None, sleep=time.sleep):
    """
    Render and advance `board` until every cell is dead or the cap is hit.

    Prints the final frame followed by the outcome and returns the number of
    generations that were computed.
    """
    if max_generations < 0:
        raise InvalidArgument(f"max generations must be >= 0, got {max_generations}")
    if out is None:
        out = sys.stdout

    generations = 0
    while not is_all_dead(board) and generations < max_generations:
        show(board, clear, out)
        board = next_generation(board)
        sleep(interval)
        generations += 1
        logger.debug("generation %d: %d cells alive", generations, live_cells(board))

    show(board, clear, out)
    if generations < max_generations:
        logger.debug("population died out after %d generations", generations)
        print(GAME_OVER_MESSAGE, file=out)
    else:
        logger.debug("reached generation cap %d", max_generations)
        print(f"{generations} generations", file=out)
    return generations


# --------------------------------- CLI ----------------------------------

def build_parser():
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a toroidal board, rendered as text.")
    parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE,
                        help=f"Board side length (default: {DEFAULT_SIZE})")
    parser.add_argument("-n", "--cells", type=int, default=DEFAULT_CELLS,
                        help=f"Random cells brought to life at start (default: {DEFAULT_CELLS})")
    parser.add_argument("-m", "--max-generations", type=int, default=DEFAULT_MAX_GENERATIONS,
                        help=f"Stop after this many generations (default: {DEFAULT_MAX_GENERATIONS})")
    parser.add_argument("--interval", type=int, default=DEFAULT_INTERVAL_MS,
                        help=f"Delay between frames in ms (default: {DEFAULT_INTERVAL_MS})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--glider-gun", action="store_true",
                        help="Start with a Gosper glider gun (overrides random init)")
    parser.add_argument("--no-clear", dest="clear", action="store_false",
                        help="Don't clear the terminal between frames")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def parse_args(argv):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval < 0:
        parser.error(f"--interval must be >= 0, got {args.interval}")
    return parser, args


def main(argv=None):
    parser, args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
                        stream=sys.stderr)

    try:
        board = create(args.size)
        if args.glider_gun:
            place_pattern(board, gosper_glider_gun(), row_offset=max(1, args.size // 2 - 5), col_offset=1)
        else:
            seed_random(board, args.cells, seed=args.seed)
        logger.debug("%dx%d board, %d cells alive", args.size, args.size, live_cells(board))
        run(board, args.max_generations, interval=args.interval / 1000, clear=args.clear)
    except InvalidArgument as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())
