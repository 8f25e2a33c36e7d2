"""
Board store: an N x N grid of cells whose edges wrap around to form a torus.

A board is a square boolean numpy array; True is a live cell.
"""

import logging
import numbers

import numpy as np

logger = logging.getLogger(__name__)

DEAD = False
ALIVE = True


class InvalidArgument(ValueError):
    """Raised for a non-positive board size or a negative count."""


# ------------------------------- Patterns -------------------------------

def gosper_glider_gun():
    """Return (row, col) coords for the Gosper glider gun, relative to top-left."""
    return [
        (5, 1), (5, 2), (6, 1), (6, 2),
        (3, 13), (3, 14), (4, 12), (4, 16), (5, 11), (5, 17), (6, 11), (6, 15), (6, 17), (6, 18),
        (7, 11), (7, 17), (8, 12), (8, 16), (9, 13), (9, 14),
        (1, 25), (2, 23), (2, 25), (3, 21), (3, 22), (4, 21), (4, 22), (5, 21), (5, 22),
        (6, 23), (6, 25), (7, 25),
        (3, 35), (3, 36), (4, 35), (4, 36),
    ]


def place_pattern(board, cells, row_offset=0, col_offset=0):
    """Set the given cells alive, shifted by the offsets. Cells off the board are skipped."""
    size = board.shape[0]
    for (r, c) in cells:
        r, c = r + row_offset, c + col_offset
        if 0 <= r < size and 0 <= c < size:
            board[r, c] = ALIVE
    return board


# ------------------------------ Board Store -----------------------------

def create(size, initial_value=DEAD):
    """Allocate a size x size board with every cell set to initial_value."""
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
        raise InvalidArgument(f"board size must be a positive integer, got {size!r}")
    return np.full((size, size), bool(initial_value), dtype=bool)


def seed_random(board, count, seed=None):
    """
    Bring `count` uniformly random cells to life, in place.

    Draws are independent and with replacement, so fewer than `count`
    distinct cells may end up alive. With seed=None every run differs.
    """
    if count < 0:
        raise InvalidArgument(f"number of cells must be >= 0, got {count}")
    rng = np.random.default_rng(seed)
    size = board.shape[0]
    rows = rng.integers(0, size, size=count)
    cols = rng.integers(0, size, size=count)
    board[rows, cols] = ALIVE
    logger.debug("seeded %d draws, %d distinct cells alive", count, live_cells(board))
    return board


def wrap_coordinate(position, delta, size):
    """
    Move `position` by `delta` along one axis of a torus of the given size.

    Stepping off the low edge lands on size - 1, stepping off the high edge
    lands on 0. Works element-wise when position is an integer array.
    """
    return (position + delta) % size


def is_all_dead(board):
    return not board.any()


def live_cells(board):
    return int(np.count_nonzero(board))
