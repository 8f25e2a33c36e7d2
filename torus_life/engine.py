"""
Transition engine: one B3/S23 step over a toroidal board.

The input board is treated as a read-only snapshot; every step returns a
freshly allocated board.
"""

import numpy as np

from .board import wrap_coordinate

# A live cell survives with MIN..MAX live neighbours; a dead cell is born with BIRTH.
MIN_NEIGHBOURS = 2
MAX_NEIGHBOURS = 3
BIRTH_NEIGHBOURS = 3

NEIGHBOUR_OFFSETS = [(-1, 0), (0, -1), (1, 0), (0, 1), (1, 1), (-1, -1), (-1, 1), (1, -1)]


def next_state(alive, neighbours):
    """Rule table for a single cell."""
    if alive:
        return MIN_NEIGHBOURS <= neighbours <= MAX_NEIGHBOURS
    return neighbours == BIRTH_NEIGHBOURS


def count_neighbours(board, row, col):
    """Count live neighbours of (row, col), wrapping at the edges."""
    size = board.shape[0]
    count = 0
    for (dr, dc) in NEIGHBOUR_OFFSETS:
        if board[wrap_coordinate(row, dr, size), wrap_coordinate(col, dc, size)]:
            count += 1
    return count


def neighbour_counts(board):
    """Live-neighbour count for every cell at once."""
    size = board.shape[0]
    idx = np.arange(size)
    counts = np.zeros(board.shape, dtype=np.uint8)
    for (dr, dc) in NEIGHBOUR_OFFSETS:
        # Gathering with wrapped indices copies, so `board` is only ever read.
        rows = wrap_coordinate(idx, dr, size)
        cols = wrap_coordinate(idx, dc, size)
        counts += board[np.ix_(rows, cols)]
    return counts


def next_generation(board):
    """Advance one generation (B3/S23) and return the new board."""
    n = neighbour_counts(board)
    survive = board & (n >= MIN_NEIGHBOURS) & (n <= MAX_NEIGHBOURS)
    born = ~board & (n == BIRTH_NEIGHBOURS)
    return survive | born
