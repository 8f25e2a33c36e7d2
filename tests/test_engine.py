import numpy as np
import pytest

from torus_life.board import ALIVE, DEAD, create, is_all_dead, place_pattern, seed_random
from torus_life.engine import (NEIGHBOUR_OFFSETS, count_neighbours, neighbour_counts,
                               next_generation, next_state)

from .conftest import BLINKER, BLOCK

RULE_TABLE = (
    [(ALIVE, n, 2 <= n <= 3) for n in range(9)]
    + [(DEAD, n, n == 3) for n in range(9)]
)


@pytest.mark.parametrize("alive,neighbours,expected", RULE_TABLE)
def test_rule_table(alive, neighbours, expected):
    assert next_state(alive, neighbours) == expected
    assert next_state(alive, neighbours) == (neighbours == 3 or (alive and neighbours == 2))


def test_offsets_cover_moore_neighbourhood():
    assert sorted(NEIGHBOUR_OFFSETS) == sorted(
        (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0))


def test_neighbours_wrap_across_edges():
    board = create(5)
    board[4, 2] = ALIVE  # bottom row is "up" from row 0
    board[2, 4] = ALIVE  # right column is "left" from column 0
    assert count_neighbours(board, 0, 2) == 1
    assert count_neighbours(board, 2, 0) == 1
    board = create(5)
    board[0, 0] = ALIVE
    assert count_neighbours(board, 4, 4) == 1
    assert count_neighbours(board, 4, 0) == 1
    assert count_neighbours(board, 0, 4) == 1


def test_single_cell_board_counts_itself_eight_times():
    board = create(1, ALIVE)
    assert count_neighbours(board, 0, 0) == 8
    assert neighbour_counts(board)[0, 0] == 8
    # 8 neighbours is overpopulation
    assert is_all_dead(next_generation(board))


def test_block_is_still_life():
    board = place_pattern(create(6), BLOCK, row_offset=2, col_offset=2)
    assert np.array_equal(next_generation(board), board)


def test_block_on_smallest_board():
    board = place_pattern(create(4), BLOCK, row_offset=1, col_offset=1)
    assert np.array_equal(next_generation(board), board)


def test_blinker_oscillates(blinker_board):
    vertical = place_pattern(create(5), [(-1, 0), (0, 0), (1, 0)], row_offset=2, col_offset=2)
    once = next_generation(blinker_board)
    assert np.array_equal(once, vertical)
    assert np.array_equal(next_generation(once), blinker_board)


def test_isolated_cell_dies():
    board = create(5)
    board[2, 2] = ALIVE
    assert is_all_dead(next_generation(board))


def test_input_board_is_not_modified(blinker_board):
    before = blinker_board.copy()
    result = next_generation(blinker_board)
    assert result is not blinker_board
    assert np.array_equal(blinker_board, before)


@pytest.mark.parametrize("seed", range(5))
def test_vectorised_step_matches_per_cell_rule(seed):
    board = seed_random(create(12), 60, seed=seed)
    expected = np.array([
        [next_state(board[r, c], count_neighbours(board, r, c)) for c in range(12)]
        for r in range(12)
    ])
    assert np.array_equal(next_generation(board), expected)


def test_glider_travels_around_torus():
    glider = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]
    board = place_pattern(create(8), glider)
    start = board.copy()
    # A glider moves one cell diagonally every 4 generations
    for _ in range(4 * 8):
        board = next_generation(board)
    assert np.array_equal(board, start)
