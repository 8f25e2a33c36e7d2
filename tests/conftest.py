import pytest

from torus_life.board import create, place_pattern

BLOCK = [(0, 0), (0, 1), (1, 0), (1, 1)]
BLINKER = [(0, -1), (0, 0), (0, 1)]


@pytest.fixture
def empty_board():
    return create(6)


@pytest.fixture
def blinker_board():
    return place_pattern(create(5), BLINKER, row_offset=2, col_offset=2)
