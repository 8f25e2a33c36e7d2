"""Conway's Game of Life on a toroidal board."""

from .board import (ALIVE, DEAD, InvalidArgument, create, is_all_dead,
                    seed_random, wrap_coordinate)
from .engine import next_generation, next_state

__version__ = "0.1.0"
