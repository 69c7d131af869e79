import numpy as np
import pytest

from lifegrid import Cell, Grid, World
from lifegrid.utils.patterns import glider, place_pattern


def grid_from_rows(*rows):
    """Build a grid from strings of '#' and ' '."""
    grid = Grid(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            grid.set(x, y, Cell.from_char(char))
    return grid


@pytest.fixture
def glider_grid():
    return glider()


@pytest.fixture
def random_grid():
    """A 7x5 grid with a fixed pseudo-random soup."""
    rng = np.random.default_rng(1234)
    return Grid.from_array((rng.random((5, 7)) < 0.4).astype(np.uint8))


@pytest.fixture
def blinker_world():
    """A 5x5 world with a horizontal blinker through the center."""
    blinker = grid_from_rows("###")
    return World.from_state(place_pattern((5, 5), blinker))


@pytest.fixture
def make_grid():
    return grid_from_rows
