"""
Conway's Game of Life simulator.

A World keeps two equally sized grids: the current state and a scratch
buffer that the next generation is written into. Buffers are swapped
after every step.
"""
import logging
import operator
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from .cell import Cell
from .grid import Grid

logger = logging.getLogger(__name__)


def _neighbour_offsets(width: int, height: int, toroidal: bool) -> List[Tuple[int, int]]:
    """
    Return the distinct (dx, dy) Moore offsets for a grid of this size.

    Under wrap-around, offsets are reduced modulo the grid size and
    duplicates dropped, so on grids narrower or shorter than 3 a cell is
    never counted twice and never counts itself.
    """
    offsets = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)
               if (dx, dy) != (0, 0)]
    if not toroidal:
        return offsets

    distinct = []
    seen = {(0, 0)}
    for dx, dy in offsets:
        key = (dx % width, dy % height)
        if key not in seen:
            seen.add(key)
            distinct.append((dx, dy))
    return distinct


class World:
    """Double-buffered Game of Life world with optional toroidal wrap."""

    def __init__(self, width: int = 0, height: Optional[int] = None):
        """
        Create a world with every cell DEAD.

        Args:
            width: World width, or the side of a square when height is omitted
            height: World height
        """
        self._current = Grid(width, height)
        self._next = Grid(self._current.width, self._current.height)

    @classmethod
    def from_state(cls, initial_state: Grid) -> 'World':
        """Create a world whose current state is a copy of initial_state."""
        if not isinstance(initial_state, Grid):
            raise TypeError(
                f"initial_state must be a Grid, got {type(initial_state).__name__}")
        world = cls()
        world._current = initial_state.copy()
        world._next = Grid(initial_state.width, initial_state.height)
        return world

    @property
    def width(self) -> int:
        return self._current.width

    @property
    def height(self) -> int:
        return self._current.height

    def get_width(self) -> int:
        return self._current.get_width()

    def get_height(self) -> int:
        return self._current.get_height()

    def get_total_cells(self) -> int:
        return self._current.get_total_cells()

    def get_alive_cells(self) -> int:
        return self._current.get_alive_cells()

    def get_dead_cells(self) -> int:
        return self._current.get_dead_cells()

    def get_state(self) -> Grid:
        """Return a copy of the current state."""
        return self._current.copy()

    def resize(self, width: int, height: Optional[int] = None) -> None:
        """
        Resize both buffers. The current state keeps the cells inside the
        overlap of the old and new extents; the scratch buffer is reset.
        """
        if height is None:
            height = width
        self._current.resize(width, height)
        self._next = Grid(self._current.width, self._current.height)

    def count_neighbours(self, x: int, y: int, toroidal: bool = False) -> int:
        """
        Count the ALIVE cells in the Moore neighbourhood of (x, y).

        Args:
            x: Column of the cell
            y: Row of the cell
            toroidal: Wrap neighbours around the edges of the grid

        Returns:
            Number of live neighbours, 0 to 8

        Raises:
            OutOfRangeError: If (x, y) is outside the world
        """
        x, y = self._current._check_coordinates(x, y)
        width, height = self.width, self.height
        cells = self._current._view()

        count = 0
        for dx, dy in _neighbour_offsets(width, height, toroidal):
            nx, ny = x + dx, y + dy
            if toroidal:
                nx, ny = nx % width, ny % height
            elif not (0 <= nx < width and 0 <= ny < height):
                continue
            count += int(cells[ny, nx] == Cell.ALIVE)
        return count

    def _neighbour_counts(self, toroidal: bool) -> np.ndarray:
        """Live-neighbour count for every cell of the current state."""
        state = self._current._view().astype(np.int16)
        height, width = state.shape
        counts = np.zeros_like(state)
        offsets = _neighbour_offsets(width, height, toroidal)

        if toroidal:
            for dx, dy in offsets:
                counts += np.roll(state, (-dy, -dx), axis=(0, 1))
            return counts

        padded = np.pad(state, pad_width=1, mode='constant', constant_values=0)
        for dx, dy in offsets:
            counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
        return counts

    def step(self, toroidal: bool = False) -> None:
        """
        Advance one generation.

        Every cell of the next state is computed from the current state only:
        a live cell with 2 or 3 live neighbours survives, a dead cell with
        exactly 3 live neighbours is born, everything else is DEAD.
        """
        if self.get_total_cells() == 0:
            return

        neighbours = self._neighbour_counts(toroidal)
        alive = self._current._view() == Cell.ALIVE
        born_or_survives = (neighbours == 3) | (alive & (neighbours == 2))

        self._next._view()[:] = born_or_survives
        self._current, self._next = self._next, self._current

    def advance(self, steps: int, toroidal: bool = False, progress: bool = False) -> None:
        """
        Call step exactly `steps` times.

        Args:
            steps: Number of generations, 0 does nothing
            toroidal: Wrap neighbours around the edges of the grid
            progress: Show a tqdm progress bar
        """
        steps = operator.index(steps)
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        logger.debug("Advancing %dx%d world by %d steps (toroidal=%s)",
                     self.width, self.height, steps, toroidal)
        for _ in tqdm(range(steps), desc="Evolving", disable=not progress):
            self.step(toroidal)

    def trajectory(self, steps: int, toroidal: bool = False) -> np.ndarray:
        """
        Advance the world and record every generation.

        Returns:
            Array of shape (steps + 1, height, width) with generation 0
            (the state before the call) through generation `steps`
        """
        steps = operator.index(steps)
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        states = np.zeros((steps + 1, self.height, self.width), dtype=np.uint8)
        states[0] = self._current.to_array()
        for t in range(1, steps + 1):
            self.step(toroidal)
            states[t] = self._current.to_array()
        return states

    def __repr__(self):
        return (f"World(width={self.width}, height={self.height}, "
                f"alive={self.get_alive_cells()})")
