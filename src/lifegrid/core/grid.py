"""
Dense 2D grid of Game of Life cells.

Cells live in a flat, row-major numpy buffer of length width * height;
cell (x, y) is stored at index y * width + x.
"""
import logging
import operator
from typing import Iterator, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidRegionError, OutOfRangeError

logger = logging.getLogger(__name__)

_CHARS = np.array([Cell.DEAD.char, Cell.ALIVE.char])


def _dimension(value, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")
    return value


class Grid:
    """
    A width x height rectangle of cells, all DEAD when constructed.

    Grid() is 0x0, Grid(n) is n x n and Grid(w, h) is w x h.
    Cells are read and written with get/set or grid[x, y].
    """

    def __init__(self, width: int = 0, height: Optional[int] = None):
        if height is None:
            height = width
        self._width = _dimension(width, 'width')
        self._height = _dimension(height, 'height')
        self._cells = np.zeros(self._width * self._height, dtype=np.uint8)

    @classmethod
    def from_array(cls, array) -> 'Grid':
        """
        Build a grid from a 2D array of 0/1 values.

        Args:
            array: Array-like of shape (height, width)

        Returns:
            New grid holding a copy of the array
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        if not np.isin(array, (0, 1)).all():
            raise ValueError("Array values must be 0 (DEAD) or 1 (ALIVE)")
        height, width = array.shape
        grid = cls(width, height)
        grid._cells[:] = array.astype(np.uint8).ravel()
        return grid

    def to_array(self) -> np.ndarray:
        """Return a (height, width) uint8 copy of the cells."""
        return self._view().copy()

    def copy(self) -> 'Grid':
        grid = Grid(self._width, self._height)
        grid._cells[:] = self._cells
        return grid

    def _view(self) -> np.ndarray:
        # 2D view sharing memory with the flat buffer
        return self._cells.reshape(self._height, self._width)

    def _index(self, x: int, y: int) -> int:
        return y * self._width + x

    def _check_coordinates(self, x: int, y: int) -> Tuple[int, int]:
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            raise OutOfRangeError(
                f"Coordinates ({x!r}, {y!r}) are not integers") from None
        if not 0 <= x < self._width:
            raise OutOfRangeError(
                f"x={x} is out of bounds for a grid of width {self._width}")
        if not 0 <= y < self._height:
            raise OutOfRangeError(
                f"y={y} is out of bounds for a grid of height {self._height}")
        return x, y

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def get_total_cells(self) -> int:
        return self._width * self._height

    def get_alive_cells(self) -> int:
        return int(np.count_nonzero(self._cells == Cell.ALIVE))

    def get_dead_cells(self) -> int:
        return int(np.count_nonzero(self._cells == Cell.DEAD))

    def get(self, x: int, y: int) -> Cell:
        """
        Read the cell at (x, y).

        Raises:
            OutOfRangeError: If x is not in [0, width) or y is not in [0, height)
        """
        x, y = self._check_coordinates(x, y)
        return Cell(int(self._cells[self._index(x, y)]))

    def set(self, x: int, y: int, value) -> None:
        """
        Write the cell at (x, y).

        Args:
            x: Column
            y: Row
            value: Cell, 0/1, bool or one of the characters ' ' and '#'

        Raises:
            OutOfRangeError: If the coordinates are outside the grid
            ValueError: If value is not a valid cell
        """
        x, y = self._check_coordinates(x, y)
        self._cells[self._index(x, y)] = Cell.coerce(value)

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key: Tuple[int, int], value) -> None:
        x, y = key
        self.set(x, y, value)

    def resize(self, width: int, height: Optional[int] = None) -> None:
        """
        Resize in place, keeping the cells that lie inside both the old and
        the new extent. Newly exposed cells are DEAD.

        Args:
            width: New width, or the side of a square when height is omitted
            height: New height
        """
        if height is None:
            height = width
        new_width = _dimension(width, 'width')
        new_height = _dimension(height, 'height')

        cells = np.zeros(new_width * new_height, dtype=np.uint8)
        keep_w = min(self._width, new_width)
        keep_h = min(self._height, new_height)
        cells.reshape(new_height, new_width)[:keep_h, :keep_w] = \
            self._view()[:keep_h, :keep_w]

        logger.debug("Resized grid from %dx%d to %dx%d",
                     self._width, self._height, new_width, new_height)
        self._cells = cells
        self._width = new_width
        self._height = new_height

    def crop(self, x0: int, y0: int, x1: int, y1: int) -> 'Grid':
        """
        Copy the sub-rectangle [x0, x1) x [y0, y1) into a new grid.

        Raises:
            InvalidRegionError: If any corner is negative, lies past the
                grid, or the rectangle is inverted
        """
        if x0 < 0 or y0 < 0 or x1 < 0 or y1 < 0:
            raise InvalidRegionError(
                f"Crop corners must be non-negative, got ({x0}, {y0}, {x1}, {y1})")
        if x0 > self._width or x1 > self._width or x1 - x0 > self._width:
            raise InvalidRegionError(
                f"Crop x range [{x0}, {x1}) exceeds grid width {self._width}")
        if y0 > self._height or y1 > self._height or y1 - y0 > self._height:
            raise InvalidRegionError(
                f"Crop y range [{y0}, {y1}) exceeds grid height {self._height}")
        if x0 > x1:
            raise InvalidRegionError(f"Crop x0={x0} is greater than x1={x1}")
        if y0 > y1:
            raise InvalidRegionError(f"Crop y0={y0} is greater than y1={y1}")

        cropped = Grid(x1 - x0, y1 - y0)
        cropped._cells[:] = self._view()[y0:y1, x0:x1].ravel()
        return cropped

    def merge(self, other: 'Grid', x0: int, y0: int, alive_only: bool = False) -> None:
        """
        Overlay another grid with its top-left corner at (x0, y0).

        Args:
            other: Grid to copy cells from, left untouched
            x0: Column of the overlay's left edge
            y0: Row of the overlay's top edge
            alive_only: When True, cells that are already ALIVE are never
                overwritten; only the other cells take the overlay's value

        Raises:
            InvalidRegionError: If the overlay does not fit inside this grid
        """
        if not isinstance(other, Grid):
            raise TypeError(f"Can only merge a Grid, got {type(other).__name__}")
        if other.width > self._width or other.height > self._height:
            raise InvalidRegionError(
                f"Overlay {other.width}x{other.height} is wider or taller than "
                f"the grid {self._width}x{self._height}")
        if other.get_total_cells() > self.get_total_cells():
            raise InvalidRegionError("Overlay area is larger than the grid area")
        if x0 < 0 or y0 < 0:
            raise InvalidRegionError(
                f"Overlay origin must be non-negative, got ({x0}, {y0})")
        if x0 + other.width > self._width or y0 + other.height > self._height:
            raise InvalidRegionError(
                f"Overlay {other.width}x{other.height} at ({x0}, {y0}) does not "
                f"fit inside the grid {self._width}x{self._height}")

        target = self._view()[y0:y0 + other.height, x0:x0 + other.width]
        overlay = other._view()
        if alive_only:
            target[:] = np.where(target == Cell.ALIVE, target, overlay)
        else:
            target[:] = overlay

    def rotate(self, rotation: int) -> 'Grid':
        """
        Return a copy rotated clockwise by rotation * 90 degrees.

        Any integer is accepted; only rotation mod 4 matters.
        """
        quarter_turns = operator.index(rotation) % 4
        # np.rot90 turns counter-clockwise for positive k
        rotated = np.array(np.rot90(self._view(), -quarter_turns), dtype=np.uint8)
        grid = Grid(rotated.shape[1], rotated.shape[0])
        grid._cells[:] = rotated.ravel()
        return grid

    def bounding_box(self) -> Tuple[int, int, int, int]:
        """Return the half-open box (x0, y0, x1, y1) around the ALIVE cells."""
        ys, xs = np.nonzero(self._view())
        if len(xs) == 0:
            return (0, 0, 0, 0)
        return (int(xs.min()), int(ys.min()), int(xs.max()) + 1, int(ys.max()) + 1)

    def trim(self) -> 'Grid':
        """Crop to the bounding box of the ALIVE cells."""
        return self.crop(*self.bounding_box())

    def rows(self) -> Iterator[str]:
        """Yield each row as a string of ' ' (DEAD) and '#' (ALIVE)."""
        for row in self._view():
            yield ''.join(_CHARS[row])

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._width == other._width
                and self._height == other._height
                and np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __repr__(self):
        return (f"Grid(width={self._width}, height={self._height}, "
                f"alive={self.get_alive_cells()})")

    def __str__(self):
        border = '+' + '-' * self._width + '+'
        lines = [border]
        lines.extend('|' + row + '|' for row in self.rows())
        lines.append(border)
        return '\n'.join(lines) + '\n'
