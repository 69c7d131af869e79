"""Cell states for Game of Life grids."""
import operator
from enum import IntEnum

import numpy as np


class Cell(IntEnum):
    """A cell is either DEAD or ALIVE. Nothing else is a valid state."""

    DEAD = 0
    ALIVE = 1

    @property
    def char(self) -> str:
        """Character used by the text rendering and the ascii file format."""
        return '#' if self is Cell.ALIVE else ' '

    @classmethod
    def from_char(cls, char: str) -> 'Cell':
        if char == '#':
            return cls.ALIVE
        if char == ' ':
            return cls.DEAD
        raise ValueError(f"{char!r} is not a valid cell character")

    @classmethod
    def coerce(cls, value) -> 'Cell':
        """Convert a Cell, 0/1, bool or cell character into a Cell."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_char(value)
        if isinstance(value, (bool, np.bool_)):
            return cls(int(value))
        try:
            return cls(operator.index(value))
        except (TypeError, ValueError):
            raise ValueError(f"{value!r} is not a valid cell value") from None
