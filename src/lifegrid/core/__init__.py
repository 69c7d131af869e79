"""Grid storage and the evolution engine."""

from .cell import Cell
from .errors import (
    GridError,
    OutOfRangeError,
    InvalidRegionError,
    FormatError,
    GridIOError
)
from .grid import Grid
from .world import World

__all__ = [
    'Cell',
    'Grid',
    'World',
    'GridError',
    'OutOfRangeError',
    'InvalidRegionError',
    'FormatError',
    'GridIOError',
]
