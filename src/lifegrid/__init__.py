"""Conway's Game of Life on finite, optionally toroidal grids."""

from .core import (
    Cell,
    Grid,
    World,
    GridError,
    OutOfRangeError,
    InvalidRegionError,
    FormatError,
    GridIOError
)

__version__ = '0.1.0'

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
