"""Exceptions raised by grids, worlds and the file formats."""


class GridError(Exception):
    """Base class for every error raised by lifegrid."""


class OutOfRangeError(GridError, IndexError):
    """A coordinate lies outside the bounds of the grid."""


class InvalidRegionError(GridError, ValueError):
    """A crop or merge rectangle is negative, inverted or does not fit."""


class FormatError(GridError, ValueError):
    """Malformed ascii or binary grid data."""


class GridIOError(GridError, OSError):
    """A grid file could not be opened for reading or writing."""
