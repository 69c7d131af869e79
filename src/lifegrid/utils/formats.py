"""
Ascii (.gol) and binary (.bgol) grid file formats.

Ascii files hold a header line "<width> <height>\\n" followed by `height`
lines of exactly `width` characters, ' ' for DEAD and '#' for ALIVE, each
terminated by '\\n'.

Binary files hold a 4 byte signed width and a 4 byte signed height in
native byte order, followed by ceil(width * height / 8) bytes of cell bits
in row-major order, least significant bit first, 1 for ALIVE. Padding bits
in the last byte are 0.
"""
import logging
import re
import struct
from pathlib import Path
from typing import Union

import numpy as np

from ..core.cell import Cell
from ..core.errors import FormatError, GridIOError
from ..core.grid import Grid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ASCII_SUFFIX = '.gol'
BINARY_SUFFIX = '.bgol'

_HEADER = struct.Struct('=ii')
_INTEGER = re.compile(r'[+-]?[0-9]+')


def encode_ascii(grid: Grid) -> str:
    lines = [f"{grid.width} {grid.height}"]
    lines.extend(grid.rows())
    return '\n'.join(lines) + '\n'


def _parse_dimension(token: str, name: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise FormatError(f"Ascii header {name} {token!r} is not an integer")
    value = int(token)
    if value <= 0:
        raise FormatError(f"Ascii header {name} must be a positive integer, got {value}")
    return value


def decode_ascii(text: str) -> Grid:
    """
    Parse ascii grid text.

    Raises:
        FormatError: If the header is not two positive integers, a newline
            is missing where one is expected, or a cell character is not
            ' ' or '#'
    """
    header_end = text.find('\n')
    if header_end == -1:
        raise FormatError("Ascii header is not terminated by a newline")
    tokens = text[:header_end].split()
    if len(tokens) != 2:
        raise FormatError(
            f"Ascii header must hold a width and a height, got {text[:header_end]!r}")
    width = _parse_dimension(tokens[0], 'width')
    height = _parse_dimension(tokens[1], 'height')
    if len(text) - (header_end + 1) < height * (width + 1):
        raise FormatError(
            f"Ascii data ends before {height} rows of {width} cells and a newline")

    cells = np.zeros((height, width), dtype=np.uint8)
    pos = header_end + 1
    for y in range(height):
        row = text[pos:pos + width]
        for x, char in enumerate(row):
            if char == '#':
                cells[y, x] = Cell.ALIVE
            elif char != ' ':
                raise FormatError(
                    f"Invalid cell character {char!r} at row {y}, column {x}")
        if len(row) < width:
            raise FormatError(f"Ascii data ends inside row {y}")
        pos += width
        if text[pos:pos + 1] != '\n':
            raise FormatError(f"Expected a newline at the end of row {y}")
        pos += 1

    return Grid.from_array(cells)


def encode_binary(grid: Grid) -> bytes:
    bits = grid.to_array().ravel()
    payload = np.packbits(bits, bitorder='little')
    return _HEADER.pack(grid.width, grid.height) + payload.tobytes()


def decode_binary(data: bytes) -> Grid:
    """
    Parse binary grid data.

    Raises:
        FormatError: If the header or the cell payload is truncated, or the
            header holds a negative dimension
    """
    if len(data) < _HEADER.size:
        raise FormatError(
            f"Binary data ends inside the header ({len(data)} of {_HEADER.size} bytes)")
    width, height = _HEADER.unpack_from(data)
    if width < 0 or height < 0:
        raise FormatError(f"Binary header holds a negative size {width}x{height}")

    total = width * height
    expected = (total + 7) // 8
    available = len(data) - _HEADER.size
    if available < expected:
        raise FormatError(
            f"Binary data ends unexpectedly: expected {expected} payload bytes, "
            f"got {available}")

    payload = np.array(bytearray(data[_HEADER.size:_HEADER.size + expected]), dtype=np.uint8)
    bits = np.unpackbits(payload, bitorder='little', count=total)
    return Grid.from_array(bits.reshape(height, width))


def load_ascii(path: PathLike) -> Grid:
    """Load a grid from an ascii .gol file."""
    try:
        with open(path, 'r', newline='') as f:
            text = f.read()
    except OSError as exc:
        raise GridIOError(f"Cannot open {path} for reading: {exc}") from exc
    logger.debug("Loaded ascii grid from %s", path)
    return decode_ascii(text)


def save_ascii(path: PathLike, grid: Grid) -> None:
    """Save a grid to an ascii .gol file."""
    try:
        with open(path, 'w', newline='') as f:
            f.write(encode_ascii(grid))
    except OSError as exc:
        raise GridIOError(f"Cannot open {path} for writing: {exc}") from exc
    logger.debug("Saved %dx%d ascii grid to %s", grid.width, grid.height, path)


def load_binary(path: PathLike) -> Grid:
    """Load a grid from a binary .bgol file."""
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as exc:
        raise GridIOError(f"Cannot open {path} for reading: {exc}") from exc
    logger.debug("Loaded binary grid from %s", path)
    return decode_binary(data)


def save_binary(path: PathLike, grid: Grid) -> None:
    """Save a grid to a binary .bgol file."""
    try:
        with open(path, 'wb') as f:
            f.write(encode_binary(grid))
    except OSError as exc:
        raise GridIOError(f"Cannot open {path} for writing: {exc}") from exc
    logger.debug("Saved %dx%d binary grid to %s", grid.width, grid.height, path)


def load_grid(path: PathLike) -> Grid:
    """Load a grid, choosing the format from the file suffix."""
    if Path(path).suffix == BINARY_SUFFIX:
        return load_binary(path)
    return load_ascii(path)


def save_grid(path: PathLike, grid: Grid) -> None:
    """Save a grid, choosing the format from the file suffix."""
    if Path(path).suffix == BINARY_SUFFIX:
        save_binary(path, grid)
    else:
        save_ascii(path, grid)
