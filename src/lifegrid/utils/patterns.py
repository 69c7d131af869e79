"""Predefined Game of Life patterns, each on a grid the size of its bounding box."""
from typing import Dict, Optional, Sequence, Tuple

from ..core.cell import Cell
from ..core.grid import Grid


def _from_picture(picture: Sequence[str]) -> Grid:
    """Build a grid from rows drawn with '#' (ALIVE) and '.' (DEAD)."""
    grid = Grid(len(picture[0]), len(picture))
    for y, row in enumerate(picture):
        for x, char in enumerate(row):
            if char == '#':
                grid.set(x, y, Cell.ALIVE)
    return grid


def glider() -> Grid:
    """
    3x3 glider.

        +---+
        | # |
        |  #|
        |###|
        +---+
    """
    grid = Grid(3)
    grid.set(1, 0, Cell.ALIVE)
    grid.set(2, 1, Cell.ALIVE)
    grid.set(0, 2, Cell.ALIVE)
    grid.set(1, 2, Cell.ALIVE)
    grid.set(2, 2, Cell.ALIVE)
    return grid


def r_pentomino() -> Grid:
    """
    3x3 R-pentomino.

        +---+
        | ##|
        |## |
        | # |
        +---+
    """
    grid = Grid(3)
    grid.set(1, 0, Cell.ALIVE)
    grid.set(2, 0, Cell.ALIVE)
    grid.set(0, 1, Cell.ALIVE)
    grid.set(1, 1, Cell.ALIVE)
    grid.set(1, 2, Cell.ALIVE)
    return grid


def light_weight_spaceship() -> Grid:
    """
    5x4 light weight spaceship.

        +-----+
        | #  #|
        |#    |
        |#   #|
        |#### |
        +-----+
    """
    grid = Grid(5, 4)
    for x, y in [(1, 0), (4, 0), (0, 1), (0, 2), (4, 2),
                 (0, 3), (1, 3), (2, 3), (3, 3)]:
        grid.set(x, y, Cell.ALIVE)
    return grid


# Still lifes (period 1)
BLOCK = (
    "##",
    "##",
)

BEEHIVE = (
    ".##.",
    "#..#",
    ".##.",
)

BOAT = (
    "##.",
    "#.#",
    ".#.",
)

LOAF = (
    ".##.",
    "#..#",
    ".#.#",
    "..#.",
)

# Oscillators (period 2)
BLINKER = (
    "###",
)

TOAD = (
    ".###",
    "###.",
)

BEACON = (
    "##..",
    "##..",
    "..##",
    "..##",
)

# Oscillators (period 3)
PULSAR = (
    "..###...###..",
    ".............",
    "#....#.#....#",
    "#....#.#....#",
    "#....#.#....#",
    "..###...###..",
    ".............",
    "..###...###..",
    "#....#.#....#",
    "#....#.#....#",
    "#....#.#....#",
    ".............",
    "..###...###..",
)

# Gosper's glider gun, emits one glider every 30 generations
GLIDER_GUN = (
    "........................#...........",
    "......................#.#...........",
    "............##......##............##",
    "...........#...#....##............##",
    "##........#.....#...##..............",
    "##........#...#.##....#.#...........",
    "..........#.....#.......#...........",
    "...........#...#....................",
    "............##......................",
)

PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON
    },
    'oscillators_p3': {
        'pulsar': PULSAR
    },
    'spaceships': {
        'glider': glider,
        'lwss': light_weight_spaceship
    },
    'methuselahs': {
        'r_pentomino': r_pentomino
    },
    'guns': {
        'glider_gun': GLIDER_GUN
    }
}


def _build(source) -> Grid:
    if callable(source):
        return source()
    return _from_picture(source)


def get_pattern(name: str) -> Grid:
    """Return a fresh grid holding the named pattern."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return _build(category[name])

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns() -> Dict[str, Dict[str, Grid]]:
    """Return every pattern as a grid, organized by category."""
    return {
        category: {name: _build(source) for name, source in patterns.items()}
        for category, patterns in PATTERN_CATEGORIES.items()
    }


def place_pattern(grid_size: Tuple[int, int],
                  pattern: Grid,
                  position: Optional[Tuple[int, int]] = None) -> Grid:
    """
    Place a pattern on an empty grid.

    Args:
        grid_size: (width, height) of the new grid
        pattern: Pattern to copy in
        position: (x, y) of the pattern's top-left corner, centered if None

    Returns:
        New grid containing the pattern

    Raises:
        InvalidRegionError: If the pattern does not fit at that position
    """
    width, height = grid_size
    grid = Grid(width, height)
    if position is None:
        x0 = (width - pattern.width) // 2
        y0 = (height - pattern.height) // 2
    else:
        x0, y0 = position

    grid.merge(pattern, x0, y0)
    return grid
