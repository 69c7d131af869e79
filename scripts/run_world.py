"""
Evolve a Game of Life world loaded from a file, a preset pattern or a random soup
"""
import argparse
import sys

import numpy as np

from lifegrid import Grid, GridError, World
from lifegrid.utils.formats import load_grid, save_grid
from lifegrid.utils.patterns import get_pattern, place_pattern

DEFAULT_STEPS = 100
DEFAULT_DENSITY = 0.3


def random_grid(width, height, density=DEFAULT_DENSITY, seed=None):
    """
    Generate a random initial state.

    Args:
        width: Grid width
        height: Grid height
        density: Probability of alive cell
        seed: Random seed

    Returns:
        Grid with each cell ALIVE with probability `density`
    """
    rng = np.random.default_rng(seed)
    return Grid.from_array((rng.random((height, width)) < density).astype(np.uint8))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Conway's Game of Life simulation.")

    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('-F', '--file', type=str,
                       help='Path to a .gol or .bgol file with the initial grid.')
    group.add_argument('-P', '--pattern', type=str,
                       help='Name of a preset pattern, e.g. glider or r_pentomino.')
    group.add_argument('-S', '--size', type=int, nargs=2, metavar=('WIDTH', 'HEIGHT'),
                       help='Width and height for a random grid.')

    parser.add_argument('--canvas', type=int, nargs=2, metavar=('WIDTH', 'HEIGHT'),
                        help='Center a preset pattern on a grid of this size.')
    parser.add_argument('--density', type=float, default=DEFAULT_DENSITY,
                        help='Alive probability for a random grid.')
    parser.add_argument('--seed', type=int, default=None, help='Random seed.')
    parser.add_argument('-I', '--steps', type=int, default=DEFAULT_STEPS,
                        help='Number of generations.')
    parser.add_argument('-T', '--toroidal', action='store_true',
                        help='Wrap the grid edges around.')
    parser.add_argument('-O', '--output', type=str,
                        help='Save the final grid to a .gol or .bgol file.')
    parser.add_argument('-V', '--show', action='store_true',
                        help='Print the grid before and after evolving.')
    return parser.parse_args(argv)


def initial_grid(args):
    if args.file:
        return load_grid(args.file)
    if args.pattern:
        pattern = get_pattern(args.pattern)
        if args.canvas:
            return place_pattern(tuple(args.canvas), pattern)
        return pattern
    width, height = args.size
    return random_grid(width, height, args.density, args.seed)


def main(argv=None):
    """Load, evolve and optionally save a world."""
    args = parse_args(argv)

    try:
        world = World.from_state(initial_grid(args))

        print("=" * 60)
        print("Game of Life")
        print("=" * 60)
        print(f"  Grid size: {world.width}x{world.height}")
        print(f"  Steps: {args.steps}")
        print(f"  Toroidal: {args.toroidal}")
        print(f"  Alive cells at start: {world.get_alive_cells()}")

        if args.show:
            print(world.get_state(), end='')

        world.advance(args.steps, toroidal=args.toroidal, progress=True)

        if args.show:
            print(world.get_state(), end='')

        print(f"  Alive cells after {args.steps} steps: {world.get_alive_cells()}")
        print(f"  Dead cells after {args.steps} steps: {world.get_dead_cells()}")

        if args.output:
            save_grid(args.output, world.get_state())
            print(f"Saved to {args.output}")
    except (GridError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
