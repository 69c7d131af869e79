"""Population and trajectory analysis for Game of Life worlds."""
import numpy as np

from ..core.grid import Grid
from ..core.world import World


def population(grid: Grid) -> int:
    """Return the number of ALIVE cells."""
    return grid.get_alive_cells()


def density(grid: Grid) -> float:
    """Return the fraction of cells that are ALIVE, 0.0 for an empty grid."""
    total = grid.get_total_cells()
    if total == 0:
        return 0.0
    return grid.get_alive_cells() / total


def hamming_distance(a: Grid, b: Grid) -> int:
    """Return the number of cells that differ between two same-sized grids."""
    if (a.width, a.height) != (b.width, b.height):
        raise ValueError(
            f"Cannot compare a {a.width}x{a.height} grid with a {b.width}x{b.height} grid")
    return int(np.count_nonzero(a.to_array() != b.to_array()))


def population_history(world: World, steps: int, toroidal: bool = False) -> np.ndarray:
    """Advance the world and return live counts for generations 0..steps."""
    trajectory = world.trajectory(steps, toroidal=toroidal)
    return trajectory.reshape(len(trajectory), -1).sum(axis=1)


def detect_period(world: World, max_steps: int, toroidal: bool = False) -> int:
    """
    Advance the world until a state repeats.

    Args:
        world: World to evolve, advanced in place
        max_steps: Maximum number of generations to try
        toroidal: Wrap neighbours around the edges of the grid

    Returns:
        Number of generations between the repeated state and its previous
        occurrence (1 for a still life), or -1 if nothing repeats within
        max_steps
    """
    seen = {world.get_state().to_array().tobytes(): 0}
    for t in range(1, max_steps + 1):
        world.step(toroidal)
        key = world.get_state().to_array().tobytes()
        if key in seen:
            return t - seen[key]
        seen[key] = t
    return -1
