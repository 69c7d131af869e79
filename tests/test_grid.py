import numpy as np
import pytest

from lifegrid import Cell, Grid, InvalidRegionError, OutOfRangeError


def test_default_grid_is_empty():
    grid = Grid()
    assert grid.get_width() == 0
    assert grid.get_height() == 0
    assert grid.get_total_cells() == 0
    assert grid.get_alive_cells() == 0
    assert grid.get_dead_cells() == 0


def test_square_grid():
    grid = Grid(4)
    assert (grid.width, grid.height) == (4, 4)
    assert grid.get_dead_cells() == 16


def test_rectangular_grid_is_all_dead():
    grid = Grid(5, 3)
    assert (grid.get_width(), grid.get_height()) == (5, 3)
    assert grid.get_total_cells() == 15
    assert all(grid.get(x, y) == Cell.DEAD for x in range(5) for y in range(3))


@pytest.mark.parametrize("size", [(-1,), (3, -2), (-4, 4)])
def test_negative_size_is_rejected(size):
    with pytest.raises(ValueError):
        Grid(*size)


def test_set_then_get_every_cell(random_grid):
    grid = Grid(random_grid.width, random_grid.height)
    for y in range(grid.height):
        for x in range(grid.width):
            value = random_grid.get(x, y)
            grid.set(x, y, value)
            assert grid.get(x, y) == value
    assert grid == random_grid


def test_indexed_access():
    grid = Grid(3, 2)
    grid[2, 1] = Cell.ALIVE
    assert grid[2, 1] is Cell.ALIVE
    assert grid.get(2, 1) is Cell.ALIVE
    assert grid[1, 1] is Cell.DEAD


def test_set_accepts_ints_bools_and_chars():
    grid = Grid(4, 1)
    grid.set(0, 0, 1)
    grid.set(1, 0, True)
    grid.set(2, 0, '#')
    grid.set(3, 0, ' ')
    assert list(grid.rows()) == ["### "]


def test_set_accepts_numpy_scalars():
    grid = Grid(3, 1)
    grid.set(0, 0, np.bool_(True))
    grid.set(1, 0, np.uint8(1))
    grid[np.int64(2), np.int64(0)] = np.bool_(False)
    assert list(grid.rows()) == ["## "]


@pytest.mark.parametrize("x, y", [(1.5, 0), (0, 0.0), ("1", 0), (None, 0)])
def test_non_integer_coordinates_are_out_of_range(x, y):
    grid = Grid(3, 2)
    with pytest.raises(OutOfRangeError):
        grid.get(x, y)
    with pytest.raises(OutOfRangeError):
        grid.set(x, y, Cell.ALIVE)
    assert grid.get_alive_cells() == 0


@pytest.mark.parametrize("value", [2, -1, 'x', 0.5, None])
def test_set_rejects_invalid_cells(value):
    grid = Grid(2)
    with pytest.raises(ValueError):
        grid.set(0, 0, value)
    assert grid.get_alive_cells() == 0


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1), (3, 2), (10, 10)])
def test_out_of_range_coordinates(x, y):
    grid = Grid(3, 2)
    with pytest.raises(OutOfRangeError):
        grid.get(x, y)
    with pytest.raises(OutOfRangeError):
        grid.set(x, y, Cell.ALIVE)
    with pytest.raises(IndexError):
        grid[x, y]
    assert grid.get_alive_cells() == 0


def test_census_adds_up(random_grid):
    assert random_grid.get_alive_cells() + random_grid.get_dead_cells() == \
        random_grid.get_total_cells()
    assert random_grid.get_alive_cells() == int(random_grid.to_array().sum())


def test_resize_grow_keeps_content_and_fills_dead(make_grid):
    grid = make_grid("# ",
                     " #")
    grid.resize(4, 3)
    assert list(grid.rows()) == ["#   ",
                                 " #  ",
                                 "    "]


def test_resize_shrink_keeps_overlap(make_grid):
    grid = make_grid("# #",
                     "###",
                     "  #")
    grid.resize(2)
    assert (grid.width, grid.height) == (2, 2)
    assert list(grid.rows()) == ["# ",
                                 "##"]


def test_resize_changes_aspect(make_grid):
    grid = make_grid("##",
                     "##",
                     "##")
    grid.resize(4, 1)
    assert list(grid.rows()) == ["##  "]


def test_resize_round_trip_preserves_original_cells(random_grid):
    original = random_grid.copy()
    random_grid.resize(20, 11)
    assert random_grid.get_alive_cells() == original.get_alive_cells()
    random_grid.resize(original.width, original.height)
    assert random_grid == original


def test_resize_to_and_from_zero(random_grid):
    random_grid.resize(0, 5)
    assert random_grid.get_total_cells() == 0
    random_grid.resize(3, 3)
    assert random_grid.get_dead_cells() == 9


def test_resize_rejects_negative_without_mutating(random_grid):
    original = random_grid.copy()
    with pytest.raises(ValueError):
        random_grid.resize(-1, 4)
    assert random_grid == original


def test_crop(make_grid):
    grid = make_grid("#  #",
                     " ## ",
                     "#  #")
    cropped = grid.crop(1, 0, 3, 2)
    assert (cropped.width, cropped.height) == (2, 2)
    assert list(cropped.rows()) == ["  ",
                                    "##"]


def test_crop_does_not_alias_source(random_grid):
    cropped = random_grid.crop(0, 0, 2, 2)
    before = random_grid.copy()
    cropped.set(0, 0, Cell.ALIVE)
    cropped.set(1, 1, Cell.DEAD)
    assert random_grid == before


def test_zero_area_crop():
    grid = Grid(4, 4)
    assert grid.crop(2, 1, 2, 3).get_total_cells() == 0
    assert grid.crop(4, 4, 4, 4).get_total_cells() == 0


@pytest.mark.parametrize("region", [
    (-1, 0, 2, 2),
    (0, -1, 2, 2),
    (0, 0, 5, 2),
    (5, 0, 5, 2),
    (0, 0, 2, 4),
    (3, 0, 1, 2),
    (0, 2, 2, 1),
])
def test_invalid_crop(region):
    grid = Grid(4, 3)
    with pytest.raises(InvalidRegionError):
        grid.crop(*region)


def test_merge_overwrites(make_grid):
    grid = make_grid("###",
                     "###",
                     "###")
    grid.merge(make_grid("# ",
                         " #"), 1, 1)
    assert list(grid.rows()) == ["###",
                                 "## ",
                                 "# #"]


def test_merge_alive_only_never_kills(make_grid):
    grid = make_grid("#  ",
                     "   ",
                     "  #")
    grid.merge(Grid(2), 1, 1, alive_only=True)
    assert grid.get(2, 2) is Cell.ALIVE
    assert grid.get(2, 1) is Cell.DEAD
    assert list(grid.rows()) == ["#  ",
                                 "   ",
                                 "  #"]
    grid.merge(make_grid("###"), 0, 1, alive_only=True)
    assert list(grid.rows()) == ["#  ",
                                 "###",
                                 "  #"]


def test_merge_leaves_overlay_untouched(glider_grid):
    grid = Grid(5)
    before = glider_grid.copy()
    grid.merge(glider_grid, 2, 2)
    grid.set(2, 2, Cell.ALIVE)
    assert glider_grid == before


@pytest.mark.parametrize("overlay_size, origin", [
    ((5, 1), (0, 0)),
    ((1, 5), (0, 0)),
    ((2, 2), (-1, 0)),
    ((2, 2), (0, -1)),
    ((2, 2), (3, 0)),
    ((2, 2), (0, 3)),
])
def test_invalid_merge_leaves_grid_unchanged(random_grid, overlay_size, origin):
    grid = random_grid.crop(0, 0, 4, 4)
    before = grid.copy()
    overlay = Grid(*overlay_size)
    overlay.set(0, 0, Cell.ALIVE)
    with pytest.raises(InvalidRegionError):
        grid.merge(overlay, *origin)
    assert grid == before


def test_merge_requires_grid():
    with pytest.raises(TypeError):
        Grid(3).merge(np.ones((2, 2)), 0, 0)


def test_crop_then_merge_restores_region(random_grid):
    region = random_grid.crop(2, 1, 6, 4)
    target = random_grid.copy()
    target.merge(Grid(4, 3), 2, 1)
    target.merge(region, 2, 1)
    assert target == random_grid


def test_rotate_clockwise():
    grid = Grid(3, 2)
    grid.set(0, 0, Cell.ALIVE)
    rotated = grid.rotate(1)
    assert (rotated.width, rotated.height) == (2, 3)
    assert rotated.bounding_box() == (1, 0, 2, 1)


def test_rotate_anticlockwise():
    grid = Grid(3, 2)
    grid.set(0, 0, Cell.ALIVE)
    for rotation in (3, -1, 7):
        rotated = grid.rotate(rotation)
        assert (rotated.width, rotated.height) == (2, 3)
        assert rotated.get(0, 2) is Cell.ALIVE
        assert rotated.get_alive_cells() == 1


def test_rotate_half_turn_reverses_both_axes(random_grid):
    rotated = random_grid.rotate(2)
    assert (rotated.width, rotated.height) == (random_grid.width, random_grid.height)
    w, h = random_grid.width, random_grid.height
    for y in range(h):
        for x in range(w):
            assert rotated.get(x, y) == random_grid.get(w - 1 - x, h - 1 - y)


def test_glider_rotations(glider_grid):
    assert list(glider_grid.rotate(1).rows()) == ["#  ",
                                                  "# #",
                                                  "## "]
    assert list(glider_grid.rotate(2).rows()) == ["###",
                                                  "#  ",
                                                  " # "]


@pytest.mark.parametrize("k", range(-6, 7))
def test_rotate_inverse_is_identity(random_grid, k):
    assert random_grid.rotate(k).rotate(-k) == random_grid


def test_rotate_full_turn_is_a_copy(random_grid):
    assert random_grid.rotate(4) == random_grid.rotate(0) == random_grid
    copy = random_grid.rotate(0)
    copy.set(0, 0, Cell.ALIVE if copy.get(0, 0) is Cell.DEAD else Cell.DEAD)
    assert copy != random_grid


def test_rotate_does_not_mutate_source(random_grid):
    before = random_grid.copy()
    random_grid.rotate(1)
    random_grid.rotate(-3)
    assert random_grid == before


def test_rotate_empty_grid():
    rotated = Grid(0, 3).rotate(1)
    assert (rotated.width, rotated.height) == (3, 0)


def test_text_rendering(glider_grid):
    assert str(glider_grid) == ("+---+\n"
                                "| # |\n"
                                "|  #|\n"
                                "|###|\n"
                                "+---+\n")


def test_text_rendering_of_empty_grid():
    assert str(Grid()) == "++\n++\n"


def test_bounding_box_and_trim(glider_grid):
    grid = Grid(8, 6)
    grid.merge(glider_grid, 3, 2)
    assert grid.bounding_box() == (3, 2, 6, 5)
    assert grid.trim() == glider_grid
    assert Grid(4).bounding_box() == (0, 0, 0, 0)
    assert Grid(4).trim().get_total_cells() == 0


def test_array_round_trip(random_grid):
    array = random_grid.to_array()
    assert array.shape == (random_grid.height, random_grid.width)
    assert Grid.from_array(array) == random_grid
    array[0, 0] = 1 - array[0, 0]
    assert Grid.from_array(array) != random_grid


@pytest.mark.parametrize("array", [
    np.array([[0, 2]]),
    np.array([1, 0, 1]),
])
def test_from_array_rejects_invalid_input(array):
    with pytest.raises(ValueError):
        Grid.from_array(array)


def test_equality():
    assert Grid(2, 3) == Grid(2, 3)
    assert Grid(2, 3) != Grid(3, 2)
    assert Grid(0, 3) != Grid(3, 0)
    assert Grid(1) != "Grid"
