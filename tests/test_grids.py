import random

import pytest

from algocourse.grids import flatten, format_grid, random_cube, random_grid


def test_random_grid_shape_and_range():
    grid = random_grid(4, 6, 10, random.Random(1))
    assert len(grid) == 4
    assert all(len(row) == 6 for row in grid)
    assert all(0 <= value < 10 for row in grid for value in row)


def test_random_grid_is_reproducible():
    first = random_grid(3, 3, 10, random.Random(5))
    second = random_grid(3, 3, 10, random.Random(5))
    assert len(first) == 3
    assert [len(row) for row in first] == [3, 3, 3]
    assert first == second


def test_random_grid_rejects_bad_arguments():
    with pytest.raises(ValueError):
        random_grid(-1, 2)
    with pytest.raises(ValueError):
        random_grid(2, 2, 0)


def test_random_cube_shape():
    cube = random_cube(2, 3, 4, 100, random.Random(2))
    assert len(cube) == 2
    assert all(len(plane) == 3 for plane in cube)
    assert all(len(row) == 4 for plane in cube for row in plane)
    assert len(flatten(cube)) == 24
    assert all(0 <= value < 100 for value in flatten(cube))


def test_random_cube_rejects_bad_arguments():
    with pytest.raises(ValueError):
        random_cube(1, -2, 1)
    with pytest.raises(ValueError):
        random_cube(1, 1, 1, -5)


def test_format_grid():
    assert format_grid([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"
    assert format_grid([]) == ""


def test_format_grid_line_count():
    grid = random_grid(5, 7, 10, random.Random(3))
    lines = format_grid(grid).splitlines()
    assert len(lines) == 5
    assert [[int(v) for v in line.split()] for line in lines] == grid


def test_flatten_row_major():
    assert flatten([[[1, 2], [3]], [[4]]]) == [1, 2, 3, 4]
    assert flatten([[5, 6], [7]]) == [5, 6, 7]
    assert flatten([]) == []