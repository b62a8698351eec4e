"""
Pytest configuration and shared fixtures.
"""

import pytest

from grid import Grid, Kind


def build_grid(rows, cols, start, target, obstacles=()):
    grid = Grid(rows, cols)
    grid.set_classification(start, Kind.START)
    grid.set_classification(target, Kind.TARGET)
    for pos in obstacles:
        grid.set_classification(pos, Kind.OBSTACLE)
    return grid


@pytest.fixture
def make_grid():
    """Factory for grids with start, target and obstacles already placed."""
    return build_grid


@pytest.fixture
def open_grid():
    """3x3 grid, start top-left, target bottom-right, no obstacles."""
    return build_grid(3, 3, (0, 0), (2, 2))


@pytest.fixture
def walled_grid():
    """3x3 grid with the middle column blocked between start and target."""
    return build_grid(3, 3, (0, 0), (0, 2), obstacles=[(0, 1), (1, 1), (2, 1)])


@pytest.fixture
def grid_file(tmp_path):
    """Small map file with a detour around a wall."""
    path = tmp_path / "maze.txt"
    path.write_text(
        "; sample map\n"
        "S..#.\n"
        ".#.#.\n"
        ".#...\n"
        "...#T\n",
        encoding="utf-8",
    )
    return path
