# tests/test_walls.py
import os
import sys

import pytest

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from maze import Maze, Wall, WALL_LABEL, WALL_THICKNESS

from test_maze_generation import IdentityRandom


def test_walls_plus_openings_cover_every_internal_edge():
    for rows, cols in [(1, 1), (2, 3), (6, 6), (9, 4)]:
        maze = Maze(rows, cols)
        maze.generate(seed=rows + cols)

        walls = maze.walls(100)

        assert len(walls) + maze.openings_count() == maze.internal_edges
        assert len(walls) == maze.internal_edges - (rows * cols - 1)


def test_every_wall_is_labelled():
    maze = Maze(5, 5)
    maze.generate(seed=2)

    assert all(wall.label == WALL_LABEL for wall in maze.walls(40))


def test_two_by_two_wall_geometry():
    maze = Maze(2, 2)
    maze.generate(start=(0, 0), rng=IdentityRandom())

    walls = maze.walls(100, 50)

    # Only the boundary between (0, 0) and (1, 0) stays closed
    assert walls == [Wall(50, 50, 100, WALL_THICKNESS, WALL_LABEL)]


def test_wall_positions_sit_on_the_lattice():
    maze = Maze(3, 4)
    maze.generate(seed=8)

    uw, uh = 30, 20
    for wall in maze.walls(uw, uh, thickness=4):
        if wall.width == uw:
            # horizontal boundary: centered in its column, on a row line
            assert (wall.x - uw / 2) % uw == 0
            assert wall.y % uh == 0
            assert wall.height == 4
        else:
            # vertical boundary: on a column line, centered in its row
            assert wall.x % uw == 0
            assert (wall.y - uh / 2) % uh == 0
            assert wall.width == 4
            assert wall.height == uh


def test_open_boundaries_produce_no_wall():
    maze = Maze(4, 4)
    maze.generate(seed=13)
    uw = 10

    positions = {(wall.x, wall.y) for wall in maze.walls(uw)}

    for r, row in enumerate(maze.horizontals):
        for c, is_open in enumerate(row):
            spot = (c * uw + uw / 2, r * uw + uw)
            assert (spot in positions) != is_open


def test_walls_require_generated_maze():
    with pytest.raises(RuntimeError):
        Maze(2, 2).walls(10)


def test_walls_reject_non_positive_units():
    maze = Maze(2, 2)
    maze.generate(seed=0)

    with pytest.raises(ValueError):
        maze.walls(0)
