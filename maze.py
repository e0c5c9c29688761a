# -*- coding: utf-8 -*-
"""
Project: Maze Ball
Module: maze

Brief Description:
    - Grid model for a perfect maze (visited cells + wall openings)
    - Randomized backtracker that carves the maze
    - Wall materializer that turns closed boundaries into rectangles
"""

import random
from collections import namedtuple


# -----------------------------
# Configuration
# -----------------------------
WALL_THICKNESS = 10
WALL_LABEL = "wall"

UP = "up"
RIGHT = "right"
DOWN = "down"
LEFT = "left"


# Static rectangle placed on the maze lattice; (x, y) is its center
Wall = namedtuple("Wall", ["x", "y", "width", "height", "label"])


def shuffle(items, rng=None):
    """
    Fisher-Yates shuffle in place, walking from the last index down to 1
    - rng: anything with randint(a, b); defaults to the module random
    Returns the same list for convenience
    """
    if rng is None:
        rng = random

    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]

    return items


# -----------------------------
# Maze data structure
# -----------------------------
class Maze:
    """
    Maze holds the three boolean tables of the grid
    - grid: rows x cols, True once a cell has been visited
    - verticals: rows x (cols - 1), True if the wall east of (r, c) is open
    - horizontals: (rows - 1) x cols, True if the wall south of (r, c) is open
    """

    def __init__(self, rows, cols):
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

        self.rows = rows
        self.cols = cols

        self.grid = [[False for _ in range(cols)] for _ in range(rows)]
        self.verticals = [[False for _ in range(cols - 1)] for _ in range(rows)]
        self.horizontals = [[False for _ in range(cols)] for _ in range(rows - 1)]

        self.start = None
        self.generated = False

    # ---------- Grid helpers ----------

    def in_bounds(self, row, col):
        """
        Check if (row, col) is inside the maze grid
        """
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def internal_edges(self):
        """Number of boundaries between adjacent cells."""
        return self.rows * (self.cols - 1) + self.cols * (self.rows - 1)

    def openings_count(self):
        """
        Count the removed walls across both opening tables
        """
        vertical = sum(sum(row) for row in self.verticals)
        horizontal = sum(sum(row) for row in self.horizontals)
        return vertical + horizontal

    def passages(self, row, col):
        """
        Return the neighbouring cells reachable from (row, col) through an opening
        """
        cells = []
        if row > 0 and self.horizontals[row - 1][col]:
            cells.append((row - 1, col))
        if col < self.cols - 1 and self.verticals[row][col]:
            cells.append((row, col + 1))
        if row < self.rows - 1 and self.horizontals[row][col]:
            cells.append((row + 1, col))
        if col > 0 and self.verticals[row][col - 1]:
            cells.append((row, col - 1))
        return cells

    def _open_wall(self, row, col, direction):
        if direction == LEFT:
            self.verticals[row][col - 1] = True
        elif direction == RIGHT:
            self.verticals[row][col] = True
        elif direction == UP:
            self.horizontals[row - 1][col] = True
        elif direction == DOWN:
            self.horizontals[row][col] = True

    # ---------- Generation ----------

    def generate(self, start=None, rng=None, seed=None):
        """
        Carve a perfect maze with a randomized depth-first backtracker.
        - start: (row, col) to carve from; random cell when None
        - rng: random source with randint/randrange; built from seed when None

        Each frame on the stack is a cell plus the neighbours it still has to
        try, so random numbers are drawn in the same order a recursive carver
        would draw them.
        """
        if self.generated:
            raise RuntimeError("maze has already been generated")

        # Local RNG so seeding does not affect global random state
        if rng is None:
            rng = random.Random(seed)

        if start is None:
            start = (rng.randrange(self.rows), rng.randrange(self.cols))
        start_r, start_c = start
        if not self.in_bounds(start_r, start_c):
            raise ValueError(
                f"start cell {start!r} is outside a {self.rows}x{self.cols} maze"
            )

        self.start = (start_r, start_c)
        self.generated = True

        stack = [self._enter(start_r, start_c, rng)]
        while stack:
            r, c, neighbors = stack[-1]
            if not neighbors:
                stack.pop()
                continue

            nr, nc, direction = neighbors.pop()

            if not self.in_bounds(nr, nc):
                continue
            if self.grid[nr][nc]:
                continue

            self._open_wall(r, c, direction)
            stack.append(self._enter(nr, nc, rng))

    def _enter(self, r, c, rng):
        """
        Mark (r, c) visited and build its frame.
        The shuffled neighbours are reversed so pop() yields them in order.
        """
        self.grid[r][c] = True

        neighbors = shuffle(
            [
                (r - 1, c, UP),
                (r, c + 1, RIGHT),
                (r + 1, c, DOWN),
                (r, c - 1, LEFT),
            ],
            rng,
        )
        neighbors.reverse()

        return r, c, neighbors

    # ---------- Walls ----------

    def walls(self, unit_width, unit_height=None, thickness=WALL_THICKNESS):
        """
        Build one Wall per boundary that is still closed.
        - horizontal boundaries span one unit along x, centered under the cell
        - vertical boundaries span one unit along y, centered right of the cell
        """
        if not self.generated:
            raise RuntimeError("generate the maze before building its walls")
        if unit_height is None:
            unit_height = unit_width
        if unit_width <= 0 or unit_height <= 0:
            raise ValueError("unit lengths must be positive")

        walls = []

        for r, row in enumerate(self.horizontals):
            for c, is_open in enumerate(row):
                if is_open:
                    continue
                walls.append(Wall(
                    c * unit_width + unit_width / 2,
                    r * unit_height + unit_height,
                    unit_width,
                    thickness,
                    WALL_LABEL,
                ))

        for r, row in enumerate(self.verticals):
            for c, is_open in enumerate(row):
                if is_open:
                    continue
                walls.append(Wall(
                    c * unit_width + unit_width,
                    r * unit_height + unit_height / 2,
                    thickness,
                    unit_height,
                    WALL_LABEL,
                ))

        return walls
