# -*- coding: utf-8 -*-
"""
Project: Maze Ball
Module: session

Brief Description:
    - Puts a freshly generated maze into a World
    - Ball steered by key-down events, goal in the far corner
    - Ball touching the goal wins: gravity on, walls collapse
"""

from pygame.locals import K_w, K_a, K_s, K_d, K_UP, K_DOWN, K_LEFT, K_RIGHT

from maze import Maze, WALL_LABEL, WALL_THICKNESS


# -----------------------------
# Configuration
# -----------------------------
CELLS = 6
WIDTH = 600
HEIGHT = 600

BORDER_THICKNESS = 2
GOAL_SCALE = 0.7
BALL_SCALE = 0.25

# Velocity change per key press (pixels / s)
VELOCITY_STEP = 300.0
GRAVITY = 900.0

BALL_LABEL = "ball"
GOAL_LABEL = "goal"

# key -> (dvx, dvy)
KEY_DELTAS = {
    K_w: (0.0, -VELOCITY_STEP),
    K_UP: (0.0, -VELOCITY_STEP),
    K_d: (VELOCITY_STEP, 0.0),
    K_RIGHT: (VELOCITY_STEP, 0.0),
    K_s: (0.0, VELOCITY_STEP),
    K_DOWN: (0.0, VELOCITY_STEP),
    K_a: (-VELOCITY_STEP, 0.0),
    K_LEFT: (-VELOCITY_STEP, 0.0),
}


class MazeSession:
    """
    MazeSession ties a Maze to a World:
        - border, walls, goal and ball bodies
        - keyboard -> ball velocity
        - collision listener for the win condition
    """

    def __init__(self, world, rows=CELLS, cols=CELLS, width=WIDTH, height=HEIGHT,
                 start=(0, 0), rng=None, seed=None):
        self.world = world
        self.width = width
        self.height = height

        self.unit_width = width / cols
        self.unit_height = height / rows

        self.maze = Maze(rows, cols)
        self.maze.generate(start=start, rng=rng, seed=seed)

        self.won = False
        self.world.gravity = (0.0, 0.0)

        self.world.add_border(width, height, BORDER_THICKNESS)

        self.walls = [
            self.world.add_rectangle(
                wall.x, wall.y, wall.width, wall.height, wall.label, static=True
            )
            for wall in self.maze.walls(self.unit_width, self.unit_height, WALL_THICKNESS)
        ]

        self.goal = self.world.add_rectangle(
            width - self.unit_width / 2,
            height - self.unit_height / 2,
            self.unit_width * GOAL_SCALE,
            self.unit_height * GOAL_SCALE,
            GOAL_LABEL,
            static=True,
        )

        self.ball_start = (self.unit_width / 2, self.unit_height / 2)
        self.ball = self.world.add_circle(
            self.ball_start[0],
            self.ball_start[1],
            min(self.unit_width, self.unit_height) * BALL_SCALE,
            BALL_LABEL,
        )

        self.world.on_collision_start(self.handle_collision)

    # ---------- Input ----------

    def handle_key(self, key):
        """
        Nudge the ball velocity for a movement key.
        Returns True if the key was a movement key.
        """
        delta = KEY_DELTAS.get(key)
        if delta is None:
            return False

        vx, vy = self.ball.velocity
        self.ball.velocity = (vx + delta[0], vy + delta[1])
        return True

    def reset_ball(self):
        """
        Put the ball back in the start cell, at rest
        """
        self.ball.position = self.ball_start
        self.ball.velocity = (0.0, 0.0)
        self.ball.angular_velocity = 0.0

    # ---------- Win condition ----------

    def handle_collision(self, label_a, label_b):
        if {label_a, label_b} == {BALL_LABEL, GOAL_LABEL}:
            self.win()

    def win(self):
        """
        Turn gravity on and let every wall fall
        """
        if self.won:
            return
        self.won = True

        self.world.gravity = (0.0, GRAVITY)
        for body in self.world.bodies(WALL_LABEL):
            self.world.set_static(body, False)

        print("You win!")
