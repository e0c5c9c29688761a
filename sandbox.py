# -*- coding: utf-8 -*-
"""
Project: Maze Ball
Module: sandbox

Brief Description:
    - Falling shapes: random boxes and circles inside a bordered box
    - The window for this scene lives in game.py
"""

import random


# -----------------------------
# Configuration
# -----------------------------
WIDTH = 800
HEIGHT = 600
SHAPE_COUNT = 50
BORDER_THICKNESS = 40

BOX_SIZE = 50
CIRCLE_RADIUS = 35
GRAVITY = 900.0

BOX_LABEL = "box"
CIRCLE_LABEL = "circle"


def build_sandbox(world, width=WIDTH, height=HEIGHT, count=SHAPE_COUNT, rng=None):
    """
    Add the border and `count` random shapes to the world.
    Each shape is a box or a circle with equal odds, placed anywhere in the area.
    Returns the list of shape bodies.
    """
    if rng is None:
        rng = random.Random()

    world.gravity = (0.0, GRAVITY)
    world.add_border(width, height, BORDER_THICKNESS)

    bodies = []
    for _ in range(count):
        if rng.random() > 0.5:
            body = world.add_rectangle(
                rng.random() * width, rng.random() * height, BOX_SIZE, BOX_SIZE, BOX_LABEL
            )
        else:
            body = world.add_circle(
                rng.random() * width, rng.random() * height, CIRCLE_RADIUS, CIRCLE_LABEL
            )
        bodies.append(body)

    return bodies
