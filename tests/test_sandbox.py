# tests/test_sandbox.py
import os
import random
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sandbox import build_sandbox, GRAVITY, BOX_LABEL, CIRCLE_LABEL
from world import World


def test_sandbox_adds_border_and_shapes():
    world = World()
    shapes = build_sandbox(world, count=12, rng=random.Random(4))

    assert len(shapes) == 12
    assert len(world.bodies("border")) == 4
    assert {world.label_of(body) for body in shapes} <= {BOX_LABEL, CIRCLE_LABEL}
    assert not any(world.is_static(body) for body in shapes)
    assert world.gravity == (0, GRAVITY)


def test_shapes_start_inside_the_area():
    world = World()
    shapes = build_sandbox(world, width=300, height=200, count=30, rng=random.Random(1))

    for body in shapes:
        assert 0 <= body.position.x <= 300
        assert 0 <= body.position.y <= 200


def test_shapes_fall():
    world = World()
    shapes = build_sandbox(world, count=1, rng=random.Random(0))
    body = shapes[0]
    body.position = (400, 100)

    for _ in range(20):
        world.step(1.0 / 60)

    assert body.position.y > 100
