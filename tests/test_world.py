# tests/test_world.py
import os
import sys

import pytest

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pymunk

from world import World

DT = 1.0 / 60


def _run(world: World, steps: int):
    events = []
    for _ in range(steps):
        events.extend(world.step(DT))
    return events


def test_bodies_keep_their_labels():
    world = World()
    box = world.add_rectangle(10, 20, 30, 40, "crate", static=True)
    ball = world.add_circle(50, 50, 5, "ball")

    assert world.label_of(box) == "crate"
    assert world.label_of(ball) == "ball"
    assert world.bodies("crate") == [box]
    assert world.bodies() == [box, ball]
    assert tuple(box.position) == (10, 20)


def test_border_frames_the_area():
    world = World()
    border = world.add_border(200, 100, 4)

    assert len(border) == 4
    assert all(world.is_static(body) for body in border)
    centers = sorted(tuple(body.position) for body in border)
    assert centers == [(0, 50), (100, 0), (100, 100), (200, 50)]


def test_gravity_can_be_changed():
    world = World()
    assert world.gravity == (0, 0)

    world.gravity = (0, 500)

    assert world.gravity == (0, 500)


def test_static_body_does_not_fall():
    world = World(gravity=(0, 900))
    wall = world.add_rectangle(100, 100, 50, 10, "wall", static=True)

    _run(world, 30)

    assert tuple(wall.position) == (100, 100)


def test_body_made_dynamic_falls():
    world = World(gravity=(0, 900))
    wall = world.add_rectangle(100, 100, 50, 10, "wall", static=True)

    world.set_static(wall, False)
    _run(world, 30)

    assert not world.is_static(wall)
    assert wall.body_type == pymunk.Body.DYNAMIC
    assert wall.mass > 0
    assert wall.position.y > 100


def test_set_static_rejects_foreign_bodies():
    world = World()
    stranger = pymunk.Body(body_type=pymunk.Body.STATIC)

    with pytest.raises(KeyError):
        world.set_static(stranger, False)


def test_collision_start_reported_once_per_contact():
    world = World(gravity=(0, 900))
    world.add_rectangle(100, 100, 200, 20, "floor", static=True)
    world.add_circle(100, 50, 10, "ball")

    seen = []
    world.on_collision_start(lambda a, b: seen.append({a, b}))

    events = _run(world, 120)

    assert seen == [{"ball", "floor"}]
    assert [set(pair) for pair in events] == seen


def test_no_events_without_contact():
    world = World()
    world.add_circle(0, 0, 5, "a")
    world.add_circle(100, 100, 5, "b")

    assert _run(world, 10) == []


def test_grab_and_drag_moves_body():
    world = World()
    ball = world.add_circle(100, 100, 20, "ball")

    assert world.grab((100, 100)) is ball
    assert world.grabbed is ball

    world.drag_to((200, 100))
    _run(world, 60)

    assert ball.position.x > 150

    world.release()
    assert world.grabbed is None


def test_grab_ignores_static_bodies_and_empty_space():
    world = World()
    world.add_rectangle(100, 100, 50, 50, "wall", static=True)

    assert world.grab((100, 100)) is None
    assert world.grab((400, 400)) is None
    assert world.grabbed is None
