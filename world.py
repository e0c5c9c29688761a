# -*- coding: utf-8 -*-
"""
Project: Maze Ball
Module: world

Brief Description:
    - Thin handle over a pymunk space
    - Bodies carry a free-form label (e.g. "wall", "ball", "goal")
    - Collision-start events are reported as pairs of labels
    - Screen coordinates: x to the right, y downwards
"""

import pymunk


# -----------------------------
# Configuration
# -----------------------------
DENSITY = 0.001
FRICTION = 0.1
ELASTICITY = 0.0

# Fraction of velocity kept after one second
DAMPING = 0.55

GRAB_MAX_FORCE = 50000.0
GRAB_ERROR_BIAS = (1.0 - 0.15) ** 60


class World:
    """
    World owns the physics space plus the label of every body added through it
    - gravity: global gravity vector (pixels / s^2)
    - step(dt): advance the simulation and report new contacts
    """

    def __init__(self, gravity=(0.0, 0.0), damping=DAMPING):
        self.space = pymunk.Space()
        self.space.gravity = gravity
        self.space.damping = damping

        # body -> label, in insertion order
        self._labels = {}
        self._listeners = []
        self._touching = set()

        # Mouse dragging
        self._cursor = pymunk.Body(body_type=pymunk.Body.KINEMATIC)
        self.space.add(self._cursor)
        self._grab_joint = None

    # ---------- Gravity ----------

    @property
    def gravity(self):
        g = self.space.gravity
        return (g[0], g[1])

    @gravity.setter
    def gravity(self, value):
        self.space.gravity = value

    # ---------- Bodies ----------

    def _make_body(self, x, y, static):
        if static:
            body = pymunk.Body(body_type=pymunk.Body.STATIC)
        else:
            body = pymunk.Body()
        body.position = (x, y)
        return body

    def _register(self, body, shape, label, density, friction, elasticity):
        shape.density = density
        shape.friction = friction
        shape.elasticity = elasticity
        self.space.add(body, shape)
        self._labels[body] = label
        return body

    def add_rectangle(self, x, y, width, height, label="rectangle", static=False,
                      density=DENSITY, friction=FRICTION, elasticity=ELASTICITY):
        """
        Add a box centered at (x, y) and return its body
        """
        body = self._make_body(x, y, static)
        shape = pymunk.Poly.create_box(body, (width, height))
        return self._register(body, shape, label, density, friction, elasticity)

    def add_circle(self, x, y, radius, label="circle", static=False,
                   density=DENSITY, friction=FRICTION, elasticity=ELASTICITY):
        """
        Add a circle centered at (x, y) and return its body
        """
        body = self._make_body(x, y, static)
        shape = pymunk.Circle(body, radius)
        return self._register(body, shape, label, density, friction, elasticity)

    def add_border(self, width, height, thickness, label="border"):
        """
        Frame the area (0, 0)-(width, height) with four static boxes
        centered on its edges
        """
        return [
            self.add_rectangle(width / 2, 0, width, thickness, label, static=True),
            self.add_rectangle(width / 2, height, width, thickness, label, static=True),
            self.add_rectangle(0, height / 2, thickness, height, label, static=True),
            self.add_rectangle(width, height / 2, thickness, height, label, static=True),
        ]

    def label_of(self, body):
        return self._labels[body]

    def bodies(self, label=None):
        """
        Bodies owned by this world, optionally only those with the given label
        """
        if label is None:
            return list(self._labels)
        return [body for body, name in self._labels.items() if name == label]

    def is_static(self, body):
        return body.body_type == pymunk.Body.STATIC

    def set_static(self, body, static):
        """
        Switch a body between static and dynamic.
        A body made dynamic gets its mass back from its shapes' density.
        """
        if body not in self._labels:
            raise KeyError(body)

        if static:
            body.body_type = pymunk.Body.STATIC
        else:
            body.body_type = pymunk.Body.DYNAMIC

    # ---------- Collision events ----------

    def on_collision_start(self, callback):
        """
        Register callback(label_a, label_b) for pairs that start touching
        """
        self._listeners.append(callback)

    def _current_contacts(self):
        pairs = {}

        def collect(arbiter):
            shape_a, shape_b = arbiter.shapes
            key = frozenset((shape_a.body, shape_b.body))
            if key not in pairs:
                pairs[key] = (shape_a.body, shape_b.body)

        # Every contact involves at least one non-static body
        for body in self._labels:
            if body.body_type != pymunk.Body.STATIC:
                body.each_arbiter(collect)

        return pairs

    def step(self, dt):
        """
        Advance the space by dt seconds.
        Returns the (label_a, label_b) pairs that started touching in this step
        and passes each one to the collision-start listeners.
        """
        self.space.step(dt)

        contacts = self._current_contacts()
        started = [
            (self._labels.get(a), self._labels.get(b))
            for key, (a, b) in contacts.items()
            if key not in self._touching
        ]
        self._touching = set(contacts)

        for label_a, label_b in started:
            for callback in list(self._listeners):
                callback(label_a, label_b)

        return started

    # ---------- Mouse dragging ----------

    def grab(self, point):
        """
        Pin the dynamic body under point to the cursor.
        Returns the grabbed body, or None if nothing draggable is there.
        """
        self.release()

        info = self.space.point_query_nearest(point, 0, pymunk.ShapeFilter())
        if info is None or info.shape is None:
            return None

        body = info.shape.body
        if body not in self._labels or body.body_type != pymunk.Body.DYNAMIC:
            return None

        self._cursor.position = point
        joint = pymunk.PivotJoint(self._cursor, body, (0, 0), body.world_to_local(point))
        joint.max_force = GRAB_MAX_FORCE
        joint.error_bias = GRAB_ERROR_BIAS
        self.space.add(joint)
        self._grab_joint = joint

        return body

    @property
    def grabbed(self):
        if self._grab_joint is None:
            return None
        return self._grab_joint.b

    def drag_to(self, point):
        self._cursor.position = point

    def release(self):
        if self._grab_joint is not None:
            self.space.remove(self._grab_joint)
            self._grab_joint = None
