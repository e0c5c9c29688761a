# -*- coding: utf-8 -*-
"""
Project: Maze Ball
Module: render

Brief Description:
    - 2D OpenGL drawing for pymunk bodies inside a pygame window
    - (0, 0) is the top-left corner of the window, y grows downwards
"""

# pylint: disable=wildcard-import, unused-wildcard-import, no-member, undefined-variable

import math

import pygame
import pymunk

from OpenGL.GL import *


# -----------------------------
# Configuration
# -----------------------------
CIRCLE_SEGMENTS = 24
BACKGROUND = (0.08, 0.08, 0.12, 1.0)
DEFAULT_COLOR = (0.75, 0.75, 0.75)


def init_2d(width, height):
    """
    Orthographic projection matching pygame's pixel coordinates
    """
    glViewport(0, 0, width, height)
    glDisable(GL_DEPTH_TEST)

    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    glOrtho(0, width, height, 0, -1, 1)

    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()


def clear():
    glClearColor(*BACKGROUND)
    glClear(GL_COLOR_BUFFER_BIT)


def _shape_outline(shape):
    """
    World-space outline of a shape as a list of (x, y)
    """
    body = shape.body
    if isinstance(shape, pymunk.Circle):
        cx, cy = body.local_to_world(shape.offset)
        r = shape.radius
        return [
            (cx + r * math.cos(2 * math.pi * i / CIRCLE_SEGMENTS),
             cy + r * math.sin(2 * math.pi * i / CIRCLE_SEGMENTS))
            for i in range(CIRCLE_SEGMENTS)
        ]
    return [body.local_to_world(v) for v in shape.get_vertices()]


def draw_body(body, color=DEFAULT_COLOR, wireframe=False):
    """
    Draw every shape of a body, filled or as outlines
    """
    glColor3f(*color)
    mode = GL_LINE_LOOP if wireframe else GL_POLYGON

    for shape in body.shapes:
        glBegin(mode)
        for x, y in _shape_outline(shape):
            glVertex2f(x, y)
        glEnd()

        # Show rotation of circles
        if isinstance(shape, pymunk.Circle) and wireframe:
            cx, cy = body.local_to_world(shape.offset)
            ex, ey = body.local_to_world((shape.offset[0] + shape.radius, shape.offset[1]))
            glBegin(GL_LINES)
            glVertex2f(cx, cy)
            glVertex2f(ex, ey)
            glEnd()


def draw_world(world, colors, wireframe=False):
    """
    Draw all bodies of a World, picking the color by label
    """
    for body in world.bodies():
        color = colors.get(world.label_of(body), DEFAULT_COLOR)
        draw_body(body, color, wireframe)


def draw_text(font, x, y, text, color=(255, 255, 255, 255)):
    """
    Draw text at screen coordinates (x, y) using a temporary texture.
    """
    if not text:
        return

    # Render text to a pygame surface
    surface = font.render(text, True, color[:3])
    text_data = pygame.image.tostring(surface, "RGBA", False)
    w, h = surface.get_size()

    tex_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, tex_id)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
    glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0,
                 GL_RGBA, GL_UNSIGNED_BYTE, text_data)

    glEnable(GL_TEXTURE_2D)
    glEnable(GL_BLEND)
    glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    glColor4f(1.0, 1.0, 1.0, 1.0)

    glBegin(GL_QUADS)
    glTexCoord2f(0.0, 0.0)
    glVertex2f(x, y)
    glTexCoord2f(1.0, 0.0)
    glVertex2f(x + w, y)
    glTexCoord2f(1.0, 1.0)
    glVertex2f(x + w, y + h)
    glTexCoord2f(0.0, 1.0)
    glVertex2f(x, y + h)
    glEnd()

    glDisable(GL_BLEND)
    glDisable(GL_TEXTURE_2D)
    glBindTexture(GL_TEXTURE_2D, 0)
    glDeleteTextures([tex_id])
