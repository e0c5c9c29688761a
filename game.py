# -*- coding: utf-8 -*-
"""
Project: Maze Ball
Module: game

Brief Description:
    - Windows, event handling and main loops for both demos
    - Stack: pygame, PyOpenGL, pymunk
"""

# pylint: disable=wildcard-import, unused-wildcard-import, no-member, undefined-variable

import sys
import time

import pygame
from pygame.locals import *

import render
import sandbox
from session import MazeSession, CELLS, WIDTH, HEIGHT
from world import World


# -----------------------------
# Configuration
# -----------------------------
TARGET_FPS = 60

COLORS = {
    "wall": (0.75, 0.75, 0.75),
    "border": (0.75, 0.75, 0.75),
    "goal": (0.3, 0.8, 0.3),
    "ball": (0.8, 0.3, 0.3),
}

SANDBOX_COLORS = {
    "border": (0.4, 0.4, 0.45),
    sandbox.BOX_LABEL: (0.75, 0.45, 0.3),
    sandbox.CIRCLE_LABEL: (0.0, 0.5, 0.0),
}


# -----------------------------
# Maze window
# -----------------------------
class Game:
    """
    Game ties together:
        - Window + OpenGL setup
        - World and MazeSession
        - Event handling, fixed-step update, render loop
    """

    def __init__(self, rows=CELLS, cols=CELLS, width=WIDTH, height=HEIGHT):
        pygame.init()
        pygame.display.set_caption("Maze Ball")

        self.font = pygame.font.SysFont("consolas", 20)

        flags = DOUBLEBUF | OPENGL  # pylint: disable=unsupported-binary-operation
        pygame.display.set_mode((width, height), flags)
        self.width = width
        self.height = height
        self.rows = rows
        self.cols = cols
        self.running = True

        render.init_2d(width, height)

        self.new_maze()

        self.clock = pygame.time.Clock()

    def new_maze(self):
        """
        Fresh world and session, timer restarted
        """
        self.world = World()
        self.session = MazeSession(
            self.world, self.rows, self.cols, self.width, self.height
        )
        self.start_time = time.time()
        self.elapsed_time = 0.0

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False

            elif event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    self.running = False

                # Restart from the first cell
                elif event.key == K_r:
                    self.session.reset_ball()
                    self.start_time = time.time()
                    print("Restarted from entrance")

                # Regenerate maze
                elif event.key == K_n:
                    self.new_maze()
                    print("Regenerated maze")

                else:
                    self.session.handle_key(event.key)

    def update(self, dt):
        self.world.step(dt)

        # Timer stops once the goal is reached
        if not self.session.won:
            self.elapsed_time = time.time() - self.start_time

    def draw_scene(self):
        render.clear()
        render.draw_world(self.world, COLORS, wireframe=True)
        self.draw_hud()

    def draw_hud(self):
        total_seconds = int(self.elapsed_time)
        minutes = total_seconds // 60
        seconds = total_seconds % 60
        render.draw_text(self.font, 10, 10, f"Time: {minutes:02d}:{seconds:02d}")

        if self.session.won:
            render.draw_text(self.font, self.width // 2 - 40, self.height // 2, "You win!")

    def run(self):
        """
        Main game loop
        """
        dt = 1.0 / TARGET_FPS
        while self.running:
            self.clock.tick(TARGET_FPS)

            self.handle_events()
            self.update(dt)
            self.draw_scene()

            pygame.display.flip()

        pygame.quit()


# -----------------------------
# Falling shapes window
# -----------------------------
class Sandbox:
    """
    Sandbox runs the falling-shapes scene; bodies can be dragged with the mouse
    """

    def __init__(self, width=sandbox.WIDTH, height=sandbox.HEIGHT):
        pygame.init()
        pygame.display.set_caption("Falling Shapes")

        flags = DOUBLEBUF | OPENGL  # pylint: disable=unsupported-binary-operation
        pygame.display.set_mode((width, height), flags)
        self.running = True

        render.init_2d(width, height)

        self.world = World()
        sandbox.build_sandbox(self.world, width, height)

        self.clock = pygame.time.Clock()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False
            elif event.type == KEYDOWN and event.key == K_ESCAPE:
                self.running = False
            elif event.type == MOUSEBUTTONDOWN and event.button == 1:
                self.world.grab(event.pos)
            elif event.type == MOUSEMOTION:
                self.world.drag_to(event.pos)
            elif event.type == MOUSEBUTTONUP and event.button == 1:
                self.world.release()

    def run(self):
        dt = 1.0 / TARGET_FPS
        while self.running:
            self.clock.tick(TARGET_FPS)

            self.handle_events()
            self.world.step(dt)

            render.clear()
            render.draw_world(self.world, SANDBOX_COLORS)
            pygame.display.flip()

        pygame.quit()


def main():
    Game().run()
    sys.exit()


def sandbox_main():
    Sandbox().run()
    sys.exit()


if __name__ == "__main__":
    main()
