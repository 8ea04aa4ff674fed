import logging
import sys

import pygame
from pygame.locals import *
from OpenGL.GL import *

from . import render
from .player import Movement
from .session import MazeSession

logger = logging.getLogger(__name__)

FPS = 60

KEY_BINDINGS = {
    K_w: Movement.FORWARD,
    K_UP: Movement.FORWARD,
    K_s: Movement.BACKWARD,
    K_DOWN: Movement.BACKWARD,
    K_a: Movement.LEFT,
    K_LEFT: Movement.LEFT,
    K_d: Movement.RIGHT,
    K_RIGHT: Movement.RIGHT,
    K_e: Movement.UP,
    K_q: Movement.DOWN,
}


def pressed_directions(keys):
    """Map the pressed-key state to a set of movement directions."""
    return {direction for key, direction in KEY_BINDINGS.items() if keys[key]}


class Game:
    def __init__(self, config, seed=None):
        pygame.init()
        self.config = config
        self.width = config.screen_width
        self.height = config.screen_height
        self.screen = pygame.display.set_mode((self.width, self.height), DOUBLEBUF | OPENGL | RESIZABLE)
        pygame.display.set_caption("Maze 3D")
        self.clock = pygame.time.Clock()

        self.show_minimap = False
        self.session = MazeSession(config, seed=seed)
        self.maze_list = None
        self.rebuild_level()

        pygame.mouse.set_visible(False)
        pygame.event.set_grab(True)
        pygame.mouse.get_rel()

    def rebuild_level(self):
        self.maze_list = render.build_maze_list(self.session.grid, self.session.metrics, self.maze_list)

    def reset(self):
        self.session.reset()
        self.rebuild_level()
        print("Maze reset.")

    def render_scene(self):
        render.setup_3d(self.width, self.height, self.config.fov)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        render.apply_view(self.session.player)
        glCallList(self.maze_list)
        render.draw_exit_marker(self.session.exit_cell, self.session.metrics)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == QUIT:
                return False
            if event.type == VIDEORESIZE:
                self.width, self.height = event.w, event.h
                glViewport(0, 0, self.width, self.height)
            if event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    return False
                elif event.key == K_r:
                    self.reset()
                elif event.key == K_m:
                    self.show_minimap = not self.show_minimap
        return True

    def step(self, dt):
        mx, my = pygame.mouse.get_rel()
        # Screen y grows downwards, pitch grows upwards.
        self.session.player.rotate(mx, -my)

        keys = pygame.key.get_pressed()
        running = keys[K_LSHIFT] or keys[K_RSHIFT]
        self.session.update(pressed_directions(keys), dt, running=running)

        if self.session.reached_exit():
            self.session.advance()
            self.rebuild_level()

        self.render_scene()
        if self.show_minimap or keys[K_TAB]:
            render.draw_minimap(
                self.session.grid,
                self.session.player,
                self.session.metrics,
                self.width,
                self.height,
                exit_cell=self.session.exit_cell,
            )
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if running:
                self.step(dt)
        logger.debug("Leaving game loop at level %d", self.session.level)
        pygame.quit()
        sys.exit()
