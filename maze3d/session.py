from __future__ import annotations

import logging
import random
from typing import Iterable

from .maze import CellPos, MazeGenerator, WallGrid
from .motion import Vec3
from .player import Movement, Player
from .settings import MazeConfig

logger = logging.getLogger(__name__)


class MazeSession:
    """Owns the current maze and the player walking through it."""

    def __init__(self, config: MazeConfig, seed: int | None = None) -> None:
        self.config = config
        self.width = config.width
        self.height = config.height
        self.rng = random.Random(seed)
        self.level = 1
        self.player = Player(speed=config.speed, sensitivity=config.sensitivity)
        self.generator = MazeGenerator(self.width, self.height, self.rng)
        self.grid: WallGrid = self.generator.generate()
        self.player.spawn(self.grid, config.metrics)
        logger.debug("Session started with %dx%d maze (seed=%s)", self.width, self.height, seed)

    @property
    def metrics(self):
        return self.config.metrics

    @property
    def exit_cell(self) -> CellPos:
        return (self.width - 1, self.height - 1)

    def player_cell(self) -> CellPos:
        pos = self.player.position
        return (self.metrics.cell_of(pos.x), self.metrics.cell_of(pos.z))

    def reached_exit(self) -> bool:
        # A 1x1 maze spawns on its own exit; never count that as reaching it.
        if self.exit_cell == (0, 0):
            return False
        return self.player_cell() == self.exit_cell

    def reset(self, seed: int | None = None) -> None:
        """Replace the maze and respawn the player at its entrance."""
        if seed is not None:
            self.rng.seed(seed)
        if (self.generator.width, self.generator.height) != (self.width, self.height):
            self.generator = MazeGenerator(self.width, self.height, self.rng)
        grid = self.generator.generate()
        self.grid = grid
        self.player.spawn(grid, self.metrics)
        logger.debug("Maze reset (level %d, %dx%d)", self.level, self.width, self.height)

    def advance(self) -> None:
        self.level += 1
        self.width += self.config.growth
        self.height += self.config.growth
        self.reset()
        print(f"Level {self.level}: {self.width}x{self.height}")

    def update(self, directions: Iterable[Movement], dt: float, running: bool = False) -> Vec3:
        factor = self.config.run_multiplier if running else 1.0
        self.player.speed = self.config.speed * factor
        return self.player.move(directions, dt, self.grid, self.metrics)
