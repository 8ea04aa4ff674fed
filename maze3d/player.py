from __future__ import annotations

import math
from enum import Enum
from typing import Iterable

from .maze import WallGrid
from .motion import ZERO, Vec3, WorldMetrics, resolve

PITCH_LIMIT = 89.0
WORLD_UP = Vec3(0.0, 1.0, 0.0)


class Movement(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
    if length == 0:
        return ZERO
    return v.scaled(1.0 / length)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


class Player:
    """First-person viewer: position plus yaw/pitch in degrees.

    Yaw 0 looks down +x (east), yaw 90 down +z (south, towards higher rows).
    """

    def __init__(self, speed: float = 2.5, sensitivity: float = 0.1) -> None:
        self.position = ZERO
        self.yaw = 0.0
        self.pitch = 0.0
        self.speed = speed
        self.sensitivity = sensitivity

    @property
    def front(self) -> Vec3:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        return _normalize(
            Vec3(
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )

    @property
    def right(self) -> Vec3:
        return _normalize(_cross(self.front, WORLD_UP))

    @property
    def up(self) -> Vec3:
        return _normalize(_cross(self.right, self.front))

    def spawn(self, grid: WallGrid, metrics: WorldMetrics) -> None:
        """Stand in the middle of cell (0, 0), looking down the open passage."""
        centre = metrics.cell_centre(0)
        self.position = Vec3(centre, metrics.wall_size / 2.0, centre)
        east_open = grid.width > 1 and not grid.has_wall((0, 0), (1, 0))
        self.yaw = 0.0 if east_open else 90.0
        self.pitch = 0.0

    def desired_displacement(self, directions: Iterable[Movement], dt: float) -> Vec3:
        velocity = self.speed * dt
        front = self.front
        flat_front = _normalize(Vec3(front.x, 0.0, front.z))
        right = self.right
        total = ZERO
        for direction in directions:
            if direction is Movement.FORWARD:
                total = total.moved(flat_front)
            elif direction is Movement.BACKWARD:
                total = total.moved(flat_front.scaled(-1.0))
            elif direction is Movement.RIGHT:
                total = total.moved(right)
            elif direction is Movement.LEFT:
                total = total.moved(right.scaled(-1.0))
            elif direction is Movement.UP:
                total = total.moved(WORLD_UP)
            elif direction is Movement.DOWN:
                total = total.moved(WORLD_UP.scaled(-1.0))
        return total.scaled(velocity)

    def move(
        self,
        directions: Iterable[Movement],
        dt: float,
        grid: WallGrid,
        metrics: WorldMetrics,
    ) -> Vec3:
        """Apply one movement step and return the displacement actually taken."""
        desired = self.desired_displacement(directions, dt)
        if desired == ZERO:
            return ZERO
        allowed = resolve(grid, self.position, desired, metrics)
        self.position = self.position.moved(allowed)
        return allowed

    def rotate(self, xoffset: float, yoffset: float, constrain_pitch: bool = True) -> None:
        self.yaw += xoffset * self.sensitivity
        self.pitch += yoffset * self.sensitivity
        if constrain_pitch:
            self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
