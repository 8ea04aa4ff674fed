"""Procedurally generated 3D maze: generation, collision and a pygame/OpenGL front end."""

from .maze import Cell, MazeGenerator, WallGrid, generate
from .motion import Vec3, WorldMetrics, resolve

__all__ = [
    "Cell",
    "MazeGenerator",
    "Vec3",
    "WallGrid",
    "WorldMetrics",
    "generate",
    "resolve",
]
