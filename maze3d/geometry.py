"""Drawable primitives derived from a wall grid. No GL calls in here."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .maze import WallGrid
from .motion import Vec3, WorldMetrics

Point2 = Tuple[float, float]
Segment = Tuple[Point2, Point2]


@dataclass(frozen=True)
class Box:
    """Axis-aligned wall block on the floor plane, centred on (x, z)."""

    x: float
    z: float
    half_x: float
    half_z: float


def inner_wall_boxes(grid: WallGrid, metrics: WorldMetrics) -> Iterator[Box]:
    half_t = metrics.wall_thickness / 2.0
    half_w = metrics.wall_size / 2.0
    p = metrics.pitch
    for y in range(grid.height):
        for x in range(1, grid.width):
            if grid.is_blocked(2 * y, x):
                yield Box(x * p, metrics.cell_centre(y), half_t, half_w)
        if y < grid.height - 1:
            for x in range(grid.width):
                if grid.is_blocked(2 * y + 1, x):
                    yield Box(metrics.cell_centre(x), (y + 1) * p, half_w, half_t)


def outer_wall_boxes(grid: WallGrid, metrics: WorldMetrics) -> List[Box]:
    half_t = metrics.wall_thickness / 2.0
    ex = metrics.extent(grid.width)
    ez = metrics.extent(grid.height)
    return [
        Box(ex / 2.0, 0.0, ex / 2.0 + half_t, half_t),
        Box(ex / 2.0, ez, ex / 2.0 + half_t, half_t),
        Box(0.0, ez / 2.0, half_t, ez / 2.0 + half_t),
        Box(ex, ez / 2.0, half_t, ez / 2.0 + half_t),
    ]


def column_boxes(grid: WallGrid, metrics: WorldMetrics) -> Iterator[Box]:
    half_t = metrics.wall_thickness / 2.0
    p = metrics.pitch
    for j in range(1, grid.height):
        for i in range(1, grid.width):
            yield Box(i * p, j * p, half_t, half_t)


def wall_boxes(grid: WallGrid, metrics: WorldMetrics) -> List[Box]:
    boxes = list(inner_wall_boxes(grid, metrics))
    boxes.extend(outer_wall_boxes(grid, metrics))
    boxes.extend(column_boxes(grid, metrics))
    return boxes


def minimap_segments(grid: WallGrid) -> List[Segment]:
    """Wall lines in cell units: (0, 0) is the maze's top-left corner."""
    w, h = grid.width, grid.height
    segments: List[Segment] = [
        ((0.0, 0.0), (w, 0.0)),
        ((w, 0.0), (w, h)),
        ((w, h), (0.0, h)),
        ((0.0, h), (0.0, 0.0)),
    ]
    for y in range(h):
        for x in range(1, w):
            if grid.is_blocked(2 * y, x):
                segments.append(((x, y), (x, y + 1)))
        if y < h - 1:
            for x in range(w):
                if grid.is_blocked(2 * y + 1, x):
                    segments.append(((x, y + 1), (x + 1, y + 1)))
    return segments


def to_minimap(
    position: Vec3,
    grid: WallGrid,
    metrics: WorldMetrics,
    rect: Sequence[float],
) -> Point2:
    """Project a world position into a ``(left, top, width, height)`` rectangle."""
    left, top, width, height = rect
    u = position.x / metrics.extent(grid.width)
    v = position.z / metrics.extent(grid.height)
    return (left + u * width, top + v * height)
