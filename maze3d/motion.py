"""Axis-separated collision resolution against a :class:`~maze3d.maze.WallGrid`."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, NamedTuple

from .maze import WallGrid

logger = logging.getLogger(__name__)


class Vec3(NamedTuple):
    x: float
    y: float
    z: float

    def moved(self, delta: "Vec3") -> "Vec3":
        return Vec3(self.x + delta[0], self.y + delta[1], self.z + delta[2])

    def scaled(self, factor: float) -> "Vec3":
        return Vec3(self.x * factor, self.y * factor, self.z * factor)


ZERO = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class WorldMetrics:
    """World-unit sizes of the maze.

    Cell ``i`` spans ``[i * pitch, (i + 1) * pitch)`` on each floor axis and the
    wall between cells ``i-1`` and ``i`` is centred on ``i * pitch``.
    ``margin`` is how far the viewer keeps from a wall's centre line.
    """

    wall_size: float = 1.5
    wall_thickness: float = 0.2
    clearance: float = 0.2

    def __post_init__(self) -> None:
        if self.wall_size <= 0 or self.wall_thickness < 0 or self.clearance < 0:
            raise ValueError("Wall size must be positive and thickness/clearance non-negative")
        if self.margin * 2 >= self.pitch:
            raise ValueError(
                f"Collision margin {self.margin:.3f} does not fit in a cell of pitch {self.pitch:.3f}"
            )

    @property
    def pitch(self) -> float:
        return self.wall_size + self.wall_thickness

    @property
    def margin(self) -> float:
        return self.wall_thickness / 2.0 + self.clearance

    def extent(self, cells: int) -> float:
        return cells * self.pitch

    def cell_of(self, coord: float) -> int:
        return math.floor(coord / self.pitch)

    def cell_centre(self, index: int) -> float:
        return (index + 0.5) * self.pitch


def _resolve_axis(
    current: float,
    delta: float,
    cells: int,
    metrics: WorldMetrics,
    blocked: Callable[[int], bool],
) -> float:
    if delta == 0:
        return 0.0
    target = current + delta
    margin = metrics.margin
    if not margin < target < metrics.extent(cells) - margin:
        return 0.0

    # Span from the viewer's own cell to the cell its leading edge would reach.
    lead = margin if delta > 0 else -margin
    first = metrics.cell_of(current)
    last = metrics.cell_of(target + lead)
    lo = max(min(first, last), 0)
    hi = min(max(first, last), cells - 1)
    # Boundary k separates cell k-1 from cell k.
    for boundary in range(lo + 1, hi + 1):
        if blocked(boundary):
            return 0.0
    return delta


def resolve(
    grid: WallGrid,
    position: Vec3,
    displacement: Vec3,
    metrics: WorldMetrics,
) -> Vec3:
    """Return the part of ``displacement`` that can be applied from ``position``.

    ``x`` and ``z`` are resolved independently, both from the unmodified
    ``position``, so a blocked axis does not stop motion along the other one
    (the viewer slides along the wall). Each floor component comes back either
    unchanged or zero. The height component is never constrained.
    """
    cx = metrics.cell_of(position[0])
    cz = metrics.cell_of(position[2])
    if not grid.contains((cx, cz)):
        raise ValueError(
            f"Position ({position[0]:.3f}, {position[2]:.3f}) lies outside the "
            f"{grid.width}x{grid.height} maze"
        )

    dx = _resolve_axis(
        position[0],
        displacement[0],
        grid.width,
        metrics,
        lambda col: grid.is_blocked(2 * cz, col),
    )
    dz = _resolve_axis(
        position[2],
        displacement[2],
        grid.height,
        metrics,
        lambda row: grid.is_blocked(2 * row - 1, cx),
    )
    if (dx, dz) != (displacement[0], displacement[2]):
        logger.debug(
            "Motion from cell %s clipped: (%.3f, %.3f) -> (%.3f, %.3f)",
            (cx, cz),
            displacement[0],
            displacement[2],
            dx,
            dz,
        )
    return Vec3(dx, displacement[1], dz)
