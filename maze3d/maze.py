"""Maze generation over a grid of cells.

The maze is stored as a :class:`WallGrid`, an interleaved boolean matrix:

* even rows (``2*y``) hold the vertical walls of cell row ``y``; entry
  ``[2*y][x]`` separates cell ``(x-1, y)`` from ``(x, y)``, so column 0 of an
  even row is never used;
* odd rows (``2*y+1``) hold the horizontal walls between cell rows ``y`` and
  ``y+1``; entry ``[2*y+1][x]`` separates ``(x, y)`` from ``(x, y+1)``.

``True`` means the passage is blocked.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

logger = logging.getLogger(__name__)

CellPos = Tuple[int, int]


@dataclass(eq=False)
class Cell:
    x: int
    y: int
    visited: bool = False
    neighbors: List["Cell"] = field(default_factory=list, repr=False)

    @property
    def pos(self) -> CellPos:
        return (self.x, self.y)


class WallGrid:
    """Boolean wall matrix of a ``width`` x ``height`` maze."""

    __slots__ = ("_w", "_h", "_rows")

    def __init__(self, width: int, height: int, closed: bool = True) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")
        self._w = int(width)
        self._h = int(height)
        self._rows: List[List[bool]] = [
            [closed for _ in range(self._w)] for _ in range(2 * self._h - 1)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "WallGrid":
        """Build a grid from an explicit matrix of ``2*height - 1`` rows."""
        if not rows or len(rows) % 2 == 0:
            raise ValueError("Wall matrix needs an odd, non-zero number of rows")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Wall matrix rows must all have the same length")
        grid = cls(width, (len(rows) + 1) // 2)
        grid._rows = [[bool(v) for v in row] for row in rows]
        return grid

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def rows(self) -> Tuple[Tuple[bool, ...], ...]:
        """Read-only snapshot of the wall matrix."""
        return tuple(tuple(row) for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallGrid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"WallGrid({self._w}x{self._h}, open={self.count_open()})"

    def copy(self) -> "WallGrid":
        return WallGrid.from_rows(self._rows)

    def contains(self, cell: CellPos) -> bool:
        return 0 <= cell[0] < self._w and 0 <= cell[1] < self._h

    def is_blocked(self, row: int, col: int) -> bool:
        return self._rows[row][col]

    def wall_index(self, a: CellPos, b: CellPos) -> Tuple[int, int]:
        """Return ``(row, col)`` of the wall separating adjacent cells ``a`` and ``b``."""
        (ax, ay), (bx, by) = a, b
        if abs(ax - bx) + abs(ay - by) != 1:
            raise ValueError(f"Cells {a} and {b} are not adjacent")
        return 2 * min(ay, by) + abs(ay - by), max(ax, bx)

    def has_wall(self, a: CellPos, b: CellPos) -> bool:
        row, col = self.wall_index(a, b)
        return self._rows[row][col]

    def open_passage(self, a: CellPos, b: CellPos) -> None:
        row, col = self.wall_index(a, b)
        self._rows[row][col] = False

    def open_neighbors(self, cell: CellPos) -> Iterator[CellPos]:
        x, y = cell
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if self.contains((nx, ny)) and not self.has_wall(cell, (nx, ny)):
                yield (nx, ny)

    def passages(self) -> Iterator[Tuple[CellPos, CellPos]]:
        """Yield every open edge once, as ``(cell, east_or_south_neighbor)``."""
        for y in range(self._h):
            for x in range(1, self._w):
                if not self._rows[2 * y][x]:
                    yield (x - 1, y), (x, y)
            if y < self._h - 1:
                for x in range(self._w):
                    if not self._rows[2 * y + 1][x]:
                        yield (x, y), (x, y + 1)

    def count_open(self) -> int:
        return sum(1 for _ in self.passages())

    def render_text(self) -> str:
        """ASCII drawing of the maze, mostly for logs and test failures."""
        lines = ["+" + "--+" * self._w]
        for y in range(self._h):
            row = "|"
            for x in range(self._w):
                east_open = x < self._w - 1 and not self._rows[2 * y][x + 1]
                row += "   " if east_open else "  |"
            lines.append(row)
            floor = "+"
            for x in range(self._w):
                south_open = y < self._h - 1 and not self._rows[2 * y + 1][x]
                floor += "  +" if south_open else "--+"
            lines.append(floor)
        return "\n".join(lines)


class MazeGenerator:
    """Randomized depth-first backtracker over a fixed ``width`` x ``height`` cell grid.

    The cells and their neighbour links are built once; every call to
    :meth:`generate` clears the visited flags and carves a new, independent maze
    into a fresh :class:`WallGrid`.
    """

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]
        for y in range(height):
            for x in range(width):
                cell = self.cells[y][x]
                if y > 0:
                    cell.neighbors.append(self.cells[y - 1][x])
                if y < height - 1:
                    cell.neighbors.append(self.cells[y + 1][x])
                if x > 0:
                    cell.neighbors.append(self.cells[y][x - 1])
                if x < width - 1:
                    cell.neighbors.append(self.cells[y][x + 1])

    def _reset_cells(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.visited = False

    def generate(self) -> WallGrid:
        self._reset_cells()
        walls = WallGrid(self.width, self.height)
        start = self.cells[self.rng.randrange(self.height)][self.rng.randrange(self.width)]
        logger.debug(
            "Carving %dx%d maze from cell %s", self.width, self.height, start.pos
        )

        start.visited = True
        stack: List[Tuple[Cell, List[Cell]]] = [(start, list(start.neighbors))]
        while stack:
            cell, candidates = stack[-1]
            if not candidates:
                stack.pop()
                continue
            neighbor = candidates.pop(self.rng.randrange(len(candidates)))
            if neighbor.visited:
                continue
            walls.open_passage(cell.pos, neighbor.pos)
            neighbor.visited = True
            stack.append((neighbor, list(neighbor.neighbors)))

        return walls

    reset = generate


def generate(width: int, height: int, seed: int | None = None) -> WallGrid:
    """Generate a perfect maze; the same seed and size always give the same grid."""
    return MazeGenerator(width, height, random.Random(seed)).generate()
