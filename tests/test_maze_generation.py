from __future__ import annotations

import random

import pytest

from maze3d.maze import MazeGenerator, WallGrid, generate


def _reachable(grid: WallGrid) -> set[tuple[int, int]]:
    seen = {(0, 0)}
    frontier = [(0, 0)]
    while frontier:
        cell = frontier.pop()
        for nxt in grid.open_neighbors(cell):
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return seen


@pytest.mark.parametrize(
    "width,height",
    [(1, 1), (1, 6), (7, 1), (2, 2), (16, 9), (9, 16), (25, 25)],
)
def test_generated_maze_is_a_spanning_tree(width: int, height: int) -> None:
    for seed in range(5):
        grid = generate(width, height, seed)

        assert grid.width == width
        assert grid.height == height
        assert len(grid.rows) == 2 * height - 1
        assert all(len(row) == width for row in grid.rows)
        assert len(_reachable(grid)) == width * height
        assert grid.count_open() == width * height - 1


def test_same_seed_gives_same_maze() -> None:
    assert generate(12, 8, 4242) == generate(12, 8, 4242)


def test_different_seeds_give_different_mazes() -> None:
    grids = [generate(10, 10, seed) for seed in range(10)]

    assert any(grid != grids[0] for grid in grids[1:])


def test_regeneration_is_independent_of_previous_maze() -> None:
    generator = MazeGenerator(12, 12, random.Random(99))
    first = generator.generate()
    second = generator.reset()

    assert first != second
    assert len(_reachable(second)) == 144
    assert second.count_open() == 143
    assert all(cell.visited for row in generator.cells for cell in row)


def test_degenerate_corridors_are_fully_open() -> None:
    column = generate(1, 5, 3)
    assert [column.rows[y][0] for y in range(1, 9, 2)] == [False] * 4

    row = generate(5, 1, 3)
    assert row.rows == ((True, False, False, False, False),)


def test_generator_links_grid_neighbors() -> None:
    generator = MazeGenerator(3, 2)

    corner = generator.cells[0][0]
    middle = generator.cells[0][1]
    assert sorted(n.pos for n in corner.neighbors) == [(0, 1), (1, 0)]
    assert sorted(n.pos for n in middle.neighbors) == [(0, 0), (1, 1), (2, 0)]


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_generate_rejects_non_positive_dimensions(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        generate(width, height, 1)
