from __future__ import annotations

import pytest

from maze3d.maze import WallGrid


def test_new_grid_is_fully_closed() -> None:
    grid = WallGrid(4, 3)

    assert len(grid.rows) == 5
    assert all(all(row) for row in grid.rows)
    assert grid.count_open() == 0


def test_wall_index_uses_interleaved_rows() -> None:
    grid = WallGrid(5, 5)

    # vertical neighbours live on the odd rows
    assert grid.wall_index((2, 3), (2, 4)) == (7, 2)
    assert grid.wall_index((2, 4), (2, 3)) == (7, 2)
    # horizontal neighbours live on the even rows, column = right-hand cell
    assert grid.wall_index((3, 1), (2, 1)) == (2, 3)
    assert grid.wall_index((0, 0), (1, 0)) == (0, 1)


def test_wall_index_rejects_non_adjacent_cells() -> None:
    grid = WallGrid(3, 3)

    with pytest.raises(ValueError):
        grid.wall_index((0, 0), (1, 1))
    with pytest.raises(ValueError):
        grid.wall_index((0, 0), (0, 0))


def test_open_passage_is_symmetric() -> None:
    grid = WallGrid(3, 3)
    grid.open_passage((1, 1), (1, 2))

    assert not grid.has_wall((1, 2), (1, 1))
    assert list(grid.open_neighbors((1, 1))) == [(1, 2)]
    assert list(grid.passages()) == [((1, 1), (1, 2))]


def test_from_rows_round_trips_and_copies() -> None:
    rows = [
        [False, False, True],
        [True, False, False],
        [False, True, False],
    ]
    grid = WallGrid.from_rows(rows)
    clone = grid.copy()
    clone.open_passage((0, 1), (1, 1))

    assert (grid.width, grid.height) == (3, 2)
    assert [list(row) for row in grid.rows] == rows
    assert grid != clone
    assert grid.has_wall((0, 1), (1, 1))


def test_from_rows_rejects_malformed_matrices() -> None:
    with pytest.raises(ValueError):
        WallGrid.from_rows([[True], [True]])
    with pytest.raises(ValueError):
        WallGrid.from_rows([[True, True], [True], [True, True]])


def test_render_text_draws_open_passages() -> None:
    grid = WallGrid.from_rows([[False, False]])

    assert grid.render_text().splitlines() == [
        "+--+--+",
        "|     |",
        "+--+--+",
    ]


def test_rows_snapshot_cannot_change_the_grid() -> None:
    grid = WallGrid(2, 2)
    rows = grid.rows

    with pytest.raises(TypeError):
        rows[1][0] = False  # type: ignore[index]
    assert grid.is_blocked(1, 0)
    assert grid.count_open() == 0
