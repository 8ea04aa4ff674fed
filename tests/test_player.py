from __future__ import annotations

import pytest

from maze3d.maze import WallGrid
from maze3d.motion import Vec3, WorldMetrics
from maze3d.player import Movement, Player

METRICS = WorldMetrics(wall_size=1.5, wall_thickness=0.2, clearance=0.2)


def test_spawn_faces_east_when_first_passage_is_open() -> None:
    player = Player()
    player.pitch = 30.0
    player.spawn(WallGrid.from_rows([[False, False]]), METRICS)

    assert tuple(player.position) == pytest.approx((0.85, 0.75, 0.85))
    assert player.yaw == 0.0
    assert player.pitch == 0.0


@pytest.mark.parametrize(
    "rows",
    [
        [[False, True]],
        [[True], [False], [True]],
    ],
)
def test_spawn_faces_south_when_east_is_closed(rows: list[list[bool]]) -> None:
    player = Player()
    player.spawn(WallGrid.from_rows(rows), METRICS)

    assert player.yaw == 90.0


def test_view_vectors_follow_yaw() -> None:
    player = Player()

    assert tuple(player.front) == pytest.approx((1.0, 0.0, 0.0))
    assert tuple(player.right) == pytest.approx((0.0, 0.0, 1.0))
    assert tuple(player.up) == pytest.approx((0.0, 1.0, 0.0))

    player.yaw = 90.0
    assert tuple(player.front) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)
    assert tuple(player.right) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)


def test_forward_motion_stays_on_the_floor_plane() -> None:
    player = Player(speed=2.5)
    player.pitch = 45.0

    moved = player.desired_displacement([Movement.FORWARD], 0.1)

    assert tuple(moved) == pytest.approx((0.25, 0.0, 0.0))


def test_directions_combine_and_cancel() -> None:
    player = Player(speed=2.5)

    up = player.desired_displacement([Movement.UP], 0.1)
    still = player.desired_displacement([Movement.FORWARD, Movement.BACKWARD], 0.1)
    diagonal = player.desired_displacement([Movement.FORWARD, Movement.LEFT], 1.0)

    assert tuple(up) == pytest.approx((0.0, 0.25, 0.0))
    assert tuple(still) == pytest.approx((0.0, 0.0, 0.0))
    assert tuple(diagonal) == pytest.approx((2.5, 0.0, -2.5))


def test_rotate_scales_offsets_and_clamps_pitch() -> None:
    player = Player(sensitivity=0.1)

    player.rotate(100.0, 0.0)
    assert player.yaw == pytest.approx(10.0)

    player.rotate(0.0, 10_000.0)
    assert player.pitch == 89.0
    player.rotate(0.0, -20_000.0)
    assert player.pitch == -89.0

    player.rotate(0.0, 20_000.0, constrain_pitch=False)
    assert player.pitch == pytest.approx(1911.0)


def test_move_stops_in_front_of_a_wall() -> None:
    grid = WallGrid.from_rows([[False, True]])
    player = Player(speed=2.5)
    player.spawn(grid, METRICS)
    player.yaw = 0.0

    first = player.move([Movement.FORWARD], 0.2, grid, METRICS)
    second = player.move([Movement.FORWARD], 0.2, grid, METRICS)

    assert first.x == pytest.approx(0.5)
    assert second == Vec3(0.0, 0.0, 0.0)
    assert player.position.x == pytest.approx(1.35)


def test_move_without_input_is_a_no_op() -> None:
    grid = WallGrid.from_rows([[False]])
    player = Player()
    player.spawn(grid, METRICS)
    before = player.position

    assert player.move([], 0.5, grid, METRICS) == Vec3(0.0, 0.0, 0.0)
    assert player.position == before
