"""Tests for the observer state."""

import math

import pytest

from entities.player import Player
from utils.colors import COLOR_PLAYER, COLOR_PLAYER_HEADING
from utils.constants import STEP_LENGTH, TURN_ANGLE
from utils.helpers import TWO_PI


def test_heading_vector_follows_heading(player: Player) -> None:
    assert player.heading == pytest.approx(math.pi)
    assert player.heading_dx == pytest.approx(-STEP_LENGTH)
    assert player.heading_dy == pytest.approx(0.0, abs=1e-9)

    player.set_heading(math.pi / 2)
    assert player.heading_dx == pytest.approx(0.0, abs=1e-9)
    assert player.heading_dy == pytest.approx(STEP_LENGTH)


@pytest.mark.parametrize("angle", [-0.5, TWO_PI + 0.25, -TWO_PI + 0.1])
def test_set_heading_normalizes(player: Player, angle: float) -> None:
    player.set_heading(angle)
    assert 0.0 <= player.heading < TWO_PI
    assert player.heading_dx == pytest.approx(STEP_LENGTH * math.cos(player.heading))
    assert player.heading_dy == pytest.approx(STEP_LENGTH * math.sin(player.heading))


def test_move_along_heading(player: Player) -> None:
    player.move(1)
    assert player.get_position() == pytest.approx((290.0, 300.0))
    player.move(-3)
    assert player.get_position() == pytest.approx((320.0, 300.0))


def test_turn_round_trip_restores_heading(player: Player) -> None:
    player.turn(1)
    assert player.heading == pytest.approx(math.pi + TURN_ANGLE)
    player.turn(-1)
    assert player.heading == pytest.approx(math.pi, abs=1e-12)


def test_turn_wraps_past_zero() -> None:
    player = Player(100, 100, 0.05)
    player.turn(-1)
    assert player.heading == pytest.approx(TWO_PI - 0.05)
    player.turn(1)
    assert player.heading == pytest.approx(0.05, abs=1e-12)


def test_identical_command_sequences_are_deterministic() -> None:
    first = Player(300, 300, math.pi)
    second = Player(300, 300, math.pi)
    for steps_move, steps_turn in [(1, 1), (2, -1), (-1, 3), (4, 0), (1, -7)]:
        for p in (first, second):
            p.move(steps_move)
            p.turn(steps_turn)
    assert (first.x, first.y, first.heading) == (second.x, second.y, second.heading)
    assert (first.heading_dx, first.heading_dy) == (second.heading_dx, second.heading_dy)


def test_draw_marker(player: Player, gfx) -> None:
    player.draw(gfx)
    point, line = gfx.calls
    assert point == ("point", 300.0, 300.0, 8, COLOR_PLAYER)
    assert line[0] == "line"
    assert line[1:3] == (300.0, 300.0)
    assert line[3] == pytest.approx(300.0 - 5 * STEP_LENGTH)
    assert line[4] == pytest.approx(300.0, abs=1e-9)
    assert line[5] == COLOR_PLAYER_HEADING
