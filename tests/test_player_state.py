import math

import pytest

from wolfdata.ascii_map import parse_ascii_map
from wolfdata.player_state import Key, PlayerState, wrap_angle


def _map(start):
    return parse_ascii_map(f"3 3\n   \n {start} \n   \n")


@pytest.mark.parametrize(
    "start, orientation",
    [("e", 0.0), ("s", math.pi / 2.0), ("w", math.pi), ("n", math.pi * 1.5)],
)
def test_start_orientation(start, orientation):
    player = PlayerState(_map(start))
    assert player.orientation == pytest.approx(orientation)
    assert player.dir == pytest.approx((math.cos(orientation), math.sin(orientation)))


def test_start_position_is_tile_centre():
    player = PlayerState(_map("e"))
    assert player.pos == (1.5, 1.5)


def test_move_forward():
    player = PlayerState(_map("e"), move_speed=2.0)
    player.set_keyboard_state({Key.UP})
    player.animate(1000)
    assert player.pos == pytest.approx((3.5, 1.5))


def test_move_backward_facing_north():
    player = PlayerState(_map("n"))
    player.set_keyboard_state({Key.DOWN})
    player.animate(500)
    assert player.pos == pytest.approx((1.5, 2.0))


def test_opposite_keys_cancel():
    player = PlayerState(_map("e"))
    player.set_keyboard_state({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})
    player.animate(1000)
    assert player.pos == (1.5, 1.5)
    assert player.orientation == 0.0


def test_turn_left_wraps_below_zero():
    player = PlayerState(_map("e"))
    player.set_keyboard_state({Key.LEFT})
    player.animate(500)
    assert player.orientation == pytest.approx(2.0 * math.pi - 0.5)
    assert player.dir == pytest.approx((math.cos(-0.5), math.sin(-0.5)))


def test_turn_right_uses_rot_speed():
    player = PlayerState(_map("e"), rot_speed=2.0)
    player.set_keyboard_state([Key.RIGHT])
    player.animate(250)
    assert player.orientation == pytest.approx(0.5)


def test_animate_without_keyboard_raises():
    player = PlayerState(_map("e"))
    with pytest.raises(RuntimeError):
        player.animate(16)


@pytest.mark.parametrize("angle", [-10.0, -0.5, 0.0, 1.0, 7.0, 100.0])
def test_wrap_angle_range_and_equivalence(angle):
    wrapped = wrap_angle(angle)
    assert 0.0 <= wrapped < 2.0 * math.pi
    assert math.cos(wrapped) == pytest.approx(math.cos(angle))
    assert math.sin(wrapped) == pytest.approx(math.sin(angle))