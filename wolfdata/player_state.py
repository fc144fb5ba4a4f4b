"""Position and heading of the player, driven by the arrow keys."""

from __future__ import annotations

import math
from enum import Enum
from typing import Container

from .map_info import MapObject
from .raw_map import RawMap

_TAU = 2.0 * math.pi

_START_ORIENTATIONS = {
    MapObject.start_position_n: math.pi * 1.5,
    MapObject.start_position_s: math.pi / 2.0,
    MapObject.start_position_w: math.pi,
}


class Key(Enum):
    """Keys that steer the player."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def wrap_angle(angle: float) -> float:
    """Bring an angle in radians into [0, 2*pi)."""
    wrapped = math.fmod(angle, _TAU)
    if wrapped < 0.0:
        wrapped += _TAU
    return 0.0 if wrapped >= _TAU else wrapped


class PlayerState:
    """The player: starts at the centre of the start tile, facing its direction.

    The keyboard state is any container of the keys held down.
    """

    def __init__(
        self, raw_map: RawMap, move_speed: float = 1.0, rot_speed: float = 1.0
    ) -> None:
        self.move_speed = move_speed
        self.rot_speed = rot_speed
        w, h = raw_map.player_pos()
        self.orientation: float = _START_ORIENTATIONS.get(raw_map.block(w, h).object, 0.0)
        self.pos: tuple[float, float] = (w + 0.5, h + 0.5)
        self.dir: tuple[float, float] = (0.0, 0.0)
        self._keyboard_state: Container[Key] | None = None
        self._update_dir()

    def set_keyboard_state(self, keyboard_state: Container[Key] | None) -> None:
        self._keyboard_state = keyboard_state

    def animate(self, time_elapsed_ms: int) -> None:
        """Move and turn according to the keys held for ``time_elapsed_ms``."""
        keys = self._keyboard_state
        if keys is None:
            raise RuntimeError("no keyboard state set")
        elapsed = time_elapsed_ms / 1000.0

        up, down = Key.UP in keys, Key.DOWN in keys
        if up != down:
            step = elapsed * (self.move_speed if up else -self.move_speed)
            x, y = self.pos
            dx, dy = self.dir
            self.pos = (x + step * dx, y + step * dy)

        left, right = Key.LEFT in keys, Key.RIGHT in keys
        if left != right:
            turn = (-elapsed if left else elapsed) * self.rot_speed
            self.orientation = wrap_angle(self.orientation + turn)
            self._update_dir()

    def _update_dir(self) -> None:
        self.dir = (math.cos(self.orientation), math.sin(self.orientation))