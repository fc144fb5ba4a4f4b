"""A tile grid of a level with doors and ambush tiles cleared and the start located."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .map_info import Extra, MapObject, Wall

_DOORS = frozenset(
    {
        Wall.door_vertical,
        Wall.door_vertical_gold_key,
        Wall.door_vertical_silver_key,
        Wall.elevator_door_vertical,
        Wall.door_horizontal,
        Wall.door_horizontal_gold_key,
        Wall.door_horizontal_silver_key,
        Wall.elevator_door_horizontal,
    }
)

_START_POSITIONS = frozenset(
    {
        MapObject.start_position_n,
        MapObject.start_position_s,
        MapObject.start_position_w,
        MapObject.start_position_e,
    }
)

_PLANES = ("wall", "object", "extra")


class MapError(RuntimeError):
    """Raised when a level is malformed."""


@dataclass(slots=True)
class Block:
    """One tile: its codes in the wall, object and extra planes."""

    wall: int = Wall.nothing
    object: int = MapObject.nothing
    extra: int = Extra.nothing

    def __getitem__(self, index: int) -> int:
        """Return the code of plane ``index``; unknown planes read as 0."""
        if 0 <= index < len(_PLANES):
            return getattr(self, _PLANES[index])
        return 0

    def __setitem__(self, index: int, value: int) -> None:
        """Set the code of plane ``index``; writes to unknown planes are dropped."""
        if 0 <= index < len(_PLANES):
            setattr(self, _PLANES[index], int(value))


class RawMap:
    """A ``width`` x ``height`` grid of blocks, stored row by row."""

    def __init__(self, width: int, height: int, blocks: Iterable[Block]) -> None:
        self._width = width
        self._height = height
        self._blocks = list(blocks)
        if len(self._blocks) != width * height:
            raise MapError(
                f"map error: expected {width * height} blocks, got {len(self._blocks)}"
            )
        self._clear_doors_and_ambush_tiles()
        self._player_pos = self._find_start_position()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def block(self, w: int, h: int) -> Block:
        """Return the block at column ``w``, row ``h``."""
        if not (0 <= w < self._width and 0 <= h < self._height):
            raise IndexError(f"block ({w}, {h}) is outside the map")
        return self._blocks[w + h * self._width]

    def is_wall(self, w: int, h: int) -> bool:
        wall = self.block(w, h).wall
        return Wall.nothing < wall < Wall.elevator_to_secret_floor

    def is_wall_on_n(self, w: int, h: int) -> bool:
        """True if north of the tile is a wall or the map edge."""
        return h == 0 or self.is_wall(w, h - 1)

    def is_wall_on_s(self, w: int, h: int) -> bool:
        """True if south of the tile is a wall or the map edge."""
        return h == self._height - 1 or self.is_wall(w, h + 1)

    def is_wall_on_w(self, w: int, h: int) -> bool:
        """True if west of the tile is a wall or the map edge."""
        return w == 0 or self.is_wall(w - 1, h)

    def is_wall_on_e(self, w: int, h: int) -> bool:
        """True if east of the tile is a wall or the map edge."""
        return w == self._width - 1 or self.is_wall(w + 1, h)

    def player_pos(self) -> tuple[int, int]:
        """Column and row of the player's start tile."""
        return self._player_pos

    def _clear_doors_and_ambush_tiles(self) -> None:
        for block in self._blocks:
            if block.wall in _DOORS or block.wall == Wall.floor_deaf_guard:
                block.wall = Wall.nothing

    def _find_start_position(self) -> tuple[int, int]:
        found: tuple[int, int] | None = None
        for index, block in enumerate(self._blocks):
            if block.object in _START_POSITIONS:
                if found is not None:
                    raise MapError("map error: more than one player position detected")
                h, w = divmod(index, self._width)
                found = (w, h)
        if found is None:
            raise MapError("map error: no player position detected")
        return found