"""Wall outlines of a level as coloured line segments."""

from __future__ import annotations

import math

from .map_info import Wall
from .raw_map import RawMap

Point = tuple[float, float]
Color = tuple[int, int, int]

_ORIENTATION_SHADOW_FACTOR = 0.625

_COLOR_GROUPS: tuple[tuple[Color, tuple[Wall, ...]], ...] = (
    (
        (160, 160, 160),
        (
            Wall.grey_brick_1,
            Wall.grey_brick_2,
            Wall.grey_brick_3,
            Wall.grey_brick_flag,
            Wall.grey_brick_hitler,
            Wall.grey_brick_eagle,
            Wall.grey_brick_sign,
            Wall.grey_wall_1,
            Wall.grey_wall_2,
            Wall.grey_wall_hitler,
            Wall.grey_wall_map,
            Wall.grey_wall_vent,
            Wall.fake_locked_door,
            Wall.elevator_wall,
            Wall.elevator,
            Wall.fake_elevator,
        ),
    ),
    ((160, 160, 90), (Wall.dirty_brick_1, Wall.dirty_brick_2)),
    (
        (64, 80, 224),
        (
            Wall.cell,
            Wall.cell_skeleton,
            Wall.blue_brick_1,
            Wall.blue_brick_2,
            Wall.blue_brick_sign,
            Wall.blue_wall,
            Wall.blue_wall_swastika,
            Wall.blue_wall_skull,
        ),
    ),
    (
        (106, 70, 34),
        (
            Wall.wood,
            Wall.wood_eagle,
            Wall.wood_hitler,
            Wall.wood_iron_cross,
            Wall.wood_panel,
        ),
    ),
    ((0, 154, 56), (Wall.entrance_to_level,)),
    (
        (24, 148, 148),
        (Wall.steel, Wall.steel_sign, Wall.fake_door, Wall.door_excavation),
    ),
    ((124, 246, 246), (Wall.landscape,)),
    (
        (160, 0, 0),
        (
            Wall.red_brick,
            Wall.red_brick_swastika,
            Wall.red_brick_flag,
            Wall.multicolor_brick,
        ),
    ),
    ((160, 0, 160), (Wall.purple, Wall.purple_blood)),
    (
        (220, 162, 128),
        (
            Wall.brown_weave,
            Wall.brown_weave_blood_1,
            Wall.brown_weave_blood_2,
            Wall.brown_weave_blood_3,
            Wall.brown_stone_1,
            Wall.brown_stone_2,
            Wall.brown_marble_1,
            Wall.brown_marble_2,
            Wall.brown_marble_flag,
        ),
    ),
    ((252, 248, 92), (Wall.stained_glass,)),
)

_WALL_COLORS: dict[int, Color] = {
    wall: color for color, walls in _COLOR_GROUPS for wall in walls
}

_DEFAULT_COLOR: Color = (255, 255, 255)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _shade(color: Color, factor: float) -> Color:
    r, g, b = color
    return (
        _round_half_up(r * factor),
        _round_half_up(g * factor),
        _round_half_up(b * factor),
    )


def wall_color(wall: int) -> Color:
    """Map colour of a wall code; unknown codes are white."""
    return _WALL_COLORS.get(wall, _DEFAULT_COLOR)


class VectorMap:
    """Outer edges of the walls of a level, each with its colour.

    West and east facing edges are drawn darker than north and south ones.
    """

    def __init__(self, raw_map: RawMap) -> None:
        self.width = float(raw_map.width)
        self.height = float(raw_map.height)
        self.diagonal_length = math.sqrt(
            self.width * self.width + self.height * self.height
        )
        self.vectors: list[tuple[Point, Point]] = []
        self.colors: list[Color] = []
        self._generate(raw_map)

    def color(self, index: int, shadow_factor: float = 1.0) -> Color:
        """Colour of segment ``index`` scaled by ``shadow_factor``."""
        return _shade(self.colors[index], shadow_factor)

    def _add(self, start: Point, end: Point, color: Color) -> None:
        self.vectors.append((start, end))
        self.colors.append(color)

    def _generate(self, raw_map: RawMap) -> None:
        for h in range(raw_map.height):
            for w in range(raw_map.width):
                if not raw_map.is_wall(w, h):
                    continue
                base = wall_color(raw_map.block(w, h).wall)
                shaded = _shade(base, _ORIENTATION_SHADOW_FACTOR)
                x0, y0, x1, y1 = float(w), float(h), float(w + 1), float(h + 1)
                if not raw_map.is_wall_on_n(w, h):
                    self._add((x0, y0), (x1, y0), base)
                if not raw_map.is_wall_on_s(w, h):
                    self._add((x1, y1), (x0, y1), base)
                if not raw_map.is_wall_on_w(w, h):
                    self._add((x0, y1), (x0, y0), shaded)
                if not raw_map.is_wall_on_e(w, h):
                    self._add((x1, y0), (x1, y1), shaded)