"""Draws the wall outlines and the player's view cone as a minimap."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .player_state import PlayerState
from .vector_map import VectorMap

_RAY_LENGTH = 5.0


@runtime_checkable
class Renderer(Protocol):
    """A target that draws coloured lines in screen coordinates."""

    def set_draw_color(self, r: int, g: int, b: int, a: int) -> None:
        """Select the colour of the lines drawn next."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a line between two screen points."""


@dataclass(frozen=True)
class _Transform:
    """A 2D affine transform; each builder method composes on the right."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def translate(self, dx: float, dy: float) -> _Transform:
        return _Transform(
            self.a,
            self.b,
            self.c,
            self.d,
            self.a * dx + self.b * dy + self.tx,
            self.c * dx + self.d * dy + self.ty,
        )

    def rotate(self, angle: float) -> _Transform:
        cos, sin = math.cos(angle), math.sin(angle)
        return _Transform(
            self.a * cos + self.b * sin,
            -self.a * sin + self.b * cos,
            self.c * cos + self.d * sin,
            -self.c * sin + self.d * cos,
            self.tx,
            self.ty,
        )

    def scale(self, factor: float) -> _Transform:
        return _Transform(
            self.a * factor,
            self.b * factor,
            self.c * factor,
            self.d * factor,
            self.tx,
            self.ty,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.b * y + self.tx, self.c * x + self.d * y + self.ty)


class MapRenderer:
    """Minimap of a level, either fixed to the map or turning with the player."""

    def __init__(
        self,
        vector_map: VectorMap,
        player_state: PlayerState,
        fov_in_degrees: float,
        player_oriented: bool = False,
    ) -> None:
        self.vector_map = vector_map
        self.player_state = player_state
        self.fov_in_rad = math.radians(float(fov_in_degrees))
        self.player_oriented = player_oriented
        self._renderer: Renderer | None = None
        self._scale = 0.0
        self._center = (0.0, 0.0)

    def set_renderer(self, renderer: Renderer | None) -> None:
        self._renderer = renderer

    def resize(self, width: int, height: int) -> None:
        """Fit the map to a screen of the given size."""
        self._scale = min(width, height) / self.vector_map.diagonal_length
        self._center = (width / 2.0, height / 2.0)

    def redraw(self) -> None:
        """Draw the map and then the player's view cone."""
        if self._renderer is None:
            raise RuntimeError("no renderer set")
        if self.player_oriented:
            map_mat, player_mat = self._player_oriented_transforms()
        else:
            map_mat, player_mat = self._map_oriented_transforms()
        self._draw_map(self._renderer, map_mat)
        self._draw_player(self._renderer, player_mat)

    def _screen(self) -> _Transform:
        return _Transform().translate(*self._center)

    def _player_oriented_transforms(self) -> tuple[_Transform, _Transform]:
        north = self._screen().rotate(-math.pi / 2.0).scale(self._scale)
        x, y = self.player_state.pos
        map_mat = north.rotate(-self.player_state.orientation).translate(-x, -y)
        return map_mat, north

    def _map_oriented_transforms(self) -> tuple[_Transform, _Transform]:
        map_mat = (
            self._screen()
            .scale(self._scale)
            .translate(-self.vector_map.width / 2.0, -self.vector_map.height / 2.0)
        )
        x, y = self.player_state.pos
        player_mat = map_mat.translate(x, y).rotate(self.player_state.orientation)
        return map_mat, player_mat

    def _draw_map(self, renderer: Renderer, mat: _Transform) -> None:
        for (start, end), (r, g, b) in zip(self.vector_map.vectors, self.vector_map.colors):
            renderer.set_draw_color(r, g, b, 255)
            renderer.draw_line(*mat.apply(*start), *mat.apply(*end))

    def _draw_player(self, renderer: Renderer, mat: _Transform) -> None:
        half = self.fov_in_rad / 2.0
        zero = mat.apply(0.0, 0.0)
        left = mat.apply(math.cos(-half) * _RAY_LENGTH, math.sin(-half) * _RAY_LENGTH)
        right = mat.apply(math.cos(half) * _RAY_LENGTH, math.sin(half) * _RAY_LENGTH)
        front = mat.apply(_RAY_LENGTH, 0.0)
        renderer.set_draw_color(0, 0, 0, 255)
        renderer.draw_line(*zero, *left)
        renderer.draw_line(*zero, *right)
        renderer.set_draw_color(128, 0, 0, 255)
        renderer.draw_line(*zero, *front)