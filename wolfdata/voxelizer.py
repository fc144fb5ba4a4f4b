"""Turns 64x64 sprites into voxel models built from coloured cubes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .vswap import Rgba, VswapFile

Vec3 = tuple[float, float, float]

_SIDE = 64
_HALF = _SIDE // 2
_LAYER = _SIDE * _SIDE
_VOLUME = _SIDE * _LAYER
_EMPTY: Rgba = (0, 0, 0, 0)


@dataclass(frozen=True, slots=True)
class VoxelVertex:
    """One vertex of a voxel cube: position, face normal and RGBA colour."""

    position: Vec3
    normal: Vec3
    color: Rgba


_CUBE: tuple[tuple[Vec3, Vec3], ...] = (
    ((-0.5, -0.5, -0.5), (0.0, 0.0, -1.0)),
    ((0.5, -0.5, -0.5), (0.0, 0.0, -1.0)),
    ((0.5, 0.5, -0.5), (0.0, 0.0, -1.0)),
    ((-0.5, 0.5, -0.5), (0.0, 0.0, -1.0)),
    ((-0.5, -0.5, 0.5), (0.0, 0.0, 1.0)),
    ((0.5, -0.5, 0.5), (0.0, 0.0, 1.0)),
    ((0.5, 0.5, 0.5), (0.0, 0.0, 1.0)),
    ((-0.5, 0.5, 0.5), (0.0, 0.0, 1.0)),
    ((-0.5, -0.5, -0.5), (0.0, -1.0, 0.0)),
    ((0.5, -0.5, -0.5), (0.0, -1.0, 0.0)),
    ((0.5, -0.5, 0.5), (0.0, -1.0, 0.0)),
    ((-0.5, -0.5, 0.5), (0.0, -1.0, 0.0)),
    ((-0.5, 0.5, -0.5), (0.0, 1.0, 0.0)),
    ((0.5, 0.5, -0.5), (0.0, 1.0, 0.0)),
    ((0.5, 0.5, 0.5), (0.0, 1.0, 0.0)),
    ((-0.5, 0.5, 0.5), (0.0, 1.0, 0.0)),
    ((-0.5, -0.5, -0.5), (-1.0, 0.0, 0.0)),
    ((-0.5, 0.5, -0.5), (-1.0, 0.0, 0.0)),
    ((-0.5, 0.5, 0.5), (-1.0, 0.0, 0.0)),
    ((-0.5, -0.5, 0.5), (-1.0, 0.0, 0.0)),
    ((0.5, -0.5, -0.5), (1.0, 0.0, 0.0)),
    ((0.5, 0.5, -0.5), (1.0, 0.0, 0.0)),
    ((0.5, 0.5, 0.5), (1.0, 0.0, 0.0)),
    ((0.5, -0.5, 0.5), (1.0, 0.0, 0.0)),
)

_CUBE_INDICES: tuple[int, ...] = (
    2, 1, 0,
    0, 3, 2,
    4, 5, 6,
    6, 7, 4,
    8, 9, 10,
    10, 11, 8,
    14, 13, 12,
    12, 15, 14,
    18, 17, 16,
    16, 19, 18,
    20, 21, 22,
    22, 23, 20,
)


class _VoxelGrid:
    """A 64^3 grid of colours and opacity flags, indexed as ``a*64*64 + b*64 + c``."""

    def __init__(self) -> None:
        self.colors: list[Rgba] = [_EMPTY] * _VOLUME
        self.opaque: list[bool] = [False] * _VOLUME


class SpriteVoxelizer:
    """Builds a voxel model from sprites of a VSWAP file.

    After a call to :meth:`voxelize` or :meth:`voxelize_sides`, ``vertex_data``
    holds 24 vertices per opaque voxel and ``indices`` the triangles over them.
    """

    def __init__(self, vswap_file: VswapFile) -> None:
        self.vswap_file = vswap_file
        self.vertex_data: list[VoxelVertex] = []
        self.indices: list[int] = []

    def voxelize_sides(
        self,
        front_sprite_index: int,
        back_sprite_index: int,
        left_sprite_index: int,
        right_sprite_index: int,
    ) -> None:
        """Carve a model from four sprites seen from the front, back, left and right."""
        for index in (
            front_sprite_index,
            back_sprite_index,
            left_sprite_index,
            right_sprite_index,
        ):
            self._check_index(index)
        sprites = self.vswap_file.sprites
        opaque = self.vswap_file.sprites_opaque
        grid = self._prepare(
            sprites[front_sprite_index],
            opaque[front_sprite_index],
            sprites[back_sprite_index],
            opaque[back_sprite_index],
            sprites[left_sprite_index],
            opaque[left_sprite_index],
            lambda x: x,
            sprites[right_sprite_index],
            opaque[right_sprite_index],
            lambda x: _SIDE - x - 1,
        )
        self._build_model(grid)

    def voxelize(self, sprite_index: int, mirrored_sides: bool) -> None:
        """Carve a model using one sprite for every side, optionally mirrored on the sides."""
        self._check_index(sprite_index)
        sprite = self.vswap_file.sprites[sprite_index]
        opaque = self.vswap_file.sprites_opaque[sprite_index]

        def straight(x: int) -> int:
            return x

        def flipped(x: int) -> int:
            return _SIDE - x - 1

        first, second = (flipped, straight) if mirrored_sides else (straight, flipped)
        grid = self._prepare(
            sprite, opaque, sprite, opaque, sprite, opaque, first, sprite, opaque, second
        )
        self._build_model(grid)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.vswap_file.sprites):
            raise IndexError(f"invalid sprite index {index}")

    @staticmethod
    def _prepare(
        front: Sequence[Rgba],
        front_opaque: Sequence[bool],
        back: Sequence[Rgba],
        back_opaque: Sequence[bool],
        left: Sequence[Rgba],
        left_opaque: Sequence[bool],
        left_sample,
        right: Sequence[Rgba],
        right_opaque: Sequence[bool],
        right_sample,
    ) -> _VoxelGrid:
        grid = _VoxelGrid()
        carved = [False] * _VOLUME
        near = [True] * _HALF

        # extrude the front into the near half and the back into the far half
        for x in range(_SIDE):
            sample_x = _SIDE - x - 1
            for y in range(_SIDE):
                column = y * _SIDE + x
                pixel = y * _SIDE + sample_x
                if front_opaque[pixel]:
                    stop = column + _HALF * _LAYER
                    grid.colors[column:stop:_LAYER] = [front[pixel]] * _HALF
                    carved[column:stop:_LAYER] = near
                if back_opaque[y * _SIDE + x]:
                    start = column + _HALF * _LAYER
                    stop = column + _SIDE * _LAYER
                    grid.colors[start:stop:_LAYER] = [back[y * _SIDE + x]] * _HALF
                    carved[start:stop:_LAYER] = near

        # keep only what the side views see as well
        for x in range(_SIDE):
            left_pixel_x = left_sample(x)
            right_pixel_x = right_sample(x)
            for y in range(_SIDE):
                base = x * _LAYER + y * _SIDE
                if left_opaque[y * _SIDE + left_pixel_x]:
                    grid.opaque[base : base + _HALF] = carved[base : base + _HALF]
                if right_opaque[y * _SIDE + right_pixel_x]:
                    grid.opaque[base + _HALF : base + _SIDE] = carved[
                        base + _HALF : base + _SIDE
                    ]

        # paint side colours on voxels enclosed between opaque neighbours
        for x in range(1, _SIDE - 1):
            left_pixel_x = left_sample(x)
            right_pixel_x = right_sample(x)
            for y in range(_SIDE):
                base = x * _LAYER + y * _SIDE
                for pixels, pixel_opaque, pixel_x, depths in (
                    (left, left_opaque, left_pixel_x, range(_HALF)),
                    (right, right_opaque, right_pixel_x, range(_HALF, _SIDE)),
                ):
                    pixel = y * _SIDE + pixel_x
                    if not pixel_opaque[pixel]:
                        continue
                    color = pixels[pixel]
                    for z in depths:
                        index = base + z
                        if grid.opaque[index - _LAYER] and grid.opaque[index + _LAYER]:
                            grid.colors[index] = color
        return grid

    def _build_model(self, grid: _VoxelGrid) -> None:
        self.vertex_data = []
        self.indices = []
        for x in range(_SIDE):
            for y in range(_SIDE):
                for z in range(_SIDE):
                    index = z * _LAYER + y * _SIDE + x
                    if grid.opaque[index]:
                        self._add_voxel(x, y, z, grid.colors[index])

    def _add_voxel(self, x: int, y: int, z: int, color: Rgba) -> None:
        start = len(self.vertex_data)
        px = float(x - _HALF)
        py = -float(y - _HALF)
        pz = float(z - _HALF)
        self.vertex_data.extend(
            VoxelVertex((vx + px, vy + py, vz + pz), normal, color)
            for (vx, vy, vz), normal in _CUBE
        )
        self.indices.extend(start + index for index in _CUBE_INDICES)