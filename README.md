# wolfdata

Tools for reading the map and graphics data of a classic grid-based
first-person shooter, and for turning it into geometry you can work with.
The package has no dependencies beyond the standard library.

## What it does

- **Tile codes** – `wolfdata.map_info` defines the `Wall`, `MapObject` and
  `Extra` enumerations of the three map planes.
- **Maps** – load a level from the original `MAPHEAD`/`GAMEMAPS` pair with
  `wolfdata.gamemaps.WolfMapArchive` (`len(archive)` levels, decoded with
  `create_map(index)`), or from a text grid with
  `wolfdata.ascii_map.load_ascii_map` / `parse_ascii_map`. The decompressors
  `carmack_decompress` and `rlew_expand` are available on their own.
  Either way you get a `wolfdata.raw_map.RawMap`: a grid of `Block`s carrying
  a wall, object and extra code, with doors and ambush tiles cleared and the
  single player start located. A map with no start, or more than one, raises
  `MapError`.
- **Text maps** – a `width height` header line, then one line per row. Digits
  `1`–`9` are walls, `n`/`s`/`w`/`e` mark the player's start facing that
  way, anything else is floor.
- **Vector outlines** – `wolfdata.vector_map.VectorMap` turns the wall grid
  into line segments along the exposed wall faces (`vectors`), each with a
  colour (`colors`); west and east faces are shaded darker.
  `wall_color(wall)` gives the colour of a wall code.
- **Player movement** – `wolfdata.player_state.PlayerState` starts at the
  centre of the start tile and, on `animate(time_elapsed_ms)`, moves and turns
  according to the keys held in the container passed to
  `set_keyboard_state` (members of `Key`). `wrap_angle` keeps headings in
  `[0, 2π)`.
- **Top-down view** – `wolfdata.map_renderer.MapRenderer` draws the map and
  the player's field of view onto any object that follows the `Renderer`
  protocol (`set_draw_color` and `draw_line`), either fixed to the map or
  turning with the player.
- **Graphics** – `wolfdata.vswap.VswapFile.from_file` / `from_bytes` decode
  the 64×64 wall textures and sprites into row-major RGBA pixels, with a
  per-pixel opacity flag for sprites. `PALETTE` holds the 256 colours.
- **Voxels** – `wolfdata.voxelizer.SpriteVoxelizer` extrudes one sprite
  (`voxelize`) or four side views (`voxelize_sides`) into a cube mesh:
  `vertex_data` of `VoxelVertex` records and triangle `indices`.

## Example

```python
from wolfdata.ascii_map import parse_ascii_map
from wolfdata.player_state import Key, PlayerState
from wolfdata.vector_map import VectorMap

raw_map = parse_ascii_map("3 3\n111\n1n1\n111\n")
print(raw_map.player_pos())      # (1, 1)

vector_map = VectorMap(raw_map)
print(len(vector_map.vectors))   # number of exposed wall faces

player = PlayerState(raw_map)
player.set_keyboard_state({Key.LEFT})
player.animate(500)              # turn left for half a second
print(player.orientation)
```

Loading the original data files:

```python
from wolfdata.gamemaps import WolfMapArchive
from wolfdata.vswap import VswapFile

archive = WolfMapArchive("data/MAPHEAD.WL6", "data/GAMEMAPS.WL6")
first_level = archive.create_map(0)

graphics = VswapFile.from_file("data/VSWAP.WL6")
```

## What it does not do

This is a library only. It opens no window, runs no game loop, renders no
first-person raycast view and uploads nothing to a GPU; `MapRenderer` only
issues line-drawing calls to a renderer you supply. Sound chunks in a VSWAP
file are not decoded, and there is no command-line program.

## Installing

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.