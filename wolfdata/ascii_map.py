"""Levels drawn as plain text, one character per tile."""

from __future__ import annotations

import os
import re

from .map_info import MapObject, Wall
from .raw_map import Block, MapError, RawMap

_HEADER = re.compile(r"\s*(\d+)\s+(\d+)")

_WALL_CHARS = {
    "1": Wall.blue_wall,
    "2": Wall.grey_wall_1,
    "3": Wall.wood,
    "4": Wall.steel,
    "5": Wall.red_brick,
    "6": Wall.multicolor_brick,
    "7": Wall.purple,
    "8": Wall.brown_stone_1,
    "9": Wall.landscape,
}

_OBJECT_CHARS = {
    "n": MapObject.start_position_n,
    "s": MapObject.start_position_s,
    "w": MapObject.start_position_w,
    "e": MapObject.start_position_e,
}


def _block_for(char: str) -> Block:
    return Block(
        wall=_WALL_CHARS.get(char, Wall.nothing),
        object=_OBJECT_CHARS.get(char, MapObject.nothing),
    )


def parse_ascii_map(text: str) -> RawMap:
    """Build a map from text: a "width height" header, then one line per row.

    Digits 1-9 are walls, n/s/w/e mark the player's start facing that way,
    anything else is empty floor. Short or missing rows are padded with floor.
    """
    header = _HEADER.match(text)
    if header is None:
        raise MapError("map error: missing width and height")
    width, height = int(header.group(1)), int(header.group(2))

    # the single character after the header (its line break) is skipped
    lines = text[header.end() + 1 :].split("\n")[:height]
    lines += [""] * (height - len(lines))

    blocks = [
        _block_for(char)
        for line in lines
        for char in line.ljust(width, " ")[:width]
    ]
    return RawMap(width, height, blocks)


def load_ascii_map(path: str | os.PathLike[str]) -> RawMap:
    """Read and parse a text map file."""
    with open(path, encoding="ascii", errors="replace", newline="") as file:
        return parse_ascii_map(file.read())