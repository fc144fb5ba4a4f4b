"""Levels stored in the MAPHEAD / GAMEMAPS pair of files."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Sequence

from .raw_map import Block, MapError, RawMap

_NEAR_TAG = 0xA7
_FAR_TAG = 0xA8

_WORD = struct.Struct("<H")
_MAPHEAD = struct.Struct("<H100i")
_MAP_HEADER = struct.Struct("<3i3H2H16s")

_PLANE_COUNT = 3


def carmack_decompress(data: bytes) -> list[int]:
    """Expand a Carmack-compressed plane into 16-bit words.

    ``data`` starts with the expanded length in bytes, followed by the
    compressed stream. Near pointers copy words from a distance back in the
    output, far pointers from an absolute position; a pointer with a count of
    zero escapes a literal word whose high byte equals the tag.
    """
    if len(data) < _WORD.size:
        raise ValueError("compressed plane is too short")
    (length,) = _WORD.unpack_from(data)
    size = length // 2
    out: list[int] = []
    pos = _WORD.size
    try:
        while len(out) < size:
            (word,) = _WORD.unpack_from(data, pos)
            pos += _WORD.size
            tag, count = word >> 8, word & 0xFF
            if tag not in (_NEAR_TAG, _FAR_TAG):
                out.append(word)
                continue
            if count == 0:
                out.append(word | data[pos])
                pos += 1
                continue
            if tag == _NEAR_TAG:
                start = len(out) - data[pos]
                pos += 1
            else:
                (start,) = _WORD.unpack_from(data, pos)
                pos += _WORD.size
            if start < 0:
                raise ValueError("pointer refers before the start of the plane")
            for offset in range(count):
                out.append(out[start + offset])
    except (struct.error, IndexError) as exc:
        raise ValueError("truncated or corrupt compressed plane") from exc
    return out[:size]


def rlew_expand(words: Sequence[int], rlew_tag: int, size: int) -> list[int]:
    """Expand RLEW-compressed words into a plane of ``size`` words.

    The first word holds the expanded length and is skipped. The tag word is
    followed by a repeat count and the value to repeat. A run with a count of
    zero ends the plane, leaving the tag in place and the rest as zeros.
    """
    stream = iter(words[1:])
    result: list[int] = []
    try:
        while len(result) < size:
            value = next(stream)
            if value != rlew_tag:
                result.append(value)
                continue
            count = next(stream)
            value = next(stream)
            if count == 0:
                result.append(rlew_tag)
                break
            if len(result) + count > size:
                raise ValueError("run overflows the plane")
            result.extend([value] * count)
    except StopIteration as exc:
        raise ValueError("truncated RLEW plane") from exc
    result.extend([0] * (size - len(result)))
    return result


class WolfMapArchive:
    """The levels of a MAPHEAD / GAMEMAPS pair."""

    def __init__(
        self,
        maphead_path: str | os.PathLike[str],
        gamemaps_path: str | os.PathLike[str],
    ) -> None:
        try:
            maphead = Path(maphead_path).read_bytes()
            self._gamemaps = Path(gamemaps_path).read_bytes()
        except OSError as exc:
            raise MapError("cannot open given map file(s)") from exc
        if len(maphead) < _MAPHEAD.size:
            raise MapError("map error: MAPHEAD file is truncated")
        tag, *offsets = _MAPHEAD.unpack_from(maphead)
        self.rlew_tag: int = tag
        self._header_offsets = [offset for offset in offsets if offset > 0]

    def __len__(self) -> int:
        return len(self._header_offsets)

    def create_map(self, map_index: int) -> RawMap:
        """Decode level ``map_index``."""
        if not 0 <= map_index < len(self._header_offsets):
            raise IndexError(f"map index {map_index} is out of range")
        try:
            fields = _MAP_HEADER.unpack_from(
                self._gamemaps, self._header_offsets[map_index]
            )
        except struct.error as exc:
            raise MapError("map error: level header is truncated") from exc
        starts = fields[0:3]
        lengths = fields[3:6]
        width, height = fields[6], fields[7]

        size = width * height
        blocks = [Block() for _ in range(size)]
        for plane, (start, length) in enumerate(zip(starts, lengths)):
            chunk = self._gamemaps[start : start + 2 * length]
            try:
                words = rlew_expand(carmack_decompress(chunk), self.rlew_tag, size)
            except ValueError as exc:
                raise MapError(f"map error: plane {plane}: {exc}") from exc
            for block, value in zip(blocks, words):
                block[plane] = value
        return RawMap(width, height, blocks)