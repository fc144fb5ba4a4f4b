import pytest

from wolfdata.map_info import MapObject, Wall
from wolfdata.raw_map import Block, MapError, RawMap


def make_blocks(walls, start=(1, 1), start_object=MapObject.start_position_e):
    blocks = []
    for h, row in enumerate(walls):
        for w, wall in enumerate(row):
            obj = start_object if (w, h) == start else MapObject.nothing
            blocks.append(Block(wall=wall, object=obj))
    return blocks


B = Wall.blue_wall
N = Wall.nothing


def boxed():
    return [
        [B, B, B, B],
        [B, N, N, B],
        [B, B, B, B],
    ]


def test_dimensions_and_player_pos():
    raw = RawMap(4, 3, make_blocks(boxed(), start=(2, 1)))
    assert raw.width == 4
    assert raw.height == 3
    assert raw.player_pos() == (2, 1)


def test_block_lookup_is_row_major():
    walls = boxed()
    walls[2][3] = Wall.wood
    raw = RawMap(4, 3, make_blocks(walls))
    assert raw.block(3, 2).wall == Wall.wood
    assert raw.block(2, 1).wall == Wall.nothing


def test_block_out_of_range():
    raw = RawMap(4, 3, make_blocks(boxed()))
    with pytest.raises(IndexError):
        raw.block(4, 0)
    with pytest.raises(IndexError):
        raw.block(0, 3)


@pytest.mark.parametrize(
    "door",
    [
        Wall.door_vertical,
        Wall.door_horizontal,
        Wall.door_vertical_gold_key,
        Wall.door_horizontal_gold_key,
        Wall.door_vertical_silver_key,
        Wall.door_horizontal_silver_key,
        Wall.elevator_door_vertical,
        Wall.elevator_door_horizontal,
        Wall.floor_deaf_guard,
    ],
)
def test_doors_and_ambush_tiles_are_cleared(door):
    walls = boxed()
    walls[1][2] = door
    raw = RawMap(4, 3, make_blocks(walls))
    assert raw.block(2, 1).wall == Wall.nothing
    assert not raw.is_wall(2, 1)


def test_is_wall_range():
    walls = [[Wall.steel, Wall.elevator_to_secret_floor, Wall.floor_6c, N]]
    raw = RawMap(4, 1, make_blocks(walls, start=(3, 0)))
    assert raw.is_wall(0, 0)
    assert not raw.is_wall(1, 0)
    assert not raw.is_wall(2, 0)
    assert not raw.is_wall(3, 0)


def test_neighbour_walls():
    raw = RawMap(4, 3, make_blocks(boxed()))
    assert raw.is_wall_on_n(1, 1)
    assert raw.is_wall_on_s(1, 1)
    assert raw.is_wall_on_w(1, 1)
    assert not raw.is_wall_on_e(1, 1)
    assert not raw.is_wall_on_w(2, 1)
    assert raw.is_wall_on_e(2, 1)


def test_map_edges_count_as_walls():
    walls = [[N, N], [N, N]]
    raw = RawMap(2, 2, make_blocks(walls, start=(0, 0)))
    assert raw.is_wall_on_n(0, 0)
    assert raw.is_wall_on_w(0, 0)
    assert not raw.is_wall_on_s(0, 0)
    assert not raw.is_wall_on_e(0, 0)
    assert raw.is_wall_on_s(1, 1)
    assert raw.is_wall_on_e(1, 1)


def test_no_player_position():
    blocks = [Block(wall=Wall.nothing) for _ in range(4)]
    with pytest.raises(MapError, match="no player position"):
        RawMap(2, 2, blocks)


def test_two_player_positions():
    blocks = [
        Block(object=MapObject.start_position_n),
        Block(object=MapObject.start_position_s),
    ]
    with pytest.raises(MapError, match="more than one player position"):
        RawMap(2, 1, blocks)


def test_wrong_block_count():
    with pytest.raises(MapError):
        RawMap(2, 2, [Block(object=MapObject.start_position_n)])


def test_map_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        RawMap(1, 1, [Block()])


def test_block_indexing_reads_planes():
    block = Block(wall=Wall.wood, object=MapObject.barrel, extra=0)
    assert block[0] == Wall.wood
    assert block[1] == MapObject.barrel
    assert block[2] == 0
    assert block[3] == 0


def test_block_indexing_writes_planes():
    block = Block()
    block[0] = Wall.steel
    block[1] = MapObject.table
    block[2] = 7
    block[5] = 9
    assert block.wall == Wall.steel
    assert block.object == MapObject.table
    assert block.extra == 7
    assert block[5] == 0