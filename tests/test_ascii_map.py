import pytest

from wolfdata.ascii_map import load_ascii_map, parse_ascii_map
from wolfdata.map_info import MapObject, Wall
from wolfdata.raw_map import MapError

SAMPLE = "5 3\n12345\n6n789\n11111\n"


def test_parse_dimensions_and_start():
    raw = parse_ascii_map(SAMPLE)
    assert (raw.width, raw.height) == (5, 3)
    assert raw.player_pos() == (1, 1)
    assert raw.block(1, 1).object == MapObject.start_position_n
    assert raw.block(1, 1).wall == Wall.nothing


def test_digit_walls():
    raw = parse_ascii_map(SAMPLE)
    row0 = [raw.block(w, 0).wall for w in range(5)]
    assert row0 == [
        Wall.blue_wall,
        Wall.grey_wall_1,
        Wall.wood,
        Wall.steel,
        Wall.red_brick,
    ]
    row1 = [raw.block(w, 1).wall for w in (0, 2, 3, 4)]
    assert row1 == [
        Wall.multicolor_brick,
        Wall.purple,
        Wall.brown_stone_1,
        Wall.landscape,
    ]


@pytest.mark.parametrize(
    ("char", "obj"),
    [
        ("n", MapObject.start_position_n),
        ("s", MapObject.start_position_s),
        ("w", MapObject.start_position_w),
        ("e", MapObject.start_position_e),
    ],
)
def test_start_characters(char, obj):
    raw = parse_ascii_map(f"3 1\n1{char}1\n")
    assert raw.player_pos() == (1, 0)
    assert raw.block(1, 0).object == obj


def test_unknown_characters_are_floor():
    raw = parse_ascii_map("3 1\n.n#\n")
    assert raw.block(0, 0).wall == Wall.nothing
    assert raw.block(2, 0).wall == Wall.nothing
    assert not raw.is_wall(2, 0)


def test_short_and_missing_rows_padded():
    raw = parse_ascii_map("3 3\n1\nn\n")
    assert raw.block(0, 0).wall == Wall.blue_wall
    assert raw.block(2, 0).wall == Wall.nothing
    assert raw.player_pos() == (0, 1)
    assert all(raw.block(w, 2).wall == Wall.nothing for w in range(3))


def test_long_rows_truncated():
    raw = parse_ascii_map("2 2\n1n1\n11\n")
    assert raw.player_pos() == (1, 0)
    assert raw.block(0, 1).wall == Wall.blue_wall


def test_no_start_position():
    with pytest.raises(MapError):
        parse_ascii_map("2 1\n11\n")


def test_two_start_positions():
    with pytest.raises(MapError):
        parse_ascii_map("2 1\nns\n")


def test_missing_header():
    with pytest.raises(MapError):
        parse_ascii_map("n1\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "level.map"
    path.write_text(SAMPLE)
    raw = load_ascii_map(path)
    assert raw.player_pos() == (1, 1)
    assert raw.block(4, 2).wall == Wall.blue_wall


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_ascii_map(tmp_path / "absent.map")