import math

import pytest

from wolfdata.ascii_map import parse_ascii_map
from wolfdata.map_renderer import MapRenderer
from wolfdata.player_state import Key, PlayerState
from wolfdata.vector_map import VectorMap

# 4 x 3 map: diagonal is 5, so a 100 x 100 screen gives a scale of 20
MAP_TEXT = "4 3\n1111\n1e 1\n1111\n"
SCALE = 20.0


class RecordingRenderer:
    def __init__(self):
        self.ops = []

    def set_draw_color(self, r, g, b, a):
        self.ops.append(("color", (r, g, b, a)))

    def draw_line(self, x1, y1, x2, y2):
        self.ops.append(("line", (x1, y1, x2, y2)))

    @property
    def lines(self):
        return [value for kind, value in self.ops if kind == "line"]

    @property
    def colors(self):
        return [value for kind, value in self.ops if kind == "color"]


def _setup(player_oriented, rot_speed=1.0, width=100, height=100):
    raw_map = parse_ascii_map(MAP_TEXT)
    vector_map = VectorMap(raw_map)
    player = PlayerState(raw_map, rot_speed=rot_speed)
    renderer = MapRenderer(vector_map, player, 60, player_oriented)
    recorder = RecordingRenderer()
    renderer.set_renderer(recorder)
    renderer.resize(width, height)
    return renderer, recorder, vector_map, player


def _length(line):
    x1, y1, x2, y2 = line
    return math.hypot(x2 - x1, y2 - y1)


@pytest.mark.parametrize("player_oriented", [False, True])
def test_draw_calls_and_colors(player_oriented):
    renderer, recorder, vector_map, _ = _setup(player_oriented)
    renderer.redraw()
    n = len(vector_map.vectors)
    assert len(recorder.lines) == n + 3
    assert recorder.colors[:n] == [c + (255,) for c in vector_map.colors]
    assert recorder.colors[n:] == [(0, 0, 0, 255), (128, 0, 0, 255)]


@pytest.mark.parametrize("player_oriented", [False, True])
def test_segments_scaled_to_screen(player_oriented):
    renderer, recorder, vector_map, _ = _setup(player_oriented)
    renderer.redraw()
    for line in recorder.lines[: len(vector_map.vectors)]:
        assert _length(line) == pytest.approx(SCALE)


def test_map_oriented_fits_screen():
    renderer, recorder, vector_map, _ = _setup(False)
    renderer.redraw()
    for x1, y1, x2, y2 in recorder.lines[: len(vector_map.vectors)]:
        assert all(0.0 <= v <= 100.0 for v in (x1, y1, x2, y2))


def test_map_oriented_player_position():
    renderer, recorder, _, _ = _setup(False)
    renderer.redraw()
    x, y = recorder.lines[-1][:2]
    assert (x, y) == pytest.approx((40.0, 50.0))


def test_map_oriented_front_follows_orientation():
    renderer, recorder, _, player = _setup(False, rot_speed=math.pi / 2.0)
    player.set_keyboard_state({Key.RIGHT})
    player.animate(1000)
    renderer.redraw()
    x1, y1, x2, y2 = recorder.lines[-1]
    assert x2 - x1 == pytest.approx(0.0, abs=1e-9)
    assert y2 - y1 == pytest.approx(5.0 * SCALE)


def test_player_oriented_player_at_center_facing_up():
    renderer, recorder, _, _ = _setup(True, width=200, height=100)
    renderer.redraw()
    left, right, front = recorder.lines[-3:]
    for line in (left, right, front):
        assert line[:2] == pytest.approx((100.0, 50.0))
    assert front[2] == pytest.approx(100.0)
    assert front[3] < 50.0
    assert left[2] + right[2] == pytest.approx(200.0)
    assert left[3] == pytest.approx(right[3])
    assert _length(front) == pytest.approx(5.0 * SCALE)


def test_player_oriented_distances_preserved():
    renderer, recorder, vector_map, player = _setup(True)
    renderer.redraw()
    px, py = player.pos
    for (start, end), line in zip(vector_map.vectors, recorder.lines):
        for (mx, my), (sx, sy) in ((start, line[:2]), (end, line[2:])):
            expected = SCALE * math.hypot(mx - px, my - py)
            assert math.hypot(sx - 50.0, sy - 50.0) == pytest.approx(expected)


def test_redraw_without_renderer():
    renderer, _, _, _ = _setup(False)
    renderer.set_renderer(None)
    with pytest.raises(RuntimeError):
        renderer.redraw()