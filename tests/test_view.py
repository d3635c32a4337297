import pytest

from tikzkit.geometry import GRID_N, GRID_SEP, Rect
from tikzkit.view import GridLines, Modifier, TikzView, WheelOutcome

MAJOR = GRID_SEP * GRID_N
AREA = Rect(-100, -100, 200, 200)


def test_default_scale_and_zoom_round_trip():
    view = TikzView()
    assert view.scale == 1.0
    view.zoom_in()
    assert view.scale > 1.0
    view.zoom_out()
    assert view.scale == pytest.approx(1.0)


def test_minor_lines_skip_major_positions():
    grid = TikzView().grid(AREA)
    assert grid.minor_vertical
    assert all(x % MAJOR != 0 for x in grid.minor_vertical)
    assert all(AREA.left < x < AREA.right for x in grid.minor_vertical)
    assert all(AREA.top < y < AREA.bottom for y in grid.minor_horizontal)
    assert 0 not in grid.minor_vertical


def test_major_lines():
    grid = TikzView().grid(AREA)
    assert set(grid.major_vertical) == {-80, -40, 40, 80}
    assert grid.major_horizontal == grid.major_vertical
    assert all(x % MAJOR == 0 for x in grid.major_vertical)


def test_minor_and_major_cover_every_step():
    grid = TikzView().grid(AREA)
    combined = set(grid.minor_vertical) | set(grid.major_vertical)
    assert all(x % GRID_SEP == 0 for x in combined)
    assert len(combined) == len(grid.minor_vertical) + len(grid.major_vertical)


def test_minor_lines_hidden_when_zoomed_out():
    view = TikzView()
    for _ in range(3):
        view.zoom_out()
    assert view.grid(AREA).minor_vertical
    view.zoom_out()
    grid = view.grid(AREA)
    assert grid.minor_vertical == () and grid.minor_horizontal == ()
    assert grid.major_vertical


def test_empty_rect_has_no_lines():
    grid = TikzView().grid(Rect(0, 0, 0, 0))
    assert grid == GridLines((), (), (), ())


def test_plain_wheel_scrolls():
    view = TikzView()
    assert view.wheel(Modifier.NONE, 120, False) == WheelOutcome(scroll=True)
    assert view.scale == 1.0


def test_plain_wheel_with_shift_to_scroll_does_nothing():
    assert TikzView().wheel(Modifier.NONE, 120, True) == WheelOutcome()


def test_control_wheel_zooms():
    view = TikzView()
    assert view.wheel(Modifier.CONTROL, 120, False).zoom == 1
    assert view.scale > 1.0
    assert view.wheel(Modifier.CONTROL, -120, False).zoom == -1
    assert view.scale == pytest.approx(1.0)


def test_control_wheel_without_delta():
    view = TikzView()
    assert view.wheel(Modifier.CONTROL, 0, False) == WheelOutcome()
    assert view.scale == 1.0


def test_shift_wheel_scrolls_horizontally():
    outcome = TikzView().wheel(Modifier.SHIFT, 120, False)
    assert outcome == WheelOutcome(horizontal_scroll=-120)


def test_shift_wheel_with_shift_to_scroll_scrolls_vertically():
    outcome = TikzView().wheel(Modifier.SHIFT, 120, True)
    assert outcome == WheelOutcome(scroll=True)


def test_control_beats_shift():
    view = TikzView()
    outcome = view.wheel(Modifier.CONTROL | Modifier.SHIFT, -120, False)
    assert outcome.zoom == -1
    assert outcome.horizontal_scroll == 0