"""View state for the diagram canvas: zoom level, background grid and wheel handling."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tikzkit.geometry import GRID_N, GRID_SEP, Rect

_ZOOM_IN_FACTOR = 1.6
_ZOOM_OUT_FACTOR = 0.625
_MINOR_GRID_MIN_SCALE = 0.2


class Modifier(enum.Flag):
    """Keyboard modifiers held during an input event."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    META = enum.auto()


@dataclass(frozen=True)
class GridLines:
    """Screen positions of the background grid lines; the axes lie at 0."""

    minor_vertical: tuple[int, ...]
    minor_horizontal: tuple[int, ...]
    major_vertical: tuple[int, ...]
    major_horizontal: tuple[int, ...]


@dataclass(frozen=True)
class WheelOutcome:
    """What a wheel event does to the view.

    ``scroll`` means the default vertical scrolling applies, ``zoom`` is 1 for
    a zoom in, -1 for a zoom out and 0 otherwise, and ``horizontal_scroll`` is
    the amount to add to the horizontal scroll position.
    """

    scroll: bool = False
    zoom: int = 0
    horizontal_scroll: int = 0


def _lines(low: float, high: float, step: int, skip_major: bool) -> tuple[int, ...]:
    major = GRID_SEP * GRID_N
    below = range(-step, -step + (int(low) - 1 - step), -step)
    positions = [p for p in _walk(-step, -step, lambda p: p > low)]
    positions += [p for p in _walk(step, step, lambda p: p < high)]
    del below
    if skip_major:
        positions = [p for p in positions if p % major != 0]
    return tuple(positions)


def _walk(start: int, step: int, keep):
    position = start
    while keep(position):
        yield position
        position += step


class TikzView:
    """Zoom level and grid layout of a canvas showing a diagram."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale

    def zoom_in(self) -> None:
        self.scale *= _ZOOM_IN_FACTOR

    def zoom_out(self) -> None:
        self.scale *= _ZOOM_OUT_FACTOR

    def grid(self, rect: Rect) -> GridLines:
        """Grid lines inside ``rect``; minor lines are left out when zoomed far out."""
        major_step = GRID_SEP * GRID_N
        if self.scale > _MINOR_GRID_MIN_SCALE:
            minor_vertical = _lines(rect.left, rect.right, GRID_SEP, True)
            minor_horizontal = _lines(rect.top, rect.bottom, GRID_SEP, True)
        else:
            minor_vertical = minor_horizontal = ()
        return GridLines(
            minor_vertical=minor_vertical,
            minor_horizontal=minor_horizontal,
            major_vertical=_lines(rect.left, rect.right, major_step, False),
            major_horizontal=_lines(rect.top, rect.bottom, major_step, False),
        )

    def wheel(self, modifiers: Modifier, delta_y: int, shift_to_scroll: bool) -> WheelOutcome:
        """Handle a wheel event, zooming the view where the event asks for it."""
        scroll = (not shift_to_scroll and modifiers == Modifier.NONE) or (
            shift_to_scroll and modifiers == Modifier.SHIFT
        )
        if scroll:
            modifiers = Modifier.NONE

        if Modifier.CONTROL in modifiers:
            if delta_y > 0:
                self.zoom_in()
                return WheelOutcome(scroll=scroll, zoom=1)
            if delta_y < 0:
                self.zoom_out()
                return WheelOutcome(scroll=scroll, zoom=-1)
            return WheelOutcome(scroll=scroll)
        if Modifier.SHIFT in modifiers:
            return WheelOutcome(scroll=scroll, horizontal_scroll=-delta_y)
        return WheelOutcome(scroll=scroll)