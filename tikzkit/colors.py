"""The xcolor named colours and conversion between colours and TikZ colour names."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for value in (self.red, self.green, self.blue):
            if not 0 <= value <= 255:
                raise ValueError(f"colour component out of range: {value}")

    @classmethod
    def from_rgb_f(cls, r: float, g: float, b: float) -> "Color":
        """Build a colour from components in the range [0, 1]."""

        def scale(v: float) -> int:
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"colour component out of range: {v}")
            return math.floor(v * 255 + 0.5)

        return cls(scale(r), scale(g), scale(b))


_NAMED_COLORS: tuple[tuple[str, Color], ...] = (
    ("black", Color.from_rgb_f(0, 0, 0)),
    ("darkgray", Color.from_rgb_f(0.25, 0.25, 0.25)),
    ("gray", Color.from_rgb_f(0.5, 0.5, 0.5)),
    ("lightgray", Color.from_rgb_f(0.75, 0.75, 0.75)),
    ("white", Color.from_rgb_f(1, 1, 1)),
    ("red", Color.from_rgb_f(1, 0, 0)),
    ("orange", Color.from_rgb_f(1, 0.5, 0)),
    ("yellow", Color.from_rgb_f(1, 1, 0)),
    ("green", Color.from_rgb_f(0, 1, 0)),
    ("blue", Color.from_rgb_f(0, 0, 1)),
    ("purple", Color.from_rgb_f(0.75, 0, 0.25)),
    ("brown", Color.from_rgb_f(0.75, 0.5, 0.25)),
    ("olive", Color.from_rgb_f(0.5, 0.5, 0)),
    ("lime", Color.from_rgb_f(0.75, 1, 0)),
    ("cyan", Color.from_rgb_f(0, 1, 1)),
    ("teal", Color.from_rgb_f(0, 0.5, 0.5)),
    ("magenta", Color.from_rgb_f(1, 0, 1)),
    ("violet", Color.from_rgb_f(0.5, 0, 0.5)),
    ("pink", Color.from_rgb_f(1, 0.75, 0.75)),
)

COLOR_NAMES: tuple[str, ...] = tuple(name for name, _ in _NAMED_COLORS)

_RGB_PATTERN = re.compile(
    r"^rgb\s*,\s*255\s*:\s*"
    r"red\s*,\s*([0-9]+)\s*;\s*"
    r"green\s*,\s*([0-9]+)\s*;\s*"
    r"blue\s*,\s*([0-9]+)\s*$"
)

# Column layout of the 48-slot colour picker palette: (first slot, first colour index, count).
_DIALOG_COLUMNS = ((0, 0, 5), (6, 5, 6), (12, 11, 5), (18, 16, 3))
_DIALOG_SIZE = 48


def color_by_index(i: int) -> Color:
    """Return the i-th named colour."""
    if i < 0:
        raise IndexError(f"colour index out of range: {i}")
    return _NAMED_COLORS[i][1]


def color_by_name(name: str) -> Color | None:
    """Look up a named colour or parse ``rgb,255: red,R; green,G; blue,B``.

    Returns None if the name is not recognised.
    """
    for known, color in _NAMED_COLORS:
        if known == name:
            return color
    m = _RGB_PATTERN.match(name)
    if m is None:
        return None
    components = [int(g) for g in m.groups()]
    if any(c > 255 for c in components):
        return None
    return Color(*components)


def name_for_color(color: Color) -> str:
    """Give the xcolor name of a colour, or a TikZ-readable RGB specification."""
    for name, known in _NAMED_COLORS:
        if known == color:
            return name
    return f"rgb,255: red,{color.red}; green,{color.green}; blue,{color.blue}"


def standard_dialog_colors() -> tuple[Color, ...]:
    """The 48 standard colours for a colour picker, grouped into columns of named colours."""
    slots = [Color(255, 255, 255)] * _DIALOG_SIZE
    for start, first, count in _DIALOG_COLUMNS:
        for offset in range(count):
            slots[start + offset] = _NAMED_COLORS[first + offset][1]
    return tuple(slots)