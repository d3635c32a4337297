"""Conversion between TikZ coordinates and screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]

# Pixels between (0,0) and (1,0) at 100% zoom; divisible by 8 to keep grid snapping exact.
GLOBAL_SCALE = 40
GLOBAL_SCALEF = 40.0
GLOBAL_SCALEF_INV = 0.025
GRID_N = 4
GRID_SEP = 10
GRID_SEPF = 10.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner (x, y) and its size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Rect":
        """Build the rectangle spanned from ``p1`` to ``p2``."""
        return cls(p1[0], p1[1], p2[0] - p1[0], p2[1] - p1[1])

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def to_screen(point: Point) -> Point:
    """Map a TikZ point to screen space (y axis flipped, scaled up)."""
    x, y = point
    return (x * GLOBAL_SCALEF, -y * GLOBAL_SCALEF)


def from_screen(point: Point) -> Point:
    """Map a screen point back to TikZ space."""
    x, y = point
    return (x * GLOBAL_SCALEF_INV, -y * GLOBAL_SCALEF_INV)


def rect_to_screen(rect: Rect) -> Rect:
    return Rect(
        rect.x * GLOBAL_SCALEF,
        -(rect.y + rect.height) * GLOBAL_SCALEF,
        rect.width * GLOBAL_SCALEF,
        rect.height * GLOBAL_SCALEF,
    )


def rect_from_screen(rect: Rect) -> Rect:
    return Rect(
        rect.x * GLOBAL_SCALEF_INV,
        -(rect.y + rect.height) * GLOBAL_SCALEF_INV,
        rect.width * GLOBAL_SCALEF_INV,
        rect.height * GLOBAL_SCALEF_INV,
    )