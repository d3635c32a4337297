"""Numeric helpers for curves, angles and rounding, plus TeX symbol substitution."""

from __future__ import annotations

import math

Point = tuple[float, float]

_EPSILON = 0.000001

_TEX_CONSTANTS: tuple[tuple[str, str], ...] = (
    ("\\alpha", "\u03b1"), ("\\beta", "\u03b2"), ("\\gamma", "\u03b3"),
    ("\\delta", "\u03b4"), ("\\epsilon", "\u03b5"), ("\\zeta", "\u03b6"),
    ("\\eta", "\u03b7"), ("\\theta", "\u03b8"), ("\\iota", "\u03b9"),
    ("\\kappa", "\u03ba"), ("\\lambda", "\u03bb"), ("\\mu", "\u03bc"),
    ("\\nu", "\u03bd"), ("\\xi", "\u03be"), ("\\pi", "\u03c0"),
    ("\\rho", "\u03c1"), ("\\sigma", "\u03c3"), ("\\tau", "\u03c4"),
    ("\\upsilon", "\u03c5"), ("\\phi", "\u03c6"), ("\\chi", "\u03c7"),
    ("\\psi", "\u03c8"), ("\\omega", "\u03c9"),
    ("\\Gamma", "\u0393"), ("\\Delta", "\u0394"), ("\\Theta", "\u0398"),
    ("\\Lambda", "\u039b"), ("\\Xi", "\u039e"), ("\\Pi", "\u03a0"),
    ("\\Sigma", "\u03a3"), ("\\Upsilon", "\u03a5"), ("\\Phi", "\u03a6"),
    ("\\Psi", "\u03a8"), ("\\Omega", "\u03a9"),
    ("\\pm", "\u00b1"), ("\\to", "\u2192"), ("\\Rightarrow", "\u21d2"),
    ("\\Leftrightarrow", "\u21d4"), ("\\forall", "\u2200"),
    ("\\partial", "\u2202"), ("\\exists", "\u2203"), ("\\emptyset", "\u2205"),
    ("\\nabla", "\u2207"), ("\\in", "\u2208"), ("\\notin", "\u2209"),
    ("\\prod", "\u220f"), ("\\sum", "\u2211"), ("\\surd", "\u221a"),
    ("\\infty", "\u221e"), ("\\wedge", "\u2227"), ("\\vee", "\u2228"),
    ("\\cap", "\u2229"), ("\\cup", "\u222a"), ("\\int", "\u222b"),
    ("\\approx", "\u2248"), ("\\neq", "\u2260"), ("\\equiv", "\u2261"),
    ("\\leq", "\u2264"), ("\\geq", "\u2265"), ("\\subset", "\u2282"),
    ("\\supset", "\u2283"),
    ("\\ldots", "\u2026"), ("\\vdots", "\u22ee"), ("\\cdots", "\u22ef"),
    ("\\ddots", "\u22f1"), ("\\iddots", "\u22f0"), ("\\cdot", "\u22c5"),
)

_TEX_MODIFIERS: tuple[str, ...] = (
    "\\tiny", "\\scriptsize", "\\footnotesize", "\\small", "\\normalsize",
    "\\large", "\\Large", "\\LARGE", "\\huge", "\\Huge",
)


def bezier_interpolate(dist: float, c0: float, c1: float, c2: float, c3: float) -> float:
    """Evaluate a one-dimensional cubic Bezier curve at parameter ``dist``."""
    distp = 1 - dist
    return (
        distp * distp * distp * c0
        + 3 * (distp * distp) * dist * c1
        + 3 * (dist * dist) * distp * c2
        + dist * dist * dist * c3
    )


def bezier_interpolate_full(dist: float, c0: Point, c1: Point, c2: Point, c3: Point) -> Point:
    """Evaluate a planar cubic Bezier curve given by four (x, y) control points."""
    return (
        bezier_interpolate(dist, c0[0], c1[0], c2[0], c3[0]),
        bezier_interpolate(dist, c0[1], c1[1], c2[1], c3[1]),
    )


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def round_to_nearest(step_size: float, val: float) -> float:
    """Round ``val`` to the nearest multiple of ``step_size`` (no-op for a zero step)."""
    if step_size == 0.0:
        return val
    return _round_half_away(val / step_size) * step_size


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def normalise_angle_deg(degrees: int) -> int:
    """Bring an integer angle into the range (-180, 180]."""
    result = degrees % 360
    if result > 180:
        result -= 360
    return result


def normalise_angle_rad(rads: float) -> float:
    """Bring an angle in radians into the range (-pi, pi]."""
    while rads > math.pi:
        rads -= 2 * math.pi
    while rads <= -math.pi:
        rads += 2 * math.pi
    return rads


def almost_zero(f: float) -> bool:
    return -_EPSILON <= f <= _EPSILON


def almost_equal(f1: float, f2: float) -> bool:
    return almost_zero(f1 - f2)


def float_to_string(f: float) -> str:
    """Format a number compactly, squashing values very close to zero to ``"0"``."""
    if almost_zero(f):
        return "0"
    return f"{f:.6g}"


def replace_tex_constants(s: str) -> str:
    """Replace TeX symbol macros by their Unicode characters for on-screen labels.

    Size modifiers are dropped, and a label wrapped in ``$...$`` loses the dollars.
    """
    for name, code in _TEX_CONSTANTS:
        s = s.replace(name, code)
    for name in _TEX_MODIFIERS:
        s = s.replace(name, "")
    if s.startswith("$") and s.endswith("$"):
        s = s[1:-1]
    return s