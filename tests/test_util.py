import math

import pytest

from tikzkit.util import (
    almost_equal,
    almost_zero,
    bezier_interpolate,
    bezier_interpolate_full,
    degrees_to_radians,
    float_to_string,
    normalise_angle_deg,
    normalise_angle_rad,
    radians_to_degrees,
    replace_tex_constants,
    round_to_nearest,
)


@pytest.mark.parametrize("c", [(0.0, 1.0, 2.0, 3.0), (-4.0, 7.5, 2.0, 9.0)])
def test_bezier_endpoints(c):
    assert bezier_interpolate(0.0, *c) == pytest.approx(c[0])
    assert bezier_interpolate(1.0, *c) == pytest.approx(c[3])


@pytest.mark.parametrize("t", [0.0, 0.1, 0.33, 0.5, 0.9])
def test_bezier_constant_curve_and_reversal(t):
    assert bezier_interpolate(t, 2.5, 2.5, 2.5, 2.5) == pytest.approx(2.5)
    assert bezier_interpolate(t, 1.0, 4.0, -2.0, 6.0) == pytest.approx(
        bezier_interpolate(1 - t, 6.0, -2.0, 4.0, 1.0)
    )


def test_bezier_full_matches_components():
    pts = [(0.0, 1.0), (2.0, 3.0), (-1.0, 5.0), (4.0, -2.0)]
    x, y = bezier_interpolate_full(0.3, *pts)
    assert x == pytest.approx(bezier_interpolate(0.3, *(p[0] for p in pts)))
    assert y == pytest.approx(bezier_interpolate(0.3, *(p[1] for p in pts)))


def test_round_to_nearest_zero_step_is_identity():
    assert round_to_nearest(0.0, 3.7) == 3.7


@pytest.mark.parametrize("val", [0.13, -0.62, 1.3, 7.88])
def test_round_to_nearest_gives_close_multiple(val):
    step = 0.25
    r = round_to_nearest(step, val)
    assert almost_zero(r / step - round(r / step))
    assert abs(r - val) <= step / 2 + 1e-12


def test_round_to_nearest_halves_go_away_from_zero():
    assert round_to_nearest(1.0, 2.5) == 3.0
    assert round_to_nearest(1.0, -2.5) == -3.0


def test_angle_conversions():
    assert degrees_to_radians(180) == pytest.approx(math.pi)
    assert radians_to_degrees(math.pi) == pytest.approx(180)
    for d in (-270.0, 15.0, 90.0, 720.0):
        assert radians_to_degrees(degrees_to_radians(d)) == pytest.approx(d)


def test_normalise_angle_deg_boundaries():
    assert normalise_angle_deg(180) == 180
    assert normalise_angle_deg(-180) == 180


@pytest.mark.parametrize("d", range(-1000, 1000, 37))
def test_normalise_angle_deg_range(d):
    r = normalise_angle_deg(d)
    assert -180 < r <= 180
    assert (r - d) % 360 == 0


@pytest.mark.parametrize("r", [-10.0, -math.pi, -1.0, 0.0, 2.0, math.pi, 9.5])
def test_normalise_angle_rad_range(r):
    n = normalise_angle_rad(r)
    assert -math.pi < n <= math.pi
    k = (n - r) / (2 * math.pi)
    assert k == pytest.approx(round(k))


def test_almost_zero_and_equal():
    assert almost_zero(0.000001)
    assert almost_zero(-0.000001)
    assert not almost_zero(2e-6)
    assert almost_equal(1.0, 1.0 + 1e-7)
    assert not almost_equal(1.0, 1.1)


def test_float_to_string():
    assert float_to_string(1e-7) == "0"
    assert float_to_string(-0.75) == "-0.75"
    assert float_to_string(1.0) == "1"
    assert float_to_string(-1.5) == "-1.5"


def test_replace_tex_constants():
    assert replace_tex_constants("$\\alpha$") == "\u03b1"
    assert replace_tex_constants("\\Omega") == "\u03a9"
    assert replace_tex_constants("\\Large\\beta") == "\u03b2"
    assert replace_tex_constants("$\\pi") == "$\u03c0"
    assert replace_tex_constants("plain") == "plain"