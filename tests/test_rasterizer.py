import math

import numpy as np
import pytest

from shapes2d.rasterizer import circle_pixels, line_pixels


def assert_valid_line(x0, y0, x1, y1):
    pixels = list(line_pixels(x0, y0, x1, y1))
    dx, dy = x1 - x0, y1 - y0
    assert len(pixels) == max(abs(dx), abs(dy)) + 1
    assert pixels[0] == (x0, y0)
    assert pixels[-1] == (x1, y1)
    for (ax, ay), (bx, by) in zip(pixels, pixels[1:]):
        assert abs(bx - ax) <= 1 and abs(by - ay) <= 1
    # Monotonic along the dominant axis
    axis = 0 if abs(dx) >= abs(dy) else 1
    step = 1 if (dx, dy)[axis] >= 0 else -1
    for a, b in zip(pixels, pixels[1:]):
        assert b[axis] - a[axis] == step


@pytest.mark.parametrize('x0, y0, x1, y1', [
    (0, 0, 99, 99),
    (0, 0, 99, 0),
    (0, 0, 0, 99),
    (99, 99, 0, 0),
    (10, 20, 13, 80),
    (80, 13, 20, 10),
    (5, 50, 95, 45),
    (3, 0, 0, 1),
    (0, 3, 1, 0),
    (0, 0, 2, 2),
    (7, 2, 2, 7),
])
def test_line_properties(x0, y0, x1, y1):
    assert_valid_line(x0, y0, x1, y1)


def test_line_properties_random(rng):
    for _ in range(200):
        x0, y0, x1, y1 = (int(v) for v in rng.integers(0, 100, size=4))
        assert_valid_line(x0, y0, x1, y1)


def test_degenerate_line():
    assert list(line_pixels(4, 7, 4, 7)) == [(4, 7)]


def test_diagonal_line_hits_every_diagonal_pixel():
    assert list(line_pixels(0, 0, 5, 5)) == [(i, i) for i in range(6)]


def test_horizontal_line():
    assert list(line_pixels(3, 1, 0, 1)) == [(3, 1), (2, 1), (1, 1), (0, 1)]


@pytest.mark.parametrize('radius', range(120))
def test_circle_points_near_radius(radius):
    # The 3 - 2r recurrence strays a little past one pixel for some radii
    cx, cy = 150, 150
    for x, y in circle_pixels(cx, cy, radius):
        distance = math.hypot(x - cx, y - cy)
        assert abs(distance - radius) < 1.5


@pytest.mark.parametrize('radius', [1, 4, 9, 25])
def test_circle_is_eightfold_symmetric(radius):
    cx, cy = 30, 40
    pixels = set(circle_pixels(cx, cy, radius))
    for x, y in pixels:
        u, v = x - cx, y - cy
        for su in (1, -1):
            for sv in (1, -1):
                assert (cx + su * u, cy + sv * v) in pixels
                assert (cx + su * v, cy + sv * u) in pixels


def test_circle_covers_axis_extremes():
    pixels = set(circle_pixels(10, 10, 6))
    assert {(16, 10), (4, 10), (10, 16), (10, 4)} <= pixels


def test_zero_radius_circle_is_center():
    pixels = list(circle_pixels(8, 9, 0))
    assert len(pixels) == 8
    assert set(pixels) == {(8, 9)}


def test_negative_radius_circle_is_empty():
    assert list(circle_pixels(8, 9, -3)) == []


def test_circle_pixel_count_grows_with_radius():
    counts = [len(set(circle_pixels(0, 0, r))) for r in (2, 8, 32)]
    assert counts == sorted(counts)
    assert np.all(np.diff(counts) > 0)
