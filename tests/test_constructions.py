import math

import pytest

from polyrecon.constructions import circle_intersections, distance, points_coincide, rotate


def _close(p, q, tol=1e-9):
    return math.isclose(p[0], q[0], abs_tol=tol) and math.isclose(p[1], q[1], abs_tol=tol)


@pytest.mark.parametrize(
    'c1, r1, c2, r2',
    [
        ((0.0, 0.0), 1.0, (5.0, 0.0), 1.0),  # too far apart
        ((0.0, 0.0), 5.0, (1.0, 0.0), 1.0),  # one inside the other
        ((2.0, 3.0), 4.0, (2.0, 3.0), 4.0),  # identical circles
        ((2.0, 3.0), 4.0, (2.0, 3.0), 1.0),  # concentric
    ],
)
def test_no_usable_intersection(c1, r1, c2, r2):
    assert circle_intersections(c1, r1, c2, r2) == []


def test_external_tangency_gives_single_point_on_center_line():
    points = circle_intersections((0.0, 0.0), 1.0, (3.0, 0.0), 2.0)

    assert len(points) == 1
    assert _close(points[0], (1.0, 0.0))


def test_internal_tangency_gives_single_point_at_r1():
    points = circle_intersections((0.0, 0.0), 3.0, (1.0, 0.0), 2.0)

    assert len(points) == 1
    assert _close(points[0], (3.0, 0.0))


def test_tangency_within_tolerance():
    points = circle_intersections((0.0, 0.0), 1.0, (0.0, 2.0 + 5e-7), 1.0)

    assert len(points) == 1
    assert math.isclose(distance((0.0, 0.0), points[0]), 1.0, abs_tol=1e-9)


def test_generic_case_orders_right_then_left():
    points = circle_intersections((0.0, 0.0), 5.0, (6.0, 0.0), 5.0)

    assert len(points) == 2
    assert _close(points[0], (3.0, -4.0))
    assert _close(points[1], (3.0, 4.0))


def test_generic_case_points_satisfy_both_radii():
    c1, r1 = (1.0, -2.0), 3.0
    c2, r2 = (4.5, 1.5), 2.2

    points = circle_intersections(c1, r1, c2, r2)

    assert len(points) == 2
    for point in points:
        assert math.isclose(distance(c1, point), r1, abs_tol=1e-6)
        assert math.isclose(distance(c2, point), r2, abs_tol=1e-6)
    # mirror images across the center line share the chord midpoint on it
    mid = ((points[0][0] + points[1][0]) / 2, (points[0][1] + points[1][1]) / 2)
    cross = (c2[0] - c1[0]) * (mid[1] - c1[1]) - (c2[1] - c1[1]) * (mid[0] - c1[0])
    assert math.isclose(cross, 0.0, abs_tol=1e-9)


def test_large_radii_stay_finite():
    points = circle_intersections((0.0, 0.0), 1e160, (1e160, 0.0), 1e160)

    assert len(points) == 2
    for point in points:
        assert all(math.isfinite(coord) for coord in point)
    assert math.isclose(points[1][0], 0.5e160)
    assert math.isclose(points[1][1], math.sqrt(3.0) / 2.0 * 1e160)


def test_rotate_quarter_turn():
    assert _close(rotate((1.0, 0.0), 90.0), (0.0, 1.0))
    assert _close(rotate((1.0, 0.0), -90.0), (0.0, -1.0))
    assert _close(rotate((2.0, 1.0), 180.0), (-2.0, -1.0))


def test_points_coincide_uses_tolerance():
    assert points_coincide((1.0, 1.0), (1.0 + 1e-8, 1.0))
    assert not points_coincide((1.0, 1.0), (1.0 + 1e-3, 1.0))
