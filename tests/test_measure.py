import math

import numpy as np
import pytest

from polyrecon.measure import (
    interior_angles,
    polygon_area,
    regular_polygon_angle,
    side_lengths,
    signed_area,
    turn_angle,
)

SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.mark.parametrize('n, expected', [(3, 60.0), (4, 90.0), (5, 108.0), (6, 120.0)])
def test_regular_polygon_angle(n, expected):
    assert math.isclose(regular_polygon_angle(n), expected)


def test_regular_polygon_angle_rejects_empty():
    with pytest.raises(ValueError):
        regular_polygon_angle(0)


def test_turn_angle_range():
    assert math.isclose(turn_angle((0.0, 0.0), (1.0, 0.0), (1.0, 1.0)), 90.0)
    assert math.isclose(turn_angle((0.0, 0.0), (1.0, 0.0), (1.0, -1.0)), 270.0)
    assert math.isclose(turn_angle((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)), 180.0)


def test_square_angles_counter_clockwise():
    assert interior_angles(SQUARE) == pytest.approx([90.0] * 4)


def test_square_angles_clockwise_report_exterior():
    assert interior_angles(SQUARE[::-1]) == pytest.approx([270.0] * 4)


def test_interior_angles_match_turn_angle():
    pts = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (2.0, 1.0), (0.0, 4.0)]

    angles = interior_angles(pts)

    n = len(pts)
    for i in range(n):
        assert math.isclose(angles[i], turn_angle(pts[i - 1], pts[i], pts[(i + 1) % n]), abs_tol=1e-9)
    assert math.isclose(sum(angles), (n - 2) * 180.0, abs_tol=1e-9)


def test_interior_angles_accept_numpy_input():
    assert interior_angles(np.array(SQUARE)) == pytest.approx([90.0] * 4)


def test_signed_area_encodes_winding():
    assert math.isclose(signed_area(SQUARE), 1.0)
    assert math.isclose(signed_area(SQUARE[::-1]), -1.0)
    assert math.isclose(polygon_area(SQUARE[::-1]), 1.0)


def test_signed_area_of_triangle():
    assert math.isclose(signed_area([(0.0, 0.0), (3.0, 0.0), (3.0, 4.0)]), 6.0)


def test_empty_input():
    assert interior_angles([]) == []
    assert signed_area([]) == 0.0
    assert side_lengths([]) == []


def test_side_lengths_include_closing_edge():
    assert side_lengths([(0.0, 0.0), (3.0, 0.0), (3.0, 4.0)]) == pytest.approx([3.0, 4.0, 5.0])
