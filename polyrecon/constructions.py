"""Analytic constructions used while placing polygon vertices.

These helpers only rely on basic Python math so they stay cheap inside the
vertex walk.  The circle intersection returns an empty list when no usable
intersection exists instead of raising: an empty result is an expected
outcome for infeasible side lengths, not an error.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .config import EPSILON
from .types import Vertex

Vector = Vertex


def _sub(a: Sequence[float], b: Sequence[float]) -> Vector:
    return Vertex(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def _add(a: Sequence[float], b: Sequence[float]) -> Vertex:
    return Vertex(float(a[0]) + float(b[0]), float(a[1]) + float(b[1]))


def _scale(vec: Sequence[float], factor: float) -> Vector:
    return Vertex(float(vec[0]) * factor, float(vec[1]) * factor)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return float(a[0]) * float(b[0]) + float(a[1]) * float(b[1])


def _cross(a: Sequence[float], b: Sequence[float]) -> float:
    return float(a[0]) * float(b[1]) - float(a[1]) * float(b[0])


def _norm(vec: Sequence[float]) -> float:
    return math.hypot(float(vec[0]), float(vec[1]))


def distance(A: Sequence[float], B: Sequence[float]) -> float:
    """Return the Euclidean distance between ``A`` and ``B``."""

    return _norm(_sub(B, A))


def points_coincide(A: Sequence[float], B: Sequence[float], eps: float = EPSILON) -> bool:
    return abs(float(A[0]) - float(B[0])) < eps and abs(float(A[1]) - float(B[1])) < eps


def rotate(vec: Sequence[float], degrees: float) -> Vector:
    """Rotate ``vec`` counter-clockwise (y axis up) by ``degrees``."""

    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x, y = float(vec[0]), float(vec[1])
    return Vertex(x * cos_t - y * sin_t, x * sin_t + y * cos_t)


def circle_intersections(
    C1: Sequence[float],
    r1: float,
    C2: Sequence[float],
    r2: float,
    *,
    eps: float = EPSILON,
) -> List[Vertex]:
    """Return the intersection points of circles ``(C1, r1)`` and ``(C2, r2)``.

    The result holds zero, one (tangency) or two points.  Concentric circles
    give no points: either they never meet or they coincide, and a whole
    circle of solutions is not usable.  With two points the first one lies
    to the right of the directed line ``C1 -> C2`` and the second to its left.
    """

    c1 = Vertex(float(C1[0]), float(C1[1]))
    dc = _sub(C2, C1)
    d = _norm(dc)
    if abs(r1 - r2) > d + eps or d > r1 + r2 + eps or d < eps:
        return []
    if abs(abs(r1 - r2) - d) < eps or abs(d - r1 - r2) < eps:
        return [_add(c1, _scale(dc, r1 / d))]
    # foot of the common chord on the center line, then half-chord height
    # no squared magnitudes: large finite radii must not overflow
    a = (d + (r1 - r2) * (r1 + r2) / d) / 2.0
    ratio = a / r1 if r1 > 0.0 else 1.0
    h = r1 * math.sqrt(max((1.0 - ratio) * (1.0 + ratio), 0.0))
    base = _add(c1, _scale(dc, a / d))
    vx, vy = _scale(dc, h / d)
    return [
        Vertex(base.x + vy, base.y - vx),
        Vertex(base.x - vy, base.y + vx),
    ]


__all__ = [
    "Vector",
    "circle_intersections",
    "distance",
    "points_coincide",
    "rotate",
]
