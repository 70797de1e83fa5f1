"""Point/segment and segment/segment predicates for self-crossing checks."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .config import EPSILON
from .constructions import _cross, _dot, _sub, points_coincide
from .types import Edge, Vertex

logger = logging.getLogger(__name__)


def point_on_segment(point: Sequence[float], edge: Edge, *, eps: float = EPSILON) -> bool:
    """Return ``True`` when ``point`` lies on the closed segment ``edge``."""

    start, end = edge
    sp = _sub(point, start)
    se = _sub(end, start)
    if abs(_cross(sp, se)) >= eps:
        return False
    denom = _dot(se, se)
    if denom == 0.0:
        return points_coincide(point, start, eps)
    t = _dot(sp, se) / denom
    return 0.0 <= t <= 1.0


def _slope(edge: Edge) -> float:
    (x1, y1), (x2, y2) = edge
    return (y2 - y1) / (x2 - x1)


def _check_crossing(x: float, y: float, edge_a: Edge, edge_b: Edge, eps: float) -> bool:
    candidate = Vertex(x, y)
    return point_on_segment(candidate, edge_a, eps=eps) and point_on_segment(candidate, edge_b, eps=eps)


def _is_vertical(edge: Edge, eps: float) -> bool:
    # walk rounding leaves nominally vertical edges a few ulps off
    (x1, _), (x2, _) = edge
    return abs(x2 - x1) < eps


def segments_intersect(edge_a: Edge, edge_b: Edge, *, eps: float = EPSILON) -> bool:
    """Return ``True`` when two non-parallel segments share a point.

    Parallel segments, including two vertical ones, never count as
    intersecting even when they overlap.  Edges whose x extent is below
    ``eps`` are treated as vertical.
    """

    start_a, end_a = edge_a
    start_b, end_b = edge_b
    vertical_a = _is_vertical(edge_a, eps)
    vertical_b = _is_vertical(edge_b, eps)
    if vertical_a:
        if vertical_b:
            return False
        x = float(start_a[0])
        y = _slope(edge_b) * (x - start_b[0]) + start_b[1]
        return _check_crossing(x, y, edge_a, edge_b, eps)
    if vertical_b:
        x = float(start_b[0])
        y = _slope(edge_a) * (x - start_a[0]) + start_a[1]
        return _check_crossing(x, y, edge_a, edge_b, eps)
    k_a = _slope(edge_a)
    k_b = _slope(edge_b)
    if k_a == k_b:
        return False
    x = (start_b[1] - start_a[1] - k_b * start_b[0] + k_a * start_a[0]) / (k_a - k_b)
    y = k_a * (x - start_a[0]) + start_a[1]
    return _check_crossing(x, y, edge_a, edge_b, eps)


def crosses_any(edge: Edge, others: Sequence[Edge], *, eps: float = EPSILON) -> bool:
    return any(segments_intersect(edge, other, eps=eps) for other in others)


def polygon_edges(vertices: Sequence[Sequence[float]]) -> List[Edge]:
    """Return the closed-polygon edges ``i -> i + 1 (mod n)``."""

    n = len(vertices)
    pts = [Vertex(float(x), float(y)) for x, y in vertices]
    return [Edge(pts[i], pts[(i + 1) % n]) for i in range(n)]


def self_crossings(vertices: Sequence[Sequence[float]], *, eps: float = EPSILON) -> List[Tuple[int, int]]:
    """Return index pairs of non-adjacent polygon edges that intersect."""

    edges = polygon_edges(vertices)
    n = len(edges)
    crossings: List[Tuple[int, int]] = []
    if n < 4:
        return crossings
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(edges[i], edges[j], eps=eps):
                crossings.append((i, j))
    if crossings:
        logger.info("Found %d self-crossing edge pair(s) in %d-gon", len(crossings), n)
    return crossings


__all__ = [
    "crosses_any",
    "point_on_segment",
    "polygon_edges",
    "segments_intersect",
    "self_crossings",
]
