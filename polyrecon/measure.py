"""Angle and area measurements of finished vertex sequences.

Angles follow the same orientation as the vertex builder: a polygon walked
counter-clockwise in a y-up frame reports its interior angles, one walked
clockwise reports the exterior ones (``360 - interior``).
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

Coords = Sequence[Sequence[float]]


def _as_array(vertices: Coords) -> np.ndarray:
    return np.asarray(vertices, dtype=float).reshape(-1, 2)


def turn_angle(prev: Sequence[float], pivot: Sequence[float], nxt: Sequence[float]) -> float:
    """Return the interior angle at ``pivot`` between its neighbours, in ``[0, 360)``."""

    out_angle = math.atan2(nxt[1] - pivot[1], nxt[0] - pivot[0])
    back_angle = math.atan2(prev[1] - pivot[1], prev[0] - pivot[0])
    return math.degrees(back_angle - out_angle) % 360.0


def interior_angles(vertices: Coords) -> List[float]:
    """Return the angle at every vertex; ``result[i]`` belongs to vertex ``i``."""

    pts = _as_array(vertices)
    if pts.shape[0] == 0:
        return []
    back = np.roll(pts, 1, axis=0) - pts
    out = np.roll(pts, -1, axis=0) - pts
    phi = np.arctan2(back[:, 1], back[:, 0]) - np.arctan2(out[:, 1], out[:, 0])
    return [float(value) for value in np.mod(np.degrees(phi), 360.0)]


def signed_area(vertices: Coords) -> float:
    """Shoelace area; positive for counter-clockwise winding (y axis up)."""

    pts = _as_array(vertices)
    if pts.shape[0] == 0:
        return 0.0
    xs = pts[:, 0]
    ys = pts[:, 1]
    return float(np.sum(ys * (np.roll(xs, 1) - np.roll(xs, -1))) / 2.0)


def polygon_area(vertices: Coords) -> float:
    return abs(signed_area(vertices))


def side_lengths(vertices: Coords) -> List[float]:
    """Return edge lengths ``i -> i + 1``, the last one closing the polygon."""

    pts = _as_array(vertices)
    if pts.shape[0] == 0:
        return []
    diffs = np.roll(pts, -1, axis=0) - pts
    return [float(value) for value in np.hypot(diffs[:, 0], diffs[:, 1])]


def regular_polygon_angle(n: int) -> float:
    if n <= 0:
        raise ValueError(f"regular polygon needs a positive vertex count, got {n}")
    return (n - 2) * 180.0 / n


__all__ = [
    "interior_angles",
    "polygon_area",
    "regular_polygon_angle",
    "side_lengths",
    "signed_area",
    "turn_angle",
]
