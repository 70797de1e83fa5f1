"""Uniform fit-in scaling of vertex sequences for display."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .types import Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scaling:
    """Scale ``scale_factor`` applied about the bounding-box center."""

    center_x: float
    center_y: float
    scale_factor: float


def fit_scale(vertices: Sequence[Sequence[float]], max_width: float, max_height: float) -> Scaling:
    """Return the largest aspect-preserving scale fitting ``vertices`` into the viewport."""

    pts = np.asarray(vertices, dtype=float).reshape(-1, 2)
    if pts.shape[0] == 0:
        return Scaling(0.0, 0.0, 1.0)

    left, top = pts.min(axis=0)
    right, bottom = pts.max(axis=0)
    width = float(right - left)
    height = float(bottom - top)

    factors = []
    if width > 0.0:
        factors.append(max_width / width)
    if height > 0.0:
        factors.append(max_height / height)
    scale = min(factors) if factors else 1.0

    result = Scaling(float(left + right) / 2.0, float(top + bottom) / 2.0, float(scale))
    logger.debug(
        "Fit %d vertices (box %.6g x %.6g) into %s x %s: %s",
        pts.shape[0],
        width,
        height,
        max_width,
        max_height,
        result,
    )
    return result


def to_viewport(
    vertices: Sequence[Sequence[float]],
    scaling: Scaling,
    width: float,
    height: float,
) -> List[Vertex]:
    """Map ``vertices`` into a ``width`` x ``height`` viewport using ``scaling``.

    The bounding-box center lands on the viewport center.
    """

    pts = np.asarray(vertices, dtype=float).reshape(-1, 2)
    if pts.shape[0] == 0:
        return []
    center = np.array([scaling.center_x, scaling.center_y], dtype=float)
    target = np.array([width / 2.0, height / 2.0], dtype=float)
    mapped = (pts - center) * scaling.scale_factor + target
    return [Vertex(float(x), float(y)) for x, y in mapped]


__all__ = ["Scaling", "fit_scale", "to_viewport"]
