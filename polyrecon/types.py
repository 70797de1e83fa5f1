"""Core data model: vertices, edges and polygon descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Tuple


class Vertex(NamedTuple):
    x: float
    y: float


class Edge(NamedTuple):
    """Directed segment used for intersection tests only."""

    start: Vertex
    end: Vertex


VertexSequence = Tuple[Vertex, ...]

ORIGIN = Vertex(0.0, 0.0)


def as_vertex(value: Iterable[float]) -> Vertex:
    x, y = value
    return Vertex(float(x), float(y))


def _field_value(value: Optional[float]) -> float:
    # blank form inputs arrive as None and count as zero
    if value is None:
        return 0.0
    return float(value)


@dataclass(frozen=True)
class PolygonDescriptor:
    """Side lengths of an ``n``-gon plus its first ``n - 3`` interior angles.

    ``sides[i]`` is the length of the edge from vertex ``i`` to vertex
    ``i + 1`` (the last one closes back to vertex 0).  ``angles[i]`` is the
    interior angle, in degrees, at vertex ``i + 1``.  The remaining three
    angles are implied by closing the polygon.
    """

    sides: Tuple[float, ...] = ()
    angles: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sides", tuple(float(side) for side in self.sides))
        object.__setattr__(self, "angles", tuple(float(angle) for angle in self.angles))

    @property
    def size(self) -> int:
        return len(self.sides)

    @classmethod
    def from_fields(
        cls,
        sides: Iterable[Optional[float]],
        angles: Iterable[Optional[float]] = (),
    ) -> "PolygonDescriptor":
        """Build a descriptor from form fields where blanks are ``None``."""

        return cls(
            sides=tuple(_field_value(side) for side in sides),
            angles=tuple(_field_value(angle) for angle in angles),
        )

    @classmethod
    def regular(cls, n: int, side: float = 1.0) -> "PolygonDescriptor":
        """Descriptor of a regular ``n``-gon with the given side length."""

        if n < 0:
            raise ValueError(f"polygon size must be non-negative, got {n}")
        from .measure import regular_polygon_angle

        angle = regular_polygon_angle(n) if n >= 3 else 0.0
        return cls(sides=(side,) * n, angles=(angle,) * max(n - 3, 0))


__all__ = [
    "Edge",
    "ORIGIN",
    "PolygonDescriptor",
    "Vertex",
    "VertexSequence",
    "as_vertex",
]
