"""Reconstruct polygon vertices from side lengths and known angles.

The walk fixes vertices ``0 .. n-2`` from the side lengths and the ``n - 3``
known angles.  The closing vertex ``n-1`` has to sit at ``sides[n-1]`` from
vertex 0 and at ``sides[n-2]`` from vertex ``n-2``, which is a circle-circle
intersection with up to two candidates.  The second candidate is preferred
when it neither crosses the chain nor makes a seam angle reflex; see
:func:`_choose_closure` for the exact order of checks.

Angles turn the walk clockwise in a y-up frame (counter-clockwise on a
y-down screen): a descriptor of positive angles below 180 produces a polygon
whose interior angles, as reported by :func:`polyrecon.measure.interior_angles`,
equal the given angles.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Tuple, Union

from .config import EPSILON, ReconstructionConfig, get_reconstruction_config
from .constructions import _add, _norm, _scale, _sub, circle_intersections, points_coincide, rotate
from .logging_utils import apply_debug_logging
from .measure import turn_angle
from .segments import crosses_any
from .types import ORIGIN, Edge, PolygonDescriptor, Vertex, VertexSequence
from .validate import descriptor_problems

logger = logging.getLogger(__name__)

ClosureKind = Literal[
    "trivial",
    "degenerate",
    "tangent",
    "convex",
    "convex-alternative",
    "nonconvex-fallback",
    "unchecked-alternative",
]


@dataclass(frozen=True)
class Success:
    """Completed vertex sequence of length ``n``."""

    vertices: VertexSequence
    closure: ClosureKind = "trivial"

    ok = True

    @property
    def unchecked(self) -> bool:
        """``True`` when the closing vertex was committed without a crossing check."""

        return self.closure == "unchecked-alternative"


@dataclass(frozen=True)
class InvalidDescriptor:
    """The descriptor is malformed; nothing was reconstructed."""

    problems: Tuple[str, ...]

    ok = False


@dataclass(frozen=True)
class Unsolvable:
    """The descriptor is well formed but no closing vertex exists."""

    reason: str
    placed: VertexSequence = ()

    ok = False


BuildResult = Union[Success, InvalidDescriptor, Unsolvable]


class _WalkError(ValueError):
    def __init__(self, message: str, placed: Sequence[Vertex] = ()):
        super().__init__(message)
        self.placed = tuple(placed)


def _next_vertex(before: Vertex, pivot: Vertex, angle: float, length: float, eps: float) -> Vertex:
    back = _sub(before, pivot)
    back_len = _norm(back)
    if back_len < eps:
        raise _WalkError("zero-length side leaves the walk direction undefined")
    step = _scale(rotate(back, -angle), length / back_len)
    return _add(pivot, step)


def walk_chain(descriptor: PolygonDescriptor, eps: float = EPSILON) -> List[Vertex]:
    """Place vertices ``0 .. n-2`` from the sides and the known angles."""

    sides = descriptor.sides
    vertices = [ORIGIN, Vertex(sides[0], 0.0)]
    for i, angle in enumerate(descriptor.angles):
        try:
            vertex = _next_vertex(vertices[i], vertices[i + 1], angle, sides[i + 1], eps)
        except _WalkError as exc:
            raise _WalkError(f"cannot place vertex {i + 2}: {exc}", vertices) from exc
        vertices.append(vertex)
    return vertices


def _closing_edges_cross(chain: Sequence[Vertex], candidate: Vertex, eps: float) -> bool:
    """Return ``True`` if closing the chain through ``candidate`` crosses an existing edge."""

    m = len(chain)  # n - 1 placed vertices, edges 0 .. m-2
    edges = [Edge(chain[i], chain[i + 1]) for i in range(m - 1)]
    to_first = Edge(candidate, chain[0])
    from_last = Edge(chain[-1], candidate)
    return crosses_any(to_first, edges[1:], eps=eps) or crosses_any(from_last, edges[:-1], eps=eps)


def _seam_is_convex(chain: Sequence[Vertex], candidate: Vertex, limit: float) -> bool:
    first, second = chain[0], chain[1]
    last, before_last = chain[-1], chain[-2]
    seam = (
        turn_angle(candidate, first, second),
        turn_angle(last, candidate, first),
        turn_angle(before_last, last, candidate),
    )
    logger.debug("Seam angles for candidate %s: %s", candidate, seam)
    return all(angle <= limit for angle in seam)


def _choose_closure(
    chain: Sequence[Vertex],
    first: Vertex,
    second: Vertex,
    config: ReconstructionConfig,
) -> Tuple[Vertex, ClosureKind]:
    eps = config.epsilon
    if _closing_edges_cross(chain, second, eps):
        # first is committed as-is; it may cross the chain as well
        return first, "unchecked-alternative"
    if _seam_is_convex(chain, second, config.convex_limit):
        return second, "convex"
    if _closing_edges_cross(chain, first, eps):
        return second, "nonconvex-fallback"
    return first, "convex-alternative"


def _close(
    chain: List[Vertex], descriptor: PolygonDescriptor, config: ReconstructionConfig
) -> BuildResult:
    eps = config.epsilon
    sides = descriptor.sides
    first = chain[0]
    last = chain[-1]
    to_first = sides[-1]
    from_last = sides[-2]

    if points_coincide(first, last, eps):
        if abs(to_first - from_last) < eps:
            return Success(tuple(chain) + (first,), "degenerate")
        return Unsolvable(
            f"vertex 0 and vertex {len(chain) - 1} coincide but the closing sides differ "
            f"({to_first:g} != {from_last:g})",
            tuple(chain),
        )

    candidates = circle_intersections(first, to_first, last, from_last, eps=eps)
    if not candidates:
        return Unsolvable(
            f"closing sides {to_first:g} and {from_last:g} cannot meet across a gap of "
            f"{_norm(_sub(last, first)):g}",
            tuple(chain),
        )
    if not all(math.isfinite(coord) for candidate in candidates for coord in candidate):
        return Unsolvable(
            f"closing vertex is not representable for sides {to_first:g} and {from_last:g}",
            tuple(chain),
        )
    if len(candidates) == 1:
        return Success(tuple(chain) + (candidates[0],), "tangent")

    vertex, kind = _choose_closure(chain, candidates[0], candidates[1], config)
    return Success(tuple(chain) + (vertex,), kind)


def build(descriptor: PolygonDescriptor, config: Optional[ReconstructionConfig] = None) -> BuildResult:
    """Reconstruct the vertices of the polygon described by ``descriptor``."""

    config = config or get_reconstruction_config()
    problems = descriptor_problems(descriptor)
    if problems:
        logger.warning("Rejected polygon descriptor: %s", "; ".join(problems))
        return InvalidDescriptor(tuple(problems))

    n = descriptor.size
    sides = descriptor.sides
    if n == 0:
        return Success(())
    if n == 1:
        return Success((ORIGIN,))
    if n == 2:
        if abs(sides[0] - sides[1]) >= config.epsilon:
            logger.warning("Two-sided polygon with unequal sides %g and %g", sides[0], sides[1])
        return Success((ORIGIN, Vertex(sides[0], 0.0)))

    logger.info("Reconstructing %d-gon from %d known angle(s)", n, len(descriptor.angles))
    try:
        chain = walk_chain(descriptor, config.epsilon)
    except _WalkError as exc:
        logger.info("Walk failed: %s", exc)
        return Unsolvable(str(exc), exc.placed)

    result = _close(chain, descriptor, config)
    if isinstance(result, Success):
        logger.info("Closed %d-gon (%s)", n, result.closure)
        if result.unchecked:
            logger.warning(
                "Closing vertex %s was committed without a self-crossing check", result.vertices[-1]
            )
    else:
        logger.info("No closing vertex: %s", result.reason)
    return result


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "BuildResult",
    "ClosureKind",
    "InvalidDescriptor",
    "Success",
    "Unsolvable",
    "build",
    "walk_chain",
]
