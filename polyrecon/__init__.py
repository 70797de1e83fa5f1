from .types import Edge, PolygonDescriptor, Vertex, VertexSequence
from .validate import validate, is_valid, descriptor_problems, ValidationError
from .config import (
    EPSILON,
    ReconstructionConfig,
    get_reconstruction_config,
    set_reconstruction_config,
)
from .constructions import circle_intersections, distance, rotate
from .segments import point_on_segment, segments_intersect, self_crossings
from .builder import build, walk_chain, BuildResult, Success, InvalidDescriptor, Unsolvable
from .measure import (
    interior_angles,
    polygon_area,
    regular_polygon_angle,
    side_lengths,
    signed_area,
    turn_angle,
)
from .scaling import Scaling, fit_scale, to_viewport

__all__ = [
    'Edge',
    'PolygonDescriptor',
    'Vertex',
    'VertexSequence',
    'validate',
    'is_valid',
    'descriptor_problems',
    'ValidationError',
    'EPSILON',
    'ReconstructionConfig',
    'get_reconstruction_config',
    'set_reconstruction_config',
    'circle_intersections',
    'distance',
    'rotate',
    'point_on_segment',
    'segments_intersect',
    'self_crossings',
    'build',
    'walk_chain',
    'BuildResult',
    'Success',
    'InvalidDescriptor',
    'Unsolvable',
    'interior_angles',
    'polygon_area',
    'regular_polygon_angle',
    'side_lengths',
    'signed_area',
    'turn_angle',
    'Scaling',
    'fit_scale',
    'to_viewport',
]
