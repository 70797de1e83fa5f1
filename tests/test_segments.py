import pytest

from polyrecon import Edge, Vertex
from polyrecon.segments import point_on_segment, polygon_edges, segments_intersect, self_crossings


def edge(a, b):
    return Edge(Vertex(*a), Vertex(*b))


@pytest.mark.parametrize(
    'point, expected',
    [
        ((2.0, -1.0), True),
        ((2.0, 0.0), False),
        ((-2.0, 1.0), False),
        ((6.0, -3.0), False),
        ((0.0, 0.0), True),
        ((4.0, -2.0), True),
    ],
)
def test_point_on_segment(point, expected):
    assert point_on_segment(point, edge((0.0, 0.0), (4.0, -2.0))) is expected


def test_point_on_zero_length_segment():
    assert point_on_segment((1.0, 1.0), edge((1.0, 1.0), (1.0, 1.0)))
    assert not point_on_segment((1.0, 1.5), edge((1.0, 1.0), (1.0, 1.0)))


def test_crossing_axes_intersect():
    assert segments_intersect(edge((-1.0, 0.0), (1.0, 0.0)), edge((0.0, -1.0), (0.0, 1.0)))


def test_steep_segment_crosses_horizontal():
    assert segments_intersect(
        edge((0.0, 0.0), (6.0, 0.0)),
        edge((-0.128, 5.142), (1.772, -4.6755)),
    )


def test_vertical_first_segment():
    assert segments_intersect(edge((1.0, -1.0), (1.0, 1.0)), edge((0.0, 0.0), (2.0, 0.5)))
    assert not segments_intersect(edge((1.0, 1.0), (1.0, 2.0)), edge((0.0, 0.0), (2.0, 0.5)))


def test_disjoint_segments():
    assert not segments_intersect(edge((0.0, 0.0), (1.0, 1.0)), edge((2.0, 0.0), (3.0, -5.0)))


def test_touching_endpoint_counts():
    assert segments_intersect(edge((0.0, 0.0), (2.0, 0.0)), edge((1.0, 0.0), (1.0, 1.0)))


def test_nearly_vertical_segment_counts_as_vertical():
    # a 90 degree turn in the walk leaves x off by one ulp
    steep = edge((4.0, 0.0), (3.9999999999999996, 4.0))
    diagonal = edge((6.0, 2.0), (0.0, 0.0))

    assert segments_intersect(steep, diagonal)
    assert segments_intersect(diagonal, steep)
    assert not segments_intersect(steep, edge((4.0, 5.0), (4.0, 6.0)))


def test_self_crossings_with_nearly_vertical_edge():
    vertices = [(0.0, 0.0), (4.0, 0.0), (3.9999999999999996, 4.0), (6.0, 2.0)]

    assert self_crossings(vertices) == [(1, 3)]


@pytest.mark.parametrize(
    'a, b',
    [
        (((0.0, 0.0), (0.0, 2.0)), ((1.0, 0.0), (1.0, 2.0))),
        (((0.0, 0.0), (0.0, 2.0)), ((0.0, 1.0), (0.0, 3.0))),
        (((0.0, 0.0), (2.0, 1.0)), ((0.0, 1.0), (2.0, 2.0))),
        (((0.0, 0.0), (2.0, 2.0)), ((1.0, 1.0), (3.0, 3.0))),
    ],
)
def test_parallel_segments_never_intersect(a, b):
    assert not segments_intersect(edge(*a), edge(*b))


def test_polygon_edges_wrap_around():
    edges = polygon_edges([(0, 0), (1, 0), (1, 1)])

    assert len(edges) == 3
    assert edges[-1] == Edge(Vertex(1.0, 1.0), Vertex(0.0, 0.0))


def test_self_crossings_of_bow_tie():
    assert self_crossings([(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0)]) == [(0, 2)]


@pytest.mark.parametrize(
    'vertices',
    [
        [],
        [(0.0, 0.0), (3.0, 0.0), (3.0, 4.0)],
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)],
        [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (2.0, 1.0), (0.0, 4.0)],
    ],
)
def test_simple_polygons_have_no_crossings(vertices):
    assert self_crossings(vertices) == []
