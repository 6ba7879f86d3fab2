import pytest

from roadgraph.domain.entities.geography import GeographicPoint
from roadgraph.domain.entities.node import NoSuchEdgeError
from roadgraph.domain.mechanics.metrics import HaversineMetric
from roadgraph.graph.hooks import NoopHooks
from roadgraph.graph.map_graph import MapGraph

A, B, C, D = (
    GeographicPoint(0.0, 0.0),
    GeographicPoint(3.0, 4.0),
    GeographicPoint(6.0, 8.0),
    GeographicPoint(0.0, 10.0),
)


class RecordingHooks(NoopHooks):
    def __init__(self):
        self.trace = []

    def vertex_added(self, location, *, num_vertices):
        self.trace.append(("vertex", location, num_vertices))

    def edge_added(self, edge, *, num_edges):
        self.trace.append(("edge", edge.road_name, num_edges))

    def missing_edge(self, node, neighbor, *, cost):
        self.trace.append(("missing", node.location, neighbor.location, cost))


@pytest.fixture
def hooks():
    return RecordingHooks()


@pytest.fixture
def graph(hooks):
    g = MapGraph(hooks=hooks)
    for p in (A, B, C, D):
        g.add_vertex(p)
    g.add_edge(A, B, "Main St")
    g.add_edge(B, C, "Main St", "primary", length=6.0)
    g.add_edge(A, D, "Elm St")
    return g


def test_counts_and_lookup(graph):
    assert len(graph) == graph.num_vertices == 4
    assert graph.num_edges == 3
    assert graph.vertices == {A, B, C, D}
    assert A in graph and GeographicPoint(1.0, 1.0) not in graph
    assert graph.get_node(A).location == A
    with pytest.raises(KeyError):
        graph.get_node(GeographicPoint(1.0, 1.0))


def test_add_vertex_is_idempotent(graph, hooks):
    n_before = len(hooks.trace)
    assert graph.add_vertex(A) is False
    assert graph.num_vertices == 4
    assert len(hooks.trace) == n_before


def test_add_edge_validation(graph):
    with pytest.raises(ValueError):
        graph.add_edge(A, GeographicPoint(1.0, 1.0), "Ghost Rd")
    with pytest.raises(ValueError):
        graph.add_edge(A, C, "Backwards Rd", length=-2.0)
    assert graph.num_edges == 3


def test_duplicate_edge_counted_once(graph, hooks):
    graph.add_edge(A, B, "Main St")
    assert graph.num_edges == 3
    assert [t for t in hooks.trace if t[0] == "edge"][-1] == ("edge", "Elm St", 3)


def test_edges_are_directed(graph):
    a, b, d = graph.get_node(A), graph.get_node(B), graph.get_node(D)
    assert a.get_neighbors() == {b, d}
    assert graph.get_node(D).get_neighbors() == set()


def test_default_length_uses_graph_metric():
    m = HaversineMetric()
    g = MapGraph(m)
    p, q = GeographicPoint(0.0, 0.0), GeographicPoint(0.0, 1.0)
    g.add_vertex(p)
    g.add_vertex(q)
    e = g.add_edge(p, q, "Equator Rd")
    assert abs(e.length - m.distance(p, q)) < 1e-9


def test_nearest_node(graph):
    assert graph.nearest_node(GeographicPoint(2.5, 3.5)).location == B
    assert graph.nearest_node(GeographicPoint(-1.0, 9.0)).location == D
    assert MapGraph().nearest_node(A) is None


def test_step_cost_and_missing_edge_hook(graph, hooks):
    a, b, c = graph.get_node(A), graph.get_node(B), graph.get_node(C)
    a.cost = 1.0
    assert abs(graph.step_cost(a, b) - 6.0) < 1e-9
    assert graph.step_cost(a, c) == 1.0
    assert hooks.trace[-1] == ("missing", A, C, 1.0)


def test_strict_costs_raise():
    g = MapGraph(strict_costs=True)
    g.add_vertex(A)
    g.add_vertex(B)
    with pytest.raises(NoSuchEdgeError):
        g.step_cost(g.get_node(A), g.get_node(B))


def test_predicted_cost_and_search_copy(graph):
    w = graph.search_copy(A, 2.0, 9.0)
    stored = graph.get_node(A)
    assert w == stored and w.edges is stored.edges
    assert (w.cost, w.predicted_cost) == (2.0, 9.0)
    assert stored.cost == 0.0
    assert abs(graph.predicted_cost(w, graph.get_node(C), 2.0) - 12.0) < 1e-9
    assert abs(graph.step_cost(w, graph.get_node(B)) - 7.0) < 1e-9
