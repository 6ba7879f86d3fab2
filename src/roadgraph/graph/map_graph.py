# graph/map_graph.py

import numpy as np

from roadgraph.app.protocols import DistanceMetric, GraphHooks
from roadgraph.domain.entities.edge import MapEdge
from roadgraph.domain.entities.geography import GeographicPoint
from roadgraph.domain.entities.node import MapNode, NoSuchEdgeError
from roadgraph.domain.mechanics.metrics import EUCLIDEAN

from .hooks import NoopHooks


class MapGraph:
    """
    Owns the vertices of a road graph, keyed by location.

    Edges are directed and stored on their start node.
    """

    def __init__(
        self,
        metric: DistanceMetric | None = None,
        *,
        strict_costs: bool = False,
        hooks: GraphHooks | None = None,
    ):
        self.metric = metric or EUCLIDEAN
        self.strict_costs = strict_costs
        self._nodes: dict[GeographicPoint, MapNode] = {}
        self._num_edges = 0
        self._hooks = hooks or NoopHooks()

    # ------------- Construction ----------------------

    def add_vertex(self, location: GeographicPoint) -> bool:
        if location in self._nodes:
            return False
        self._nodes[location] = MapNode(location)
        self._hooks.vertex_added(location, num_vertices=len(self._nodes))
        return True

    def add_edge(
        self,
        start: GeographicPoint,
        end: GeographicPoint,
        road_name: str,
        road_type: str = "",
        length: float | None = None,
    ) -> MapEdge:
        missing = [p for p in (start, end) if p not in self._nodes]
        if missing:
            raise ValueError(f"edge {road_name!r} references unknown vertices: {missing}")
        u, v = self._nodes[start], self._nodes[end]
        if length is None:
            length = start.distance(end, self.metric)
        edge = MapEdge(u, v, road_name, road_type, length)
        before = len(u.edges)
        u.add_edge(edge)
        if len(u.edges) > before:
            self._num_edges += 1
            self._hooks.edge_added(edge, num_edges=self._num_edges)
        return edge

    # ------------- Lookup ----------------------------

    def get_node(self, location: GeographicPoint) -> MapNode:
        try:
            return self._nodes[location]
        except KeyError:
            raise KeyError(f"no vertex at ({location})") from None

    def __contains__(self, location) -> bool:
        return location in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def num_vertices(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def vertices(self) -> set[GeographicPoint]:
        return set(self._nodes)

    def nodes(self) -> list[MapNode]:
        return list(self._nodes.values())

    def nearest_node(self, point: GeographicPoint) -> MapNode | None:
        if not self._nodes:
            return None
        locs = list(self._nodes)
        lats = np.fromiter((p.lat for p in locs), dtype=float, count=len(locs))
        lons = np.fromiter((p.lon for p in locs), dtype=float, count=len(locs))
        d = self.metric.distance_many(point, lats, lons)
        return self._nodes[locs[int(np.argmin(d))]]

    # ------------- Search support --------------------

    def search_copy(self, location: GeographicPoint, cost: float, predicted_cost: float = 0.0) -> MapNode:
        return MapNode.search_copy(self.get_node(location), cost, predicted_cost)

    def step_cost(self, node: MapNode, neighbor: MapNode) -> float:
        try:
            return node.compute_cost(neighbor, strict=True)
        except NoSuchEdgeError:
            if self.strict_costs:
                raise
            self._hooks.missing_edge(node, neighbor, cost=node.cost)
            return node.cost

    def predicted_cost(self, node: MapNode, neighbor: MapNode, cost: float) -> float:
        return node.compute_predicted_cost(neighbor, cost, self.metric)
