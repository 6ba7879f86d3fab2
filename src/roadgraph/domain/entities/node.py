from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key

from roadgraph.domain.entities.edge import MapEdge
from roadgraph.domain.entities.geography import GeographicPoint


class NoSuchEdgeError(LookupError):
    """No outgoing edge leads to the requested neighbor."""


@dataclass
class SearchState:
    cost: float = 0.0
    predicted_cost: float = 0.0


class MapNode:
    """
    A vertex of the road graph.

    Identity is the location: two nodes at the same point are equal whatever
    their edges. Cost fields live in a per-instance SearchState; the edge set
    may be shared with other instances (see search_copy).
    """

    __slots__ = ("location", "edges", "state")

    def __init__(self, location: GeographicPoint, *, edges: set[MapEdge] | None = None,
                 state: SearchState | None = None):
        self.location = location
        self.edges: set[MapEdge] = set() if edges is None else edges
        self.state = state or SearchState()

    @classmethod
    def search_copy(cls, node: MapNode, cost: float, predicted_cost: float = 0.0) -> MapNode:
        # shares node.edges; additions through either instance are seen by both
        return cls(node.location, edges=node.edges, state=SearchState(cost, predicted_cost))

    # ------------- Edges -----------------------------

    def add_edge(self, edge: MapEdge) -> None:
        self.edges.add(edge)

    def get_neighbors(self) -> set[MapNode]:
        return {edge.get_other_node(self) for edge in self.edges}

    # ------------- Accessors -------------------------

    def get_location(self) -> GeographicPoint:
        return self.location

    def get_edges(self) -> set[MapEdge]:
        return self.edges

    @property
    def cost(self) -> float:
        return self.state.cost

    @cost.setter
    def cost(self, value: float) -> None:
        self.state.cost = value

    @property
    def predicted_cost(self) -> float:
        return self.state.predicted_cost

    @predicted_cost.setter
    def predicted_cost(self, value: float) -> None:
        self.state.predicted_cost = value

    def get_cost(self) -> float:
        return self.cost

    def set_cost(self, cost: float) -> None:
        self.cost = cost

    def get_predicted_cost(self) -> float:
        return self.predicted_cost

    def set_predicted_cost(self, predicted_cost: float) -> None:
        self.predicted_cost = predicted_cost

    # ------------- Identity --------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, MapNode):
            return NotImplemented
        return self.location == other.location

    def __hash__(self) -> int:
        return hash(self.location)

    # ------------- Ordering --------------------------

    def compare_to(self, other: MapNode) -> int:
        return compare_cost(self, other)

    def compare_to_predict(self, other: MapNode) -> int:
        return compare_predicted_cost(self, other)

    # ------------- Costs -----------------------------

    def compute_cost(self, neighbor: MapNode, *, strict: bool = False) -> float:
        """
        Cost of reaching `neighbor` through this node: cost + length of the
        first outgoing edge ending at neighbor's location.

        With no such edge the current cost is returned unchanged, or
        NoSuchEdgeError is raised when `strict` is set.
        """
        edge = next((e for e in self.edges if e.end_point == neighbor.location), None)
        if edge is None:
            if strict:
                raise NoSuchEdgeError(f"no edge from ({self.location}) to ({neighbor.location})")
            return self.cost
        return self.cost + edge.length

    def compute_predicted_cost(self, neighbor: MapNode, cost: float, metric=None) -> float:
        return self.location.distance(neighbor.location, metric) + cost

    # ------------- Formatting ------------------------

    def _road_names(self) -> str:
        return ", ".join(sorted(e.road_name for e in self.edges))

    def road_names_as_string(self) -> str:
        return f"({self._road_names()})"

    def __str__(self) -> str:
        return f"[NODE at location ({self.location}) intersects streets: {self._road_names()}]"

    def __repr__(self) -> str:
        return (
            f"MapNode(location={self.location!r}, cost={self.cost}, "
            f"predicted_cost={self.predicted_cost}, edges={len(self.edges)})"
        )


# ------------- Comparators ---------------------------


def _three_way(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_cost(a: MapNode, b: MapNode) -> int:
    return _three_way(a.cost, b.cost)


def compare_predicted_cost(a: MapNode, b: MapNode) -> int:
    return _three_way(a.predicted_cost, b.predicted_cost)


def cost_key(node: MapNode) -> float:
    return node.cost


def predicted_cost_key(node: MapNode) -> float:
    return node.predicted_cost


by_cost = cmp_to_key(compare_cost)
by_predicted_cost = cmp_to_key(compare_predicted_cost)
