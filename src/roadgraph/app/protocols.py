from typing import Protocol, runtime_checkable

import numpy as np

from roadgraph.domain.entities.geography import GeographicPoint


@runtime_checkable
class DistanceMetric(Protocol):
    """
    Responsibilities:
      • Distance between two points (heuristic for predicted cost, default edge length).
      • Vectorised distance from one point to many (nearest-vertex lookup).
    """

    def distance(self, a: GeographicPoint, b: GeographicPoint) -> float: ...
    def distance_many(self, a: GeographicPoint, lats, lons) -> np.ndarray: ...


@runtime_checkable
class GraphHooks(Protocol):
    def vertex_added(self, location: GeographicPoint, *, num_vertices: int): ...
    def edge_added(self, edge, *, num_edges: int): ...
    def missing_edge(self, node, neighbor, *, cost: float): ...
