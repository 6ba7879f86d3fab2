from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from roadgraph.domain.entities.geography import GeographicPoint

if TYPE_CHECKING:
    from roadgraph.domain.entities.node import MapNode


@dataclass(frozen=True)
class MapEdge:
    """Directed road segment start -> end.

    length defaults to the straight-line distance between the endpoints.
    """

    start: MapNode
    end: MapNode
    road_name: str
    road_type: str = ""
    length: float | None = None

    def __post_init__(self):
        if self.length is None:
            object.__setattr__(self, "length", self.start.location.distance(self.end.location))
        if self.length < 0:
            raise ValueError(f"edge length must be >= 0, got {self.length}")

    @property
    def start_point(self) -> GeographicPoint:
        return self.start.location

    @property
    def end_point(self) -> GeographicPoint:
        return self.end.location

    def get_other_node(self, node: MapNode) -> MapNode:
        if node == self.start:
            return self.end
        if node == self.end:
            return self.start
        raise ValueError(f"{node.location} is not an endpoint of edge {self.road_name!r}")
