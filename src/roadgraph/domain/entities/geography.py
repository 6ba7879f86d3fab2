from dataclasses import dataclass

from roadgraph.domain.mechanics.metrics import EUCLIDEAN


@dataclass(frozen=True)
class GeographicPoint:
    lat: float
    lon: float

    def distance(self, other: "GeographicPoint", metric=None) -> float:
        return (metric or EUCLIDEAN).distance(self, other)

    def __str__(self) -> str:
        return f"{self.lat}, {self.lon}"
