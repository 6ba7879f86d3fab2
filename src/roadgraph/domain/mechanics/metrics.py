# roadgraph/domain/mechanics/metrics.py
import math

import numpy as np

EARTH_RADIUS_KM = 6371.0


class EuclidMetric:
    """Planar distance treating (lat, lon) as (x, y)."""

    def distance(self, a, b) -> float:
        return math.hypot(b.lat - a.lat, b.lon - a.lon)

    def distance_many(self, a, lats, lons) -> np.ndarray:
        return np.hypot(np.asarray(lats, dtype=float) - a.lat, np.asarray(lons, dtype=float) - a.lon)


class HaversineMetric:
    """Great-circle distance in kilometres."""

    def __init__(self, radius_km: float = EARTH_RADIUS_KM):
        self.radius_km = radius_km

    def distance(self, a, b) -> float:
        lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
        dlat, dlon = lat2 - lat1, math.radians(b.lon - a.lon)
        h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        return 2 * self.radius_km * math.asin(min(1.0, math.sqrt(h)))

    def distance_many(self, a, lats, lons) -> np.ndarray:
        lat1 = math.radians(a.lat)
        lat2 = np.radians(np.asarray(lats, dtype=float))
        dlat = lat2 - lat1
        dlon = np.radians(np.asarray(lons, dtype=float)) - math.radians(a.lon)
        h = np.sin(dlat / 2) ** 2 + math.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
        return 2 * self.radius_km * np.arcsin(np.minimum(1.0, np.sqrt(h)))


EUCLIDEAN = EuclidMetric()
