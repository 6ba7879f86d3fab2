# runtime/registries.py
from collections.abc import Callable

from roadgraph.app.protocols import DistanceMetric
from roadgraph.config.models import MetricEuclideanModel, MetricHaversineModel, MetricUnion
from roadgraph.domain.mechanics.metrics import EUCLIDEAN, HaversineMetric

MetricFactory = Callable[[MetricUnion], DistanceMetric]

_metric_registry: dict[str, MetricFactory] = {}


def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(cfg: MetricUnion) -> DistanceMetric:
    try:
        factory = _metric_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown metric kind {cfg.kind!r}")
    return factory(cfg)


@register_metric("euclidean")
def _make_euclidean(cfg: MetricEuclideanModel):
    return EUCLIDEAN


@register_metric("haversine")
def _make_haversine(cfg: MetricHaversineModel):
    return HaversineMetric(radius_km=cfg.radius_km)
