# roadgraph/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from roadgraph.app.protocols import DistanceMetric, GraphHooks
from roadgraph.config.models import GraphConfigModel
from roadgraph.graph.hooks import NoopHooks
from roadgraph.graph.map_graph import MapGraph
from roadgraph.io.graph_logging import GraphLogging  # JSON logs
from roadgraph.runtime.registries import make_metric


@dataclass
class App:
    config: GraphConfigModel
    metric: DistanceMetric
    hooks: GraphHooks
    graph: MapGraph


def build(cfg: GraphConfigModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = GraphConfigModel()
    else:
        model = cfg if isinstance(cfg, GraphConfigModel) else GraphConfigModel.model_validate(cfg)

    # 1) Metric
    metric = make_metric(model.metric)

    # 2) Hooks
    hooks = (
        GraphLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Graph
    graph = MapGraph(metric, strict_costs=model.cost.strict, hooks=hooks)
    return App(model, metric, hooks, graph)
