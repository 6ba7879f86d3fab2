# io/graph_logging.py
import json
import logging
import sys

from roadgraph.graph.hooks import NoopHooks


def _default_json_logger(name="roadgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class GraphLogging(NoopHooks):
    """
    Structured logs for graph construction and cost lookups.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._seen = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _sampled(self) -> bool:
        self._seen += 1
        return self.debug and (self._seen % self.sample_every) == 0

    # --------------- Graph events -----------------------

    def vertex_added(self, location, *, num_vertices: int):
        if self._sampled():
            self._emit("DEBUG", "vertex_added", lat=location.lat, lon=location.lon, num_vertices=num_vertices)

    def edge_added(self, edge, *, num_edges: int):
        if self._sampled():
            self._emit(
                "DEBUG",
                "edge_added",
                road=edge.road_name,
                start=str(edge.start_point),
                end=str(edge.end_point),
                length=edge.length,
                num_edges=num_edges,
            )

    def missing_edge(self, node, neighbor, *, cost: float):
        self._emit("WARNING", "missing_edge", start=str(node.location), end=str(neighbor.location), cost=cost)
