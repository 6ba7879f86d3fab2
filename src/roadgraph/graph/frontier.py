# graph/frontier.py

import heapq
from collections.abc import Callable

from roadgraph.domain.entities.node import MapNode, cost_key

NodeKey = Callable[[MapNode], float]


class Frontier:
    """Min-heap of nodes; FIFO among equal keys. Keys are read at push time."""

    def __init__(self, key: NodeKey = cost_key):
        self._key = key
        self._q: list[tuple[float, int, MapNode]] = []
        self._seq = 0

    def push(self, node: MapNode) -> None:
        self._seq += 1
        heapq.heappush(self._q, (self._key(node), self._seq, node))

    def pop(self) -> MapNode:
        if not self._q:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._q)[2]

    def peek(self) -> MapNode:
        if not self._q:
            raise IndexError("peek at empty frontier")
        return self._q[0][2]

    def clear(self) -> None:
        self._q.clear()

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
