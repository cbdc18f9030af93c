"""Dijkstra shortest-path search.

Every vertex of the graph is queued up front, the source at distance 0 and
the rest at infinity. A priority update pushes a fresh heap entry; the
superseded entry is skipped when it surfaces (lazy deletion). Heap entries
carry an insertion sequence number, so ties pop in insertion order and vertex
identities never need to be orderable.

Weights must be non-negative. This is not checked here; see
``GraphConfig.reject_negative_weights`` to enforce it at insertion time.
"""

import math
from heapq import heapify, heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from wgraph.algorithms.base import SearchStrategy
from wgraph.algorithms.paths import build_path
from wgraph.graph.store import Vertex, VertexID, Weight
from wgraph.logging import get_logger

logger = get_logger(__name__)


class DijkstraSearch(SearchStrategy):
    """
    Lowest-total-weight path search.

    Complexity:
        O((V + E) log V); unreachable vertices are still popped once each.
    """

    def find_path(
        self, source_id: VertexID, destination_id: VertexID
    ) -> List[VertexID]:
        endpoints = self._resolve_endpoints(source_id, destination_id)
        if endpoints is None:
            return []
        src, dst = endpoints

        seq = count()
        dist: Dict[Vertex, Weight] = {}
        pred: Dict[Vertex, Optional[Vertex]] = {src: None}
        min_pq: List[Tuple[Weight, int, Vertex]] = []
        for vertex in self.graph.vertices().values():
            dist[vertex] = 0.0 if vertex == src else math.inf
            min_pq.append((dist[vertex], next(seq), vertex))
        heapify(min_pq)

        while min_pq:
            current_cost, _, current = heappop(min_pq)
            if current_cost > dist[current]:
                # superseded by a later, cheaper entry
                continue

            if current == dst:
                if math.isinf(current_cost):
                    break
                path = build_path(pred, dst)
                logger.debug(
                    "Dijkstra %r -> %r: cost %s over %d hops",
                    source_id,
                    destination_id,
                    current_cost,
                    len(path) - 1,
                )
                return path

            if math.isinf(current_cost):
                continue

            for neighbor, weight in current.adjacent.items():
                alt = current_cost + weight
                if alt < dist[neighbor]:
                    dist[neighbor] = alt
                    pred[neighbor] = current
                    heappush(min_pq, (alt, next(seq), neighbor))

        logger.debug("Dijkstra %r -> %r: unreachable", source_id, destination_id)
        return []
