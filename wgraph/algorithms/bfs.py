from collections import deque
from typing import Deque, Dict, List, Optional

from wgraph.algorithms.base import SearchStrategy
from wgraph.algorithms.paths import build_path
from wgraph.graph.store import Vertex, VertexID
from wgraph.logging import get_logger

logger = get_logger(__name__)


class BreadthFirstSearch(SearchStrategy):
    """
    Fewest-hop path search. Edge weights are ignored.

    Among equal-hop paths the one found first wins, which follows the order
    edges were added to each vertex.
    """

    def find_path(
        self, source_id: VertexID, destination_id: VertexID
    ) -> List[VertexID]:
        endpoints = self._resolve_endpoints(source_id, destination_id)
        if endpoints is None:
            return []
        src, dst = endpoints

        queue: Deque[Vertex] = deque([src])
        pred: Dict[Vertex, Optional[Vertex]] = {src: None}  # doubles as visited set
        while queue:
            current = queue.popleft()
            if current == dst:
                path = build_path(pred, dst)
                logger.debug(
                    "BFS %r -> %r: %d hops", source_id, destination_id, len(path) - 1
                )
                return path

            for neighbor in current.adjacent:
                if neighbor not in pred:
                    # mark on enqueue so a vertex is queued at most once
                    pred[neighbor] = current
                    queue.append(neighbor)

        logger.debug("BFS %r -> %r: unreachable", source_id, destination_id)
        return []
