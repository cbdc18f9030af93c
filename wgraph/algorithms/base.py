"""Search strategy interface and algorithm selection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, Optional, Tuple

from wgraph.graph.store import Vertex, VertexID, WeightedGraph
from wgraph.logging import get_logger

logger = get_logger(__name__)


class SearchAlgorithm(IntEnum):
    """Path search strategies available over a WeightedGraph."""

    #: Fewest hops; edge weights are ignored.
    BFS = 1
    #: Lowest total weight; weights must be non-negative.
    DIJKSTRA = 2

    @classmethod
    def from_string(cls, value: str) -> SearchAlgorithm:
        """Parse a case-insensitive algorithm name.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid search algorithm '{value}'. Valid values are: {valid}"
            ) from None


class SearchStrategy(ABC):
    """Path search bound to one graph.

    The graph is held by reference and only read. Each ``find_path`` call
    keeps its working state local, so one strategy can serve repeated calls.
    """

    def __init__(self, graph: WeightedGraph) -> None:
        self.graph = graph

    @abstractmethod
    def find_path(
        self, source_id: VertexID, destination_id: VertexID
    ) -> List[VertexID]:
        """Return the path from ``source_id`` to ``destination_id``.

        Returns:
            Identities from source to destination inclusive. Empty when an
            endpoint is not in the graph or no directed path exists.
        """
        raise NotImplementedError

    def _resolve_endpoints(
        self, source_id: VertexID, destination_id: VertexID
    ) -> Optional[Tuple[Vertex, Vertex]]:
        source = self.graph.get_vertex(source_id)
        destination = self.graph.get_vertex(destination_id)
        if source is None or destination is None:
            logger.debug(
                "%s: endpoint missing (source=%r present=%s, destination=%r present=%s)",
                type(self).__name__,
                source_id,
                source is not None,
                destination_id,
                destination is not None,
            )
            return None
        return source, destination


def search_fabric(
    graph: WeightedGraph, algorithm: SearchAlgorithm = SearchAlgorithm.DIJKSTRA
) -> SearchStrategy:
    """Return a search strategy of the requested kind bound to ``graph``.

    Raises:
        ValueError: If ``algorithm`` is not a known SearchAlgorithm.
    """
    # Local imports: the concrete strategies import this module
    from wgraph.algorithms.bfs import BreadthFirstSearch
    from wgraph.algorithms.dijkstra import DijkstraSearch

    if algorithm == SearchAlgorithm.BFS:
        return BreadthFirstSearch(graph)
    if algorithm == SearchAlgorithm.DIJKSTRA:
        return DijkstraSearch(graph)
    raise ValueError(f"Unknown search algorithm: {algorithm}")
