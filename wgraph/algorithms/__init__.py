"""Path search algorithms over `WeightedGraph`."""

from wgraph.algorithms.base import SearchAlgorithm, SearchStrategy, search_fabric
from wgraph.algorithms.bfs import BreadthFirstSearch
from wgraph.algorithms.dijkstra import DijkstraSearch
from wgraph.algorithms.paths import build_path, path_weight

__all__ = [
    "BreadthFirstSearch",
    "DijkstraSearch",
    "SearchAlgorithm",
    "SearchStrategy",
    "build_path",
    "path_weight",
    "search_fabric",
]
