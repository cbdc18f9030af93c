"""wgraph: in-memory weighted graphs with BFS and Dijkstra path search.

Primary API:
    WeightedGraph - directed graph store with weighted edges
    BreadthFirstSearch - fewest-hop path search
    DijkstraSearch - lowest-weight path search (non-negative weights)
    search_fabric() - build a strategy from a SearchAlgorithm value
    to_networkx() / from_networkx() - NetworkX interop

Example:
    from wgraph import DijkstraSearch, WeightedGraph

    graph = WeightedGraph()
    for name in "ABC":
        graph.add_vertex(name)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)

    DijkstraSearch(graph).find_path("A", "C")  # ["A", "B", "C"]
"""

from __future__ import annotations

from wgraph import logging
from wgraph.algorithms import (
    BreadthFirstSearch,
    DijkstraSearch,
    SearchAlgorithm,
    SearchStrategy,
    build_path,
    path_weight,
    search_fabric,
)
from wgraph.config import GRAPH_CONFIG, GraphConfig
from wgraph.graph.convert import from_networkx, to_networkx
from wgraph.graph.store import (
    InvalidWeightError,
    UnknownVertexError,
    Vertex,
    WeightedGraph,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph store
    "WeightedGraph",
    "Vertex",
    "UnknownVertexError",
    "InvalidWeightError",
    # Search
    "SearchStrategy",
    "SearchAlgorithm",
    "BreadthFirstSearch",
    "DijkstraSearch",
    "search_fabric",
    "build_path",
    "path_weight",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # NetworkX interop
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
