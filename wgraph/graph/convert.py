"""Graph conversion utilities between WeightedGraph and NetworkX graphs.

Edge weights are carried in a single edge attribute (``"weight"`` by default)
so the converted graph can be used directly with NetworkX path algorithms.
"""

from typing import Optional

import networkx as nx

from wgraph.config import GraphConfig
from wgraph.graph.store import WeightedGraph


def to_networkx(graph: WeightedGraph, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a WeightedGraph to a NetworkX DiGraph.

    Args:
        graph: The WeightedGraph to convert.
        weight_attr: Name of the edge attribute receiving the weight.

    Returns:
        A NetworkX DiGraph with the same vertices (in insertion order) and
        directed weighted edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    for source_id, dest_id, weight in graph.edges():
        nx_graph.add_edge(source_id, dest_id, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    config: Optional[GraphConfig] = None,
) -> WeightedGraph:
    """Build a WeightedGraph from a NetworkX graph.

    Undirected graphs produce an edge in each direction. For multigraphs the
    lowest weight between two nodes is kept, since the store holds at most one
    edge per ordered pair.

    Args:
        nx_graph: Any NetworkX graph.
        weight_attr: Edge attribute to read the weight from.
        default_weight: Weight for edges without ``weight_attr``.
        config: Validation policy for the new graph.

    Returns:
        A WeightedGraph holding the same nodes and edges.

    Raises:
        InvalidWeightError: If an edge weight fails validation.
    """
    graph = WeightedGraph(config)
    for node in nx_graph.nodes:
        graph.add_vertex(node)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        pairs = [(u, v)] if directed else [(u, v), (v, u)]
        for src, dst in pairs:
            # Validated before comparing with an existing parallel edge
            weight = graph.validate_weight(
                src, dst, data.get(weight_attr, default_weight)
            )
            existing = graph.get_weight(src, dst)
            if existing is None or weight < existing:
                graph.add_edge(src, dst, weight)
    return graph
