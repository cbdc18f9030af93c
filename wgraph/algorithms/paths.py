"""Path reconstruction helpers shared by the search strategies."""

from typing import Dict, List, Optional, Sequence

from wgraph.graph.store import Vertex, VertexID, WeightedGraph


def build_path(
    pred: Dict[Vertex, Optional[Vertex]], destination: Vertex
) -> List[VertexID]:
    """Resolve a predecessor map into the path ending at ``destination``.

    Args:
        pred: Predecessors encoded as ``{vertex: previous_vertex}``. The search
            source maps to None.
        destination: Last vertex of the path.

    Returns:
        Vertex identities ordered from the source to ``destination``, or an
        empty list if ``destination`` was never reached.
    """
    if destination not in pred:
        return []

    path: List[VertexID] = []
    at: Optional[Vertex] = destination
    while at is not None:
        path.append(at.identity)
        at = pred[at]
    path.reverse()
    return path


def path_weight(graph: WeightedGraph, path: Sequence[VertexID]) -> float:
    """Return the total edge weight along ``path``.

    A single-vertex path weighs 0.0.

    Raises:
        KeyError: If two consecutive identities are not joined by an edge.
    """
    total = 0.0
    for source_id, dest_id in zip(path, path[1:]):
        weight = graph.get_weight(source_id, dest_id)
        if weight is None:
            raise KeyError(f"No edge '{source_id}' -> '{dest_id}' in the graph.")
        total += weight
    return total
