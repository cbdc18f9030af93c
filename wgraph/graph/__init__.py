"""Graph primitives and helpers.

This package provides the weighted directed graph store `WeightedGraph` and
conversion helpers to and from NetworkX (`convert`).
"""

from wgraph.graph.store import (
    InvalidWeightError,
    UnknownVertexError,
    Vertex,
    VertexID,
    WeightedGraph,
)

__all__ = [
    "InvalidWeightError",
    "UnknownVertexError",
    "Vertex",
    "VertexID",
    "WeightedGraph",
]
