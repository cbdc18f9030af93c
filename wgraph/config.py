"""Configuration classes for wgraph components."""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Validation policy applied by ``WeightedGraph`` when edges are added."""

    # Raise UnknownVertexError instead of dropping edges to unregistered vertices
    strict_edges: bool = False

    # Raise InvalidWeightError for weights below zero
    reject_negative_weights: bool = False


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
