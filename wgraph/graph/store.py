"""Weighted directed graph store.

`WeightedGraph` owns one `Vertex` per identity. Vertices keep their outgoing
adjacency as a ``{Vertex: weight}`` mapping, while equality and hashing use the
identity alone so a vertex stays a stable dictionary key as edges are added.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import Dict, Hashable, Iterator, Mapping, Optional, Tuple

from wgraph.config import GRAPH_CONFIG, GraphConfig
from wgraph.logging import get_logger

VertexID = Hashable
Weight = float
EdgeTuple = Tuple[VertexID, VertexID, Weight]

logger = get_logger(__name__)


class UnknownVertexError(KeyError):
    """An edge endpoint is not registered in the graph."""


class InvalidWeightError(ValueError):
    """An edge weight is not a finite number, or is negative when rejected."""


@dataclass(unsafe_hash=True)
class Vertex:
    """Graph node wrapping one identity and its outgoing weighted adjacency.

    Attributes:
        identity: User-supplied hashable key naming the vertex.
        adjacent: Outgoing neighbors mapped to edge weight. Excluded from
            equality, hash and repr.
    """

    identity: VertexID
    adjacent: Dict["Vertex", Weight] = field(
        default_factory=dict, compare=False, hash=False, repr=False
    )

    def add_adjacent_vertex(self, destination: Vertex, weight: Weight) -> None:
        """Record or overwrite the edge ``self -> destination``."""
        self.adjacent[destination] = weight


class WeightedGraph:
    """In-memory directed graph with weighted edges.

    Vertices must be registered with :meth:`add_vertex` before edges can
    reference them. By default an edge naming an unknown vertex is dropped;
    ``GraphConfig.strict_edges`` turns that into :class:`UnknownVertexError`.

    The graph is not synchronized. Searches read it without copying, so it
    must not be mutated while a search is running.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        """Initialize an empty graph.

        Args:
            config: Validation policy. Defaults to the global ``GRAPH_CONFIG``.
        """
        self.config = config if config is not None else GRAPH_CONFIG
        self._vertices: Dict[VertexID, Vertex] = {}

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        num_edges = sum(len(v.adjacent) for v in self._vertices.values())
        return f"WeightedGraph(vertices={len(self._vertices)}, edges={num_edges})"

    #
    # Vertex management
    #
    def add_vertex(self, vertex_id: VertexID) -> None:
        """Register a vertex. Re-adding an existing identity changes nothing.

        Args:
            vertex_id: Identity of the vertex.
        """
        if vertex_id not in self._vertices:
            self._vertices[vertex_id] = Vertex(vertex_id)

    def get_vertex(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex for ``vertex_id``, or None if it is not registered."""
        return self._vertices.get(vertex_id)

    def vertices(self) -> Mapping[VertexID, Vertex]:
        """Return a read-only view of identity -> vertex in insertion order."""
        return MappingProxyType(self._vertices)

    #
    # Edge management
    #
    def add_edge(
        self, source_id: VertexID, dest_id: VertexID, weight: Weight
    ) -> None:
        """Add or overwrite the directed edge ``source_id -> dest_id``.

        Args:
            source_id: Identity of the source vertex.
            dest_id: Identity of the destination vertex.
            weight: Finite edge weight. Dijkstra search requires it to be
                non-negative.

        Raises:
            InvalidWeightError: If the weight is not a finite number, or is
                negative while ``config.reject_negative_weights`` is set.
            UnknownVertexError: If an endpoint is not registered and
                ``config.strict_edges`` is set.
        """
        weight = self.validate_weight(source_id, dest_id, weight)

        source_vertex = self._vertices.get(source_id)
        dest_vertex = self._vertices.get(dest_id)
        if source_vertex is None or dest_vertex is None:
            missing = source_id if source_vertex is None else dest_id
            if self.config.strict_edges:
                raise UnknownVertexError(f"Vertex '{missing}' does not exist.")
            logger.debug(
                "Ignoring edge %r -> %r: vertex %r does not exist",
                source_id,
                dest_id,
                missing,
            )
            return

        source_vertex.add_adjacent_vertex(dest_vertex, weight)

    def get_weight(self, source_id: VertexID, dest_id: VertexID) -> Optional[Weight]:
        """Return the weight of ``source_id -> dest_id``, or None if there is no such edge."""
        source_vertex = self._vertices.get(source_id)
        dest_vertex = self._vertices.get(dest_id)
        if source_vertex is None or dest_vertex is None:
            return None
        return source_vertex.adjacent.get(dest_vertex)

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield ``(source_id, dest_id, weight)`` for every edge."""
        for vertex in self._vertices.values():
            for neighbor, weight in vertex.adjacent.items():
                yield vertex.identity, neighbor.identity, weight

    def validate_weight(
        self, source_id: VertexID, dest_id: VertexID, weight: Weight
    ) -> Weight:
        """Check a weight against this graph's policy and return it as a float.

        Raises:
            InvalidWeightError: If the weight is not a finite number, or is
                negative while ``config.reject_negative_weights`` is set.
        """
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise InvalidWeightError(
                f"Edge '{source_id}' -> '{dest_id}' has non-numeric weight {weight!r}."
            )
        weight = float(weight)
        if not math.isfinite(weight):
            raise InvalidWeightError(
                f"Edge '{source_id}' -> '{dest_id}' has non-finite weight {weight}."
            )
        if weight < 0 and self.config.reject_negative_weights:
            raise InvalidWeightError(
                f"Edge '{source_id}' -> '{dest_id}' has negative weight {weight}."
            )
        return weight
