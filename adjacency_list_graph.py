"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using an adjacency-list representation:
a key -> Vertex mapping, where each Vertex owns its outgoing
(neighbor, weight) entries, plus vertex and edge counters kept in
lock-step with the mapping.
"""

import logging
from numbers import Integral
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from config import GraphConfig
from errors import DuplicateVertexError, InvariantViolation
from graph import Graph
from vertex import Vertex

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a key -> Vertex mapping.

    Queries against missing vertices answer None / False / [] rather than
    raising. Only counter corruption raises (InvariantViolation).
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config if config is not None else GraphConfig()
        self.config.validate()
        self._vertices: Dict[Hashable, Vertex] = {}
        self._vertex_count = 0
        self._edge_count = 0

    # --- Counters ------------------------------------------------------------

    def _adjust_counts(self, vertices: int = 0, edges: int = 0) -> None:
        """Single entry point for every counter change."""
        new_vertices = self._vertex_count + vertices
        new_edges = self._edge_count + edges
        if new_vertices < 0 or new_edges < 0:
            raise InvariantViolation(
                f"Counter underflow: vertices {self._vertex_count}{vertices:+d}, "
                f"edges {self._edge_count}{edges:+d}"
            )
        self._vertex_count = new_vertices
        self._edge_count = new_edges

    def _after_mutation(self) -> None:
        if self.config.check_invariants:
            self.check_invariants()

    def check_invariants(self) -> None:
        """
        Recount vertices and edges from the mapping and compare with the
        maintained counters.

        Raises:
            InvariantViolation: if either counter has drifted.
        """
        actual_vertices = len(self._vertices)
        actual_edges = sum(v.out_degree() for v in self._vertices.values())
        if actual_vertices != self._vertex_count:
            raise InvariantViolation(
                f"vertex_count is {self._vertex_count} but graph holds "
                f"{actual_vertices} vertices"
            )
        if actual_edges != self._edge_count:
            raise InvariantViolation(
                f"edge_count is {self._edge_count} but graph holds "
                f"{actual_edges} edges"
            )

    # --- Graph interface -----------------------------------------------------

    def is_empty(self) -> bool:
        return self._vertex_count == 0

    def vertex_count(self) -> int:
        return self._vertex_count

    def edge_count(self) -> int:
        return self._edge_count

    def contains(self, key: Hashable) -> bool:
        return key in self._vertices

    def add_vertex(self, key: Hashable) -> Vertex:
        """
        Insert key with no edges.

        An existing key is left untouched: its record is returned under the
        "ignore" policy, DuplicateVertexError is raised under "reject".

        Returns:
            A snapshot of the stored record.
        """
        existing = self._vertices.get(key)
        if existing is not None:
            if self.config.duplicate_vertex_policy == "reject":
                logger.warning("Rejected duplicate vertex %r", key)
                raise DuplicateVertexError(key)
            return existing.copy()

        vertex = Vertex(key)
        self._vertices[key] = vertex
        self._adjust_counts(vertices=1)
        logger.debug("Added vertex %r", key)
        self._after_mutation()
        return vertex.copy()

    def get_vertex(self, key: Hashable) -> Optional[Vertex]:
        """Snapshot of key's record; changing it does not touch the graph."""
        vertex = self._vertices.get(key)
        if vertex is None:
            return None
        return vertex.copy()

    def vertex_keys(self) -> List[Hashable]:
        return list(self._vertices)

    def remove_vertex(self, key: Hashable) -> Optional[Vertex]:
        """
        Remove key, its outgoing edges and every edge pointing at it.

        A self-loop on key lives in key's own record, so it is counted once
        with the outgoing edges and is not revisited by the incoming scan.
        Counters are checked before anything is removed.

        Returns:
            The removed record with its outgoing edges as they were, or None
            if key was not a vertex.
        """
        vertex = self._vertices.get(key)
        if vertex is None:
            logger.debug("remove_vertex: %r not found", key)
            return None

        outgoing = vertex.out_degree()
        incoming = sum(
            other.get_neighbors().count(key)
            for other in self._vertices.values()
            if other is not vertex
        )
        self._adjust_counts(vertices=-1, edges=-(outgoing + incoming))

        del self._vertices[key]
        for other in self._vertices.values():
            other.remove_neighbor(key)

        logger.debug(
            "Removed vertex %r (%d outgoing, %d incoming edges)",
            key,
            outgoing,
            incoming,
        )
        self._after_mutation()
        return vertex

    def add_edge(self, src: Hashable, dst: Hashable, weight: int) -> None:
        """
        Append src -> dst with weight. Auto-adds missing endpoints.

        No existing-edge check: repeating the call adds a parallel edge.

        Raises:
            TypeError: if weight is not an integer (bool included).
        """
        if isinstance(weight, bool) or not isinstance(weight, Integral):
            raise TypeError(
                f"Edge weight must be an int, got {type(weight).__name__}"
            )
        weight = int(weight)

        if src not in self._vertices:
            self.add_vertex(src)
        if dst not in self._vertices:
            self.add_vertex(dst)

        self._vertices[src].add_neighbor(dst, weight)
        self._adjust_counts(edges=1)
        logger.debug("Added edge %r -> %r (weight %d)", src, dst, weight)
        self._after_mutation()

    def adjacent(self, src: Hashable, dst: Hashable) -> bool:
        """True if src has an edge to dst. False if src is not a vertex."""
        vertex = self._vertices.get(src)
        if vertex is None:
            return False
        return vertex.adjacent_key(dst)

    def get_neighbors(self, key: Hashable) -> List[Hashable]:
        vertex = self._vertices.get(key)
        if vertex is None:
            return []
        return vertex.get_neighbors()

    def get_neighbor_weight(self, src: Hashable, dst: Hashable) -> Optional[int]:
        vertex = self._vertices.get(src)
        if vertex is None:
            return None
        return vertex.get_neighbor_weight(dst)

    # --- Read helpers --------------------------------------------------------

    def outgoing(self, key: Hashable) -> List[Tuple[Hashable, int]]:
        """(neighbor, weight) entries of key, in insertion order."""
        vertex = self._vertices.get(key)
        if vertex is None:
            return []
        return list(vertex.neighbors)  # defensive copy

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self._vertex_count

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.vertex_keys())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self._vertex_count}, "
            f"edges={self._edge_count})"
        )
