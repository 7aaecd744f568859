"""
Directed, weighted graph abstraction.

Vertices are identified by arbitrary hashable keys.
Edges are directed: u -> v with an int weight. Parallel edges and
self-loops are allowed.
"""

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional

from vertex import Vertex


class Graph(ABC):
    """Directed, weighted graph over hashable vertex keys."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the graph has no vertices."""
        raise NotImplementedError

    @abstractmethod
    def vertex_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def edge_count(self) -> int:
        """Number of directed edges, self-loops and parallel edges included."""
        raise NotImplementedError

    @abstractmethod
    def contains(self, key: Hashable) -> bool:
        raise NotImplementedError

    @abstractmethod
    def add_vertex(self, key: Hashable) -> Vertex:
        """
        Ensure key exists in the graph.

        Returns: a snapshot of the vertex record stored under key.
        """
        raise NotImplementedError

    @abstractmethod
    def get_vertex(self, key: Hashable) -> Optional[Vertex]:
        """Read-only lookup: a snapshot of the record, or None."""
        raise NotImplementedError

    @abstractmethod
    def vertex_keys(self) -> List[Hashable]:
        """Snapshot of all vertex keys; unaffected by later mutation."""
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, key: Hashable) -> Optional[Vertex]:
        """
        Remove key together with every edge leaving or entering it.

        Returns: the removed record, or None if key was not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def add_edge(self, src: Hashable, dst: Hashable, weight: int) -> None:
        """
        Append a directed edge src -> dst with weight.
        Auto-adds vertices that don't exist.
        """
        raise NotImplementedError

    @abstractmethod
    def adjacent(self, src: Hashable, dst: Hashable) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_neighbors(self, key: Hashable) -> List[Hashable]:
        raise NotImplementedError

    @abstractmethod
    def get_neighbor_weight(self, src: Hashable, dst: Hashable) -> Optional[int]:
        """
        Weight of the first src -> dst edge.

        Returns: the weight, or None if there is no such edge.
        """
        raise NotImplementedError
