"""
Vertex record for the adjacency-list graph.

A vertex owns its outgoing edges as an ordered list of (neighbor, weight)
pairs. Neighbors are stored by key, not by reference to their records.
"""

from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Tuple


@dataclass
class Vertex:
    """
    Key plus ordered neighbor list.

    Parallel edges are kept as separate entries in insertion order.
    """

    key: Hashable
    neighbors: List[Tuple[Hashable, int]] = field(default_factory=list)

    def add_neighbor(self, key: Hashable, weight: int) -> None:
        self.neighbors.append((key, weight))

    def adjacent_key(self, key: Hashable) -> bool:
        """True if any entry points at key."""
        return any(nbr == key for nbr, _ in self.neighbors)

    def get_neighbors(self) -> List[Hashable]:
        """Neighbor keys in insertion order, duplicates included."""
        return [nbr for nbr, _ in self.neighbors]

    def get_neighbor_weight(self, key: Hashable) -> Optional[int]:
        """
        Weight of the first entry pointing at key.

        Returns None when there is no such entry, so a zero-weight edge is
        not confused with a missing one.
        """
        for nbr, weight in self.neighbors:
            if nbr == key:
                return weight
        return None

    def remove_neighbor(self, key: Hashable) -> int:
        """
        Drop every entry pointing at key.

        Returns:
            Number of entries removed.
        """
        kept = [(nbr, w) for nbr, w in self.neighbors if nbr != key]
        removed = len(self.neighbors) - len(kept)
        self.neighbors = kept
        return removed

    def out_degree(self) -> int:
        return len(self.neighbors)

    def copy(self) -> "Vertex":
        return Vertex(self.key, list(self.neighbors))
