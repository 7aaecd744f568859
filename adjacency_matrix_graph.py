"""
Fixed-size adjacency-matrix graph over dense integer ids.

The node count is fixed at construction; ids outside [0, nodes) are
reported and ignored. Edges are unweighted and cannot be removed.
"""

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixVertex:
    """
    Dense id plus a display name.
    """

    id: int
    name: str = ""


VertexRef = Union[MatrixVertex, int]


def _vertex_id(v: VertexRef) -> int:
    return v.id if isinstance(v, MatrixVertex) else int(v)


class AdjacencyMatrixGraph:
    """
    Directed graph stored as an N x N boolean matrix.
    """

    def __init__(self, nodes: int) -> None:
        if nodes < 0:
            raise ValueError("nodes must be non-negative")
        self.nodes = nodes
        self.matrix = np.zeros((nodes, nodes), dtype=bool)

    def _in_range(self, i: int) -> bool:
        return 0 <= i < self.nodes

    def is_empty(self) -> bool:
        return self.nodes == 0

    def len(self) -> int:
        return self.nodes

    def __len__(self) -> int:
        return self.nodes

    def add_edge(self, n1: VertexRef, n2: VertexRef) -> bool:
        """
        Set the n1 -> n2 cell.

        Returns:
            False, with nothing changed, if either id is outside the graph.
        """
        i, j = _vertex_id(n1), _vertex_id(n2)
        if not (self._in_range(i) and self._in_range(j)):
            logger.warning(
                "Edge %d -> %d is outside the graph (%d nodes)", i, j, self.nodes
            )
            return False
        self.matrix[i, j] = True
        return True

    def has_edge(self, n1: VertexRef, n2: VertexRef) -> bool:
        i, j = _vertex_id(n1), _vertex_id(n2)
        if not (self._in_range(i) and self._in_range(j)):
            return False
        return bool(self.matrix[i, j])

    def edge_count(self) -> int:
        return int(np.count_nonzero(self.matrix))
