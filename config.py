"""
Behaviour switches for AdjacencyListGraph.
"""

from dataclasses import dataclass

DUPLICATE_VERTEX_POLICIES = ("ignore", "reject")


@dataclass(frozen=True)
class GraphConfig:
    """
    Configuration for an adjacency-list graph.

    Attributes
    ----------
    duplicate_vertex_policy:
        What ``add_vertex`` does with a key that is already present.
        ``"ignore"`` returns the existing record untouched; ``"reject"``
        raises ``DuplicateVertexError``.
    check_invariants:
        Recount vertices and edges after every mutation. Costs O(V + E)
        per call, so it is meant for tests and debugging.
    """

    duplicate_vertex_policy: str = "ignore"
    check_invariants: bool = False

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If ``duplicate_vertex_policy`` is not a known policy.
        """

        if self.duplicate_vertex_policy not in DUPLICATE_VERTEX_POLICIES:
            raise ValueError(
                f"Unknown duplicate_vertex_policy "
                f"{self.duplicate_vertex_policy!r}; "
                f"expected one of {DUPLICATE_VERTEX_POLICIES}."
            )
