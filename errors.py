"""
Exception types for the graph ADT.

Missing vertices and edges are not errors here: lookups report them as
None / False / empty results. Exceptions are reserved for rejected input
and for internal bookkeeping that has lost consistency.
"""


class GraphError(Exception):
    """Base class for graph errors."""


class DuplicateVertexError(GraphError, ValueError):
    """
    Raised when a vertex key is inserted twice under the "reject" policy.
    """

    def __init__(self, key) -> None:
        super().__init__(f"Vertex {key!r} already exists.")
        self.key = key


class InvariantViolation(GraphError, AssertionError):
    """
    Vertex/edge counters disagree with the stored structure.

    Signals a bug in the graph itself; callers should not try to recover.
    """
