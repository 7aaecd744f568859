"""
Walkthrough of both graph representations, printed to stdout.
"""

import argparse
import logging
from typing import List, Optional

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph, MatrixVertex

logger = logging.getLogger(__name__)

# (src, dst, weight)
DEMO_EDGES = (
    (0, 1, 5),
    (0, 5, 2),
    (1, 2, 4),
    (2, 3, 9),
    (3, 4, 7),
    (3, 5, 3),
    (4, 0, 1),
    (4, 4, 8),
)


def run_list_demo() -> AdjacencyListGraph:
    g = AdjacencyListGraph()
    for i in range(6):
        g.add_vertex(i)
    print(f"vertex keys: {g.vertex_keys()}")

    for src, dst, weight in DEMO_EDGES:
        g.add_edge(src, dst, weight)

    print(f"vertex count: {g.vertex_count()}")
    print(f"edge count: {g.edge_count()}")
    print(f"contains 0: {g.contains(0)}")
    print(f"weight 0 -> 1: {g.get_neighbor_weight(0, 1)}")

    for nbr in g.get_neighbors(0):
        print(f"neighbor of 0: {nbr}")
    for nbr, weight in g.outgoing(0):
        print(f"0 -> {nbr} weight {weight}")

    print(f"0 adjacent to 1: {g.adjacent(0, 1)}")
    print(f"3 adjacent to 2: {g.adjacent(3, 2)}")

    removed = g.remove_vertex(0)
    if removed is not None:
        print(f"removed vertex: {removed.key}")
    print(f"remaining vertex count: {g.vertex_count()}")
    print(f"remaining edge count: {g.edge_count()}")
    print(f"contains 0: {g.contains(0)}")
    return g


def run_matrix_demo() -> AdjacencyMatrixGraph:
    g = AdjacencyMatrixGraph(4)
    n1, n2, n3, n4 = (MatrixVertex(i, f"node{i + 1}") for i in range(4))
    for a, b in ((n1, n2), (n1, n3), (n2, n3), (n2, n4), (n3, n4), (n3, n1)):
        g.add_edge(a, b)

    print(f"matrix edge count: {g.edge_count()}")
    print(f"graph empty: {g.is_empty()}")
    print(f"graph nodes: {len(g)}")
    return g


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every graph mutation"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running adjacency-list demo")
    run_list_demo()
    logger.debug("Running adjacency-matrix demo")
    run_matrix_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
