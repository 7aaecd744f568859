"""
Smoke test for the demo walkthrough.
"""

from demo import main, run_list_demo


def test_list_demo_final_state():
    g = run_list_demo()

    # vertex 0 had two outgoing edges and one incoming (4 -> 0)
    assert g.vertex_count() == 5
    assert g.edge_count() == 5
    assert not g.contains(0)
    assert g.adjacent(4, 4)


def test_main_prints_walkthrough(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "edge count: 8" in out
    assert "weight 0 -> 1: 5" in out
    assert "3 adjacent to 2: False" in out
    assert "removed vertex: 0" in out
    assert "remaining edge count: 5" in out
    assert "matrix edge count: 6" in out
    assert "graph nodes: 4" in out
