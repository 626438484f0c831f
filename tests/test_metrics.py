from state_notation.engine import compute_graph
from state_notation.metrics import avg_branching, combinations, expected_edge_count, summary
from state_notation.params import Params


def test_combinations():
    assert combinations(5, 3) == 10
    assert combinations(5, 0) == 1
    assert combinations(3, 5) == 0
    assert combinations(32, 16) == 601080390

def test_expected_edge_count_matches_graph():
    for h in range(0, 9):
        for n in range(0, h + 1):
            assert expected_edge_count(n, h) == len(compute_graph(Params(n, h)).edges), (n, h)

def test_avg_branching():
    assert avg_branching(22, 10) == 2.2
    assert avg_branching(5, 0) == 0.0

def test_summary_frame():
    df = summary(range(1, 6), max_states=5)
    row = df[(df["num_props"] == 3) & (df["max_height"] == 5)].iloc[0]
    assert row["states"] == 10
    assert row["edges"] == 22
    assert not row["computed"]
    assert bool(df[(df["num_props"] == 1) & (df["max_height"] == 3)].iloc[0]["computed"])
    assert len(df) == sum(h + 1 for h in range(1, 6))
