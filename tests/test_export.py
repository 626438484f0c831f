from state_notation.engine import compute_graph, compute_table
from state_notation.export import NO_EDGE, edges_frame, states_frame, table_array, table_frame
from state_notation.params import Params


def test_states_frame():
    df = states_frame(compute_graph(Params(3, 5)))
    assert len(df) == 10
    assert df.loc[0, "binary"] == "00111"
    assert df.loc[0, "abbreviated"] == "200"
    assert df["is_ground"].sum() == 1

def test_edges_frame():
    df = edges_frame(compute_graph(Params(3, 5)))
    assert list(df.columns) == ["from", "to", "throw_height"]
    assert len(df) == 22

def test_table_frame_and_array():
    t = compute_table(Params(3, 5))
    df = table_frame(t)
    assert df.shape == (10, 10)
    assert int(df.loc["00111", "10011"]) == 5
    assert int(df.notna().sum().sum()) == 22

    arr = table_array(t)
    assert arr.shape == (10, 10)
    assert int((arr != NO_EDGE).sum()) == 22
    assert arr[0, 0] == 3
