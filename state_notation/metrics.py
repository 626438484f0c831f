# state_notation/metrics.py
"""
Size helpers for parameter sweeps:
  • combinations         : number of states, C(max_height, num_props)
  • expected_edge_count  : closed form for the number of throws in a graph
  • avg_branching        : edges per state
  • summary              : one row per (num_props, max_height) as a DataFrame
"""
from __future__ import annotations

from typing import Iterable, List, Dict

import pandas as pd
from tqdm import tqdm

from .engine import compute_graph
from .params import Params


def combinations(n: int, k: int) -> int:
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def expected_edge_count(num_props: int, max_height: int) -> int:
    """
    States with a prop at beat 0 (C(h-1, n-1) of them) each have h-(n-1)
    throws; the others (C(h-1, n)) each have the single zero-throw.
    """
    if max_height == 0:
        return 1
    landing = combinations(max_height - 1, num_props - 1) if num_props > 0 else 0
    idle = combinations(max_height - 1, num_props)
    return landing * (max_height - num_props + 1) + idle


def avg_branching(transitions: int, states: int) -> float:
    return transitions / states if states else 0.0


def summary(max_heights: Iterable[int], max_states: int = 10_000, verbose: bool = False) -> pd.DataFrame:
    """
    Compute every graph with max_height in ``max_heights`` and at most
    ``max_states`` states; pairs above the limit are listed with computed=False
    and closed-form counts.
    """
    pairs = [(n, h) for h in max_heights for n in range(0, h + 1)]
    rows: List[Dict] = []
    for n, h in tqdm(pairs, desc="summary", disable=not verbose):
        num_states = combinations(h, n)
        row = {"num_props": n, "max_height": h, "states": num_states}
        if num_states <= max_states:
            g = compute_graph(Params(n, h))
            row["edges"] = len(g.edges)
            row["computed"] = True
        else:
            row["edges"] = expected_edge_count(n, h)
            row["computed"] = False
        row["avg_branching"] = avg_branching(row["edges"], num_states)
        rows.append(row)
    return pd.DataFrame(rows, columns=["num_props", "max_height", "states", "edges", "computed", "avg_branching"])
