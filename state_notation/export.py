# state_notation/export.py
"""Tabular exports of the views (pandas frames, numpy matrices)."""
from __future__ import annotations

import numpy as np
import pandas as pd

from .engine import StateGraph, StateTable

NO_EDGE = -1   # 0 is a real throw height


def states_frame(graph: StateGraph) -> pd.DataFrame:
    h = graph.max_height
    return pd.DataFrame(
        {
            "index": list(range(len(graph.states))),
            "bits": [s.bits for s in graph.states],
            "binary": [s.to_binary_string(h) for s in graph.states],
            "display": [s.display(h) for s in graph.states],
            "abbreviated": [s.to_abbreviated_string(h) for s in graph.states],
            "is_ground": [s == graph.ground_state for s in graph.states],
        }
    )


def edges_frame(graph: StateGraph) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "from": [e.from_state.bits for e in graph.edges],
            "to": [e.to_state.bits for e in graph.edges],
            "throw_height": [e.throw_height for e in graph.edges],
        },
        columns=["from", "to", "throw_height"],
    )


def table_frame(table: StateTable) -> pd.DataFrame:
    """Rows are sources, columns destinations, labelled by binary string; missing edges are <NA>."""
    labels = [s.to_binary_string(table.max_height) for s in table.states]
    return pd.DataFrame(table.cells, index=labels, columns=labels).astype("Int64")


def table_array(table: StateTable) -> np.ndarray:
    n = len(table.states)
    out = np.full((n, n), NO_EDGE, dtype=np.int16)
    for i, row in enumerate(table.cells):
        for j, h in enumerate(row):
            if h is not None:
                out[i, j] = h
    return out
