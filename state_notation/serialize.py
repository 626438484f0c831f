# state_notation/serialize.py
"""
JSON presentation of the views.

Two modes for every state value:
  - compact:  the raw bitmask as an integer
  - default:  a ``max_height``-long '0'/'1' string, MSB first,
              or LSB first when ``reversed`` is set
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from .engine import StateGraph, StateTable
from .state import State
from .transition import Throw

StateValue = Union[int, str]


def state_value(state: State, max_height: int, compact: bool = False, reversed: bool = False) -> StateValue:
    if compact:
        return state.bits
    binary = state.to_binary_string(max_height)
    return binary[::-1] if reversed else binary


def graph_payload(graph: StateGraph, compact: bool = False, reversed: bool = False) -> Dict[str, Any]:
    h = graph.max_height

    def sv(s: State) -> StateValue:
        return state_value(s, h, compact, reversed)

    return {
        "nodes": [sv(s) for s in graph.states],
        "edges": [
            {"from": sv(e.from_state), "to": sv(e.to_state), "throw_height": e.throw_height}
            for e in graph.edges
        ],
        "ground_state": sv(graph.ground_state),
        "num_nodes": len(graph.states),
        "num_edges": len(graph.edges),
        "max_height": h,
        "num_props": graph.num_props,
    }


def table_payload(table: StateTable, compact: bool = False, reversed: bool = False) -> Dict[str, Any]:
    h = table.max_height
    return {
        "states": [state_value(s, h, compact, reversed) for s in table.states],
        "cells": table.cells,
        "ground_state": state_value(table.ground_state, h, compact, reversed),
        "num_states": len(table.states),
        "max_height": h,
        "num_props": table.num_props,
    }


def throws_payload(
    state: State, max_height: int, throws: List[Throw], compact: bool = False, reversed: bool = False
) -> Dict[str, Any]:
    return {
        "throws": [
            {"height": t.height, "destination": state_value(t.destination, max_height, compact, reversed)}
            for t in throws
        ],
        "state": state_value(state, max_height, compact, reversed),
        "max_height": max_height,
        "num_throws": len(throws),
    }


def _dumps(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def render_graph(graph: StateGraph, compact: bool = False, reversed: bool = False) -> bytes:
    return _dumps(graph_payload(graph, compact, reversed))


def render_table(table: StateTable, compact: bool = False, reversed: bool = False) -> bytes:
    return _dumps(table_payload(table, compact, reversed))


def render_throws(
    state: State, max_height: int, throws: List[Throw], compact: bool = False, reversed: bool = False
) -> bytes:
    return _dumps(throws_payload(state, max_height, throws, compact, reversed))


def cache_key(kind: str, num_props: int, max_height: int, compact: bool = False, reversed: bool = False) -> str:
    """e.g. graph-3-5-false-false; safe to use as a file name."""
    flags = "-".join("true" if f else "false" for f in (compact, reversed))
    return f"{kind}-{num_props}-{max_height}-{flags}"
