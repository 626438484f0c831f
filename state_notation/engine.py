# state_notation/engine.py
"""
Graph, table and throws views. All three are assembled from the same
``transitions_from`` so they can never disagree about which throws exist.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .enumerator import generate_states
from .params import Params
from .state import State
from .transition import Throw, Transition, transitions_from


@dataclass
class TransitionSet:
    states: List[State]
    transitions: List[Transition]
    ground_state: State
    num_props: int
    max_height: int


@dataclass(frozen=True)
class Edge:
    from_state: State
    to_state: State
    throw_height: int


@dataclass
class StateGraph:
    states: List[State]
    edges: List[Edge]
    ground_state: State
    num_props: int
    max_height: int


@dataclass
class StateTable:
    states: List[State]
    cells: List[List[Optional[int]]]   # cells[from_idx][to_idx] = throw height or None
    ground_state: State
    num_props: int
    max_height: int
    index: Dict[State, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.index = {s: i for i, s in enumerate(self.states)}

    def height(self, from_state: State, to_state: State) -> Optional[int]:
        return self.cells[self.index[from_state]][self.index[to_state]]


def compute_transitions(params: Params) -> TransitionSet:
    params.validate()

    states = generate_states(params.num_props, params.max_height)
    transitions = [t for s in states for t in transitions_from(s, params.max_height)]

    return TransitionSet(
        states=states,
        transitions=transitions,
        # validated params always give at least the ground state
        ground_state=states[0],
        num_props=params.num_props,
        max_height=params.max_height,
    )


def compute_graph(params: Params) -> StateGraph:
    ts = compute_transitions(params)
    edges = [Edge(t.from_state, t.to_state, t.throw_height) for t in ts.transitions]
    return StateGraph(
        states=ts.states,
        edges=edges,
        ground_state=ts.ground_state,
        num_props=ts.num_props,
        max_height=ts.max_height,
    )


def compute_table(params: Params) -> StateTable:
    ts = compute_transitions(params)

    index: Dict[State, int] = {s: i for i, s in enumerate(ts.states)}
    n = len(ts.states)
    cells: List[List[Optional[int]]] = [[None] * n for _ in range(n)]
    for t in ts.transitions:
        cells[index[t.from_state]][index[t.to_state]] = t.throw_height

    return StateTable(
        states=ts.states,
        cells=cells,
        ground_state=ts.ground_state,
        num_props=ts.num_props,
        max_height=ts.max_height,
    )


def compute_throws(state: State, max_height: int) -> List[Throw]:
    """Outgoing throws of any state valid under ``max_height``; no prop count needed."""
    state = State.new(state.bits, max_height)
    return [t.as_throw() for t in transitions_from(state, max_height)]
