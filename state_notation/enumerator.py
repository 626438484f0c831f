# state_notation/enumerator.py
from __future__ import annotations

from typing import List

from .state import State


def _backtrack(max_height: int, pos: int, props_left: int, current: int, out: List[State]) -> None:
    remaining = max_height - pos
    if props_left > remaining:
        return
    if pos == max_height:
        if props_left == 0:
            out.append(State(current))
        return

    # leave the bit clear first: the first complete state found is the ground state
    _backtrack(max_height, pos + 1, props_left, current, out)

    if props_left > 0:
        bit = 1 << (max_height - 1 - pos)
        _backtrack(max_height, pos + 1, props_left - 1, current | bit, out)


def generate_states(num_props: int, max_height: int) -> List[State]:
    """
    Every state with exactly ``num_props`` props among ``max_height`` beats,
    C(max_height, num_props) of them. ``states[0]`` is always the ground state.

    Params are expected to be validated already.
    """
    if num_props < 0 or num_props > max_height:
        raise ValueError(f"cannot place {num_props} props in {max_height} beats")
    states: List[State] = []
    _backtrack(max_height, 0, num_props, 0, states)
    return states
