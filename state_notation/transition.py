# state_notation/transition.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .state import State


@dataclass(frozen=True)
class Transition:
    from_state: State
    to_state: State
    throw_height: int   # 0 = nothing landed, nothing thrown

    def as_throw(self) -> "Throw":
        return Throw(self.throw_height, self.to_state)

    def describe(self, max_height: int) -> str:
        return f"{self.to_state.display(max_height)} ({self.throw_height})"


@dataclass(frozen=True)
class Throw:
    height: int
    destination: State


def transitions_from(state: State, max_height: int) -> List[Transition]:
    """
    Every legal one-beat advance out of ``state``.

    Without a prop at beat 0 the only move is the zero-throw (everything
    shifts down one beat). With a prop at beat 0 it must be thrown again, to
    any beat the shifted state leaves free; a throw into slot ``p`` has
    height ``p + 1``.
    """
    shifted = state.bits >> 1

    if not state.prop_at(0):
        return [Transition(state, State(shifted), 0)]

    transitions: List[Transition] = []
    for pos in range(max_height):
        if (shifted >> pos) & 1 == 0:
            transitions.append(Transition(state, State(shifted | (1 << pos)), pos + 1))
    return transitions
