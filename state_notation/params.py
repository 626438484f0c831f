# state_notation/params.py
from __future__ import annotations

from dataclasses import dataclass

from .config import MAX_MAX_HEIGHT
from .errors import (
    MaxHeightIsZero,
    MaxHeightLessThanNumProps,
    MaxHeightTooLarge,
    NegativeParam,
    NumPropsTooLarge,
)
from .state import State


@dataclass(frozen=True)
class Params:
    num_props: int
    max_height: int

    def validate(self) -> None:
        """Raise the first ParamsError that applies; return None when valid."""
        if self.num_props < 0:
            raise NegativeParam("num_props", self.num_props)
        if self.max_height < 0:
            raise NegativeParam("max_height", self.max_height)
        if self.max_height > MAX_MAX_HEIGHT:
            raise MaxHeightTooLarge(self.max_height)
        if self.num_props > MAX_MAX_HEIGHT:
            raise NumPropsTooLarge(self.num_props)
        if self.max_height < self.num_props:
            raise MaxHeightLessThanNumProps(self.num_props, self.max_height)


def validate(params: Params) -> None:
    params.validate()


@dataclass(frozen=True)
class ThrowsQuery:
    """A single raw state to expand, as received from a caller."""
    state: int
    max_height: int

    def validate(self) -> None:
        if self.max_height == 0:
            raise MaxHeightIsZero()
        State.new(self.state, self.max_height)

    def to_state(self) -> State:
        return State.new(self.state, self.max_height)
