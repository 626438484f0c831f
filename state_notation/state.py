# state_notation/state.py
"""
A juggling state is a bitmask: bit ``p`` is set when a prop is scheduled to
land ``p`` beats from now. Bit 0 is the current beat.

The value carries no width of its own, so every formatting helper takes the
``max_height`` the state was built under.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import MAX_MAX_HEIGHT
from .errors import BitsExceedMaxHeight, MaxHeightTooLarge, NegativeParam

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def siteswap_char(n: int) -> str:
    """0-9 -> '0'-'9', 10-35 -> 'a'-'z', anything else -> '?'."""
    if 0 <= n < len(_DIGITS):
        return _DIGITS[n]
    return "?"


@dataclass(frozen=True)
class State:
    bits: int

    @staticmethod
    def new(bits: int, max_height: int) -> "State":
        if max_height < 0:
            raise NegativeParam("max_height", max_height)
        if max_height > MAX_MAX_HEIGHT:
            raise MaxHeightTooLarge(max_height)
        # negative ints have every high bit set, so they fail here too
        if bits >> max_height != 0:
            raise BitsExceedMaxHeight(bits, max_height)
        return State(bits)

    @staticmethod
    def ground(num_props: int) -> "State":
        """All props packed into the lowest beats."""
        return State((1 << num_props) - 1)

    @property
    def num_props(self) -> int:
        return bin(self.bits).count("1")

    def prop_at(self, pos: int) -> bool:
        return (self.bits >> pos) & 1 != 0

    # ---------- formatting ----------
    def display(self, max_height: int) -> str:
        return "".join("x" if self.prop_at(i) else "0" for i in reversed(range(max_height)))

    def to_binary_string(self, max_height: int) -> str:
        return "".join("1" if self.prop_at(i) else "0" for i in reversed(range(max_height)))

    def to_abbreviated_string(self, max_height: int) -> str:
        """
        One character per prop, MSB first: the number of empty beats seen
        since the previous prop (or since the top of the state).
        e.g. 00111 @ 5 -> "200", 101001 @ 6 -> "012"
        """
        out = []
        gap = 0
        for pos in reversed(range(max_height)):
            if self.prop_at(pos):
                out.append(siteswap_char(gap))
                gap = 0
            else:
                gap += 1
        return "".join(out)

    def __int__(self) -> int:
        return self.bits
