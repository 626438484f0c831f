# state_notation/errors.py
from __future__ import annotations

from .config import MAX_MAX_HEIGHT


class StateNotationError(ValueError):
    """Base class for every validation failure raised by the engine."""


class ParamsError(StateNotationError):
    """A (num_props, max_height) request cannot be computed."""


class MaxHeightTooLarge(ParamsError):
    def __init__(self, max_height: int):
        super().__init__(f"max_height {max_height} exceeds {MAX_MAX_HEIGHT}")
        self.max_height = max_height


class NumPropsTooLarge(ParamsError):
    def __init__(self, num_props: int):
        super().__init__(f"num_props {num_props} exceeds {MAX_MAX_HEIGHT}")
        self.num_props = num_props


class MaxHeightLessThanNumProps(ParamsError):
    def __init__(self, num_props: int, max_height: int):
        super().__init__(f"max_height must be >= num_props (got {max_height} < {num_props})")
        self.num_props = num_props
        self.max_height = max_height


class MaxHeightIsZero(ParamsError):
    def __init__(self):
        super().__init__("max_height must be at least 1")


class NegativeParam(ParamsError):
    def __init__(self, name: str, value: int):
        super().__init__(f"{name} must be non-negative, got {value}")
        self.name = name
        self.value = value


class BitsExceedMaxHeight(StateNotationError):
    def __init__(self, bits: int, max_height: int):
        super().__init__(f"bits {bits:#b} has bits set above max_height {max_height}")
        self.bits = bits
        self.max_height = max_height
