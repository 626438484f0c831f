import pytest

from state_notation.config import MAX_MAX_HEIGHT
from state_notation.enumerator import generate_states
from state_notation.errors import BitsExceedMaxHeight, MaxHeightTooLarge, StateNotationError
from state_notation.state import State, siteswap_char


def test_new_valid_state():
    assert State.new(0b101, 5).bits == 0b101

def test_new_rejects_max_height_above_limit():
    with pytest.raises(MaxHeightTooLarge):
        State.new(0, MAX_MAX_HEIGHT + 1)

def test_new_rejects_bits_exceeding_max_height():
    with pytest.raises(BitsExceedMaxHeight):
        State.new(0b100000, 5)

def test_new_rejects_negative_bits():
    with pytest.raises(BitsExceedMaxHeight):
        State.new(-1, 5)

def test_new_full_width_allows_all_bits():
    s = State.new((1 << MAX_MAX_HEIGHT) - 1, MAX_MAX_HEIGHT)
    assert s.num_props == MAX_MAX_HEIGHT
    with pytest.raises(BitsExceedMaxHeight):
        State.new(1 << MAX_MAX_HEIGHT, MAX_MAX_HEIGHT)

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        State.new(0b1000, 3)
    assert issubclass(BitsExceedMaxHeight, StateNotationError)

def test_prop_at():
    s = State.new(0b1010, 4)
    assert [s.prop_at(i) for i in range(4)] == [False, True, False, True]

def test_states_are_hashable_values():
    assert State(0b111) == State.new(0b111, 3)
    assert len({State(3), State(3), State(5)}) == 2

def test_display_format():
    assert State.new(0b10110, 5).display(5) == "x0xx0"

def test_to_binary_string():
    assert State.new(0b10110, 5).to_binary_string(5) == "10110"

def test_display_vs_binary_string_consistency():
    for bits in range(32):
        s = State.new(bits, 5)
        for d, b in zip(s.display(5), s.to_binary_string(5)):
            assert (d, b) in {("x", "1"), ("0", "0")}

def test_formatting_pads_to_max_height():
    assert State(0b1).display(4) == "000x"
    assert State(0).to_binary_string(3) == "000"

def test_abbreviated_examples():
    assert State.new(0b111, 3).to_abbreviated_string(3) == "000"
    assert State.new(0b01101, 5).to_abbreviated_string(5) == "101"
    assert State.new(0b101001, 6).to_abbreviated_string(6) == "012"
    assert State.new(0b00111, 5).to_abbreviated_string(5) == "200"

def test_abbreviated_letters_for_large_gaps():
    # one prop at beat 0, ten empty beats above it
    assert State(0b1).to_abbreviated_string(11) == "a"

def test_siteswap_char_range():
    assert siteswap_char(9) == "9"
    assert siteswap_char(10) == "a"
    assert siteswap_char(35) == "z"
    assert siteswap_char(36) == "?"

def test_abbreviated_gap_past_alphabet():
    # a lone prop at beat 0 under 40 beats: 39 empty beats above it
    s = State(1)
    assert s.to_abbreviated_string(40) == "?"
    assert len(s.to_abbreviated_string(40)) == s.num_props

def test_abbreviated_length_is_num_props():
    for n, h in [(3, 5), (2, 4), (4, 8), (1, 3), (5, 5), (0, 4), (1, 12), (6, 10)]:
        for s in generate_states(n, h):
            assert len(s.to_abbreviated_string(h)) == n, (s, n, h)

def test_ground():
    assert State.ground(3).bits == 0b111
    assert State.ground(0).bits == 0
