import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from halo_plonky.constants import (
    BN254_MODULUS,
    NUM_ROUND_CONSTANTS,
    R_F_BN254_POSEIDON,
    R_P_BN254_POSEIDON,
)
from halo_plonky.native import permute_bn254_poseidon_native
from halo_plonky.value import full_round_value, partial_round_value, permute_value

bn254 = st.integers(min_value=0, max_value=BN254_MODULUS - 1)


def test_poseidon_correspondence_with_value():
    state = [0, 0, 0, 0, 0]
    assert permute_value(state) == permute_bn254_poseidon_native(state)


@settings(max_examples=15)
@given(st.lists(bn254, min_size=5, max_size=5))
def test_known_values_match_native(state):
    assert permute_value(state) == permute_bn254_poseidon_native(state)


def test_rounds_advance_counter_by_width():
    state, counter = full_round_value([1, 2, 3, 4, 5], 0)
    assert counter == 5
    state, counter = partial_round_value(state, counter)
    assert counter == 10


def test_chained_rounds_equal_permutation():
    state = (3, 1, 4, 1, 5)
    current, counter = state, 0
    half = R_F_BN254_POSEIDON // 2
    for _ in range(half):
        current, counter = full_round_value(current, counter)
    for _ in range(R_P_BN254_POSEIDON):
        current, counter = partial_round_value(current, counter)
    for _ in range(half):
        current, counter = full_round_value(current, counter)
    assert counter == NUM_ROUND_CONSTANTS
    assert current == permute_value(state)


def test_full_and_partial_rounds_differ():
    full, _ = full_round_value([1, 2, 3, 4, 5], 0)
    partial, _ = partial_round_value([1, 2, 3, 4, 5], 0)
    assert full != partial


def test_unknown_value_spreads_through_mds():
    state, _ = partial_round_value([1, 2, 3, None, 5], 0)
    assert state == (None, None, None, None, None)


def test_unknown_state_stays_unknown():
    assert permute_value([None] * 5) == (None,) * 5


def test_counter_past_last_constant_raises():
    with pytest.raises(IndexError):
        full_round_value([0] * 5, NUM_ROUND_CONSTANTS - 2)


@pytest.mark.parametrize("width", [3, 6])
def test_wrong_width_is_rejected(width):
    with pytest.raises(ValueError):
        permute_value([0] * width)