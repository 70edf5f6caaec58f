import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from halo_plonky.constants import BN254_MODULUS, GOLDILOCKS_MODULUS
from halo_plonky.native import decode_fe, encode_fe, permute_bn254_poseidon_native

goldilocks = st.integers(min_value=0, max_value=GOLDILOCKS_MODULUS - 1)
bn254 = st.integers(min_value=0, max_value=BN254_MODULUS - 1)


def test_permutation_output_is_in_field_and_deterministic():
    first = permute_bn254_poseidon_native([0, 0, 0, 0, 0])
    second = permute_bn254_poseidon_native([0, 0, 0, 0, 0])
    assert first == second
    assert len(first) == 5
    assert all(0 <= value < BN254_MODULUS for value in first)


def test_permutation_does_not_modify_input():
    state = [1, 2, 3, 4, 5]
    permute_bn254_poseidon_native(state)
    assert state == [1, 2, 3, 4, 5]


def test_permutation_reduces_inputs():
    assert permute_bn254_poseidon_native(
        [BN254_MODULUS, 0, 0, 0, 0]
    ) == permute_bn254_poseidon_native([0, 0, 0, 0, 0])


@settings(max_examples=20)
@given(st.lists(bn254, min_size=5, max_size=5), st.integers(min_value=0, max_value=4))
def test_changing_one_input_changes_every_output(state, position):
    changed = list(state)
    changed[position] = (changed[position] + 1) % BN254_MODULUS
    original = permute_bn254_poseidon_native(state)
    altered = permute_bn254_poseidon_native(changed)
    assert all(a != b for a, b in zip(original, altered))


@pytest.mark.parametrize("width", [0, 4, 6])
def test_wrong_width_is_rejected(width):
    with pytest.raises(ValueError):
        permute_bn254_poseidon_native([0] * width)


def test_encode_places_limbs_by_power():
    assert encode_fe([1, 0, 0]) == 1
    assert encode_fe([0, 1, 0]) == GOLDILOCKS_MODULUS
    assert encode_fe([0, 0, 1]) == GOLDILOCKS_MODULUS**2


def test_encode_canonicalises_limbs():
    assert encode_fe([GOLDILOCKS_MODULUS, 0, 0]) == 0
    assert encode_fe([GOLDILOCKS_MODULUS + 5, 0, 0]) == encode_fe([5, 0, 0])


def test_decode_splits_into_digits():
    assert decode_fe(GOLDILOCKS_MODULUS) == (0, 1, 0)
    assert decode_fe(GOLDILOCKS_MODULUS**2 + 7) == (7, 0, 1)


def test_decode_drops_digits_beyond_three_limbs():
    assert decode_fe(GOLDILOCKS_MODULUS**3 + 9) == (9, 0, 0)


@given(st.lists(goldilocks, min_size=3, max_size=3))
def test_decode_inverts_encode(limbs):
    assert decode_fe(encode_fe(limbs)) == tuple(limbs)


@given(bn254)
def test_decoded_limbs_are_canonical(value):
    assert all(0 <= limb < GOLDILOCKS_MODULUS for limb in decode_fe(value))


@pytest.mark.parametrize("limbs", [[], [1, 2], [1, 2, 3, 4]])
def test_encode_rejects_wrong_limb_count(limbs):
    with pytest.raises(ValueError):
        encode_fe(limbs)