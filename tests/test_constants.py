import pytest
from hypothesis import given
from hypothesis import strategies as st

from halo_plonky import constants
from halo_plonky.constants import (
    BN254_MODULUS,
    MDS_MATRIX,
    NUM_ROUND_CONSTANTS,
    R_F_BN254_POSEIDON,
    R_P_BN254_POSEIDON,
    ROUND_CONSTANTS,
    T_BN254_POSEIDON,
    parse_hex,
)


def test_parse_hex_simple_value():
    assert parse_hex("0x0a") == 10


def test_parse_hex_full_width_constant():
    text = "0x0eb544fee2815dda7f53e29ccac98ed7d889bb4ebd47c3864f3c2bd81a6da891"
    assert parse_hex(text) == int(text[2:], 16)


@pytest.mark.parametrize("text", ["", "0x", "1234", "0xzz", "0x12 ", "x12", "0x1_2"])
def test_parse_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_hex(text)


@given(st.integers(min_value=0, max_value=2**300))
def test_parse_hex_round_trip(value):
    assert parse_hex(hex(value)) == value


def test_parameters_fix_number_of_round_constants():
    assert NUM_ROUND_CONSTANTS == parse_hex("0x154")
    assert NUM_ROUND_CONSTANTS == (R_F_BN254_POSEIDON + R_P_BN254_POSEIDON) * T_BN254_POSEIDON
    assert len(ROUND_CONSTANTS) == NUM_ROUND_CONSTANTS


@pytest.mark.parametrize(
    "index, text",
    [
        (0, "0x0eb544fee2815dda7f53e29ccac98ed7d889bb4ebd47c3864f3c2bd81a6da891"),
        (1, "0x0554d736315b8662f02fdba7dd737fbca197aeb12ea64713ba733f28475128cb"),
        (2, "0x2f83b9df259b2b68bcd748056307c37754907df0c0fb0035f5087c58d5e8c2d4"),
        (338, "0x198d07192db4fac2a82a4a79839d6a2b97c4dd4d37b4e8f3b53009f79b34e6a4"),
        (339, "0x29eb1de42a3ad381b23b4131426897a32709b29d53bb946dfd15784d1f63e572"),
    ],
)
def test_round_constants_match_published_values(index, text):
    assert ROUND_CONSTANTS[index] == parse_hex(text)


def test_round_constants_are_field_elements_and_distinct():
    assert BN254_MODULUS == parse_hex(
        "0x30644e72e131a029b85045b68181585d2833e84879b9709143e1f593f0000001"
    )
    assert all(0 <= c < BN254_MODULUS for c in ROUND_CONSTANTS)
    assert len(set(ROUND_CONSTANTS)) == len(ROUND_CONSTANTS)


def test_mds_matrix_shape():
    assert len(MDS_MATRIX) == T_BN254_POSEIDON
    assert all(len(row) == T_BN254_POSEIDON for row in MDS_MATRIX)
    assert [[parse_hex(hex(entry)) for entry in row] for row in MDS_MATRIX] == [
        list(row) for row in MDS_MATRIX
    ]


def test_mds_matrix_entries():
    assert MDS_MATRIX[0][0] == parse_hex(
        "0x251e7fdf99591080080b0af133b9e4369f22e57ace3cd7f64fc6fdbcf38d7da1"
    )
    assert MDS_MATRIX[2][1] == parse_hex(
        "0x001c1edd62645b73ad931ab80e37bbb267ba312b34140e716d6a3747594d3052"
    )
    assert MDS_MATRIX[4][4] == parse_hex(
        "0x14074bb14c982c81c9ad171e4f35fe49b39c4a7a72dbb6d9c98d803bfed65e64"
    )
    assert all(0 <= entry < BN254_MODULUS for row in MDS_MATRIX for entry in row)


def test_goldilocks_modulus_is_prime_field_order():
    p = constants.GOLDILOCKS_MODULUS
    assert p == parse_hex("0xffffffff00000001")
    assert pow(7, p - 1, p) == 1