"""Poseidon permutation over BN254 and packing of Goldilocks limbs into it."""

from collections.abc import Sequence

from .constants import (
    BN254_MODULUS,
    GOLDILOCKS_MODULUS,
    MDS_MATRIX,
    R_F_BN254_POSEIDON,
    R_P_BN254_POSEIDON,
    T_BN254_POSEIDON,
)
from .round_constants import round_constant

_LIMBS_PER_ELEMENT = 3


def _round_schedule() -> list[bool]:
    """Return, for every round in order, whether it is a full round."""
    half = R_F_BN254_POSEIDON // 2
    return [True] * half + [False] * R_P_BN254_POSEIDON + [True] * half


def _mds_layer(state: list[int]) -> list[int]:
    return [
        sum(entry * value for entry, value in zip(row, state)) % BN254_MODULUS
        for row in MDS_MATRIX
    ]


def permute_bn254_poseidon_native(state: Sequence[int]) -> tuple[int, ...]:
    """Apply the width-5 Poseidon permutation and return the new state."""
    if len(state) != T_BN254_POSEIDON:
        raise ValueError(
            f"state must hold {T_BN254_POSEIDON} elements, got {len(state)}"
        )
    current = [value % BN254_MODULUS for value in state]
    counter = 0
    for full_round in _round_schedule():
        current = [
            (value + round_constant(counter + position)) % BN254_MODULUS
            for position, value in enumerate(current)
        ]
        counter += T_BN254_POSEIDON
        if full_round:
            current = [pow(value, 5, BN254_MODULUS) for value in current]
        else:
            current[0] = pow(current[0], 5, BN254_MODULUS)
        current = _mds_layer(current)
    return tuple(current)


def encode_fe(limbs: Sequence[int]) -> int:
    """Pack three Goldilocks elements into one BN254 element, least significant first."""
    if len(limbs) != _LIMBS_PER_ELEMENT:
        raise ValueError(
            f"expected {_LIMBS_PER_ELEMENT} Goldilocks limbs, got {len(limbs)}"
        )
    packed = sum(
        (limb % GOLDILOCKS_MODULUS) * GOLDILOCKS_MODULUS**power
        for power, limb in enumerate(limbs)
    )
    return packed % BN254_MODULUS


def decode_fe(value: int) -> tuple[int, int, int]:
    """Split a BN254 element into its three lowest base-Goldilocks digits."""
    remaining = value % BN254_MODULUS
    digits = []
    for _ in range(_LIMBS_PER_ELEMENT):
        remaining, digit = divmod(remaining, GOLDILOCKS_MODULUS)
        digits.append(digit)
    return tuple(digits)