"""Poseidon rounds over values that may be unknown.

A state entry is either an ``int`` field element or ``None`` for a value that
is not known; any arithmetic involving an unknown value yields an unknown one.
"""

from collections.abc import Sequence
from typing import Optional

from .constants import (
    BN254_MODULUS,
    MDS_MATRIX,
    R_F_BN254_POSEIDON,
    R_P_BN254_POSEIDON,
    T_BN254_POSEIDON,
)
from .round_constants import round_constant

FieldValue = Optional[int]
State = tuple[FieldValue, ...]


def _add(lhs: FieldValue, rhs: FieldValue) -> FieldValue:
    if lhs is None or rhs is None:
        return None
    return (lhs + rhs) % BN254_MODULUS


def _mul(lhs: FieldValue, rhs: FieldValue) -> FieldValue:
    if lhs is None or rhs is None:
        return None
    return (lhs * rhs) % BN254_MODULUS


def _fifth_power(value: FieldValue) -> FieldValue:
    return None if value is None else pow(value, 5, BN254_MODULUS)


def _normalise(state: Sequence[FieldValue]) -> list[FieldValue]:
    if len(state) != T_BN254_POSEIDON:
        raise ValueError(
            f"state must hold {T_BN254_POSEIDON} elements, got {len(state)}"
        )
    return [None if value is None else value % BN254_MODULUS for value in state]


def _constant_layer(state: list[FieldValue], counter: int) -> tuple[list[FieldValue], int]:
    added = [
        _add(value, round_constant(counter + position))
        for position, value in enumerate(state)
    ]
    return added, counter + T_BN254_POSEIDON


def _mds_layer(state: list[FieldValue]) -> list[FieldValue]:
    mixed = []
    for row in MDS_MATRIX:
        acc: FieldValue = 0
        for entry, value in zip(row, state):
            acc = _add(acc, _mul(value, entry))
        mixed.append(acc)
    return mixed


def full_round_value(state: Sequence[FieldValue], counter: int) -> tuple[State, int]:
    """Run one full round starting at round constant ``counter``.

    Returns the new state and the counter for the next round.
    """
    current, counter = _constant_layer(_normalise(state), counter)
    current = [_fifth_power(value) for value in current]
    return tuple(_mds_layer(current)), counter


def partial_round_value(state: Sequence[FieldValue], counter: int) -> tuple[State, int]:
    """Run one partial round starting at round constant ``counter``.

    Returns the new state and the counter for the next round.
    """
    current, counter = _constant_layer(_normalise(state), counter)
    current[0] = _fifth_power(current[0])
    return tuple(_mds_layer(current)), counter


def permute_value(state: Sequence[FieldValue]) -> State:
    """Apply the full Poseidon permutation to a state of possibly unknown values."""
    current: State = tuple(_normalise(state))
    counter = 0
    half = R_F_BN254_POSEIDON // 2
    for _ in range(half):
        current, counter = full_round_value(current, counter)
    for _ in range(R_P_BN254_POSEIDON):
        current, counter = partial_round_value(current, counter)
    for _ in range(half):
        current, counter = full_round_value(current, counter)
    return current