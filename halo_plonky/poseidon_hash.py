"""Goldilocks sponge hashing built on the BN254 Poseidon permutation, plus proof configs."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace

from .constants import GOLDILOCKS_MODULUS, T_BN254_POSEIDON
from .native import decode_fe, encode_fe, permute_bn254_poseidon_native

SPONGE_WIDTH = 12
SPONGE_RATE = 8
NUM_HASH_OUT_ELTS = 4
HASH_SIZE = 4 * 8

_LIMBS_PER_ELEMENT = 3


def _chunks(values: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    for start in range(0, len(values), size):
        yield values[start : start + size]


def _require_length(values: Sequence[int], length: int, what: str) -> None:
    if len(values) != length:
        raise ValueError(f"{what} must hold {length} elements, got {len(values)}")


@dataclass(frozen=True)
class Bn254PoseidonPermutation:
    """A Goldilocks sponge state permuted through the BN254 Poseidon permutation."""

    state: tuple[int, ...] = (0,) * SPONGE_WIDTH

    def __post_init__(self) -> None:
        _require_length(self.state, SPONGE_WIDTH, "sponge state")
        object.__setattr__(self, "state", tuple(self.state))

    @staticmethod
    def permute(inputs: Sequence[int]) -> tuple[int, ...]:
        """Permute twelve Goldilocks elements.

        The elements are packed three at a time into BN254 elements, the width-5
        permutation is applied, and the first twelve limbs are unpacked again.
        """
        _require_length(inputs, SPONGE_WIDTH, "permutation input")
        encoded = [encode_fe(chunk) for chunk in _chunks(list(inputs), _LIMBS_PER_ELEMENT)]
        encoded.extend([0] * (T_BN254_POSEIDON - len(encoded)))
        permuted = permute_bn254_poseidon_native(encoded)
        decoded = [limb for element in permuted for limb in decode_fe(element)]
        return tuple(decoded[:SPONGE_WIDTH])


def hash_no_pad(inputs: Sequence[int]) -> tuple[int, ...]:
    """Hash Goldilocks elements to a four-element digest without padding."""
    state = [0] * SPONGE_WIDTH
    reduced = [value % GOLDILOCKS_MODULUS for value in inputs]
    for chunk in _chunks(reduced, SPONGE_RATE):
        state[: len(chunk)] = chunk
        state = list(Bn254PoseidonPermutation.permute(state))
    return tuple(state[:NUM_HASH_OUT_ELTS])


def two_to_one(left: Sequence[int], right: Sequence[int]) -> tuple[int, ...]:
    """Compress two four-element digests into one."""
    _require_length(left, NUM_HASH_OUT_ELTS, "left digest")
    _require_length(right, NUM_HASH_OUT_ELTS, "right digest")
    state = [value % GOLDILOCKS_MODULUS for value in (*left, *right)]
    state.extend([0] * (SPONGE_WIDTH - len(state)))
    return Bn254PoseidonPermutation.permute(state)[:NUM_HASH_OUT_ELTS]


@dataclass(frozen=True)
class FriConfig:
    """FRI parameters; ``reduction_strategy`` holds constant arity bits and final poly bits."""

    rate_bits: int
    cap_height: int
    proof_of_work_bits: int
    reduction_strategy: tuple[int, int]
    num_query_rounds: int


@dataclass(frozen=True)
class CircuitConfig:
    """Shape and security parameters of a proving circuit."""

    num_wires: int = 135
    num_routed_wires: int = 80
    num_constants: int = 2
    use_base_arithmetic_gate: bool = True
    security_bits: int = 100
    num_challenges: int = 2
    zero_knowledge: bool = False
    max_quotient_degree_factor: int = 8
    fri_config: FriConfig = field(
        default_factory=lambda: FriConfig(
            rate_bits=3,
            cap_height=4,
            proof_of_work_bits=16,
            reduction_strategy=(4, 5),
            num_query_rounds=28,
        )
    )

    @classmethod
    def standard_recursion_config(cls) -> "CircuitConfig":
        """The usual configuration for circuits that verify other proofs."""
        return cls()


def standard_inner_stark_verifier_config() -> CircuitConfig:
    """Configuration for an inner circuit whose proof is verified recursively."""
    return replace(
        CircuitConfig.standard_recursion_config(),
        fri_config=FriConfig(
            rate_bits=3,
            cap_height=4,
            proof_of_work_bits=16,
            reduction_strategy=(1, 5),
            num_query_rounds=28,
        ),
    )


def standard_stark_verifier_config() -> CircuitConfig:
    """Configuration for the outer circuit, with a single-hash Merkle cap."""
    return replace(
        standard_inner_stark_verifier_config(),
        fri_config=FriConfig(
            rate_bits=3,
            cap_height=0,
            proof_of_work_bits=16,
            reduction_strategy=(1, 5),
            num_query_rounds=28,
        ),
    )