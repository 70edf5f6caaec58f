"""BN254 Poseidon over Goldilocks limbs, with field, extension, algebra, sponge and Merkle checks."""

__version__ = "0.1.0"

__all__ = [
    "algebra",
    "constants",
    "extension",
    "goldilocks",
    "hasher",
    "merkle",
    "native",
    "poseidon_hash",
    "round_constants",
    "value",
]