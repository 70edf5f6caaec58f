"""Verification of Merkle proofs against a Merkle cap."""

from collections.abc import Sequence

from .goldilocks import ConstraintError, assert_equal, select
from .hasher import HasherChip

_DIGEST_LEN = 4


def verify_merkle_proof_to_cap_with_cap_index(
    leaf_data: Sequence[int],
    leaf_index_bits: Sequence[int],
    cap_index: int,
    merkle_cap: Sequence[Sequence[int]],
    siblings: Sequence[Sequence[int]],
) -> tuple[int, ...]:
    """Check that ``leaf_data`` hashes up to ``merkle_cap[cap_index]``.

    Leaves longer than a digest are hashed first; each bit of ``leaf_index_bits``
    (least significant first) says whether the current node is a right child.
    Returns the matched cap digest and raises :class:`ConstraintError` otherwise.
    """
    if len(leaf_data) < _DIGEST_LEN:
        raise ValueError(
            f"leaf data must hold at least {_DIGEST_LEN} elements, got {len(leaf_data)}"
        )
    if len(leaf_data) <= _DIGEST_LEN:
        state = list(leaf_data)
    else:
        state = HasherChip().hash(leaf_data, _DIGEST_LEN)

    for bit, sibling in zip(leaf_index_bits, siblings):
        if len(sibling) != _DIGEST_LEN:
            raise ValueError(f"sibling must hold {_DIGEST_LEN} elements, got {len(sibling)}")
        left = [select(s, h, bit) for s, h in zip(sibling, state)]
        right = [select(h, s, bit) for s, h in zip(sibling, state)]
        state = HasherChip().permute(left + right, _DIGEST_LEN)

    if not 0 <= cap_index < len(merkle_cap):
        raise ConstraintError(f"cap index {cap_index} outside a cap of {len(merkle_cap)} hashes")
    cap_digest = merkle_cap[cap_index]
    for expected, actual in zip(cap_digest, state):
        assert_equal(expected, actual)
    return tuple(state)