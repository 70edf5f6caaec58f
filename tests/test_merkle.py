import pytest

from halo_plonky.goldilocks import ConstraintError
from halo_plonky.merkle import verify_merkle_proof_to_cap_with_cap_index
from halo_plonky.poseidon_hash import hash_no_pad, two_to_one

LEAVES = [
    [1, 2, 3, 4, 5],
    [6, 7, 8, 9, 10, 11],
    [12, 13, 14, 15, 16],
    [17, 18, 19, 20, 21, 22, 23, 24, 25],
]


def _leaf_hash(leaf):
    return tuple(leaf) if len(leaf) <= 4 else hash_no_pad(leaf)


@pytest.fixture(scope="module")
def tree():
    hashes = [_leaf_hash(leaf) for leaf in LEAVES]
    n01 = two_to_one(hashes[0], hashes[1])
    n23 = two_to_one(hashes[2], hashes[3])
    root = two_to_one(n01, n23)
    return hashes, n01, n23, root


def test_proof_to_single_root(tree):
    hashes, n01, _, root = tree
    result = verify_merkle_proof_to_cap_with_cap_index(
        LEAVES[2], [0, 1], 0, [root], [hashes[3], n01]
    )
    assert result == root


def test_proof_for_left_most_leaf(tree):
    hashes, _, n23, root = tree
    result = verify_merkle_proof_to_cap_with_cap_index(
        LEAVES[0], [0, 0], 0, [root], [hashes[1], n23]
    )
    assert result == root


def test_proof_to_cap_of_height_one(tree):
    hashes, n01, n23, _ = tree
    result = verify_merkle_proof_to_cap_with_cap_index(
        LEAVES[3], [1], 1, [n01, n23], [hashes[2]]
    )
    assert result == n23


def test_short_leaf_is_used_directly():
    leaf = [5, 6, 7, 8]
    sibling = (1, 1, 1, 1)
    root = two_to_one(sibling, tuple(leaf))
    result = verify_merkle_proof_to_cap_with_cap_index(leaf, [1], 0, [root], [sibling])
    assert result == root


def test_leaf_with_no_siblings_must_equal_cap():
    leaf = [1, 2, 3, 4]
    assert verify_merkle_proof_to_cap_with_cap_index(leaf, [], 0, [tuple(leaf)], []) == (
        1,
        2,
        3,
        4,
    )


def test_tampered_leaf_rejected(tree):
    hashes, n01, _, root = tree
    with pytest.raises(ConstraintError):
        verify_merkle_proof_to_cap_with_cap_index(
            [12, 13, 14, 15, 17], [0, 1], 0, [root], [hashes[3], n01]
        )


def test_wrong_index_bits_rejected(tree):
    hashes, n01, _, root = tree
    with pytest.raises(ConstraintError):
        verify_merkle_proof_to_cap_with_cap_index(
            LEAVES[2], [1, 1], 0, [root], [hashes[3], n01]
        )


def test_wrong_cap_index_rejected(tree):
    hashes, n01, n23, _ = tree
    with pytest.raises(ConstraintError):
        verify_merkle_proof_to_cap_with_cap_index(
            LEAVES[3], [1], 0, [n01, n23], [hashes[2]]
        )


def test_cap_index_out_of_range_rejected(tree):
    hashes, n01, n23, _ = tree
    with pytest.raises(ConstraintError):
        verify_merkle_proof_to_cap_with_cap_index(
            LEAVES[3], [1], 2, [n01, n23], [hashes[2]]
        )


def test_too_short_leaf_rejected():
    with pytest.raises(ValueError):
        verify_merkle_proof_to_cap_with_cap_index([1, 2, 3], [], 0, [(1, 2, 3, 0)], [])