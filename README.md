# halo_plonky

Pure-Python arithmetic for checking plonky2-style data whose hash is a
Poseidon permutation over the BN254 scalar field. Field elements are plain
Python integers; there are no third-party dependencies.

## Modules

- `halo_plonky.constants`: the permutation parameters: `BN254_MODULUS`,
  `GOLDILOCKS_MODULUS`, `T_BN254_POSEIDON` (width 5), `R_F_BN254_POSEIDON`
  (8 full rounds), `R_P_BN254_POSEIDON` (60 partial rounds), the
  `ROUND_CONSTANTS` (generated from the Grain LFSR when the module is
  imported), the `MDS_MATRIX`, and `parse_hex` for `0x`-prefixed hexadecimal
  strings (it raises `ValueError` on anything else).
- `halo_plonky.round_constants`: `round_constant(index)`, which raises
  `IndexError` outside the 340 constants.
- `halo_plonky.native`: `permute_bn254_poseidon_native(state)` returns the
  permuted five-element state; `encode_fe(limbs)` packs three Goldilocks
  elements into one BN254 element (least significant first) and
  `decode_fe(value)` returns its three lowest base-Goldilocks digits.
- `halo_plonky.value`: the same permutation round by round
  (`full_round_value`, `partial_round_value`, each returning the new state and
  the next round-constant counter) and `permute_value`. A state entry may be
  `None` for an unknown value; anything computed from it is `None` too.
- `halo_plonky.poseidon_hash`: `Bn254PoseidonPermutation.permute` on a
  twelve-element Goldilocks state, `hash_no_pad` (rate-8 sponge, four-element
  digest), `two_to_one`, the frozen dataclasses `FriConfig` and
  `CircuitConfig`, and `standard_inner_stark_verifier_config()` /
  `standard_stark_verifier_config()` (the latter with a Merkle cap height of 0).
- `halo_plonky.goldilocks`: Goldilocks field operations (`add`, `sub`, `mul`,
  `mul_add`, `select`, `is_zero`, `is_equal`, `to_bits`, `from_bits`,
  `exp_power_of_2`, `exp_from_bits`, `compose`, ...). Inputs must be canonical
  (`ValueError` otherwise); `assert_equal`, `assert_one` and `assert_zero`
  raise `ConstraintError` when the relation does not hold.
- `halo_plonky.extension`: `QuadraticExtension(c0, c1)`, meaning
  `c0 + c1·X` with `X² = w() = 7`, its `inverse()` (which raises
  `ZeroDivisionError` for zero), and operations such as `mul_extension`,
  `div_extension`, `sub_extension`, `exp`, `reduce_extension` (Horner's rule),
  `shift`, `select` and `assert_equal_extension`.
- `halo_plonky.algebra`: `ExtensionAlgebra(e0, e1)`, the degree-2 algebra over
  the extension, with `mul_ext_algebra`, `mul_add_ext_algebra`,
  `scalar_mul_ext_algebra`, `sub_ext_algebra`, `inner_product_extension` and
  conversions.
- `halo_plonky.hasher`: `HasherChip`, a sponge with rate 8: `update` queues
  elements, `squeeze` absorbs them and returns outputs, `hash` and `permute`
  overwrite the state and read outputs, `permutation` permutes in place.
- `halo_plonky.merkle`: `verify_merkle_proof_to_cap_with_cap_index`, which
  returns the matched digest or raises `ConstraintError`.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Examples

```python
from halo_plonky.poseidon_hash import Bn254PoseidonPermutation, hash_no_pad, two_to_one
from halo_plonky.merkle import verify_merkle_proof_to_cap_with_cap_index

state = Bn254PoseidonPermutation.permute(list(range(12)))

leaf = hash_no_pad([1, 2, 3, 4])
sibling = hash_no_pad([5, 6, 7, 8])
root = two_to_one(leaf, sibling)

# The leaf is a left child (index bit 0) under a cap holding only `root`.
verify_merkle_proof_to_cap_with_cap_index(leaf, [0], 0, [root], [sibling])
```

```python
from halo_plonky import goldilocks

bits = goldilocks.to_bits(13, 8)
assert goldilocks.from_bits(bits) == 13
goldilocks.assert_equal(goldilocks.add(2, 3), 5)
```

```python
from halo_plonky.extension import QuadraticExtension, div_extension, mul_extension

a = QuadraticExtension(3, 5)
b = QuadraticExtension(2, 9)
assert div_extension(mul_extension(a, b), b) == a
```

## What it does not do

The operations compute values directly and check the asserted relations as
they go. The package does not lay out constraint systems, generate or verify
proofs, or run a full FRI verification; it supplies the field arithmetic,
hashing and Merkle checks such a verifier is built from. It has no command-line
interface.