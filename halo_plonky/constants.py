"""Parameters of the width-5 Poseidon permutation over the BN254 scalar field."""

import re
from collections.abc import Iterator

BN254_MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
GOLDILOCKS_MODULUS = 2**64 - 2**32 + 1

T_BN254_POSEIDON = 5
R_F_BN254_POSEIDON = 8
R_P_BN254_POSEIDON = 60
NUM_ROUND_CONSTANTS = (R_F_BN254_POSEIDON + R_P_BN254_POSEIDON) * T_BN254_POSEIDON

_HEX_PATTERN = re.compile(r"0[xX]([0-9a-fA-F]+)")

_MDS_MATRIX_HEX = (
    (
        "0x251e7fdf99591080080b0af133b9e4369f22e57ace3cd7f64fc6fdbcf38d7da1",
        "0x25fb50b65acf4fb047cbd3b1c17d97c7fe26ea9ca238d6e348550486e91c7765",
        "0x293d617d7da72102355f39ebf62f91b06deb5325f367a4556ea1e31ed5767833",
        "0x104d0295ab00c85e960111ac25da474366599e575a9b7edf6145f14ba6d3c1c4",
        "0x0aaa35e2c84baf117dea3e336cd96a39792b3813954fe9bf3ed5b90f2f69c977",
    ),
    (
        "0x2a70b9f1d4bbccdbc03e17c1d1dcdb02052903dc6609ea6969f661b2eb74c839",
        "0x281154651c921e746315a9934f1b8a1bba9f92ad8ef4b979115b8e2e991ccd7a",
        "0x28c2be2f8264f95f0b53c732134efa338ccd8fdb9ee2b45fb86a894f7db36c37",
        "0x21888041e6febd546d427c890b1883bb9b626d8cb4dc18dcc4ec8fa75e530a13",
        "0x14ddb5fada0171db80195b9592d8cf2be810930e3ea4574a350d65e2cbff4941",
    ),
    (
        "0x2f69a7198e1fbcc7dea43265306a37ed55b91bff652ad69aa4fa8478970d401d",
        "0x001c1edd62645b73ad931ab80e37bbb267ba312b34140e716d6a3747594d3052",
        "0x15b98ce93e47bc64ce2f2c96c69663c439c40c603049466fa7f9a4b228bfc32b",
        "0x12c7e2adfa524e5958f65be2fbac809fcba8458b28e44d9265051de33163cf9c",
        "0x2efc2b90d688134849018222e7b8922eaf67ce79816ef468531ec2de53bbd167",
    ),
    (
        "0x0c3f050a6bf5af151981e55e3e1a29a13c3ffa4550bd2514f1afd6c5f721f830",
        "0x0dec54e6dbf75205fa75ba7992bd34f08b2efe2ecd424a73eda7784320a1a36e",
        "0x1c482a25a729f5df20225815034b196098364a11f4d988fb7cc75cf32d8136fa",
        "0x2625ce48a7b39a4252732624e4ab94360812ac2fc9a14a5fb8b607ae9fd8514a",
        "0x07f017a7ebd56dd086f7cd4fd710c509ed7ef8e300b9a8bb9fb9f28af710251f",
    ),
    (
        "0x2a20e3a4a0e57d92f97c9d6186c6c3ea7c5e55c20146259be2f78c2ccc2e3595",
        "0x1049f8210566b51faafb1e9a5d63c0ee701673aed820d9c4403b01feb727a549",
        "0x02ecac687ef5b4b568002bd9d1b96b4bef357a69e3e86b5561b9299b82d69c8e",
        "0x2d3a1aea2e6d44466808f88c9ba903d3bdcb6b58ba40441ed4ebcf11bbe1e37b",
        "0x14074bb14c982c81c9ad171e4f35fe49b39c4a7a72dbb6d9c98d803bfed65e64",
    ),
)


def parse_hex(text: str) -> int:
    """Parse a ``0x``-prefixed hexadecimal string into a non-negative integer."""
    match = _HEX_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a 0x-prefixed hexadecimal number: {text!r}")
    return int(match.group(1), 16)


def _to_field(value: int) -> int:
    if value >= BN254_MODULUS:
        raise ValueError(f"value {value:#x} is not below the BN254 modulus")
    return value


def _grain_bits(field_bits: int, width: int, full_rounds: int, partial_rounds: int) -> Iterator[int]:
    """Yield the self-shrinking Grain LFSR stream that seeds Poseidon parameters."""
    header = (
        (1, 2),  # prime field
        (0, 4),  # x^alpha S-box
        (field_bits, 12),
        (width, 12),
        (full_rounds, 10),
        (partial_rounds, 10),
    )
    bits = [int(digit) for value, size in header for digit in format(value, f"0{size}b")]
    bits.extend([1] * 30)
    state = sum(bit << position for position, bit in enumerate(bits))

    def step() -> int:
        nonlocal state
        new_bit = (
            state ^ (state >> 13) ^ (state >> 23) ^ (state >> 38) ^ (state >> 51) ^ (state >> 62)
        ) & 1
        state = (state >> 1) | (new_bit << 79)
        return new_bit

    for _ in range(160):
        step()
    while True:
        selector = step()
        while selector == 0:
            step()
            selector = step()
        yield step()


def _generate_round_constants() -> tuple[int, ...]:
    field_bits = BN254_MODULUS.bit_length()
    stream = _grain_bits(field_bits, T_BN254_POSEIDON, R_F_BN254_POSEIDON, R_P_BN254_POSEIDON)

    def draw() -> int:
        value = 0
        for _ in range(field_bits):
            value = (value << 1) | next(stream)
        return value

    constants = []
    while len(constants) < NUM_ROUND_CONSTANTS:
        candidate = draw()
        if candidate < BN254_MODULUS:
            constants.append(candidate)
    return tuple(constants)


ROUND_CONSTANTS: tuple[int, ...] = _generate_round_constants()

MDS_MATRIX: tuple[tuple[int, ...], ...] = tuple(
    tuple(_to_field(parse_hex(entry)) for entry in row) for row in _MDS_MATRIX_HEX
)