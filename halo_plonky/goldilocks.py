"""Constrained arithmetic on Goldilocks field elements.

Values are canonical integers in ``[0, GOLDILOCKS_MODULUS)``. Operations that
assert a relation raise :class:`ConstraintError` when it does not hold.
"""

from collections.abc import Iterable, Sequence

from .constants import GOLDILOCKS_MODULUS

_WORD_BITS = 64


class ConstraintError(ValueError):
    """Raised when an asserted relation between field elements does not hold."""


def _canonical(value: int) -> int:
    if not 0 <= value < GOLDILOCKS_MODULUS:
        raise ValueError(f"{value} is not a canonical Goldilocks element")
    return value


def mul_add(a: int, b: int, c: int) -> int:
    """Return ``a * b + c``."""
    return (_canonical(a) * _canonical(b) + _canonical(c)) % GOLDILOCKS_MODULUS


def mul_add_constant(a: int, b: int, to_add: int) -> int:
    """Return ``a * b + to_add``."""
    return mul_add(a, b, to_add)


def compose(terms: Iterable[tuple[int, int]], constant: int) -> int:
    """Return ``constant + sum(value * coefficient)`` over ``(value, coefficient)`` terms."""
    acc = _canonical(constant)
    for value, coefficient in terms:
        acc = mul_add(value, coefficient, acc)
    return acc


def add(lhs: int, rhs: int) -> int:
    """Return ``lhs + rhs``."""
    return mul_add(lhs, 1, rhs)


def sub(lhs: int, rhs: int) -> int:
    """Return ``lhs - rhs``."""
    return mul_add(rhs, GOLDILOCKS_MODULUS - 1, lhs)


def mul(lhs: int, rhs: int) -> int:
    """Return ``lhs * rhs``."""
    return mul_add(lhs, rhs, 0)


def mul_with_constant(lhs: int, rhs: int, constant: int) -> int:
    """Return ``lhs * rhs * constant``."""
    return mul(mul(lhs, rhs), _canonical(constant))


def add_constant(a: int, constant: int) -> int:
    """Return ``a + constant``."""
    return mul_add(a, 1, constant)


def assert_equal(lhs: int, rhs: int) -> None:
    """Require ``lhs == rhs``."""
    if _canonical(lhs) != _canonical(rhs):
        raise ConstraintError(f"{lhs} != {rhs}")


def assert_one(a: int) -> None:
    """Require ``a == 1``."""
    assert_equal(a, 1)


def assert_zero(a: int) -> None:
    """Require ``a == 0``."""
    assert_equal(a, 0)


def select(a: int, b: int, cond: int) -> int:
    """Return ``(a - b) * cond + b``: ``a`` when ``cond`` is 1, ``b`` when it is 0."""
    return mul_add(sub(a, b), cond, b)


def is_zero(a: int) -> int:
    """Return 1 when ``a`` is zero, else 0."""
    return 1 if _canonical(a) == 0 else 0


def is_equal(a: int, b: int) -> int:
    """Return 1 when ``a == b``, else 0."""
    return is_zero(sub(a, b))


def to_bits(composed: int, number_of_bits: int) -> list[int]:
    """Return the lowest ``number_of_bits`` bits of ``composed``, least significant first."""
    if not 0 <= number_of_bits <= _WORD_BITS:
        raise ValueError(f"number_of_bits must be within 0..{_WORD_BITS}, got {number_of_bits}")
    value = _canonical(composed)
    bits = [(value >> position) & 1 for position in range(_WORD_BITS)]
    assert_equal(from_bits(bits), value)
    return bits[:number_of_bits]


def from_bits(bits: Sequence[int]) -> int:
    """Recompose bits, least significant first, into a field element."""
    if len(bits) > _WORD_BITS:
        raise ValueError(f"at most {_WORD_BITS} bits can be composed, got {len(bits)}")
    acc = 0
    for position, bit in enumerate(bits):
        acc = mul_add(bit, (1 << position) % GOLDILOCKS_MODULUS, acc)
    return acc


def exp_power_of_2(a: int, power_log: int) -> int:
    """Return ``a ** (2 ** power_log)`` by repeated squaring."""
    result = _canonical(a)
    for _ in range(power_log):
        result = mul(result, result)
    return result


def exp_from_bits(base: int, power_bits: Sequence[int]) -> int:
    """Return ``base`` raised to the exponent whose bits, least significant first, are given."""
    base = _canonical(base)
    result = 1
    for position, bit in enumerate(power_bits):
        factor = pow(base, 1 << position, GOLDILOCKS_MODULUS)
        result = mul(result, select(1, factor, is_zero(bit)))
    return result