"""Constrained arithmetic in the quadratic extension of the Goldilocks field.

Elements are ``c0 + c1 * X`` with ``X ** 2 == W``. Operations that assert a
relation raise :class:`~halo_plonky.goldilocks.ConstraintError` when it does
not hold.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from . import goldilocks
from .constants import GOLDILOCKS_MODULUS
from .goldilocks import ConstraintError

_W = 7
_DEGREE = 2


def w() -> int:
    """Return the non-residue ``W`` defining the extension, ``X ** 2 == W``."""
    return _W


@dataclass(frozen=True)
class QuadraticExtension:
    """An element ``c0 + c1 * X`` of the Goldilocks quadratic extension."""

    c0: int = 0
    c1: int = 0

    def __post_init__(self) -> None:
        for limb in (self.c0, self.c1):
            if not 0 <= limb < GOLDILOCKS_MODULUS:
                raise ValueError(f"{limb} is not a canonical Goldilocks element")

    def __iter__(self) -> Iterator[int]:
        yield self.c0
        yield self.c1

    def is_zero(self) -> bool:
        """Return whether both limbs are zero."""
        return self.c0 == 0 and self.c1 == 0

    def inverse(self) -> "QuadraticExtension":
        """Return the multiplicative inverse; raise ZeroDivisionError for zero."""
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse in the extension field")
        norm = goldilocks.sub(
            goldilocks.mul(self.c0, self.c0),
            goldilocks.mul_with_constant(self.c1, self.c1, _W),
        )
        norm_inv = pow(norm, GOLDILOCKS_MODULUS - 2, GOLDILOCKS_MODULUS)
        return QuadraticExtension(
            goldilocks.mul(self.c0, norm_inv),
            goldilocks.mul(goldilocks.sub(0, self.c1), norm_inv),
        )


def mul_add_extension(
    a: QuadraticExtension, b: QuadraticExtension, c: QuadraticExtension
) -> QuadraticExtension:
    """Return ``a * b + c``."""
    c0 = goldilocks.mul_add(
        a.c0, b.c0, goldilocks.mul_with_constant(a.c1, b.c1, _W)
    )
    c1 = goldilocks.mul_add(a.c0, b.c1, goldilocks.mul(a.c1, b.c0))
    return QuadraticExtension(goldilocks.add(c0, c.c0), goldilocks.add(c1, c.c1))


def zero_extension() -> QuadraticExtension:
    """Return the extension element zero."""
    return QuadraticExtension(0, 0)


def one_extension() -> QuadraticExtension:
    """Return the extension element one."""
    return QuadraticExtension(1, 0)


def two_extension() -> QuadraticExtension:
    """Return the extension element two."""
    return QuadraticExtension(2, 0)


def mul_extension(
    multiplicand_0: QuadraticExtension, multiplicand_1: QuadraticExtension
) -> QuadraticExtension:
    """Return ``multiplicand_0 * multiplicand_1``."""
    return mul_add_extension(multiplicand_0, multiplicand_1, zero_extension())


def add_extension(
    addend_0: QuadraticExtension, addend_1: QuadraticExtension
) -> QuadraticExtension:
    """Return ``addend_0 + addend_1``."""
    return QuadraticExtension(
        *(goldilocks.add(x, y) for x, y in zip(addend_0, addend_1))
    )


def scalar_mul(multiplicand: QuadraticExtension, scalar: int) -> QuadraticExtension:
    """Multiply both limbs by the Goldilocks element ``scalar``."""
    return QuadraticExtension(*(goldilocks.mul(limb, scalar) for limb in multiplicand))


def arithmetic_extension(
    const_0: int,
    const_1: int,
    multiplicand_0: QuadraticExtension,
    multiplicand_1: QuadraticExtension,
    addend: QuadraticExtension,
) -> QuadraticExtension:
    """Return ``const_0 * multiplicand_0 * multiplicand_1 + const_1 * addend``."""
    product = scalar_mul(mul_extension(multiplicand_0, multiplicand_1), const_0)
    return add_extension(product, scalar_mul(addend, const_1))


def assert_equal_extension(lhs: QuadraticExtension, rhs: QuadraticExtension) -> None:
    """Require ``lhs == rhs`` limb by limb."""
    goldilocks.assert_equal(lhs.c0, rhs.c0)
    goldilocks.assert_equal(lhs.c1, rhs.c1)


def assert_one_extension(a: QuadraticExtension) -> None:
    """Require ``a == 1``."""
    goldilocks.assert_one(a.c0)
    goldilocks.assert_zero(a.c1)


def div_extension(x: QuadraticExtension, y: QuadraticExtension) -> QuadraticExtension:
    """Return ``x / y``; raise ZeroDivisionError when ``y`` is zero."""
    y_inv = y.inverse()
    assert_one_extension(mul_extension(y, y_inv))
    return mul_extension(x, y_inv)


def div_add_extension(
    x: QuadraticExtension, y: QuadraticExtension, z: QuadraticExtension
) -> QuadraticExtension:
    """Return ``x / y + z``."""
    return add_extension(div_extension(x, y), z)


def mul_extension_with_const(
    const_0: int,
    multiplicand_0: QuadraticExtension,
    multiplicand_1: QuadraticExtension,
) -> QuadraticExtension:
    """Return ``const_0 * multiplicand_0 * multiplicand_1``."""
    return arithmetic_extension(
        const_0, 0, multiplicand_0, multiplicand_1, zero_extension()
    )


def mul_sub_extension(
    a: QuadraticExtension, b: QuadraticExtension, c: QuadraticExtension
) -> QuadraticExtension:
    """Return ``a * b - c``."""
    return arithmetic_extension(1, GOLDILOCKS_MODULUS - 1, a, b, c)


def sub_extension(lhs: QuadraticExtension, rhs: QuadraticExtension) -> QuadraticExtension:
    """Return ``lhs - rhs``."""
    return arithmetic_extension(1, GOLDILOCKS_MODULUS - 1, lhs, one_extension(), rhs)


def square_extension(x: QuadraticExtension) -> QuadraticExtension:
    """Return ``x * x``."""
    return mul_extension(x, x)


def exp_power_of_2_extension(
    base: QuadraticExtension, power_log: int
) -> QuadraticExtension:
    """Return ``base ** (2 ** power_log)`` by repeated squaring."""
    if power_log < 0:
        raise ValueError(f"power_log must be non-negative, got {power_log}")
    for _ in range(power_log):
        base = square_extension(base)
    return base


def exp(base: QuadraticExtension, power: int) -> QuadraticExtension:
    """Return ``base ** power`` for a non-negative ``power``."""
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")
    if power == 0:
        return one_extension()
    if power == 1:
        return base
    if power == 2:
        return square_extension(base)
    product = one_extension()
    for _ in range(power):
        product = mul_extension(product, base)
    return product


def mul_many_extension(terms: Iterable[QuadraticExtension]) -> QuadraticExtension:
    """Return the product of all ``terms``; one for no terms."""
    result = one_extension()
    for term in terms:
        result = mul_extension(result, term)
    return result


def constant_extension(constant: Sequence[int]) -> QuadraticExtension:
    """Build an extension element from its two limbs."""
    if len(constant) != _DEGREE:
        raise ValueError(f"expected {_DEGREE} limbs, got {len(constant)}")
    return QuadraticExtension(*constant)


def convert_to_extension(value: int) -> QuadraticExtension:
    """Embed a Goldilocks element into the extension."""
    return QuadraticExtension(value, 0)


def reduce_extension(
    base: QuadraticExtension, terms: Sequence[QuadraticExtension]
) -> QuadraticExtension:
    """Return ``sum(terms[i] * base ** i)`` by Horner's rule."""
    acc = zero_extension()
    for term in reversed(terms):
        acc = mul_add_extension(acc, base, term)
    return acc


def reduce_base_field_terms_extension(
    base: QuadraticExtension, terms: Sequence[int]
) -> QuadraticExtension:
    """Reduce Goldilocks ``terms`` with an extension ``base``."""
    return reduce_extension(base, [convert_to_extension(term) for term in terms])


def reduce_extension_field_terms_base(
    base: int, terms: Sequence[QuadraticExtension]
) -> QuadraticExtension:
    """Reduce extension ``terms`` with a Goldilocks ``base``."""
    return reduce_extension(convert_to_extension(base), terms)


def shift(
    factor: QuadraticExtension, power: int, shifted: QuadraticExtension
) -> QuadraticExtension:
    """Return ``shifted * factor ** power``."""
    return mul_extension(exp(factor, power), shifted)


def select(
    cond: QuadraticExtension, a: QuadraticExtension, b: QuadraticExtension
) -> QuadraticExtension:
    """Return ``cond * (a - b) + b``: ``a`` when ``cond`` is one, ``b`` when zero."""
    return arithmetic_extension(1, 1, cond, sub_extension(a, b), b)


__all__ = [
    "ConstraintError",
    "QuadraticExtension",
    "add_extension",
    "arithmetic_extension",
    "assert_equal_extension",
    "assert_one_extension",
    "constant_extension",
    "convert_to_extension",
    "div_add_extension",
    "div_extension",
    "exp",
    "exp_power_of_2_extension",
    "mul_add_extension",
    "mul_extension",
    "mul_extension_with_const",
    "mul_many_extension",
    "mul_sub_extension",
    "one_extension",
    "reduce_base_field_terms_extension",
    "reduce_extension",
    "reduce_extension_field_terms_base",
    "scalar_mul",
    "select",
    "shift",
    "square_extension",
    "sub_extension",
    "two_extension",
    "w",
    "zero_extension",
]