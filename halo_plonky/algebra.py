"""Arithmetic in the degree-2 algebra over the Goldilocks quadratic extension.

An algebra element is ``e0 + e1 * Y`` with ``e0, e1`` in the extension field
and ``Y ** 2 == W``.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from . import extension
from .extension import QuadraticExtension

_DEGREE = 2

Pair = tuple[QuadraticExtension, QuadraticExtension]


@dataclass(frozen=True)
class ExtensionAlgebra:
    """An element ``e0 + e1 * Y`` of the extension algebra."""

    e0: QuadraticExtension = field(default_factory=QuadraticExtension)
    e1: QuadraticExtension = field(default_factory=QuadraticExtension)

    def __iter__(self) -> Iterator[QuadraticExtension]:
        yield self.e0
        yield self.e1

    def to_ext_array(self) -> tuple[QuadraticExtension, QuadraticExtension]:
        """Return the two extension-field components."""
        return (self.e0, self.e1)


def zero_ext_algebra() -> ExtensionAlgebra:
    """Return the algebra element zero."""
    return ExtensionAlgebra(extension.zero_extension(), extension.zero_extension())


def convert_to_ext_algebra(et: QuadraticExtension) -> ExtensionAlgebra:
    """Embed an extension-field element into the algebra."""
    return ExtensionAlgebra(et, extension.zero_extension())


def inner_product_extension(
    constant: int, starting_acc: QuadraticExtension, pairs: Sequence[Pair]
) -> QuadraticExtension:
    """Return ``starting_acc + sum(constant * a * b)`` over the ``(a, b)`` pairs."""
    acc = starting_acc
    for a, b in pairs:
        acc = extension.arithmetic_extension(constant, 1, a, b, acc)
    return acc


def scalar_mul_add_ext_algebra(
    a: QuadraticExtension, b: ExtensionAlgebra, c: ExtensionAlgebra
) -> ExtensionAlgebra:
    """Return ``a * b + c`` for ``a`` in the extension field."""
    return ExtensionAlgebra(
        *(extension.mul_add_extension(a, bi, ci) for bi, ci in zip(b, c))
    )


def scalar_mul_ext_algebra(a: QuadraticExtension, b: ExtensionAlgebra) -> ExtensionAlgebra:
    """Return ``a * b`` for ``a`` in the extension field."""
    return scalar_mul_add_ext_algebra(a, b, zero_ext_algebra())


def mul_add_ext_algebra(
    a: ExtensionAlgebra, b: ExtensionAlgebra, c: ExtensionAlgebra
) -> ExtensionAlgebra:
    """Return ``a * b + c``."""
    inner: list[list[Pair]] = [[] for _ in range(_DEGREE)]
    inner_w: list[list[Pair]] = [[] for _ in range(_DEGREE)]
    for i, ai in enumerate(a.to_ext_array()):
        for j, bj in enumerate(b.to_ext_array()):
            target = inner if i + j < _DEGREE else inner_w
            target[(i + j) % _DEGREE].append((ai, bj))
    w = extension.w()
    components = [
        inner_product_extension(1, inner_product_extension(w, ci, pairs_w), pairs)
        for pairs_w, pairs, ci in zip(inner_w, inner, c)
    ]
    return ExtensionAlgebra(*components)


def mul_ext_algebra(a: ExtensionAlgebra, b: ExtensionAlgebra) -> ExtensionAlgebra:
    """Return ``a * b``."""
    return mul_add_ext_algebra(a, b, zero_ext_algebra())


def sub_ext_algebra(a: ExtensionAlgebra, b: ExtensionAlgebra) -> ExtensionAlgebra:
    """Return ``a - b``."""
    return ExtensionAlgebra(
        *(extension.sub_extension(ai, bi) for ai, bi in zip(a, b))
    )