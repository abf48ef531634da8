"""Algebraic capabilities a coefficient type must offer.

Coefficients are duck-typed. The protocols below document what each
operation expects; nothing checks them at runtime except where a
missing capability can only be discovered by trying (GCD).
"""

import math
from typing import Protocol, TypeVar

from ringpoly.errors import CapabilityError

T = TypeVar('T')


class Zero(Protocol):
    """Additive identity test: either ``is_zero()`` or ``== 0``."""

    def is_zero(self) -> bool: ...


class Ring(Zero, Protocol):
    """What addition, Horner evaluation and derivative need."""

    def __add__(self, other): ...

    def __iadd__(self, other): ...

    def __imul__(self, other): ...

    def __mul__(self, power: int): ...


class GCDCapable(Protocol):
    def gcd(self, other): ...


def is_zero(value) -> bool:
    """Zero test for any coefficient."""
    test = getattr(value, 'is_zero', None)
    if callable(test):
        return test()
    if test is not None:
        return bool(test)
    return value == 0


def gcd(a, b):
    """Greatest common divisor of two coefficients.

    Types providing a ``gcd`` method are asked directly; ints go through
    ``math.gcd`` and so never come back negative.
    """
    method = getattr(a, 'gcd', None)
    if method is not None:
        return method(b)
    if isinstance(a, int) and isinstance(b, int):
        return math.gcd(a, b)
    raise CapabilityError(f"no gcd for {type(a).__name__} and {type(b).__name__}")


def trim_zeros(coefficients: list[T]) -> list[T]:
    """Drop trailing zero coefficients in place; returns the same list."""
    while coefficients and is_zero(coefficients[-1]):
        coefficients.pop()
    return coefficients
