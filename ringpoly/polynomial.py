"""Polynomials over an arbitrary coefficient ring. coeffs[0] = constant term.

Operations that can avoid a copy come in two flavours. The default
leaves every operand untouched. With ``consume=True`` the operand's
coefficient list is moved into the computation and the operand is left
empty; use it when the operand is not needed afterwards.
"""

import copy
import operator
from fractions import Fraction
from functools import reduce
from itertools import islice
from typing import Callable, Iterable, Iterator

from ringpoly import rng
from ringpoly.capabilities import gcd, is_zero, trim_zeros
from ringpoly.errors import UnsupportedOperationError
from ringpoly.pairwise import combine, combine_into

EMPTY_DISPLAY = '<empty polynomial>'
VARIABLE = 'x'
RANDOM_BOUND = 99  # default random coefficients lie in [-99, 99]


def _identity(value):
    return value


def _horner(coeffs: Iterator, x, seed: Callable):
    """Fold coefficients given highest power first."""
    acc = seed(next(coeffs))
    for coeff in coeffs:
        acc *= x
        acc += coeff
    return acc


def _format_term(power: int, coeff) -> str:
    if power == 0:
        return str(coeff)
    if power == 1:
        return f"{coeff}*{VARIABLE}"
    return f"{coeff}*{VARIABLE}^{power}"


class Polynomial:
    """Polynomial in one variable, always kept without trailing zeros.

    ``zero`` is an optional factory for the ring's additive identity,
    used when an empty polynomial has to produce a coefficient value
    (evaluation, content). Defaults to the integer 0.
    """

    __slots__ = ('_coeffs', '_zero')
    __hash__ = None

    def __init__(self, coefficients: Iterable = (), zero: Callable | None = None):
        # in-place addition mutates coefficients, so none may be shared
        self._coeffs = trim_zeros([copy.copy(c) for c in coefficients])
        self._zero = zero

    @classmethod
    def _wrap(cls, coeffs: list, zero: Callable | None) -> 'Polynomial':
        """Take ownership of ``coeffs`` without copying."""
        poly = cls.__new__(cls)
        poly._coeffs = trim_zeros(coeffs)
        poly._zero = zero
        return poly

    @classmethod
    def zero(cls, zero: Callable | None = None) -> 'Polynomial':
        return cls(zero=zero)

    @staticmethod
    def random(degree: int, sample: Callable | None = None, constant=None,
               zero: Callable | None = None) -> 'Polynomial':
        """Random polynomial of the given degree.

        ``sample`` draws one coefficient (default: ints in
        [-RANDOM_BOUND, RANDOM_BOUND] from ringpoly.rng). The leading
        coefficient is redrawn until non-zero. ``constant`` fixes p(0);
        for degree 0 it is the leading coefficient and must be non-zero.
        """
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        if degree == 0 and constant is not None and is_zero(constant):
            raise ValueError("a degree 0 polynomial needs a non-zero constant")
        if sample is None:
            def sample():
                return rng.randint(-RANDOM_BOUND, RANDOM_BOUND)
        coeffs = [sample() for _ in range(degree)]
        leading = sample()
        while is_zero(leading):
            leading = sample()
        coeffs.append(leading)
        if constant is not None:
            coeffs[0] = constant
        return Polynomial(coeffs, zero)

    # -- container ---------------------------------------------------------

    @property
    def coefficients(self) -> tuple:
        return tuple(self._coeffs)

    def into_coefficients(self) -> list:
        """Move the coefficient list out, leaving this polynomial empty."""
        coeffs, self._coeffs = self._coeffs, []
        return coeffs

    @property
    def degree(self) -> int | None:
        """Highest power present; None for the zero polynomial."""
        return len(self._coeffs) - 1 if self._coeffs else None

    def ring_zero(self):
        return self._zero() if self._zero is not None else 0

    def __len__(self):
        return len(self._coeffs)

    def is_empty(self) -> bool:
        return not self._coeffs

    def __bool__(self):
        return bool(self._coeffs)

    def __getitem__(self, power):
        return self._coeffs[power]

    def __iter__(self):
        return iter(self._coeffs)

    def __reversed__(self):
        return reversed(self._coeffs)

    def apply(self, fn: Callable) -> 'Polynomial':
        """Replace each coefficient with fn(power, coeff), in place."""
        coeffs = self._coeffs
        for power, coeff in enumerate(coeffs):
            coeffs[power] = fn(power, coeff)
        trim_zeros(coeffs)
        return self

    def is_zero(self) -> bool:
        # high coefficient is usually non-zero, so test from the top
        return all(is_zero(c) for c in reversed(self._coeffs))

    def set_zero(self):
        self._coeffs.clear()

    def copy(self) -> 'Polynomial':
        return Polynomial._wrap([copy.copy(c) for c in self._coeffs], self._zero)

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __repr__(self):
        return f"Polynomial({self._coeffs!r})"

    def __str__(self):
        if not self._coeffs:
            return EMPTY_DISPLAY
        return ' + '.join(_format_term(power, c) for power, c in enumerate(self._coeffs))

    # -- addition ----------------------------------------------------------

    def add_assign(self, other: 'Polynomial', consume: bool = False) -> 'Polynomial':
        """In-place addition; returns self.

        With ``consume=True`` the coefficients of ``other`` are moved
        into self and ``other`` is left empty.
        """
        if other is self:
            other = self.copy()
        if consume:
            combine_into(self._coeffs, other.into_coefficients(),
                         operator.iadd, _identity, _identity)
        else:
            combine_into(self._coeffs, other._coeffs,
                         operator.iadd, _identity, copy.copy)
        return self

    def __iadd__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add_assign(other)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        coeffs = combine(self._coeffs, other._coeffs, operator.add, copy.copy, copy.copy)
        return Polynomial._wrap(coeffs, self._zero)

    # -- evaluation --------------------------------------------------------

    def evaluate(self, x, consume: bool = False):
        """Evaluate polynomial at x using Horner's method.

        The empty polynomial yields the ring zero and never looks at x.
        """
        if not self._coeffs:
            return self.ring_zero()
        if consume:
            return _horner(reversed(self.into_coefficients()), x, _identity)
        return _horner(reversed(self._coeffs), x, copy.copy)

    def evaluate_rational(self, x, consume: bool = False) -> Fraction:
        """Evaluate at an exact rational point.

        Coefficients are lifted into Fraction one at a time as the fold
        reaches them, so they must be ints or Fractions. The empty
        polynomial gives Fraction(0) whatever its zero factory.
        """
        if not self._coeffs:
            return Fraction(0)
        x = Fraction(x)
        coeffs = self.into_coefficients() if consume else self._coeffs
        return _horner(reversed(coeffs), x, Fraction)

    # -- calculus and gcd --------------------------------------------------

    def derivative(self, consume: bool = False) -> 'Polynomial':
        """Formal derivative: c*x^k becomes (c*k)*x^(k-1)."""
        coeffs = self.into_coefficients() if consume else self._coeffs
        result = [c * power for power, c in islice(enumerate(coeffs), 1, None)]
        return Polynomial._wrap(result, self._zero)

    def content(self):
        """Greatest common divisor of all coefficients."""
        if not self._coeffs:
            return self.ring_zero()
        return reduce(gcd, islice(self._coeffs, 1, None), copy.copy(self._coeffs[0]))

    def gcd(self, other: 'Polynomial') -> 'Polynomial':
        raise UnsupportedOperationError("polynomial gcd is not implemented")


def add(lhs: Polynomial, rhs: Polynomial, *, consume_lhs: bool = False,
        consume_rhs: bool = False) -> Polynomial:
    """Sum of two polynomials, reusing whichever operand may be consumed.

    A consumed lhs is updated in place and returned. A consumed rhs alone
    is updated in place with lhs added to it (addition commutes). With
    neither consumed a new polynomial is built.
    """
    if consume_lhs:
        return lhs.add_assign(rhs, consume=consume_rhs)
    if consume_rhs:
        return rhs.add_assign(lhs)
    return lhs + rhs


def evaluate(poly: Polynomial, x, consume: bool = False):
    return poly.evaluate(x, consume=consume)


def evaluate_rational(poly: Polynomial, x, consume: bool = False) -> Fraction:
    return poly.evaluate_rational(x, consume=consume)


def derivative(poly: Polynomial, consume: bool = False) -> Polynomial:
    return poly.derivative(consume=consume)


def content(poly: Polynomial):
    return poly.content()
