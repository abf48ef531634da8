"""Generic single-variable polynomials: canonical form, addition, evaluation, derivative, content."""

from ringpoly.errors import (PolynomialError, UnsupportedOperationError,
                             CapabilityError, FieldMismatchError)
from ringpoly.capabilities import Zero, Ring, GCDCapable, is_zero, gcd, trim_zeros
from ringpoly.pairwise import combine, combine_into
from ringpoly.polynomial import (Polynomial, add, evaluate, evaluate_rational,
                                 derivative, content)
from ringpoly.field import FieldElement, PRIME
from ringpoly import rng
