"""Tests for coefficient capabilities and canonical trimming."""

from fractions import Fraction

import pytest

from ringpoly import rng
from ringpoly.capabilities import gcd, is_zero, trim_zeros
from ringpoly.errors import CapabilityError
from ringpoly.field import FieldElement
from ringpoly.polynomial import Polynomial


def test_is_zero():
    assert is_zero(0)
    assert is_zero(0.0)
    assert is_zero(Fraction(0))
    assert is_zero(FieldElement(0))
    assert is_zero(Polynomial([0]))
    assert not is_zero(3)
    assert not is_zero(Polynomial([1]))

def test_gcd_ints():
    assert gcd(12, 18) == 6
    assert gcd(-4, 6) == 2
    assert gcd(0, 0) == 0

def test_gcd_missing():
    with pytest.raises(CapabilityError):
        gcd(Fraction(1, 2), Fraction(1, 3))
    with pytest.raises(TypeError):
        gcd('a', 'b')

def test_trim_zeros():
    coeffs = [1, 0, 2, 0, 0]
    assert trim_zeros(coeffs) is coeffs
    assert coeffs == [1, 0, 2]
    assert trim_zeros([0, 0]) == []
    assert trim_zeros([]) == []

def test_canonical_form_random():
    rng.set_seed(23)
    for _ in range(50):
        raw = [rng.randint(-1, 1) for _ in range(rng.randbelow(8))]
        p = Polynomial(raw)
        assert p.is_empty() or not is_zero(p[-1])
        assert list(p) == raw[:len(p)]
        assert all(c == 0 for c in raw[len(p):])

def test_seeded_rng_is_reproducible():
    a = rng.DeterministicRNG(9)
    b = rng.DeterministicRNG(9)
    assert [a.randint(1, 6) for _ in range(10)] == [b.randint(1, 6) for _ in range(10)]
    assert all(1 <= rng.DeterministicRNG().randint(1, 6) <= 6 for _ in range(20))

class PropertyZero:
    def __init__(self, zero):
        self.is_zero = zero

def test_is_zero_attribute_not_callable():
    assert is_zero(PropertyZero(True))
    assert not is_zero(PropertyZero(False))
    assert Polynomial([1, PropertyZero(True)]).coefficients == (1,)
