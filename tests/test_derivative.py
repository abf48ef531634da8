"""Tests for formal differentiation."""

from ringpoly import rng
from ringpoly.field import FieldElement
from ringpoly.polynomial import Polynomial, derivative


def test_derivative_of_constant():
    assert Polynomial([5]).derivative().is_empty()

def test_derivative_of_empty():
    assert Polynomial().derivative() == Polynomial()

def test_derivative():
    assert Polynomial([1, 2, 3]).derivative().coefficients == (2, 6)
    assert Polynomial([0, 0, 0, 1]).derivative().coefficients == (0, 0, 3)

def test_derivative_consume():
    p = Polynomial([1, 2, 3])
    d = derivative(p, consume=True)
    assert d.coefficients == (2, 6)
    assert p.is_empty()

def test_derivative_borrowed_keeps_operand():
    p = Polynomial([1, 2, 3])
    assert derivative(p) == Polynomial([2, 6])
    assert p.coefficients == (1, 2, 3)

def test_derivative_trims_in_characteristic_p():
    p = Polynomial([FieldElement(1, 3)] * 4)
    d = p.derivative()
    assert d.coefficients == (FieldElement(1, 3), FieldElement(2, 3))

def test_derivative_keeps_zero_factory():
    p = Polynomial([FieldElement(4)], zero=FieldElement.zero)
    assert p.derivative().evaluate(None) == FieldElement(0)

def test_derivative_linear():
    rng.set_seed(17)
    for _ in range(20):
        p = Polynomial.random(rng.randbelow(7))
        q = Polynomial.random(rng.randbelow(7))
        assert (p + q).derivative() == p.derivative() + q.derivative()
