"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for errors raised by ringpoly."""


class UnsupportedOperationError(PolynomialError, NotImplementedError):
    """Operation is declared but not available.

    Raised by polynomial-level GCD, which is part of the public surface
    but has no implementation. Never means a zero or identity result.
    """


class CapabilityError(PolynomialError, TypeError):
    """Coefficient type lacks a capability an operation needs.

    Raised, for example, when computing the content of a polynomial whose
    coefficients provide no GCD.
    """


class FieldMismatchError(PolynomialError, ValueError):
    """Arithmetic between field elements of different characteristic."""
