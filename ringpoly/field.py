"""Prime field GF(p) coefficients; default p = 2^127 - 1 (Mersenne prime)."""

from ringpoly import rng
from ringpoly.errors import CapabilityError, FieldMismatchError

PRIME = (1 << 127) - 1  # 2^127 - 1


class FieldElement:
    """Element of the finite field F_p.

    Satisfies every coefficient capability: zero test, in-place add and
    multiply, multiplication by an int power, and a (trivial) field GCD.
    """

    __slots__ = ('value', 'prime')

    def __init__(self, value: int, prime: int = PRIME):
        self.prime = prime
        self.value = value % prime

    def _coerce(self, other):
        if isinstance(other, int):
            return FieldElement(other, self.prime)
        if isinstance(other, FieldElement):
            if other.prime != self.prime:
                raise FieldMismatchError(
                    f"GF({self.prime}) and GF({other.prime}) elements do not mix")
            return other
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value + other.value, self.prime)

    def __radd__(self, other):
        if isinstance(other, int):
            return FieldElement(other + self.value, self.prime)
        return NotImplemented

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value * other.value, self.prime)

    def __rmul__(self, other):
        if isinstance(other, int):
            return FieldElement(other * self.value, self.prime)
        return NotImplemented

    def __pow__(self, exp):
        if isinstance(exp, FieldElement):
            exp = exp.value
        return FieldElement(pow(self.value, exp, self.prime), self.prime)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == (other % self.prime)
        if isinstance(other, FieldElement):
            return self.prime == other.prime and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"F({self.value})"

    def __str__(self):
        return str(self.value)

    def __bool__(self):
        return self.value != 0

    def is_zero(self) -> bool:
        return self.value == 0

    def gcd(self, other):
        """Monic GCD in a field: one unless both operands are zero."""
        coerced = self._coerce(other)
        if coerced is None:
            raise CapabilityError(f"no gcd for FieldElement and {type(other).__name__}")
        if self.value == 0 and coerced.value == 0:
            return FieldElement.zero(self.prime)
        return FieldElement.one(self.prime)

    def to_int(self):
        return self.value

    @staticmethod
    def random(prime: int = PRIME):
        """Return a random non-zero field element."""
        return FieldElement(rng.randbelow(prime - 1) + 1, prime)

    @staticmethod
    def zero(prime: int = PRIME):
        return FieldElement(0, prime)

    @staticmethod
    def one(prime: int = PRIME):
        return FieldElement(1, prime)
