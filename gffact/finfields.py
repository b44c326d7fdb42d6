"""This module supports finite (Galois) fields of prime order.

Function GF creates types implementing prime fields.
Instantiate an object from a field and subsequently apply overloaded
operators such as +,-,*,/ etc., to compute with field elements.
Field elements are immutable: augmented assignments such as a += b bind a new element.

Field elements are totally ordered by their values in {0, ... , p-1},
and print as value[p], for instance, 4[5] for the element 4 in GF(5).
"""

import functools
from gffact import gmpy as gmpy2
from gffact.errors import DivisionByZero, NoInverse


@functools.cache
def GF(p):
    """Create a finite field for given prime modulus p."""
    if not isinstance(p, int):
        raise TypeError('int modulus required')

    if not gmpy2.is_prime(p):
        raise ValueError('modulus is not a prime')

    GFp = type(f'GF({p})', (PrimeFieldElement,), {'__slots__': ()})
    GFp.__doc__ = 'Class of prime field elements.'
    GFp.modulus = p
    GFp.order = p
    GFp.characteristic = p
    return GFp


class PrimeFieldElement:
    """Common base class for prime field elements.

    Invariant: 'value' is reduced w.r.t. modulus, that is, 0 <= value < modulus.
    """

    __slots__ = 'value'

    modulus: int  # set by subclass
    order = None
    characteristic = None

    def __init__(self, value=0):
        if not isinstance(value, int):
            raise TypeError(f'int required, got {type(value).__name__}')

        # Python's % maps negative values into [0, modulus) as well
        self.value = value % self.modulus

    def __int__(self):
        """Extract field element as an integer value in {0, ... , p-1}."""
        return self.value

    @classmethod
    def zero(cls):
        """Additive identity."""
        return cls(0)

    @classmethod
    def one(cls):
        """Multiplicative identity."""
        return cls(1)

    def __add__(self, other):
        """Addition."""
        if isinstance(other, type(self)):
            return type(self)(self.value + other.value)

        if isinstance(other, int):
            return type(self)(self.value + other)

        return NotImplemented

    def __radd__(self, other):
        """Addition (with reflected arguments)."""
        if isinstance(other, int):
            return type(self)(self.value + other)

        return NotImplemented

    def __sub__(self, other):
        """Subtraction."""
        if isinstance(other, type(self)):
            return type(self)(self.value - other.value)

        if isinstance(other, int):
            return type(self)(self.value - other)

        return NotImplemented

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        if isinstance(other, int):
            return type(self)(other - self.value)

        return NotImplemented

    def __neg__(self):
        """Negation."""
        return type(self)(-self.value)

    def __pos__(self):
        """Unary +."""
        return type(self)(self.value)

    def __mul__(self, other):
        """Multiplication."""
        if isinstance(other, type(self)):
            return type(self)(self.value * other.value)

        if isinstance(other, int):
            return type(self)(self.value * other)

        return NotImplemented

    def __rmul__(self, other):
        """Multiplication (with reflected arguments)."""
        if isinstance(other, int):
            return type(self)(self.value * other)

        return NotImplemented

    def __truediv__(self, other):
        """Division."""
        if isinstance(other, type(self)):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return type(self)(self.value * type(self)._divisor(other))

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        if isinstance(other, int):
            return type(self)(other * type(self)._divisor(self.value))

        return NotImplemented

    def __pow__(self, other):
        """Exponentiation."""
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            return type(self)(gmpy2.powmod(self._reciprocal(self.value), -other, self.modulus))

        return type(self)(gmpy2.powmod(self.value, other, self.modulus))

    @classmethod
    def _reciprocal(cls, a):
        """Multiplicative inverse of integer a modulo p."""
        a %= cls.modulus
        if a == 0:
            raise NoInverse(f'0 has no inverse in GF({cls.modulus})')

        return gmpy2.invert(a, cls.modulus)

    @classmethod
    def _divisor(cls, a):
        if a % cls.modulus == 0:
            raise DivisionByZero('division by zero field element')

        return cls._reciprocal(a)

    def reciprocal(self):
        """Multiplicative inverse."""
        cls = type(self)
        return cls(cls._reciprocal(self.value))

    inverse = reciprocal

    def compare(self, other):
        """Return -1, 0, or 1 if self is less than, equal to, or greater than other."""
        if isinstance(other, type(self)):
            other = other.value
        elif isinstance(other, int):
            other = other % self.modulus
        else:
            raise TypeError(f'element of {type(self).__name__} expected')

        return (self.value > other) - (self.value < other)

    def __lt__(self, other):
        """Strictly less-than comparison."""
        if not isinstance(other, (type(self), int)):
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other):
        """Less-than or equal comparison."""
        if not isinstance(other, (type(self), int)):
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other):
        """Strictly greater-than comparison."""
        if not isinstance(other, (type(self), int)):
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other):
        """Greater-than or equal comparison."""
        if not isinstance(other, (type(self), int)):
            return NotImplemented

        return self.compare(other) >= 0

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, type(self)):
            return self.value == other.value

        if isinstance(other, int):
            return self.value == other % self.modulus

        return NotImplemented

    def __hash__(self):
        """Make finite field elements hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        Field elements can thus be used directly in Boolean formulas.
        """
        return bool(self.value)

    def __repr__(self):
        return f'{self.value}[{self.modulus}]'
