"""This module supports arithmetic with polynomials over GF(p).

Polynomials over GF(p) are represented as coefficient lists, by default.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the list [a_0, a_1, ... , a_n] of integers in {0, ... , p-1}.
Leading coefficient a_n is nonzero, using [] for the zero polynomial.

Binary polynomials (over GF(2)) are represented in one of two ways.
In the dense representation (default), the polynomial a_0 + a_1 X + ... + a_n X^n
corresponds to the integer a_0 + a_1 2 + ... + a_n 2^n, used as a bit vector of
fixed capacity: exponents must stay below the capacity of the polynomial type.
In the sparse representation, the same polynomial corresponds to the tuple of
exponents i with a_i = 1, in descending order, using () for the zero polynomial.

All representations are created through function GFpX, and offer the same
operations. The operators +,-,*,<<,>>,//,%,** and function divmod are overloaded.
The operators <,<=,>,>=,==,!= are overloaded as well, ordering polynomials
by their integer values a_0 + a_1 p + ... + a_n p^n (zero polynomial is the smallest).

GCD and modular powers are supported, as well as the structural operations
needed for factorization: derivative, power (substituting X^n for X) and
its inverse unpower. A simple irreducibility test is provided as well as a
basic routine to find the next largest irreducible polynomial.
"""

import os
import random
import functools
from gffact.finfields import GF
from gffact.errors import DivisionByZero, CapacityExceeded, InvalidDivisibility

X = 'X'  # symbol for indeterminate in polynomials

REPRESENTATIONS = ('list', 'dense', 'sparse')


def GFpX(p, rep=None, capacity=None):
    """Create type for polynomials over GF(p).

    Representation rep is one of 'list', 'dense', 'sparse', where the latter two
    are available for p=2 only. Default is 'dense' for p=2, and 'list' otherwise.
    For the dense representation, capacity bounds the degree of all polynomials
    to capacity-1 (default set by command line option --capacity).
    """
    if rep is None:
        rep = 'dense' if p == 2 else 'list'
    if rep not in REPRESENTATIONS:
        raise ValueError(f'unknown representation {rep!r}')

    if rep == 'dense':
        if capacity is None:
            capacity = int(os.getenv('GFFACT_CAPACITY', '1024'))
        if capacity < 1:
            raise ValueError('capacity must be positive')

    elif capacity is not None:
        raise ValueError('capacity only applies to dense representation')

    return _GFpX(p, rep, capacity)


@functools.cache
def _GFpX(p, rep, capacity):
    field = GF(p)
    if rep == 'list':
        BasePolynomial = Polynomial
        name = f'GF({p})[{X}]'
    elif p != 2:
        raise ValueError(f'{rep} representation requires p=2')

    elif rep == 'dense':
        BasePolynomial = BinaryPolynomial
        name = f'GF(2)[{X}]<{capacity}>'
    else:
        BasePolynomial = SparseBinaryPolynomial
        name = f'GF(2)[{X}]~'
    GFpPolynomial = type(name, (BasePolynomial,), {'__slots__': ()})
    GFpPolynomial.p = p
    GFpPolynomial.field = field
    GFpPolynomial.rep = rep
    GFpPolynomial.capacity = capacity
    return GFpPolynomial


class Polynomial:
    """Polynomials over GF(p) represented as lists of integers in {0, ... , p-1}.

    Invariant: last element of attribute 'value' is a nonzero integer (if 'value' nonempty).
    """

    __slots__ = 'value'

    p = None
    field = None
    rep = None
    capacity = None

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError(f'polynomial over GF({cls.p}) expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, cls):
            return a.value

        if isinstance(a, Polynomial):
            return NotImplemented  # polynomials of different types do not mix

        if isinstance(a, int):
            return cls._from_int(a)

        if isinstance(a, (list, tuple)):
            return cls._from_coefficients(a)

        return NotImplemented

    @classmethod
    def _from_coefficients(cls, a):
        # a lists coefficients by ascending exponent, as ints or field elements
        p = cls.p
        c = []
        for a_i in a:
            if isinstance(a_i, cls.field):
                a_i = a_i.value
            elif not isinstance(a_i, int):
                raise TypeError(f'coefficients in GF({p}) expected')

            c.append(a_i % p)
        while c and not c[-1]:
            c.pop()
        return cls._from_list(c)

    def __int__(self):
        return self._to_int(self.value)

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        return self._getitem(key)

    def _getitem(self, key):
        try:
            v = self.value[key]
        except IndexError:
            v = 0
        return v

    def __iter__(self):
        yield from self._to_list(self.value)

    def coefficients(self):
        """List of coefficients as field elements, ascending by exponent."""
        field = self.field
        return [field(c) for c in self._to_list(self.value)]

    @classmethod
    def _from_int(cls, a):
        p = cls.p
        neg = a < 0
        if neg:
            a = -a
        c = []
        while a:
            a, r = divmod(a, p)
            c.append(p - r if neg and r else r)
        return c

    @classmethod
    def _to_int(cls, a):
        p = cls.p
        s = 0
        for ai in reversed(a):
            s *= p
            s += ai
        return s

    @staticmethod
    def _from_list(a):
        return a

    @staticmethod
    def _to_list(a):
        return list(a)

    @classmethod
    def _to_terms(cls, a, x=X):
        if a == []:
            return '0'

        field = cls.field
        terms = []
        for i in range(len(a) - 1, -1, -1):
            if a[i]:
                c = repr(field(a[i]))
                if i == 0:
                    terms.append(c)  # x^0 = 1
                elif i == 1:
                    terms.append(x if a[i] == 1 else f'{c}*{x}')  # x^1 = x
                else:
                    terms.append(f'{x}^{i}' if a[i] == 1 else f'{c}*{x}^{i}')
        return ' + '.join(terms)

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @staticmethod
    def _lc(a):
        return a[-1] if a else 0

    @classmethod
    def _monic(cls, a):
        a1 = a[-1] if a else 0
        if a and a1 != 1:
            p = cls.p
            a1 = cls.field._reciprocal(a1)
            a = [(a_i * a1) % p for a_i in a[:-1]]
            a.append(1)
        return a

    @classmethod
    def _scale(cls, a, c):
        p = cls.p
        c %= p
        if c == 0:
            return []

        return [(a_i * c) % p for a_i in a]

    @classmethod
    def _neg(cls, a):
        p = cls.p
        return [0 if a_i == 0 else p - a_i for a_i in a]

    @classmethod
    def _pos(cls, a):
        return a

    @classmethod
    def _add(cls, a, b):
        p = cls.p
        if len(a) < len(b):
            a, b = b, a
        # len(a) >= len(b)
        c = a[:]
        for i, b_i in enumerate(b):
            c[i] += b_i
            if c[i] >= p:
                c[i] -= p
        while c and not c[-1]:
            c.pop()
        return c

    @classmethod
    def _sub(cls, a, b):
        p = cls.p
        c = a + [0] * (len(b) - len(a))
        for i, b_i in enumerate(b):
            c[i] -= b_i
            if c[i] < 0:
                c[i] += p
        while c and not c[-1]:
            c.pop()
        return c

    @classmethod
    def _mul(cls, a, b):
        p = cls.p
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        if not a:
            return []

        c = [0] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        for i in range(len(c)):
            c[i] %= p
        return c

    @classmethod
    def _lshift(cls, a, n):
        if not a:
            return a

        return [0] * n + a

    @classmethod
    def _rshift(cls, a, n):
        return a[n:]

    @classmethod
    def _mod(cls, a, b):
        p = cls.p
        if b is None:  # see _powmod()
            return a  # NB: in-place

        if b == []:
            raise DivisionByZero('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return a

        b1 = cls.field._reciprocal(b[-1])
        r = a[:]
        for i in range(m - n, -1, -1):
            if len(r) >= i + n:
                q_i = (r[-1] * b1) % p
                for j in range(n):
                    r[i + j] -= q_i * b[j]
                    r[i + j] %= p
                while r and not r[-1]:
                    r.pop()
        return r

    @classmethod
    def _divmod(cls, a, b):
        p = cls.p
        if b == []:
            raise DivisionByZero('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return [], a

        b1 = cls.field._reciprocal(b[-1])
        q, r = [0] * (m - n + 1), a[:]
        for i in range(m - n, -1, -1):
            if len(r) >= i + n:
                q[i] = q_i = (r[-1] * b1) % p
                for j in range(n):
                    r[i + j] -= q_i * b[j]
                    r[i + j] %= p
                while r and not r[-1]:
                    r.pop()
        return q, r

    @classmethod
    def _mulmod(cls, a, b, modulus):
        return cls._mod(cls._mul(a, b), modulus)

    @classmethod
    def _powmod(cls, a, n, modulus=None):
        if n < 0:
            raise ValueError('negative exponent')

        if n == 0:
            return cls._mod(cls._intern(1), modulus)

        a = cls._mod(a, modulus)
        b = a
        for i in range(n.bit_length()-2, -1, -1):
            b = cls._mulmod(b, b, modulus)
            if (n >> i) & 1:
                b = cls._mulmod(b, a, modulus)
        return b

    @classmethod
    def _gcd(cls, a, b):
        while b:
            a, b = b, cls._mod(a, b)
        a = cls._monic(a)
        return a

    @classmethod
    def _derivative(cls, a):
        p = cls.p
        c = [(i * a[i]) % p for i in range(1, len(a))]
        while c and not c[-1]:
            c.pop()
        return c

    @classmethod
    def _power(cls, a, n):
        if not a:
            return a

        c = [0] * ((len(a) - 1) * n + 1)
        for i, a_i in enumerate(a):
            c[i * n] = a_i
        return c

    @classmethod
    def _unpower(cls, a, n):
        for i, a_i in enumerate(a):
            if a_i and i % n:
                raise InvalidDivisibility(f'exponent {i} not divisible by {n}')

        return a[::n]

    @classmethod
    def _is_irreducible(cls, a):
        p = cls.p
        if cls._deg(a) <= 0:
            return False

        x = cls._from_list([0, 1])
        b = x
        for _ in range(cls._deg(a) // 2):
            b = cls._powmod(b, p, modulus=a)
            if cls._deg(cls._gcd(cls._sub(b, x), a)) != 0:
                return False

        return True

    @classmethod
    def _next_irreducible(cls, a):
        p = cls.p
        a = cls._to_int(a)
        while True:
            a += 1
            if a % p == 0:
                a += 1
            _a = cls._from_int(a)
            if cls._lc(_a) != 1:  # ensure monic a
                a = p**(cls._deg(_a) + 1)
                continue
            if cls._is_irreducible(_a):
                break

        return _a

    @classmethod
    def to_terms(cls, a, x=X):
        """Convert polynomial a to a string with sum of powers of x."""
        a = cls._intern(a)
        return cls._to_terms(a, x)

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (-1 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return self._deg(self.value)

    @classmethod
    def monomial(cls, n):
        """Monomial X^n, for n >= 0."""
        if n < 0:
            raise ValueError('negative exponent')

        return cls(cls._lshift(cls._intern(1), n), check=False)

    @classmethod
    def random(cls, n, rng=None):
        """Uniformly random polynomial of degree less than n.

        Coefficients are drawn from rng, an instance of random.Random (fresh one, by default).
        """
        if rng is None:
            rng = random.Random()
        p = cls.p
        return cls(cls._from_coefficients([rng.randrange(p) for _ in range(n)]), check=False)

    def monic(self):
        """Monic version of polynomial.

        Zero polynomial remains unchanged.
        """
        cls = type(self)
        return cls(cls._monic(self.value), check=False)

    def scale(self, c):
        """Multiply polynomial by scalar c (an int or a field element)."""
        cls = type(self)
        if isinstance(c, cls.field):
            c = c.value
        elif not isinstance(c, int):
            raise TypeError(f'scalar in GF({cls.p}) expected')

        return cls(cls._scale(self.value, c), check=False)

    def derivative(self):
        """Formal derivative of polynomial."""
        cls = type(self)
        return cls(cls._derivative(self.value), check=False)

    def power(self, n):
        """Polynomial with every exponent multiplied by n, that is, X^n substituted for X."""
        if not isinstance(n, int) or n < 1:
            raise ValueError('positive int required')

        cls = type(self)
        return cls(cls._power(self.value, n), check=False)

    def unpower(self, n):
        """Polynomial with every exponent divided by n, inverting power(n).

        Raises InvalidDivisibility if some exponent is not a multiple of n.
        """
        if not isinstance(n, int) or n < 1:
            raise ValueError('positive int required')

        cls = type(self)
        return cls(cls._unpower(self.value, n), check=False)

    def __neg__(self):
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        cls = type(self)
        return cls(cls._pos(self.value), check=False)

    @classmethod
    def add(cls, a, b):
        """Add polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._add(a, b), check=False)

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    @classmethod
    def sub(cls, a, b):
        """Subtract polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._sub(a, b), check=False)

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    @classmethod
    def mul(cls, a, b):
        """Multiply polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mul(a, b), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    @classmethod
    def lshift(cls, a, n):
        """Multiply polynomial a by X^n."""
        a = cls._intern(a)
        return cls(cls._lshift(a, n), check=False)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._lshift(self.value, other), check=False)

    def __rlshift__(self, other):
        return NotImplemented

    @classmethod
    def rshift(cls, a, n):
        """Quotient for polynomial a divided by X^n, assuming a is multiple of X^n."""
        a = cls._intern(a)
        return cls(cls._rshift(a, n), check=False)

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._rshift(self.value, other), check=False)

    def __rrshift__(self, other):
        return NotImplemented

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(self.value, other)[0], check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(other, self.value)[0], check=False)

    @classmethod
    def mod(cls, a, b):
        """Reduce polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mod(a, b), check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(other, self.value), check=False)

    @classmethod
    def divmod(cls, a, b):
        """Divide polynomial a by polynomial b with remainder, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        q, r = cls._divmod(a, b)
        return cls(q, check=False), cls(r, check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(self.value, other)
        return cls(q, check=False), cls(r, check=False)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(other, self.value)
        return cls(q, check=False), cls(r, check=False)

    @classmethod
    def powmod(cls, a, n, b):
        """Polynomial a to the power of n modulo polynomial b, for nonzero b and n >= 0."""
        a = cls._intern(a)
        b = cls._intern(b)
        if not b:
            raise DivisionByZero('division by zero polynomial')

        return cls(cls._powmod(a, n, modulus=b), check=False)

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._powmod(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of polynomials a and b, made monic.

        Raises DivisionByZero if both a and b are zero.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        if not a and not b:
            raise DivisionByZero('gcd of two zero polynomials')

        return cls(cls._gcd(a, b), check=False)

    @classmethod
    def is_irreducible(cls, a):
        """Test polynomial a for irreducibility."""
        a = cls._intern(a)
        return cls._is_irreducible(a)

    @classmethod
    def next_irreducible(cls, a):
        """Return next monic irreducible polynomial > a, in the order of integer values.

        E.g., X < X+1 < X^2+X+1 < X^3+X+1 < X^3+X^2+1 < ... for p=2.
        """
        a = cls._intern(a)
        return cls(cls._next_irreducible(a), check=False)

    def __repr__(self):
        return self._to_terms(self.value)

    def __lt__(self, other):
        """Strictly less-than comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) < self._to_int(other)

    def __le__(self, other):
        """Less-than or equal comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) <= self._to_int(other)

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return False

        return self.value == other

    def __ge__(self, other):
        """Greater-than or equal comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) >= self._to_int(other)

    def __gt__(self, other):
        """Strictly greater-than comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) > self._to_int(other)

    def __ne__(self, other):
        """Negated equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return True

        return self.value != other

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, tuple(self.value)))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)


class BinaryPolynomial(Polynomial):
    """Polynomials over GF(2) represented as nonnegative integers (bit vectors).

    Invariant: attribute 'value' has bit length at most 'capacity'.
    """

    __slots__ = ()

    p = 2

    @classmethod
    def _check(cls, a):
        if a.bit_length() > cls.capacity:
            raise CapacityExceeded(f'degree {a.bit_length() - 1} exceeds capacity {cls.capacity}')

        return a

    def __int__(self):
        return self.value

    def _getitem(self, key):
        return (self.value >> key) & 1

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self.value))

    @classmethod
    def _from_int(cls, a):
        return cls._check(abs(a))

    @staticmethod
    def _to_int(a):
        return a

    @classmethod
    def _from_list(cls, a):
        s = 0
        for ai in reversed(a):
            s <<= 1
            s += ai
        return cls._check(s)

    @staticmethod
    def _to_list(a):
        c = []
        while a:
            a, r = divmod(a, 2)
            c.append(r)
        return c

    @staticmethod
    def _to_terms(a, x=X):
        if a == 0:
            return '0'

        terms = []
        for i in range(a.bit_length() - 1, -1, -1):
            if (a >> i) & 1:
                if i == 0:
                    terms.append('1')  # x^0 = 1
                elif i == 1:
                    terms.append(x)  # x^1 = x
                else:
                    terms.append(f'{x}^{i}')
        return ' + '.join(terms)

    @staticmethod
    def _deg(a):
        return a.bit_length() - 1

    @staticmethod
    def _lc(a):
        return int(a != 0)

    @staticmethod
    def _monic(a):
        return a

    @staticmethod
    def _scale(a, c):
        return a if c % 2 else 0

    @staticmethod
    def _neg(a):
        return a

    @staticmethod
    def _pos(a):
        return a

    @staticmethod
    def _add(a, b):
        return a ^ b

    _sub = _add

    @classmethod
    def _mul(cls, a, b):
        if a < b:
            a, b = b, a
        # a >= b
        if b and a.bit_length() + b.bit_length() - 1 > cls.capacity:
            raise CapacityExceeded(f'product exceeds capacity {cls.capacity}')

        return cls._clmul(a, b)

    @staticmethod
    def _clmul(a, b):
        # carryless product, not bounded by capacity
        c = 0
        while b:
            if b & 1:
                c ^= a
            a <<= 1
            b >>= 1
        return c

    @classmethod
    def _mulmod(cls, a, b, modulus):
        if modulus is None:
            return cls._mul(a, b)

        return cls._mod(cls._clmul(a, b), modulus)  # only the remainder is stored

    @classmethod
    def _lshift(cls, a, n):
        return cls._check(a << n)

    @staticmethod
    def _rshift(a, n):
        return a >> n

    @staticmethod
    def _mod(a, b):
        if b is None:  # see _powmod()
            return a

        if b == 0:
            raise DivisionByZero('division by zero polynomial')

        m = a.bit_length()
        n = b.bit_length()
        if m < n:
            return a

        b <<= m - n
        a ^= b
        for i in range(m-2, n-2, -1):
            b >>= 1
            if (a >> i) & 1:
                a ^= b
        return a

    @staticmethod
    def _divmod(a, b):
        if b == 0:
            raise DivisionByZero('division by zero polynomial')

        m = a.bit_length()
        n = b.bit_length()
        if m < n:
            return 0, a

        b <<= m - n
        q = 1
        a ^= b
        for i in range(m-2, n-2, -1):
            b >>= 1
            q <<= 1
            if (a >> i) & 1:
                q ^= 1
                a ^= b
        return q, a

    @classmethod
    def _gcd(cls, a, b):
        while b:
            a, b = b, cls._mod(a, b)
        return a

    @classmethod
    @functools.cache
    def _derivative_mask(cls):
        """Return bit mask selecting all even exponents below capacity."""
        k = (cls.capacity + 1) // 2
        return ((1 << 2*k) - 1) // 3  # 0b...010101

    @classmethod
    def _derivative(cls, a):
        # X^i with i odd becomes X^(i-1), X^i with i even vanishes
        return (a >> 1) & cls._derivative_mask()

    @classmethod
    def _power(cls, a, n):
        if a and cls._deg(a) * n >= cls.capacity:
            raise CapacityExceeded(f'degree {cls._deg(a) * n} exceeds capacity {cls.capacity}')

        c = 0
        i = 0
        while a:
            if a & 1:
                c |= 1 << (i * n)
            a >>= 1
            i += 1
        return c

    @staticmethod
    def _unpower(a, n):
        c = 0
        i = 0
        while a:
            if a & 1:
                if i % n:
                    raise InvalidDivisibility(f'exponent {i} not divisible by {n}')

                c |= 1 << (i // n)
            a >>= 1
            i += 1
        return c

    @classmethod
    def _is_irreducible(cls, a):
        if a <= 1:
            return False

        b = 2
        for _ in range(cls._deg(a) // 2):
            b = cls._mulmod(b, b, a)
            if cls._gcd(b^2, a) != 1:
                return False

        return True

    @classmethod
    def _next_irreducible(cls, a):
        if a <= 1:
            a = 2
        else:
            a += 1 + a%2
            while not cls._is_irreducible(a):
                a += 2
        return cls._check(a)


class SparseBinaryPolynomial(Polynomial):
    """Polynomials over GF(2) represented as tuples of exponents in descending order.

    Invariant: attribute 'value' is a strictly decreasing tuple of nonnegative integers.
    """

    __slots__ = ()

    p = 2

    def _getitem(self, key):
        return int(key in self.value)

    @staticmethod
    def _from_int(a):
        a = abs(a)
        return tuple(i for i in range(a.bit_length() - 1, -1, -1) if (a >> i) & 1)

    @staticmethod
    def _to_int(a):
        s = 0
        for e in a:
            s |= 1 << e
        return s

    @staticmethod
    def _from_list(a):
        return tuple(i for i in range(len(a) - 1, -1, -1) if a[i])

    @staticmethod
    def _to_list(a):
        c = [0] * (a[0] + 1) if a else []
        for e in a:
            c[e] = 1
        return c

    @staticmethod
    def _to_terms(a, x=X):
        if a == ():
            return '0'

        terms = []
        for e in a:
            if e == 0:
                terms.append('1')  # x^0 = 1
            elif e == 1:
                terms.append(x)  # x^1 = x
            else:
                terms.append(f'{x}^{e}')
        return ' + '.join(terms)

    @staticmethod
    def _deg(a):
        return a[0] if a else -1

    @staticmethod
    def _lc(a):
        return int(a != ())

    @staticmethod
    def _monic(a):
        return a

    @staticmethod
    def _scale(a, c):
        return a if c % 2 else ()

    @staticmethod
    def _neg(a):
        return a

    @staticmethod
    def _pos(a):
        return a

    @staticmethod
    def _add_shifted(a, b, n):
        # a + b X^n, merging two descending exponent sequences
        c = []
        i = j = 0
        k, l = len(a), len(b)
        while i < k and j < l:
            a_i, b_j = a[i], b[j] + n
            if a_i > b_j:
                c.append(a_i)
                i += 1
            elif a_i < b_j:
                c.append(b_j)
                j += 1
            else:  # 1 + 1 = 0
                i += 1
                j += 1
        c.extend(a[i:])
        c.extend(b_j + n for b_j in b[j:])
        return tuple(c)

    @classmethod
    def _add(cls, a, b):
        return cls._add_shifted(a, b, 0)

    _sub = _add

    @classmethod
    def _mul(cls, a, b):
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b), toggle exponents e+f into c for all e in a, f in b
        c = ()
        for e in a:
            c = cls._add_shifted(c, b, e)
        return c

    @staticmethod
    def _lshift(a, n):
        return tuple(e + n for e in a)

    @staticmethod
    def _rshift(a, n):
        return tuple(e - n for e in a if e >= n)

    @classmethod
    def _mod(cls, a, b):
        if b is None:  # see _powmod()
            return a

        if b == ():
            raise DivisionByZero('division by zero polynomial')

        n = b[0]
        while a and a[0] >= n:
            a = cls._add_shifted(a, b, a[0] - n)
        return a

    @classmethod
    def _divmod(cls, a, b):
        if b == ():
            raise DivisionByZero('division by zero polynomial')

        n = b[0]
        q = []
        while a and a[0] >= n:
            q.append(a[0] - n)
            a = cls._add_shifted(a, b, a[0] - n)
        return tuple(q), a

    @staticmethod
    def _derivative(a):
        return tuple(e - 1 for e in a if e & 1)

    @staticmethod
    def _power(a, n):
        return tuple(e * n for e in a)

    @staticmethod
    def _unpower(a, n):
        for e in a:
            if e % n:
                raise InvalidDivisibility(f'exponent {e} not divisible by {n}')

        return tuple(e // n for e in a)
