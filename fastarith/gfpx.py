"""This module supports arithmetic with polynomials over prime fields GF(p).

Function GFpX creates the polynomial type for a given field, once per field.
Polynomials over GF(p) are represented internally as coefficient lists.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the list [a_0, a_1, ... , a_n] of integers in {0, ... , p-1}.
Leading coefficient a_n is nonzero, using [] for the zero polynomial.

Externally, coefficients are elements of the field type (see finfields.GF),
so indexing a polynomial or calling coefficients() yields field elements.
Polynomials are constructed from lists of field elements (or ints in range),
from strings like 'x^2+3x+1', or from single field elements and ints, which
give constant polynomials (ints are reduced modulo p, like for GF(p)).

The operators +,-,*,<<,>>,//,%,**, and function divmod are overloaded.
Truncation, low products (mullow), reversal and formal derivatives are provided
for power series style computations, next to GCD, extended GCD, modular
inverse and modular powers.
"""

import functools
import itertools
import re
import gmpy2
from fastarith import finfields
from fastarith.errors import NotInvertibleError, PreconditionError, RingMismatchError

X = 'x'  # symbol for indeterminate in polynomials

_TERM = re.compile(rf'(\d*)({X}(?:\^(\d+))?)?')


def GFpX(field):
    """Create type for polynomials over given prime field (or over GF(p), for int p)."""
    if isinstance(field, int):
        field = finfields.GF(field)
    return _GFpX(field)


@functools.cache
def _GFpX(field):
    if not issubclass(field, finfields.PrimeFieldElement):
        raise TypeError('prime field type required')

    GFpPolynomial = type(f'{field.__name__}[{X}]', (Polynomial,), {'__slots__': ()})
    GFpPolynomial.field = field
    GFpPolynomial.p = field.modulus
    return GFpPolynomial


def _strip(a):
    # drop zero leading coefficients, in-place
    while a and not a[-1]:
        a.pop()
    return a


class Polynomial:
    """Polynomials over GF(p) represented as lists of integers in {0, ... , p-1}.

    Invariant: last element of attribute 'value' is a nonzero integer (if 'value' nonempty).
    """

    __slots__ = 'value'

    field = None
    p = None

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
        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise RingMismatchError(f'polynomial of type {cls.__name__} expected')

            return a.value

        if isinstance(a, finfields.PrimeFieldElement):
            return _strip([cls._element(a)])

        if isinstance(a, int):
            return _strip([a % cls.p])

        if isinstance(a, str):
            return cls._from_terms(a)

        if isinstance(a, (list, tuple)):
            return _strip([cls._element(a_i) for a_i in a])

        return NotImplemented

    @classmethod
    def _element(cls, a):
        # value of field element or int in range
        if isinstance(a, cls.field):
            return a.value

        if isinstance(a, finfields.PrimeFieldElement):
            raise RingMismatchError(f'coefficient in {cls.field.__name__} expected')

        if not isinstance(a, int) or not 0 <= a < cls.p:
            raise ValueError('polynomial coefficients invalid or out of range')

        return a

    @classmethod
    def vector(cls, a):
        """Return list a as a list of field elements, reducing ints modulo p.

        Raises RingMismatchError if any entry is not in the field of this polynomial type.
        """
        field = cls.field
        v = []
        for a_i in a:
            if not isinstance(a_i, field):
                if isinstance(a_i, int):
                    a_i = field(a_i)
                else:
                    raise RingMismatchError(f'elements of {field.__name__} expected')

            v.append(a_i)
        return v

    def check_modulus(self, squarefree=False):
        """Return degree of this polynomial, checking that it is suitable as a modulus.

        A modulus must be monic of positive degree. If squarefree is set,
        the modulus must also be coprime with its derivative.
        """
        cls = type(self)
        a = self.value
        if len(a) < 2:
            raise PreconditionError('modulus of positive degree required')

        if a[-1] != 1:
            raise PreconditionError('monic modulus required')

        if squarefree and cls._gcd(a, cls._derivative(a)) != [1]:
            raise PreconditionError('squarefree modulus required')

        return len(a) - 1

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials, or coefficients() for slices')

        if key < 0:
            if key == -1 and not self.value:
                return self.field(0)  # e.g., for zero polynomial z we get z[z.degree()] == 0

            raise IndexError('negative index not allowed for nonzero polynomials')

        a = self.value
        return self.field(a[key] if key < len(a) else 0)

    def __iter__(self):
        return map(self.field, self.value)

    def coefficients(self, n=None):
        """List of the first n coefficients as field elements, padded with zeros.

        If n is None (default), n is set to the degree plus one.
        """
        a = self.value
        if n is None:
            n = len(a)
        a = a[:n] + [0] * (n - len(a))
        return list(map(self.field, a))

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        p = self.p
        x = self.field(x).value
        y = functools.reduce(lambda y, c: (y * x + c) % p, reversed(self.value), 0)
        return self.field(y)

    @classmethod
    def _from_terms(cls, s):
        a = []
        for term in ''.join(s.split()).split('+'):
            match = _TERM.fullmatch(term)
            if not match or not (match[1] or match[2]):
                raise ValueError(f'ill formatted polynomial term {term!r}')

            c = int(match[1]) if match[1] else 1
            if match[3]:
                i = int(match[3])
            else:
                i = 1 if match[2] else 0
            a.extend([0] * (i + 1 - len(a)))
            a[i] += c
        p = cls.p
        return _strip([c % p for c in a])

    @staticmethod
    def _to_terms(a):
        terms = []
        for i, c in reversed(list(enumerate(a))):
            if not c:
                continue

            if i == 0:
                terms.append(str(c))
            else:
                c = '' if c == 1 else c
                terms.append(f'{c}{X}' if i == 1 else f'{c}{X}^{i}')
        return '+'.join(terms) or '0'

    @classmethod
    def _scale(cls, a, c):
        # a times c, for c nonzero modulo p
        p = cls.p
        return [(a_i * c) % p for a_i in a]

    @classmethod
    def _monic(cls, a):
        if not a or a[-1] == 1:
            return a

        return cls._scale(a, int(gmpy2.invert(a[-1], cls.p)))

    @staticmethod
    def _reverse(a, d):
        # d >= -1
        a = a[:d+1] + [0] * (d + 1 - len(a))
        return _strip(a[::-1])

    @classmethod
    def _derivative(cls, a):
        p = cls.p
        return _strip([(i * a_i) % p for i, a_i in enumerate(a) if i])

    @classmethod
    def _add(cls, a, b, sign=1):
        p = cls.p
        return _strip([(a_i + sign * b_i) % p for a_i, b_i in itertools.zip_longest(a, b, fillvalue=0)])

    @classmethod
    def _sub(cls, a, b):
        return cls._add(a, b, sign=-1)

    @classmethod
    def _mul(cls, a, b, n=None):
        # a * b, or a * b mod X^n computing only the low n coefficients
        size = len(a) + len(b) - 1
        if n is not None:
            size = min(size, n)
        if size <= 0 or not a or not b:
            return []

        c = [0] * size
        for i, a_i in enumerate(a[:size]):
            if a_i:
                for j, b_j in enumerate(b[:size - i]):
                    c[i + j] += a_i * b_j
        p = cls.p
        return _strip([c_k % p for c_k in c])

    @classmethod
    def _divmod(cls, a, b):
        if not b:
            raise ZeroDivisionError('division by zero polynomial')

        p = cls.p
        n = len(b) - 1
        if len(a) <= n:
            return [], a

        b1 = int(gmpy2.invert(b[-1], p))
        r = a[:]
        q = [0] * (len(a) - n)
        for k in range(len(a) - 1, n - 1, -1):
            q_k = (r[k] * b1) % p
            if q_k:
                q[k - n] = q_k
                for j in range(n):
                    r[k - n + j] = (r[k - n + j] - q_k * b[j]) % p
        return _strip(q), _strip(r[:n])

    @classmethod
    def _mod(cls, a, b):
        return cls._divmod(a, b)[1]

    @classmethod
    def _powmod(cls, a, n, modulus=None):
        if n < 0:
            if modulus is None:
                raise ValueError('negative exponent requires a modulus')

            a, n = cls._invert(a, modulus), -n

        def reduce(c):
            return c if modulus is None else cls._mod(c, modulus)

        a = reduce(a)
        c = reduce([1])
        while n:
            if n & 1:
                c = reduce(cls._mul(c, a))
            n >>= 1
            if n:
                a = reduce(cls._mul(a, a))
        return c

    @classmethod
    def _gcd(cls, a, b):
        while b:
            a, b = b, cls._mod(a, b)
        return cls._monic(a)

    @classmethod
    def _bezout(cls, a, b):
        # monic gcd d of a and b, with s such that s a = d modulo b
        s, s1 = [1], []
        while b:
            q, r = cls._divmod(a, b)
            a, b = b, r
            s, s1 = s1, cls._sub(s, cls._mul(q, s1))
        if not a:
            return a, s

        c = int(gmpy2.invert(a[-1], cls.p))
        return cls._scale(a, c), cls._scale(s, c)

    @classmethod
    def _gcdext(cls, a, b):
        d, s = cls._bezout(a, b)
        if not b:
            return d, s, []

        t, _ = cls._divmod(cls._sub(d, cls._mul(s, a)), b)
        return d, s, t

    @classmethod
    def _invert(cls, a, b):
        if not b:
            raise ZeroDivisionError('division by zero polynomial')

        d, s = cls._bezout(a, b)
        if d != [1]:
            raise NotInvertibleError('inverse does not exist')

        return cls._mod(s, b)

    @classmethod
    def from_terms(cls, s):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s), check=False)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return len(self.value) - 1

    def lc(self):
        """Leading coefficient (zero for zero polynomial)."""
        return self[self.degree()]

    def monic(self):
        """Monic version of polynomial. Zero polynomial remains unchanged."""
        cls = type(self)
        return cls(cls._monic(self.value), check=False)

    def reverse(self, d=None):
        """Reverse of polynomial (basically, coefficients in reverse order).

        For example, reverse of x + 2x^2 + 3x^3 is 3 + 2x + x^2.
        If d is None (default), d is set to the degree of the given polynomial.
        Otherwise, the given polynomial is first padded with zeros or truncated
        to attain the given degree d, d>=-1, before it is reversed.
        """
        if d is None:
            d = self.degree()
        elif d < -1:
            raise ValueError('degree d must be at least -1')

        cls = type(self)
        return cls(cls._reverse(self.value, d), check=False)

    def truncate(self, n):
        """Polynomial reduced modulo X^n, keeping the n low-order coefficients."""
        return type(self)(_strip(self.value[:max(n, 0)]), check=False)

    def derivative(self):
        """Formal derivative of polynomial."""
        cls = type(self)
        return cls(cls._derivative(self.value), check=False)

    def __neg__(self):
        cls = type(self)
        return cls(cls._sub([], self.value), check=False)

    def __pos__(self):
        return self

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

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

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    @classmethod
    def mullow(cls, a, b, n):
        """Product of polynomials a and b modulo X^n."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mul(a, b, n), check=False)

    @classmethod
    def lshift(cls, a, n):
        """Multiply polynomial a by X^n."""
        a = cls._intern(a)
        return cls([0] * n + a if a else [], check=False)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self).lshift(self, other)

    def __rshift__(self, other):
        """Quotient for division by X^n, discarding the n low-order coefficients."""
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(self.value[other:], check=False)

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(self.value, other)[0], check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(self.value, other)
        return cls(q, check=False), cls(r, check=False)

    @classmethod
    def powmod(cls, a, n, b):
        """Polynomial a to the power of n modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._powmod(a, n, modulus=b), check=False)

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._powmod(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of polynomials a and b, made monic."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._gcd(a, b), check=False)

    @classmethod
    def gcdext(cls, a, b):
        """Extended GCD for polynomials a and b.

        Return d, s, t satisfying s a + t b = d = gcd(a,b), with d monic.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        return tuple(cls(c, check=False) for c in cls._gcdext(a, b))

    @classmethod
    def invert(cls, a, b):
        """Inverse of polynomial a modulo polynomial b, for nonzero b.

        With b = X^n this yields the inverse of a as a power series, to precision n.
        Raises NotInvertibleError if a and b are not coprime.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._invert(a, b), check=False)

    def __repr__(self):
        return self._to_terms(self.value)

    def __eq__(self, other):
        """Equality test, also with constants and coefficient lists."""
        try:
            other = self._coerce(other)
        except (TypeError, ValueError):
            return False

        if other is NotImplemented:
            return False

        return self.value == other

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, tuple(self.value)))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)
