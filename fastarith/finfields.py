"""This module supports prime fields GF(p).

Function GF creates types implementing prime fields.
Instantiate an object from a field and subsequently apply overloaded
operators such as +,-,*,/ etc., to compute with field elements.

Field elements are immutable: no in-place operators are provided, hence
x += y rebinds x to a new field element. Python ints mix freely with field
elements and are reduced modulo p; elements of different fields do not mix.
"""

import functools
import gmpy2
from fastarith.errors import NotInvertibleError, RingMismatchError


@functools.cache
def GF(p):
    """Create a prime field for given prime modulus p."""
    if not isinstance(p, int) or not gmpy2.is_prime(p):
        raise ValueError('modulus is not a prime')

    return type(f'GF({p})', (PrimeFieldElement,), {'__slots__': (), 'modulus': p})


class PrimeFieldElement:
    """Common base class for prime field elements.

    Invariant: 'value' is reduced w.r.t. modulus. As ints, and when printed,
    elements are signed, symmetric around zero.
    """

    __slots__ = 'value'

    modulus: int  # set by GF()

    def __init__(self, value):
        v = self._value(value)
        if v is NotImplemented:
            raise TypeError(f'int required, got {type(value).__name__}')

        self.value = v % self.modulus

    @classmethod
    def _value(cls, a):
        # int value of a, NotImplemented for foreign types
        if isinstance(a, cls):
            return a.value

        if isinstance(a, PrimeFieldElement):
            raise RingMismatchError(f'{type(a).__name__} and {cls.__name__} differ')

        if isinstance(a, int):
            return a

        return NotImplemented

    @classmethod
    def _reciprocal(cls, a):
        try:
            return int(gmpy2.invert(a, cls.modulus))
        except ZeroDivisionError:
            raise NotInvertibleError(f'{a} not invertible in {cls.__name__}') from None

    def __int__(self):
        v, p = self.value, self.modulus
        return v - p if v > p >> 1 else v

    def __add__(self, other):
        other = self._value(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value + other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._value(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value - other)

    def __rsub__(self, other):
        other = self._value(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(other - self.value)

    def __neg__(self):
        return type(self)(-self.value)

    def __pos__(self):
        return self

    def __mul__(self, other):
        other = self._value(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._value(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value * self._reciprocal(other))

    def __rtruediv__(self, other):
        other = self._value(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(other * self._reciprocal(self.value))

    def __pow__(self, other):
        """Exponentiation, with negative exponents for nonzero elements."""
        if not isinstance(other, int):
            return NotImplemented

        a = self.value
        if other < 0:
            a, other = self._reciprocal(a), -other
        return type(self)(int(gmpy2.powmod(a, other, self.modulus)))

    def reciprocal(self):
        """Multiplicative inverse."""
        return type(self)(self._reciprocal(self.value))

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return self.value == other.value

        if isinstance(other, int):
            return self.value == other % self.modulus

        return NotImplemented

    def __hash__(self):
        """Make field elements hashable, compatible with equality."""
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return str(int(self))
