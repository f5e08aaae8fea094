"""This module provides matrices whose entries are polynomials over GF(p).

A PolyMatrix wraps a 2D NumPy array with dtype=object holding polynomials of a
single type created by gfpx.GFpX. The matrix product @ is the product over the
polynomial ring k[t]. Entrywise truncation modulo t^n and entrywise shifts are
provided for middle-product computations.
"""

import numpy as np
from fastarith.errors import PreconditionError, RingMismatchError


class PolyMatrix:
    """Matrix of polynomials of a given polynomial type.

    Invariant: every entry of 'value' is an instance of 'poly'.
    """

    __slots__ = 'poly', 'value'

    def __init__(self, poly, value, check=True):
        """Initialize matrix from rows of polynomials or from an array of polynomials.

        Entries are coerced to type poly, which also accepts lists of field elements.
        """
        if check:
            if isinstance(value, np.ndarray):
                rows = value.tolist()
            else:
                rows = [list(row) for row in value]
            if len(set(map(len, rows))) > 1:
                raise PreconditionError('rows of equal length required')

            a = np.empty((len(rows), len(rows[0]) if rows else 0), dtype=object)
            for i, row in enumerate(rows):
                for j, entry in enumerate(row):
                    a[i, j] = poly(entry)
            value = a
        self.poly = poly
        self.value = value

    @classmethod
    def zeros(cls, poly, shape):
        """Matrix of given shape filled with zero polynomials."""
        a = np.empty(shape, dtype=object)
        for i in range(shape[0]):
            for j in range(shape[1]):
                a[i, j] = poly(check=False, value=[])
        return cls(poly, a, check=False)

    @property
    def shape(self):
        return self.value.shape

    def __getitem__(self, key):
        if not (isinstance(key, tuple) and len(key) == 2):
            raise IndexError('use pair (i, j) for indexing matrices')

        return self.value[key]

    def __setitem__(self, key, entry):
        if not (isinstance(key, tuple) and len(key) == 2):
            raise IndexError('use pair (i, j) for indexing matrices')

        self.value[key] = self.poly(entry)

    def _map(self, f):
        a = np.empty(self.shape, dtype=object)
        for index, entry in np.ndenumerate(self.value):
            a[index] = f(entry)
        return type(self)(self.poly, a, check=False)

    def __matmul__(self, other):
        """Matrix multiplication over the polynomial ring."""
        if not isinstance(other, PolyMatrix):
            return NotImplemented

        if other.poly is not self.poly:
            raise RingMismatchError('matrices over different polynomial rings')

        if self.shape[1] != other.shape[0]:
            raise PreconditionError(f'shapes {self.shape} and {other.shape} not aligned')

        if self.shape[1] == 0:
            return self.zeros(self.poly, (self.shape[0], other.shape[1]))

        return type(self)(self.poly, self.value @ other.value, check=False)

    def truncate(self, n):
        """Entrywise reduction modulo t^n."""
        return self._map(lambda a: a.truncate(n))

    def __rshift__(self, other):
        """Entrywise division by t^other, discarding low-order coefficients."""
        if not isinstance(other, int):
            return NotImplemented

        return self._map(lambda a: a >> other)

    def __eq__(self, other):
        if not isinstance(other, PolyMatrix):
            return NotImplemented

        return (self.poly is other.poly and self.shape == other.shape and
                all(a == b for a, b in zip(self.value.flat, other.value.flat)))

    __hash__ = None

    def tolist(self):
        """Nested list of the matrix entries."""
        return self.value.tolist()

    def __repr__(self):
        return f'{type(self).__name__}({self.poly.__name__}, {self.tolist()})'
