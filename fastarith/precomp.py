"""Precomputed values for repeated computations modulo a fixed polynomial."""

import logging
from fastarith.dual import monomial_to_dual_pre, rev_inverse
from fastarith.errors import PreconditionError


class Precomputed:
    """Immutable context bound to one monic squarefree modulus P.

    Attribute rev_inverse serves as TP for monomial_to_dual_pre() and for
    rem_t_pre() with n - deg(P) <= precision, attribute derivative_inverse serves
    as S for dual_to_monomial_pre(), and attribute trace serves as up for the
    _pre variants of the isomorphisms.
    """

    __slots__ = '_modulus', '_precision', '_rev_inverse', '_derivative_inverse', '_trace'

    def __init__(self, P, precision=None):
        m = P.check_modulus(squarefree=True)
        if precision is None:
            precision = m
        elif precision < m:
            raise PreconditionError(f'precision {precision} less than degree {m}')

        poly = type(P)
        self._modulus = P
        self._precision = precision
        self._rev_inverse = rev_inverse(P, precision)
        self._derivative_inverse = poly.invert(P.derivative(), P)
        self._trace = tuple(monomial_to_dual_pre([1], P, self._rev_inverse))
        logging.debug(f'Precomputed values for modulus of degree {m} to precision {precision}')

    @property
    def modulus(self):
        return self._modulus

    @property
    def precision(self):
        return self._precision

    @property
    def rev_inverse(self):
        """Inverse of the reversal of the modulus, modulo t^precision."""
        return self._rev_inverse

    @property
    def derivative_inverse(self):
        """Inverse of the derivative of the modulus, modulo the modulus."""
        return self._derivative_inverse

    @property
    def trace(self):
        """Dual coordinates of 1, that is, Tr(x^k) for k < deg(P)."""
        return list(self._trace)

    def __repr__(self):
        return f'Precomputed({self._modulus!r}, precision={self._precision})'
