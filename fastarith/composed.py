"""Composed products via traces and Berlekamp-Massey.

For monic squarefree P and Q of degrees m and n, the composed product R = P⊙Q is
the monic polynomial of degree mn whose roots are the products of the roots of P
and the roots of Q. The traces Tr((xy)^k) in k[x,y]/(P,Q) factor as
Tr(x^k) Tr(y^k), and R is the minimal polynomial of this sequence.
"""

import logging
from fastarith import finfields
from fastarith.gfpx import GFpX
from fastarith.dual import monomial_to_dual_pre, rev_inverse
from fastarith.transposed import rem_t
from fastarith.errors import PreconditionError, RingMismatchError


def _same_ring(P, Q):
    if type(P) is not type(Q):
        raise RingMismatchError(f'{type(P).__name__} and {type(Q).__name__} differ')


def embed(b, P, c, Q, r=0):
    """Return the first r terms of the product of two linear recurring sequences.

    Sequences b and c are extended with rem_t() against P and Q, respectively,
    and multiplied termwise. For r=0 (default), r is set to len(b)*len(c).
    """
    _same_ring(P, Q)
    m = P.check_modulus()
    n = Q.check_modulus()
    if len(b) != m or len(c) != n:
        raise PreconditionError(f'{m} and {n} terms expected, got {len(b)} and {len(c)}')

    if r == 0:
        r = m * n
    u = rem_t(b, P, max(r, m))
    v = rem_t(c, Q, max(r, n))
    return [u[k] * v[k] for k in range(r)]


def berlekamp_massey(a, n, poly=None):
    """Minimal polynomial of degree at most n for a linear recurring sequence a.

    Only the first 2n terms of a are used. The result is the monic Bezout
    cofactor of the extended Euclidean algorithm on x^(2n) and the reversal of a,
    stopped once the remainder has degree less than n.
    The polynomial type poly is derived from the field of a[0], if not given.
    """
    if len(a) < 2 * n:
        raise PreconditionError(f'at least {2 * n} terms expected, got {len(a)}')

    if poly is None:
        if not a or not isinstance(a[0], finfields.PrimeFieldElement):
            raise RingMismatchError('field elements required if poly is not given')

        poly = GFpX(type(a[0]))
    R0 = poly.lshift(1, 2 * n)
    R1 = poly(poly.vector(a[:2 * n])).reverse(2 * n - 1)
    V0, V1 = poly(0), poly(1)
    while R1.degree() >= n:
        q, r = divmod(R0, R1)
        R0, R1 = R1, r
        V0, V1 = V1, V0 - q * V1
    return V1.monic()


def composed_product(P, Q):
    """Composed product of monic squarefree polynomials P and Q.

    Raises PreconditionError if R = P⊙Q is not squarefree, that is, if two products
    of roots coincide. Berlekamp-Massey then finds a proper factor of R only.
    """
    _same_ring(P, Q)
    m = P.check_modulus(squarefree=True)
    n = Q.check_modulus(squarefree=True)
    b = monomial_to_dual_pre([1], P, rev_inverse(P, m))
    c = monomial_to_dual_pre([1], Q, rev_inverse(Q, n))
    R = berlekamp_massey(embed(b, P, c, Q, 2 * m * n), m * n, type(P))
    logging.debug(f'Composed product of degrees {m} and {n} has degree {R.degree()}')
    if R.degree() != m * n:
        raise PreconditionError(f'composed product has degree {R.degree()} instead of {m * n},'
                                ' products of roots collide')

    return R


def project(a, P, Q):
    """Project element of k[z]/(R) with monomial coordinates a onto k[x]/(P).

    The result is the coefficient of y^0 of the corresponding element of k[x,y]/(P,Q),
    as a list of deg(P) monomial coordinates.
    """
    _same_ring(P, Q)
    poly = type(P)
    m = P.check_modulus()
    n = Q.check_modulus()
    if len(a) != m * n:
        raise PreconditionError(f'{m * n} coordinates expected, got {len(a)}')

    a = poly.vector(a)
    u = rem_t([1] + [0] * (n-1), Q, m * n)
    return (poly([a[k] * u[k] for k in range(m * n)]) % P).coefficients(m)
