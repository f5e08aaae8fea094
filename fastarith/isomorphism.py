"""Isomorphism between k[x,y]/(P,Q) and k[z]/(R) for the composed product R = P⊙Q.

The isomorphism Phi maps xy to z. Elements of k[x,y]/(P,Q) are given by an m x n
array b, with m = deg(P) and n = deg(Q), where b[i][j] is the coefficient of
x^i y^j. Elements of k[z]/(R) are given by their mn monomial coordinates.

Functions phi1() and inverse_phi1() compute Phi and its inverse naively, from
the trace Tr(x^i y^j) = Tr(x^i) Tr(y^j). Functions phi2() and inverse_phi2()
use a baby-step/giant-step scheme with one matrix product over k[z], writing
x^i y^j = z^i S^(j-i+m-1) U^(m-1) for the image S of y and its inverse U.
This requires Q(0) != 0. Functions phi() and inverse_phi() pick one of both
depending on the size of deg(P) deg(Q).

The _pre variants take the dual coordinates up of 1 in k[x]/(P), that is, the
traces Tr(x^k) for k < deg(P), see also Precomputed.trace.
"""

import os
import math
import logging
from fastarith.polymat import PolyMatrix
from fastarith.dual import (monomial_to_dual, monomial_to_dual_pre,
                            dual_to_monomial, dual_to_monomial_pre, rev_inverse)
from fastarith.transposed import rem_t, rem_t_pre, mul_mod_t
from fastarith.composed import embed, composed_product
from fastarith.errors import NotInvertibleError, PreconditionError, RingMismatchError

PHI_THRESHOLD = int(os.getenv('FASTARITH_PHI_THRESHOLD', '64'))


def _degrees(P, Q, R):
    # degrees of P and Q, and composed product R (computed if R is None)
    poly = type(P)
    if type(Q) is not poly or not (R is None or type(R) is poly):
        raise RingMismatchError('moduli over the same field required')

    m = P.check_modulus()
    n = Q.check_modulus()
    if R is None:
        R = composed_product(P, Q)
    if R.check_modulus() != m * n:
        raise PreconditionError(f'composed product of degree {m * n} required')

    return m, n, R


def _tensor(b, poly, m, n):
    if len(b) != m or any(len(row) != n for row in b):
        raise PreconditionError(f'{m} x {n} array expected')

    return [poly.vector(row) for row in b]


def _coordinates(a, poly, N):
    if len(a) != N:
        raise PreconditionError(f'{N} coordinates expected, got {len(a)}')

    return poly.vector(a)


def _trace(up, P, m):
    if len(up) != m:
        raise PreconditionError(f'{m} traces expected, got {len(up)}')

    return type(P).vector(up)


def _trace_of_one(P):
    m = P.check_modulus(squarefree=True)
    return monomial_to_dual_pre([1], P, rev_inverse(P, m))


def _columns_to_monomial(c, P, m, n):
    # convert each column of c from dual to monomial coordinates for P
    poly = type(P)
    S = poly.invert(P.derivative(), P)
    cols = [dual_to_monomial_pre([c[i][j] for i in range(m)], P, S) for j in range(n)]
    return [[cols[j][i] for j in range(n)] for i in range(m)]


def phi1(b, P, Q, R=None):
    """Image of b under the isomorphism k[x,y]/(P,Q) → k[z]/(R), naive version.

    If R is not given, the composed product of P and Q is computed first.
    """
    return phi1_pre(b, P, Q, _trace_of_one(P), R)


def phi1_pre(b, P, Q, up, R=None):
    """Same as phi1, given the dual coordinates up of 1 in k[x]/(P)."""
    poly = type(P)
    m, n, R = _degrees(P, Q, R)
    N = m * n
    b = _tensor(b, poly, m, n)
    u = rem_t(_trace(up, P, m), P, N + m - 1)
    TQ = rev_inverse(Q, max(n, N - n))
    a = [poly.field(0)] * N
    for i in range(m):
        t = rem_t_pre(monomial_to_dual_pre(b[i], Q, TQ), Q, N, TQ)
        for k in range(N):
            a[k] += t[k] * u[i + k]
    return dual_to_monomial(a, R)


def inverse_phi1(a, P, Q, R):
    """Preimage of a under the isomorphism k[x,y]/(P,Q) → k[z]/(R), naive version."""
    return inverse_phi1_pre(a, P, Q, R, _trace_of_one(P))


def inverse_phi1_pre(a, P, Q, R, up):
    """Same as inverse_phi1, given the dual coordinates up of 1 in k[x]/(P).

    Row i of the intermediate array holds the coefficients of y^j with respect to
    the element of the dual basis of k[x]/(P) paired with x^i.
    """
    poly = type(P)
    m, n, R = _degrees(P, Q, R)
    N = m * n
    a = _coordinates(a, poly, N)
    u = rem_t(_trace(up, P, m), P, N + m - 1)
    c = [(poly([a[k] * u[i + k] for k in range(N)]) % Q).coefficients(n) for i in range(m)]
    return _columns_to_monomial(c, P, m, n)


def _block_sizes(m, n):
    N1 = m + n - 1
    p = math.isqrt(N1 - 1) + 1
    q = -(-N1 // p)
    return p, q


def _y_image(P, Q, R, up):
    # image S of y in k[z]/(R) and its inverse U
    poly = type(P)
    n = Q.degree()
    if not Q[0]:
        raise NotInvertibleError('y is not invertible modulo Q, as Q(0)=0')

    y = monomial_to_dual((poly.lshift(1, 1) % Q).coefficients(n), Q)
    S = poly(dual_to_monomial(embed(up, P, y, Q), R))
    U = poly.invert(S, R)
    return S, U


def _baby_steps(S, R, q, m, n):
    # powers S^0, ..., S^q mod R, and for each power its n chunks of m coefficients
    powers = [type(S)(1)]
    for _ in range(q):
        powers.append(powers[-1] * S % R)
    chunks = []
    for k in range(q):
        s = powers[k].coefficients(m * n)
        chunks.append([s[j * m:(j+1) * m] for j in range(n)])
    return powers, chunks


def phi2(b, P, Q, R=None):
    """Image of b under the isomorphism k[x,y]/(P,Q) → k[z]/(R), baby-step/giant-step version.

    Requires Q(0) != 0. If R is not given, the composed product of P and Q is computed first.
    """
    return phi2_pre(b, P, Q, _trace_of_one(P), R)


def phi2_pre(b, P, Q, up, R=None):
    """Same as phi2, given the dual coordinates up of 1 in k[x]/(P)."""
    poly = type(P)
    m, n, R = _degrees(P, Q, R)
    N = m * n
    b = _tensor(b, poly, m, n)
    S, U = _y_image(P, Q, R, _trace(up, P, m))
    p, q = _block_sizes(m, n)
    logging.debug(f'Baby-step/giant-step for {m=} and {n=} using {p=} and {q=}')
    powers, chunks = _baby_steps(S, R, q, m, n)

    mt = PolyMatrix.zeros(poly, (q, n))
    for k in range(q):
        for j in range(n):
            mt[k, j] = chunks[k][j]
    zero = poly.field(0)
    mc = PolyMatrix.zeros(poly, (p, q))
    for i in range(p):
        for k in range(q):
            e = i * q + k
            mc[i, k] = [b[h][h + e - m + 1] if 0 <= h + e - m + 1 < n else zero for h in range(m)]
    mv = mc @ mt

    a = poly()
    for i in range(p - 1, -1, -1):
        v = sum((mv[i, j] << j * m for j in range(n)), poly()) % R
        a = (powers[q] * a + v) % R
    a = a * poly.powmod(U, m - 1, R) % R
    return a.coefficients(N)


def inverse_phi2(a, P, Q, R):
    """Preimage of a under the isomorphism k[x,y]/(P,Q) → k[z]/(R), baby-step/giant-step version.

    Requires Q(0) != 0.
    """
    return inverse_phi2_pre(a, P, Q, R, _trace_of_one(P))


def inverse_phi2_pre(a, P, Q, R, up):
    """Same as inverse_phi2, given the dual coordinates up of 1 in k[x]/(P)."""
    poly = type(P)
    m, n, R = _degrees(P, Q, R)
    N = m * n
    a = _coordinates(a, poly, N)
    S, U = _y_image(P, Q, R, _trace(up, P, m))
    p, q = _block_sizes(m, n)
    logging.debug(f'Transposed baby-step/giant-step for {m=} and {n=} using {p=} and {q=}')
    powers, chunks = _baby_steps(S, R, q, m, n)

    # linear form H -> Tr(a H U^(m-1)) on k[z]/(R), then multiplied by S^(qi) per giant step
    ell = mul_mod_t(monomial_to_dual(a, R), poly.powmod(U, m - 1, R), R, N - 1)
    mv = PolyMatrix.zeros(poly, (p, n))
    for i in range(p):
        v = rem_t(ell, R, N + m - 1)
        for j in range(n):
            mv[i, j] = v[j * m:j * m + 2*m - 1]
        if i < p - 1:
            ell = mul_mod_t(ell, powers[q], R, N - 1)
    mt = PolyMatrix.zeros(poly, (n, q))
    for k in range(q):
        for j in range(n):
            mt[j, k] = poly(chunks[k][j]).reverse(m - 1)
    cc = (mv @ mt).truncate(2*m - 1) >> (m - 1)  # middle products

    # entry (i, j) is the trace of a x^i y^j, found at exponent j-i+m-1 of S
    c = [[cc[divmod(j - i + m - 1, q)][i] for j in range(n)] for i in range(m)]
    S_Q = poly.invert(Q.derivative(), Q)
    c = [dual_to_monomial_pre(c[i], Q, S_Q) for i in range(m)]
    return _columns_to_monomial(c, P, m, n)


def phi(b, P, Q, R=None):
    """Image of b under the isomorphism k[x,y]/(P,Q) → k[z]/(R).

    Uses phi2() if deg(P) deg(Q) reaches the threshold set by FASTARITH_PHI_THRESHOLD
    and Q(0) != 0, and phi1() otherwise.
    """
    if _fast(P, Q):
        return phi2(b, P, Q, R)

    return phi1(b, P, Q, R)


def inverse_phi(a, P, Q, R):
    """Preimage of a under the isomorphism k[x,y]/(P,Q) → k[z]/(R).

    Uses inverse_phi2() or inverse_phi1() in the same way as phi().
    """
    if _fast(P, Q):
        return inverse_phi2(a, P, Q, R)

    return inverse_phi1(a, P, Q, R)


def _fast(P, Q):
    N = P.degree() * Q.degree()
    fast = N >= PHI_THRESHOLD and bool(Q[0])
    logging.debug(f'Isomorphism of size {N} uses {"fast" if fast else "naive"} variant')
    return fast
