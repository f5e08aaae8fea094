"""Transposed multiplication and transposed remainder.

Multiplication by a fixed polynomial P of degree m maps polynomials of degree
at most n to polynomials of degree at most m+n. Its transpose maps a vector c of
m+n+1 entries to n+1 entries and is computed naively by mul_t() or as a middle
product by mul_t_mid().

Reduction modulo a monic P is dual to extending a linear recurring sequence
with characteristic polynomial P: given the first m terms, rem_t() returns the
first n terms by one middle product and one power series product, and
rem_t_naive() applies the recurrence term by term.
"""

from fastarith.dual import rev_inverse
from fastarith.errors import PreconditionError


def _multiplier_degree(c, P, n):
    m = P.degree()
    if m < 0:
        raise PreconditionError('nonzero polynomial required')

    if n < 0:
        raise PreconditionError('n must be nonnegative')

    if len(c) != m + n + 1:
        raise PreconditionError(f'{m + n + 1} entries expected, got {len(c)}')

    return m


def mul_t(c, P, n):
    """Transposed product of c by P, naive version.

    Entry k of the result is the sum of P[j] c[k+j] over 0 <= j <= deg(P), k <= n.
    """
    poly = type(P)
    m = _multiplier_degree(c, P, n)
    c = [a.value for a in poly.vector(c)]
    p = poly.p
    P = P.value
    b = [0] * (n+1)
    for i in range(m + n, -1, -1):
        if c[i]:
            for j in range(min(m, i), max(0, i - n) - 1, -1):
                b[i - j] += P[j] * c[i]
    return poly([b_k % p for b_k in b])


def mul_t_mid(c, P, n):
    """Transposed product of c by P as a middle product."""
    poly = type(P)
    m = _multiplier_degree(c, P, n)
    C = poly(poly.vector(c))
    return poly.mullow(P.reverse(m), C, n + m + 1) >> m


def _recurrence_degree(r, P, n):
    m = P.check_modulus()
    if n < m:
        raise PreconditionError(f'n={n} less than degree {m}')

    if len(r) < m:
        raise PreconditionError(f'at least {m} terms expected, got {len(r)}')

    return m


def rem_t(r, P, n):
    """Extend the first m = deg(P) terms of r to n terms.

    The terms satisfy the linear recurrence with characteristic polynomial P.
    Entries of r beyond index m-1 are ignored.
    """
    m = _recurrence_degree(r, P, n)
    if n == m:
        return type(P).vector(r[:m])

    return rem_t_pre(r, P, n, rev_inverse(P, n - m))


def rem_t_pre(r, P, n, TP):
    """Same as rem_t, given TP = 1/rev(P) modulo t^k for some k >= n-deg(P)."""
    poly = type(P)
    m = _recurrence_degree(r, P, n)
    r = poly.vector(r[:m])
    if n == m:
        return r

    d = mul_t_mid(r + [0] * (n - m), P, n - m - 1)
    return (poly(r) - (poly.mullow(TP, d, n - m) << m)).coefficients(n)


def rem_t_naive(r, P, n):
    """Same as rem_t, applying the recurrence one term at a time."""
    poly = type(P)
    m = _recurrence_degree(r, P, n)
    p = poly.p
    P = P.value
    s = [a.value for a in poly.vector(r[:m])]
    for k in range(m, n):
        s.append(-sum(P[j] * s[k - m + j] for j in range(m)) % p)
    return [poly.field(a) for a in s]


def mul_mod_t(a, Q, R, n):
    """Transposed modular multiplication.

    Given the values a[i] of a linear functional on k[t]/(R) at t^i, i < deg(R),
    return its values at Q t^k mod R for 0 <= k <= n.
    """
    poly = type(R)
    r = R.check_modulus()
    if len(a) != r:
        raise PreconditionError(f'{r} entries expected, got {len(a)}')

    if n < 0:
        raise PreconditionError('n must be nonnegative')

    if not Q:
        return poly().coefficients(n + 1)

    q = Q.degree()
    if n + q + 1 <= r:
        s = poly.vector(a[:n + q + 1])
    else:
        s = rem_t(a, R, n + q + 1)
    return mul_t_mid(s, Q, n).coefficients(n + 1)
