"""Change of basis between monomial and dual coordinates in k[x]/(P).

The dual coordinates of A in k[x]/(P) are the traces Tr(A x^k) for 0 <= k < m,
where m = deg(P). With N = P' A mod P, their generating series equals
rev(N) / rev(P) modulo t^m, which gives conversions in both directions
at the cost of a few polynomial products.
"""

from fastarith.errors import PreconditionError


def _coordinates(a, P, m):
    # polynomial with coefficients a, at most m of them
    poly = type(P)
    if len(a) > m:
        raise PreconditionError(f'at most {m} coordinates expected, got {len(a)}')

    return poly(poly.vector(a))


def rev_inverse(P, n):
    """Inverse of the reversal of P modulo t^n."""
    poly = type(P)
    return poly.invert(P.reverse(P.degree()), poly.lshift(1, n))


def monomial_to_dual(a, P):
    """Return dual coordinates of the element of k[x]/(P) with monomial coordinates a."""
    m = P.check_modulus(squarefree=True)
    return monomial_to_dual_pre(a, P, rev_inverse(P, m))


def monomial_to_dual_pre(a, P, TP):
    """Same as monomial_to_dual, given TP = 1/rev(P) modulo t^k for some k >= deg(P)."""
    poly = type(P)
    m = P.check_modulus()
    A = _coordinates(a, P, m)
    N = P.derivative() * A % P
    return poly.mullow(N.reverse(m-1), TP, m).coefficients(m)


def dual_to_monomial(b, P):
    """Return monomial coordinates of the element of k[x]/(P) with dual coordinates b."""
    poly = type(P)
    P.check_modulus(squarefree=True)
    return dual_to_monomial_pre(b, P, poly.invert(P.derivative(), P))


def dual_to_monomial_pre(b, P, S):
    """Same as dual_to_monomial, given S = 1/P' modulo P."""
    poly = type(P)
    m = P.check_modulus()
    B = _coordinates(b, P, m)
    N = poly.mullow(P.reverse(m), B, m).reverse(m-1)
    return (N * S % P).coefficients(m)
