"""Evaluation of polynomials over GF(2^12)."""

from .gf import gf_add, gf_mul


def eval_poly(f, a):
    """Evaluate the polynomial with coefficients f (lowest degree first) at a."""
    coefficients = list(f)
    if not coefficients:
        return 0
    r = coefficients[-1]
    for c in reversed(coefficients[:-1]):
        r = gf_add(gf_mul(r, a), c)
    return r


def root(f, support):
    """Evaluate f at every element of support."""
    return [eval_poly(f, a) for a in support]