"""Syndrome computation for Goppa codes."""

from .gf import gf_inv, gf_mul
from .root import eval_poly


def synd(f, support, r):
    """Return the 2t syndrome values of the received word r.

    f is the Goppa polynomial with t + 1 coefficients, support the code's
    support and r the received word as little-endian packed bits.
    """
    t = len(f) - 1
    if len(r) * 8 < len(support):
        raise ValueError("received word is shorter than the support")

    out = [0] * (2 * t)
    for i, a in enumerate(support):
        if not (r[i // 8] >> (i % 8)) & 1:
            continue
        e = eval_poly(f, a)
        e_inv = gf_inv(gf_mul(e, e))
        for j in range(2 * t):
            out[j] ^= e_inv
            e_inv = gf_mul(e_inv, a)
    return out