"""The Berlekamp-Massey algorithm over GF(2^12)."""

from .gf import gf_frac, gf_mul


def bm(s):
    """Return the reversed minimal connection polynomial of the sequence s.

    A sequence of length 2t yields t + 1 coefficients, lowest degree first.
    """
    s = list(s)
    t = len(s) // 2
    if t < 1:
        raise ValueError("sequence must contain at least two elements")

    c = [0] * (t + 1)
    b_poly = [0] * (t + 1)
    c[0] = 1
    b_poly[1] = 1
    length = 0
    b = 1

    for n in range(2 * t):
        d = 0
        for i in range(min(n, t) + 1):
            d ^= gf_mul(c[i], s[n - i])

        if d:
            f = gf_frac(b, d)
            previous = c
            c = [ci ^ gf_mul(f, bi) for ci, bi in zip(c, b_poly)]
            if n >= 2 * length:
                length = n + 1 - length
                b_poly = previous
                b = d

        b_poly = [0] + b_poly[:-1]

    return c[::-1]