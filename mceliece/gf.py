"""Arithmetic in GF(2^12) and in GF((2^12)^64)."""

from .util import GFBITS, GFMASK, SYS_T


def gf_iszero(a):
    """Return an all-ones 13-bit mask if a is zero, else 0."""
    t = ((a & 0xFFFF) - 1) & 0xFFFFFFFF
    return (t >> 19) & 0xFFFF


def gf_add(a, b):
    """Add two field elements."""
    return a ^ b


def _reduce(x):
    t = x & 0x7FC000
    x ^= t >> 9
    x ^= t >> 12
    t = x & 0x3000
    x ^= t >> 9
    x ^= t >> 12
    return x & GFMASK


def gf_mul(a, b):
    """Multiply two field elements modulo x^12 + x^3 + 1."""
    a &= 0xFFFF
    product = 0
    for i in range(GFBITS):
        if (b >> i) & 1:
            product ^= a << i
    return _reduce(product)


def gf_sq(a):
    """Square a field element."""
    x = a & 0xFFFF
    x = (x | (x << 8)) & 0x00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F
    x = (x | (x << 2)) & 0x33333333
    x = (x | (x << 1)) & 0x55555555
    return _reduce(x)


def gf_inv(a):
    """Return a^(2^12 - 2), the inverse of a (0 maps to 0)."""
    out = gf_sq(a)
    tmp_11 = gf_mul(out, a)

    out = gf_sq(gf_sq(tmp_11))
    tmp_1111 = gf_mul(out, tmp_11)

    out = tmp_1111
    for _ in range(4):
        out = gf_sq(out)
    out = gf_mul(out, tmp_1111)

    out = gf_sq(gf_sq(out))
    out = gf_mul(out, tmp_11)

    out = gf_sq(out)
    out = gf_mul(out, a)

    return gf_sq(out)


def gf_frac(den, num):
    """Return num / den."""
    return gf_mul(gf_inv(den), num)


def gf_poly_mul(a, b):
    """Multiply two elements of GF((2^12)^64) given as coefficient lists."""
    if len(a) != SYS_T or len(b) != SYS_T:
        raise ValueError(f"operands must have {SYS_T} coefficients")

    prod = [0] * (2 * SYS_T - 1)
    for i, x in enumerate(a):
        if x:
            for j, y in enumerate(b):
                prod[i + j] ^= gf_mul(x, y)

    for i in range((SYS_T - 1) * 2, SYS_T - 1, -1):
        p = prod[i]
        prod[i - SYS_T + 3] ^= p
        prod[i - SYS_T + 1] ^= p
        prod[i - SYS_T] ^= gf_mul(p, 2)

    return prod[:SYS_T]