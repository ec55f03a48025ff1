"""Generation of the Goppa polynomial for the secret key."""

from .gf import gf_inv, gf_mul, gf_poly_mul
from .util import SYS_T


class KeyGenerationError(ValueError):
    """Raised when a key-generation attempt must be retried with new randomness."""


def genpoly_gen(f):
    """Return the minimal polynomial of f in GF((2^12)^64), monic term omitted.

    Raises KeyGenerationError if the powers of f are linearly dependent.
    """
    f = list(f)
    if len(f) != SYS_T:
        raise ValueError(f"f must have {SYS_T} coefficients")

    mat = [[1] + [0] * (SYS_T - 1), f]
    for _ in range(2, SYS_T + 1):
        mat.append(gf_poly_mul(mat[-1], f))

    for j in range(SYS_T):
        for k in range(j + 1, SYS_T):
            if mat[j][j]:
                break
            for c in range(j, SYS_T + 1):
                mat[c][j] ^= mat[c][k]

        if not mat[j][j]:
            raise KeyGenerationError("powers of f are not linearly independent")

        inv = gf_inv(mat[j][j])
        for c in range(j, SYS_T + 1):
            mat[c][j] = gf_mul(mat[c][j], inv)

        for k in range(SYS_T):
            if k == j:
                continue
            t = mat[j][k]
            if t:
                for c in range(j, SYS_T + 1):
                    mat[c][k] ^= gf_mul(mat[c][j], t)

    return list(mat[SYS_T])