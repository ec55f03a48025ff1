"""Public-key generation: systematic parity-check matrix of the Goppa code."""

from .gf import gf_inv, gf_mul
from .root import root
from .sk_gen import KeyGenerationError
from .util import GFBITS, GFMASK, PK_NROWS, PK_ROW_BYTES, SYS_N, SYS_T, bitrev


def _bit_row(values, k):
    """Pack bit k of every value into an integer, value i at bit i."""
    return int("".join(str((v >> k) & 1) for v in reversed(values)), 2)


def pk_gen(irr, perm):
    """Build the public key from the Goppa polynomial irr and random words perm.

    Returns the public key bytes and the permutation pi derived from perm.
    Raises KeyGenerationError when perm has repeated values or the
    parity-check matrix cannot be brought to systematic form.
    """
    irr = list(irr)
    perm = list(perm)
    if len(irr) != SYS_T:
        raise ValueError(f"irr must have {SYS_T} coefficients")
    if len(perm) != 1 << GFBITS:
        raise ValueError(f"perm must have {1 << GFBITS} values")

    order = sorted(((p & 0xFFFFFFFF) << 31) | i for i, p in enumerate(perm))
    keys = [entry >> 31 for entry in order]
    if any(x == y for x, y in zip(keys, keys[1:])):
        raise KeyGenerationError("random permutation words are not distinct")

    pi = [entry & GFMASK for entry in order]
    support = [bitrev(p) for p in pi[:SYS_N]]

    inv = [gf_inv(v) for v in root(irr + [1], support)]

    rows = []
    for _ in range(SYS_T):
        rows.extend(_bit_row(inv, k) for k in range(GFBITS))
        inv = [gf_mul(v, a) for v, a in zip(inv, support)]

    for row in range(PK_NROWS):
        bit = 1 << row
        for k in range(row + 1, PK_NROWS):
            if (rows[row] ^ rows[k]) & bit:
                rows[row] ^= rows[k]

        if not rows[row] & bit:
            raise KeyGenerationError("parity-check matrix is not systematic")

        pivot = rows[row]
        for k in range(PK_NROWS):
            if k != row and rows[k] & bit:
                rows[k] ^= pivot

    pk = b"".join((r >> PK_NROWS).to_bytes(PK_ROW_BYTES, "little") for r in rows)
    return pk, pi