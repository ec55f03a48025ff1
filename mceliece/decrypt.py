"""Niederreiter decryption with the Berlekamp decoder."""

from .benes import support_gen
from .bm import bm
from .root import root
from .synd import synd
from .util import COND_BYTES, IRR_BYTES, SYND_BYTES, SYS_N, SYS_T, load_gf

_E_BYTES = SYS_N // 8


def decrypt(sk, c):
    """Decode the syndrome c with the secret key sk.

    sk starts with the Goppa polynomial followed by the Benes control bits.
    Returns (e, ok): the recovered error vector as packed bits, and whether
    it has weight SYS_T and reproduces the syndrome.
    """
    if len(sk) < IRR_BYTES + COND_BYTES:
        raise ValueError(
            f"secret key must hold at least {IRR_BYTES + COND_BYTES} bytes"
        )
    if len(c) < SYND_BYTES:
        raise ValueError(f"ciphertext must hold at least {SYND_BYTES} bytes")

    sk = bytes(sk)
    r = bytes(c[:SYND_BYTES]) + bytes(_E_BYTES - SYND_BYTES)

    g = [load_gf(sk[k:k + 2]) for k in range(0, IRR_BYTES, 2)] + [1]
    support = support_gen(sk[IRR_BYTES:IRR_BYTES + COND_BYTES])

    s = synd(g, support, r)
    locator = bm(s)
    images = root(locator, support)

    bits = 0
    for i, value in enumerate(images):
        if value == 0:
            bits |= 1 << i
    e = bits.to_bytes(_E_BYTES, "little")

    ok = bits.bit_count() == SYS_T and synd(g, support, e) == s
    return e, ok