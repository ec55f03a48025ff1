"""Niederreiter encryption: random error vectors and their syndromes."""

import os

from .util import (
    PK_NROWS,
    PK_ROW_BYTES,
    PUBLIC_KEY_BYTES,
    SYND_BYTES,
    SYS_N,
    SYS_T,
    load_gf,
)

_E_BYTES = SYS_N // 8
_SAMPLE_BYTES = SYS_T * 2 * 2


def _check_public_key(pk):
    if len(pk) != PUBLIC_KEY_BYTES:
        raise ValueError(f"public key must be {PUBLIC_KEY_BYTES} bytes")


def gen_e(randombytes=os.urandom):
    """Return a random error vector of weight SYS_T as SYS_N packed bits.

    randombytes is a callable returning the requested number of random bytes.
    """
    while True:
        buf = randombytes(_SAMPLE_BYTES)
        if len(buf) != _SAMPLE_BYTES:
            raise ValueError("random source returned the wrong number of bytes")

        nums = (load_gf(buf[k:k + 2]) for k in range(0, _SAMPLE_BYTES, 2))
        indices = [x for x in nums if x < SYS_N][:SYS_T]

        if len(indices) == SYS_T and len(set(indices)) == SYS_T:
            break

    bits = 0
    for index in indices:
        bits |= 1 << index
    return bits.to_bytes(_E_BYTES, "little")


def syndrome(pk, e):
    """Return the syndrome of the error vector e under the public key pk."""
    _check_public_key(pk)
    if len(e) != _E_BYTES:
        raise ValueError(f"error vector must be {_E_BYTES} bytes")

    e_bits = int.from_bytes(bytes(e), "little")
    pk = bytes(pk)
    s = 0
    for i in range(PK_NROWS):
        chunk = pk[i * PK_ROW_BYTES:(i + 1) * PK_ROW_BYTES]
        row = (int.from_bytes(chunk, "little") << PK_NROWS) | (1 << i)
        s |= ((row & e_bits).bit_count() & 1) << i
    return s.to_bytes(SYND_BYTES, "little")


def encrypt(pk, randombytes=os.urandom):
    """Pick a random error vector and return (syndrome, error vector)."""
    _check_public_key(pk)
    e = gen_e(randombytes)
    return syndrome(pk, e), e