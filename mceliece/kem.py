"""The mceliece348864 key encapsulation mechanism."""

import hashlib
import hmac
import os
import struct

from .controlbits import controlbits_from_permutation
from .decrypt import decrypt
from .encrypt import encrypt
from .pk_gen import pk_gen
from .sk_gen import KeyGenerationError, genpoly_gen
from .util import (
    CIPHERTEXT_BYTES,
    COND_BYTES,
    GFBITS,
    GFMASK,
    IRR_BYTES,
    PUBLIC_KEY_BYTES,
    SECRET_KEY_BYTES,
    SESSION_KEY_BYTES,
    SYND_BYTES,
    SYS_N,
    SYS_T,
    store8,
    store_gf,
)

PRIMITIVE = "mceliece348864"

_SEED_BYTES = 32
_E_BYTES = SYS_N // 8
_PERM_BYTES = (1 << GFBITS) * 4
_R_BYTES = _E_BYTES + _PERM_BYTES + IRR_BYTES + _SEED_BYTES
_SK_GOPPA = _SEED_BYTES + 8
_SK_S = _SK_GOPPA + IRR_BYTES + COND_BYTES


def shake256(data, outlen):
    """Return outlen bytes of SHAKE256 output for data."""
    return hashlib.shake_256(bytes(data)).digest(outlen)


def keypair(randombytes=os.urandom):
    """Generate a key pair and return (public key, secret key)."""
    seed = randombytes(_SEED_BYTES)
    if len(seed) != _SEED_BYTES:
        raise ValueError("random source returned the wrong number of bytes")

    while True:
        r = shake256(b"\x40" + seed, _R_BYTES)
        stored_seed, seed = seed, r[-_SEED_BYTES:]

        end = _R_BYTES - _SEED_BYTES
        f_bytes = r[end - IRR_BYTES:end]
        end -= IRR_BYTES
        f = [x & GFMASK for x in struct.unpack(f"<{SYS_T}H", f_bytes)]
        try:
            irr = genpoly_gen(f)
        except KeyGenerationError:
            continue

        perm_bytes = r[end - _PERM_BYTES:end]
        end -= _PERM_BYTES
        perm = struct.unpack(f"<{1 << GFBITS}I", perm_bytes)
        try:
            pk, pi = pk_gen(irr, perm)
        except KeyGenerationError:
            continue

        cond = controlbits_from_permutation(pi, GFBITS, 1 << GFBITS)
        s = r[end - _E_BYTES:end]

        sk = b"".join(
            (
                stored_seed,
                store8(0xFFFFFFFF),
                b"".join(store_gf(v) for v in irr),
                cond,
                s,
            )
        )
        return pk, sk


def enc(pk, randombytes=os.urandom):
    """Encapsulate a fresh session key; return (ciphertext, session key)."""
    if len(pk) != PUBLIC_KEY_BYTES:
        raise ValueError(f"public key must be {PUBLIC_KEY_BYTES} bytes")
    s, e = encrypt(pk, randombytes)
    c = s + shake256(b"\x02" + e, 32)
    key = shake256(b"\x01" + e + c, SESSION_KEY_BYTES)
    return c, key


def dec(c, sk):
    """Decapsulate the ciphertext c with the secret key sk.

    An invalid ciphertext yields a pseudo-random key derived from the
    secret rejection string rather than an error.
    """
    if len(c) != CIPHERTEXT_BYTES:
        raise ValueError(f"ciphertext must be {CIPHERTEXT_BYTES} bytes")
    if len(sk) != SECRET_KEY_BYTES:
        raise ValueError(f"secret key must be {SECRET_KEY_BYTES} bytes")
    c = bytes(c)
    sk = bytes(sk)

    e, decrypted = decrypt(sk[_SK_GOPPA:], c)
    conf = shake256(b"\x02" + e, 32)
    confirmed = hmac.compare_digest(conf, c[SYND_BYTES:SYND_BYTES + 32])

    if decrypted and confirmed:
        preimage = b"\x01" + e + c
    else:
        preimage = b"\x00" + sk[_SK_S:_SK_S + _E_BYTES] + c
    return shake256(preimage, SESSION_KEY_BYTES)