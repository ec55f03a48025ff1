import pytest

from mceliece.decrypt import decrypt
from mceliece.kem import dec, enc, keypair, shake256
from mceliece.rng import AesCtrDrbg
from mceliece.util import (
    CIPHERTEXT_BYTES,
    PUBLIC_KEY_BYTES,
    SECRET_KEY_BYTES,
    SESSION_KEY_BYTES,
    SYND_BYTES,
    SYS_T,
    store8,
)


@pytest.fixture(scope="module")
def drbg():
    return AesCtrDrbg(bytes(range(48)))


@pytest.fixture(scope="module")
def keys(drbg):
    return keypair(drbg.randombytes)


def test_shake256_empty_input():
    assert shake256(b"", 32).hex() == (
        "46b9dd2b0ba88d13233b3feb743eeb243fcd52ea62b81b82b50c27646ed5762f"
    )


def test_shake256_longer_output_extends_shorter():
    data = b"mceliece"
    assert shake256(data, 64)[:32] == shake256(data, 32)
    assert len(shake256(data, 100)) == 100


def test_keypair_sizes_and_pivot_field(keys):
    pk, sk = keys
    assert len(pk) == PUBLIC_KEY_BYTES
    assert len(sk) == SECRET_KEY_BYTES
    assert sk[32:40] == store8(0xFFFFFFFF)


def test_round_trip(keys, drbg):
    pk, sk = keys
    c, key = enc(pk, drbg.randombytes)
    assert len(c) == CIPHERTEXT_BYTES
    assert len(key) == SESSION_KEY_BYTES
    assert dec(c, sk) == key


def test_ciphertext_carries_confirmation(keys, drbg):
    pk, sk = keys
    c, _ = enc(pk, drbg.randombytes)
    e, ok = decrypt(sk[40:], c)
    assert ok is True
    assert int.from_bytes(e, "little").bit_count() == SYS_T
    assert c[SYND_BYTES:] == shake256(b"\x02" + e, 32)


def test_tampered_confirmation_is_rejected_implicitly(keys, drbg):
    pk, sk = keys
    c, key = enc(pk, drbg.randombytes)
    tampered = c[:-1] + bytes([c[-1] ^ 1])
    rejected = dec(tampered, sk)
    assert rejected != key
    assert dec(tampered, sk) == rejected


def test_enc_rejects_bad_public_key():
    with pytest.raises(ValueError):
        enc(bytes(16), AesCtrDrbg(bytes(48)).randombytes)


def test_dec_rejects_bad_sizes(keys):
    _, sk = keys
    with pytest.raises(ValueError):
        dec(bytes(10), sk)
    with pytest.raises(ValueError):
        dec(bytes(CIPHERTEXT_BYTES), sk[:-1])