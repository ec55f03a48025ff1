import random

import pytest

from mceliece.encrypt import encrypt, gen_e, syndrome
from mceliece.rng import AesCtrDrbg
from mceliece.util import PUBLIC_KEY_BYTES, SYND_BYTES, SYS_N, SYS_T

E_BYTES = SYS_N // 8


def _feeder(*chunks):
    pending = iter(chunks)

    def randombytes(n):
        chunk = next(pending)
        return chunk[:n]

    return randombytes


def _words(values):
    return b"".join(v.to_bytes(2, "little") for v in values)


def _vector(positions):
    return sum(1 << p for p in positions).to_bytes(E_BYTES, "little")


def _weight(data):
    return int.from_bytes(data, "little").bit_count()


def test_gen_e_uses_first_indices():
    e = gen_e(_feeder(_words(range(128))))
    assert e == b"\xff" * 8 + bytes(E_BYTES - 8)


def test_gen_e_skips_out_of_range_values():
    e = gen_e(_feeder(_words([4000] * 64 + list(range(100, 164)))))
    assert e == _vector(range(100, 164))


def test_gen_e_masks_to_twelve_bits():
    e = gen_e(_feeder(_words([0xF000 | i for i in range(64)] + [0] * 64)))
    assert e == _vector(range(64))


def test_gen_e_retries_on_repeated_indices():
    e = gen_e(_feeder(_words([7] * 128), _words(range(200, 328))))
    assert e == _vector(range(200, 264))


def test_gen_e_retries_when_too_few_in_range():
    e = gen_e(_feeder(_words([4095] * 128), _words(range(300, 428))))
    assert e == _vector(range(300, 364))


def test_gen_e_has_weight_t():
    drbg = AesCtrDrbg(bytes(range(48)))
    for _ in range(5):
        e = gen_e(drbg.randombytes)
        assert len(e) == E_BYTES
        assert _weight(e) == SYS_T


def test_syndrome_of_zero_key_is_identity_part():
    e = _vector(range(0, 768, 12))
    assert syndrome(bytes(PUBLIC_KEY_BYTES), e) == e[:SYND_BYTES]


def test_syndrome_ignores_tail_for_zero_key():
    e = _vector(range(1000, 1064))
    assert syndrome(bytes(PUBLIC_KEY_BYTES), e) == bytes(SYND_BYTES)


def test_syndrome_is_linear():
    rnd = random.Random(1)
    pk = rnd.randbytes(PUBLIC_KEY_BYTES)
    e1 = rnd.randbytes(E_BYTES)
    e2 = rnd.randbytes(E_BYTES)
    combined = bytes(x ^ y for x, y in zip(e1, e2))
    s1 = syndrome(pk, e1)
    s2 = syndrome(pk, e2)
    assert syndrome(pk, combined) == bytes(x ^ y for x, y in zip(s1, s2))


def test_syndrome_rejects_bad_sizes():
    with pytest.raises(ValueError):
        syndrome(bytes(10), bytes(E_BYTES))
    with pytest.raises(ValueError):
        syndrome(bytes(PUBLIC_KEY_BYTES), bytes(E_BYTES - 1))


def test_encrypt_returns_syndrome_of_error_vector():
    rnd = random.Random(2)
    pk = rnd.randbytes(PUBLIC_KEY_BYTES)
    drbg = AesCtrDrbg(bytes(48))
    s, e = encrypt(pk, drbg.randombytes)
    assert len(s) == SYND_BYTES
    assert _weight(e) == SYS_T
    assert s == syndrome(pk, e)


def test_encrypt_rejects_short_key():
    with pytest.raises(ValueError):
        encrypt(b"\x00" * 5, AesCtrDrbg(bytes(48)).randombytes)