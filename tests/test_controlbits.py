import random

import pytest

from mceliece.benes import support_gen
from mceliece.controlbits import apply_control_bits, controlbits_from_permutation
from mceliece.util import COND_BYTES, GFBITS, SYS_N, bitrev


def _random_permutation(seed, n):
    values = list(range(n))
    random.Random(seed).shuffle(values)
    return values


@pytest.mark.parametrize("w", [1, 2, 3, 4, 5, 6, 7])
def test_control_bits_reproduce_permutation(w):
    n = 1 << w
    pi = _random_permutation(w, n)
    bits = controlbits_from_permutation(pi, w, n)
    assert len(bits) == ((2 * w - 1) * n // 2 + 7) // 8
    assert apply_control_bits(range(n), bits, w, n) == pi


def test_identity_permutation_round_trip():
    pi = list(range(16))
    bits = controlbits_from_permutation(pi, 4, 16)
    assert apply_control_bits(range(16), bits, 4, 16) == pi


def test_zero_bits_leave_sequence_unchanged():
    seq = _random_permutation(11, 32)
    assert apply_control_bits(seq, bytes(20), 5, 32) == seq


def test_full_size_bits_match_benes_support():
    n = 1 << GFBITS
    pi = _random_permutation(12, n)
    bits = controlbits_from_permutation(pi, GFBITS, n)
    assert len(bits) == COND_BYTES
    assert support_gen(bits) == [bitrev(p) for p in pi[:SYS_N]]


def test_non_permutation_raises():
    with pytest.raises(ValueError):
        controlbits_from_permutation([0, 0, 1, 2], 2, 4)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        controlbits_from_permutation(list(range(8)), 2, 8)


def test_width_out_of_range_raises():
    with pytest.raises(ValueError):
        controlbits_from_permutation([0], 0, 1)


def test_short_bits_raise():
    with pytest.raises(ValueError):
        apply_control_bits(range(16), bytes(3), 4, 16)