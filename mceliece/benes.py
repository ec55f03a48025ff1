"""Benes network evaluation and support generation."""

from .transpose import transpose_64x64
from .util import COND_BYTES, GFBITS, SYS_N, bitrev, load4, load8, store8

_DATA_BYTES = 512
_STAGE_BYTES = 256
_STAGES = 2 * GFBITS - 1


def _layer(data, conditions, lgs):
    """Apply one layer of conditional swaps at distance 2^lgs in place."""
    s = 1 << lgs
    words = iter(conditions)
    for i in range(0, 64, 2 * s):
        for j in range(i, i + s):
            d = (data[j] ^ data[j + s]) & next(words)
            data[j] ^= d
            data[j + s] ^= d


def _words32(chunk):
    return [load4(chunk[k:k + 4]) for k in range(0, len(chunk), 4)]


def _words64(chunk):
    return [load8(chunk[k:k + 8]) for k in range(0, len(chunk), 8)]


def apply_benes(r, bits, rev=False):
    """Permute the 4096 bits of r through the Benes network given by bits.

    With rev set the network is applied in reverse, undoing the forward
    application. Returns the permuted 512 bytes.
    """
    if len(r) != _DATA_BYTES:
        raise ValueError(f"data must be {_DATA_BYTES} bytes")
    if len(bits) < COND_BYTES:
        raise ValueError(f"condition bits must be at least {COND_BYTES} bytes")

    bits = bytes(bits[:COND_BYTES])
    stages = [
        bits[k * _STAGE_BYTES:(k + 1) * _STAGE_BYTES] for k in range(_STAGES)
    ]
    if rev:
        stages.reverse()
    stage = iter(stages)

    bs = transpose_64x64(_words64(bytes(r)))

    for low in range(6):
        _layer(bs, transpose_64x64(_words32(next(stage))), low)

    bs = transpose_64x64(bs)

    for low in range(6):
        _layer(bs, _words64(next(stage)), low)
    for low in range(4, -1, -1):
        _layer(bs, _words64(next(stage)), low)

    bs = transpose_64x64(bs)

    for low in range(5, -1, -1):
        _layer(bs, transpose_64x64(_words32(next(stage))), low)

    bs = transpose_64x64(bs)

    return b"".join(store8(word) for word in bs)


def support_gen(c):
    """Return the support of length SYS_N encoded by the condition bits c."""
    size = 1 << GFBITS
    reversed_elements = [bitrev(i) for i in range(size)]
    columns = [
        sum(1 << i for i, a in enumerate(reversed_elements) if (a >> j) & 1)
        for j in range(GFBITS)
    ]
    permuted = [
        int.from_bytes(
            apply_benes(column.to_bytes(_DATA_BYTES, "little"), c, False),
            "little",
        )
        for column in columns
    ]
    return [
        sum(((column >> i) & 1) << j for j, column in enumerate(permuted))
        for i in range(SYS_N)
    ]