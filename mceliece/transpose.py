"""Transposition of 64x64 bit matrices."""

_MASK64 = (1 << 64) - 1

_MASKS = (
    (0x5555555555555555, 0xAAAAAAAAAAAAAAAA),
    (0x3333333333333333, 0xCCCCCCCCCCCCCCCC),
    (0x0F0F0F0F0F0F0F0F, 0xF0F0F0F0F0F0F0F0),
    (0x00FF00FF00FF00FF, 0xFF00FF00FF00FF00),
    (0x0000FFFF0000FFFF, 0xFFFF0000FFFF0000),
    (0x00000000FFFFFFFF, 0xFFFFFFFF00000000),
)


def transpose_64x64(rows):
    """Return the transpose of a 64x64 matrix over GF(2) given as 64 row words."""
    out = [r & _MASK64 for r in rows]
    if len(out) != 64:
        raise ValueError("a 64x64 matrix needs exactly 64 rows")

    for d in range(5, -1, -1):
        s = 1 << d
        low, high = _MASKS[d]
        for i in range(0, 64, s * 2):
            for j in range(i, i + s):
                x = (out[j] & low) | (((out[j + s] & low) << s) & _MASK64)
                y = ((out[j] & high) >> s) | (out[j + s] & high)
                out[j] = x
                out[j + s] = y
    return out