"""Control bits for Benes networks (Nassimi-Sahni construction)."""

_MAX_W = 14


def _i32(x):
    x &= 0xFFFFFFFF
    return x - (1 << 32) if x & 0x80000000 else x


def _check_size(w, n):
    if not 1 <= w <= _MAX_W:
        raise ValueError(f"w must be between 1 and {_MAX_W}")
    if n != 1 << w:
        raise ValueError("n must equal 2**w")


def _control_bit_count(w, n):
    return (2 * w - 1) * n // 2


def _flip(out, pos, bit):
    out[pos >> 3] ^= (bit << (pos & 7)) & 0xFF


def _cbrecursion(out, pos, step, pi, w, n):
    if w == 1:
        _flip(out, pos, pi[0])
        return

    half = n // 2

    a = sorted(_i32(((pi[x] ^ 1) << 16) | pi[x ^ 1]) for x in range(n))
    b = [_i32(((ax & 0xFFFF) << 16) | min(ax & 0xFFFF, x)) for x, ax in enumerate(a)]
    a = sorted(_i32((ax << 16) | x) for x, ax in enumerate(a))
    a = sorted(_i32((ax << 16) + (bx >> 16)) for ax, bx in zip(a, b))

    if w <= 10:
        b = [((ax & 0xFFFF) << 10) | (bx & 0x3FF) for ax, bx in zip(a, b)]
        for _ in range(1, w - 1):
            a = sorted(_i32(((bx & ~0x3FF) << 6) | x) for x, bx in enumerate(b))
            a = sorted(_i32((ax << 20) | bx) for ax, bx in zip(a, b))
            b = [
                min(ax & 0xFFFFF, (ax & 0xFFC00) | (bx & 0x3FF))
                for ax, bx in zip(a, b)
            ]
        b = [bx & 0x3FF for bx in b]
    else:
        b = [_i32((ax << 16) | (bx & 0xFFFF)) for ax, bx in zip(a, b)]
        for i in range(1, w - 1):
            a = sorted(_i32((bx & ~0xFFFF) | x) for x, bx in enumerate(b))
            a = [_i32((ax << 16) | (bx & 0xFFFF)) for ax, bx in zip(a, b)]
            if i < w - 2:
                b = sorted(_i32((ax & ~0xFFFF) | (bx >> 16)) for ax, bx in zip(a, b))
                b = [_i32((bx << 16) | (ax & 0xFFFF)) for ax, bx in zip(a, b)]
            a.sort()
            b = [
                min(_i32((bx & ~0xFFFF) | (ax & 0xFFFF)), bx)
                for ax, bx in zip(a, b)
            ]
        b = [bx & 0xFFFF for bx in b]

    a = sorted(_i32((p << 16) + x) for x, p in enumerate(pi))

    first = [bx & 1 for bx in b[0::2]]
    pairs = []
    for j, fj in enumerate(first):
        _flip(out, pos, fj)
        pos += step
        fx = 2 * j + fj
        pairs.append(_i32((a[2 * j] << 16) | fx))
        pairs.append(_i32((a[2 * j + 1] << 16) | (fx ^ 1)))
    b = sorted(pairs)

    pos += (2 * w - 3) * step * half

    last = [by & 1 for by in b[0::2]]
    pairs = []
    for k, lk in enumerate(last):
        _flip(out, pos, lk)
        pos += step
        ly = 2 * k + lk
        pairs.append(_i32((ly << 16) | (b[2 * k] & 0xFFFF)))
        pairs.append(_i32(((ly ^ 1) << 16) | (b[2 * k + 1] & 0xFFFF)))
    a = sorted(pairs)

    pos -= (2 * w - 2) * step * half

    q_even = [(ax & 0xFFFF) >> 1 for ax in a[0::2]]
    q_odd = [(ax & 0xFFFF) >> 1 for ax in a[1::2]]

    _cbrecursion(out, pos, step * 2, q_even, w - 1, half)
    _cbrecursion(out, pos + step, step * 2, q_odd, w - 1, half)


def apply_control_bits(pi, bits, w, n):
    """Apply the 2w-1 layers of conditional swaps described by bits to pi."""
    _check_size(w, n)
    p = list(pi)
    if len(p) != n:
        raise ValueError(f"sequence must have {n} elements")
    if len(bits) * 8 < _control_bit_count(w, n):
        raise ValueError("not enough control bits")

    index = 0
    for s in [*range(w), *range(w - 2, -1, -1)]:
        stride = 1 << s
        for i in range(0, n, stride * 2):
            for j in range(i, i + stride):
                if (bits[index >> 3] >> (index & 7)) & 1:
                    p[j], p[j + stride] = p[j + stride], p[j]
                index += 1
    return p


def controlbits_from_permutation(pi, w, n):
    """Return the Benes network control bits realising the permutation pi."""
    _check_size(w, n)
    pi = list(pi)
    if sorted(pi) != list(range(n)):
        raise ValueError(f"pi must be a permutation of 0..{n - 1}")

    out = bytearray((_control_bit_count(w, n) + 7) // 8)
    _cbrecursion(out, 0, 1, pi, w, n)

    if apply_control_bits(range(n), out, w, n) != pi:
        raise RuntimeError("control bits do not reproduce the permutation")
    return bytes(out)