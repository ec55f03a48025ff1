"""Parameters of the mceliece348864 set and little-endian load/store helpers."""

GFBITS = 12
SYS_N = 3488
SYS_T = 64

COND_BYTES = (1 << (GFBITS - 4)) * (2 * GFBITS - 1)
IRR_BYTES = SYS_T * 2

PK_NROWS = SYS_T * GFBITS
PK_NCOLS = SYS_N - PK_NROWS
PK_ROW_BYTES = (PK_NCOLS + 7) // 8

SYND_BYTES = (PK_NROWS + 7) // 8

GFMASK = (1 << GFBITS) - 1

PUBLIC_KEY_BYTES = 261120
SECRET_KEY_BYTES = 6492
CIPHERTEXT_BYTES = 128
SESSION_KEY_BYTES = 32

_MASK64 = (1 << 64) - 1


def _take(data, size):
    if len(data) < size:
        raise ValueError(f"need at least {size} bytes, got {len(data)}")
    return bytes(data[:size])


def store_gf(value):
    """Encode a field element as two little-endian bytes."""
    value &= 0xFFFF
    return bytes((value & 0xFF, value >> 8))


def load_gf(data):
    """Decode two little-endian bytes into a field element."""
    return int.from_bytes(_take(data, 2), "little") & GFMASK


def load4(data):
    """Decode four little-endian bytes into an unsigned integer."""
    return int.from_bytes(_take(data, 4), "little")


def load8(data):
    """Decode eight little-endian bytes into an unsigned integer."""
    return int.from_bytes(_take(data, 8), "little")


def store8(value):
    """Encode the low 64 bits of an integer as eight little-endian bytes."""
    return (value & _MASK64).to_bytes(8, "little")


def bitrev(value):
    """Reverse the low GFBITS bits of a field element."""
    a = value & 0xFFFF
    a = ((a & 0x00FF) << 8) | ((a & 0xFF00) >> 8)
    a = ((a & 0x0F0F) << 4) | ((a & 0xF0F0) >> 4)
    a = ((a & 0x3333) << 2) | ((a & 0xCCCC) >> 2)
    a = ((a & 0x5555) << 1) | ((a & 0xAAAA) >> 1)
    return a >> 4