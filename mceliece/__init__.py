"""Classic McEliece 348864 key encapsulation mechanism and its building blocks."""

__version__ = "0.1.0"
__all__ = [
    "benes",
    "bm",
    "controlbits",
    "decrypt",
    "encrypt",
    "gf",
    "kat",
    "kem",
    "pk_gen",
    "rng",
    "root",
    "sk_gen",
    "synd",
    "transpose",
    "util",
]