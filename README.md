# mceliece

A pure-Python implementation of the Classic McEliece 348864 key
encapsulation mechanism (KEM). It uses binary Goppa codes and
Niederreiter encryption.

Parameters: field GF(2^12), code length 3488, error weight 64.

| Item          | Size in bytes |
|---------------|---------------|
| public key    | 261120        |
| secret key    | 6492          |
| ciphertext    | 128           |
| shared secret | 32            |

The constants are defined in `mceliece.util` as `PUBLIC_KEY_BYTES`,
`SECRET_KEY_BYTES`, `CIPHERTEXT_BYTES` and `SESSION_KEY_BYTES`, next to
the code parameters (`GFBITS`, `SYS_N`, `SYS_T` and the sizes derived
from them).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

The only runtime dependency is `cryptography`, which supplies the AES
used by the deterministic generators. SHAKE256 comes from `hashlib`.

## Usage

The KEM is in `mceliece.kem`. A randomness source is any callable that
takes a byte count and returns that many bytes. `os.urandom` is the
default:

```python
from mceliece.kem import keypair, enc, dec

pk, sk = keypair()
ciphertext, shared_key = enc(pk)
assert dec(ciphertext, sk) == shared_key
```

- `keypair(randombytes)` returns `(public_key, secret_key)`. Seeds that
  give an unusable Goppa polynomial or a non-systematic matrix are
  rejected, and the function keeps trying until it finds a good one.
- `enc(pk, randombytes)` returns `(ciphertext, session_key)`.
- `dec(c, sk)` returns the session key. If the ciphertext is rejected,
  it does not raise. It returns a key derived from the secret rejection
  string stored in the secret key. Inputs of the wrong length raise
  `ValueError`.
- `shake256(data, outlen)` is the hash the KEM is built on.

The secret key holds, in order: the 32-byte seed, 8 bytes of pivot
information, the Goppa polynomial (128 bytes), the Beneš control bits
(5888 bytes) and the 436-byte rejection string.

### Deterministic randomness

`mceliece.rng.AesCtrDrbg` is the AES-256 CTR DRBG used for known-answer
tests. It takes a 48-byte entropy input and an optional 48-byte
personalization string. Its `randombytes(n)` method can be used as a
randomness source:

```python
from mceliece.rng import AesCtrDrbg
from mceliece.kem import keypair, enc

drbg = AesCtrDrbg(bytes(range(48)), None)
pk, sk = keypair(drbg.randombytes)
ciphertext, shared_key = enc(pk, drbg.randombytes)
```

`mceliece.rng.SeedExpander(seed, diversifier, maxlen)` is the AES-based
seed expander that goes with it. Its `read(n)` method returns the next
`n` bytes. It raises `RngError` when `maxlen` is 2**32 or more, or when
a request would use up the remaining length. `aes256_ecb(key, block)`
encrypts a single block.

### Lower-level building blocks

| Module                 | Contents                                                                 |
|------------------------|--------------------------------------------------------------------------|
| `mceliece.util`        | parameters, little-endian `load_gf`/`store_gf`/`load4`/`load8`/`store8`, `bitrev` |
| `mceliece.gf`          | GF(2^12) arithmetic (`gf_mul`, `gf_inv`, `gf_frac`, ...) and `gf_poly_mul` in GF((2^12)^64) |
| `mceliece.transpose`   | `transpose_64x64` of a bit matrix given as 64 row words                  |
| `mceliece.root`        | `eval_poly` and `root` (evaluation at every support element)             |
| `mceliece.synd`        | `synd`, the 2t syndrome values of a received word                        |
| `mceliece.bm`          | `bm`, Berlekamp–Massey                                                   |
| `mceliece.benes`       | `apply_benes` and `support_gen` from control bits                        |
| `mceliece.controlbits` | `controlbits_from_permutation` and `apply_control_bits`                  |
| `mceliece.sk_gen`      | `genpoly_gen` (Goppa polynomial) and `KeyGenerationError`                |
| `mceliece.pk_gen`      | `pk_gen`, which returns the public key and the permutation               |
| `mceliece.encrypt`     | `gen_e`, `syndrome` and `encrypt`, which returns `(syndrome, error_vector)` |
| `mceliece.decrypt`     | `decrypt`, which returns `(error_vector, ok)`                            |

## Known-answer tests

The `mceliece-kat` command writes a request file and a response file in
the usual KAT layout. Each record holds `count`, `seed`, `pk`, `sk`,
`ct` and `ss`:

```
mceliece-kat kat_kem.req kat_kem.rsp --count 10
```

`--count` (or `-n`) defaults to 100. For every record the command checks
that decapsulation recovers the shared secret. The exit status is 0 on
success, -1 if a file cannot be written and -4 if a check fails.

From Python, `mceliece.kat.generate(count, req, rsp)` writes the same
output to two text streams. `format_bstr(label, data)` formats one hex
line.

## Limitations

- Python makes no constant-time guarantees, so this code does not
  protect against timing side channels. Use it for study and for
  producing test vectors.
- Key generation in pure Python is slow. A single key pair can take
  minutes.
- Only the 348864 parameter set is provided.