"""AES-256 based deterministic random byte generators."""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_MAXLEN_LIMIT = 1 << 32


class RngError(ValueError):
    """Raised for an invalid request to a random byte generator."""


def aes256_ecb(key, block):
    """Encrypt a single 16-byte block with AES-256."""
    if len(key) != 32 or len(block) != 16:
        raise ValueError("AES-256 needs a 32-byte key and a 16-byte block")
    encryptor = Cipher(algorithms.AES(bytes(key)), modes.ECB()).encryptor()
    return encryptor.update(bytes(block)) + encryptor.finalize()


class AesCtrDrbg:
    """The AES-256 CTR DRBG used to produce known-answer test vectors."""

    def __init__(self, entropy_input, personalization_string=None):
        if len(entropy_input) != 48:
            raise ValueError("entropy input must be 48 bytes")
        seed_material = bytes(entropy_input)
        if personalization_string is not None:
            if len(personalization_string) != 48:
                raise ValueError("personalization string must be 48 bytes")
            seed_material = bytes(
                x ^ y for x, y in zip(seed_material, personalization_string)
            )
        self._key = bytes(32)
        self._v = 0
        self._update(seed_material)
        self.reseed_counter = 1

    def _next_block(self):
        self._v = (self._v + 1) % (1 << 128)
        return aes256_ecb(self._key, self._v.to_bytes(16, "big"))

    def _update(self, provided_data):
        temp = b"".join(self._next_block() for _ in range(3))
        if provided_data is not None:
            temp = bytes(x ^ y for x, y in zip(temp, provided_data))
        self._key = temp[:32]
        self._v = int.from_bytes(temp[32:], "big")

    def randombytes(self, n):
        """Return n pseudo-random bytes and advance the generator state."""
        if n < 0:
            raise ValueError("byte count must be non-negative")
        out = bytearray()
        while len(out) < n:
            out += self._next_block()
        self._update(None)
        self.reseed_counter += 1
        return bytes(out[:n])


class SeedExpander:
    """An AES-256 based extendable output derived from a seed and diversifier."""

    def __init__(self, seed, diversifier, maxlen):
        if not 0 <= maxlen < _MAXLEN_LIMIT:
            raise RngError("maxlen must be less than 2**32")
        if len(seed) < 32:
            raise ValueError("seed must be at least 32 bytes")
        if len(diversifier) < 8:
            raise ValueError("diversifier must be at least 8 bytes")
        self._remaining = maxlen
        self._key = bytes(seed[:32])
        self._prefix = bytes(diversifier[:8]) + maxlen.to_bytes(4, "big")
        self._counter = 0
        self._buffer = b""

    def read(self, n):
        """Return the next n bytes of output."""
        if n < 0:
            raise ValueError("byte count must be non-negative")
        if n >= self._remaining:
            raise RngError("request exceeds the remaining output length")
        self._remaining -= n

        out = bytearray()
        while n > len(self._buffer):
            out += self._buffer
            n -= len(self._buffer)
            block = self._prefix + self._counter.to_bytes(4, "big")
            self._buffer = aes256_ecb(self._key, block)
            self._counter = (self._counter + 1) % _MAXLEN_LIMIT
        out += self._buffer[:n]
        self._buffer = self._buffer[n:]
        return bytes(out)