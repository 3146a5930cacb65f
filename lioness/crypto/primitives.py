"""
Hash and keystream capabilities consumed by the LIONESS engine.

The engine only depends on the two abstract contracts defined here:

- HashFunction: keyed digest of fixed size H
- StreamCipher: fixed-size key expanded to a keystream of any length

Concrete adapters wrap the `cryptography` library (ChaCha20, AES-CTR,
HMAC-SHA256, SHA-256, SHAKE-256). Keyed BLAKE2b is taken from hashlib since
`cryptography` does not expose BLAKE2 keying, and keyed BLAKE3 from the
`blake3` package. Every adapter is stateless, so one instance may be shared
between threads.
"""

import hashlib
from abc import ABC, abstractmethod

from blake3 import blake3
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .utils import xor_in_place


BLAKE2B_MAX_KEY = 64
BLAKE2B_MAX_DIGEST = 64
BLAKE3_KEY_SIZE = 32


class HashFunction(ABC):
    """Keyed, collision-resistant hash with a fixed digest size."""

    name = "hash"

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Digest length H in bytes."""

    @abstractmethod
    def digest(self, key: bytes, message: bytes) -> bytes:
        """
        Compute the keyed digest of a message.

        Args:
            key: Round subkey
            message: Arbitrary-length input

        Returns:
            Exactly digest_size bytes
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(digest_size={self.digest_size})"


class StreamCipher(ABC):
    """Stream cipher used as a deterministic keystream generator."""

    name = "stream"

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Required key length in bytes."""

    @abstractmethod
    def _keystream(self, key: bytes, length: int) -> bytes:
        """Produce `length` keystream bytes for an already validated key."""

    def _check_key(self, key: bytes) -> None:
        if len(key) != self.key_size:
            raise ValueError(f"{self.name} key must be {self.key_size} bytes, got {len(key)}")

    def generate(self, key: bytes, length: int) -> bytes:
        """
        Generate a keystream.

        Args:
            key: Stream key of exactly key_size bytes
            length: Number of keystream bytes to produce

        Returns:
            `length` pseudo-random bytes, deterministic for a given key

        Raises:
            ValueError: If the key has the wrong size or length is negative
        """
        self._check_key(key)
        if length < 0:
            raise ValueError("Keystream length must be non-negative")
        if length == 0:
            return b''
        return self._keystream(key, length)

    def apply_keystream(self, key: bytes, data: bytearray) -> None:
        """XOR the keystream for `key` into `data` in place."""
        xor_in_place(data, self.generate(key, len(data)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_size={self.key_size})"


class HMACSHA256(HashFunction):
    """HMAC-SHA256 keyed hash (H = 32)."""

    name = "hmac-sha256"

    @property
    def digest_size(self) -> int:
        return 32

    def digest(self, key: bytes, message: bytes) -> bytes:
        h = hmac.HMAC(key, hashes.SHA256())
        h.update(message)
        return h.finalize()


class PrefixSHA256(HashFunction):
    """SHA-256 over the concatenation key || message (H = 32)."""

    name = "sha256"

    @property
    def digest_size(self) -> int:
        return 32

    def digest(self, key: bytes, message: bytes) -> bytes:
        h = hashes.Hash(hashes.SHA256())
        h.update(key)
        h.update(message)
        return h.finalize()


class Blake2bHash(HashFunction):
    """
    Keyed BLAKE2b with a configurable digest size.

    Keys longer than the 64-byte BLAKE2b limit are first compressed with
    unkeyed BLAKE2b-512.
    """

    name = "blake2b"

    def __init__(self, digest_size: int = 32):
        """
        Initialize keyed BLAKE2b.

        Args:
            digest_size: Output length H (1-64 bytes)
        """
        if not 1 <= digest_size <= BLAKE2B_MAX_DIGEST:
            raise ValueError(f"BLAKE2b digest size must be 1-{BLAKE2B_MAX_DIGEST} bytes")
        self._digest_size = digest_size

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def digest(self, key: bytes, message: bytes) -> bytes:
        if len(key) > BLAKE2B_MAX_KEY:
            key = hashlib.blake2b(key).digest()
        return hashlib.blake2b(message, digest_size=self._digest_size, key=key).digest()


class Blake3Hash(HashFunction):
    """
    Keyed BLAKE3 with a configurable digest size.

    BLAKE3 keyed mode takes exactly 32 key bytes; keys of any other length
    are first compressed with unkeyed BLAKE3.
    """

    name = "blake3"

    def __init__(self, digest_size: int = 32):
        if digest_size < 1:
            raise ValueError("BLAKE3 digest size must be at least 1 byte")
        self._digest_size = digest_size

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def digest(self, key: bytes, message: bytes) -> bytes:
        if len(key) != BLAKE3_KEY_SIZE:
            key = blake3(key).digest()
        return blake3(message, key=key).digest(length=self._digest_size)


class ChaCha20Stream(StreamCipher):
    """ChaCha20 keystream with a fixed all-zero counter and nonce block."""

    name = "chacha20"

    # cryptography takes the 4-byte counter and 12-byte nonce as one 16-byte value
    NONCE = b'\x00' * 16

    @property
    def key_size(self) -> int:
        return 32

    def _keystream(self, key: bytes, length: int) -> bytes:
        encryptor = Cipher(algorithms.ChaCha20(key, self.NONCE), mode=None).encryptor()
        return encryptor.update(b'\x00' * length) + encryptor.finalize()

    def apply_keystream(self, key: bytes, data: bytearray) -> None:
        self._check_key(key)
        encryptor = Cipher(algorithms.ChaCha20(key, self.NONCE), mode=None).encryptor()
        data[:] = encryptor.update(bytes(data)) + encryptor.finalize()


class AESCTRStream(StreamCipher):
    """AES-256 in counter mode with an all-zero initial counter block."""

    name = "aes256-ctr"

    IV = b'\x00' * 16

    @property
    def key_size(self) -> int:
        return 32

    def _keystream(self, key: bytes, length: int) -> bytes:
        encryptor = Cipher(algorithms.AES(key), modes.CTR(self.IV)).encryptor()
        return encryptor.update(b'\x00' * length) + encryptor.finalize()

    def apply_keystream(self, key: bytes, data: bytearray) -> None:
        self._check_key(key)
        encryptor = Cipher(algorithms.AES(key), modes.CTR(self.IV)).encryptor()
        data[:] = encryptor.update(bytes(data)) + encryptor.finalize()


class Shake256Stream(StreamCipher):
    """
    SHAKE-256 extendable output used as a keystream.

    Accepts any key size, which makes it the stream primitive of choice for
    reduced-width instances where H is smaller than a real cipher key.
    """

    name = "shake256"

    def __init__(self, key_size: int = 32):
        if key_size < 1:
            raise ValueError("Key size must be positive")
        self._key_size = key_size

    @property
    def key_size(self) -> int:
        return self._key_size

    def _keystream(self, key: bytes, length: int) -> bytes:
        xof = hashes.Hash(hashes.SHAKE256(digest_size=length))
        xof.update(key)
        return xof.finalize()
