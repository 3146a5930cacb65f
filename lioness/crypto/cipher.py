"""
LIONESS wide-block cipher.

Turns a keyed hash H and a stream cipher S into a strong pseudo-random
permutation over messages of any length above the digest size. The message
is split into a left segment of exactly H bytes and a right segment holding
the rest, then mixed by four strictly alternating rounds:

    R = R ^ S(L ^ K1)
    L = L ^ H(K2, R)
    R = R ^ S(L ^ K3)
    L = L ^ H(K4, R)

Each round only reads the segment it does not update, so running the rounds
in reverse order with the same subkeys undoes the transformation.
"""

import logging
from typing import Tuple

from .errors import InvalidBlockLength, MessageTooShort
from .kdf import split_master_key
from .primitives import HashFunction, StreamCipher
from .utils import secure_zero, xor_bytes, xor_in_place


logger = logging.getLogger(__name__)


def split_segments(message: bytes, digest_size: int) -> Tuple[bytearray, bytearray]:
    """
    Split a message into independent left and right segments.

    Args:
        message: Plaintext or ciphertext
        digest_size: Left segment length H

    Returns:
        (left, right) where left is H bytes and right is the non-empty remainder

    Raises:
        MessageTooShort: If the message is shorter than H + 1 bytes
    """
    if len(message) <= digest_size:
        raise MessageTooShort(digest_size + 1, len(message))

    return bytearray(message[:digest_size]), bytearray(message[digest_size:])


def stream_round(left: bytearray, right: bytearray, subkey: bytes,
                 stream_cipher: StreamCipher) -> None:
    """R = R ^ S(L ^ subkey)"""
    stream_key = xor_bytes(left, subkey)
    stream_cipher.apply_keystream(stream_key, right)


def hash_round(left: bytearray, right: bytearray, subkey: bytes,
               hash_function: HashFunction) -> None:
    """L = L ^ H(subkey, R)"""
    digest = hash_function.digest(subkey, bytes(right))
    if len(digest) != len(left):
        raise ValueError(f"{hash_function.name} returned {len(digest)} bytes, expected {len(left)}")
    xor_in_place(left, digest)


class Lioness:
    """
    LIONESS cipher bound to one master key and one primitive pair.

    The digest size H is fixed at construction from the hash function and
    determines the master key length (4 * H) and the minimum message length
    (H + 1). Instances hold only immutable subkeys and can be shared across
    threads when the primitives are stateless.
    """

    def __init__(self, master_key: bytes, stream_cipher: StreamCipher,
                 hash_function: HashFunction):
        """
        Initialize the cipher.

        Args:
            master_key: 4 * H bytes of key material
            stream_cipher: Keystream capability; its key size must equal H
            hash_function: Keyed hash capability with digest size H

        Raises:
            ValueError: If the stream key size does not match the digest size
            InvalidKeyLength: If the master key has the wrong length
        """
        digest_size = hash_function.digest_size
        if stream_cipher.key_size != digest_size:
            raise ValueError(
                f"Stream key size ({stream_cipher.key_size}) must equal "
                f"digest size ({digest_size})"
            )

        self._digest_size = digest_size
        self._stream = stream_cipher
        self._hash = hash_function
        self._keys = split_master_key(master_key, digest_size)

        logger.debug("Created LIONESS instance: %s + %s, H=%d",
                     stream_cipher.name, hash_function.name, digest_size)

    @property
    def digest_size(self) -> int:
        """Left segment length H."""
        return self._digest_size

    @property
    def key_size(self) -> int:
        """Master key length (4 * H)."""
        return 4 * self._digest_size

    @property
    def min_message_size(self) -> int:
        """Shortest message accepted (H + 1)."""
        return self._digest_size + 1

    @property
    def algorithm_name(self) -> str:
        return f"LIONESS({self._stream.name}, {self._hash.name})"

    def _encrypt_segments(self, left: bytearray, right: bytearray) -> None:
        k1, k2, k3, k4 = self._keys
        stream_round(left, right, k1, self._stream)
        hash_round(left, right, k2, self._hash)
        stream_round(left, right, k3, self._stream)
        hash_round(left, right, k4, self._hash)

    def _decrypt_segments(self, left: bytearray, right: bytearray) -> None:
        k1, k2, k3, k4 = self._keys
        hash_round(left, right, k4, self._hash)
        stream_round(left, right, k3, self._stream)
        hash_round(left, right, k2, self._hash)
        stream_round(left, right, k1, self._stream)

    def _transform(self, data: bytes, rounds) -> bytes:
        left, right = split_segments(data, self._digest_size)
        joined = bytearray()
        try:
            rounds(left, right)
            joined = left + right
            return bytes(joined)
        finally:
            secure_zero(left)
            secure_zero(right)
            secure_zero(joined)

    def _transform_in_place(self, block: bytearray, rounds) -> None:
        left, right = split_segments(block, self._digest_size)
        try:
            rounds(left, right)
            block[:len(left)] = left
            block[len(left):] = right
        finally:
            secure_zero(left)
            secure_zero(right)

    def encrypt(self, message: bytes) -> bytes:
        """
        Encrypt a message.

        Args:
            message: Plaintext of at least H + 1 bytes

        Returns:
            Ciphertext of the same length

        Raises:
            MessageTooShort: If the message is shorter than H + 1 bytes
        """
        return self._transform(message, self._encrypt_segments)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a ciphertext.

        Args:
            ciphertext: Ciphertext of at least H + 1 bytes

        Returns:
            Plaintext of the same length

        Raises:
            MessageTooShort: If the ciphertext is shorter than H + 1 bytes
        """
        return self._transform(ciphertext, self._decrypt_segments)

    def encrypt_block(self, block: bytearray) -> None:
        """Encrypt a caller-owned buffer in place."""
        self._transform_in_place(block, self._encrypt_segments)

    def decrypt_block(self, block: bytearray) -> None:
        """Decrypt a caller-owned buffer in place."""
        self._transform_in_place(block, self._decrypt_segments)

    def __repr__(self) -> str:
        return f"<{self.algorithm_name} H={self._digest_size}>"


class BlockLioness:
    """
    LIONESS restricted to one fixed block size.

    Behaves as a conventional block cipher whose block is `block_size`
    bytes; any other input length is rejected.
    """

    def __init__(self, master_key: bytes, block_size: int,
                 stream_cipher: StreamCipher, hash_function: HashFunction):
        if block_size <= hash_function.digest_size:
            raise ValueError(
                f"Block size must exceed the digest size ({hash_function.digest_size})"
            )
        self.block_size = block_size
        self.inner = Lioness(master_key, stream_cipher, hash_function)

    @property
    def key_size(self) -> int:
        return self.inner.key_size

    def _check(self, block) -> None:
        if len(block) != self.block_size:
            raise InvalidBlockLength(self.block_size, len(block))

    def encrypt(self, block: bytes) -> bytes:
        self._check(block)
        return self.inner.encrypt(block)

    def decrypt(self, block: bytes) -> bytes:
        self._check(block)
        return self.inner.decrypt(block)

    def encrypt_block(self, block: bytearray) -> None:
        self._check(block)
        self.inner.encrypt_block(block)

    def decrypt_block(self, block: bytearray) -> None:
        self._check(block)
        self.inner.decrypt_block(block)


def encrypt(master_key: bytes, message: bytes, suite: str = None) -> bytes:
    """
    One-shot encryption under a named cipher suite.

    Args:
        master_key: 4 * H bytes for the suite
        message: Plaintext of at least H + 1 bytes
        suite: Suite name, defaults to the default suite

    Returns:
        Ciphertext of the same length
    """
    from .suites import get_suite

    return get_suite(suite).create(master_key).encrypt(message)


def decrypt(master_key: bytes, ciphertext: bytes, suite: str = None) -> bytes:
    """
    One-shot decryption under a named cipher suite.

    Args:
        master_key: 4 * H bytes for the suite
        ciphertext: Ciphertext of at least H + 1 bytes
        suite: Suite name, defaults to the default suite

    Returns:
        Plaintext of the same length
    """
    from .suites import get_suite

    return get_suite(suite).create(master_key).decrypt(ciphertext)
