"""
Byte-level helpers shared by the LIONESS primitives and engine.

This module provides XOR combination, secure random generation, memory
zeroing and bit counting used throughout the package.
"""

import secrets
from typing import Union


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """
    XOR two byte sequences of equal length.

    Args:
        a: First byte sequence
        b: Second byte sequence

    Returns:
        XOR result as bytes

    Raises:
        ValueError: If sequences have different lengths
    """
    if len(a) != len(b):
        raise ValueError("Byte sequences must have equal length")

    return bytes(x ^ y for x, y in zip(a, b))


def xor_in_place(target: bytearray, mask: bytes) -> None:
    """
    XOR a mask into a mutable buffer.

    The buffer and mask must have equal length; the buffer is never resized.

    Args:
        target: Buffer updated in place
        mask: Bytes combined into the buffer
    """
    if len(target) != len(mask):
        raise ValueError("Mask length must match buffer length")

    # Whole-buffer integer XOR is much faster than a per-byte loop in CPython
    size = len(target)
    combined = int.from_bytes(target, 'little') ^ int.from_bytes(mask, 'little')
    target[:] = combined.to_bytes(size, 'little')


def secure_zero(data: Union[bytearray, memoryview]) -> None:
    """
    Overwrite a mutable buffer with zeros.

    Args:
        data: Memory to zero (must be mutable)
    """
    if not isinstance(data, (bytearray, memoryview)):
        raise TypeError("Data must be bytearray or memoryview")

    data[:] = bytes(len(data))


def generate_random_bytes(length: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of random bytes to generate

    Returns:
        Cryptographically secure random bytes
    """
    return secrets.token_bytes(length)


def hamming_distance(a: bytes, b: bytes) -> int:
    """Count differing bits between two equal-length byte strings."""
    if len(a) != len(b):
        raise ValueError("Byte sequences must have equal length")
    return bin(int.from_bytes(a, 'big') ^ int.from_bytes(b, 'big')).count('1')
