"""
Key schedule and master key handling for LIONESS.

The master key is four digests long. It is split structurally into four
round subkeys; no hashing happens here, all mixing is done by the rounds.
"""

import logging
import os
from typing import NamedTuple

from .errors import InvalidKeyLength
from .utils import generate_random_bytes


logger = logging.getLogger(__name__)

ROUNDS = 4
DEFAULT_DIGEST_SIZE = 32


class RoundKeys(NamedTuple):
    """Four per-round subkeys; k1 keys round 1 and so on."""
    k1: bytes
    k2: bytes
    k3: bytes
    k4: bytes


def master_key_size(digest_size: int = DEFAULT_DIGEST_SIZE) -> int:
    """Master key length for a given digest size."""
    return ROUNDS * digest_size


def split_master_key(master_key: bytes, digest_size: int) -> RoundKeys:
    """
    Slice a master key into four contiguous round subkeys.

    Args:
        master_key: Key of exactly 4 * digest_size bytes
        digest_size: Digest size H of the bound hash function

    Returns:
        RoundKeys with four digest_size-byte subkeys

    Raises:
        InvalidKeyLength: If the master key is not 4 * digest_size bytes
    """
    expected = master_key_size(digest_size)
    if len(master_key) != expected:
        raise InvalidKeyLength(expected, len(master_key))

    key = bytes(master_key)
    return RoundKeys(*(key[i * digest_size:(i + 1) * digest_size] for i in range(ROUNDS)))


def generate_master_key(digest_size: int = DEFAULT_DIGEST_SIZE) -> bytes:
    """Generate a random master key for a given digest size."""
    return generate_random_bytes(master_key_size(digest_size))


def load_master_key(key_file_path: str, digest_size: int = DEFAULT_DIGEST_SIZE) -> bytes:
    """
    Load a master key from a file.

    Supported formats:
    - Raw binary (4 * H bytes)
    - Hex encoded (8 * H characters), optionally followed by a newline

    Args:
        key_file_path: Path to the key file
        digest_size: Digest size H the key is meant for

    Returns:
        The master key

    Raises:
        FileNotFoundError: If the key file doesn't exist
        InvalidKeyLength: If the file holds no key of the expected size
    """
    if not os.path.exists(key_file_path):
        raise FileNotFoundError(f"Master key file not found: {key_file_path}")

    with open(key_file_path, 'rb') as f:
        key_data = f.read()

    expected = master_key_size(digest_size)

    if len(key_data) == expected:
        return key_data

    text = key_data.rstrip(b'\r\n')
    if len(text) == 2 * expected:
        try:
            return bytes.fromhex(text.decode('ascii'))
        except (ValueError, UnicodeDecodeError):
            pass

    raise InvalidKeyLength(expected, len(key_data))


def save_master_key(key_file_path: str, master_key: bytes) -> None:
    """
    Write a master key as hex and restrict the file permissions.

    Args:
        key_file_path: Destination path
        master_key: Key bytes to store
    """
    with open(key_file_path, 'w') as f:
        f.write(master_key.hex())
        f.write('\n')

    try:
        os.chmod(key_file_path, 0o600)  # rw-------
    except (OSError, AttributeError):
        logger.warning("Could not set restrictive permissions on %s", key_file_path)
