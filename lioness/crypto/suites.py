"""
Named pairings of stream cipher and hash function.

A suite fixes both primitives, and therefore the digest size H, so that
callers can refer to a LIONESS instantiation by a stable name.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .cipher import BlockLioness, Lioness
from .errors import UnknownSuiteError
from .kdf import generate_master_key
from .primitives import (
    AESCTRStream,
    Blake2bHash,
    Blake3Hash,
    ChaCha20Stream,
    HashFunction,
    HMACSHA256,
    PrefixSHA256,
    Shake256Stream,
    StreamCipher,
)


DEFAULT_SUITE = "chacha20-blake2b"


@dataclass(frozen=True)
class CipherSuite:
    """Factory for LIONESS instances over a fixed primitive pair."""
    name: str
    stream_factory: Callable[[], StreamCipher]
    hash_factory: Callable[[], HashFunction]
    description: str = ""

    @property
    def digest_size(self) -> int:
        return self.hash_factory().digest_size

    @property
    def key_size(self) -> int:
        return 4 * self.digest_size

    def create(self, master_key: bytes) -> Lioness:
        """Build a cipher for this suite keyed with `master_key`."""
        return Lioness(master_key, self.stream_factory(), self.hash_factory())

    def create_block(self, master_key: bytes, block_size: int) -> BlockLioness:
        """Build a fixed-block cipher for this suite."""
        return BlockLioness(master_key, block_size, self.stream_factory(), self.hash_factory())

    def generate_key(self) -> bytes:
        return generate_master_key(self.digest_size)


_SUITES: Dict[str, CipherSuite] = {}


def register_suite(suite: CipherSuite) -> CipherSuite:
    """Add a suite to the registry, replacing any suite of the same name."""
    _SUITES[suite.name] = suite
    return suite


register_suite(CipherSuite(
    "chacha20-blake2b", ChaCha20Stream, Blake2bHash,
    "ChaCha20 keystream, keyed BLAKE2b-256",
))
register_suite(CipherSuite(
    "chacha20-blake3", ChaCha20Stream, Blake3Hash,
    "ChaCha20 keystream, keyed BLAKE3-256",
))
register_suite(CipherSuite(
    "chacha20-hmac-sha256", ChaCha20Stream, HMACSHA256,
    "ChaCha20 keystream, HMAC-SHA256",
))
register_suite(CipherSuite(
    "aes256ctr-sha256", AESCTRStream, PrefixSHA256,
    "AES-256-CTR keystream, SHA-256 over key || message",
))
register_suite(CipherSuite(
    "shake256-blake2b", Shake256Stream, Blake2bHash,
    "SHAKE-256 keystream, keyed BLAKE2b-256",
))


def get_suite(name: Optional[str] = None) -> CipherSuite:
    """
    Look up a registered suite.

    Args:
        name: Suite name; None selects the default suite

    Raises:
        UnknownSuiteError: If no suite has that name
    """
    if name is None:
        name = DEFAULT_SUITE
    try:
        return _SUITES[name.lower()]
    except KeyError:
        raise UnknownSuiteError(
            f"Unknown cipher suite '{name}'. Available: {', '.join(available_suites())}"
        ) from None


def available_suites() -> List[str]:
    """Names of all registered suites."""
    return sorted(_SUITES)
