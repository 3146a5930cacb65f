"""
LIONESS wide-block cipher.

Builds a strong pseudo-random permutation over messages of arbitrary length
from a keyed hash and a stream cipher, using four alternating rounds.

Key Features:
- Length-preserving: ciphertext is exactly as long as the plaintext
- No padding, nonce or mode of operation needed by the caller
- Pluggable primitives (ChaCha20, AES-CTR, SHAKE-256, BLAKE2b, HMAC-SHA256)
- Fixed-size block variant for use as a conventional block cipher

Basic Usage:
    >>> from lioness import create_cipher, generate_master_key
    >>>
    >>> key = generate_master_key()
    >>> cipher = create_cipher(key)
    >>>
    >>> ciphertext = cipher.encrypt(b"Hello, this message is longer than 32 bytes!")
    >>> cipher.decrypt(ciphertext)
    b'Hello, this message is longer than 32 bytes!'
"""

__version__ = "1.0.0"
__author__ = "LIONESS Project"

from typing import Optional

# Core construction
from .crypto.cipher import Lioness, BlockLioness, encrypt, decrypt
from .crypto.errors import (
    LionessError,
    InvalidKeyLength,
    MessageTooShort,
    InvalidBlockLength,
    UnknownSuiteError,
)

# Primitives
from .crypto.primitives import (
    HashFunction,
    StreamCipher,
    HMACSHA256,
    PrefixSHA256,
    Blake2bHash,
    Blake3Hash,
    ChaCha20Stream,
    AESCTRStream,
    Shake256Stream,
)

# Keys and suites
from .crypto.kdf import generate_master_key, split_master_key
from .crypto.suites import CipherSuite, DEFAULT_SUITE, get_suite, available_suites

# Configuration
from .config import LionessConfig, ConfigError

# Evaluation tools
from .evaluation.benchmark import PerformanceBenchmark, run_comprehensive_benchmark


def create_cipher(master_key: bytes, suite: Optional[str] = None) -> Lioness:
    """
    Create a LIONESS cipher for a named suite.

    Args:
        master_key: 4 * H bytes of key material (128 bytes for the default suite)
        suite: Suite name; defaults to chacha20-blake2b

    Returns:
        Lioness instance ready for encrypt/decrypt
    """
    return get_suite(suite).create(master_key)


def quick_benchmark(suite: Optional[str] = None) -> dict:
    """
    Run a quick performance benchmark.

    Args:
        suite: Suite name; defaults to chacha20-blake2b

    Returns:
        Benchmark summary
    """
    benchmark = PerformanceBenchmark()
    benchmark.benchmark_suite(get_suite(suite).name, [64, 512, 1024], iterations=100)
    return benchmark.get_summary_report()


__all__ = [
    # Version info
    '__version__',

    # High-level interface
    'create_cipher',
    'encrypt',
    'decrypt',
    'Lioness',
    'BlockLioness',

    # Errors
    'LionessError',
    'InvalidKeyLength',
    'MessageTooShort',
    'InvalidBlockLength',
    'UnknownSuiteError',
    'ConfigError',

    # Primitives
    'HashFunction',
    'StreamCipher',
    'HMACSHA256',
    'PrefixSHA256',
    'Blake2bHash',
    'Blake3Hash',
    'ChaCha20Stream',
    'AESCTRStream',
    'Shake256Stream',

    # Keys and suites
    'generate_master_key',
    'split_master_key',
    'CipherSuite',
    'DEFAULT_SUITE',
    'get_suite',
    'available_suites',

    # Configuration
    'LionessConfig',

    # Evaluation
    'PerformanceBenchmark',
    'run_comprehensive_benchmark',
    'quick_benchmark',
]
