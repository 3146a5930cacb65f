"""
Cryptographic layer of the LIONESS package.

This module provides:
- Capability interfaces for keyed hashes and keystream generators
- The key schedule
- The LIONESS engine and its fixed-block wrapper
- Named cipher suites
"""

from .errors import (
    LionessError,
    InvalidKeyLength,
    MessageTooShort,
    InvalidBlockLength,
    UnknownSuiteError,
)
from .primitives import (
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
from .kdf import RoundKeys, split_master_key, generate_master_key, load_master_key, save_master_key
from .cipher import Lioness, BlockLioness, split_segments, encrypt, decrypt
from .suites import CipherSuite, DEFAULT_SUITE, get_suite, available_suites, register_suite

__all__ = [
    'LionessError',
    'InvalidKeyLength',
    'MessageTooShort',
    'InvalidBlockLength',
    'UnknownSuiteError',
    'HashFunction',
    'StreamCipher',
    'HMACSHA256',
    'PrefixSHA256',
    'Blake2bHash',
    'Blake3Hash',
    'ChaCha20Stream',
    'AESCTRStream',
    'Shake256Stream',
    'RoundKeys',
    'split_master_key',
    'generate_master_key',
    'load_master_key',
    'save_master_key',
    'Lioness',
    'BlockLioness',
    'split_segments',
    'encrypt',
    'decrypt',
    'CipherSuite',
    'DEFAULT_SUITE',
    'get_suite',
    'available_suites',
    'register_suite',
]
