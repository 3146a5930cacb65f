"""
Tests for the hash and keystream adapters.

Known-answer values come from RFC 8439 (ChaCha20), RFC 4231 (HMAC-SHA256)
and FIPS 180-2 (SHA-256).
"""

import hashlib

import pytest
from blake3 import blake3
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from lioness.crypto.primitives import (
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
from lioness.crypto.utils import xor_bytes, xor_in_place, secure_zero


STREAMS = [ChaCha20Stream(), AESCTRStream(), Shake256Stream(32), Shake256Stream(4)]
HASHES = [HMACSHA256(), PrefixSHA256(), Blake2bHash(), Blake2bHash(4), Blake2bHash(64),
          Blake3Hash(), Blake3Hash(4)]


class TestStreamContract:
    """Contract shared by every keystream adapter."""

    @pytest.mark.parametrize("stream", STREAMS, ids=repr)
    def test_length_and_determinism(self, stream):
        key = bytes(range(stream.key_size))

        first = stream.generate(key, 1000)

        assert len(first) == 1000
        assert stream.generate(key, 1000) == first

    @pytest.mark.parametrize("stream", STREAMS, ids=repr)
    def test_prefix_consistency(self, stream):
        key = b'\x42' * stream.key_size

        assert stream.generate(key, 200)[:37] == stream.generate(key, 37)

    @pytest.mark.parametrize("stream", STREAMS, ids=repr)
    def test_zero_length(self, stream):
        assert stream.generate(b'\x00' * stream.key_size, 0) == b''

    @pytest.mark.parametrize("stream", STREAMS, ids=repr)
    def test_wrong_key_size(self, stream):
        with pytest.raises(ValueError):
            stream.generate(b'\x00' * (stream.key_size + 1), 10)
        with pytest.raises(ValueError):
            stream.apply_keystream(b'\x00' * (stream.key_size - 1), bytearray(10))

    @pytest.mark.parametrize("stream", STREAMS, ids=repr)
    def test_apply_keystream_matches_generate(self, stream):
        key = b'\x17' * stream.key_size
        data = bytearray(b'some plaintext bytes of arbitrary length')
        expected = xor_bytes(bytes(data), stream.generate(key, len(data)))

        stream.apply_keystream(key, data)

        assert bytes(data) == expected

    @pytest.mark.parametrize("stream", STREAMS, ids=repr)
    def test_distinct_keys(self, stream):
        a = stream.generate(b'\x00' * stream.key_size, 64)
        b = stream.generate(b'\x00' * (stream.key_size - 1) + b'\x01', 64)

        assert a != b

    def test_negative_length(self):
        with pytest.raises(ValueError):
            ChaCha20Stream().generate(b'\x00' * 32, -1)


class TestStreamVectors:
    """Known-answer keystream checks."""

    def test_chacha20_zero_key(self):
        # RFC 8439 A.1 test vector 1: zero key, zero nonce, block counter 0
        keystream = ChaCha20Stream().generate(b'\x00' * 32, 16)
        assert keystream.hex() == "76b8e0ada0f13d90405d6ae55386bd28"

    def test_aes_ctr_counter_blocks(self):
        key = bytes(range(32))
        ecb = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
        expected = ecb.update(b'\x00' * 16 + b'\x00' * 15 + b'\x01') + ecb.finalize()

        assert AESCTRStream().generate(key, 32) == expected

    def test_shake256_matches_hashlib(self):
        key = b'abcd'
        assert Shake256Stream(4).generate(key, 100) == hashlib.shake_256(key).digest(100)

    def test_shake256_rejects_empty_key_size(self):
        with pytest.raises(ValueError):
            Shake256Stream(0)


class TestHashContract:
    """Contract shared by every keyed hash adapter."""

    @pytest.mark.parametrize("hash_function", HASHES, ids=repr)
    def test_digest_size(self, hash_function):
        for length in (0, 1, 100, 5000):
            digest = hash_function.digest(b'k' * 32, b'm' * length)
            assert len(digest) == hash_function.digest_size

    @pytest.mark.parametrize("hash_function", HASHES, ids=repr)
    def test_key_dependence(self, hash_function):
        message = b'the same message'

        assert hash_function.digest(b'\x00' * 32, message) != hash_function.digest(b'\x01' * 32, message)

    @pytest.mark.parametrize("hash_function", HASHES, ids=repr)
    def test_message_dependence(self, hash_function):
        key = b'\x05' * 32

        assert hash_function.digest(key, b'message-a') != hash_function.digest(key, b'message-b')


class TestHashVectors:
    """Known-answer digest checks."""

    def test_hmac_sha256_rfc4231_case2(self):
        digest = HMACSHA256().digest(b"Jefe", b"what do ya want for nothing?")
        assert digest.hex() == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"

    def test_prefix_sha256_is_concatenation(self):
        digest = PrefixSHA256().digest(b"a", b"bc")
        assert digest.hex() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_blake2b_matches_hashlib(self):
        digest = Blake2bHash(32).digest(b'key', b'message')
        assert digest == hashlib.blake2b(b'message', digest_size=32, key=b'key').digest()

    def test_blake2b_long_key_compressed(self):
        long_key = b'\x11' * 128
        expected_key = hashlib.blake2b(long_key).digest()

        digest = Blake2bHash(32).digest(long_key, b'message')

        assert digest == hashlib.blake2b(b'message', digest_size=32, key=expected_key).digest()

    @pytest.mark.parametrize("size", [0, 65])
    def test_blake2b_digest_size_bounds(self, size):
        with pytest.raises(ValueError):
            Blake2bHash(size)

    def test_blake3_empty_input(self):
        # BLAKE3 reference vector for the empty input
        assert blake3(b'').hexdigest() == "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"

    def test_blake3_keyed_matches_package(self):
        key = b'whats the Elvish word for friend'

        digest = Blake3Hash(32).digest(key, b'message')

        assert digest == blake3(b'message', key=key).digest()

    @pytest.mark.parametrize("key_length", [4, 33, 128])
    def test_blake3_other_key_lengths_compressed(self, key_length):
        key = b'\x22' * key_length
        expected_key = blake3(key).digest()

        digest = Blake3Hash(4).digest(key, b'message')

        assert digest == blake3(b'message', key=expected_key).digest(length=4)

    def test_blake3_digest_size_bound(self):
        with pytest.raises(ValueError):
            Blake3Hash(0)


class TestAbstractContracts:
    """Custom primitives plug in through the abstract base classes."""

    def test_incomplete_subclass_cannot_instantiate(self):
        class Broken(HashFunction):
            pass

        with pytest.raises(TypeError):
            Broken()

    def test_custom_stream(self):
        class RepeatStream(StreamCipher):
            name = "repeat"

            @property
            def key_size(self):
                return 2

            def _keystream(self, key, length):
                return (key * length)[:length]

        assert RepeatStream().generate(b'ab', 5) == b'ababa'


class TestUtils:
    """Byte helpers."""

    def test_xor_in_place(self):
        buf = bytearray(b'\x0f\xf0\xaa')
        xor_in_place(buf, b'\xff\xff\xaa')
        assert buf == bytearray(b'\xf0\x0f\x00')

    def test_xor_in_place_length_mismatch(self):
        with pytest.raises(ValueError):
            xor_in_place(bytearray(3), b'\x00' * 4)

    def test_xor_bytes_length_mismatch(self):
        with pytest.raises(ValueError):
            xor_bytes(b'\x00', b'\x00\x00')

    def test_secure_zero(self):
        buf = bytearray(b'secret')
        secure_zero(buf)
        assert buf == bytearray(6)

        with pytest.raises(TypeError):
            secure_zero(b'immutable')
