"""
Security Tests for LIONESS.

Tests diffusion, key sensitivity and separation between round subkeys.
These are statistical sanity checks, not proofs.
"""

import pytest

from lioness.crypto.cipher import Lioness
from lioness.crypto.kdf import generate_master_key
from lioness.crypto.primitives import Blake2bHash, ChaCha20Stream
from lioness.crypto.suites import available_suites, get_suite
from lioness.crypto.utils import generate_random_bytes, hamming_distance
from lioness.evaluation.benchmark import analyze_avalanche


def flip_bit(data: bytes, bit_pos: int) -> bytes:
    modified = bytearray(data)
    modified[bit_pos // 8] ^= 1 << (bit_pos % 8)
    return bytes(modified)


class TestAvalanche:
    """Test that single-bit input changes spread over the whole output."""

    @pytest.mark.parametrize("bit_pos", [0, 7, 255, 256, 1000, 2047])
    def test_plaintext_bit_flip(self, bit_pos):
        cipher = get_suite().create(generate_master_key())
        message = generate_random_bytes(256)

        original = cipher.encrypt(message)
        modified = cipher.encrypt(flip_bit(message, bit_pos))

        # Expect about half of the 2048 bits to change
        distance = hamming_distance(original, modified)
        assert 700 < distance < 1350

    @pytest.mark.parametrize("bit_pos", [3, 300, 2000])
    def test_ciphertext_bit_flip(self, bit_pos):
        cipher = get_suite().create(generate_master_key())
        ciphertext = generate_random_bytes(256)

        original = cipher.decrypt(ciphertext)
        modified = cipher.decrypt(flip_bit(ciphertext, bit_pos))

        assert hamming_distance(original, modified) > 700

    def test_both_segments_change(self):
        cipher = get_suite().create(generate_master_key())
        message = generate_random_bytes(128)

        original = cipher.encrypt(message)
        modified = cipher.encrypt(flip_bit(message, 1020))

        assert original[:32] != modified[:32]
        assert original[32:] != modified[32:]

    @pytest.mark.parametrize("suite_name", available_suites())
    def test_avalanche_analysis(self, suite_name):
        result = analyze_avalanche(suite_name, message_size=128, trials=16)

        assert result.trials == 16
        assert 40.0 < result.avalanche_percent < 60.0
        assert result.min_bits_changed > 300
        # Each byte survives a flip with probability 1/256
        assert result.min_bytes_changed > 110


class TestKeySensitivity:
    """Test that distinct keys give unrelated ciphertexts."""

    def test_distinct_keys(self):
        message = b"A representative fixed message for key sensitivity checks."
        key1 = generate_master_key()
        key2 = generate_master_key()

        ct1 = get_suite().create(key1).encrypt(message)
        ct2 = get_suite().create(key2).encrypt(message)

        assert ct1 != ct2

    @pytest.mark.parametrize("byte_index", [0, 31, 32, 63, 64, 95, 96, 127])
    def test_each_subkey_matters(self, byte_index):
        message = generate_random_bytes(100)
        key = generate_master_key()
        other = bytearray(key)
        other[byte_index] ^= 0x01

        ct1 = Lioness(key, ChaCha20Stream(), Blake2bHash()).encrypt(message)
        ct2 = Lioness(bytes(other), ChaCha20Stream(), Blake2bHash()).encrypt(message)

        assert ct1 != ct2
        # K4 only keys the last round, which rewrites the 32-byte left segment
        if byte_index >= 96:
            assert ct1[32:] == ct2[32:]
            assert hamming_distance(ct1[:32], ct2[:32]) > 64
        else:
            assert hamming_distance(ct1, ct2) > 200

    def test_swapped_subkeys_differ(self):
        message = generate_random_bytes(100)
        key = generate_master_key()
        swapped = key[32:64] + key[0:32] + key[96:128] + key[64:96]

        ct1 = get_suite().create(key).encrypt(message)
        ct2 = get_suite().create(swapped).encrypt(message)

        assert ct1 != ct2

    def test_suites_differ(self):
        key = generate_master_key()
        message = generate_random_bytes(64)

        outputs = {get_suite(name).create(key).encrypt(message) for name in available_suites()}

        assert len(outputs) == len(available_suites())


class TestPermutation:
    """Test permutation behaviour over many messages."""

    def test_no_collisions(self):
        cipher = get_suite().create(generate_master_key())
        messages = {generate_random_bytes(40) for _ in range(200)}

        ciphertexts = {cipher.encrypt(m) for m in messages}

        assert len(ciphertexts) == len(messages)

    def test_zero_message_not_fixed_point(self):
        cipher = get_suite().create(bytes(128))
        message = bytes(64)

        assert cipher.encrypt(message) != message
        assert cipher.decrypt(message) != message
