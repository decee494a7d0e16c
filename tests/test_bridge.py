"""
Unit tests for the Bridge module.

Tests:
- Buffer types accepted at the boundary
- Boundary errors for unusable objects
- Reference comparison and self test
"""

import array
import logging

import pytest
from unittest.mock import patch

from src.bridge.errors import BridgeError, InvalidBufferError, InaccessibleBufferError
from src.bridge.native_bridge import (
    ComparisonResult, ReferenceBackend, KNOWN_ANSWERS,
    hash_buffer, compare_implementations, self_test
)
from src.core_crypto.sha256 import sha256


HELLO_WORLD_HEX = "dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f"


class BrokenBackend(ReferenceBackend):
    """Reference backend that always disagrees."""
    
    name = "broken"
    
    def hash(self, data):
        return b"\x00" * 32


class TestHashBuffer:
    """Unit tests for hash_buffer."""
    
    def test_bytes(self):
        """bytes are hashed directly."""
        assert hash_buffer(b"abc") == sha256(b"abc")
    
    def test_returns_bytes_of_32(self):
        """Digest is immutable bytes of length 32."""
        digest = hash_buffer(bytearray(b"abc"))
        assert isinstance(digest, bytes)
        assert len(digest) == 32
    
    def test_bytearray_and_memoryview(self):
        """Mutable buffers and views hash like their contents."""
        data = bytearray(b"Hello, World!")
        assert hash_buffer(data) == sha256(bytes(data))
        assert hash_buffer(memoryview(data)) == sha256(bytes(data))
    
    def test_array_raw_bytes(self):
        """Typed arrays are hashed by their raw memory."""
        arr = array.array("I", [1, 2, 3])
        assert hash_buffer(arr) == sha256(arr.tobytes())
    
    def test_non_contiguous_view(self):
        """Strided views are copied in logical order."""
        view = memoryview(b"abcdef")[::2]
        assert hash_buffer(view) == sha256(b"ace")
    
    def test_empty_buffer(self):
        """An empty buffer is a valid message."""
        assert hash_buffer(bytearray()) == sha256(b"")
    
    @pytest.mark.parametrize("value", ["abc", None, 42, 3.5, ["a"]])
    def test_non_buffer_rejected(self, value):
        """Objects without the buffer protocol are boundary errors."""
        with pytest.raises(InvalidBufferError):
            hash_buffer(value)
    
    def test_invalid_buffer_is_type_error(self):
        """InvalidBufferError is also a TypeError."""
        with pytest.raises(TypeError):
            hash_buffer("text must be encoded first")
    
    def test_released_view_rejected(self):
        """A released memoryview cannot be read."""
        view = memoryview(b"abc")
        view.release()
        with pytest.raises(InaccessibleBufferError) as excinfo:
            hash_buffer(view)
        assert isinstance(excinfo.value, BridgeError)
        assert isinstance(excinfo.value.__cause__, ValueError)
    
    def test_memory_error_propagates(self):
        """Allocation failures are not wrapped."""
        with patch("src.bridge.native_bridge.SHA256.hash", side_effect=MemoryError):
            with pytest.raises(MemoryError):
                hash_buffer(b"abc")
    
    def test_debug_log(self, caplog):
        """Each boundary hash is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="src.bridge.native_bridge"):
            hash_buffer(b"abc")
        assert "ba7816bf8f01cfea" in caplog.text
        assert "3 bytes" in caplog.text


class TestReferenceComparison:
    """Unit tests for the engine/reference cross-check."""
    
    def test_reference_backend_abc(self):
        """The cryptography library agrees on 'abc'."""
        assert ReferenceBackend().hash(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )
    
    def test_hello_world_matches(self):
        """Engine and reference agree on the demo message."""
        result = compare_implementations("Hello, World!")
        assert isinstance(result, ComparisonResult)
        assert result.match
        assert result.engine_hex == HELLO_WORLD_HEX
        assert result.reference_hex == HELLO_WORLD_HEX
        assert result.message == b"Hello, World!"
    
    @pytest.mark.parametrize("text", [
        "",
        "a",
        "x" * 55,
        "x" * 56,
        "x" * 64,
        "abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
        "hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu",
        "ünïcödé ✓",
    ])
    def test_engine_matches_reference(self, text):
        """Engine and reference agree across block boundaries."""
        assert compare_implementations(text).match
    
    def test_mismatch_detected(self, caplog):
        """A disagreeing backend is reported and logged."""
        with caplog.at_level(logging.WARNING, logger="src.bridge.native_bridge"):
            result = compare_implementations("abc", backend=BrokenBackend())
        assert not result.match
        assert "mismatch" in caplog.text
    
    def test_encoding_respected(self):
        """Text is encoded with the requested codec."""
        result = compare_implementations("é", encoding="latin-1")
        assert result.message == b"\xe9"
        assert result.engine_digest == sha256(b"\xe9")


class TestSelfTest:
    """Unit tests for the known-answer self test."""
    
    def test_published_vectors(self):
        """Known answers include the full 64-character empty-string digest."""
        for message, expected in KNOWN_ANSWERS:
            assert len(expected) == 64
        assert KNOWN_ANSWERS[0] == (
            b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )
    
    def test_self_test_passes(self):
        """Engine passes against the published values and the reference."""
        assert self_test()
    
    def test_self_test_fails_on_reference_disagreement(self):
        """A reference that disagrees fails the self test."""
        assert not self_test(backend=BrokenBackend())
