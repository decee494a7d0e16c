"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Padding: Pads message to multiple of 512 bits (padding.py)
- Message Schedule: Expands 16 words to 64 words (schedule.py)
- Compression: 64 rounds of compression function (compression.py)
- Output: 256-bit (32-byte) digest
"""

from typing import List, Tuple

from .constants import H_INITIAL, SCHEDULE_WORDS, WORD_SIZE
from .padding import pad_message, iter_blocks
from .schedule import build_message_schedule
from .compression import compress


class SHA256:
    """
    One hashing session.

    Holds the running hash state and a scratch message schedule that is
    overwritten for every block. ``hash()`` resets the state first, so a
    session may be reused for another message once the previous call has
    returned. Sessions are not thread-safe; use one per thread.

    Example:
        >>> SHA256().hash(b"abc").hex()
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """

    def __init__(self):
        """Initialize a session with the standard initial hash values."""
        self._state: List[int] = list(H_INITIAL)
        self._schedule: List[int] = [0] * SCHEDULE_WORDS

    @property
    def state(self) -> Tuple[int, ...]:
        """Snapshot of the current 8-word hash state."""
        return tuple(self._state)

    def reset(self) -> None:
        """Restore the initial hash values."""
        self._state = list(H_INITIAL)

    def process_block(self, block: bytes) -> None:
        """Run the schedule and compression for one 64-byte block."""
        build_message_schedule(block, out=self._schedule)
        self._state = compress(self._state, self._schedule)

    def digest(self) -> bytes:
        """Serialize the current state big-endian into 32 bytes."""
        return b''.join(word.to_bytes(WORD_SIZE, byteorder='big') for word in self._state)

    def hash(self, message: bytes) -> bytes:
        """
        Compute the SHA-256 digest of a complete message.

        Args:
            message: Input bytes to hash

        Returns:
            256-bit (32-byte) digest as bytes
        """
        self.reset()

        # Blocks must be folded in order; each depends on the previous state
        for block in iter_blocks(pad_message(message)):
            self.process_block(block)

        return self.digest()


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return SHA256().hash(data)


def to_hex_string(digest: bytes) -> str:
    """Render a digest as lowercase hex, two characters per byte."""
    return ''.join(f'{byte:02x}' for byte in digest)


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character hexadecimal string
    """
    return to_hex_string(sha256(data))


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))


# Self-test when run directly
if __name__ == "__main__":
    # Test vectors from NIST
    test_cases = [
        (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
         "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
        (b"The quick brown fox jumps over the lazy dog",
         "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
    ]

    print("SHA-256 Implementation Test")
    print("=" * 60)

    all_passed = True
    for data, expected in test_cases:
        result = sha256_hex(data)
        passed = result == expected
        all_passed = all_passed and passed

        status = "PASS" if passed else "FAIL"
        print(f"\nInput: {data[:50]}{'...' if len(data) > 50 else ''}")
        print(f"Expected: {expected}")
        print(f"Got:      {result}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
