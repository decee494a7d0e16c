"""
Native Bridge Module

Entry point for host applications that want SHA-256 digests from the
from-scratch engine.

Features:
- Accepts any object exposing the buffer protocol (bytes, bytearray,
  memoryview, array.array, mmap, ...)
- Boundary failures reported as BridgeError subclasses
- Cross-check of the engine against the `cryptography` library's SHA-256
- Known-answer self test (FIPS 180-4 sample messages)

The engine itself never rejects input; everything that can fail here is
about the host object, not the message.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from cryptography.hazmat.primitives import hashes

from ..core_crypto.constants import DIGEST_SIZE
from ..core_crypto.sha256 import SHA256, to_hex_string
from .errors import InvalidBufferError, InaccessibleBufferError


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_ENCODING = 'utf-8'

# Published FIPS 180-4 sample digests
KNOWN_ANSWERS: Tuple[Tuple[bytes, str], ...] = (
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
)


# ============================================================================
# Buffer Handling
# ============================================================================

def _read_buffer(data: Any) -> bytes:
    """Copy a host buffer into an immutable bytes object."""
    try:
        view = memoryview(data)
    except TypeError as exc:
        raise InvalidBufferError(
            f"Expected a bytes-like object, got {type(data).__name__}"
        ) from exc
    except ValueError as exc:
        raise InaccessibleBufferError(f"Buffer cannot be read: {exc}") from exc

    try:
        with view:
            return view.tobytes()
    except ValueError as exc:
        raise InaccessibleBufferError(f"Buffer cannot be read: {exc}") from exc


def hash_buffer(data: Any) -> bytes:
    """
    Hash a host-supplied buffer.

    Args:
        data: Any object exposing the buffer protocol. Text must be encoded
            by the caller first.

    Returns:
        32-byte SHA-256 digest

    Raises:
        InvalidBufferError: If ``data`` is not bytes-like
        InaccessibleBufferError: If the buffer has been released
    """
    message = _read_buffer(data)
    digest = SHA256().hash(message)
    logger.debug("SHA-256: %s... (%d bytes)", to_hex_string(digest)[:16], len(message))
    return digest


# ============================================================================
# Reference Comparison
# ============================================================================

class ReferenceBackend:
    """
    Independent SHA-256 provided by the `cryptography` library.

    Used only to cross-check the from-scratch engine.
    """

    name = "cryptography"

    def hash(self, data: bytes) -> bytes:
        """Return the reference SHA-256 digest of ``data``."""
        digest = hashes.Hash(hashes.SHA256())
        digest.update(data)
        return digest.finalize()


@dataclass(frozen=True)
class ComparisonResult:
    """Digests of one message from the engine and the reference backend."""
    message: bytes
    engine_digest: bytes
    reference_digest: bytes

    @property
    def match(self) -> bool:
        return self.engine_digest == self.reference_digest

    @property
    def engine_hex(self) -> str:
        return to_hex_string(self.engine_digest)

    @property
    def reference_hex(self) -> str:
        return to_hex_string(self.reference_digest)


def compare_implementations(
    text: str,
    encoding: str = DEFAULT_ENCODING,
    backend: Optional[ReferenceBackend] = None
) -> ComparisonResult:
    """
    Hash ``text`` with the engine and the reference backend.

    Args:
        text: Message to hash
        encoding: Text encoding (default: utf-8)
        backend: Reference backend (default: ReferenceBackend())

    Returns:
        ComparisonResult with both digests
    """
    backend = backend or ReferenceBackend()
    data = text.encode(encoding)

    result = ComparisonResult(
        message=data,
        engine_digest=hash_buffer(data),
        reference_digest=backend.hash(data),
    )

    logger.info("Engine hash:    %s", result.engine_hex)
    logger.info("Reference hash: %s (%s)", result.reference_hex, backend.name)
    if result.match:
        logger.info("Hash match: True")
    else:
        logger.warning("Hash mismatch for %d-byte message", len(data))

    return result


def self_test(backend: Optional[ReferenceBackend] = None) -> bool:
    """
    Run the known-answer vectors through the engine.

    Each vector must match both its published digest and the reference
    backend's digest, so a mistyped expected value is caught as well.

    Returns:
        True if every vector passes
    """
    backend = backend or ReferenceBackend()
    passed = True

    for message, expected in KNOWN_ANSWERS:
        digest = hash_buffer(message)
        reference = backend.hash(message)

        ok = (
            len(digest) == DIGEST_SIZE
            and to_hex_string(digest) == expected
            and digest == reference
        )
        if not ok:
            logger.warning(
                "Self test failed for %r: got %s, expected %s, reference %s",
                message[:16], to_hex_string(digest), expected, to_hex_string(reference)
            )
        passed = passed and ok

    logger.info("Self test %s", "passed" if passed else "failed")
    return passed
