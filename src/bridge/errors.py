"""
Boundary-layer exceptions.

The hashing engine accepts every byte sequence, so these describe only
problems with what a host hands to the boundary.
"""


class BridgeError(Exception):
    """Raised when the boundary cannot turn a host object into bytes."""
    pass


class InvalidBufferError(BridgeError, TypeError):
    """Raised when the object does not expose the buffer protocol."""
    pass


class InaccessibleBufferError(BridgeError, ValueError):
    """Raised when the buffer exists but can no longer be read."""
    pass
