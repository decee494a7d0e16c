# Bridge Module
"""
Boundary layer between host applications and the SHA-256 engine.

Accepts any object exposing the buffer protocol, reports unusable buffers
as BridgeError subclasses, and cross-checks the engine against an
independent reference implementation.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    if name in ('BridgeError', 'InvalidBufferError', 'InaccessibleBufferError'):
        from . import errors
        return getattr(errors, name)
    from . import native_bridge
    return getattr(native_bridge, name)

__all__ = [
    'BridgeError',
    'InvalidBufferError',
    'InaccessibleBufferError',
    'ComparisonResult',
    'ReferenceBackend',
    'hash_buffer',
    'compare_implementations',
    'self_test',
    'KNOWN_ANSWERS',
]
