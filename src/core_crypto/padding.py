"""
SHA-256 Message Padding

Padding rules (FIPS 180-4, section 5.1.1):
1. Append bit '1' to the message (0x80 byte)
2. Append zeros until message length ≡ 448 (mod 512)
3. Append original message length as 64-bit big-endian integer

The padded message is always a positive multiple of 64 bytes and at least
9 bytes longer than the original.
"""

from typing import Iterator

from .constants import BLOCK_SIZE, LENGTH_FIELD_SIZE, MASK_64, PADDING_TARGET


def encode_bit_length(byte_length: int) -> bytes:
    """
    Encode the message length field.
    
    Only the low 64 bits of the bit length are kept, so lengths of 2**61
    bytes or more wrap around instead of failing.
    
    Args:
        byte_length: Length of the original message in bytes
        
    Returns:
        8-byte big-endian bit length
    """
    bit_length = (byte_length * 8) & MASK_64
    return bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big')


def pad_message(data: bytes) -> bytes:
    """
    Pad the message according to FIPS 180-4.
    
    Args:
        data: The original message bytes
        
    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)
    """
    padded = bytearray(data)
    
    # Append the bit '1' (0x80 = 10000000 in binary)
    padded.append(0x80)
    
    # Append zeros until length ≡ 448 mod 512 (56 mod 64 in bytes)
    while len(padded) % BLOCK_SIZE != PADDING_TARGET:
        padded.append(0x00)
    
    padded += encode_bit_length(len(data))
    
    return bytes(padded)


def iter_blocks(padded: bytes) -> Iterator[bytes]:
    """Yield successive 64-byte blocks of an already padded message."""
    if len(padded) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Padded message length must be a multiple of {BLOCK_SIZE} bytes, "
            f"got {len(padded)}"
        )
    
    for i in range(0, len(padded), BLOCK_SIZE):
        yield padded[i:i + BLOCK_SIZE]
