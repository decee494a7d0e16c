"""
SHA-256 Message Schedule

Expands one 64-byte block into the 64-word schedule W[0..63]:
- W[0..15]: the block's 16 big-endian words
- W[16..63]: σ1(W[t-2]) + W[t-7] + σ0(W[t-15]) + W[t-16]  (mod 2**32)
"""

from typing import List, Optional

from .constants import BLOCK_SIZE, MASK_32, SCHEDULE_WORDS, WORD_SIZE


def right_rotate(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def small_sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return right_rotate(x, 7) ^ right_rotate(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return right_rotate(x, 17) ^ right_rotate(x, 19) ^ (x >> 10)


def bytes_to_words(block: bytes) -> List[int]:
    """Convert a 64-byte block into 16 32-bit words (big-endian)."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE}-byte block, got {len(block)}")
    
    return [
        int.from_bytes(block[i:i + WORD_SIZE], byteorder='big')
        for i in range(0, BLOCK_SIZE, WORD_SIZE)
    ]


def build_message_schedule(block: bytes, out: Optional[List[int]] = None) -> List[int]:
    """
    Build the 64-word message schedule for one block.
    
    Args:
        block: One 64-byte block of the padded message
        out: Optional 64-slot list to overwrite in place; a new list is
            allocated when omitted
            
    Returns:
        The schedule W[0..63] (``out`` itself when it was supplied)
    """
    w = out if out is not None else [0] * SCHEDULE_WORDS
    if len(w) != SCHEDULE_WORDS:
        raise ValueError(f"Schedule buffer must hold {SCHEDULE_WORDS} words, got {len(w)}")
    
    w[:16] = bytes_to_words(block)
    
    for t in range(16, SCHEDULE_WORDS):
        w[t] = (small_sigma1(w[t - 2]) + w[t - 7] + small_sigma0(w[t - 15]) + w[t - 16]) & MASK_32
    
    return w
