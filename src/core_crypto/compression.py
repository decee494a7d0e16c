"""
SHA-256 Compression Function

Runs 64 rounds over the working registers (a, b, c, d, e, f, g, h), seeded
from the current hash state, then adds the result back into that state.

Each round:

    T1 = h + Σ1(e) + Ch(e, f, g) + K[t] + W[t]
    T2 = Σ0(a) + Maj(a, b, c)
    h, g, f, e, d, c, b, a = g, f, e, d + T1, c, b, a, T1 + T2

All additions are performed modulo 2**32.
"""

from typing import List, Sequence, Tuple

from .constants import K, MASK_32, ROUNDS, SCHEDULE_WORDS, STATE_WORDS
from .schedule import right_rotate


Registers = Tuple[int, int, int, int, int, int, int, int]


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ (~x & z & MASK_32)


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: applied to register a."""
    return right_rotate(x, 2) ^ right_rotate(x, 13) ^ right_rotate(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: applied to register e."""
    return right_rotate(x, 6) ^ right_rotate(x, 11) ^ right_rotate(x, 25)


def compression_round(registers: Sequence[int], k: int, w: int) -> Registers:
    """
    Perform one SHA-256 compression round.
    
    Args:
        registers: Working registers (a, b, c, d, e, f, g, h)
        k: Round constant K[t]
        w: Message schedule word W[t]
        
    Returns:
        Registers after the round
    """
    a, b, c, d, e, f, g, h = registers
    
    t1 = (h + big_sigma1(e) + ch(e, f, g) + k + w) & MASK_32
    t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32
    
    return (
        (t1 + t2) & MASK_32,
        a,
        b,
        c,
        (d + t1) & MASK_32,
        e,
        f,
        g,
    )


def compress(state: Sequence[int], w: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression on the state.
    
    Args:
        state: Current hash state (8 32-bit words)
        w: Message schedule (64 32-bit words)
        
    Returns:
        Updated hash state
    """
    if len(state) != STATE_WORDS:
        raise ValueError(f"Hash state must have {STATE_WORDS} words, got {len(state)}")
    if len(w) != SCHEDULE_WORDS:
        raise ValueError(f"Message schedule must have {SCHEDULE_WORDS} words, got {len(w)}")
    
    # Initialize working variables
    a, b, c, d, e, f, g, h = state
    
    # Inlined round; compression_round() is the same step for single-round use
    for t in range(ROUNDS):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[t] + w[t]) & MASK_32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32
        
        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32
    
    # Add compressed chunk to current hash value
    return [
        (word + register) & MASK_32
        for word, register in zip(state, (a, b, c, d, e, f, g, h))
    ]
