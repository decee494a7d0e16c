#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                        SHA-256 ENGINE LIVE DEMO                               ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through one SHA-256 computation stage by stage:
- Message padding
- Message schedule expansion
- The 64 compression rounds
- Final digest and cross-check against the cryptography library

Run with --no-pause to print everything without waiting for ENTER.
"""

import sys

from src.core_crypto.constants import BLOCK_SIZE, H_INITIAL, K
from src.core_crypto.padding import pad_message, iter_blocks
from src.core_crypto.schedule import build_message_schedule
from src.core_crypto.compression import compression_round
from src.core_crypto.sha256 import SHA256, to_hex_string
from src.bridge.native_bridge import compare_implementations
from src.main import DEMO_MESSAGE


INTERACTIVE = True


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if not INTERACTIVE:
        return
    print(f"\n  [PAUSE] {message}")
    input()


def format_words(words, per_line=4):
    """Format 32-bit words as indented hex rows"""
    rows = []
    for i in range(0, len(words), per_line):
        rows.append("  " + " ".join(f"{w:08x}" for w in words[i:i + per_line]))
    return "\n".join(rows)


def main(message=DEMO_MESSAGE):
    data = message.encode("utf-8")

    print_header("PART 1: PADDING")

    print_step("1.1", f"Message: '{message}' ({len(data)} bytes)")
    padded = pad_message(data)
    print(f"  Padded length: {len(padded)} bytes ({len(padded) // BLOCK_SIZE} block(s))")
    for index, block in enumerate(iter_blocks(padded)):
        print(f"\n  Block {index}:")
        for i in range(0, BLOCK_SIZE, 16):
            print("  " + block[i:i + 16].hex(" "))

    pause()

    print_header("PART 2: MESSAGE SCHEDULE")

    first_block = padded[:BLOCK_SIZE]
    w = build_message_schedule(first_block)
    print_step("2.1", "W[0..15] (message words)")
    print(format_words(w[:16]))
    print_step("2.2", "W[16..63] (expanded with σ0/σ1)")
    print(format_words(w[16:]))

    pause()

    print_header("PART 3: COMPRESSION ROUNDS")

    print_step("3.1", "Initial hash values")
    print(format_words(H_INITIAL))

    registers = tuple(H_INITIAL)
    for t in range(len(K)):
        registers = compression_round(registers, K[t], w[t])
        if t in (0, 1, 2, 31, 62, 63):
            print(f"  t={t:2d}: " + " ".join(f"{r:08x}" for r in registers))

    pause()

    print_header("PART 4: DIGEST")

    session = SHA256()
    digest = session.hash(data)
    print_step("4.1", "Final hash state")
    print(format_words(session.state))
    print_step("4.2", "Digest")
    print(f"  {to_hex_string(digest)}")

    result = compare_implementations(message)
    print_step("4.3", "Cross-check against the cryptography library")
    print(f"  Reference: {result.reference_hex}")
    print(f"  [{'OK' if result.match else 'X'}] Hash match: {result.match}")

    return 0 if result.match else 1


if __name__ == "__main__":
    if "--no-pause" in sys.argv[1:]:
        INTERACTIVE = False
    args = [arg for arg in sys.argv[1:] if arg != "--no-pause"]
    sys.exit(main(*args[:1]))
