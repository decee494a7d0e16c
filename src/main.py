"""
SHA-256 Engine - Main Entry Point
Hashes a sample string and prints the digest as hex.
"""

import argparse
import logging
from typing import List, Optional

from .bridge.native_bridge import DEFAULT_ENCODING, compare_implementations, hash_buffer
from .core_crypto.sha256 import to_hex_string


DEMO_MESSAGE = "Hello, World!"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the SHA-256 demo."""
    parser = argparse.ArgumentParser(description="Compute the SHA-256 digest of a string.")
    parser.add_argument("message", nargs="?", default=DEMO_MESSAGE,
                        help=f"text to hash (default: {DEMO_MESSAGE!r})")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING)
    parser.add_argument("--compare", action="store_true",
                        help="cross-check against the cryptography library")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    digest = hash_buffer(args.message.encode(args.encoding))
    print(f"SHA-256 hash of '{args.message}': {to_hex_string(digest)}")

    if args.compare:
        result = compare_implementations(args.message, encoding=args.encoding)
        print(f"Engine hash:    {result.engine_hex}")
        print(f"Reference hash: {result.reference_hex}")
        print(f"Hash match: {result.match}")
        if not result.match:
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
