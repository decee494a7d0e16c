# Core Cryptography Module
"""
SHA-256 hashing engine:
- Constants (round constants, initial hash values)
- Padding
- Message schedule
- Compression function
- Orchestration (SHA256 session, sha256, sha256_hex)
"""
