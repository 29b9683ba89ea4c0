"""Cryptographically secure random data."""

from __future__ import annotations

import secrets

NONCE_SIZE = 24
"""Size in bytes of an XChaCha20 nonce (192 bits)."""


def random_bytes(size: int) -> bytes:
    """Return ``size`` bytes from the operating system's secure generator."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return secrets.token_bytes(size)


def generate_nonce() -> bytes:
    """Return a fresh random 24-byte nonce, large enough to rarely collide."""
    return random_bytes(NONCE_SIZE)