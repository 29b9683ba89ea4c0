"""32-byte key shared secretly between sender and receiver."""

from __future__ import annotations

from dataclasses import dataclass

from sealbox.random import random_bytes

KEY_SIZE = 32


@dataclass(frozen=True)
class SharedKey:
    """Symmetric XChaCha20-Poly1305 key of exactly 32 bytes."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != KEY_SIZE:
            raise ValueError(f"shared key must be {KEY_SIZE} bytes, got {len(self.data)}")

    @classmethod
    def generate(cls) -> SharedKey:
        """Create a key from the secure random generator."""
        return cls(random_bytes(KEY_SIZE))

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return "SharedKey(<32 bytes>)"