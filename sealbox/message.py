"""Wire format of an encrypted message: nonce followed by cipher-text."""

from __future__ import annotations

from dataclasses import dataclass

from sealbox.errors import Error, ErrorKind
from sealbox.random import NONCE_SIZE


@dataclass(frozen=True)
class EncryptedMessage:
    """Cipher-text together with the 24-byte nonce it was produced with."""

    encrypted: bytes
    nonce: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "encrypted", bytes(self.encrypted))
        object.__setattr__(self, "nonce", bytes(self.nonce))
        if len(self.nonce) != NONCE_SIZE:
            raise ValueError(
                f"nonce must be {NONCE_SIZE} bytes, got {len(self.nonce)}"
            )

    def serialize(self) -> bytes:
        """Encode as ``nonce || encrypted`` for sending to a receiver."""
        return self.nonce + self.encrypted

    @classmethod
    def deserialize(cls, data: bytes) -> EncryptedMessage:
        """Decode bytes produced by :meth:`serialize`.

        Raises :class:`Error` of kind DECRYPTION_ERROR when the data is
        too short to hold a nonce.
        """
        data = bytes(data)
        if len(data) < NONCE_SIZE:
            raise Error(
                ErrorKind.DECRYPTION_ERROR,
                "binary data to decrypt (and then deserialize) does not seem to have nonce data",
            )
        return cls(encrypted=data[NONCE_SIZE:], nonce=data[:NONCE_SIZE])

    def __len__(self) -> int:
        return len(self.encrypted) + len(self.nonce)