"""Error type raised by every fallible operation in the package."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Machine-readable category of an :class:`Error`."""

    SERIALIZATION_ERROR = "SerializationError: Failed to serialize data to send"
    DESERIALIZATION_ERROR = "DeserializationError: Failed to deserialize data received"
    ENCRYPTION_ERROR = "EncryptionError: Failed to encrypt serialized data to send"
    DECRYPTION_ERROR = "DecryptionError: Failed to decrypt data received"

    def __str__(self) -> str:
        return self.value


class Error(Exception):
    """Failure during serialization, deserialization, encryption or decryption."""

    def __init__(self, kind: ErrorKind, reason: str) -> None:
        super().__init__(kind, reason)
        self.kind = kind
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.kind}: {self.reason}"

    def __repr__(self) -> str:
        return f"Error(kind={self.kind.name}, reason={self.reason!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self.kind, self.reason) == (other.kind, other.reason)

    def __hash__(self) -> int:
        return hash((self.kind, self.reason))