"""Shared-key XChaCha20-Poly1305 encryption of raw plain-text bytes."""

from __future__ import annotations

from dataclasses import dataclass

from Crypto.Cipher import ChaCha20_Poly1305

from sealbox.errors import Error, ErrorKind
from sealbox.message import EncryptedMessage
from sealbox.random import NONCE_SIZE
from sealbox.random import generate_nonce as _random_nonce
from sealbox.shared_key import SharedKey

TAG_SIZE = 16
"""Size in bytes of the Poly1305 authentication tag appended to cipher-text."""

FIXED_NONCE = b"\xff" * NONCE_SIZE
"""Nonce used by deterministic encryption."""


def _encrypt(plain: bytes, shared_key: SharedKey, nonce: bytes) -> EncryptedMessage:
    try:
        cipher = ChaCha20_Poly1305.new(key=bytes(shared_key), nonce=nonce)
        encrypted, tag = cipher.encrypt_and_digest(plain)
    except (ValueError, TypeError) as exc:
        raise Error(
            ErrorKind.ENCRYPTION_ERROR,
            f"failed to encrypt serialized data by XChaCha20: {exc!r}",
        ) from exc
    return EncryptedMessage(encrypted=encrypted + tag, nonce=nonce)


def _decrypt(encrypted_message: EncryptedMessage, shared_key: SharedKey) -> bytes:
    payload = encrypted_message.encrypted
    if len(payload) < TAG_SIZE:
        raise Error(
            ErrorKind.DECRYPTION_ERROR,
            "error on decryption of XChaCha20 cipher-text: missing authentication tag",
        )
    try:
        cipher = ChaCha20_Poly1305.new(key=bytes(shared_key), nonce=encrypted_message.nonce)
        return cipher.decrypt_and_verify(payload[:-TAG_SIZE], payload[-TAG_SIZE:])
    except (ValueError, TypeError) as exc:
        raise Error(
            ErrorKind.DECRYPTION_ERROR,
            f"error on decryption of XChaCha20 cipher-text: {exc!r}",
        ) from exc


@dataclass(frozen=True)
class _PlainMessage:
    plain: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "plain", bytes(self.plain))

    def __bytes__(self) -> bytes:
        return self.plain


class PlainMessageSharedKey(_PlainMessage):
    """Plain-text encrypted with a fresh random nonce each time."""

    def encrypt(self, shared_key: SharedKey) -> EncryptedMessage:
        """Encrypt into an :class:`EncryptedMessage`.

        Raises :class:`Error` of kind ENCRYPTION_ERROR on failure.
        """
        return _encrypt(self.plain, shared_key, self.generate_nonce())

    @classmethod
    def decrypt(
        cls, encrypted_message: EncryptedMessage, shared_key: SharedKey
    ) -> PlainMessageSharedKey:
        """Decrypt and authenticate; raises :class:`Error` of kind DECRYPTION_ERROR."""
        return cls(_decrypt(encrypted_message, shared_key))

    @classmethod
    def generate_nonce(cls) -> bytes:
        """Return a random 24-byte nonce, large enough to rarely collide."""
        return _random_nonce()


class PlainMessageSharedKeyDeterministic(_PlainMessage):
    """Plain-text encrypted with a fixed nonce, so equal inputs give equal cipher-text."""

    def encrypt(self, shared_key: SharedKey) -> EncryptedMessage:
        """Encrypt into an :class:`EncryptedMessage` using the fixed nonce.

        Raises :class:`Error` of kind ENCRYPTION_ERROR on failure.
        """
        return _encrypt(self.plain, shared_key, self.generate_nonce())

    @classmethod
    def decrypt(
        cls, encrypted_message: EncryptedMessage, shared_key: SharedKey
    ) -> PlainMessageSharedKeyDeterministic:
        """Decrypt and authenticate; raises :class:`Error` of kind DECRYPTION_ERROR."""
        return cls(_decrypt(encrypted_message, shared_key))

    @classmethod
    def generate_nonce(cls) -> bytes:
        """Return the fixed nonce that makes cipher-text comparable for equality."""
        return FIXED_NONCE