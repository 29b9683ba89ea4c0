"""Mixins adding shared-key authenticated encryption to serializable classes."""

from __future__ import annotations

from typing import Any, ClassVar

from sealbox.cipher import PlainMessageSharedKey, PlainMessageSharedKeyDeterministic
from sealbox.message import EncryptedMessage
from sealbox.serializers import CborSerializer, TypedSerialized
from sealbox.shared_key import SharedKey


def _encrypt(value: Any, plain_cls: type, shared_key: SharedKey) -> EncryptedMessage:
    serialized = value.serializer.serialize(value)
    return plain_cls(bytes(serialized)).encrypt(shared_key)


def _decrypt_ref(
    cls: type, plain_cls: type, encrypted_message: EncryptedMessage, shared_key: SharedKey
) -> TypedSerialized:
    plain = plain_cls.decrypt(encrypted_message, shared_key)
    return cls.serializer(bytes(plain), cls)


class SerdeEncryptSharedKey:
    """Shared-key encryption (XChaCha20-Poly1305) with a random nonce per message.

    Equal plain-text gives different cipher-text each time.
    """

    serializer: ClassVar[type[TypedSerialized]] = CborSerializer

    def encrypt(self, shared_key: SharedKey) -> EncryptedMessage:
        """Serialize and encrypt.

        Raises :class:`Error` of kind SERIALIZATION_ERROR or ENCRYPTION_ERROR.
        """
        return _encrypt(self, PlainMessageSharedKey, shared_key)

    @classmethod
    def decrypt_owned(cls, encrypted_message: EncryptedMessage, shared_key: SharedKey) -> Any:
        """Decrypt and deserialize into an instance of this class.

        Raises :class:`Error` of kind DECRYPTION_ERROR or DESERIALIZATION_ERROR.
        """
        return cls.decrypt_ref(encrypted_message, shared_key).deserialize()

    @classmethod
    def decrypt_ref(
        cls, encrypted_message: EncryptedMessage, shared_key: SharedKey
    ) -> TypedSerialized:
        """Only decrypt; the returned serialized data is deserialized later.

        Raises :class:`Error` of kind DECRYPTION_ERROR.
        """
        return _decrypt_ref(cls, PlainMessageSharedKey, encrypted_message, shared_key)


class SerdeEncryptSharedKeyDeterministic:
    """Shared-key encryption (XChaCha20-Poly1305) with a fixed nonce.

    Equal plain-text gives equal cipher-text, which allows matching on
    cipher-text at the cost of revealing repeated messages.
    """

    serializer: ClassVar[type[TypedSerialized]] = CborSerializer

    def encrypt(self, shared_key: SharedKey) -> EncryptedMessage:
        """Serialize and encrypt with the fixed nonce.

        Raises :class:`Error` of kind SERIALIZATION_ERROR or ENCRYPTION_ERROR.
        """
        return _encrypt(self, PlainMessageSharedKeyDeterministic, shared_key)

    @classmethod
    def decrypt_owned(cls, encrypted_message: EncryptedMessage, shared_key: SharedKey) -> Any:
        """Decrypt and deserialize into an instance of this class.

        Raises :class:`Error` of kind DECRYPTION_ERROR or DESERIALIZATION_ERROR.
        """
        return cls.decrypt_ref(encrypted_message, shared_key).deserialize()

    @classmethod
    def decrypt_ref(
        cls, encrypted_message: EncryptedMessage, shared_key: SharedKey
    ) -> TypedSerialized:
        """Only decrypt; the returned serialized data is deserialized later.

        Raises :class:`Error` of kind DECRYPTION_ERROR.
        """
        return _decrypt_ref(
            cls, PlainMessageSharedKeyDeterministic, encrypted_message, shared_key
        )