import pytest

from sealbox.cipher import (
    FIXED_NONCE,
    TAG_SIZE,
    PlainMessageSharedKey,
    PlainMessageSharedKeyDeterministic,
)
from sealbox.errors import Error, ErrorKind
from sealbox.message import EncryptedMessage
from sealbox.shared_key import SharedKey


def test_decrypt_with_wrong_shared_key():
    shared_key1 = SharedKey.generate()
    shared_key2 = SharedKey.generate()
    enc_msg = PlainMessageSharedKey(b"abc").encrypt(shared_key1)
    with pytest.raises(Error) as excinfo:
        PlainMessageSharedKey.decrypt(enc_msg, shared_key2)
    assert excinfo.value.kind == ErrorKind.DECRYPTION_ERROR


def test_round_trip():
    key = SharedKey(bytes([42] * 32))
    enc_msg = PlainMessageSharedKey(b"abc").encrypt(key)
    assert PlainMessageSharedKey.decrypt(enc_msg, key) == PlainMessageSharedKey(b"abc")


def test_cipher_text_carries_tag():
    key = SharedKey.generate()
    enc_msg = PlainMessageSharedKey(b"hello").encrypt(key)
    assert len(enc_msg.encrypted) == len(b"hello") + TAG_SIZE
    assert enc_msg.encrypted[:5] != b"hello"


def test_random_nonces_differ():
    key = SharedKey.generate()
    nonces = {PlainMessageSharedKey(b"abc").encrypt(key).nonce for _ in range(50)}
    assert len(nonces) == 50


def test_tampered_message_is_rejected():
    key = SharedKey.generate()
    enc_msg = PlainMessageSharedKey(b"abc").encrypt(key)
    flipped = bytes([enc_msg.encrypted[0] ^ 1]) + enc_msg.encrypted[1:]
    with pytest.raises(Error) as excinfo:
        PlainMessageSharedKey.decrypt(EncryptedMessage(flipped, enc_msg.nonce), key)
    assert excinfo.value.kind == ErrorKind.DECRYPTION_ERROR


def test_too_short_cipher_text_is_rejected():
    key = SharedKey.generate()
    with pytest.raises(Error) as excinfo:
        PlainMessageSharedKey.decrypt(EncryptedMessage(b"short", bytes(24)), key)
    assert excinfo.value.kind == ErrorKind.DECRYPTION_ERROR


def test_deterministic_uses_fixed_nonce():
    assert PlainMessageSharedKeyDeterministic.generate_nonce() == b"\xff" * 24
    assert FIXED_NONCE == b"\xff" * 24


def test_deterministic_same_plain_same_cipher():
    key = SharedKey.generate()
    a = PlainMessageSharedKeyDeterministic(b"same").encrypt(key)
    b = PlainMessageSharedKeyDeterministic(b"same").encrypt(key)
    c = PlainMessageSharedKeyDeterministic(b"same?").encrypt(key)
    assert a == b
    assert a != c


def test_deterministic_round_trip_and_wrong_key():
    key = SharedKey.generate()
    enc_msg = PlainMessageSharedKeyDeterministic(b"xyz").encrypt(key)
    assert bytes(PlainMessageSharedKeyDeterministic.decrypt(enc_msg, key)) == b"xyz"
    with pytest.raises(Error) as excinfo:
        PlainMessageSharedKeyDeterministic.decrypt(enc_msg, SharedKey.generate())
    assert excinfo.value.kind == ErrorKind.DECRYPTION_ERROR