# sealbox

Serialize Python values to CBOR and seal them with authenticated shared-key
encryption: XChaCha20 with a Poly1305 MAC and a 24-byte nonce.

Two mixin classes in `sealbox.traits` provide this:

- `SerdeEncryptSharedKey` uses a fresh random nonce for every message, so the
  same value encrypts to a different cipher-text each time.
- `SerdeEncryptSharedKeyDeterministic` uses a fixed nonce (24 bytes of `0xff`),
  so the same value always encrypts to the same cipher-text. This allows
  equality matching on cipher-text, for example in an encrypted index, but it
  reveals repeated messages. Use it only when you need that property.

## Installation

```
pip install sealbox
```

## Usage

Mix a trait class into a dataclass:

```python
from dataclasses import dataclass

from sealbox.message import EncryptedMessage
from sealbox.shared_key import SharedKey
from sealbox.traits import SerdeEncryptSharedKey


@dataclass
class Message(SerdeEncryptSharedKey):
    content: str
    sender: str


shared_key = SharedKey.generate()

# Sender
wire = Message("I love you.", "Alice").encrypt(shared_key).serialize()

# Receiver
received = Message.decrypt_owned(EncryptedMessage.deserialize(wire), shared_key)
assert received == Message("I love you.", "Alice")
```

`decrypt_ref` only decrypts and returns a `CborSerializer` holding the
plain-text bytes; call its `deserialize()` later to build the value.

The serializer is chosen by the class attribute `serializer`, which defaults to
`sealbox.serializers.CborSerializer`. Any subclass of
`sealbox.serializers.TypedSerialized` can be set there.

### What can be serialized

`CborSerializer` handles `None`, `bool`, `int`, `float`, `str`, `bytes`,
enums (by value), lists, tuples, sets, dicts and dataclasses (as maps of field
name to value). When deserializing, the target type is followed through
dataclass field annotations, including `list[...]`, `tuple[...]`, `dict[...]`,
`set[...]`, `Optional[...]` / `X | None` and other unions. Field annotations
must be real types, not strings, so do not use
`from __future__ import annotations` in the module defining the dataclass.

Dataclass fields may carry metadata:

- `field(metadata={"skip_serializing": True})` leaves the field out of the
  encoded data; on the receiving side it takes its default.
- `field(metadata={"skip_serializing_if": predicate})` leaves the field out
  when `predicate(value)` is true.

A field that is left out and has no default makes deserialization fail with a
`DESERIALIZATION_ERROR`. Unknown fields in the data are also rejected.

### Keys

```python
shared_key = SharedKey(bytes(32))   # from 32 bytes you already share
raw = bytes(shared_key)
```

`SharedKey.generate()` draws 32 bytes from the operating system's secure
random generator (`sealbox.random.random_bytes`). A key of any other length
raises `ValueError`.

### Raw bytes

`sealbox.cipher.PlainMessageSharedKey` and
`sealbox.cipher.PlainMessageSharedKeyDeterministic` encrypt and decrypt plain
bytes directly, without a serializer:

```python
from sealbox.cipher import PlainMessageSharedKey

sealed = PlainMessageSharedKey(b"abc").encrypt(shared_key)
assert bytes(PlainMessageSharedKey.decrypt(sealed, shared_key)) == b"abc"
```

## Wire format

`EncryptedMessage.serialize()` produces the 24-byte nonce followed by the
cipher-text, which ends with the 16-byte authentication tag.
`EncryptedMessage.deserialize()` splits such bytes again, and `len(message)`
gives the total payload size in bytes.

## Errors

Every failure raises `sealbox.errors.Error`, whose `kind` is one of the
`ErrorKind` members `SERIALIZATION_ERROR`, `DESERIALIZATION_ERROR`,
`ENCRYPTION_ERROR` or `DECRYPTION_ERROR`, and whose `reason` describes the
cause. Decrypting with the wrong key, tampered cipher-text, or data too short
to hold a nonce raises a decryption error.

## What it does not do

sealbox covers shared-key encryption only. It has no public-key encryption or
key exchange: the 32-byte key must reach both parties by some other secure
means. It has no command-line tool and does not store or transport messages;
it only produces and consumes bytes.

## Running the tests

```
pip install -e ".[test]"
pytest
```