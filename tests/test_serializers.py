from dataclasses import dataclass

import pytest

from sealbox.errors import Error, ErrorKind
from sealbox.serializers import CborSerializer


@dataclass
class Message:
    value: int


@dataclass
class Pair:
    left: str
    right: list[int]


def test_cbor_serializer():
    msg = Message(42)
    serialized = CborSerializer.serialize(msg)
    assert serialized.deserialize() == msg


def test_integer_encoding_is_cbor():
    assert bytes(CborSerializer.serialize(42)) == b"\x18\x2a"


def test_nested_round_trip():
    pair = Pair("a", [1, 2, 3])
    assert CborSerializer.serialize(pair).deserialize() == pair


def test_target_taken_from_value_type():
    assert CborSerializer.serialize(Message(1)).target is Message


def test_unsupported_value_raises_serialization_error():
    with pytest.raises(Error) as excinfo:
        CborSerializer.serialize(object())
    assert excinfo.value.kind == ErrorKind.SERIALIZATION_ERROR


def test_truncated_data_raises_deserialization_error():
    with pytest.raises(Error) as excinfo:
        CborSerializer(b"\x18", int).deserialize()
    assert excinfo.value.kind == ErrorKind.DESERIALIZATION_ERROR


def test_type_mismatch_raises_deserialization_error():
    encoded = bytes(CborSerializer.serialize("text"))
    with pytest.raises(Error) as excinfo:
        CborSerializer(encoded, int).deserialize()
    assert excinfo.value.kind == ErrorKind.DESERIALIZATION_ERROR


def test_missing_field_raises_deserialization_error():
    encoded = bytes(CborSerializer.serialize({}))
    with pytest.raises(Error) as excinfo:
        CborSerializer(encoded, Message).deserialize()
    assert excinfo.value.kind == ErrorKind.DESERIALIZATION_ERROR