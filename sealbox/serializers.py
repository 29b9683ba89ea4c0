"""Serializers that turn Python values into bytes and back into a target type."""

from __future__ import annotations

import abc
import dataclasses
import enum
import types
import typing
from typing import Any, ClassVar, Union

import cbor2

from sealbox.errors import Error, ErrorKind


class _Mismatch(ValueError):
    """Decoded data does not fit the requested target type."""


class _Unsupported(TypeError):
    """A value has no serializable representation."""


def _to_data(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return _to_data(value.value)
    if value is None or isinstance(value, (bool, int, float, str, bytes)):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        data = {}
        for field in dataclasses.fields(value):
            item = getattr(value, field.name)
            if field.metadata.get("skip_serializing", False):
                continue
            predicate = field.metadata.get("skip_serializing_if")
            if predicate is not None and predicate(item):
                continue
            data[field.name] = _to_data(item)
        return data
    if isinstance(value, dict):
        return {_to_data(k): _to_data(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_data(item) for item in value]
    raise _Unsupported(f"unsupported type {type(value).__name__}")


def _field_type(field: dataclasses.Field, target: type) -> Any:
    if isinstance(field.type, str):
        raise _Mismatch(
            f"field {field.name!r} of {target.__name__} has a string annotation"
            f" {field.type!r}; a resolved type is required"
        )
    return field.type


def _dataclass_from_data(data: Any, target: type) -> Any:
    if not isinstance(data, dict):
        raise _Mismatch(f"expected map for {target.__name__}, got {type(data).__name__}")
    fields = {field.name: field for field in dataclasses.fields(target)}
    unknown = set(data) - set(fields)
    if unknown:
        raise _Mismatch(f"unknown fields for {target.__name__}: {sorted(map(str, unknown))}")
    kwargs = {}
    for name, field in fields.items():
        if not field.init:
            continue
        if name in data:
            kwargs[name] = _from_data(data[name], _field_type(field, target))
        elif (
            field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        ):
            raise _Mismatch(f"missing field {name!r} for {target.__name__}")
    try:
        return target(**kwargs)
    except (TypeError, ValueError) as exc:
        raise _Mismatch(f"cannot build {target.__name__}: {exc}") from exc


def _from_data(data: Any, target: Any) -> Any:
    if target is Any or target is object:
        return data
    if target is None or target is type(None):
        if data is None:
            return None
        raise _Mismatch(f"expected null, got {type(data).__name__}")

    origin = typing.get_origin(target)
    args = typing.get_args(target)
    if origin is Union or origin is types.UnionType:
        for option in args:
            try:
                return _from_data(data, option)
            except _Mismatch:
                continue
        raise _Mismatch(f"no variant of {target} matches the data")
    if origin in (list, set, frozenset):
        if not isinstance(data, (list, tuple)):
            raise _Mismatch(f"expected array, got {type(data).__name__}")
        item_type = args[0] if args else Any
        return origin(_from_data(item, item_type) for item in data)
    if origin is tuple:
        if not isinstance(data, (list, tuple)):
            raise _Mismatch(f"expected array, got {type(data).__name__}")
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_from_data(item, args[0]) for item in data)
        if args and len(args) != len(data):
            raise _Mismatch(f"expected {len(args)} items, got {len(data)}")
        return tuple(_from_data(item, tp) for item, tp in zip(data, args or [Any] * len(data)))
    if origin is dict:
        if not isinstance(data, dict):
            raise _Mismatch(f"expected map, got {type(data).__name__}")
        key_type, value_type = args if args else (Any, Any)
        return {_from_data(k, key_type): _from_data(v, value_type) for k, v in data.items()}
    if origin is not None:
        raise _Mismatch(f"unsupported target type {target}")

    if not isinstance(target, type):
        raise _Mismatch(f"unsupported target type {target!r}")
    if dataclasses.is_dataclass(target):
        return _dataclass_from_data(data, target)
    if issubclass(target, enum.Enum):
        try:
            return target(data)
        except ValueError as exc:
            raise _Mismatch(str(exc)) from exc
    if target is bool:
        if isinstance(data, bool):
            return data
    elif target is int:
        if isinstance(data, int) and not isinstance(data, bool):
            return data
    elif target is float:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return float(data)
    elif target in (str, bytes):
        if isinstance(data, target):
            return data
    elif target in (list, tuple, set, frozenset):
        if isinstance(data, (list, tuple)):
            return target(data)
    elif target is dict:
        if isinstance(data, dict):
            return dict(data)
    else:
        raise _Mismatch(f"unsupported target type {target.__name__}")
    raise _Mismatch(f"expected {target.__name__}, got {type(data).__name__}")


class TypedSerialized(abc.ABC):
    """Serialized bytes that know which type they deserialize into."""

    format_name: ClassVar[str] = "serializer"
    failures: ClassVar[tuple[type[BaseException], ...]] = (ValueError, TypeError)

    def __init__(self, serialized: bytes, target: Any = object) -> None:
        self.serialized = bytes(serialized)
        self.target = target

    def __bytes__(self) -> bytes:
        return self.serialized

    def __repr__(self) -> str:
        name = getattr(self.target, "__name__", repr(self.target))
        return f"{type(self).__name__}(<{len(self.serialized)} bytes> -> {name})"

    @staticmethod
    @abc.abstractmethod
    def _encode(data: Any) -> bytes:
        """Encode plain data (maps, arrays, scalars) into bytes."""

    @staticmethod
    @abc.abstractmethod
    def _decode(serialized: bytes) -> Any:
        """Decode bytes into plain data."""

    @classmethod
    def serialize(cls, value: Any) -> TypedSerialized:
        """Serialize ``value``; raises :class:`Error` of kind SERIALIZATION_ERROR."""
        try:
            encoded = cls._encode(_to_data(value))
        except cls.failures as exc:
            raise Error(
                ErrorKind.SERIALIZATION_ERROR,
                f"failed to serialize data by {cls.format_name}: {exc!r}",
            ) from exc
        return cls(encoded, type(value))

    def deserialize(self) -> Any:
        """Rebuild the target value; raises :class:`Error` of kind DESERIALIZATION_ERROR."""
        try:
            return _from_data(self._decode(self.serialized), self.target)
        except (_Mismatch, *self.failures) as exc:
            raise Error(
                ErrorKind.DESERIALIZATION_ERROR,
                f"error on {self.format_name} deserialization after decryption: {exc!r}",
            ) from exc


class CborSerializer(TypedSerialized):
    """CBOR serializer."""

    format_name = "cbor"
    failures = (cbor2.CBORError, ValueError, TypeError, OverflowError, EOFError)

    @staticmethod
    def _encode(data: Any) -> bytes:
        return cbor2.dumps(data)

    @staticmethod
    def _decode(serialized: bytes) -> Any:
        return cbor2.loads(serialized)

    @classmethod
    def serialize(cls, value: Any) -> CborSerializer:
        """Serialize ``value`` as CBOR; raises :class:`Error` of kind SERIALIZATION_ERROR."""
        return super().serialize(value)

    def deserialize(self) -> Any:
        """Decode CBOR into the target; raises :class:`Error` of kind DESERIALIZATION_ERROR."""
        return super().deserialize()