"""Encoding compatible with the bincode 1.x default wire format.

Schemas describe the shape of a value:

* primitive names: ``"u8" "u16" "u32" "u64" "u128" "i8" "i16" "i32" "i64" "i128"
  "bool" "f32" "f64" "str" "bytes" "unit"``
* ``("vec", inner)``: length-prefixed sequence, decoded as a list
* ``("array", inner, n)``: fixed-size sequence without length, decoded as a list
* ``("tuple", s1, s2, ...)``: decoded as a tuple
* ``("option", inner)``: ``None`` or a value
* ``("map", key, value)``: length-prefixed mapping, decoded as a dict
* ``("struct", ((name, schema), ...))``: fields in order, decoded as a dict
* ``("enum", ((name, schema), ...))``: ``(name, payload)`` with a u32 variant index;
  use ``"unit"`` for variants without data

Integers are little endian with fixed width; lengths are u64.
"""

from __future__ import annotations

import struct
from collections.abc import Mapping
from typing import Any

Schema = Any

_INTS: dict[str, tuple[int, bool]] = {
    "u8": (1, False),
    "u16": (2, False),
    "u32": (4, False),
    "u64": (8, False),
    "u128": (16, False),
    "i8": (1, True),
    "i16": (2, True),
    "i32": (4, True),
    "i64": (8, True),
    "i128": (16, True),
}

_FLOATS: dict[str, struct.Struct] = {
    "f32": struct.Struct("<f"),
    "f64": struct.Struct("<d"),
}

_LEN_WIDTH = 8


class BincodeError(ValueError):
    """Raised when a value cannot be encoded or bytes cannot be decoded."""


def serialize(value: Any, schema: Schema) -> bytes:
    """Encode ``value`` according to ``schema``."""
    out = bytearray()
    _encode(value, schema, out)
    return bytes(out)


def deserialize(data: bytes | bytearray | memoryview, schema: Schema) -> Any:
    """Decode one value of ``schema`` from the start of ``data``; trailing bytes are ignored."""
    reader = _Reader(data)
    return reader.decode(schema)


def serialized_size(value: Any, schema: Schema) -> int:
    """Number of bytes ``value`` takes when encoded with ``schema``."""
    return len(serialize(value, schema))


def _split(schema: Schema) -> tuple[str, list[Any]]:
    if not isinstance(schema, tuple) or not schema or not isinstance(schema[0], str):
        raise BincodeError(f"unknown schema: {schema!r}")
    return schema[0], list(schema[1:])


def _encode_int(value: Any, width: int, signed: bool, out: bytearray) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BincodeError(f"expected an integer, got {value!r}")
    try:
        out += value.to_bytes(width, "little", signed=signed)
    except OverflowError as exc:
        raise BincodeError(f"integer {value} does not fit in {width} bytes") from exc


def _encode_len(length: int, out: bytearray) -> None:
    _encode_int(length, _LEN_WIDTH, False, out)


def _encode(value: Any, schema: Schema, out: bytearray) -> None:
    if isinstance(schema, str):
        _encode_primitive(value, schema, out)
        return

    kind, args = _split(schema)
    if kind == "vec" and len(args) == 1:
        items = list(value)
        _encode_len(len(items), out)
        for item in items:
            _encode(item, args[0], out)
    elif kind == "array" and len(args) == 2:
        inner, size = args
        items = list(value)
        if len(items) != size:
            raise BincodeError(f"expected {size} items, got {len(items)}")
        for item in items:
            _encode(item, inner, out)
    elif kind == "tuple":
        items = tuple(value)
        if len(items) != len(args):
            raise BincodeError(f"expected a tuple of {len(args)}, got {len(items)}")
        for item, item_schema in zip(items, args):
            _encode(item, item_schema, out)
    elif kind == "option" and len(args) == 1:
        if value is None:
            out.append(0)
        else:
            out.append(1)
            _encode(value, args[0], out)
    elif kind == "map" and len(args) == 2:
        if not isinstance(value, Mapping):
            raise BincodeError(f"expected a mapping, got {value!r}")
        key_schema, value_schema = args
        _encode_len(len(value), out)
        for key, item in value.items():
            _encode(key, key_schema, out)
            _encode(item, value_schema, out)
    elif kind == "struct" and len(args) == 1:
        if not isinstance(value, Mapping):
            raise BincodeError(f"expected a mapping, got {value!r}")
        for name, field_schema in args[0]:
            if name not in value:
                raise BincodeError(f"missing field {name!r}")
            _encode(value[name], field_schema, out)
    elif kind == "enum" and len(args) == 1:
        variants = list(args[0])
        try:
            name, payload = value
        except (TypeError, ValueError) as exc:
            raise BincodeError(f"expected (variant, payload), got {value!r}") from exc
        for index, (variant_name, variant_schema) in enumerate(variants):
            if variant_name == name:
                _encode_int(index, 4, False, out)
                _encode(payload, variant_schema, out)
                return
        raise BincodeError(f"unknown variant {name!r}")
    else:
        raise BincodeError(f"unknown schema: {schema!r}")


def _encode_primitive(value: Any, schema: str, out: bytearray) -> None:
    if schema in _INTS:
        width, signed = _INTS[schema]
        _encode_int(value, width, signed, out)
    elif schema in _FLOATS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise BincodeError(f"expected a number, got {value!r}")
        try:
            out += _FLOATS[schema].pack(value)
        except (OverflowError, struct.error) as exc:
            raise BincodeError(f"cannot encode {value!r} as {schema}") from exc
    elif schema == "bool":
        if not isinstance(value, bool):
            raise BincodeError(f"expected a bool, got {value!r}")
        out.append(1 if value else 0)
    elif schema == "str":
        if not isinstance(value, str):
            raise BincodeError(f"expected a string, got {value!r}")
        encoded = value.encode("utf-8")
        _encode_len(len(encoded), out)
        out += encoded
    elif schema == "bytes":
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise BincodeError(f"expected bytes, got {value!r}")
        raw = bytes(value)
        _encode_len(len(raw), out)
        out += raw
    elif schema == "unit":
        if value is not None:
            raise BincodeError(f"expected None, got {value!r}")
    else:
        raise BincodeError(f"unknown schema: {schema!r}")


class _Reader:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise BincodeError("unexpected end of input")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _int(self, width: int, signed: bool) -> int:
        return int.from_bytes(self._take(width), "little", signed=signed)

    def _len(self) -> int:
        return self._int(_LEN_WIDTH, False)

    def _tag(self) -> int:
        return self._take(1)[0]

    def decode(self, schema: Schema) -> Any:
        if isinstance(schema, str):
            return self._primitive(schema)

        kind, args = _split(schema)
        if kind == "vec" and len(args) == 1:
            return [self.decode(args[0]) for _ in range(self._len())]
        if kind == "array" and len(args) == 2:
            inner, size = args
            return [self.decode(inner) for _ in range(size)]
        if kind == "tuple":
            return tuple(self.decode(item_schema) for item_schema in args)
        if kind == "option" and len(args) == 1:
            tag = self._tag()
            if tag == 0:
                return None
            if tag == 1:
                return self.decode(args[0])
            raise BincodeError(f"invalid option tag {tag}")
        if kind == "map" and len(args) == 2:
            key_schema, value_schema = args
            result = {}
            for _ in range(self._len()):
                key = self.decode(key_schema)
                result[key] = self.decode(value_schema)
            return result
        if kind == "struct" and len(args) == 1:
            return {name: self.decode(field_schema) for name, field_schema in args[0]}
        if kind == "enum" and len(args) == 1:
            variants = list(args[0])
            index = self._int(4, False)
            if index >= len(variants):
                raise BincodeError(f"invalid variant index {index}")
            name, variant_schema = variants[index]
            return (name, self.decode(variant_schema))
        raise BincodeError(f"unknown schema: {schema!r}")

    def _primitive(self, schema: str) -> Any:
        if schema in _INTS:
            width, signed = _INTS[schema]
            return self._int(width, signed)
        if schema in _FLOATS:
            codec = _FLOATS[schema]
            return codec.unpack(self._take(codec.size))[0]
        if schema == "bool":
            tag = self._tag()
            if tag > 1:
                raise BincodeError(f"invalid bool value {tag}")
            return tag == 1
        if schema == "str":
            raw = self._take(self._len())
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise BincodeError("invalid UTF-8 in string") from exc
        if schema == "bytes":
            return self._take(self._len())
        if schema == "unit":
            return None
        raise BincodeError(f"unknown schema: {schema!r}")