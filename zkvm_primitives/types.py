"""Program kinds, the serialization buffer and the identity hasher."""

from __future__ import annotations

import enum
import sys
from typing import Any

from zkvm_primitives.bincode import Schema, deserialize, serialize, serialized_size


class RecursionProgramType(enum.Enum):
    """Kinds of recursion programs."""

    CORE = enum.auto()
    DEFERRED = enum.auto()
    COMPRESS = enum.auto()
    SHRINK = enum.auto()
    WRAP = enum.auto()


class Buffer:
    """A byte buffer of serialized values with a read position."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self.data = bytearray(data)
        self.ptr = 0

    def __repr__(self) -> str:
        return f"Buffer(data={bytes(self.data)!r}, ptr={self.ptr})"

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def head(self) -> None:
        """Move the read position back to the start of the buffer."""
        self.ptr = 0

    def read(self, schema: Schema) -> Any:
        """Decode the next value of ``schema`` and advance past it."""
        value = deserialize(bytes(self.data[self.ptr:]), schema)
        self.ptr += serialized_size(value, schema)
        return value

    def read_slice(self, size: int) -> bytes:
        """Return the next ``size`` raw bytes and advance past them."""
        if size < 0:
            raise ValueError("size must not be negative")
        end = self.ptr + size
        if end > len(self.data):
            raise ValueError(
                f"cannot read {size} bytes at offset {self.ptr} of a {len(self.data)}-byte buffer"
            )
        chunk = bytes(self.data[self.ptr:end])
        self.ptr = end
        return chunk

    def write(self, value: Any, schema: Schema) -> None:
        """Append ``value`` encoded with ``schema``."""
        self.data += serialize(value, schema)

    def write_slice(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw bytes."""
        self.data += data


class IdentityHasher:
    """Hasher whose hash is the 4-byte key it was fed, read in native byte order."""

    def __init__(self) -> None:
        self._hash = 0

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Feed exactly four bytes; they replace the current hash."""
        raw = bytes(data)
        if len(raw) != 4:
            raise ValueError(f"expected exactly 4 bytes, got {len(raw)}")
        self._hash = int.from_bytes(raw, sys.byteorder)

    def finish(self) -> int:
        """Return the current hash."""
        return self._hash