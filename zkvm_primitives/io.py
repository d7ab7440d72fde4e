"""Public values committed by a program, with their digests."""

from __future__ import annotations

import hashlib
from typing import Any

from zkvm_primitives.bincode import Schema
from zkvm_primitives.types import Buffer

_BN254_MASK = (1 << 253) - 1


class PublicValues:
    """Public values for the prover."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._buffer = Buffer(data)

    def __repr__(self) -> str:
        return f"PublicValues({self.raw()})"

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return len(self._buffer)

    def raw(self) -> str:
        """The contents as a 0x-prefixed hex string."""
        return "0x" + self._buffer.data.hex()

    def to_bytes(self) -> bytes:
        """A copy of the contents."""
        return bytes(self._buffer.data)

    def read(self, schema: Schema) -> Any:
        """Decode the next value of ``schema``."""
        return self._buffer.read(schema)

    def read_slice(self, size: int) -> bytes:
        """Return the next ``size`` raw bytes."""
        return self._buffer.read_slice(size)

    def write(self, value: Any, schema: Schema) -> None:
        """Append ``value`` encoded with ``schema``."""
        self._buffer.write(value, schema)

    def write_slice(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw bytes."""
        self._buffer.write_slice(data)

    def hash(self) -> bytes:
        """SHA-256 digest of the contents."""
        return hashlib.sha256(self._buffer.data).digest()

    def hash_bn254(self) -> int:
        """SHA-256 digest with the top three bits cleared, as a big-endian integer."""
        return int.from_bytes(self.hash(), "big") & _BN254_MASK