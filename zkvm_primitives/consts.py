"""Memory constants and little-endian word/byte conversions."""

from __future__ import annotations

import struct
from collections.abc import Iterable

MAXIMUM_MEMORY_SIZE: int = 0xFFFF_FFFF
"""The maximum size of the memory in bytes."""

WORD_SIZE: int = 4
"""The size of a word in bytes."""

_WORD = struct.Struct("<I")


def words_to_bytes_le(words: Iterable[int]) -> bytes:
    """Encode 32-bit words as little-endian bytes."""
    try:
        return b"".join(word.to_bytes(WORD_SIZE, "little") for word in words)
    except OverflowError as exc:
        raise ValueError("word does not fit in 32 unsigned bits") from exc


def bytes_to_words_le(data: bytes | bytearray | memoryview) -> list[int]:
    """Decode little-endian bytes into 32-bit words; a trailing partial word is dropped."""
    view = memoryview(data).cast("B")
    usable = len(view) - len(view) % WORD_SIZE
    return [word for (word,) in _WORD.iter_unpack(view[:usable])]


def num_to_comma_separated(value: object) -> str:
    """Format a value's text with a comma between every group of three characters from the right."""
    reversed_text = str(value)[::-1]
    groups = (reversed_text[start:start + 3] for start in range(0, len(reversed_text), 3))
    return ",".join(groups)[::-1]