import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zkvm_primitives.bincode import BincodeError, serialize, serialized_size
from zkvm_primitives.types import Buffer, IdentityHasher


def test_new_buffer_starts_at_head():
    buffer = Buffer(b"abc")
    assert buffer.ptr == 0
    assert bytes(buffer) == b"abc"
    assert len(buffer) == 3


def test_write_then_read_in_order():
    buffer = Buffer()
    buffer.write(7, "u32")
    buffer.write("hi", "str")
    buffer.write([1, 2, 3], ("vec", "u16"))
    assert buffer.read("u32") == 7
    assert buffer.read("str") == "hi"
    assert buffer.read(("vec", "u16")) == [1, 2, 3]
    assert buffer.ptr == len(buffer)


@given(st.lists(st.text()))
def test_read_advances_by_serialized_size(values):
    buffer = Buffer()
    for value in values:
        buffer.write(value, "str")
    for value in values:
        before = buffer.ptr
        assert buffer.read("str") == value
        assert buffer.ptr - before == serialized_size(value, "str")


def test_write_appends_encoding():
    buffer = Buffer(b"xy")
    buffer.write(5, "u64")
    assert bytes(buffer) == b"xy" + serialize(5, "u64")


def test_head_rewinds():
    buffer = Buffer()
    buffer.write(42, "i64")
    first = buffer.read("i64")
    buffer.head()
    assert buffer.ptr == 0
    assert buffer.read("i64") == first == 42


@given(st.binary(), st.binary())
def test_write_slice_and_read_slice(first, second):
    buffer = Buffer()
    buffer.write_slice(first)
    buffer.write_slice(second)
    assert bytes(buffer) == first + second
    assert buffer.read_slice(len(first)) == first
    assert buffer.read_slice(len(second)) == second
    assert buffer.ptr == len(first) + len(second)


def test_read_slice_past_end_raises():
    buffer = Buffer(b"abc")
    buffer.read_slice(2)
    with pytest.raises(ValueError):
        buffer.read_slice(2)
    assert buffer.ptr == 2


def test_read_slice_negative_size_raises():
    with pytest.raises(ValueError):
        Buffer(b"abc").read_slice(-1)


def test_read_from_exhausted_buffer_raises():
    buffer = Buffer()
    buffer.write(1, "u8")
    buffer.read("u8")
    with pytest.raises(BincodeError):
        buffer.read("u8")


def test_mixed_raw_and_encoded():
    buffer = Buffer()
    buffer.write_slice(b"\xaa\xbb")
    buffer.write(True, "bool")
    assert buffer.read_slice(2) == b"\xaa\xbb"
    assert buffer.read("bool") is True


def test_identity_hasher_starts_at_zero():
    assert IdentityHasher().finish() == 0


@given(st.integers(0, 2**32 - 1))
def test_identity_hasher_returns_key(key):
    hasher = IdentityHasher()
    hasher.write(key.to_bytes(4, sys.byteorder))
    assert hasher.finish() == key


def test_identity_hasher_last_write_wins():
    hasher = IdentityHasher()
    hasher.write((9).to_bytes(4, sys.byteorder))
    hasher.write((3).to_bytes(4, sys.byteorder))
    assert hasher.finish() == 3


@pytest.mark.parametrize("data", [b"", b"\x01\x02\x03", b"\x00" * 8])
def test_identity_hasher_rejects_other_lengths(data):
    with pytest.raises(ValueError):
        IdentityHasher().write(data)