import pytest
from hypothesis import given
from hypothesis import strategies as st

from zkvm_primitives.bincode import (
    BincodeError,
    deserialize,
    serialize,
    serialized_size,
)

POINT = ("struct", (("x", "i32"), ("label", "str")))
SHAPE = ("enum", (("Empty", "unit"), ("Circle", "u16"), ("Named", "str")))

CASES = [
    ("u8", st.integers(0, 2**8 - 1)),
    ("u16", st.integers(0, 2**16 - 1)),
    ("u32", st.integers(0, 2**32 - 1)),
    ("u64", st.integers(0, 2**64 - 1)),
    ("u128", st.integers(0, 2**128 - 1)),
    ("i8", st.integers(-(2**7), 2**7 - 1)),
    ("i64", st.integers(-(2**63), 2**63 - 1)),
    ("i128", st.integers(-(2**127), 2**127 - 1)),
    ("bool", st.booleans()),
    ("f32", st.floats(width=32, allow_nan=False)),
    ("f64", st.floats(allow_nan=False)),
    ("str", st.text()),
    ("bytes", st.binary()),
    ("unit", st.none()),
    (("vec", "u32"), st.lists(st.integers(0, 2**32 - 1))),
    (("array", "u8", 3), st.lists(st.integers(0, 255), min_size=3, max_size=3)),
    (("tuple", "u8", "str"), st.tuples(st.integers(0, 255), st.text())),
    (("option", "i32"), st.none() | st.integers(-(2**31), 2**31 - 1)),
    (("map", "str", "u64"), st.dictionaries(st.text(), st.integers(0, 2**64 - 1))),
    (POINT, st.fixed_dictionaries({"x": st.integers(-(2**31), 2**31 - 1), "label": st.text()})),
    (
        SHAPE,
        st.one_of(
            st.just(("Empty", None)),
            st.tuples(st.just("Circle"), st.integers(0, 2**16 - 1)),
            st.tuples(st.just("Named"), st.text()),
        ),
    ),
    (("vec", ("option", "bool")), st.lists(st.none() | st.booleans())),
]


@pytest.mark.parametrize("schema, strategy", CASES)
@given(data=st.data())
def test_round_trip(schema, strategy, data):
    value = data.draw(strategy)
    encoded = serialize(value, schema)
    assert deserialize(encoded, schema) == value
    assert serialized_size(value, schema) == len(encoded)


@pytest.mark.parametrize("schema, strategy", CASES)
@given(data=st.data(), tail=st.binary(min_size=1))
def test_trailing_bytes_are_ignored(schema, strategy, data, tail):
    value = data.draw(strategy)
    assert deserialize(serialize(value, schema) + tail, schema) == value


def test_u32_wire_bytes():
    assert serialize(1, "u32") == b"\x01\x00\x00\x00"


def test_str_has_u64_length_prefix():
    assert serialize("ab", "str") == b"\x02" + b"\x00" * 7 + b"ab"


def test_none_is_single_zero_byte():
    assert serialize(None, ("option", "u64")) == b"\x00"


@given(st.lists(st.integers(0, 255)))
def test_vec_prefix_is_u64_length(items):
    encoded = serialize(items, ("vec", "u8"))
    assert encoded[:8] == serialize(len(items), "u64")
    assert encoded[8:] == bytes(items)


@given(st.lists(st.integers(0, 2**16 - 1), max_size=8))
def test_array_has_no_length_prefix(items):
    fixed = serialize(items, ("array", "u16", len(items)))
    assert fixed == serialize(items, ("vec", "u16"))[8:]


@given(st.integers(-(2**31), 2**31 - 1), st.text())
def test_struct_matches_tuple_layout(x, label):
    as_struct = serialize({"x": x, "label": label}, POINT)
    assert as_struct == serialize((x, label), ("tuple", "i32", "str"))


@given(st.binary())
def test_bytes_matches_vec_of_u8(raw):
    assert serialize(raw, "bytes") == serialize(list(raw), ("vec", "u8"))


@pytest.mark.parametrize(
    "value, schema",
    [
        (256, "u8"),
        (-1, "u32"),
        (2**64, "u64"),
        ("1", "u32"),
        (True, "u32"),
        (1, "bool"),
        (b"x", "str"),
        ("x", "bytes"),
        (0, "unit"),
        ([1, 2], ("array", "u8", 3)),
        ((1,), ("tuple", "u8", "u8")),
        ({"x": 1}, POINT),
        (("Square", 1), SHAPE),
        (1, "u256"),
        (1, ("bogus", "u8")),
    ],
)
def test_invalid_values_raise(value, schema):
    with pytest.raises(BincodeError):
        serialize(value, schema)


@pytest.mark.parametrize(
    "data, schema",
    [
        (b"\x02", "bool"),
        (b"\x00" * 7, "u64"),
        (b"", "u8"),
        (serialize(2, "u64") + b"\xff\xfe", "str"),
        (serialize(5, "u64") + b"ab", "bytes"),
        (b"\x02", ("option", "u8")),
        (serialize(3, "u32"), SHAPE),
        (b"\x00", "i256"),
    ],
)
def test_invalid_input_raises(data, schema):
    with pytest.raises(BincodeError):
        deserialize(data, schema)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        deserialize(b"", "u32")