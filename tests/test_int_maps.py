import dataclasses
from typing import Any

import pytest

from anyconv.int_maps import (
    to_string_map_int,
    to_string_map_int8,
    to_string_map_int16,
    to_string_map_int32,
    to_string_map_int64,
    to_string_map_uint,
    to_string_map_uint8,
    to_string_map_uint16,
    to_string_map_uint32,
    to_string_map_uint64,
)
from anyconv.ints import ConversionError
from anyconv.maps import DecoderConfig


@dataclasses.dataclass
class Plain:
    A: Any
    B: Any
    C: Any


@dataclasses.dataclass
class Tagged:
    A: Any = dataclasses.field(metadata={"json": "a", "dc": "x"})
    B: Any = dataclasses.field(metadata={"json": "b", "dc": "y"})
    C: Any = dataclasses.field(metadata={"json": "c", "dc": "z"})


ALL = [
    to_string_map_int64,
    to_string_map_int32,
    to_string_map_int16,
    to_string_map_int8,
    to_string_map_int,
    to_string_map_uint64,
    to_string_map_uint32,
    to_string_map_uint16,
    to_string_map_uint8,
    to_string_map_uint,
]

SOURCE_CASES = [
    pytest.param({"a": "1", "b": 2.6, "c": True}, {"a": 1, "b": 2, "c": 1}, id="any_keyed_map"),
    pytest.param(b'{"a": "1.6", "b": 2.7, "c": true}', {"a": 1, "b": 2, "c": 1}, id="json_bytes"),
    pytest.param('{"a": "1.6", "b": 2.7, "c": true}', {"a": 1, "b": 2, "c": 1}, id="json_string"),
    pytest.param({"a": "1.6", "b": "2.7", "c": "3.1"}, {"a": 1, "b": 2, "c": 3}, id="string_values"),
    pytest.param({}, {}, id="empty_map"),
    pytest.param(None, {}, id="none_gives_empty"),
    pytest.param(Plain(A=1.6, B=False, C="2.7"), {"A": 1, "B": 0, "C": 2}, id="plain_dataclass"),
    pytest.param(Tagged(A=1.6, B=False, C="2.7"), {"a": 1, "b": 0, "c": 2}, id="tagged_dataclass"),
]


@pytest.mark.parametrize("value, expected", SOURCE_CASES)
def test_source_cases(value, expected):
    assert to_string_map_int64(value) == expected
    assert to_string_map_int32(value) == expected
    assert to_string_map_int16(value) == expected
    assert to_string_map_int8(value) == expected
    assert to_string_map_int(value) == expected
    assert to_string_map_uint64(value) == expected
    assert to_string_map_uint32(value) == expected
    assert to_string_map_uint16(value) == expected
    assert to_string_map_uint8(value) == expected
    assert to_string_map_uint(value) == expected


@pytest.mark.parametrize("func", ALL)
def test_custom_tag_name(func):
    result = func(Tagged(A=1.6, B=False, C="2.7"), DecoderConfig(tag_name="dc"))
    assert result == {"x": 1, "y": 0, "z": 2}


def test_non_string_keys():
    value = {1: "5", 2.5: 7}
    expected = {"1": 5, "2.5": 7}
    assert to_string_map_int64(value) == expected
    assert to_string_map_int32(value) == expected
    assert to_string_map_int16(value) == expected
    assert to_string_map_int8(value) == expected
    assert to_string_map_int(value) == expected
    assert to_string_map_uint64(value) == expected
    assert to_string_map_uint32(value) == expected
    assert to_string_map_uint16(value) == expected
    assert to_string_map_uint8(value) == expected
    assert to_string_map_uint(value) == expected


def test_bad_value_raises():
    value = {"a": "not a number"}
    with pytest.raises(ConversionError):
        to_string_map_int64(value)
    with pytest.raises(ConversionError):
        to_string_map_int32(value)
    with pytest.raises(ConversionError):
        to_string_map_int16(value)
    with pytest.raises(ConversionError):
        to_string_map_int8(value)
    with pytest.raises(ConversionError):
        to_string_map_int(value)
    with pytest.raises(ConversionError):
        to_string_map_uint64(value)
    with pytest.raises(ConversionError):
        to_string_map_uint32(value)
    with pytest.raises(ConversionError):
        to_string_map_uint16(value)
    with pytest.raises(ConversionError):
        to_string_map_uint8(value)
    with pytest.raises(ConversionError):
        to_string_map_uint(value)


def test_unconvertible_input_raises():
    with pytest.raises(ConversionError):
        to_string_map_int64(42)
    with pytest.raises(ConversionError):
        to_string_map_int32(42)
    with pytest.raises(ConversionError):
        to_string_map_int16(42)
    with pytest.raises(ConversionError):
        to_string_map_int8(42)
    with pytest.raises(ConversionError):
        to_string_map_int(42)
    with pytest.raises(ConversionError):
        to_string_map_uint64(42)
    with pytest.raises(ConversionError):
        to_string_map_uint32(42)
    with pytest.raises(ConversionError):
        to_string_map_uint16(42)
    with pytest.raises(ConversionError):
        to_string_map_uint8(42)
    with pytest.raises(ConversionError):
        to_string_map_uint(42)


def test_error_names_target():
    with pytest.raises(ConversionError) as info:
        to_string_map_int32({"a": "x"})
    assert info.value.target == "dict[str, int32]"


def test_signed_wraps_on_overflow():
    assert to_string_map_int8({"a": 300}) == {"a": 44}
    assert to_string_map_int16({"a": 40000}) == {"a": -25536}


def test_signed_keeps_negative():
    assert to_string_map_int64({"a": "-5"}) == {"a": -5}


def test_unsigned_rejects_negative():
    value = {"a": -1}
    with pytest.raises(ConversionError):
        to_string_map_uint64(value)
    with pytest.raises(ConversionError):
        to_string_map_uint32(value)
    with pytest.raises(ConversionError):
        to_string_map_uint16(value)
    with pytest.raises(ConversionError):
        to_string_map_uint8(value)
    with pytest.raises(ConversionError):
        to_string_map_uint(value)


def test_unsigned_wraps_on_overflow():
    assert to_string_map_uint8({"a": 300}) == {"a": 44}
    assert to_string_map_uint64({"a": 2**64 - 1}) == {"a": 2**64 - 1}