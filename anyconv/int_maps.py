"""Conversion of arbitrary values into dictionaries of string keys and integers."""

from __future__ import annotations

from functools import partial
from numbers import Integral
from typing import Any

from .ints import ConversionError, _to_integer
from .maps import DecoderConfig, _convert_map


def _to_unsigned(value: Any, bits: int, target: str) -> int:
    """Convert ``value`` to an unsigned integer of ``bits`` bits.

    Negative values are rejected; larger values wrap around.
    """
    if isinstance(value, Integral) and not isinstance(value, bool):
        number = int(value)
    else:
        number = _to_integer(value, 64, target)
    if number < 0:
        raise ConversionError(value, target)
    return number & ((1 << bits) - 1)


_SIGNED = {
    "int64": partial(_to_integer, bits=64, target="int64"),
    "int32": partial(_to_integer, bits=32, target="int32"),
    "int16": partial(_to_integer, bits=16, target="int16"),
    "int8": partial(_to_integer, bits=8, target="int8"),
    "int": partial(_to_integer, bits=64, target="int"),
}

_UNSIGNED = {
    "uint64": partial(_to_unsigned, bits=64, target="uint64"),
    "uint32": partial(_to_unsigned, bits=32, target="uint32"),
    "uint16": partial(_to_unsigned, bits=16, target="uint16"),
    "uint8": partial(_to_unsigned, bits=8, target="uint8"),
    "uint": partial(_to_unsigned, bits=64, target="uint"),
}


def _convert(value: Any, config: DecoderConfig | None, kind: str) -> dict[str, int]:
    convert = _SIGNED.get(kind) or _UNSIGNED[kind]
    return _convert_map(value, config, convert, f"dict[str, {kind}]")


def to_string_map_int64(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and signed 64-bit integers."""
    return _convert(value, config, "int64")


def to_string_map_int32(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and signed 32-bit integers."""
    return _convert(value, config, "int32")


def to_string_map_int16(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and signed 16-bit integers."""
    return _convert(value, config, "int16")


def to_string_map_int8(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and signed 8-bit integers."""
    return _convert(value, config, "int8")


def to_string_map_int(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and native signed integers."""
    return _convert(value, config, "int")


def to_string_map_uint64(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and unsigned 64-bit integers."""
    return _convert(value, config, "uint64")


def to_string_map_uint32(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and unsigned 32-bit integers."""
    return _convert(value, config, "uint32")


def to_string_map_uint16(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and unsigned 16-bit integers."""
    return _convert(value, config, "uint16")


def to_string_map_uint8(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and unsigned 8-bit integers."""
    return _convert(value, config, "uint8")


def to_string_map_uint(value: Any, config: DecoderConfig | None = None) -> dict[str, int]:
    """Convert ``value`` to a dictionary of string keys and native unsigned integers."""
    return _convert(value, config, "uint")