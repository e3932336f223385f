"""Conversion of arbitrary values into lists of fixed-width signed integers."""

from __future__ import annotations

from functools import partial
from typing import Any

from .ints import _to_integer
from .slices import _convert_slice


def _convert(value: Any, bits: int, kind: str) -> list[int]:
    convert = partial(_to_integer, bits=bits, target=kind)
    return _convert_slice(value, convert, f"list[{kind}]")


def to_int64_slice(value: Any) -> list[int]:
    """Convert ``value`` to a list of signed 64-bit integers.

    Sequences are converted item by item; text or bytes must hold a JSON
    array, except that other bytes give their byte values.
    """
    return _convert(value, 64, "int64")


def to_int32_slice(value: Any) -> list[int]:
    """Convert ``value`` to a list of signed 32-bit integers, wrapping on overflow."""
    return _convert(value, 32, "int32")


def to_int16_slice(value: Any) -> list[int]:
    """Convert ``value`` to a list of signed 16-bit integers, wrapping on overflow."""
    return _convert(value, 16, "int16")


def to_int8_slice(value: Any) -> list[int]:
    """Convert ``value`` to a list of signed 8-bit integers, wrapping on overflow."""
    return _convert(value, 8, "int8")


def to_int_slice(value: Any) -> list[int]:
    """Convert ``value`` to a list of native (64-bit) signed integers."""
    return _convert(value, 64, "int")