"""Conversion of arbitrary values into lists of plain values, booleans and floats."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any

from .ints import ConversionError
from .maps import _to_bool, _to_float32, _to_float64

_NOT_AN_ARRAY: Any = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _load_json_array(value: str | bytes | bytearray) -> Any:
    """Return the JSON array held in ``value`` as a list, or ``_NOT_AN_ARRAY``.

    JSON numbers become floats and a JSON ``null`` becomes an empty list.
    """
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return _NOT_AN_ARRAY
    try:
        loaded = json.loads(value, parse_int=float, parse_constant=_reject_constant)
    except ValueError:
        return _NOT_AN_ARRAY
    if loaded is None:
        return []
    if isinstance(loaded, list):
        return loaded
    return _NOT_AN_ARRAY


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def to_slice(value: Any) -> list[Any]:
    """Convert ``value`` to a list.

    A list is returned unchanged and other sequences are copied into a list.
    Text or bytes holding a JSON array are decoded; other bytes give their
    byte values and other text gives a one-item list.  Any remaining value
    is wrapped in a one-item list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (bytes, bytearray)):
        items = _load_json_array(value)
        return list(value) if items is _NOT_AN_ARRAY else items
    if isinstance(value, str):
        items = _load_json_array(value)
        return [value] if items is _NOT_AN_ARRAY else items
    if _is_sequence(value):
        return list(value)
    return [value]


def _convert_slice(value: Any, convert: Callable[[Any], Any], target: str) -> list[Any]:
    if value is None:
        return []
    try:
        if isinstance(value, (bytes, bytearray)):
            items = _load_json_array(value)
            if items is _NOT_AN_ARRAY:
                items = list(value)
        elif isinstance(value, str):
            items = _load_json_array(value)
            if items is _NOT_AN_ARRAY:
                raise ConversionError(value, target)
        elif _is_sequence(value):
            items = value
        else:
            raise ConversionError(value, target)
        return [convert(item) for item in items]
    except ConversionError:
        raise ConversionError(value, target) from None


def to_bool_slice(value: Any) -> list[bool]:
    """Convert ``value`` to a list of booleans."""
    return _convert_slice(value, _to_bool, "list[bool]")


def to_float64_slice(value: Any) -> list[float]:
    """Convert ``value`` to a list of floats."""
    return _convert_slice(value, _to_float64, "list[float64]")


def to_float32_slice(value: Any) -> list[float]:
    """Convert ``value`` to a list of single-precision floats."""
    return _convert_slice(value, _to_float32, "list[float32]")