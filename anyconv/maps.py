"""Conversion of arbitrary values into string-keyed dictionaries."""

from __future__ import annotations

import dataclasses
import json
import math
import struct
from collections.abc import Callable, Mapping
from decimal import Decimal
from numbers import Real
from typing import Any

from .ints import ConversionError, _as_text, _parse_float

_TRUE_WORDS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "false", "FALSE", "False"})
_NOT_AN_OBJECT: Any = object()


@dataclasses.dataclass(frozen=True)
class DecoderConfig:
    """Options for turning dataclass instances into dictionaries.

    ``tag_name`` selects the key in each field's metadata that holds the
    dictionary key to use for that field.
    """

    tag_name: str = "json"


_DEFAULT_CONFIG = DecoderConfig()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _load_json_object(value: str | bytes | bytearray) -> Any:
    """Return the JSON object held in ``value``, or ``_NOT_AN_OBJECT``."""
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return _NOT_AN_OBJECT
    try:
        loaded = json.loads(value, parse_int=float, parse_constant=_reject_constant)
    except ValueError:
        return _NOT_AN_OBJECT
    if loaded is None:
        return {}
    if isinstance(loaded, dict):
        return loaded
    return _NOT_AN_OBJECT


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return format(Decimal(repr(number)).normalize(), "f")


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (bytes, bytearray)):
        return _as_text(value, "str")
    raise ConversionError(value, "str")


def _to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (Real, Decimal)):
        return value > 0
    if isinstance(value, (str, bytes, bytearray)):
        text = _as_text(value, "bool")
        if text in _TRUE_WORDS:
            return True
        if text in _FALSE_WORDS:
            return False
        number = _parse_float(text)
        if number is None:
            raise ConversionError(value, "bool")
        return number > 0
    raise ConversionError(value, "bool")


def _to_float64(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (Real, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return math.copysign(math.inf, value)
    if isinstance(value, (str, bytes, bytearray)):
        number = _parse_float(_as_text(value, "float64"))
        if number is None:
            raise ConversionError(value, "float64")
        return number
    raise ConversionError(value, "float64")


def _round_float32(number: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _to_float32(value: Any) -> float:
    try:
        number = _to_float64(value)
    except ConversionError:
        raise ConversionError(value, "float32") from None
    return _round_float32(number)


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _struct_to_dict(obj: Any, config: DecoderConfig) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for field in dataclasses.fields(obj):
        if field.name.startswith("_"):
            continue
        key = field.name
        tag = field.metadata.get(config.tag_name)
        if tag:
            tag_key = str(tag).split(",", 1)[0]
            if tag_key == "-":
                continue
            if tag_key:
                key = tag_key
        item = getattr(obj, field.name)
        result[key] = _struct_to_dict(item, config) if _is_dataclass_instance(item) else item
    return result


def _decode(value: Any, config: DecoderConfig) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return {_to_string(key): item for key, item in value.items()}
    if _is_dataclass_instance(value):
        return _struct_to_dict(value, config)
    raise ConversionError(value, "dict[str, Any]")


def _convert_map(
    value: Any,
    config: DecoderConfig | None,
    convert: Callable[[Any], Any] | None,
    target: str,
) -> dict[str, Any]:
    """Build a string-keyed dictionary; ``convert=None`` keeps values as they are."""
    if value is None:
        return {}
    try:
        if isinstance(value, Mapping):
            pairs = ((_to_string(key), item) for key, item in value.items())
        else:
            source = _NOT_AN_OBJECT
            if isinstance(value, (str, bytes, bytearray)):
                source = _load_json_object(value)
            if source is _NOT_AN_OBJECT:
                source = _decode(value, config or _DEFAULT_CONFIG)
            pairs = iter(source.items())
        if convert is None:
            return dict(pairs)
        return {key: convert(item) for key, item in pairs}
    except ConversionError:
        raise ConversionError(value, target) from None


def to_string_map(value: Any, config: DecoderConfig | None = None) -> dict[str, Any]:
    """Convert ``value`` to a dictionary with string keys.

    A dictionary whose keys are already strings is returned unchanged.
    """
    if isinstance(value, dict) and all(isinstance(key, str) for key in value):
        return value
    return _convert_map(value, config, None, "dict[str, Any]")


def to_string_map_bool(value: Any, config: DecoderConfig | None = None) -> dict[str, bool]:
    """Convert ``value`` to a dictionary of string keys and boolean values."""
    return _convert_map(value, config, _to_bool, "dict[str, bool]")


def to_string_map_float64(value: Any, config: DecoderConfig | None = None) -> dict[str, float]:
    """Convert ``value`` to a dictionary of string keys and float values."""
    return _convert_map(value, config, _to_float64, "dict[str, float64]")


def to_string_map_float32(value: Any, config: DecoderConfig | None = None) -> dict[str, float]:
    """Convert ``value`` to a dictionary of string keys and single-precision floats."""
    return _convert_map(value, config, _to_float32, "dict[str, float32]")