"""Lenient conversion of arbitrary values to fixed-width signed integers."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Integral, Real
from typing import Any

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_ZERO_DECIMAL = re.compile(r"([+-]?[0-9]+)\.0*")
_LEGACY_OCTAL = re.compile(r"[+-]?0[0-7_]*[0-7]")
_HEX_FLOAT = re.compile(r"[+-]?0[xX][0-9a-fA-F]*\.?[0-9a-fA-F]*[pP][+-]?[0-9]+")
_INFINITY_WORDS = frozenset({"inf", "infinity"})


class ConversionError(ValueError):
    """Raised when a value cannot be converted to the requested type."""

    def __init__(self, value: Any, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(
            f"unable to convert {value!r} of type {type(value).__name__} to {target}"
        )


def _is_plain_ascii(text: str) -> bool:
    return bool(text) and text.isascii() and text == text.strip()


def _as_text(value: str | bytes | bytearray, target: str) -> str:
    """Return ``value`` as text, decoding bytes as UTF-8."""
    if isinstance(value, str):
        return value
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError:
        raise ConversionError(value, target) from None


def _parse_int_literal(text: str) -> int | None:
    """Parse an integer literal with an optional base prefix, or return None."""
    if not _is_plain_ascii(text):
        return None
    try:
        if _LEGACY_OCTAL.fullmatch(text):
            return int(text, 8)
        return int(text, 0)
    except ValueError:
        return None


def _parse_float(text: str) -> float | None:
    """Parse a floating point literal, or return None when it is not one."""
    if not _is_plain_ascii(text) or "_" in text:
        return None
    if _HEX_FLOAT.fullmatch(text):
        try:
            return float.fromhex(text)
        except (ValueError, OverflowError):
            return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isinf(number) and text.lstrip("+-").lower() not in _INFINITY_WORDS:
        return None
    return number


def _wrap(number: int, bits: int) -> int:
    """Truncate ``number`` to a two's-complement integer of ``bits`` bits."""
    number &= (1 << bits) - 1
    if number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def _from_float(number: float, original: Any, bits: int, target: str) -> int:
    if not math.isfinite(number):
        raise ConversionError(original, target)
    return _wrap(int(number), bits)


def _from_text(text: str, original: Any, bits: int, target: str) -> int:
    match = _ZERO_DECIMAL.fullmatch(text)
    literal = match.group(1) if match else text
    number = _parse_int_literal(literal)
    if number is not None and _INT64_MIN <= number <= _INT64_MAX:
        return _wrap(number, bits)
    parsed = _parse_float(text)
    if parsed is None:
        raise ConversionError(original, target)
    return _from_float(parsed, original, bits, target)


def _to_integer(value: Any, bits: int, target: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Integral):
        return _wrap(int(value), bits)
    if isinstance(value, Decimal):
        return _from_text(str(value), value, bits, target)
    if isinstance(value, Real):
        return _from_float(float(value), value, bits, target)
    if isinstance(value, (str, bytes, bytearray)):
        return _from_text(_as_text(value, target), value, bits, target)
    raise ConversionError(value, target)


def to_int64(value: Any) -> int:
    """Convert ``value`` to a signed 64-bit integer."""
    return _to_integer(value, 64, "int64")


def to_int32(value: Any) -> int:
    """Convert ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return _to_integer(value, 32, "int32")


def to_int16(value: Any) -> int:
    """Convert ``value`` to a signed 16-bit integer, wrapping on overflow."""
    return _to_integer(value, 16, "int16")


def to_int8(value: Any) -> int:
    """Convert ``value`` to a signed 8-bit integer, wrapping on overflow."""
    return _to_integer(value, 8, "int8")


def to_int(value: Any) -> int:
    """Convert ``value`` to a native (64-bit) signed integer."""
    return _to_integer(value, 64, "int")