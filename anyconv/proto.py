"""Conversion of protobuf messages into plain dictionaries."""

from __future__ import annotations

import json
from typing import Any

from google.protobuf import json_format
from google.protobuf.message import Message

from .ints import ConversionError


def _message_json(msg: Message) -> str:
    try:
        return json_format.MessageToJson(
            msg,
            preserving_proto_field_name=True,
            always_print_fields_with_no_presence=True,
        )
    except TypeError:
        return json_format.MessageToJson(
            msg,
            preserving_proto_field_name=True,
            including_default_value_fields=True,
        )


def proto_msg_to_map(msg: Message) -> dict[str, Any]:
    """Convert a protobuf message to a dictionary keyed by proto field names.

    Fields left at their default value are included, and every JSON number
    becomes a float.
    """
    if not isinstance(msg, Message):
        raise TypeError(f"expected a protobuf message, got {type(msg).__name__}")
    result = json.loads(_message_json(msg), parse_int=float)
    if not isinstance(result, dict):
        raise ConversionError(msg, "dict[str, Any]")
    return result