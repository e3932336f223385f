# anyconv

Lenient conversion of loosely typed values into the shape you need.

Values arrive from JSON payloads, configuration files, query strings and
protobuf messages as strings, bytes, numbers, booleans, lists, dictionaries or
dataclass instances. `anyconv` turns them into fixed-width integers, typed
lists and dictionaries with string keys. When a value cannot be converted it
raises `anyconv.ints.ConversionError`, a subclass of `ValueError` that keeps
the offending `value` and the `target` type name.

## Installation

```
pip install anyconv
```

## Integers

`anyconv.ints` provides `to_int64`, `to_int32`, `to_int16`, `to_int8` and
`to_int`. They accept `None` (giving 0), booleans, integers, floats,
`Decimal`, and text or UTF-8 bytes holding a number. Floats are truncated
towards zero; results outside the target width wrap around as two's-complement
integers. Text may carry a base prefix (`0x`, `0o`, `0b`) or be a decimal
number such as `"1."` or `"1.23"`.

```python
from anyconv.ints import to_int, to_int8, ConversionError

to_int("1.23")     # 1
to_int(b"1.")      # 1
to_int("0x1f")     # 31
to_int(True)       # 1
to_int(None)       # 0
to_int8(300)       # 44, wrapped to the signed 8-bit range

try:
    to_int("b")
except ConversionError as exc:
    print(exc)
```

## Dictionaries

`anyconv.maps` provides `to_string_map`, `to_string_map_bool`,
`to_string_map_float64` and `to_string_map_float32`; `anyconv.int_maps`
provides `to_string_map_int64`, `_int32`, `_int16`, `_int8`, `_int` and the
unsigned `to_string_map_uint64`, `_uint32`, `_uint16`, `_uint8`, `_uint`.

Each accepts `None` (giving `{}`), any mapping (keys are turned into strings),
text or bytes holding a JSON object, or a dataclass instance. Numbers read from
JSON become floats. Values are then converted to the target type; the unsigned
variants reject negative values. `to_string_map` returns a `dict` whose keys
are all strings unchanged.

```python
from anyconv.maps import to_string_map, to_string_map_bool, to_string_map_float64
from anyconv.int_maps import to_string_map_int, to_string_map_uint8

to_string_map('{"a": "hello", "b": [1, 2]}')        # {'a': 'hello', 'b': [1.0, 2.0]}
to_string_map_bool({"a": "1", "b": 2.6, "c": -1})   # {'a': True, 'b': True, 'c': False}
to_string_map_float64(b'{"a": "1.6", "c": true}')   # {'a': 1.6, 'c': 1.0}
to_string_map_int({"a": "1.6", "b": "2.7"})         # {'a': 1, 'b': 2}
```

### Dataclasses and `DecoderConfig`

Dataclass fields whose names start with an underscore are skipped; nested
dataclasses become nested dictionaries. A field's output name comes from its
metadata under the key named by `DecoderConfig.tag_name` (default `"json"`);
a value of `"-"` drops the field.

```python
from dataclasses import dataclass, field
from anyconv.maps import DecoderConfig, to_string_map

@dataclass
class Person:
    name: str = field(metadata={"json": "name", "struct": "name1"})
    age: int = field(metadata={"json": "age", "struct": "age1"})

to_string_map(Person("lsx", 18))                                   # {'name': 'lsx', 'age': 18}
to_string_map(Person("lsx", 18), DecoderConfig(tag_name="struct")) # {'name1': 'lsx', 'age1': 18}
```

Other objects are not decoded: anything that is not a mapping, JSON object
text or a dataclass instance raises `ConversionError`.

## Lists

`anyconv.slices` provides `to_slice`, `to_bool_slice`, `to_float64_slice` and
`to_float32_slice`; `anyconv.int_slices` provides `to_int64_slice`,
`to_int32_slice`, `to_int16_slice`, `to_int8_slice` and `to_int_slice`.

`to_slice` returns a list unchanged, copies other sequences, decodes text or
bytes holding a JSON array, turns other bytes into their byte values and wraps
any other value in a one-item list. The typed variants convert each item and
raise `ConversionError` for text that is not a JSON array and for values that
are not sequences.

```python
from anyconv.slices import to_slice, to_bool_slice
from anyconv.int_slices import to_int64_slice

to_slice("hello")                          # ['hello']
to_slice('[1, 1.2, true, "hello"]')        # [1.0, 1.2, True, 'hello']
to_bool_slice([0, 1, 0])                   # [False, True, False]
to_int64_slice('[1, 2, true, "0", "1.2"]') # [1, 2, 1, 0, 1]
```

## Protobuf messages

```python
from anyconv.proto import proto_msg_to_map

proto_msg_to_map(message)  # proto field names, unset fields included, numbers as floats
```

Passing anything other than a protobuf message raises `TypeError`.

## What it does not do

There is no conversion to plain strings, unsigned integer lists or
string-to-string dictionaries as public functions, and no command-line tool.

## Running the tests

```
pip install anyconv[test]
pytest
```