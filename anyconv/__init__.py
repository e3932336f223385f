"""Lenient conversion of arbitrary values into fixed-width integers, typed lists and string-keyed dictionaries."""

__version__ = "0.1.0"

__all__ = ["ints", "maps", "int_maps", "slices", "int_slices", "proto"]