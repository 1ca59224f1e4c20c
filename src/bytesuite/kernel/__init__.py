"""
Kernel: pure operations over byte stores.

Components:
  - scalar: bounds check, fixed-width integer read/write with endianness
  - encoding: hex/base64/latin1/utf8/utf16le conversion
  - search: equals, compare, index_of
"""

from .scalar import (
    bounds_check,
    resolve_endianness,
    read_uint,
    write_uint,
    read_int,
    write_int
)
from .encoding import (
    resolve_encoding,
    to_hex,
    to_string,
    from_string
)
from .search import (
    equals,
    compare,
    index_of
)

__all__ = [
    # Scalar
    "bounds_check",
    "resolve_endianness",
    "read_uint",
    "write_uint",
    "read_int",
    "write_int",

    # Encoding
    "resolve_encoding",
    "to_hex",
    "to_string",
    "from_string",

    # Search
    "equals",
    "compare",
    "index_of",
]
