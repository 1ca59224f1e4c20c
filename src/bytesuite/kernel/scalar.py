"""
Kernel Component: Scalar Codec

Bounds-checked read/write of fixed-width integers against a byte store.

Layout (frozen):
  - Scalars sit in storage in STORAGE_ORDER (little-endian)
  - A read copies width/8 bytes and reverses them when the requested
    order differs from storage order; writes do the inverse
  - Widths: 8, 16, 32, 64 bits

Every accessor raises BoundsViolation on a failed bounds check. A read
never reports a failure as the value 0.
"""

from ..core.errors import BoundsViolation, InvalidArgument
from ..core.registry import ENDIANNESS, SCALAR_WIDTHS, STORAGE_ORDER


def bounds_check(storage, length: int, offset: int, size: int) -> bool:
    """
    True iff `size` bytes starting at `offset` lie within the used length.

    Args:
        storage: Backing byte store (None means no buffer).
        length: Bytes currently in use.
        offset: Start position.
        size: Access width in bytes.
    """
    if storage is None:
        return False
    if offset < 0 or size < 0:
        return False
    return offset <= length and (length - offset) >= size


def resolve_endianness(endianness: str) -> str:
    """Map an endianness selector ('big', 'le', ...) to 'big' or 'little'."""
    try:
        return ENDIANNESS[endianness.lower()]
    except (KeyError, AttributeError):
        raise InvalidArgument(
            f"Unknown endianness {endianness!r}; expected one of {sorted(ENDIANNESS)}"
        ) from None


def _width_bytes(width: int) -> int:
    if width not in SCALAR_WIDTHS:
        raise InvalidArgument(f"Unsupported scalar width {width}; expected one of {SCALAR_WIDTHS}")
    return width // 8


def _reorder(raw: bytes, endianness: str) -> bytes:
    # Storage order is fixed; flip bytes when the caller asks for the other one
    if resolve_endianness(endianness) != STORAGE_ORDER:
        return raw[::-1]
    return raw


def read_uint(storage, length: int, offset: int, width: int, endianness: str = "big") -> int:
    """
    Read an unsigned `width`-bit integer at `offset`.

    Args:
        storage: Backing bytearray.
        length: Bytes currently in use (reads never reach past it).
        offset: Byte offset of the first byte.
        width: Bit width, one of 8/16/32/64.
        endianness: Requested byte order of the value at `offset`.

    Returns:
        int: Decoded value in [0, 2**width).

    Raises:
        BoundsViolation: If the access falls outside [0, length).
        InvalidArgument: If width or endianness is unknown.
    """
    size = _width_bytes(width)
    if not bounds_check(storage, length, offset, size):
        raise BoundsViolation(offset, size, length)

    raw = bytes(storage[offset:offset + size])
    return int.from_bytes(_reorder(raw, endianness), STORAGE_ORDER, signed=False)


def write_uint(
    storage,
    length: int,
    offset: int,
    value: int,
    width: int,
    endianness: str = "big"
) -> int:
    """
    Write an unsigned `width`-bit integer in place at `offset`.

    Returns:
        int: Number of bytes written (width // 8).

    Raises:
        BoundsViolation: If the access falls outside [0, length).
        InvalidArgument: If value does not fit in `width` unsigned bits.
    """
    size = _width_bytes(width)
    if not isinstance(value, int) or not (0 <= value < (1 << width)):
        raise InvalidArgument(
            f"value {value!r} out of range for uint{width} (0..2^{width}-1)"
        )
    if not bounds_check(storage, length, offset, size):
        raise BoundsViolation(offset, size, length)

    raw = value.to_bytes(size, STORAGE_ORDER, signed=False)
    storage[offset:offset + size] = _reorder(raw, endianness)
    return size


def read_int(storage, length: int, offset: int, width: int, endianness: str = "big") -> int:
    """Read a two's-complement signed `width`-bit integer at `offset`."""
    unsigned = read_uint(storage, length, offset, width, endianness)
    if unsigned >= (1 << (width - 1)):
        return unsigned - (1 << width)
    return unsigned


def write_int(
    storage,
    length: int,
    offset: int,
    value: int,
    width: int,
    endianness: str = "big"
) -> int:
    """Write a two's-complement signed `width`-bit integer at `offset`."""
    _width_bytes(width)
    lo, hi = -(1 << (width - 1)), (1 << (width - 1)) - 1
    if not isinstance(value, int) or not (lo <= value <= hi):
        raise InvalidArgument(f"value {value!r} out of range for int{width} ({lo}..{hi})")
    return write_uint(storage, length, offset, value & ((1 << width) - 1), width, endianness)
