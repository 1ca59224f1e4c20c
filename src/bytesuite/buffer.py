"""
Buffer Store: growable, bounds-checked byte buffer.

A ByteBuffer owns a bytearray of `capacity` bytes of which the first
`length` are in use. Growth doubles capacity until the request fits; the
new storage is fully built before it replaces the old one, so a failed
grow leaves the buffer untouched.

Ownership:
  - Every buffer exclusively owns its storage
  - clone / subarray / from_bytes / concat always copy into fresh storage
  - release() drops storage; any later use raises BufferReleased
"""

import logging
import sys
from typing import Iterable, Optional

from .core.errors import AllocationFailure, BoundsViolation, BufferReleased, InvalidArgument
from .core.hashing import blake3_hash
from .core.registry import DEFAULT_CAPACITY, GROWTH_FACTOR
from .kernel import encoding, scalar, search

logger = logging.getLogger(__name__)

# Largest capacity reachable by doubling before snapping to the request
MAX_CAPACITY = sys.maxsize


def _allocate(size: int) -> bytearray:
    try:
        return bytearray(size)
    except (MemoryError, OverflowError) as e:
        logger.error("storage allocation of %d bytes failed: %s", size, e)
        raise AllocationFailure(
            f"ByteBuffer storage allocation failed ({size} bytes)",
            context={"size": size}
        ) from e


def _coerce_source(source) -> bytes:
    """Copy a bytes-like, ByteBuffer or iterable of ints into immutable bytes."""
    if isinstance(source, ByteBuffer):
        return bytes(source.view())
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, (str, int)):
        raise InvalidArgument(
            f"Failed to cast 'typeof {type(source).__name__}' to binary representation"
        )
    try:
        return bytes(source)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(
            f"Failed to cast 'typeof {type(source).__name__}' to binary representation: {e}"
        ) from e


def _resolve_length(data: bytes, length: Optional[int]) -> int:
    if length is None:
        return len(data)
    if length < 0 or length > len(data):
        raise InvalidArgument(
            f"length {length} out of range for source of {len(data)} bytes"
        )
    return length


def _other_view(other):
    if isinstance(other, ByteBuffer):
        return other.view()
    return _coerce_source(other)


class ByteBuffer:
    """
    Growable byte container with bounds-checked scalar access.

    Construct with ByteBuffer.alloc() or ByteBuffer.from_bytes(); the
    constructor itself allocates an empty buffer of `capacity` bytes
    (DEFAULT_CAPACITY when 0).

    Example:
        >>> buf = ByteBuffer.alloc()
        >>> buf.write(b"\\x01\\x02\\x03")
        3
        >>> buf.to_hex()
        '010203'
    """

    def __init__(self, capacity: int = 0):
        if not isinstance(capacity, int) or capacity < 0:
            raise InvalidArgument(f"capacity must be a non-negative integer, got {capacity!r}")
        self._capacity = capacity if capacity > 0 else DEFAULT_CAPACITY
        self._storage = _allocate(self._capacity)
        self._length = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def alloc(cls, capacity: int = 0) -> "ByteBuffer":
        """New empty buffer; capacity 0 selects DEFAULT_CAPACITY (64)."""
        return cls(capacity)

    @classmethod
    def from_bytes(cls, source=None, length: Optional[int] = None) -> "ByteBuffer":
        """
        Independent copy of the first `length` bytes of `source`.

        A missing source or a zero length yields an empty default-capacity
        buffer. Otherwise capacity equals the copied length.

        Raises:
            InvalidArgument: If source cannot be read as bytes or `length`
                exceeds it.
        """
        if source is None or length == 0:
            return cls.alloc()

        data = _coerce_source(source)
        length = _resolve_length(data, length)
        if length == 0:
            return cls.alloc()

        buf = cls(length)
        buf._storage[:length] = data[:length]
        buf._length = length
        return buf

    @classmethod
    def from_string(cls, text: str, encoding_name: str = "utf8") -> "ByteBuffer":
        """Buffer holding `text` decoded through the named encoding."""
        return cls.from_bytes(encoding.from_string(text, encoding_name))

    @classmethod
    def concat(cls, buffers: Iterable, total_length: Optional[int] = None) -> "ByteBuffer":
        """
        New buffer with the contents of `buffers` in order.

        With `total_length`, the result is truncated or zero-padded to
        exactly that many bytes.
        """
        parts = [_other_view(b) for b in buffers]
        joined = b"".join(bytes(p) for p in parts)

        if total_length is not None:
            if total_length < 0:
                raise InvalidArgument(f"total_length must be non-negative, got {total_length}")
            joined = joined[:total_length].ljust(total_length, b"\x00")

        return cls.from_bytes(joined)

    def clone(self) -> "ByteBuffer":
        """Deep copy with identical length and content and no extra headroom."""
        self._check_live()
        return ByteBuffer.from_bytes(self._storage[:self._length])

    def subarray(self, start: int = 0, end: Optional[int] = None) -> "ByteBuffer":
        """
        Independent copy of bytes [start, end).

        `end` of None, 0 or past the used length means "to the end".
        A start at or past the end yields a fresh empty buffer.
        """
        self._check_live()
        if start < 0 or (end is not None and end < 0):
            raise InvalidArgument(f"subarray bounds must be non-negative (start={start}, end={end})")

        if end is None or end == 0 or end > self._length:
            end = self._length

        if start >= self._length or start >= end:
            return ByteBuffer.alloc()

        return ByteBuffer.from_bytes(self._storage[start:end])

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def released(self) -> bool:
        return self._storage is None

    def view(self) -> memoryview:
        """Read-only view of the used bytes; invalid after the next grow."""
        self._check_live()
        return memoryview(self._storage)[:self._length].toreadonly()

    def _check_live(self) -> None:
        if self._storage is None:
            raise BufferReleased("ByteBuffer used after release()")

    # ------------------------------------------------------------------
    # Growth and mutation
    # ------------------------------------------------------------------

    def ensure_capacity(self, min_size: int) -> None:
        """
        Grow storage so that capacity >= min_size.

        Capacity doubles until it fits; if doubling would pass MAX_CAPACITY
        the target snaps to exactly `min_size`. Existing bytes are kept.

        Raises:
            AllocationFailure: If storage cannot be obtained. The buffer is
                left exactly as it was.
        """
        self._check_live()
        if min_size < 0:
            raise InvalidArgument(f"min_size must be non-negative, got {min_size}")
        if self._capacity >= min_size:
            return

        new_capacity = self._capacity or DEFAULT_CAPACITY
        while new_capacity < min_size:
            grown = new_capacity * GROWTH_FACTOR
            if grown > MAX_CAPACITY:
                new_capacity = min_size
                break
            new_capacity = grown

        storage = _allocate(new_capacity)
        storage[:self._length] = self._storage[:self._length]

        logger.debug("grow %d -> %d bytes (requested %d)", self._capacity, new_capacity, min_size)
        self._storage = storage
        self._capacity = new_capacity

    def write(self, source, length: Optional[int] = None) -> int:
        """
        Append bytes at the current end, growing as needed.

        Args:
            source: bytes-like, ByteBuffer or iterable of ints (None is a no-op).
            length: Number of leading bytes of source to append (default all).

        Returns:
            int: Bytes written (0 for a missing source or zero length).
        """
        self._check_live()
        if source is None or length == 0:
            return 0

        data = _coerce_source(source)
        length = _resolve_length(data, length)
        if length == 0:
            return 0

        end = self._length + length
        self.ensure_capacity(end)
        self._storage[self._length:end] = data[:length]
        self._length = end
        return length

    def set(self, source, offset: int = 0) -> int:
        """
        Overwrite used bytes in place starting at `offset`.

        Unlike write(), set() never grows or extends the buffer: the whole
        of `source` must land inside [0, length).

        Returns:
            int: Bytes copied.

        Raises:
            BoundsViolation: If offset + len(source) exceeds the used length.
        """
        self._check_live()
        data = _coerce_source(source)
        size = len(data)
        if not scalar.bounds_check(self._storage, self._length, offset, size):
            raise BoundsViolation(offset, size, self._length)

        self._storage[offset:offset + size] = data
        return size

    def reverse(self) -> "ByteBuffer":
        """Reverse the used bytes in place."""
        self._check_live()
        n = self._length
        self._storage[:n] = self._storage[:n][::-1]
        return self

    def to_reversed(self) -> "ByteBuffer":
        return self.clone().reverse()

    def mask(self, key=None, inplace: bool = True) -> "ByteBuffer":
        """
        XOR the used bytes with `key`.

        `key` is a single byte value or a bytes-like repeated over the
        content. None or an empty key leaves content unchanged.
        """
        self._check_live()
        target = self if inplace else self.clone()

        if key is None:
            return target
        if isinstance(key, int):
            if not 0 <= key <= 0xFF:
                raise InvalidArgument(f"mask byte {key} out of range (0..255)")
            key_bytes = bytes([key])
        else:
            key_bytes = bytes(_other_view(key))
        if not key_bytes:
            return target

        k = len(key_bytes)
        storage = target._storage
        for i in range(target._length):
            storage[i] ^= key_bytes[i % k]
        return target

    def release(self) -> None:
        """Drop storage. Idempotent; the buffer is unusable afterwards."""
        if self._storage is None:
            return
        logger.debug("release %d bytes", self._capacity)
        self._storage = None
        self._length = 0
        self._capacity = 0

    def __enter__(self) -> "ByteBuffer":
        self._check_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    # ------------------------------------------------------------------
    # Scalar access
    # ------------------------------------------------------------------

    def read_uint(self, offset: int, width: int, endianness: str = "big") -> int:
        self._check_live()
        return scalar.read_uint(self._storage, self._length, offset, width, endianness)

    def write_uint(self, offset: int, value: int, width: int, endianness: str = "big") -> int:
        self._check_live()
        return scalar.write_uint(self._storage, self._length, offset, value, width, endianness)

    def read_uint8(self, offset: int) -> int:
        return self.read_uint(offset, 8)

    def write_uint8(self, offset: int, value: int) -> int:
        return self.write_uint(offset, value, 8)

    def read_uint16(self, offset: int, endianness: str = "big") -> int:
        return self.read_uint(offset, 16, endianness)

    def write_uint16(self, offset: int, value: int, endianness: str = "big") -> int:
        return self.write_uint(offset, value, 16, endianness)

    def read_uint32(self, offset: int, endianness: str = "big") -> int:
        return self.read_uint(offset, 32, endianness)

    def write_uint32(self, offset: int, value: int, endianness: str = "big") -> int:
        return self.write_uint(offset, value, 32, endianness)

    def read_uint64(self, offset: int, endianness: str = "big") -> int:
        return self.read_uint(offset, 64, endianness)

    def write_uint64(self, offset: int, value: int, endianness: str = "big") -> int:
        return self.write_uint(offset, value, 64, endianness)

    def read_int64(self, offset: int, endianness: str = "big") -> int:
        self._check_live()
        return scalar.read_int(self._storage, self._length, offset, 64, endianness)

    def write_int64(self, offset: int, value: int, endianness: str = "big") -> int:
        self._check_live()
        return scalar.write_int(self._storage, self._length, offset, value, 64, endianness)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def to_hex(self) -> str:
        return encoding.to_hex(self.view())

    def to_string(self, encoding_name: Optional[str] = "utf8") -> str:
        return encoding.to_string(self.view(), encoding_name)

    def digest(self) -> str:
        """BLAKE3 hex digest of the used bytes."""
        return blake3_hash(self.view())

    # ------------------------------------------------------------------
    # Comparison and search
    # ------------------------------------------------------------------

    def equals(self, other) -> bool:
        if other is self:
            return True
        return search.equals(self.view(), _other_view(other))

    def compare(self, other) -> int:
        return search.compare(self.view(), _other_view(other))

    def index_of(self, pattern, offset: int = 0) -> int:
        if pattern is None:
            return -1
        return search.index_of(self.view(), _other_view(pattern), offset)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self.view())

    def __iter__(self):
        return iter(self.view())

    def __getitem__(self, index: int) -> int:
        self._check_live()
        if isinstance(index, slice):
            return ByteBuffer.from_bytes(bytes(self.view())[index])
        if index < 0:
            index += self._length
        if not scalar.bounds_check(self._storage, self._length, index, 1):
            raise BoundsViolation(index, 1, self._length)
        return self._storage[index]

    def __contains__(self, pattern) -> bool:
        return self.index_of(pattern) >= 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, (ByteBuffer, bytes, bytearray, memoryview)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __lt__(self, other) -> bool:
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        return self.compare(other) >= 0

    def __repr__(self) -> str:
        if self._storage is None:
            return "ByteBuffer(<released>)"
        return f"ByteBuffer(length={self._length}, capacity={self._capacity}, hex='{self.to_hex()}')"
