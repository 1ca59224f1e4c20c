"""
Core Component: Error Taxonomy

Every failure raised by the buffer core derives from ByteBufferError.
Codes are negative and share one numeric range so callers can route on
`code` without matching on class.
"""

from typing import Any, Dict, Optional


E_FAILURE = 0x106
E_INVALID_ARGUMENT = 0x108
E_OUT_OF_BOUNDS = 0x109
E_RESOURCE_DISPOSED = 0x10B


class ByteBufferError(Exception):
    """Base class for buffer core failures."""

    default_code = E_FAILURE

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = -abs(self.default_code if code is None else code)
        self.context = dict(context or {})

    def is_code(self, code: int) -> bool:
        return self.code == -abs(code)


class AllocationFailure(ByteBufferError):
    """Raised when storage cannot be obtained on construction or growth."""

    default_code = E_FAILURE


class InvalidArgument(ByteBufferError, ValueError):
    """Raised for a missing required argument, bad range or unknown selector."""

    default_code = E_INVALID_ARGUMENT


class BoundsViolation(ByteBufferError, IndexError):
    """Raised when an offset/size pair falls outside the used length."""

    default_code = E_OUT_OF_BOUNDS

    def __init__(self, offset: int, size: int, length: int):
        diff = length - (offset + size)
        sign = "-" if diff < 0 else ""
        super().__init__(
            f"Attempt to access memory outside buffer bounds ({sign}0x{abs(diff):X})",
            context={"offset": offset, "size": size, "length": length}
        )
        self.offset = offset
        self.size = size
        self.length = length


class BufferReleased(ByteBufferError):
    """Raised on any use of a buffer after release()."""

    default_code = E_RESOURCE_DISPOSED
