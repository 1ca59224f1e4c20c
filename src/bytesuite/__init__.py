"""
bytesuite: growable, bounds-checked byte buffers.

Buffer store, scalar codec, text encodings, comparison/search, and the
AEAD cipher-mode parameter registry.
"""

__version__ = "0.1.0"

from .core import (
    param_registry,
    registry_fingerprint,
    ByteBufferError,
    AllocationFailure,
    InvalidArgument,
    BoundsViolation,
    BufferReleased,
    DEFAULT_CAPACITY,
)
from .buffer import ByteBuffer
from .ciphers import (
    CipherModeDescriptor,
    lookup_by_family,
    chacha20,
    for_algorithm
)

__all__ = [
    # Buffer
    "ByteBuffer",
    "DEFAULT_CAPACITY",

    # Registry
    "param_registry",
    "registry_fingerprint",

    # Errors
    "ByteBufferError",
    "AllocationFailure",
    "InvalidArgument",
    "BoundsViolation",
    "BufferReleased",

    # Ciphers
    "CipherModeDescriptor",
    "lookup_by_family",
    "chacha20",
    "for_algorithm",
]
