"""
Core foundation: parameter registry, hashing, error taxonomy.

Frozen constants and deterministic digests shared by every buffer operation.
"""

import logging

from .registry import (
    param_registry,
    registry_fingerprint,
    RegistryError,
    DEFAULT_CAPACITY,
    GROWTH_FACTOR,
    STORAGE_ORDER,
    SCALAR_WIDTHS,
)
from .hashing import blake3_hash, stable_json_bytes
from .errors import (
    ByteBufferError,
    AllocationFailure,
    InvalidArgument,
    BoundsViolation,
    BufferReleased,
)

logging.getLogger("bytesuite").addHandler(logging.NullHandler())

__all__ = [
    # Registry
    "param_registry",
    "registry_fingerprint",
    "RegistryError",
    "DEFAULT_CAPACITY",
    "GROWTH_FACTOR",
    "STORAGE_ORDER",
    "SCALAR_WIDTHS",

    # Hashing
    "blake3_hash",
    "stable_json_bytes",

    # Errors
    "ByteBufferError",
    "AllocationFailure",
    "InvalidArgument",
    "BoundsViolation",
    "BufferReleased",
]
