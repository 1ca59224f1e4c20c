"""
Core Component: Content Digests

BLAKE3 digests backing ByteBuffer.digest() and registry_fingerprint().
"""

import json
from typing import Any

import blake3


def blake3_hash(data) -> str:
    """Lowercase hex BLAKE3-256 digest of a bytes-like (bytes, bytearray, memoryview)."""
    return blake3.blake3(bytes(data)).hexdigest()


def stable_json_bytes(obj: Any) -> bytes:
    """Compact UTF-8 JSON with sorted keys; the registry fingerprint input."""
    return json.dumps(
        obj,
        sort_keys=True,
        ensure_ascii=False,
        separators=(',', ':')
    ).encode('utf-8')
