"""
Core Component: Parameter Registry

Frozen constants for buffer growth, scalar layout and text encodings.
Every tunable the buffer store and codecs depend on is defined here with
its exact value.

No randomness, no environment leakage, no optionals.
"""

from .hashing import blake3_hash, stable_json_bytes


DEFAULT_CAPACITY = 0x40
GROWTH_FACTOR = 0x2
BYTES_PER_ELEMENT = 0x1

# Byte order used for scalars at rest in storage
STORAGE_ORDER = "little"

SCALAR_WIDTHS = (8, 16, 32, 64)

# Closed encoding set; aliases resolve to a canonical selector
ENCODINGS = {
    "hex": "hex",
    "base64": "base64",
    "base64url": "base64url",
    "latin1": "latin1",
    "binary": "latin1",
    "utf8": "utf8",
    "utf-8": "utf8",
    "utf16le": "utf16le",
    "utf-16le": "utf16le",
}

ENDIANNESS = {
    "big": "big",
    "be": "big",
    "little": "little",
    "le": "little",
}


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the buffer core.

    Keys and values are JSON-serializable primitives or lists/dicts.
    The registry fingerprint binds these values so two builds can be
    compared for parametric consistency.

    Returns:
        dict: Parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "default_capacity": DEFAULT_CAPACITY,
        "growth_factor": GROWTH_FACTOR,
        "bytes_per_element": BYTES_PER_ELEMENT,

        # Scalars are stored little-endian and reordered on access
        "storage_order": STORAGE_ORDER,
        "scalar_widths": list(SCALAR_WIDTHS),

        # Canonical selectors only; aliases are not part of the fingerprint
        "encodings": sorted(set(ENCODINGS.values())),
        "endianness": sorted(set(ENDIANNESS.values())),

        "hash_algo": "BLAKE3",
        "hex_case": "lower",
    }

    required_keys = {
        "default_capacity", "growth_factor", "bytes_per_element",
        "storage_order", "scalar_widths", "encodings", "endianness",
        "hash_algo", "hex_case"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


def registry_fingerprint() -> str:
    """BLAKE3 hex digest of the registry serialized as stable JSON."""
    return blake3_hash(stable_json_bytes(param_registry()))


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
