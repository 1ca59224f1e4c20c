"""
Cipher parameter descriptors (AEAD modes). Lookup only, no primitives.
"""

from .aead import (
    CipherModeDescriptor,
    AES_GCM,
    AES_CCM,
    CHACHA20_POLY1305,
    modes,
    lookup_by_family,
    aes,
    chacha20,
    for_algorithm
)

__all__ = [
    "CipherModeDescriptor",
    "AES_GCM",
    "AES_CCM",
    "CHACHA20_POLY1305",
    "modes",
    "lookup_by_family",
    "aes",
    "chacha20",
    "for_algorithm",
]
