"""
AEAD Cipher Mode Registry

Immutable descriptors for the supported AEAD modes, keyed by basename.
The table is built once at import and never mutated. No cryptographic
computation happens here; consumers read IV/tag lengths and permitted
key sizes and hand key/IV buffers to their own cipher implementation.

Modes (frozen):
  - aes-gcm            agid 0x15  IV 12  tag 16  keys {16, 24, 32}
  - aes-ccm            agid 0x1C  IV 13  tag 16  keys {16, 24, 32}
  - chacha20-poly1305  agid 0xC5  IV 12  tag 16  keys {32}
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from ..core.errors import InvalidArgument


AES_GCM = 0x15
AES_CCM = 0x1C
CHACHA20_POLY1305 = 0xC5

K128 = 0x10
K192 = 0x18
K256 = 0x20


@dataclass(frozen=True)
class CipherModeDescriptor:
    """Parameters of one AEAD mode."""

    agid: int
    basename: str
    iv_length: int
    tag_length: int
    allowed_key_sizes: frozenset
    web_tag_length: int

    def accepts_key_length(self, key_length: int) -> bool:
        return key_length in self.allowed_key_sizes

    def node_name(self, key_size: int = K256) -> str:
        """
        Cipher name with the key size folded in, e.g. 'aes-256-gcm'.

        Key sizes under 100 are taken as bytes and converted to bits.
        Modes without a key-size variant return their basename.
        """
        if key_size < 100:
            key_size *= 8

        if self.basename.startswith("aes-"):
            parts = self.basename.split("-")
            if len(parts) != 2:
                raise InvalidArgument(f"Invalid basename for AES cipher: {self.basename!r}")
            return f"aes-{key_size}-{parts[1].strip()}"

        return self.basename

    def web_crypto_name(self) -> str:
        return self.basename.upper()


_AES_KEY_SIZES = frozenset({K128, K192, K256})

_MODES = MappingProxyType({
    "aes-gcm": CipherModeDescriptor(
        agid=AES_GCM,
        basename="aes-gcm",
        iv_length=0xC,
        tag_length=0x10,
        allowed_key_sizes=_AES_KEY_SIZES,
        web_tag_length=0xC,
    ),
    "aes-ccm": CipherModeDescriptor(
        agid=AES_CCM,
        basename="aes-ccm",
        iv_length=0xD,
        tag_length=0x10,
        allowed_key_sizes=_AES_KEY_SIZES,
        web_tag_length=0xC,
    ),
    "chacha20-poly1305": CipherModeDescriptor(
        agid=CHACHA20_POLY1305,
        basename="chacha20-poly1305",
        iv_length=0xC,
        tag_length=0x10,
        allowed_key_sizes=frozenset({K256}),
        web_tag_length=0x10,
    ),
})

# Families with sub-modes map sub-mode -> basename; None marks a single mode
_FAMILIES = MappingProxyType({
    "aes": MappingProxyType({"gcm": "aes-gcm", "ccm": "aes-ccm"}),
    "chacha20": MappingProxyType({None: "chacha20-poly1305", "poly1305": "chacha20-poly1305"}),
})

_BY_AGID = MappingProxyType({d.agid: d for d in _MODES.values()})


def modes() -> MappingProxyType:
    """Read-only mapping of basename -> descriptor."""
    return _MODES


def lookup_by_family(family: str, sub_mode: Optional[str] = None) -> Optional[CipherModeDescriptor]:
    """
    Descriptor for `family` and `sub_mode`, or None when unknown.

    Matching is case-insensitive ("gcm" and "GCM" both select AES-GCM).
    Families without sub-modes (chacha20) match with sub_mode None.
    """
    if not isinstance(family, str):
        return None
    table = _FAMILIES.get(family.lower())
    if table is None:
        return None

    key = sub_mode.lower() if isinstance(sub_mode, str) else sub_mode
    basename = table.get(key)
    return _MODES[basename] if basename else None


def aes(sub_mode: str) -> Optional[CipherModeDescriptor]:
    return lookup_by_family("aes", sub_mode)


def chacha20() -> CipherModeDescriptor:
    return _MODES["chacha20-poly1305"]


def for_algorithm(alg) -> CipherModeDescriptor:
    """
    Descriptor by basename ('aes-gcm') or numeric algorithm id (0x15).

    Raises:
        InvalidArgument: If the name or id is unknown.
    """
    if isinstance(alg, str):
        descriptor = _MODES.get(alg.lower())
    elif isinstance(alg, int) and not isinstance(alg, bool):
        descriptor = _BY_AGID.get(alg)
    else:
        descriptor = None

    if descriptor is None:
        raise InvalidArgument(f'Unknown or invalid algorithm ID "{alg}"')
    return descriptor
